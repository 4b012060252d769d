"""Exceptions raised while building and rendering elements."""

from __future__ import annotations


class HtmlElementError(ValueError):
    """Base class for element construction and rendering errors."""


class InvalidReservedAttribute(HtmlElementError):
    """An underscore-prefixed attribute key outside the reserved allow-list."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Invalid special/reserved attribute '{key}' passed.")
        self.key = key


class ConflictingQuoteCharacters(HtmlElementError):
    """An attribute value holds both quote characters and cannot be quoted."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Attribute value cannot contain both single and double quotes: '{value}'."
        )
        self.value = value


class MalformedStyleSegment(HtmlElementError):
    """A style segment is not a single ``property:value`` pair."""

    def __init__(self, segment: str) -> None:
        super().__init__(f"Invalid property:value pair: '{segment}'.")
        self.segment = segment


class MalformedAttributeToken(HtmlElementError):
    """An attribute-line token has no ``=`` separator."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid key/value pair '{token}' passed.")
        self.token = token


class InvalidAttributeInput(HtmlElementError, TypeError):
    """Attribute-line input that is neither empty nor a string."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Non-string attributes {value!r} passed.")
        self.value = value


__all__ = [
    "ConflictingQuoteCharacters",
    "HtmlElementError",
    "InvalidAttributeInput",
    "InvalidReservedAttribute",
    "MalformedAttributeToken",
    "MalformedStyleSegment",
]
