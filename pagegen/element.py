"""Composable HTML element node and its serializer.

An :class:`Element` wraps a tag name, ordinary HTML attributes and a
:class:`Directives` record (extra classes, extra inline styles and nested
content) that the element merges into its markup when rendered.

Directives can be given either as a structured record::

    Element("div", {"class": "a"}, directives=Directives(classes=["b"]))

or through the reserved attribute keys ``_classes``, ``_styles`` and
``_content``::

    Element("div", {"class": "a", "_classes": ["b"], "_content": "hi"})

Attribute keys and values are expected to be lowercase and trimmed already;
the element does not normalize them.
"""

from __future__ import annotations

import io
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, TextIO, Union, runtime_checkable

from .errors import ConflictingQuoteCharacters, InvalidReservedAttribute
from .io_utils import warn
from .styles import decode_style, encode_style

RESERVED_KEYS = ("_classes", "_content", "_styles")


@runtime_checkable
class Renderable(Protocol):
    """Anything that can write its own markup into a stream."""

    def render(self, out: Optional[TextIO] = None, *, continue_on_error: bool = True) -> None:
        ...


Content = Union[str, Renderable, Sequence[Any], None]


@dataclass
class Directives:
    """Markup contributions consumed by the element instead of emitted as attributes."""

    classes: List[str] = field(default_factory=list)
    styles: Dict[str, str] = field(default_factory=dict)
    content: Content = None

    def add_class(self, class_name: str) -> None:
        if class_name not in self.classes:
            self.classes.append(class_name)

    def set_style(self, prop: str, value: str) -> None:
        self.styles[prop] = value

    def update(self, other: "Directives") -> None:
        for class_name in other.classes:
            self.add_class(class_name)
        for prop, value in other.styles.items():
            self.set_style(prop, value)
        if other.content is not None:
            self.content = other.content


def _contains_word(words: str, word: str) -> bool:
    return f" {word} " in f" {words} "


def _quote_attribute(key: str, value: str) -> str:
    if "'" not in value:
        return f"{key}='{value}'"
    if '"' not in value:
        return f'{key}="{value}"'
    raise ConflictingQuoteCharacters(value)


class Element:
    """HTML tag with attributes, directives and optional pre-output text.

    An element without a tag renders nothing. Rendering never mutates the
    element or its children, so one child may be shared by several parents.
    """

    def __init__(
        self,
        tag: Optional[str],
        attributes: Optional[Mapping[str, Any]] = None,
        *,
        directives: Optional[Directives] = None,
    ) -> None:
        self._tag = tag or None
        self.attributes: Dict[str, str] = {}
        self.directives = Directives()
        self.pre_output_text: Optional[str] = None
        self._styles_supplied = False

        if attributes:
            self._separate_reserved_attributes(attributes)
        if directives is not None:
            self.directives.update(directives)

    @property
    def tag(self) -> Optional[str]:
        return self._tag

    def __repr__(self) -> str:
        return f"Element({self._tag!r}, {self.attributes!r})"

    def _separate_reserved_attributes(self, attributes: Mapping[str, Any]) -> None:
        for key, value in attributes.items():
            if not key.startswith("_"):
                self.attributes[key] = value
                continue
            if key not in RESERVED_KEYS:
                raise InvalidReservedAttribute(key)

            if key == "_classes":
                classes = [value] if isinstance(value, str) else list(value)
                for class_name in classes:
                    self.directives.add_class(class_name)
            elif key == "_styles":
                self._styles_supplied = True
                styles = decode_style(value) if isinstance(value, str) else dict(value)
                for prop, style_value in styles.items():
                    self.directives.set_style(prop, style_value)
            else:
                self.directives.content = value

    # Mutators used by tag augmentations.

    def prepend_class(self, class_name: str) -> None:
        """Put ``class_name`` in front of the ordinary ``class`` attribute."""

        existing = self.attributes.get("class")
        if existing is None:
            self.attributes["class"] = class_name
        elif not _contains_word(existing, class_name):
            self.attributes["class"] = f"{class_name} {existing}"

    def append_class(self, class_name: str) -> None:
        """Add ``class_name`` after every other class."""

        self.directives.add_class(class_name)

    def prepend_style(self, prop: str, value: str) -> None:
        """Set ``prop`` within the ordinary ``style`` attribute."""

        existing = self.attributes.get("style")
        if existing is None:
            self.attributes["style"] = f"{prop}:{value}"
            return
        styles = decode_style(existing)
        styles[prop] = value
        self.attributes["style"] = encode_style(styles)

    def append_style(self, prop: str, value: str) -> None:
        """Set ``prop`` so it overrides the ordinary ``style`` attribute."""

        self._styles_supplied = True
        self.directives.set_style(prop, value)

    def prepend_attribute_value(self, attribute: str, value: str) -> None:
        existing = self.attributes.get(attribute)
        if existing is None:
            self.attributes[attribute] = value
        elif not _contains_word(existing, value):
            self.attributes[attribute] = f"{value} {existing}"

    def append_attribute_value(self, attribute: str, value: str) -> None:
        existing = self.attributes.get(attribute)
        if existing is None:
            self.attributes[attribute] = value
        elif not _contains_word(existing, value):
            self.attributes[attribute] = f"{existing} {value}"

    def set_pre_output_text(self, text: Optional[str]) -> None:
        self.pre_output_text = text

    # Serialization.

    def _merged_class(self, class_value: str) -> str:
        for class_name in self.directives.classes:
            if _contains_word(class_value, class_name):
                continue
            class_value = f"{class_value} {class_name}" if class_value else class_name
        return class_value

    def _merged_style(self, style_value: str) -> str:
        if not (self._styles_supplied or self.directives.styles):
            return style_value
        styles = decode_style(style_value)
        styles.update(self.directives.styles)
        return encode_style(styles)

    def merged_attributes(self) -> Dict[str, str]:
        """Return ordinary attributes with directive classes and styles folded in."""

        attributes = {key: str(value) for key, value in self.attributes.items()}
        class_value = self._merged_class(attributes.get("class", ""))
        style_value = self._merged_style(attributes.get("style", ""))
        if class_value:
            attributes["class"] = class_value
        if style_value:
            attributes["style"] = style_value
        return attributes

    def attribute_string(self) -> str:
        return " ".join(
            _quote_attribute(key, value) for key, value in self.merged_attributes().items()
        )

    def render(self, out: Optional[TextIO] = None, *, continue_on_error: bool = True) -> None:
        """Write the element's markup to ``out`` (stdout by default).

        With ``continue_on_error`` a child that fails to render is left out
        and its siblings still render; otherwise the failure propagates.
        """

        if not self._tag:
            return
        stream = out if out is not None else sys.stdout

        attributes = self.attribute_string()
        opening = f"<{self._tag} {attributes}>" if attributes else f"<{self._tag}>"
        closing = f"</{self._tag}>"

        if self.pre_output_text:
            stream.write(self.pre_output_text)
        stream.write(opening)
        if self.directives.content is not None:
            self._render_content(self.directives.content, stream, continue_on_error)
        stream.write(closing)

    def _render_content(self, content: Any, stream: TextIO, continue_on_error: bool) -> None:
        if content is None:
            return
        if isinstance(content, str):
            stream.write(content)
        elif isinstance(content, (list, tuple)):
            for item in content:
                self._render_content(item, stream, continue_on_error)
        elif isinstance(content, Renderable):
            # Buffer each child so a failure leaves no partial fragment.
            buffer = io.StringIO()
            try:
                content.render(buffer, continue_on_error=continue_on_error)
            except Exception as exc:
                if not continue_on_error:
                    raise
                warn(f"[render] skipped child of <{self._tag}>: {exc}")
                return
            stream.write(buffer.getvalue())
        else:
            warn(f"[render] ignored unsupported content in <{self._tag}>: {type(content).__name__}")

    def to_html(self, *, continue_on_error: bool = True) -> str:
        """Render into a string instead of a stream."""

        buffer = io.StringIO()
        self.render(buffer, continue_on_error=continue_on_error)
        return buffer.getvalue()


__all__ = ["Content", "Directives", "Element", "RESERVED_KEYS", "Renderable"]
