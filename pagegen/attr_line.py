"""Parser for the informal ``key=value key2="v v"`` attribute-line grammar."""

from __future__ import annotations

from typing import Dict, List, Tuple

from .errors import InvalidAttributeInput, MalformedAttributeToken

QUOTE_CHARS = ("'", '"')


def split_attribute_line(line: str) -> List[str]:
    """Split a line into ``key=value`` tokens.

    Tokens without an ``=`` belong to the value of the previous token, so
    ``"class=a b c id=x"`` yields ``["class=a b c", "id=x"]``.
    """

    components = line.strip().split(" ")
    tokens: List[str] = components[:1]
    for component in components[1:]:
        if "=" in component:
            tokens.append(component)
        else:
            tokens[-1] = f"{tokens[-1]} {component}"
    return tokens


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in QUOTE_CHARS:
        return value[1:-1]
    return value


def extract_key_value_pairs(tokens: List[str]) -> Tuple[List[str], List[str]]:
    """Return parallel key and value lists for the non-empty tokens."""

    keys: List[str] = []
    values: List[str] = []
    for token in tokens:
        if not token:
            continue
        key, sep, value = token.partition("=")
        if not sep:
            raise MalformedAttributeToken(token)
        keys.append(key.strip())
        values.append(_unquote(value).strip())
    return keys, values


def parse_attribute_line(line: object) -> Dict[str, str]:
    """Parse an attribute line into an ordered dict (later keys win)."""

    if not line:
        return {}
    if not isinstance(line, str):
        raise InvalidAttributeInput(line)

    keys, values = extract_key_value_pairs(split_attribute_line(line))
    return dict(zip(keys, values))


__all__ = ["extract_key_value_pairs", "parse_attribute_line", "split_attribute_line"]
