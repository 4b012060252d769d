"""Conversion between inline style strings and ordered property maps."""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from .errors import MalformedStyleSegment


def decode_style(text: Optional[str]) -> Dict[str, str]:
    """Split ``'prop-1:value-1;prop-2:value-2'`` into an ordered dict.

    Property and value text is kept as written. Every ``;``-separated segment
    must hold exactly one ``:``.
    """

    styles: Dict[str, str] = {}
    if not text:
        return styles

    for segment in text.split(";"):
        parts = segment.split(":")
        if len(parts) != 2:
            raise MalformedStyleSegment(segment)
        styles[parts[0]] = parts[1]
    return styles


def encode_style(styles: Mapping[str, str]) -> str:
    """Join a property map back into ``'prop-1:value-1;prop-2:value-2'``."""

    return ";".join(f"{prop}:{value}" for prop, value in styles.items())


__all__ = ["decode_style", "encode_style"]
