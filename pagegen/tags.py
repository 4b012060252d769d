"""Helper constructors, one per HTML tag variant.

Each helper takes an attribute line and any number of content items::

    div("class=card id=main", h1(None, "Title"), p("style=color:red", "Body"))

The attribute line follows :func:`pagegen.attr_line.parse_attribute_line`:
quotes around values are optional and unquoted values may contain spaces as
long as the next word does not contain ``=``.

Some variants augment the element after construction (``a_link`` opens in a
new tab, ``html`` adds ``lang`` and the doctype, the ``div_table*`` variants
set a ``display`` style). These augmentations are fixed per variant.

Tags without a helper are built with :func:`tag`, which applies no
augmentation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from .attr_line import parse_attribute_line
from .element import Directives, Element

Augmentation = Callable[[Element], None]
Helper = Callable[..., Element]


@dataclass(frozen=True)
class TagVariant:
    name: str
    tag: str
    augment: Optional[Augmentation] = None


def _new_tab_anchor(element: Element) -> None:
    element.append_attribute_value("target", "_blank")
    element.append_attribute_value("rel", "noopener")
    element.append_attribute_value("rel", "noreferrer")


def _document_root(element: Element) -> None:
    element.append_attribute_value("lang", "en")
    element.set_pre_output_text("<!DOCTYPE html>")


def _stylesheet_link(element: Element) -> None:
    element.append_attribute_value("rel", "stylesheet")


def _display(value: str) -> Augmentation:
    def augment(element: Element) -> None:
        element.append_style("display", value)

    return augment


def _variants(*variants: TagVariant) -> Dict[str, TagVariant]:
    return {variant.name: variant for variant in variants}


PLAIN_TAGS = (
    "a", "base", "blockquote", "body", "button", "code", "datalist", "del",
    "details", "div", "form", "h1", "h2", "h3", "h4", "h5", "h6", "head", "i",
    "iframe", "img", "input", "ins", "label", "li", "link", "meta", "ol",
    "option", "optgroup", "p", "pre", "script", "select", "span", "style",
    "summary", "textarea", "time", "title", "ul",
)

TAG_VARIANTS: Dict[str, TagVariant] = {
    **_variants(*(TagVariant(tag, tag) for tag in PLAIN_TAGS)),
    **_variants(
        TagVariant("a_link", "a", _new_tab_anchor),
        TagVariant("html", "html", _document_root),
        TagVariant("link_stylesheet", "link", _stylesheet_link),
        TagVariant("div_table", "div", _display("table")),
        TagVariant("div_table_caption", "div", _display("table-caption")),
        TagVariant("div_table_cell", "div", _display("table-cell")),
        TagVariant("div_table_row", "div", _display("table-row")),
    ),
}


def tag(tag_name: str, attributes: Optional[str] = None, *content: object) -> Element:
    """Build an element for any tag name, with no augmentation."""

    directives = Directives(content=list(content)) if content else None
    return Element(tag_name, parse_attribute_line(attributes), directives=directives)


def create(variant: str, attributes: Optional[str] = None, *content: object) -> Element:
    """Build the element for a registered tag variant.

    Content is attached only when at least one content item is given, so
    ``div("class=x")`` and ``div("class=x", None)`` differ only internally.
    """

    try:
        tag_variant = TAG_VARIANTS[variant]
    except KeyError:
        raise KeyError(f"Unknown tag variant '{variant}'") from None

    element = tag(tag_variant.tag, attributes, *content)
    if tag_variant.augment is not None:
        tag_variant.augment(element)
    return element


def helper(variant: str) -> Helper:
    """Return a ``(attributes=None, *content)`` constructor for ``variant``."""

    if variant not in TAG_VARIANTS:
        raise KeyError(f"Unknown tag variant '{variant}'")

    def build(attributes: Optional[str] = None, *content: object) -> Element:
        return create(variant, attributes, *content)

    build.__name__ = variant
    build.__qualname__ = variant
    build.__doc__ = f"Create a <{TAG_VARIANTS[variant].tag}> element ({variant})."
    return build


HELPERS: Dict[str, Helper] = {name: helper(name) for name in TAG_VARIANTS}

a = HELPERS["a"]
a_link = HELPERS["a_link"]
base = HELPERS["base"]
blockquote = HELPERS["blockquote"]
body = HELPERS["body"]
button = HELPERS["button"]
code = HELPERS["code"]
datalist = HELPERS["datalist"]
del_ = HELPERS["del"]
details = HELPERS["details"]
div = HELPERS["div"]
div_table = HELPERS["div_table"]
div_table_caption = HELPERS["div_table_caption"]
div_table_cell = HELPERS["div_table_cell"]
div_table_row = HELPERS["div_table_row"]
form = HELPERS["form"]
h1 = HELPERS["h1"]
h2 = HELPERS["h2"]
h3 = HELPERS["h3"]
h4 = HELPERS["h4"]
h5 = HELPERS["h5"]
h6 = HELPERS["h6"]
head = HELPERS["head"]
html = HELPERS["html"]
i = HELPERS["i"]
iframe = HELPERS["iframe"]
img = HELPERS["img"]
input_ = HELPERS["input"]
ins = HELPERS["ins"]
label = HELPERS["label"]
li = HELPERS["li"]
link = HELPERS["link"]
link_stylesheet = HELPERS["link_stylesheet"]
meta = HELPERS["meta"]
ol = HELPERS["ol"]
option = HELPERS["option"]
optgroup = HELPERS["optgroup"]
p = HELPERS["p"]
pre = HELPERS["pre"]
script = HELPERS["script"]
select = HELPERS["select"]
span = HELPERS["span"]
style = HELPERS["style"]
summary = HELPERS["summary"]
textarea = HELPERS["textarea"]
time = HELPERS["time"]
title = HELPERS["title"]
ul = HELPERS["ul"]


__all__ = ["HELPERS", "TAG_VARIANTS", "TagVariant", "create", "helper", "tag"] + [
    name if name not in ("del", "input") else f"{name}_" for name in TAG_VARIANTS
]
