"""Link-directory display types: cards, stacks of cards and the stack container."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, TextIO, Tuple

from .element import Directives, Element
from .tags import div, i

_NON_ALNUM = re.compile(r"[^a-z0-9]")

SortKey = Callable[["LinkCard"], str]


def _require_text(value: object, name: str) -> str:
    if not isinstance(value, str) or not value:
        raise ValueError(f"{name} must be a non-empty string, got {value!r}")
    return value


def comparison_text(value: str) -> str:
    """Lowercase ``value`` and drop everything but ASCII letters and digits."""

    return _NON_ALNUM.sub("", value.lower())


@dataclass(frozen=True)
class SortOrder:
    key: SortKey
    reverse: bool = False

    def apply(self, cards: List["LinkCard"]) -> List["LinkCard"]:
        return sorted(cards, key=self.key, reverse=self.reverse)


def _by_display_text(card: "LinkCard") -> str:
    return comparison_text(card.display_text)


def _by_url(card: "LinkCard") -> str:
    return comparison_text(card.url)


SORT_ORDERS: Dict[str, SortOrder] = {
    "ascending_by_display_text": SortOrder(_by_display_text),
    "ascending_by_url": SortOrder(_by_url),
    "descending_by_display_text": SortOrder(_by_display_text, reverse=True),
    "descending_by_url": SortOrder(_by_url, reverse=True),
}


@dataclass
class LinkCard:
    """A clickable card that opens ``url`` in a new tab."""

    icon: str
    display_text: str
    url: str

    def __post_init__(self) -> None:
        _require_text(self.icon, "icon")
        _require_text(self.display_text, "display_text")
        _require_text(self.url, "url")

    def to_element(self) -> Element:
        # The onclick value holds spaces and quotes, so it bypasses the attribute line.
        return Element(
            "div",
            {
                "class": "ld-link-card-outer",
                "onclick": f"window.open('{self.url}', '_blank')",
            },
            directives=Directives(
                content=[
                    div("class=ld-link-card-icon", i(f"class={self.icon} style=padding-right:.5em")),
                    div("class=ld-link-card-text", self.display_text),
                ]
            ),
        )

    def render(self, out: Optional[TextIO] = None, *, continue_on_error: bool = True) -> None:
        self.to_element().render(out, continue_on_error=continue_on_error)


class LinkStack:
    """A titled column of link cards shown in a fixed sort order."""

    def __init__(self, icon: str, display_text: str, sort_order: str, *cards: LinkCard) -> None:
        self.icon = _require_text(icon, "icon")
        self.display_text = _require_text(display_text, "display_text")
        if sort_order not in SORT_ORDERS:
            raise ValueError(
                f"Unknown sort order '{sort_order}'; expected one of {', '.join(SORT_ORDERS)}"
            )
        self.sort_order = sort_order
        self.cards: Tuple[LinkCard, ...] = tuple(cards)

    def sorted_cards(self) -> List[LinkCard]:
        return SORT_ORDERS[self.sort_order].apply(list(self.cards))

    def to_element(self) -> Element:
        header = div(
            "class=ld-link-stack-header",
            i(f"class={self.icon} style=padding-right:.5em"),
            self.display_text,
        )
        return div(
            "class=ld-link-stack-outer",
            div("class=ld-link-stack", [header, *self.sorted_cards()]),
        )

    def render(self, out: Optional[TextIO] = None, *, continue_on_error: bool = True) -> None:
        self.to_element().render(out, continue_on_error=continue_on_error)


class LinkContainer:
    """Wrapping row of link stacks."""

    def __init__(self, *stacks: LinkStack) -> None:
        self.stacks: Tuple[LinkStack, ...] = tuple(stacks)

    def to_element(self) -> Element:
        return div(
            "class=ld-link-container-outer",
            div("class=ld-link-container", list(self.stacks)),
        )

    def render(self, out: Optional[TextIO] = None, *, continue_on_error: bool = True) -> None:
        self.to_element().render(out, continue_on_error=continue_on_error)


__all__ = [
    "LinkCard",
    "LinkContainer",
    "LinkStack",
    "SORT_ORDERS",
    "SortOrder",
    "comparison_text",
]
