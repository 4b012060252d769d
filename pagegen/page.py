"""Assembly of the link-directory homepage from a page configuration."""

from __future__ import annotations

from typing import List, Optional, TextIO

from .element import Element
from .links import LinkCard, LinkContainer, LinkStack
from .models import AssetRef, PageConfig, StackSpec
from .stylesheets import page_stylesheets
from .tags import body, div, head, html, i, link_stylesheet, meta, script, style, title

SECTIONS = ("header", "body", "footer")


def _asset_line(attribute: str, ref: AssetRef) -> str:
    line = f"{attribute}={ref.url}"
    return f"{line} {ref.extra}" if ref.extra else line


def link_container_from_config(stacks: List[StackSpec]) -> LinkContainer:
    return LinkContainer(
        *(
            LinkStack(
                stack.icon,
                stack.text,
                stack.sort,
                *(LinkCard(card.icon, card.text, card.url) for card in stack.cards),
            )
            for stack in stacks
        )
    )


def _header_content(config: PageConfig) -> Element:
    icon = None
    if config.header.icon:
        icon = i(f"class={config.header.icon} style=padding-right:.5em; font-size:110%")
    return div(
        "style=color:white; font-size:150%; font-weight:bold; text-align:center; padding:1em",
        icon,
        config.header.text,
    )


def _footer_content(config: PageConfig) -> Element:
    return div("style=color:white; text-align:center; padding:1em", config.footer.text)


def _section(name: str, content: object) -> Element:
    return div(
        f"class=ld-{name}-container",
        div(f"class=ld-{name}-left", None),
        div(f"class=ld-{name}-main", content),
        div(f"class=ld-{name}-right", None),
    )


def build_homepage(config: PageConfig) -> Element:
    """Return the root ``<html>`` element for the configured homepage."""

    head_content = [
        meta("charset=utf-8"),
        meta("name=viewport content=width=device-width,initial-scale=1"),
        title(None, config.title),
        [link_stylesheet(_asset_line("href", ref)) for ref in config.stylesheets],
        [script(_asset_line("src", ref)) for ref in config.scripts],
        [style(None, css) for css in page_stylesheets(config.sizing)],
    ]
    section_content = {
        "header": _header_content(config),
        "body": link_container_from_config(config.stacks),
        "footer": _footer_content(config),
    }
    return html(
        None,
        head(None, head_content),
        body(
            None,
            div(
                "class=ld-primary-container",
                [_section(name, section_content[name]) for name in SECTIONS],
            ),
        ),
    )


def render_homepage(
    config: PageConfig, out: Optional[TextIO] = None, *, continue_on_error: bool = True
) -> None:
    build_homepage(config).render(out, continue_on_error=continue_on_error)


def homepage_html(config: PageConfig, *, continue_on_error: bool = True) -> str:
    return build_homepage(config).to_html(continue_on_error=continue_on_error)


__all__ = ["build_homepage", "homepage_html", "link_container_from_config", "render_homepage"]
