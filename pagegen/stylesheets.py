"""Stylesheet text for the homepage layout and the link display types."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .models import Sizing

TEMPLATES_DIR = Path(__file__).parent / "templates"


@dataclass(frozen=True)
class SectionTheme:
    """Colors and flex growth for one horizontal page section."""

    section: str
    grow: str
    side_background: str
    main_background: str


SECTION_THEMES = (
    SectionTheme("header", "0 1", "#b7adcf", "#4f646f"),
    SectionTheme("body", "1", "#f4faff", "#dee7e7"),
    SectionTheme("footer", "0 1", "#b7adcf", "#535657"),
)


def stylesheet_env() -> Environment:
    """Create a Jinja environment over the bundled CSS templates."""

    return Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


def _render(env: Environment, name: str, **context: object) -> str:
    return env.get_template(name).render(**context)


def page_stylesheets(sizing: Sizing) -> List[str]:
    """Return the layout stylesheets followed by the link display stylesheets."""

    env = stylesheet_env()
    sheets = [_render(env, "primary.css.jinja")]
    for theme in SECTION_THEMES:
        sheets.append(
            _render(
                env,
                "section.css.jinja",
                section=theme.section,
                grow=theme.grow,
                side_background=theme.side_background,
                main_background=theme.main_background,
                sizing=sizing,
            )
        )
    for name in ("link_card", "link_stack", "link_container"):
        sheets.append(_render(env, f"{name}.css.jinja", sizing=sizing))
    return sheets


__all__ = ["SECTION_THEMES", "SectionTheme", "page_stylesheets", "stylesheet_env"]
