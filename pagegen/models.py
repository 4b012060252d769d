"""Pydantic models for the link-directory page configuration."""

from pathlib import Path
from typing import List, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .io_utils import PathLike, read_yaml

SortName = Literal[
    "ascending_by_display_text",
    "ascending_by_url",
    "descending_by_display_text",
    "descending_by_url",
]


class Sizing(BaseModel):
    """CSS lengths shared by the page and link stylesheets."""

    max_content_width: str = Field("1280px", description="Width of the main column.")
    link_card_width: str = Field("300px", description="Width of each link card.")
    link_card_height: str = Field("48px", description="Height of each link card.")
    link_stack_border: str = Field(
        "16px", description="Padding around the cards inside a link stack."
    )


class CardSpec(BaseModel):
    """A single link card."""

    icon: str = Field(..., min_length=1, description="Icon classes (e.g., 'fab fa-php').")
    text: str = Field(..., min_length=1, description="Text shown on the card.")
    url: str = Field(..., min_length=1, description="Target opened in a new tab.")


class StackSpec(BaseModel):
    """A titled column of link cards."""

    icon: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)
    sort: SortName = Field(
        "ascending_by_display_text", description="Order in which cards are shown."
    )
    cards: List[CardSpec] = Field(default_factory=list)


class HeaderSpec(BaseModel):
    icon: Optional[str] = Field(None, description="Icon classes shown before the text.")
    text: str = Field(..., min_length=1)


class FooterSpec(BaseModel):
    text: str = Field(..., min_length=1, description="Footer markup, written verbatim.")


class AssetRef(BaseModel):
    """External stylesheet or script reference."""

    url: str = Field(..., min_length=1)
    extra: Optional[str] = Field(
        None,
        description="Additional attribute line (e.g., 'crossorigin=anonymous').",
    )

    model_config = ConfigDict(extra="forbid")


class PageConfig(BaseModel):
    """Top-level configuration for the link-directory homepage."""

    title: str = Field(..., min_length=1, description="Document title.")
    header: HeaderSpec
    footer: FooterSpec
    stylesheets: List[AssetRef] = Field(default_factory=list)
    scripts: List[AssetRef] = Field(default_factory=list)
    sizing: Sizing = Field(default_factory=Sizing)
    stacks: List[StackSpec] = Field(..., min_length=1)


def load_page_config(path: PathLike) -> PageConfig:
    """Load and validate a page configuration YAML file."""

    config_path = Path(path)
    if not config_path.exists():
        raise SystemExit(f"Page config not found: {config_path}")
    try:
        data = read_yaml(config_path) or {}
    except yaml.YAMLError as exc:
        raise SystemExit(f"Invalid YAML in {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SystemExit(f"{config_path} must contain a mapping at the top level.")
    try:
        return PageConfig.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid page config in {config_path}: {exc}") from exc


__all__ = [
    "AssetRef",
    "CardSpec",
    "FooterSpec",
    "HeaderSpec",
    "PageConfig",
    "Sizing",
    "SortName",
    "StackSpec",
    "load_page_config",
]
