from pathlib import Path

import pytest
import yaml

from pagegen.models import PageConfig, Sizing, load_page_config

REPO_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG = REPO_ROOT / "config" / "homepage.yaml"


def _minimal_config(**overrides) -> dict:
    data = {
        "title": "Home",
        "header": {"text": "Home"},
        "footer": {"text": "Footer"},
        "stacks": [
            {
                "icon": "fab fa-linux",
                "text": "Linux",
                "cards": [{"icon": "fas fa-file", "text": "Docs", "url": "/docs"}],
            }
        ],
    }
    data.update(overrides)
    return data


def _write_config(tmp_path: Path, data) -> Path:
    path = tmp_path / "homepage.yaml"
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


def test_default_config_loads() -> None:
    config = load_page_config(DEFAULT_CONFIG)

    assert [stack.text for stack in config.stacks] == ["Windows", "Mac OS", "Ubuntu"]
    assert all(len(stack.cards) == 8 for stack in config.stacks)
    assert config.sizing == Sizing()
    assert config.scripts[0].extra == "crossorigin=anonymous"


def test_minimal_config_uses_defaults(tmp_path: Path) -> None:
    config = load_page_config(_write_config(tmp_path, _minimal_config()))

    assert isinstance(config, PageConfig)
    assert config.stacks[0].sort == "ascending_by_display_text"
    assert config.sizing.max_content_width == "1280px"
    assert config.stylesheets == [] and config.scripts == []


@pytest.mark.parametrize(
    "overrides",
    [
        {"title": ""},
        {"stacks": []},
        {"stacks": [{"icon": "fab fa-linux", "text": "Linux", "sort": "by_color"}]},
        {"stacks": [{"icon": "fab fa-linux", "text": "Linux", "cards": [{"icon": "x", "text": "", "url": "/"}]}]},
        {"scripts": [{"url": "/x.js", "async": True}]},
    ],
)
def test_invalid_config_exits(tmp_path: Path, overrides: dict) -> None:
    path = _write_config(tmp_path, _minimal_config(**overrides))

    with pytest.raises(SystemExit) as excinfo:
        load_page_config(path)
    assert "Invalid page config" in str(excinfo.value.code)


def test_missing_title_exits(tmp_path: Path) -> None:
    data = _minimal_config()
    del data["title"]

    with pytest.raises(SystemExit, match="title"):
        load_page_config(_write_config(tmp_path, data))


def test_non_mapping_config_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit, match="mapping"):
        load_page_config(_write_config(tmp_path, ["not", "a", "mapping"]))


def test_missing_file_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit, match="not found"):
        load_page_config(tmp_path / "missing.yaml")


def test_broken_yaml_exits(tmp_path: Path) -> None:
    path = tmp_path / "homepage.yaml"
    path.write_text("title: [unterminated\n", encoding="utf-8")

    with pytest.raises(SystemExit, match="Invalid YAML"):
        load_page_config(path)
