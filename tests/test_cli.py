from pathlib import Path

import pytest
import yaml
from bs4 import BeautifulSoup

from pagegen.cli import main
from scripts.verify_page import verify_page

REPO_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG = REPO_ROOT / "config" / "homepage.yaml"


def _write_config(tmp_path: Path, cards: list[dict]) -> Path:
    data = {
        "title": "Test",
        "header": {"text": "Test"},
        "footer": {"text": "Footer"},
        "stacks": [{"icon": "fab fa-linux", "text": "Linux", "cards": cards}],
    }
    path = tmp_path / "homepage.yaml"
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


def test_build_writes_verified_page(tmp_path: Path, capsys) -> None:
    out = tmp_path / "site" / "index.html"
    main(["build", "--config", str(DEFAULT_CONFIG), "--out", str(out)])

    assert out.exists()
    assert verify_page(out) == []
    assert "3 link stack(s) and 24 link card(s)" in capsys.readouterr().out


def test_build_to_stdout(capsys) -> None:
    main(["build", "--config", str(DEFAULT_CONFIG), "--out", "-"])

    assert capsys.readouterr().out.startswith("<!DOCTYPE html>")


def test_build_skips_bad_card_unless_strict(tmp_path: Path, capsys) -> None:
    config = _write_config(
        tmp_path,
        [
            {"icon": "fas fa-file", "text": "Docs", "url": "/docs"},
            {"icon": "fas fa-bomb", "text": "Broken", "url": "/it's\"bad"},
        ],
    )
    out = tmp_path / "index.html"

    main(["build", "--config", str(config), "--out", str(out)])
    soup = BeautifulSoup(out.read_text(encoding="utf-8"), "html.parser")
    assert [node.get_text() for node in soup.select("div.ld-link-card-text")] == ["Docs"]
    assert "[render] skipped" in capsys.readouterr().err

    with pytest.raises(SystemExit) as excinfo:
        main(["build", "--config", str(config), "--out", str(out), "--strict"])
    assert excinfo.value.code == 1
    assert "rendering failed" in capsys.readouterr().err


def test_validate_default_config(capsys) -> None:
    main(["validate", "--config", str(DEFAULT_CONFIG)])

    assert "Validated 3 link stack(s)" in capsys.readouterr().out


def test_validate_reports_duplicates_and_empty_stacks(tmp_path: Path, capsys) -> None:
    duplicate = {"icon": "fas fa-file", "text": "Docs", "url": "/docs"}
    config = _write_config(tmp_path, [duplicate, dict(duplicate, text="Docs again")])

    with pytest.raises(SystemExit) as excinfo:
        main(["validate", "--config", str(config)])
    assert excinfo.value.code == 1
    assert "/docs more than once" in capsys.readouterr().err

    empty = _write_config(tmp_path, [])
    with pytest.raises(SystemExit):
        main(["validate", "--config", str(empty)])
    assert "has no cards" in capsys.readouterr().err


def test_tags_lists_variants(capsys) -> None:
    main(["tags"])

    lines = capsys.readouterr().out.splitlines()
    assert "a_link: <a> (augmented)" in lines
    assert "div: <div>" in lines


def test_no_command_prints_help(capsys) -> None:
    main([])

    assert "usage: pagegen" in capsys.readouterr().out
