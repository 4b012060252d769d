"""Utility helpers for config IO, output files and diagnostics."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Union

import yaml

PathLike = Union[str, Path]


def read_yaml(path: PathLike) -> Any:
    """Load a YAML document, treating an empty file as ``None``."""

    with Path(path).open("r", encoding="utf-8") as fh:
        return yaml.safe_load(fh)


def write_text(path: PathLike, content: str, *, encoding: str = "utf-8") -> Path:
    """Write text content to a file, creating parent directories as needed."""

    file_path = Path(path)
    if file_path.parent != Path(""):
        file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding=encoding)
    return file_path


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)


__all__ = ["PathLike", "read_yaml", "warn", "write_text"]
