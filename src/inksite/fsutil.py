"""Filesystem helpers shared by the loaders and the build."""

from __future__ import annotations

import json
import shutil
from pathlib import Path
from typing import Any


def clean_dir(path: Path) -> None:
    """Remove ``path`` if it exists and recreate it empty."""
    if path.exists():
        shutil.rmtree(path)
    path.mkdir(parents=True, exist_ok=True)


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def copy_dir(src: Path, dest: Path) -> None:
    """Recursively copy ``src`` into ``dest``, overwriting same-named files.

    Does nothing when ``src`` is missing.
    """
    if not src.exists():
        return
    shutil.copytree(src, dest, dirs_exist_ok=True)


def read_json(path: Path, fallback: Any) -> Any:
    """Return the parsed JSON in ``path`` or ``fallback`` if absent or invalid."""
    if not path.exists():
        return fallback
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError):
        return fallback


def read_text(path: Path) -> str:
    """Read UTF-8 text; undecodable bytes become U+FFFD."""
    return path.read_text(encoding="utf-8", errors="replace")


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
