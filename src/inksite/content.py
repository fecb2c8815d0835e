"""Loaders for the JSON documents under ``content/``."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from jsonschema import ValidationError, validate
from pydantic import ValidationError as ModelValidationError

from inksite.fsutil import read_json
from inksite.models import OriginDocument, SiteConfig

logger = logging.getLogger(__name__)

POSTS_DIRNAME = "posts"
UNLINKED_FILE = "unlinked-comments.json"
ABOUT_FILE = "about.json"
SITE_FILE = "site.json"
ORIGIN_FILE = "origin.json"

UNLINKED_SCHEMA = {"type": "array"}
ABOUT_SCHEMA = {"type": "object"}

_INVALID = object()


def _post_date(post: Any) -> str:
    if not isinstance(post, dict):
        return ""
    date = post.get("date")
    return str(date) if date else ""


def read_posts(content_dir: Path, warnings: list[str] | None = None) -> list[Any]:
    """Load every ``posts/*.json`` file, newest first.

    A file that fails to parse is reported and left out. Posts without a
    ``date`` sort after all dated ones; equal dates keep file-name order.
    """
    posts_dir = content_dir / POSTS_DIRNAME
    if not posts_dir.is_dir():
        return []
    posts: list[Any] = []
    for path in sorted(posts_dir.glob("*.json")):
        if not path.is_file():
            continue
        try:
            posts.append(json.loads(path.read_text(encoding="utf-8")))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            message = f"{path.name}: {exc}"
            logger.warning("  ⚠  %s", message)
            if warnings is not None:
                warnings.append(message)
    posts.sort(key=_post_date, reverse=True)
    return posts


def _read_optional(path: Path, fallback: Any, warnings: list[str] | None) -> Any:
    if not path.exists():
        return fallback
    data = read_json(path, _INVALID)
    if data is _INVALID:
        _warn_malformed(path, "not valid JSON", warnings)
        return fallback
    return data


def _warn_malformed(path: Path, reason: str, warnings: list[str] | None) -> None:
    message = f"{path.name}: {reason}; using default"
    logger.warning("  ⚠  %s", message)
    if warnings is not None:
        warnings.append(message)


def _read_checked(path: Path, schema: dict, fallback: Any, warnings: list[str] | None) -> Any:
    data = _read_optional(path, _INVALID, warnings)
    if data is _INVALID:
        return fallback
    try:
        validate(instance=data, schema=schema)
    except ValidationError as exc:
        _warn_malformed(path, exc.message, warnings)
        return fallback
    return data


def load_unlinked(content_dir: Path, warnings: list[str] | None = None) -> list[Any]:
    return _read_checked(content_dir / UNLINKED_FILE, UNLINKED_SCHEMA, [], warnings)


def load_about(content_dir: Path, warnings: list[str] | None = None) -> dict[str, Any]:
    return _read_checked(content_dir / ABOUT_FILE, ABOUT_SCHEMA, {"en": "", "es": ""}, warnings)


def load_site(content_dir: Path, warnings: list[str] | None = None) -> SiteConfig:
    path = content_dir / SITE_FILE
    data = _read_optional(path, None, warnings)
    if data is None:
        return SiteConfig()
    try:
        return SiteConfig.model_validate(data)
    except ModelValidationError as exc:
        _warn_malformed(path, f"{exc.error_count()} validation error(s)", warnings)
        return SiteConfig()


def load_origin(content_dir: Path, warnings: list[str] | None = None) -> OriginDocument | None:
    path = content_dir / ORIGIN_FILE
    data = _read_optional(path, None, warnings)
    if data is None:
        return None
    try:
        return OriginDocument.model_validate(data)
    except ModelValidationError as exc:
        _warn_malformed(path, f"{exc.error_count()} validation error(s)", warnings)
        return None
