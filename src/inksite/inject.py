"""Placeholder substitution for page templates."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from inksite.content import load_about, load_site, load_unlinked, read_posts
from inksite.models import ABOUT, CONTACT_EMAIL, POSTS, UNLINKED, Placeholder

logger = logging.getLogger(__name__)


def to_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def substitute(html: str, values: Mapping[Placeholder, str]) -> str:
    """Replace the first occurrence of each placeholder in a single pass.

    Positions are taken from the original template, so a token that appears
    inside inserted content is left alone.
    """
    found: list[tuple[int, Placeholder]] = []
    for placeholder in values:
        index = html.find(placeholder.token)
        if index == -1:
            logger.warning("  ⚠  placeholder %s not found in template", placeholder.token)
            continue
        found.append((index, placeholder))
    found.sort(key=lambda item: item[0])

    parts: list[str] = []
    cursor = 0
    for index, placeholder in found:
        if index < cursor:
            continue
        parts.append(html[cursor:index])
        parts.append(values[placeholder])
        cursor = index + len(placeholder.token)
    parts.append(html[cursor:])
    return "".join(parts)


def collect_data(
    content_dir: Path,
    warnings: list[str] | None = None,
    posts: list[Any] | None = None,
) -> dict[Placeholder, str]:
    """Load the blog content and serialize it for the blog placeholders.

    ``posts`` skips reading the posts directory when the caller already has them.
    """
    if posts is None:
        posts = read_posts(content_dir, warnings)
    unlinked = load_unlinked(content_dir, warnings)
    about = load_about(content_dir, warnings)
    site = load_site(content_dir, warnings)

    logger.info("  Found %d post(s)", len(posts))

    return {
        POSTS: to_json(posts),
        UNLINKED: to_json(unlinked),
        ABOUT: to_json(about),
        CONTACT_EMAIL: site.contact_email,
    }


def inject_data(html: str, content_dir: Path, warnings: list[str] | None = None) -> str:
    return substitute(html, collect_data(content_dir, warnings))
