from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if SRC_PATH.exists():
    sys.path.insert(0, str(SRC_PATH))

BLOG_TEMPLATE = """<script>
const POSTS = /*__POSTS_JSON__*/;
const UNLINKED = /*__UNLINKED_JSON__*/;
const ABOUT = /*__ABOUT_JSON__*/;
const EMAIL = "/*__CONTACT_EMAIL__*/";
</script>
"""

ORIGIN_TEMPLATE = """<main>
<!-- __ORIGIN_HTML__ -->
</main>
"""


def write_json(path: Path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """A complete project tree with every optional input present."""
    root = tmp_path / "site"
    templates = root / "templates"
    templates.mkdir(parents=True)
    (templates / "entry.html").write_text("<h1>entry</h1>\n", encoding="utf-8")
    (templates / "ripple.html").write_text(ORIGIN_TEMPLATE, encoding="utf-8")
    (templates / "clean.html").write_text(ORIGIN_TEMPLATE, encoding="utf-8")
    (templates / "blog.html").write_text(BLOG_TEMPLATE, encoding="utf-8")

    content = root / "content"
    write_json(content / "posts" / "first.json", {"title": "first", "date": "2024-01-01"})
    write_json(content / "posts" / "second.json", {"title": "second", "date": "2024-06-01"})
    write_json(content / "unlinked-comments.json", [{"text": "hola"}])
    write_json(content / "about.json", {"en": "About", "es": "Acerca"})
    write_json(content / "site.json", {"contact_email": "a@b.com"})
    write_json(content / "origin.json", {"body": {"en": "<p>silence</p>", "es": "<p>silencio</p>"}})

    (root / "assets" / "css").mkdir(parents=True)
    (root / "assets" / "css" / "site.css").write_text("body{}", encoding="utf-8")
    (root / "assets" / "logo.svg").write_text("<svg/>", encoding="utf-8")
    (root / "CNAME").write_text("example.org\n", encoding="utf-8")
    return root
