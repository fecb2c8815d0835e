"""Render the bilingual origin text shared by the ripple and clean pages."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment

from inksite.content import load_origin
from inksite.inject import substitute
from inksite.models import ORIGIN, OriginDocument

# Bodies are author-supplied HTML fragments and go in unescaped.
_env = Environment(autoescape=False)

ORIGIN_TEMPLATE = _env.from_string(
    """            <div class="column english">
                <div class="lang-label">English</div>
                {{ body.en }}
            </div>

            <div class="column spanish">
                <div class="lang-label">Español</div>
                {{ body.es }}
            </div>"""
)


def render_origin(origin: OriginDocument) -> str:
    return ORIGIN_TEMPLATE.render(body=origin.body)


def build_origin_html(content_dir: Path, warnings: list[str] | None = None) -> str | None:
    """Return the two-column origin fragment, or ``None`` without an origin document."""
    origin = load_origin(content_dir, warnings)
    if origin is None:
        return None
    return render_origin(origin)


def inject_origin(html: str, origin_html: str | None) -> str:
    if origin_html is None:
        return html
    return substitute(html, {ORIGIN: origin_html})
