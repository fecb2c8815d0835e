"""Build the site: templates and content in, a complete output tree out.

Every build starts from scratch. Pages are written to a staging directory next
to the output directory, and the staged tree replaces the output directory only
once every step has run.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
import time
from dataclasses import dataclass, field
from pathlib import Path

from inksite.errors import MissingTemplateError
from inksite.fsutil import clean_dir, copy_dir, ensure_dir, read_text, write_text
from inksite.content import ORIGIN_FILE, read_posts
from inksite.inject import collect_data, substitute
from inksite.models import BLOG_PAGE, ENTRY_PAGE, ORIGIN_PAGES, PageSpec
from inksite.origin import build_origin_html, inject_origin
from inksite.settings import BuildSettings

logger = logging.getLogger(__name__)

SITE_NAME = "white_silence_black_ink"


@dataclass
class BuildReport:
    out_dir: Path
    pages: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    posts: int = 0
    origin_found: bool = False
    assets_copied: bool = False
    cname_copied: bool = False
    elapsed: float = 0.0

    def warn(self, message: str) -> None:
        logger.warning("  ⚠  %s", message)
        self.warnings.append(message)


@dataclass
class BuildContext:
    """State threaded through the build steps."""

    settings: BuildSettings
    staging: Path
    report: BuildReport

    def template(self, page: PageSpec) -> Path:
        return self.settings.templates_dir / page.template

    def output(self, name: str) -> Path:
        return self.staging / name


def _stage_dir(out_dir: Path) -> Path:
    ensure_dir(out_dir.parent)
    staging = Path(tempfile.mkdtemp(prefix=f".{out_dir.name}-", dir=out_dir.parent))
    staging.chmod(0o755)
    return staging


def _commit(staging: Path, out_dir: Path) -> None:
    """Swap the staged tree into place of ``out_dir``."""
    if out_dir.exists():
        retired = out_dir.with_name(f"{staging.name}-old")
        out_dir.rename(retired)
        staging.rename(out_dir)
        shutil.rmtree(retired)
    else:
        staging.rename(out_dir)


def _build_entry(ctx: BuildContext) -> None:
    src = ctx.template(ENTRY_PAGE)
    if not src.exists():
        logger.error("  ✗ templates/%s not found — aborting", ENTRY_PAGE.template)
        raise MissingTemplateError(src)
    shutil.copyfile(src, ctx.output(ENTRY_PAGE.output))
    ctx.report.pages.append(ENTRY_PAGE.output)
    logger.info("  ✓ %s", ENTRY_PAGE.description)


def _build_page(ctx: BuildContext, page: PageSpec, render) -> None:
    src = ctx.template(page)
    if not src.exists():
        ctx.report.warn(f"templates/{page.template} not found")
        return
    try:
        write_text(ctx.output(page.output), render(read_text(src)))
    except OSError as exc:
        ctx.report.warn(f"templates/{page.template}: {exc}")
        return
    ctx.report.pages.append(page.output)
    logger.info("  ✓ %s", page.description)


def _render_blog(ctx: BuildContext, html: str) -> str:
    content_dir = ctx.settings.content_dir
    posts = read_posts(content_dir, ctx.report.warnings)
    ctx.report.posts = len(posts)
    return substitute(html, collect_data(content_dir, ctx.report.warnings, posts=posts))


def _copy_assets(ctx: BuildContext) -> None:
    assets = ctx.settings.assets_dir
    if not assets.is_dir():
        logger.debug("  no assets/ directory")
        return
    try:
        copy_dir(assets, ctx.output("assets"))
    except OSError as exc:
        ctx.report.warn(f"assets/: {exc}")
        return
    ctx.report.assets_copied = True
    logger.info("  ✓ assets/")


def _copy_cname(ctx: BuildContext) -> None:
    cname = ctx.settings.cname_path
    if not cname.is_file():
        logger.debug("  no CNAME file")
        return
    try:
        shutil.copyfile(cname, ctx.output("CNAME"))
    except OSError as exc:
        ctx.report.warn(f"CNAME: {exc}")
        return
    ctx.report.cname_copied = True
    logger.info("  ✓ CNAME")


def build(settings: BuildSettings) -> BuildReport:
    """Run a full build and return what it produced.

    Raises ``MissingTemplateError`` when the entry template is missing; the
    output directory is then left empty.
    """
    start = time.perf_counter()
    logger.info("%s — build started", SITE_NAME)

    report = BuildReport(out_dir=settings.out_dir)
    ctx = BuildContext(settings=settings, staging=_stage_dir(settings.out_dir), report=report)
    content_dir = settings.content_dir

    try:
        origin_html = build_origin_html(content_dir, report.warnings)
        report.origin_found = origin_html is not None
        if report.origin_found:
            logger.info("  ✓ origin.json loaded")
        elif (content_dir / ORIGIN_FILE).exists():
            logger.warning("  ⚠  origin.json unusable — origin pages will have empty content")
        else:
            logger.warning("  ⚠  origin.json not found — origin pages will have empty content")

        _build_entry(ctx)

        for page in ORIGIN_PAGES:
            _build_page(ctx, page, lambda html: inject_origin(html, origin_html))

        _build_page(ctx, BLOG_PAGE, lambda html: _render_blog(ctx, html))

        _copy_assets(ctx)
        _copy_cname(ctx)
    except Exception as exc:
        shutil.rmtree(ctx.staging, ignore_errors=True)
        if isinstance(exc, MissingTemplateError):
            clean_dir(settings.out_dir)
        raise

    _commit(ctx.staging, settings.out_dir)

    report.elapsed = time.perf_counter() - start
    logger.info("\n━━━ Build complete in %.2fs ━━━\n", report.elapsed)
    return report
