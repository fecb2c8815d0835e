"""Command-line entry point: ``inksite`` / ``python -m inksite``."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from inksite.build import build
from inksite.errors import InksiteError
from inksite.settings import BuildSettings, env_log_level

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="inksite",
        description="Build the static site from content/ and templates/ into dist/.",
    )
    parser.add_argument("--root", type=Path, help="project root (default: $INKSITE_ROOT or cwd)")
    parser.add_argument("--out", type=Path, help="output directory (default: <root>/dist)")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="show debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="only show warnings and errors")
    return parser.parse_args(argv)


def _log_level(args: argparse.Namespace) -> int:
    if args.verbose:
        return logging.DEBUG
    if args.quiet:
        return logging.WARNING
    return env_log_level()


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=_log_level(args), stream=sys.stderr, format="%(message)s")

    settings = BuildSettings.from_env(root=args.root, out_dir=args.out)
    try:
        report = build(settings)
    except InksiteError as exc:
        logger.error("✗ Build failed: %s", exc)
        return 1

    if report.warnings:
        logger.info("%d warning(s)", len(report.warnings))
    return 0
