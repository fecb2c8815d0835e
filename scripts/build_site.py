#!/usr/bin/env python3
"""Build the site from a source checkout without installing the package.

Usage: python scripts/build_site.py [--root DIR] [--out DIR]
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if SRC_PATH.exists():
    sys.path.insert(0, str(SRC_PATH))

from inksite.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
