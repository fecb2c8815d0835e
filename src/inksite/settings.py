"""Build configuration: project paths and environment overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

ENV_ROOT = "INKSITE_ROOT"
ENV_OUT_DIR = "INKSITE_OUT_DIR"
ENV_LOG_LEVEL = "INKSITE_LOG_LEVEL"

DEFAULT_OUT_DIRNAME = "dist"
DEFAULT_LOG_LEVEL = "INFO"


def _env_dir(name: str) -> Path | None:
    value = os.environ.get(name)
    if value is None:
        return None
    value = value.strip()
    if not value:
        logger.warning("Empty %s value; using default", name)
        return None
    return Path(value).expanduser()


def env_log_level() -> int:
    value = os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(value)
    if not isinstance(level, int):
        logger.warning("Invalid %s value %r; using default %s", ENV_LOG_LEVEL, value, DEFAULT_LOG_LEVEL)
        return logging.INFO
    return level


@dataclass(frozen=True)
class BuildSettings:
    root: Path
    out_dir: Path

    @classmethod
    def for_root(cls, root: Path, out_dir: Path | None = None) -> BuildSettings:
        root = Path(root).resolve()
        out = Path(out_dir) if out_dir is not None else root / DEFAULT_OUT_DIRNAME
        if not out.is_absolute():
            out = root / out
        return cls(root=root, out_dir=out)

    @classmethod
    def from_env(cls, root: Path | None = None, out_dir: Path | None = None) -> BuildSettings:
        """Settings from explicit arguments, then the environment, then defaults."""
        root = root or _env_dir(ENV_ROOT) or Path.cwd()
        out_dir = out_dir or _env_dir(ENV_OUT_DIR)
        return cls.for_root(root, out_dir)

    @property
    def content_dir(self) -> Path:
        return self.root / "content"

    @property
    def templates_dir(self) -> Path:
        return self.root / "templates"

    @property
    def assets_dir(self) -> Path:
        return self.root / "assets"

    @property
    def cname_path(self) -> Path:
        return self.root / "CNAME"
