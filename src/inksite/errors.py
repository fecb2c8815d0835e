"""Exception types raised by the site build."""

from __future__ import annotations

from pathlib import Path


class InksiteError(Exception):
    """Base class for errors that abort a build."""


class MissingTemplateError(InksiteError):
    def __init__(self, template: Path) -> None:
        self.template = template
        super().__init__(f"{template} not found")
