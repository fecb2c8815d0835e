"""Typed content documents and template injection points."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict


class OriginBody(BaseModel):
    model_config = ConfigDict(extra="allow")

    en: str
    es: str


class OriginDocument(BaseModel):
    """Contents of ``content/origin.json``; ``body`` holds trusted HTML."""

    model_config = ConfigDict(extra="allow")

    body: OriginBody


class SiteConfig(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    contact_email: str = ""


@dataclass(frozen=True)
class Placeholder:
    name: str
    token: str


POSTS = Placeholder("posts", "/*__POSTS_JSON__*/")
UNLINKED = Placeholder("unlinked", "/*__UNLINKED_JSON__*/")
ABOUT = Placeholder("about", "/*__ABOUT_JSON__*/")
CONTACT_EMAIL = Placeholder("contact_email", "/*__CONTACT_EMAIL__*/")
ORIGIN = Placeholder("origin", "<!-- __ORIGIN_HTML__ -->")

BLOG_PLACEHOLDERS: tuple[Placeholder, ...] = (POSTS, UNLINKED, ABOUT, CONTACT_EMAIL)


@dataclass(frozen=True)
class PageSpec:
    """One output page: where it comes from and what gets injected into it."""

    template: str
    output: str
    required: bool = False
    placeholders: tuple[Placeholder, ...] = ()
    label: str = ""

    @property
    def description(self) -> str:
        return f"{self.output} ({self.label})" if self.label else self.output


ENTRY_PAGE = PageSpec("entry.html", "index.html", required=True, label="entry")
ORIGIN_PAGES: tuple[PageSpec, ...] = (
    PageSpec("ripple.html", "ripple.html", placeholders=(ORIGIN,), label="origin injected"),
    PageSpec("clean.html", "clean.html", placeholders=(ORIGIN,), label="origin injected"),
)
BLOG_PAGE = PageSpec("blog.html", "blog.html", placeholders=BLOG_PLACEHOLDERS, label="SPA")
