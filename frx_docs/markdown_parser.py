r"""Parse versioned Markdown documents into structured sections.

This module powers the frx docs builder by separating front matter from the
Markdown body, splitting the body into ordered second-level sections, and
collecting each section's third- and fourth-level headings for the in-page
table of contents. Headings are normalised into slugs with :func:`slugify`,
the same rule the HTML renderer uses for heading ``id`` attributes.

Example
-------
>>> from frx_docs.markdown_parser import parse_sections
>>> sections = parse_sections("## Intro\nBody text\n\n### Details\nMore")
>>> sections[0].slug
'intro'
>>> [(entry.slug, entry.level) for entry in sections[0].toc]
[('details', 3)]
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from frx_docs._constants import FALLBACK_SLUG

TITLE_PATTERN = re.compile(r"^#\s+(.+)$")
SECTION_PATTERN = re.compile(r"^##\s+(.+)$")
SUBHEADING_PATTERN = re.compile(r"^(#{3,4})\s+(.+)$")
FENCE_PATTERN = re.compile(r"^\s{0,3}(`{3,}|~{3,})")
FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?:(.*?)\r?\n)?---[ \t]*(?:\r?\n|\Z)", re.DOTALL
)
CLOSING_HASHES_PATTERN = re.compile(r"\s+#+\s*$")
INLINE_LINK_PATTERN = re.compile(r"!?\[([^\]]*)\]\([^)]*\)")
SLUG_SEPARATOR_PATTERN = re.compile(r"[^a-z0-9]+")


class FrontMatterError(ValueError):
    """Raised when a document's front matter block is not a YAML mapping."""


@dc.dataclass(slots=True)
class Subheading:
    """Third- or fourth-level heading found inside a section.

    Attributes
    ----------
    title : str
        Heading text as written (with escapes and closing hashes removed).
    slug : str
        Anchor identifier matching the rendered heading's ``id``.
    level : int
        Heading depth, either ``3`` or ``4``.
    """

    title: str
    slug: str
    level: int


@dc.dataclass(slots=True)
class RawSection:
    """Second-level heading and the Markdown lines that belong to it.

    Attributes
    ----------
    title : str
        Cleaned heading text.
    slug : str
        URL-safe identifier derived from the heading.
    lines : list[str]
        Source lines of the section, starting with the heading line itself.
    """

    title: str
    slug: str
    lines: list[str] = dc.field(default_factory=list)

    @property
    def markdown(self) -> str:
        """Return the section's Markdown, heading included."""
        return "\n".join(self.lines)

    @property
    def toc(self) -> list[Subheading]:
        """Return the level-3/4 headings inside this section."""
        return extract_toc(self.lines)


def slugify(text: str) -> str:
    """Convert heading text into a lower-case, hyphen-separated identifier.

    Runs of characters outside ``[a-z0-9]`` collapse to a single hyphen and
    leading/trailing hyphens are removed. Text without any ASCII letters or
    digits maps to ``"section"`` so every heading stays addressable.

    >>> slugify("HTTP Middleware (httpx)")
    'http-middleware-httpx'
    >>> slugify(slugify("Quick  Start!"))
    'quick-start'
    """
    slug = SLUG_SEPARATOR_PATTERN.sub("-", text.lower()).strip("-")
    return slug or FALLBACK_SLUG


def _clean_heading(text: str) -> str:
    """Return a cleaned heading, removing closing hashes, escapes, and whitespace."""
    return CLOSING_HASHES_PATTERN.sub("", text).replace("\\", "").strip()


def heading_slug(title: str) -> str:
    """Slugify a heading as it reads once rendered, dropping link targets."""
    return slugify(INLINE_LINK_PATTERN.sub(r"\1", title))


def split_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Separate a leading ``---`` YAML block from the Markdown body.

    Parameters
    ----------
    text : str
        Full file contents.

    Returns
    -------
    tuple[dict[str, Any], str]
        Parsed front matter (empty when absent) and the remaining body.

    Raises
    ------
    FrontMatterError
        If the block is not valid YAML or does not describe a mapping.
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        return {}, text

    loader = YAML(typ="safe")
    try:
        loaded = loader.load(match.group(1) or "") or {}
    except YAMLError as exc:
        msg = f"Invalid front matter: {exc}"
        raise FrontMatterError(msg) from exc
    if not isinstance(loaded, dict):
        msg = "Front matter must be a mapping of keys to values."
        raise FrontMatterError(msg)
    return dict(loaded), text[match.end() :]


class _FenceTracker:
    """Track whether a line sits inside a fenced code block."""

    def __init__(self) -> None:
        self._marker: str | None = None

    def consume(self, line: str) -> bool:
        """Update fence state for ``line`` and return True if it is code."""
        match = FENCE_PATTERN.match(line)
        if self._marker is None:
            if match:
                self._marker = match.group(1)
                return True
            return False
        if match and match.group(1).startswith(self._marker) and (
            not line.strip().lstrip(self._marker[0])
        ):
            self._marker = None
        return True


def extract_toc(lines: typ.Iterable[str]) -> list[Subheading]:
    """Collect ``###`` and ``####`` headings from ``lines`` in document order."""
    fences = _FenceTracker()
    entries: list[Subheading] = []
    for line in lines:
        if fences.consume(line):
            continue
        match = SUBHEADING_PATTERN.match(line)
        if not match:
            continue
        title = _clean_heading(match.group(2))
        entries.append(
            Subheading(title=title, slug=heading_slug(title), level=len(match.group(1)))
        )
    return entries


def parse_sections(markdown_text: str) -> list[RawSection]:
    """Split a Markdown body into ordered sections at each ``##`` heading.

    Parameters
    ----------
    markdown_text : str
        Markdown body with front matter already removed.

    Returns
    -------
    list[RawSection]
        One entry per second-level heading, each holding its heading line and
        every following line up to the next ``##`` heading. Top-level ``#``
        headings are dropped and text before the first section is discarded.
        Returns an empty list when no second-level headings are present.
    """
    fences = _FenceTracker()
    sections: list[RawSection] = []
    current: RawSection | None = None
    for line in markdown_text.splitlines():
        if not fences.consume(line):
            if TITLE_PATTERN.match(line):
                continue
            match = SECTION_PATTERN.match(line)
            if match:
                title = _clean_heading(match.group(1))
                current = RawSection(title=title, slug=heading_slug(title), lines=[line])
                sections.append(current)
                continue
        if current is not None:
            current.lines.append(line)
    return sections


__all__ = [
    "FrontMatterError",
    "RawSection",
    "Subheading",
    "extract_toc",
    "heading_slug",
    "parse_sections",
    "slugify",
    "split_front_matter",
]
