"""Dataclasses serialized into the ``docs.json`` artifact.

Field names match the JSON keys consumed by the web application, so
``msgspec`` can encode and decode these types directly.
"""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(frozen=True, slots=True)
class TocItem:
    """In-page navigation entry for a ``###`` or ``####`` heading.

    Attributes
    ----------
    id : str
        Anchor matching the rendered heading's ``id`` attribute.
    title : str
        Literal heading text.
    level : int
        Heading depth, ``3`` or ``4``.
    """

    id: str
    title: str
    level: int


@dc.dataclass(frozen=True, slots=True)
class DocSection:
    """A rendered section of a versioned document.

    Attributes
    ----------
    id : str
        Slug of the section heading, or ``"main"`` for a document without
        second-level headings.
    title : str
        Section heading text.
    content : str
        Rendered HTML body, heading included.
    level : int
        ``2`` for regular sections, ``1`` for the whole-document fallback.
    toc : list[TocItem]
        Sub-headings inside the section, in document order.
    """

    id: str
    title: str
    content: str
    level: int
    toc: list[TocItem] = dc.field(default_factory=list)


@dc.dataclass(frozen=True, slots=True)
class NavItem:
    """Sidebar link derived one-to-one from a section."""

    id: str
    title: str
    href: str


@dc.dataclass(frozen=True, slots=True)
class DocData:
    """Everything the web application needs to render one version."""

    title: str
    version: str
    sections: list[DocSection]
    navigation: list[NavItem]


__all__ = ["DocData", "DocSection", "NavItem", "TocItem"]
