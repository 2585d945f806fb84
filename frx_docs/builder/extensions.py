"""Markdown extensions used when rendering documentation sections.

``HeadingIdExtension`` stamps every heading with an ``id`` derived from its
text using the same slug rule as the section parser, so table-of-contents
entries and in-page anchors resolve. ``GfmExtension`` adds the GitHub-flavoured
inline syntax Python-Markdown lacks: bare URL autolinks and ``~~strike~~``.
"""

from __future__ import annotations

import html
import re
import typing as typ
import xml.etree.ElementTree as etree

from markdown import util
from markdown.extensions import Extension
from markdown.inlinepatterns import InlineProcessor, SimpleTagInlineProcessor
from markdown.treeprocessors import Treeprocessor

from frx_docs.markdown_parser import slugify

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any

HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})
AUTOLINK_RE = r"(?<![\w/\"'=<(\[])((?:https?://|www\.)[^\s<>]*[^\s<>.,:;!?\"')\]])"
STRIKE_RE = r"(~{2})(.+?)~{2}"
ESCAPE_PLACEHOLDER_RE = re.compile(rf"{util.STX}(\d+){util.ETX}")


class HeadingIdExtension(Extension):
    """Assign slug ``id`` attributes to rendered headings."""

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the heading-id treeprocessor after inline processing."""
        md.treeprocessors.register(HeadingIdTreeprocessor(md), "frx_heading_ids", 5)


class HeadingIdTreeprocessor(Treeprocessor):
    """Set ``id`` on each heading element from its text content.

    Inline code text arrives HTML-escaped and raw inline HTML sits in the
    stash; both are restored before slugging so the id equals the slug taken
    from the Markdown source.
    """

    def run(self, root: Element) -> Element:
        """Stamp heading ids on the parsed tree."""
        for element in root.iter():
            if element.tag in HEADING_TAGS:
                text = _source_text(element)
                element.set("id", slugify(self._unstash(text)))
        return root

    def _unstash(self, text: str) -> str:
        """Resolve escape and raw-HTML placeholders left by inline processing."""
        text = ESCAPE_PLACEHOLDER_RE.sub(lambda m: chr(int(m.group(1))), text)
        stash = self.md.htmlStash
        for index, raw in enumerate(stash.rawHtmlBlocks):
            placeholder = stash.get_placeholder(index)
            if placeholder in text:
                text = text.replace(placeholder, str(raw))
        return text


def _source_text(element: Element) -> str:
    """Join an element's text, unescaping the contents of inline ``code``."""
    parts: list[str] = []
    if element.text:
        text = element.text
        parts.append(html.unescape(text) if element.tag == "code" else text)
    for child in element:
        parts.append(_source_text(child))
        if child.tail:
            parts.append(child.tail)
    return "".join(parts)


class AutolinkInlineProcessor(InlineProcessor):
    """Turn bare ``http(s)://`` and ``www.`` URLs into anchors."""

    ANCESTOR_EXCLUDES = ("a",)

    def handleMatch(  # type: ignore[override]  # noqa: N802
        self, m: re.Match[str], data: str
    ) -> tuple[Element, int, int]:
        """Return an ``<a>`` element for the matched URL."""
        url = m.group(1)
        href = url if url.lower().startswith("http") else f"http://{url}"
        element = etree.Element("a")
        element.set("href", href)
        element.text = url
        return element, m.start(0), m.end(0)


class GfmExtension(Extension):
    """GitHub-flavoured autolinks and strikethrough."""

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register autolink and strikethrough inline processors."""
        md.inlinePatterns.register(
            AutolinkInlineProcessor(AUTOLINK_RE, md), "frx_autolink", 95
        )
        md.inlinePatterns.register(
            SimpleTagInlineProcessor(STRIKE_RE, "del"), "frx_strike", 45
        )


__all__ = [
    "AutolinkInlineProcessor",
    "GfmExtension",
    "HeadingIdExtension",
    "HeadingIdTreeprocessor",
]
