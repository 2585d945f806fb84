"""Render section Markdown into HTML for the docs artifact."""

from __future__ import annotations

import re
import typing as typ

from markdown import Markdown

from .extensions import GfmExtension, HeadingIdExtension

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)
LANGUAGE_CLASS_PREFIX = "language-"


class HtmlContentRenderer:
    """Render Markdown with GitHub-style line breaks, tables, and code fences.

    Fenced code blocks come out as ``<pre><code class="language-<lang>">`` so
    the web layer can highlight them later; the renderer itself never runs a
    highlighter.
    """

    def markdown(self, text: str) -> str:
        """Render markdown into HTML using the configured extensions."""
        normalized = self._normalize_fenced_blocks(text)
        if not normalized.strip():
            return ""
        extensions: list[Extension | str] = [
            "fenced_code",
            "tables",
            "nl2br",
            "sane_lists",
            HeadingIdExtension(),
            GfmExtension(),
        ]
        md = Markdown(
            extensions=extensions,
            extension_configs={"fenced_code": {"lang_prefix": LANGUAGE_CLASS_PREFIX}},
        )
        return md.convert(normalized)

    @staticmethod
    def _normalize_fenced_blocks(text: str) -> str:
        """Dedent fences and reduce info strings like ``rust,no_run`` to a language."""
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

        def _strip_labels(match: re.Match[str]) -> str:
            fence, language, _extras = match.groups()
            label = language or ""
            return f"{fence}{label}"

        return FENCE_LABEL_PATTERN.sub(_strip_labels, without_indent)


__all__ = ["LANGUAGE_CLASS_PREFIX", "HtmlContentRenderer"]
