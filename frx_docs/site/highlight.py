"""Syntax-highlight tagged code blocks when a section is rendered."""

from __future__ import annotations

import html
import re

from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

TAGGED_CODE_PATTERN = re.compile(
    r'<pre><code class="language-([A-Za-z0-9_+#.-]+)">(.*?)</code></pre>', re.DOTALL
)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')


class CodeHighlighter:
    """Replace ``language-*`` code blocks with Pygments markup."""

    def __init__(self, style: str = "default") -> None:
        """Initialize a highlighter with the given Pygments style name."""
        self.style = style
        self._formatter = HtmlFormatter(style=style, cssclass="codehilite", wrapcode=True)

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def highlight_html(self, content: str) -> str:
        """Highlight every tagged code block inside rendered section HTML."""

        def _repl(match: re.Match[str]) -> str:
            return self.code_block(html.unescape(match.group(2)), match.group(1))

        return TAGGED_CODE_PATTERN.sub(_repl, content)

    def code_block(self, code: str, language: str | None = None) -> str:
        """Render ``code`` into highlighted HTML tagged with its language.

        Unknown languages fall back to the plain-text lexer.
        """
        lang = language or "text"
        try:
            lexer = get_lexer_by_name(lang)
        except ClassNotFound:
            lexer = get_lexer_by_name("text")
        rendered = highlight(code, lexer, self._formatter)
        safe_lang = html.escape(lang, quote=True)
        return CODEHILITE_OPEN_TAG.sub(
            f'<div class="codehilite" data-language="{safe_lang}">', rendered, 1
        )


__all__ = ["CodeHighlighter"]
