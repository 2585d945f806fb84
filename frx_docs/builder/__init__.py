"""Build the versioned docs artifact from Markdown sources."""

from .document_builder import DocumentBuildError, DocumentBuilder, dump_docs, load_docs
from .models import DocData, DocSection, NavItem, TocItem
from .renderer import HtmlContentRenderer

__all__ = [
    "DocData",
    "DocSection",
    "DocumentBuildError",
    "DocumentBuilder",
    "HtmlContentRenderer",
    "NavItem",
    "TocItem",
    "dump_docs",
    "load_docs",
]
