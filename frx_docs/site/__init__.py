"""Web front end that renders the built docs artifact."""

from .app import create_app
from .highlight import CodeHighlighter
from .sidebar import SidebarGroup, build_sidebar

__all__ = ["CodeHighlighter", "SidebarGroup", "build_sidebar", "create_app"]
