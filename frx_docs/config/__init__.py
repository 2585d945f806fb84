"""Load and validate the frx docs site configuration.

This subpackage parses ``config/site.yaml``: the ordered list of documented
versions, the sidebar groups that decide which sections appear in navigation,
site metadata used by the web pages, and the content/output paths used by the
builder. The primary entry point is :func:`load_site_config`, which rejects
malformed version lists and returns a :class:`SiteConfig` shared by the
builder and the web application.

Examples
--------
>>> from pathlib import Path
>>> from frx_docs.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.available_versions()  # doctest: +SKIP
['v0.0.2']
"""

from .helpers import DEFAULT_SIDEBAR_GROUPS
from .loader import load_site_config
from .models import SidebarGroupConfig, SiteConfig, SiteConfigError, VersionInfo

__all__ = [
    "DEFAULT_SIDEBAR_GROUPS",
    "SidebarGroupConfig",
    "SiteConfig",
    "SiteConfigError",
    "VersionInfo",
    "load_site_config",
]
