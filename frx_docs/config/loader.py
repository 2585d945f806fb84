"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from frx_docs._constants import (
    DEFAULT_CONTENT_DIR,
    DEFAULT_DESCRIPTION,
    DEFAULT_HIGHLIGHT_STYLE,
    DEFAULT_LICENSE_URL,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_PROJECT_NAME,
    DEFAULT_TAGLINE,
)

from .helpers import (
    _build_sidebar_groups,
    _build_versions,
    _optional_str,
)
from .models import SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing versions and site layout.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with the ordered version list, sidebar groups,
        site metadata, and content/output paths.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If the YAML cannot be parsed, the top level is not a mapping, or the
        version list is missing, empty, or malformed.

    Examples
    --------
    >>> from pathlib import Path
    >>> from frx_docs.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.latest_version()  # doctest: +SKIP
    'v0.0.2'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle) or {}
    except YAMLError as exc:
        msg = f"Could not parse configuration file '{path}': {exc}"
        raise SiteConfigError(msg) from exc
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SiteConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    site = raw.get("site", {}) or {}
    if not isinstance(site, dict):
        msg = "'site' must be a mapping."
        raise SiteConfigError(msg)

    return SiteConfig(
        versions=_build_versions(raw.get("versions")),
        content_dir=Path(raw.get("content_dir") or DEFAULT_CONTENT_DIR),
        output_path=Path(raw.get("output_path") or DEFAULT_OUTPUT_PATH),
        sidebar_groups=_build_sidebar_groups(raw.get("sidebar")),
        project_name=_optional_str(site.get("project_name")) or DEFAULT_PROJECT_NAME,
        tagline=site.get("tagline", DEFAULT_TAGLINE),
        description=site.get("description", DEFAULT_DESCRIPTION),
        repo_url=_optional_str(site.get("repo_url")),
        license_url=site.get("license_url", DEFAULT_LICENSE_URL),
        highlight_style=site.get("highlight_style", DEFAULT_HIGHLIGHT_STYLE),
    )


__all__ = ["load_site_config"]
