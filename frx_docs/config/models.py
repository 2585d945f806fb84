"""Typed dataclasses describing the frx docs site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from frx_docs._constants import (
    DEFAULT_DESCRIPTION,
    DEFAULT_HIGHLIGHT_STYLE,
    DEFAULT_LICENSE_URL,
    DEFAULT_PROJECT_NAME,
    DEFAULT_TAGLINE,
)


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class VersionInfo:
    """A documented release of the library.

    Attributes
    ----------
    id : str
        Identifier used in URLs and as the Markdown file stem.
    label : str
        Human-friendly label shown in the version selector.
    is_latest : bool
        Whether this entry is the version ``/docs`` redirects to.
    """

    id: str
    label: str
    is_latest: bool = False


@dc.dataclass(frozen=True, slots=True)
class SidebarGroupConfig:
    """Named sidebar group and the section ids allowed into it."""

    title: str
    items: tuple[str, ...]
    expanded: bool = False

    @property
    def key(self) -> str:
        """Return the group title as a lower-case, hyphenated key."""
        return "-".join(self.title.lower().split())


@dc.dataclass(slots=True)
class SiteConfig:
    """Versions, sidebar layout, and paths shared by builder and web app."""

    versions: list[VersionInfo]
    content_dir: Path
    output_path: Path
    sidebar_groups: list[SidebarGroupConfig]
    project_name: str = DEFAULT_PROJECT_NAME
    tagline: str = DEFAULT_TAGLINE
    description: str = DEFAULT_DESCRIPTION
    repo_url: str | None = None
    license_url: str = DEFAULT_LICENSE_URL
    highlight_style: str = DEFAULT_HIGHLIGHT_STYLE

    def get_version(self, version_id: str) -> VersionInfo | None:
        """Return the configured version matching ``version_id``, if any."""
        return next((v for v in self.versions if v.id == version_id), None)

    def latest_version(self) -> str:
        """Return the first version flagged latest, else the first configured."""
        if not self.versions:  # pragma: no cover - loader guarantees entries
            msg = "No versions configured."
            raise SiteConfigError(msg)
        latest = next((v for v in self.versions if v.is_latest), None)
        return latest.id if latest else self.versions[0].id

    def available_versions(self) -> list[str]:
        """Return every configured version id in display order."""
        return [version.id for version in self.versions]

    def version_label(self, version_id: str) -> str:
        """Return the display label for ``version_id``, falling back to the id."""
        version = self.get_version(version_id)
        return version.label if version else version_id


__all__ = ["SidebarGroupConfig", "SiteConfig", "SiteConfigError", "VersionInfo"]
