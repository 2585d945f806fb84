"""Utility helpers shared by the frx docs configuration loader."""

from __future__ import annotations

import typing as typ

from .models import SidebarGroupConfig, SiteConfigError, VersionInfo

DEFAULT_SIDEBAR_GROUPS: tuple[SidebarGroupConfig, ...] = (
    SidebarGroupConfig(
        title="Getting Started",
        items=("installation", "quick-start"),
        expanded=True,
    ),
    SidebarGroupConfig(
        title="Core Modules",
        items=(
            "http-middleware-httpx",
            "error-handling-errorx",
            "logging-logs",
            "id-generation-idgen",
            "context-cache-ctxcache",
            "language-extensions-lang",
        ),
        expanded=True,
    ),
    SidebarGroupConfig(
        title="Advanced",
        items=("best-practices", "configuration-options", "contributing"),
    ),
)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _build_versions(payload: object) -> list[VersionInfo]:
    """Build the ordered version list, rejecting malformed or duplicate entries."""
    if not isinstance(payload, list) or not payload:
        msg = "Configuration must define a non-empty 'versions' list."
        raise SiteConfigError(msg)

    versions: list[VersionInfo] = []
    seen: set[str] = set()
    for index, entry in enumerate(payload):
        match entry:
            case str():
                raw: typ.Mapping[str, typ.Any] = {"id": entry}
            case dict():
                raw = entry
            case _:
                msg = f"Version entry #{index + 1} must be a mapping or a string."
                raise SiteConfigError(msg)
        version_id = _optional_str(raw.get("id"))
        if not version_id:
            msg = f"Version entry #{index + 1} is missing an 'id'."
            raise SiteConfigError(msg)
        if version_id in seen:
            msg = f"Version '{version_id}' is configured more than once."
            raise SiteConfigError(msg)
        seen.add(version_id)
        is_latest = raw.get("is_latest", raw.get("isLatest", False))
        versions.append(
            VersionInfo(
                id=version_id,
                label=_optional_str(raw.get("label")) or version_id,
                is_latest=bool(is_latest),
            )
        )
    return versions


def _build_sidebar_groups(payload: object | None) -> list[SidebarGroupConfig]:
    """Return configured sidebar groups, or the default allow-list when unset."""
    if payload is None:
        return list(DEFAULT_SIDEBAR_GROUPS)
    if not isinstance(payload, list):
        msg = "'sidebar' must be a list of groups."
        raise SiteConfigError(msg)

    groups: list[SidebarGroupConfig] = []
    for index, entry in enumerate(payload):
        if not isinstance(entry, dict):
            msg = f"Sidebar group #{index + 1} must be a mapping."
            raise SiteConfigError(msg)
        title = _optional_str(entry.get("title"))
        if not title:
            msg = "Sidebar groups require a 'title'."
            raise SiteConfigError(msg)
        raw_items = entry.get("items") or []
        if not isinstance(raw_items, list):
            msg = f"Sidebar group '{title}' must list its 'items'."
            raise SiteConfigError(msg)
        items = tuple(text for item in raw_items if (text := _optional_str(item)))
        groups.append(
            SidebarGroupConfig(
                title=title, items=items, expanded=bool(entry.get("expanded", False))
            )
        )
    return groups


__all__ = [
    "DEFAULT_SIDEBAR_GROUPS",
    "_build_sidebar_groups",
    "_build_versions",
    "_optional_str",
]
