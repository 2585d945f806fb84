"""Partition a version's navigation into the configured sidebar groups."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from frx_docs.builder import NavItem
    from frx_docs.config import SidebarGroupConfig


@dc.dataclass(frozen=True, slots=True)
class SidebarGroup:
    """A rendered sidebar group.

    Attributes
    ----------
    title : str
        Group heading.
    key : str
        Hyphenated group key, used as the DOM id of the collapsible block.
    expanded : bool
        Whether the group starts open.
    items : list[NavItem]
        Navigation entries allowed into this group, in navigation order.
    """

    title: str
    key: str
    expanded: bool
    items: list[NavItem]


def build_sidebar(
    navigation: typ.Sequence[NavItem], groups: typ.Sequence[SidebarGroupConfig]
) -> list[SidebarGroup]:
    """Return one :class:`SidebarGroup` per configured group.

    Items keep the order they have in ``navigation``. An item whose id is in
    no group's allow-list is left out of the sidebar entirely; groups with no
    matching items are still returned (empty) and skipped by the template.
    """
    sidebar: list[SidebarGroup] = []
    for group in groups:
        allowed = frozenset(group.items)
        sidebar.append(
            SidebarGroup(
                title=group.title,
                key=group.key,
                expanded=group.expanded,
                items=[item for item in navigation if item.id in allowed],
            )
        )
    return sidebar


__all__ = ["SidebarGroup", "build_sidebar"]
