"""Read-only lookups over the built docs artifact.

The web layer loads ``docs.json`` once per process into a
:class:`DocsRepository` and answers every request from that immutable data.
Unknown versions and sections yield ``None`` so pages can show a "not found"
state instead of failing.

Example
-------
>>> from pathlib import Path
>>> from frx_docs.config import load_site_config
>>> from frx_docs.docs import DocsRepository
>>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> repo = DocsRepository.from_path(config.output_path, config)  # doctest: +SKIP
>>> repo.get_section("v0.0.2", "installation").title  # doctest: +SKIP
'Installation'
"""

from __future__ import annotations

import typing as typ
from types import MappingProxyType

from ._constants import DOCS_URL_TEMPLATE, FALLBACK_SECTION_ID
from .builder import load_docs

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .builder import DocData, DocSection
    from .config import SiteConfig, VersionInfo


class DocsRepository:
    """Immutable view of built documents plus the configured versions."""

    def __init__(
        self, docs: typ.Mapping[str, DocData], site_config: SiteConfig
    ) -> None:
        self._docs = MappingProxyType(dict(docs))
        self.site = site_config

    @classmethod
    def from_path(cls, path: Path, site_config: SiteConfig) -> DocsRepository:
        """Load the artifact at ``path``; see :func:`~frx_docs.builder.load_docs`."""
        return cls(load_docs(path), site_config)

    def get_doc_data(self, version: str) -> DocData | None:
        """Return the document for ``version`` or ``None`` when it was not built."""
        return self._docs.get(version)

    def get_section(self, version: str, section_id: str) -> DocSection | None:
        """Return the first section of ``version`` whose id equals ``section_id``."""
        doc = self.get_doc_data(version)
        if doc is None:
            return None
        return next((s for s in doc.sections if s.id == section_id), None)

    def get_versions(self) -> list[VersionInfo]:
        """Return the configured versions in display order."""
        return list(self.site.versions)

    def get_available_versions(self) -> list[str]:
        return self.site.available_versions()

    def get_latest_version(self) -> str:
        return self.site.latest_version()

    def get_version_label(self, version: str) -> str:
        return self.site.version_label(version)

    def first_section_href(self, version: str) -> str:
        """Return the URL of ``version``'s first section.

        Versions without built sections point at the conventional
        ``installation`` section so the link still has a stable shape.
        """
        doc = self.get_doc_data(version)
        section = doc.sections[0].id if doc and doc.sections else FALLBACK_SECTION_ID
        return DOCS_URL_TEMPLATE.format(version=version, section=section)


__all__ = ["DocsRepository"]
