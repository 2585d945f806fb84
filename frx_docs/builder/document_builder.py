"""Build the ``docs.json`` artifact from versioned Markdown files.

:class:`DocumentBuilder` reads ``<content_dir>/<version>.md`` for every
version listed in the :class:`~frx_docs.config.SiteConfig`, splits each file
into sections, renders section bodies to HTML, and writes one JSON document
keyed by version id. The build is all-or-nothing: any unreadable file aborts
the run before the artifact is touched, and the artifact is replaced through a
temporary file so readers never observe a partially written document.

Example
-------
>>> from pathlib import Path
>>> from frx_docs.config import load_site_config
>>> from frx_docs.builder import DocumentBuilder
>>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> DocumentBuilder(config).run()  # doctest: +SKIP
PosixPath('frx_docs/site/data/docs.json')
"""

from __future__ import annotations

import logging
import os
import tempfile
import typing as typ
from pathlib import Path

import msgspec

from frx_docs._constants import DOCS_URL_TEMPLATE, MAIN_SECTION_ID
from frx_docs.markdown_parser import (
    RawSection,
    parse_sections,
    split_front_matter,
)

from .models import DocData, DocSection, NavItem, TocItem
from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from frx_docs.config import SiteConfig

logger = logging.getLogger(__name__)

_DOCS_TYPE = dict[str, DocData]


class DocumentBuildError(RuntimeError):
    """Raised when a configured version cannot be built or loaded."""


def dump_docs(docs: typ.Mapping[str, DocData]) -> bytes:
    """Serialize built documents to indented JSON bytes ending in a newline."""
    encoded = msgspec.json.encode(dict(docs))
    return msgspec.json.format(encoded, indent=2) + b"\n"


def load_docs(path: Path) -> dict[str, DocData]:
    """Decode a ``docs.json`` artifact into typed documents.

    Raises
    ------
    DocumentBuildError
        If the artifact is missing or does not match the expected schema.
    """
    try:
        payload = path.read_bytes()
    except OSError as exc:
        msg = f"Docs artifact '{path}' is not readable; run the build first."
        raise DocumentBuildError(msg) from exc
    try:
        return msgspec.json.decode(payload, type=_DOCS_TYPE)
    except msgspec.ValidationError as exc:
        msg = f"Docs artifact '{path}' is malformed: {exc}"
        raise DocumentBuildError(msg) from exc
    except msgspec.DecodeError as exc:
        msg = f"Docs artifact '{path}' is not valid JSON: {exc}"
        raise DocumentBuildError(msg) from exc


class DocumentBuilder:
    """Turn each configured version's Markdown into a :class:`DocData`."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        renderer: HtmlContentRenderer | None = None,
        output_path: Path | None = None,
    ) -> None:
        """Initialize the builder with configuration and an HTML renderer.

        Parameters
        ----------
        site_config : SiteConfig
            Configuration providing the version list and content directory.
        renderer : HtmlContentRenderer, optional
            Markdown renderer; defaults to a fresh :class:`HtmlContentRenderer`.
        output_path : Path, optional
            Override for the artifact path; defaults to the config value.
        """
        self.site = site_config
        self.renderer = renderer or HtmlContentRenderer()
        self.output_path = output_path or site_config.output_path

    def run(self) -> Path:
        """Build every version and atomically write the JSON artifact.

        Returns
        -------
        Path
            Path of the written artifact.

        Raises
        ------
        DocumentBuildError
            Raised when a configured version's Markdown file is missing or
            unreadable; no output is written in that case.
        FrontMatterError
            Raised when a document's front matter is not a YAML mapping.
        """
        payload = dump_docs(self.build())
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self._write_atomic(payload)
        return self.output_path

    def build(self) -> dict[str, DocData]:
        """Return built documents keyed by version id in configuration order."""
        return {
            version.id: self.build_document(version.id)
            for version in self.site.versions
        }

    def build_document(self, version: str) -> DocData:
        """Parse, split, and render the Markdown file for ``version``."""
        front_matter, body = split_front_matter(self._read_source(version))
        title = str(front_matter.get("title") or self._default_title(version))

        raw_sections = parse_sections(body)
        self._warn_duplicate_slugs(version, raw_sections)
        sections = [self._build_section(raw) for raw in raw_sections]
        if not sections:
            sections = [
                DocSection(
                    id=MAIN_SECTION_ID,
                    title=title,
                    content=self.renderer.markdown(body),
                    level=1,
                )
            ]

        navigation = [
            NavItem(
                id=section.id,
                title=section.title,
                href=DOCS_URL_TEMPLATE.format(version=version, section=section.id),
            )
            for section in sections
        ]
        logger.info("built %s: %d section(s)", version, len(sections))
        return DocData(
            title=title, version=version, sections=sections, navigation=navigation
        )

    def source_path(self, version: str) -> Path:
        """Return the Markdown path expected for ``version``."""
        return self.site.content_dir / f"{version}.md"

    def _read_source(self, version: str) -> str:
        """Read the Markdown source for ``version``, failing the whole build."""
        path = self.source_path(version)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Cannot read Markdown for version '{version}' at '{path}': {exc}"
            raise DocumentBuildError(msg) from exc

    def _default_title(self, version: str) -> str:
        return f"{self.site.project_name} {version}"

    def _build_section(self, raw: RawSection) -> DocSection:
        """Render a parsed section and attach its table of contents."""
        return DocSection(
            id=raw.slug,
            title=raw.title,
            content=self.renderer.markdown(raw.markdown),
            level=2,
            toc=[
                TocItem(id=entry.slug, title=entry.title, level=entry.level)
                for entry in raw.toc
            ],
        )

    @staticmethod
    def _warn_duplicate_slugs(version: str, sections: list[RawSection]) -> None:
        seen: set[str] = set()
        for section in sections:
            if section.slug in seen:
                logger.warning(
                    "version %s: duplicate section id '%s'; lookups resolve to the "
                    "first section with that id",
                    version,
                    section.slug,
                )
            seen.add(section.slug)

    def _write_atomic(self, payload: bytes) -> None:
        """Write ``payload`` beside the target and rename it into place."""
        directory = self.output_path.parent
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.output_path.name}.", suffix=".tmp", dir=directory
        )
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
            tmp_path.chmod(0o644)
            tmp_path.replace(self.output_path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise


__all__ = ["DocumentBuildError", "DocumentBuilder", "dump_docs", "load_docs"]
