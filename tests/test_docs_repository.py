"""Tests for read-only lookups over built documents."""

from __future__ import annotations

import typing as typ

import pytest

from frx_docs.builder import DocData, DocSection, DocumentBuilder
from frx_docs.config import load_site_config
from frx_docs.docs import DocsRepository

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from frx_docs.config import SiteConfig


@pytest.fixture
def repository(sample_site: SiteConfig) -> DocsRepository:
    return DocsRepository(DocumentBuilder(sample_site).build(), sample_site)


def test_unknown_version_and_section_return_none(repository: DocsRepository) -> None:
    assert repository.get_doc_data("v9") is None
    assert repository.get_section("v9", "installation") is None
    assert repository.get_section("v1", "missing") is None


def test_get_section_returns_matching_section(repository: DocsRepository) -> None:
    section = repository.get_section("v1", "quick-start")
    assert section is not None
    assert section.title == "Quick Start"


def test_get_section_prefers_first_duplicate(sample_site: SiteConfig) -> None:
    first = DocSection(id="setup", title="Setup", content="<p>one</p>", level=2)
    second = DocSection(id="setup", title="Setup again", content="<p>two</p>", level=2)
    doc = DocData(title="t", version="v1", sections=[first, second], navigation=[])
    repo = DocsRepository({"v1": doc}, sample_site)
    assert repo.get_section("v1", "setup") is first


def test_version_metadata_comes_from_configuration(
    write_site: cabc.Callable[..., Path],
) -> None:
    config = load_site_config(
        write_site({"v2": "## A\n", "v1": "## B\n"}, versions=["v2", "v1"], latest="v1")
    )
    repo = DocsRepository(DocumentBuilder(config).build(), config)
    assert repo.get_available_versions() == ["v2", "v1"]
    assert repo.get_latest_version() == "v1"
    assert repo.get_version_label("v2") == "Release v2"
    assert repo.get_version_label("unknown") == "unknown"
    assert [v.id for v in repo.get_versions()] == ["v2", "v1"]


def test_first_section_href(repository: DocsRepository) -> None:
    assert repository.first_section_href("v1") == "/docs/v1/installation"


def test_first_section_href_falls_back_for_unbuilt_version(
    sample_site: SiteConfig,
) -> None:
    doc = DocData(title="t", version="v1", sections=[], navigation=[])
    repo = DocsRepository({"v1": doc}, sample_site)
    assert repo.first_section_href("v1") == "/docs/v1/installation"
    assert repo.first_section_href("v7") == "/docs/v7/installation"


def test_from_path_reads_built_artifact(sample_site: SiteConfig) -> None:
    path = DocumentBuilder(sample_site).run()
    repo = DocsRepository.from_path(path, sample_site)
    doc = repo.get_doc_data("v1")
    assert doc is not None
    assert [s.id for s in doc.sections] == ["installation", "quick-start"]
