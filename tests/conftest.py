"""Shared fixtures for frx docs tests.

``write_site`` lays out a temporary content directory plus ``site.yaml`` so
builder, web app, and CLI tests exercise the same configuration path the
real site uses.
"""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

from frx_docs.config import SiteConfig, load_site_config

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

SAMPLE_MARKDOWN = dedent(
    """\
    ---
    title: Sample Docs
    ---

    # Sample

    Preamble that belongs to no section.

    ## Installation

    Run the installer.

    ### Requirements

    Go 1.21.

    ## Quick Start

    Start here.
    """
)


@pytest.fixture
def write_site(tmp_path: Path) -> cabc.Callable[..., Path]:
    """Return a factory writing content files and a ``site.yaml`` config."""

    def _write(
        documents: cabc.Mapping[str, str],
        *,
        versions: cabc.Sequence[str] | None = None,
        latest: str | None = None,
        extra: str = "",
    ) -> Path:
        content_dir = tmp_path / "content"
        content_dir.mkdir(exist_ok=True)
        for version, markdown in documents.items():
            (content_dir / f"{version}.md").write_text(markdown, encoding="utf-8")
        version_ids = list(versions if versions is not None else documents)
        entries = "\n".join(
            f"  - id: {vid}\n    label: Release {vid}\n"
            f"    is_latest: {'true' if vid == latest else 'false'}"
            for vid in version_ids
        )
        config_path = tmp_path / "site.yaml"
        config_path.write_text(
            f"versions:\n{entries}\n"
            f"content_dir: {content_dir}\n"
            f"output_path: {tmp_path / 'out' / 'docs.json'}\n"
            "site:\n"
            "  project_name: frx\n"
            "  repo_url: https://github.com/crazyfrankie/frx\n" + extra,
            encoding="utf-8",
        )
        return config_path

    return _write


@pytest.fixture
def sample_site(write_site: cabc.Callable[..., Path]) -> SiteConfig:
    """Return a loaded config with a single ``v1`` version of the sample doc."""
    return load_site_config(write_site({"v1": SAMPLE_MARKDOWN}, latest="v1"))
