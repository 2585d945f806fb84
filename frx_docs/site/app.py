"""Flask application serving the built frx documentation.

The app never parses Markdown: it reads the ``docs.json`` artifact once via
:class:`~frx_docs.docs.DocsRepository` and renders Jinja templates around the
pre-built section HTML. Routes:

- ``/``: landing page.
- ``/docs``: redirect to the latest version's first section.
- ``/docs/<version>``: the version's first section.
- ``/docs/<version>/<section>``: a single section with its table of contents.

Unknown versions or sections render an inline "not found" message with a 404
status; they never raise.

Example
-------
>>> from pathlib import Path
>>> from frx_docs.config import load_site_config
>>> from frx_docs.site import create_app
>>> app = create_app(load_site_config(Path("config/site.yaml")))  # doctest: +SKIP
>>> app.run(port=8000)  # doctest: +SKIP
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from http import HTTPStatus

from flask import Flask, redirect, render_template
from jinja2 import select_autoescape
from markupsafe import Markup

from frx_docs.docs import DocsRepository

from .highlight import CodeHighlighter
from .sidebar import build_sidebar

if typ.TYPE_CHECKING:
    from pathlib import Path

    from werkzeug.wrappers import Response

    from frx_docs.builder import DocData, DocSection
    from frx_docs.config import SiteConfig


def create_app(
    site_config: SiteConfig,
    repository: DocsRepository | None = None,
    *,
    artifact_path: Path | None = None,
) -> Flask:
    """Build the Flask application for the configured site.

    Parameters
    ----------
    site_config : SiteConfig
        Parsed site configuration (versions, sidebar groups, metadata).
    repository : DocsRepository, optional
        Pre-loaded documents; when omitted the artifact is loaded from
        ``artifact_path`` or ``site_config.output_path``.
    artifact_path : Path, optional
        Override for the ``docs.json`` location.

    Returns
    -------
    Flask
        Application with the docs routes registered.

    Raises
    ------
    DocumentBuildError
        If no repository is given and the artifact cannot be loaded.
    """
    if repository is None:
        repository = DocsRepository.from_path(
            artifact_path or site_config.output_path, site_config
        )

    app = Flask(__name__, template_folder="templates", static_folder="static")
    app.jinja_env.autoescape = select_autoescape(["html", "xml", "jinja"])
    app.jinja_env.trim_blocks = True
    app.jinja_env.lstrip_blocks = True
    view = _DocsView(site_config, repository)

    app.add_url_rule("/", "home", view.home)
    app.add_url_rule("/docs", "docs_index", view.docs_index)
    app.add_url_rule("/docs/<version>", "docs_version", view.docs_version)
    app.add_url_rule(
        "/docs/<version>/<section_id>", "docs_section", view.docs_section
    )
    return app


class _DocsView:
    """Request handlers bound to one site configuration and document set."""

    def __init__(self, site_config: SiteConfig, repository: DocsRepository) -> None:
        self.site = site_config
        self.repository = repository
        self.highlighter = CodeHighlighter(site_config.highlight_style)

    def home(self) -> str:
        return render_template(
            "home_page.jinja",
            site=self.site,
            generated_at=dt.datetime.now(dt.UTC),
        )

    def docs_index(self) -> Response:
        latest = self.repository.get_latest_version()
        return redirect(self.repository.first_section_href(latest))

    def docs_version(self, version: str) -> tuple[str, int]:
        doc = self.repository.get_doc_data(version)
        if doc is None:
            return self._render(version, None, None, f'Version "{version}" not found')
        section = doc.sections[0] if doc.sections else None
        return self._render(version, doc, section, None)

    def docs_section(self, version: str, section_id: str) -> tuple[str, int]:
        doc = self.repository.get_doc_data(version)
        section = self.repository.get_section(version, section_id)
        error = None
        if section is None:
            error = f'Section "{section_id}" not found in version {version}'
        return self._render(version, doc, section, error, current_section=section_id)

    def _render(
        self,
        version: str,
        doc: DocData | None,
        section: DocSection | None,
        error: str | None,
        *,
        current_section: str | None = None,
    ) -> tuple[str, int]:
        """Render the doc page template; a set ``error`` yields a 404."""
        navigation = doc.navigation if doc else []
        content = ""
        if section is not None:
            content = Markup(self.highlighter.highlight_html(section.content))  # noqa: S704 - built from trusted Markdown
        context = {
            "site": self.site,
            "version": version,
            "version_label": self.repository.get_version_label(version),
            "version_options": [
                {
                    "id": info.id,
                    "label": info.label,
                    "href": self.repository.first_section_href(info.id),
                    "selected": info.id == version,
                }
                for info in self.repository.get_versions()
            ],
            "sidebar_groups": build_sidebar(navigation, self.site.sidebar_groups),
            "current_section": current_section or (section.id if section else None),
            "doc": doc,
            "section": section,
            "content_html": content,
            "toc_items": section.toc if section else [],
            "error": error,
            "pygments_css": self.highlighter.stylesheet,
            "html_title": self._page_title(section),
        }
        status = HTTPStatus.NOT_FOUND if error else HTTPStatus.OK
        return render_template("doc_page.jinja", **context), status

    def _page_title(self, section: DocSection | None) -> str:
        name = self.site.project_name
        return f"{section.title} | {name}" if section else name


__all__ = ["create_app"]
