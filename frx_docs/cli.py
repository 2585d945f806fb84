"""Cyclopts CLI entrypoint for building and serving the frx docs site.

The ``frx-docs`` console script exposes the two pipeline stages as separate
commands: ``build`` turns the configured Markdown versions into the
``docs.json`` artifact, and ``serve`` runs the web application over an
existing artifact. Run ``build`` before ``serve``; ``serve`` never parses
Markdown.

Examples
--------
Build the artifact for the default configuration:

>>> from frx_docs.cli import app
>>> app(["build"])  # doctest: +SKIP

Serve the built docs on a custom port:

>>> app(["serve", "--port", "8080"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG_PATH
from .builder import DocumentBuilder
from .config import load_site_config
from .site import create_app

app = App(name="frx-docs", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Build the docs.json artifact from versioned Markdown.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG_PATH,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the artifact path", env_var="INPUT_OUTPUT"),
    ] = None,
) -> None:
    """Build every configured version into a single JSON artifact.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output : Path or None, optional
        Override for the artifact location; defaults to ``output_path`` from
        the configuration.

    Raises
    ------
    SiteConfigError
        If the configuration cannot be parsed.
    DocumentBuildError
        If any configured version's Markdown is missing or unreadable; the
        previous artifact, if any, is left untouched.
    """
    site_config = load_site_config(config)
    written = DocumentBuilder(site_config, output_path=output).run()
    print(f"wrote {_format_path(written)}")


@app.command(help="Serve the built documentation with the bundled web app.")
def serve(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG_PATH,
    artifact: typ.Annotated[
        Path | None,
        Parameter(help="Override the docs.json path", env_var="INPUT_ARTIFACT"),
    ] = None,
    host: typ.Annotated[str, Parameter(help="Interface to bind")] = "127.0.0.1",
    port: typ.Annotated[int, Parameter(help="Port to listen on")] = 8000,
    debug: typ.Annotated[bool, Parameter(help="Enable the Flask debugger")] = False,
) -> None:
    """Load the artifact once and serve the docs pages.

    Raises
    ------
    DocumentBuildError
        If the artifact has not been built or cannot be decoded.
    """
    site_config = load_site_config(config)
    web_app = create_app(site_config, artifact_path=artifact)
    web_app.run(host=host, port=port, debug=debug)


def main() -> None:
    """Configure logging and invoke the Cyclopts application.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
