"""Build and serve the versioned documentation site for the frx Go toolkit.

The package is split into two stages: :mod:`frx_docs.builder` turns the
configured Markdown files into a single ``docs.json`` artifact, and
:mod:`frx_docs.site` serves that artifact through a small Flask application.
``frx-docs build`` and ``frx-docs serve`` drive the two stages.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from frx_docs import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
