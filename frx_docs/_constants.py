"""Common literal values used across frx_docs.

These constants keep default paths and URL fragments centralized so the
builder, the web app, and tests can import the same values without drifting.
Intended for internal use within the frx_docs package.

Examples
--------
>>> from frx_docs import _constants
>>> _constants.DOCS_URL_TEMPLATE.format(version="v0.0.2", section="installation")
'/docs/v0.0.2/installation'
>>> _constants.MAIN_SECTION_ID
'main'
"""

from pathlib import Path

DEFAULT_CONFIG_PATH = Path("config/site.yaml")
DEFAULT_CONTENT_DIR = "content"
DEFAULT_OUTPUT_PATH = "frx_docs/site/data/docs.json"

DOCS_URL_TEMPLATE = "/docs/{version}/{section}"
MAIN_SECTION_ID = "main"
FALLBACK_SLUG = "section"
FALLBACK_SECTION_ID = "installation"

DEFAULT_PROJECT_NAME = "frx"
DEFAULT_TAGLINE = "Convenient Go coding encapsulation libraries"
DEFAULT_DESCRIPTION = "toolkits for go"
DEFAULT_LICENSE_URL = "#license"
DEFAULT_HIGHLIGHT_STYLE = "default"
