"""Common literal values used across quire.

These constants keep the project layout (template names, suffixes, content
directories) in one place so the preparation stage, the scanner, and tests
import the same values without drifting.

Examples
--------
>>> from quire import _constants
>>> _constants.TEMPLATE_FILE_TEMPLATE.format(name="base")
'base.html.eex'
>>> ".md" in _constants.CONTENT_SUFFIXES
True
"""

TEMPLATE_NAMES = ("base", "list", "page", "post", "nav")
TEMPLATE_FILE_TEMPLATE = "{name}.html.eex"
TEMPLATES_DIR = "templates"
PAGES_DIR = "pages"
CONTENT_SUFFIXES = (".md", ".html")
