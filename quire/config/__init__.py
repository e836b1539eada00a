"""Load and validate the project file describing a quire site.

The project file (``site.yaml`` by default, though any YAML 1.2 or JSON
document works) supplies the site name, description, author details and the
base URL that link helpers resolve against. :func:`load_project_info` checks
that the required fields are present and returns a :class:`ProjectInfo` that
is threaded explicitly through every build stage.

Examples
--------
>>> from pathlib import Path
>>> from quire.config import load_project_info
>>> project = load_project_info(Path("site.yaml"))  # doctest: +SKIP
>>> project.base_url  # doctest: +SKIP
'/'
"""

from .loader import DEFAULT_PROJECT_FILE, load_project_info
from .models import ProjectConfigError, ProjectInfo

__all__ = [
    "DEFAULT_PROJECT_FILE",
    "ProjectConfigError",
    "ProjectInfo",
    "load_project_info",
]
