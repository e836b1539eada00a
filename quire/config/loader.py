"""Load the project file into a :class:`ProjectInfo`."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .models import ProjectConfigError, ProjectInfo

DEFAULT_PROJECT_FILE = Path("site.yaml")
REQUIRED_FIELDS = ("site_name", "base_url")

logger = logging.getLogger(__name__)


def load_project_info(path: Path = DEFAULT_PROJECT_FILE) -> ProjectInfo:
    """Load the project metadata describing a site.

    Parameters
    ----------
    path : Path, optional
        Filesystem path to the project file; defaults to ``site.yaml`` in the
        current directory. YAML 1.2 is a superset of JSON,
        so both ``site.yaml`` and JSON project files are accepted.

    Returns
    -------
    ProjectInfo
        Parsed metadata with optional fields defaulted to empty strings.

    Raises
    ------
    FileNotFoundError
        If the project file does not exist at ``path``.
    TypeError
        If the top-level document is not a mapping.
    ProjectConfigError
        If ``site_name`` or ``base_url`` is missing or blank.
    YAMLError
        If the document cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> project = load_project_info(Path("site.yaml"))  # doctest: +SKIP
    >>> project.site_name  # doctest: +SKIP
    'New Website'
    """
    if not path.exists():
        msg = f"Project file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level project document must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    missing = [key for key in REQUIRED_FIELDS if not _optional_str(raw.get(key))]
    if missing:
        msg = f"Project file '{path}' is missing {', '.join(missing)}."
        raise ProjectConfigError(msg)

    base_url = _optional_str(raw["base_url"]) or ""
    if not base_url.endswith("/"):
        logger.warning(
            "base_url %r does not end with '/'; links are joined verbatim", base_url
        )

    return ProjectInfo(
        site_name=_optional_str(raw["site_name"]) or "",
        site_description=_optional_str(raw.get("site_description")) or "",
        author=_optional_str(raw.get("author")) or "",
        author_email=_optional_str(raw.get("author_email")) or "",
        base_url=base_url,
    )


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


__all__ = ["DEFAULT_PROJECT_FILE", "load_project_info"]
