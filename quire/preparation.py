"""Preparation stage: environment checks, template loading and page scanning.

Every step takes the current :class:`~quire.models.BuildState` and either
returns its result or raises a :class:`~quire.errors.BuildError`. Template
loading attempts all five templates before failing so a single run reports
every broken template.
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import logging
import os
import typing as typ
import zoneinfo
from pathlib import Path

from quire._constants import (
    PAGES_DIR,
    TEMPLATE_FILE_TEMPLATE,
    TEMPLATE_NAMES,
    TEMPLATES_DIR,
)
from quire.errors import BuildError, SystemBuildError, raise_collected
from quire.scanner import scan_content
from quire.templating import compile_template_file, create_environment

if typ.TYPE_CHECKING:
    from jinja2 import Template

    from quire.models import BuildState

logger = logging.getLogger(__name__)


def check_timezone() -> dt.tzinfo:
    """Return the local timezone, failing when the system has none configured.

    A ``TZ`` environment variable must name a zone in the IANA database (an
    optional leading ``:`` is ignored) or point at a compiled zone file.
    Without ``TZ`` the zone the C library reports is used.

    Raises
    ------
    SystemBuildError
        If ``TZ`` names an unknown zone or no local zone can be determined.
    """
    msg = "system timezone is not set"
    name = os.environ.get("TZ", "").lstrip(":")
    if name:
        try:
            zone_file = Path(name)
            if zone_file.is_absolute():
                with zone_file.open("rb") as handle:
                    return zoneinfo.ZoneInfo.from_file(handle, key=name)
            return zoneinfo.ZoneInfo(name)
        except (OSError, ValueError, zoneinfo.ZoneInfoNotFoundError) as exc:
            raise SystemBuildError(msg) from exc
    tzinfo = dt.datetime.now().astimezone().tzinfo
    if tzinfo is None:  # pragma: no cover - astimezone always attaches one
        raise SystemBuildError(msg)
    return tzinfo


def template_path(state: BuildState, name: str) -> Path:
    """Return the source path of template ``name``."""
    return state.src / TEMPLATES_DIR / TEMPLATE_FILE_TEMPLATE.format(name=name)


def load_templates(state: BuildState) -> dict[str, Template]:
    """Compile the five site templates against the project base URL.

    Returns
    -------
    dict[str, Template]
        Compiled templates keyed by name (``base``, ``list``, ``page``,
        ``post``, ``nav``).

    Raises
    ------
    BuildError
        The single failure when one template is broken, or a
        :class:`~quire.errors.BuildErrorGroup` listing every failure.
    """
    logger.info("Loading templates...")
    environment = create_environment()
    base_url = state.project.base_url
    templates: dict[str, Template] = {}
    errors: list[BuildError] = []
    for name in TEMPLATE_NAMES:
        try:
            templates[name] = compile_template_file(
                template_path(state, name),
                base_url,
                name=name,
                environment=environment,
            )
        except BuildError as exc:
            logger.debug("Template %s failed: %s", name, exc.describe())
            errors.append(exc)
    raise_collected("load_templates", errors)
    return templates


def scan_pages(state: BuildState) -> list[Path]:
    """Scan ``src/pages`` and mirror its directories under ``dest/pages``."""
    return scan_content(state.src / PAGES_DIR, state.dest / PAGES_DIR)


def prepare(state: BuildState) -> BuildState:
    """Run every preparation step and return the updated build state."""
    check_timezone()
    templates = load_templates(state)
    content_files = scan_pages(state)
    return dc.replace(
        state, templates=templates, content_files=tuple(content_files)
    )


__all__ = [
    "check_timezone",
    "load_templates",
    "prepare",
    "scan_pages",
    "template_path",
]
