"""Typed dataclasses describing quire project configuration."""

from __future__ import annotations

import dataclasses as dc


class ProjectConfigError(ValueError):
    """Raised when the project file is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class ProjectInfo:
    """Site-wide metadata consumed by the template compiler and aggregator.

    Attributes
    ----------
    site_name : str
        Human-readable name of the site.
    site_description : str
        Short description exposed to templates.
    author : str
        Name of the site author.
    author_email : str
        Contact address of the site author.
    base_url : str
        Prefix prepended to every generated link. Used verbatim, so it
        normally ends with ``/``.
    """

    site_name: str
    site_description: str
    author: str
    author_email: str
    base_url: str


__all__ = ["ProjectConfigError", "ProjectInfo"]
