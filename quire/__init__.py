"""Build pipeline core for a small static-site generator.

quire compiles the site templates with their link helpers resolved, scans the
page sources, runs the page and post extractors and aggregates their records
into a tag index and a render context.

Exports
-------
- ``SiteBuilder``: runs preparation and the first pass for one site.
- ``BuildMode``: ``parallel`` or ``sequential`` extraction.
- ``BuildState``: the state threaded through every stage.
- ``BuildError``: base class of every build failure.

Examples
--------
>>> from quire import BuildMode
>>> BuildMode("parallel") is BuildMode.PARALLEL
True
"""

from __future__ import annotations

from .build import SiteBuilder, run_first_pass
from .errors import BuildError
from .models import BuildMode, BuildState, PageRecord, PostRecord

__all__ = [
    "BuildError",
    "BuildMode",
    "BuildState",
    "PageRecord",
    "PostRecord",
    "SiteBuilder",
    "run_first_pass",
]
