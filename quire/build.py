"""Orchestrate a build run: preparation followed by the first pass.

:class:`SiteBuilder` owns one :class:`~quire.models.BuildState` for the
duration of a run. The state is replaced, never shared, so concurrent runs do
not interfere.

Example
-------
>>> from pathlib import Path
>>> from quire.build import BuildMode, SiteBuilder
>>> from quire.config import load_project_info
>>> project = load_project_info(Path("site/site.yaml"))  # doctest: +SKIP
>>> builder = SiteBuilder(
...     Path("site"), Path("public"), project, pages=pages, posts=posts
... )  # doctest: +SKIP
>>> state = builder.run(BuildMode.PARALLEL)  # doctest: +SKIP
>>> sorted(state.templates)  # doctest: +SKIP
['base', 'list', 'nav', 'page', 'post']
"""

from __future__ import annotations

import logging
import typing as typ

from quire.aggregate import aggregate, apply_aggregate
from quire.extraction import extract
from quire.models import BuildMode, BuildState
from quire.preparation import prepare

if typ.TYPE_CHECKING:
    from pathlib import Path

    from quire.config import ProjectInfo
    from quire.extraction import Extractor
    from quire.models import PageRecord, PostRecord

logger = logging.getLogger(__name__)


def run_first_pass(
    mode: BuildMode,
    state: BuildState,
    *,
    pages: Extractor[PageRecord],
    posts: Extractor[PostRecord],
) -> BuildState:
    """Extract pages and posts, then merge the aggregated listings into ``state``."""
    extraction = extract(
        state.content_files, state, mode, pages=pages, posts=posts
    )
    result = aggregate(extraction.pages, extraction.posts, state.project)
    logger.info(
        "Collected %d pages, %d posts and %d tags",
        len(result.pages),
        len(result.posts),
        len(result.tag_index),
    )
    return apply_aggregate(state, result)


class SiteBuilder:
    """Run the preparation stage and the first pass for one site."""

    def __init__(
        self,
        src: Path,
        dest: Path,
        project: ProjectInfo,
        *,
        pages: Extractor[PageRecord],
        posts: Extractor[PostRecord],
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        src : Path
            Project root holding ``templates/`` and ``pages/``.
        dest : Path
            Output root; directories under ``pages/`` are mirrored here.
        project : ProjectInfo
            Site metadata, including the base URL for link helpers.
        pages, posts : Extractor
            Collaborators that turn content files into records.
        """
        self.state = BuildState(src=src, dest=dest, project=project)
        self.pages = pages
        self.posts = posts

    def run(self, mode: BuildMode = BuildMode.PARALLEL) -> BuildState:
        """Build the site state, raising the first failing stage's error.

        Raises
        ------
        BuildError
            When preparation fails (timezone, templates or content scan).
        Exception
            Any error raised by an extractor, passed through unchanged.
        """
        state = prepare(self.state)
        state = run_first_pass(mode, state, pages=self.pages, posts=self.posts)
        self.state = state
        return state


__all__ = ["SiteBuilder", "run_first_pass"]
