"""Run the page and post extractors over the scanned content.

Extractors are collaborators that turn content files into records. The
coordinator runs both either side by side on two worker threads or one after
the other, and surfaces the first failure it observes unchanged.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from concurrent.futures import ThreadPoolExecutor, as_completed

from quire.models import BuildMode, BuildState, PageRecord, PostRecord

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from concurrent.futures import Future
    from pathlib import Path

RecordT = typ.TypeVar("RecordT", covariant=True)
ItemT = typ.TypeVar("ItemT")

logger = logging.getLogger(__name__)


class Extractor(typ.Protocol[RecordT]):
    """Collaborator that extracts records from ``state.content_files``."""

    def run(self, mode: BuildMode, state: BuildState) -> cabc.Sequence[RecordT]:
        """Return one record per relevant content file, in scan order."""
        ...


@dc.dataclass(frozen=True, slots=True)
class Extraction:
    """Records produced by both extractors."""

    pages: list[PageRecord]
    posts: list[PostRecord]


def extract(
    content_paths: cabc.Sequence[Path],
    state: BuildState,
    mode: BuildMode,
    *,
    pages: Extractor[PageRecord],
    posts: Extractor[PostRecord],
) -> Extraction:
    """Run both extractors over ``content_paths``.

    Parameters
    ----------
    content_paths : Sequence[Path]
        Content files produced by the scanner.
    state : BuildState
        Current build state; each extractor receives a copy carrying
        ``content_paths``.
    mode : BuildMode
        ``parallel`` runs both extractors concurrently; ``sequential`` runs
        pages to completion before starting posts.
    pages, posts : Extractor
        Page and post extractors.

    Returns
    -------
    Extraction
        Page and post records as returned by the extractors.

    Raises
    ------
    Exception
        The first error raised by either extractor, unchanged. The other
        extractor's result is discarded.
    """
    view = dc.replace(state, content_files=tuple(content_paths))
    if mode is BuildMode.PARALLEL:
        logger.info("Starting parallel build...")
        return _extract_parallel(view, pages, posts)
    logger.info("Starting sequential build...")
    page_records = list(pages.run(mode, view))
    post_records = list(posts.run(mode, view))
    return Extraction(pages=page_records, posts=post_records)


def _extract_parallel(
    state: BuildState,
    pages: Extractor[PageRecord],
    posts: Extractor[PostRecord],
) -> Extraction:
    results: dict[str, list[typ.Any]] = {}
    with ThreadPoolExecutor(
        max_workers=2, thread_name_prefix="quire-extract"
    ) as pool:
        futures: dict[Future[cabc.Sequence[typ.Any]], str] = {
            pool.submit(pages.run, BuildMode.PARALLEL, state): "pages",
            pool.submit(posts.run, BuildMode.PARALLEL, state): "posts",
        }
        try:
            for future in as_completed(futures):
                results[futures[future]] = list(future.result())
        except BaseException:
            for future in futures:
                future.cancel()
            raise
    return Extraction(pages=results["pages"], posts=results["posts"])


def map_files(
    func: cabc.Callable[[Path], ItemT],
    paths: cabc.Iterable[Path],
    mode: BuildMode,
    *,
    max_workers: int | None = None,
) -> list[ItemT]:
    """Apply ``func`` to every path, keeping the input order of results.

    Extractors use this for their per-file work. ``parallel`` spreads the calls
    over a thread pool; ``sequential`` runs them one by one in the calling
    thread. The first exception in input order is raised.

    Examples
    --------
    >>> from pathlib import Path
    >>> map_files(lambda p: p.stem, [Path("b.md"), Path("a.md")], BuildMode.PARALLEL)
    ['b', 'a']
    """
    if mode is BuildMode.SEQUENTIAL:
        return [func(path) for path in paths]
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(func, paths))


__all__ = ["Extraction", "Extractor", "extract", "map_files"]
