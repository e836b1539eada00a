"""Derive ordered listings, the tag index and the render context.

Everything here is pure: records in, new collections out. Sorting is stable,
so records that compare equal keep the order the extractors returned them in.

Examples
--------
>>> import datetime as dt
>>> from pathlib import Path
>>> from quire.models import PostRecord
>>> def post(title, day, tags):
...     return PostRecord(title, dt.datetime(2024, day, 1), frozenset(tags),
...                       Path(f"{title}.md"), Path(f"{title}.html"), "")
>>> p1, p2 = post("p1", 1, {"a", "b"}), post("p2", 2, {"b"})
>>> [p.title for p in sort_posts([p1, p2])]
['p2', 'p1']
>>> index = build_tag_index(sort_posts([p1, p2]))
>>> {tag: [p.title for p in posts] for tag, posts in index.items()}
{'a': ['p1'], 'b': ['p2', 'p1']}
>>> count_tags(index)
{'a': 1, 'b': 2}
"""

from __future__ import annotations

import dataclasses as dc
import operator
import typing as typ

from quire.models import PageRecord, PostRecord, RenderContext, TagIndex

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from quire.config import ProjectInfo
    from quire.models import BuildState


@dc.dataclass(frozen=True, slots=True)
class Aggregate:
    """Everything the first pass adds to the build state."""

    pages: list[PageRecord]
    posts: list[PostRecord]
    tag_index: TagIndex
    render_context: RenderContext


def sort_pages(pages: cabc.Iterable[PageRecord]) -> list[PageRecord]:
    """Return pages ascending by ``order``."""
    return sorted(pages, key=operator.attrgetter("order"))


def sort_posts(posts: cabc.Iterable[PostRecord]) -> list[PostRecord]:
    """Return posts newest first; posts with equal dates keep their order."""
    return sorted(posts, key=operator.attrgetter("raw_date"), reverse=True)


def build_tag_index(sorted_posts: cabc.Sequence[PostRecord]) -> TagIndex:
    """Map each tag to the posts carrying it.

    Each entry is filtered from ``sorted_posts`` rather than sorted on its
    own, so it is a subsequence of the global post order. Keys are ordered by
    tag name.
    """
    all_tags: set[str] = set()
    for post in sorted_posts:
        all_tags.update(post.tags)
    return {
        tag: [post for post in sorted_posts if tag in post.tags]
        for tag in sorted(all_tags)
    }


def count_tags(tag_index: TagIndex) -> dict[str, int]:
    """Return the number of posts per tag."""
    return {tag: len(posts) for tag, posts in tag_index.items()}


def build_render_context(
    project: ProjectInfo,
    pages: list[PageRecord],
    posts: list[PostRecord],
    tags: dict[str, int],
) -> RenderContext:
    """Assemble the variables exposed to every rendered template."""
    return {
        "site_name": project.site_name,
        "site_description": project.site_description,
        "author": project.author,
        "author_email": project.author_email,
        "pages": pages,
        "posts": posts,
        "tags": tags,
    }


def aggregate(
    pages: cabc.Iterable[PageRecord],
    posts: cabc.Iterable[PostRecord],
    project: ProjectInfo,
) -> Aggregate:
    """Sort the extracted records and derive the tag index and render context."""
    sorted_pages = sort_pages(pages)
    sorted_posts = sort_posts(posts)
    tag_index = build_tag_index(sorted_posts)
    render_context = build_render_context(
        project, sorted_pages, sorted_posts, count_tags(tag_index)
    )
    return Aggregate(
        pages=sorted_pages,
        posts=sorted_posts,
        tag_index=tag_index,
        render_context=render_context,
    )


def apply_aggregate(state: BuildState, result: Aggregate) -> BuildState:
    """Return ``state`` updated with the aggregated listings."""
    return dc.replace(
        state,
        pages=tuple(result.pages),
        posts=tuple(result.posts),
        tag_index=result.tag_index,
        render_context=result.render_context,
    )


__all__ = [
    "Aggregate",
    "aggregate",
    "apply_aggregate",
    "build_render_context",
    "build_tag_index",
    "count_tags",
    "sort_pages",
    "sort_posts",
]
