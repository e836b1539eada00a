"""Records and state shared across the preparation stage and the first pass."""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

if typ.TYPE_CHECKING:
    import datetime as dt
    from pathlib import Path

    from jinja2 import Template

    from quire.config import ProjectInfo


class BuildMode(enum.StrEnum):
    """How the first pass schedules page and post extraction."""

    PARALLEL = "parallel"
    SEQUENTIAL = "sequential"


@dc.dataclass(frozen=True, slots=True)
class PageRecord:
    """A standalone page extracted from one content file.

    Attributes
    ----------
    name : str
        Page identifier, usually the file stem.
    type : str
        Source type, ``"md"`` or ``"html"``.
    title : str
        Title shown in the page header.
    order : int
        Explicit position of the page in navigation, ascending.
    menu : bool
        Whether the page is listed in the navigation menu.
    menu_text : str
        Label used for the menu entry.
    menu_icon : str
        Icon reference used for the menu entry.
    file : Path
        Content file the record was extracted from.
    output : Path
        Resolved output path of the rendered page.
    """

    name: str
    type: str
    title: str
    order: int
    menu: bool
    menu_text: str
    menu_icon: str
    file: Path
    output: Path


@dc.dataclass(frozen=True, slots=True)
class PostRecord:
    """A dated blog post extracted from one content file."""

    title: str
    raw_date: dt.datetime
    tags: frozenset[str]
    file: Path
    output: Path
    url: str
    date: str = ""


TagIndex = dict[str, list[PostRecord]]
RenderContext = dict[str, typ.Any]


@dc.dataclass(frozen=True, slots=True)
class BuildState:
    """Configuration and intermediate results of one build run.

    The state is never mutated; each stage returns an updated copy made with
    :func:`dataclasses.replace`.
    """

    src: Path
    dest: Path
    project: ProjectInfo
    templates: typ.Mapping[str, Template] = dc.field(default_factory=dict)
    content_files: tuple[Path, ...] = ()
    pages: tuple[PageRecord, ...] = ()
    posts: tuple[PostRecord, ...] = ()
    tag_index: TagIndex = dc.field(default_factory=dict)
    render_context: RenderContext = dc.field(default_factory=dict)


__all__ = [
    "BuildMode",
    "BuildState",
    "PageRecord",
    "PostRecord",
    "RenderContext",
    "TagIndex",
]
