"""Shared fixtures for the quire test suite.

The fixtures build a throwaway site tree (templates plus nested page sources)
under ``tmp_path`` and provide record factories so tests can describe pages
and posts tersely.
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

import pytest

from quire.config import ProjectInfo
from quire.models import BuildState, PageRecord, PostRecord

BASE_URL = "/blog/"

TEMPLATE_SOURCES: dict[str, str] = {
    "base": (
        "<html><head>\n"
        '<link rel="stylesheet" href="{{ asset(\'css/style.css\') }}">\n'
        "</head><body>{{ contents }}</body></html>\n"
    ),
    "nav": (
        "<nav>\n"
        '<a id="home" href="{{ base() }}">{{ site_name }}</a>\n'
        "{% for p in pages %}\n"
        '<a href="{{ base() }}{{ p.name }}.html">{{ p.menu_text }}</a>\n'
        "{% endfor %}\n"
        "</nav>\n"
    ),
    "list": (
        "<ul>\n"
        "{% for post in posts %}\n"
        '<li><a href="{{ post.url }}">{{ post.title }}</a></li>\n'
        "{% endfor %}\n"
        "</ul>\n"
    ),
    "page": (
        "<main>\n"
        '<a id="about" href="{{ page(\'about\') }}">About</a>\n'
        '<a id="docs" href="{{ page(\'docs/\' ~ \'intro\') }}">Docs</a>\n'
        "</main>\n"
    ),
    "post": (
        "<article>\n"
        '<a id="hello" href="{{ post(\'2024-01-01-hello\') }}">Hello</a>\n'
        '<img id="cover" src="{{ asset(\'images/cover.png\') }}">\n'
        "</article>\n"
    ),
}


@pytest.fixture
def project() -> ProjectInfo:
    """Return project metadata rooted at ``/blog/``."""
    return ProjectInfo(
        site_name="Fixture Site",
        site_description="Fixture description",
        author="Fixture Author",
        author_email="author@example.invalid",
        base_url=BASE_URL,
    )


def write_templates(src: Path, sources: typ.Mapping[str, str]) -> None:
    """Write ``sources`` as ``<name>.html.eex`` files under ``src/templates``."""
    templates_dir = src / "templates"
    templates_dir.mkdir(parents=True, exist_ok=True)
    for name, source in sources.items():
        (templates_dir / f"{name}.html.eex").write_text(source, encoding="utf-8")


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Create a source tree with valid templates and nested page sources."""
    src = tmp_path / "site"
    write_templates(src, TEMPLATE_SOURCES)
    pages = src / "pages"
    (pages / "docs" / "guides").mkdir(parents=True)
    (pages / "media").mkdir()
    (pages / "index.md").write_text("*Hello*\n", encoding="utf-8")
    (pages / "about.html").write_text("<p>About</p>\n", encoding="utf-8")
    (pages / "pages.json").write_text("[]\n", encoding="utf-8")
    (pages / "docs" / "intro.md").write_text("# Intro\n", encoding="utf-8")
    (pages / "docs" / "guides" / "setup.md").write_text("# Setup\n", encoding="utf-8")
    (pages / "media" / "logo.png").write_bytes(b"\x89PNG")
    return src


@pytest.fixture
def build_state(site_root: Path, project: ProjectInfo) -> BuildState:
    """Return a fresh build state for the fixture site."""
    return BuildState(src=site_root, dest=site_root.parent / "public", project=project)


def make_page(name: str, order: int, *, menu: bool = True) -> PageRecord:
    """Build a page record with derived paths."""
    return PageRecord(
        name=name,
        type="md",
        title=name.title(),
        order=order,
        menu=menu,
        menu_text=name.title(),
        menu_icon="",
        file=Path("pages") / f"{name}.md",
        output=Path("public") / f"{name}.html",
    )


def make_post(title: str, date: str, tags: typ.Iterable[str] = ()) -> PostRecord:
    """Build a post record dated ``date`` (ISO format) carrying ``tags``."""
    raw_date = dt.datetime.fromisoformat(date)
    return PostRecord(
        title=title,
        raw_date=raw_date,
        tags=frozenset(tags),
        file=Path("posts") / f"{title}.md",
        output=Path("public") / "posts" / f"{title}.html",
        url=f"{BASE_URL}posts/{title}.html",
        date=raw_date.strftime("%Y-%m-%d"),
    )


@pytest.fixture(name="make_page")
def make_page_fixture() -> typ.Callable[..., PageRecord]:
    """Expose :func:`make_page` to tests."""
    return make_page


@pytest.fixture(name="make_post")
def make_post_fixture() -> typ.Callable[..., PostRecord]:
    """Expose :func:`make_post` to tests."""
    return make_post


@pytest.fixture(name="write_templates")
def write_templates_fixture() -> typ.Callable[[Path, typ.Mapping[str, str]], None]:
    """Expose :func:`write_templates` to tests."""
    return write_templates


@pytest.fixture(autouse=True)
def _system_timezone(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test against the system zone rather than an inherited ``TZ``."""
    monkeypatch.delenv("TZ", raising=False)
