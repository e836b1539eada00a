"""Tests for loading the project file."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from quire.config import DEFAULT_PROJECT_FILE, ProjectConfigError, load_project_info


def test_loads_yaml_project_file(tmp_path: Path) -> None:
    """All metadata fields are read from YAML."""
    path = tmp_path / "site.yaml"
    path.write_text(
        "site_name: My Site\n"
        "site_description: Notes and essays\n"
        "author: Somebody\n"
        "author_email: somebody@example.invalid\n"
        "base_url: /blog/\n",
        encoding="utf-8",
    )
    project = load_project_info(path)
    assert project.site_name == "My Site"
    assert project.site_description == "Notes and essays"
    assert project.author == "Somebody"
    assert project.author_email == "somebody@example.invalid"
    assert project.base_url == "/blog/"


def test_loads_json_project_file(tmp_path: Path) -> None:
    """JSON project files parse through the YAML 1.2 loader."""
    path = tmp_path / "site.json"
    path.write_text(
        json.dumps({"site_name": "New Website", "base_url": "/"}, indent=2),
        encoding="utf-8",
    )
    project = load_project_info(path)
    assert project.site_name == "New Website"
    assert project.base_url == "/"
    assert project.author == "", "optional fields should default to ''"


def test_missing_required_fields_are_reported(tmp_path: Path) -> None:
    """Both required fields are named when absent."""
    path = tmp_path / "site.yaml"
    path.write_text("author: Somebody\n", encoding="utf-8")
    with pytest.raises(ProjectConfigError, match="site_name, base_url"):
        load_project_info(path)


def test_missing_file_raises(tmp_path: Path) -> None:
    """A missing project file is reported before parsing."""
    with pytest.raises(FileNotFoundError):
        load_project_info(tmp_path / "site.yaml")


def test_non_mapping_document_is_rejected(tmp_path: Path) -> None:
    """The project document must be a mapping."""
    path = tmp_path / "site.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(TypeError):
        load_project_info(path)


def test_base_url_without_trailing_slash_warns(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Base URLs are kept verbatim but a missing slash is logged."""
    path = tmp_path / "site.yaml"
    path.write_text("site_name: S\nbase_url: /blog\n", encoding="utf-8")
    with caplog.at_level("WARNING", logger="quire.config.loader"):
        project = load_project_info(path)
    assert project.base_url == "/blog"
    assert "does not end with '/'" in caplog.text


def test_defaults_to_site_yaml_in_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Without a path the loader reads ``site.yaml`` from the cwd."""
    (tmp_path / DEFAULT_PROJECT_FILE).write_text(
        "site_name: Default Site\nbase_url: /\n", encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)
    assert load_project_info().site_name == "Default Site"
