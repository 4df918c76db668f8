"""Unit tests for per-request project resolution."""

import pytest

from catalog_api.config import Settings
from catalog_api.domain.exceptions import EntityNotFoundError, NoProjectSelectedError
from catalog_api.infrastructure.project_context import resolve_project


@pytest.fixture
def settings(tmp_path) -> Settings:
    (tmp_path / "demo").mkdir()
    (tmp_path / "notes.txt").write_text("not a project")
    return Settings(projects_dir=str(tmp_path), default_project=None)


def test_resolves_existing_project(settings, tmp_path):
    ctx = resolve_project("demo", settings)
    assert ctx.name == "demo"
    assert ctx.paths.root == (tmp_path / "demo").resolve()
    assert ctx.paths.actors.name == "actors.jsonl"


def test_no_project_selected(settings):
    with pytest.raises(NoProjectSelectedError):
        resolve_project(None, settings)
    with pytest.raises(NoProjectSelectedError):
        resolve_project("   ", settings)


def test_falls_back_to_default_project(tmp_path):
    (tmp_path / "demo").mkdir()
    settings = Settings(projects_dir=str(tmp_path), default_project="demo")
    assert resolve_project(None, settings).name == "demo"


@pytest.mark.parametrize("name", ["missing", "notes.txt", "../demo", "demo/../../etc"])
def test_unknown_or_escaping_names(settings, name):
    with pytest.raises(EntityNotFoundError):
        resolve_project(name, settings)
