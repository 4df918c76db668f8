"""Fixtures for exercising the HTTP API against a temporary projects directory."""

import pytest
from httpx import ASGITransport, AsyncClient

from catalog_api.config import Settings, get_settings
from catalog_api.main import app

PROJECT = "demo"


@pytest.fixture
def settings(tmp_path) -> Settings:
    (tmp_path / PROJECT).mkdir()
    return Settings(projects_dir=str(tmp_path), default_project=None, max_snapshots=5)


@pytest.fixture
def api_app(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client_factory(api_app):
    def _client(project: str | None = PROJECT) -> AsyncClient:
        headers = {"X-Project": project} if project else {}
        return AsyncClient(transport=ASGITransport(app=api_app), base_url="http://test", headers=headers)

    return _client
