"""Shared fixtures: a throwaway project directory wired to the JSONL adapters."""

import pytest

from catalog_api.application.schemas import ActorRecord, BinRecord, MediaRecord, SceneRecord, TakeRecord
from catalog_api.application.services import CatalogReader, SnapshotManager
from catalog_api.domain.entities import HistoryStack, Snapshot
from catalog_api.domain.exceptions import SnapshotPersistenceError
from catalog_api.infrastructure.storage import (
    JsonDefaultsRepository,
    JsonlCatalogRepository,
    JsonlCollection,
    JsonlSnapshotStore,
    JsonlTakeRepository,
    ProjectPaths,
)
from catalog_api.infrastructure.storage.jsonl_catalog_repository import dump_records


@pytest.fixture
def paths(tmp_path) -> ProjectPaths:
    root = tmp_path / "demo"
    root.mkdir()
    return ProjectPaths(root)


@pytest.fixture
def repository(paths) -> JsonlCatalogRepository:
    return JsonlCatalogRepository(paths)


@pytest.fixture
def take_repository(paths) -> JsonlTakeRepository:
    return JsonlTakeRepository(paths)


@pytest.fixture
def defaults_repository(paths) -> JsonDefaultsRepository:
    return JsonDefaultsRepository(paths)


@pytest.fixture
def reader(repository) -> CatalogReader:
    return CatalogReader(repository)


@pytest.fixture
def snapshots(paths, repository, reader) -> SnapshotManager:
    return SnapshotManager(JsonlSnapshotStore(paths), repository, reader, max_snapshots=50)


def seed(paths: ProjectPaths, *, actors=(), scenes=(), bins=(), media=(), takes=()) -> None:
    """Write entities straight to disk, bypassing services and history."""
    for path, entities, record_cls in (
        (paths.actors, actors, ActorRecord),
        (paths.scenes, scenes, SceneRecord),
        (paths.bins, bins, BinRecord),
        (paths.media, media, MediaRecord),
        (paths.takes, takes, TakeRecord),
    ):
        if entities:
            JsonlCollection(path).write_all(dump_records(list(entities), record_cls))


@pytest.fixture
def seed_catalog(paths):
    def _seed(**collections) -> None:
        seed(paths, **collections)

    return _seed


class FailingSnapshotStore(JsonlSnapshotStore):
    """Reads work, every write fails."""

    async def write(self, stack: HistoryStack, snapshots: list[Snapshot]) -> None:
        raise SnapshotPersistenceError(stack.value, "disk full")


@pytest.fixture
def broken_snapshots(paths, repository, reader) -> SnapshotManager:
    return SnapshotManager(FailingSnapshotStore(paths), repository, reader)
