"""Undo/redo stacks persisted as JSONL — one full snapshot per line."""

import logging

from pydantic import ValidationError

from catalog_api.application.interfaces import SnapshotStore
from catalog_api.application.schemas.records import SnapshotRecord
from catalog_api.domain.entities import HistoryStack, Snapshot
from catalog_api.domain.exceptions import SnapshotPersistenceError
from catalog_api.infrastructure.storage.jsonl_store import JsonlCollection
from catalog_api.infrastructure.storage.project_paths import ProjectPaths

logger = logging.getLogger(__name__)


class JsonlSnapshotStore(SnapshotStore):
    """Implements the SnapshotStore port with ``snapshots.jsonl`` / ``redo-snapshots.jsonl``."""

    def __init__(self, paths: ProjectPaths):
        self._stacks = {
            HistoryStack.UNDO: JsonlCollection(paths.undo_snapshots),
            HistoryStack.REDO: JsonlCollection(paths.redo_snapshots),
        }

    async def load(self, stack: HistoryStack) -> list[Snapshot]:
        collection = self._stacks[stack]
        snapshots: list[Snapshot] = []
        try:
            raws = collection.read_all()
        except (OSError, ValueError) as exc:
            raise SnapshotPersistenceError(stack.value, str(exc)) from exc
        for raw in raws:
            try:
                snapshots.append(SnapshotRecord.model_validate(raw).to_entity())
            except (ValidationError, ValueError) as exc:
                logger.warning(
                    "Dropping unreadable %s snapshot %s: %s",
                    stack.value,
                    raw.get("id", "?"),
                    exc,
                )
        return snapshots

    async def write(self, stack: HistoryStack, snapshots: list[Snapshot]) -> None:
        collection = self._stacks[stack]
        records = [SnapshotRecord.from_entity(s).to_wire() for s in snapshots]
        try:
            collection.write_all(records)
        except OSError as exc:
            raise SnapshotPersistenceError(stack.value, str(exc)) from exc
