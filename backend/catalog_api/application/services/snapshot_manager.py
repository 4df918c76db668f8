"""Snapshot-based undo/redo for one project's catalog.

Two bounded stacks (undo, redo) of full catalog copies, persisted through
the SnapshotStore port. Every mutation saves the pre-mutation catalog on the
undo stack and empties the redo stack. Undo and redo move the current
catalog onto the opposite stack under the same message, then overwrite the
catalog with the popped snapshot.

Takes are not part of a snapshot.
"""

import copy

from catalog_api.application.interfaces import CatalogRepository, SnapshotStore
from catalog_api.application.services.catalog_reader import CatalogReader
from catalog_api.domain.entities import (
    CatalogState,
    HistoryStack,
    HistoryState,
    HistoryTransition,
    Snapshot,
    SnapshotSaveResult,
)
from catalog_api.domain.exceptions import (
    NothingToRedoError,
    NothingToUndoError,
    SnapshotPersistenceError,
)
from catalog_api.infrastructure.logging.colored_logger import HistoryLogger, HistoryStage

DEFAULT_MAX_SNAPSHOTS = 50

hlog = HistoryLogger("SnapshotManager")


class SnapshotManager:
    """Maintains the undo and redo stacks of a project."""

    def __init__(
        self,
        store: SnapshotStore,
        repository: CatalogRepository,
        reader: CatalogReader,
        max_snapshots: int = DEFAULT_MAX_SNAPSHOTS,
    ):
        self._store = store
        self._repository = repository
        self._reader = reader
        self._max_snapshots = max(1, max_snapshots)

    @property
    def max_snapshots(self) -> int:
        return self._max_snapshots

    async def save(self, message: str, catalog: CatalogState) -> SnapshotSaveResult:
        """Push the pre-mutation ``catalog`` onto the undo stack.

        Best-effort: a failure is logged and reported in the result, never
        raised, so the calling mutation always goes ahead.
        """
        try:
            await self._store.write(HistoryStack.REDO, [])

            snapshot = Snapshot(message=message, catalog=copy.deepcopy(catalog))
            undo = await self._store.load(HistoryStack.UNDO)
            undo.append(snapshot)
            undo = self._bounded(undo)
            await self._store.write(HistoryStack.UNDO, undo)
        except (SnapshotPersistenceError, OSError, ValueError) as exc:
            hlog.step_error(HistoryStage.SNAPSHOT, f"Snapshot not saved: {message}", error=exc)
            return SnapshotSaveResult(saved=False, error=str(exc))

        hlog.step(HistoryStage.SNAPSHOT, message, depth=len(undo))
        return SnapshotSaveResult(saved=True, snapshot_id=snapshot.id)

    async def undo(self) -> HistoryTransition:
        undo = await self._store.load(HistoryStack.UNDO)
        if not undo:
            raise NothingToUndoError()

        snapshot = undo.pop()
        redo = await self._push_current(HistoryStack.REDO, snapshot.message)
        await self._restore(snapshot.catalog)
        await self._store.write(HistoryStack.UNDO, undo)

        hlog.step(HistoryStage.UNDO, snapshot.message, remaining=len(undo), redo=len(redo))
        return HistoryTransition(
            snapshot=snapshot,
            catalog=snapshot.catalog,
            state=HistoryState.from_stacks(undo, redo),
        )

    async def redo(self) -> HistoryTransition:
        redo = await self._store.load(HistoryStack.REDO)
        if not redo:
            raise NothingToRedoError()

        snapshot = redo.pop()
        undo = await self._push_current(HistoryStack.UNDO, snapshot.message)
        await self._restore(snapshot.catalog)
        await self._store.write(HistoryStack.REDO, redo)

        hlog.step(HistoryStage.REDO, snapshot.message, remaining=len(redo), undo=len(undo))
        return HistoryTransition(
            snapshot=snapshot,
            catalog=snapshot.catalog,
            state=HistoryState.from_stacks(undo, redo),
        )

    async def refresh_state(self) -> HistoryState:
        """Read-only view of both stack heads."""
        undo = await self._store.load(HistoryStack.UNDO)
        redo = await self._store.load(HistoryStack.REDO)
        return HistoryState.from_stacks(undo, redo)

    async def clear(self) -> HistoryState:
        """Forget the undo history; the redo stack is left alone."""
        await self._store.write(HistoryStack.UNDO, [])
        hlog.detail("Undo stack cleared")
        return await self.refresh_state()

    async def _push_current(self, stack: HistoryStack, message: str) -> list[Snapshot]:
        """Append the live catalog to ``stack`` under ``message``; returns the new stack."""
        current = await self._reader.read_catalog()
        snapshots = await self._store.load(stack)
        snapshots.append(Snapshot(message=message, catalog=current))
        snapshots = self._bounded(snapshots)
        await self._store.write(stack, snapshots)
        return snapshots

    async def _restore(self, catalog: CatalogState) -> None:
        await self._repository.replace_actors(catalog.actors)
        await self._repository.replace_bins(catalog.bins)
        await self._repository.replace_media(catalog.media)
        await self._repository.replace_scenes(catalog.scenes)
        hlog.detail(
            "Catalog restored",
            actors=len(catalog.actors),
            bins=len(catalog.bins),
            media=len(catalog.media),
            scenes=len(catalog.scenes),
        )

    def _bounded(self, snapshots: list[Snapshot]) -> list[Snapshot]:
        if len(snapshots) > self._max_snapshots:
            return snapshots[-self._max_snapshots:]
        return snapshots
