"""Pydantic DTOs for undo/redo state and the audit history log."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from catalog_api.application.schemas.records import (
    ActorRecord,
    BinRecord,
    MediaRecord,
    SceneRecord,
)
from catalog_api.domain.entities import (
    HistoryEntryType,
    HistoryLevel,
    HistoryState,
    HistoryTransition,
)


class SnapshotStateResponse(BaseModel):
    """Stack heads as the client expects them (``canUndo``, ``undoMessage`` …)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    count: int
    can_undo: bool
    undo_message: str | None = None
    redo_count: int = 0
    can_redo: bool
    redo_message: str | None = None

    @classmethod
    def from_state(cls, state: HistoryState) -> "SnapshotStateResponse":
        return cls(
            count=state.count,
            can_undo=state.can_undo,
            undo_message=state.undo_message,
            redo_count=state.redo_count,
            can_redo=state.can_redo,
            redo_message=state.redo_message,
        )


class HistoryTransitionResponse(SnapshotStateResponse):
    """Restored catalog after an undo or redo, plus the new stack heads."""

    success: bool = True
    message: str
    snapshot_id: str
    timestamp: datetime
    actors: list[ActorRecord]
    bins: list[BinRecord]
    media: list[MediaRecord]
    scenes: list[SceneRecord]

    @classmethod
    def from_transition(cls, transition: HistoryTransition, verb: str) -> "HistoryTransitionResponse":
        snapshot, catalog, state = transition.snapshot, transition.catalog, transition.state
        return cls(
            message=f"{verb}: {snapshot.message}",
            snapshot_id=snapshot.id,
            timestamp=snapshot.timestamp,
            actors=[ActorRecord.from_entity(a) for a in catalog.actors],
            bins=[BinRecord.from_entity(b) for b in catalog.bins],
            media=[MediaRecord.from_entity(m) for m in catalog.media],
            scenes=[SceneRecord.from_entity(s) for s in catalog.scenes],
            count=state.count,
            can_undo=state.can_undo,
            undo_message=state.undo_message,
            redo_count=state.redo_count,
            can_redo=state.can_redo,
            redo_message=state.redo_message,
        )


class HistoryEntryCreate(BaseModel):
    id: str | None = Field(None, min_length=1)
    entry_type: HistoryEntryType = HistoryEntryType.OPERATION
    level: HistoryLevel = HistoryLevel.INFO
    message: str = Field(..., min_length=1)
    details: dict[str, Any] | None = None
    undo_of: str | None = None
    redo_of: str | None = None


class HistoryEntryUpdate(BaseModel):
    """Partial update — typically flipping ``undone``."""

    level: HistoryLevel | None = None
    message: str | None = Field(None, min_length=1)
    details: dict[str, Any] | None = None
    undone: bool | None = None
    undo_of: str | None = None
    redo_of: str | None = None
