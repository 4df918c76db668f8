"""Domain entities for catalog snapshots and the undo/redo history."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from .actor import Actor
from .bin import Bin
from .media import Media
from .scene import Scene


class HistoryStack(str, Enum):
    """The two persisted history stacks of a project."""

    UNDO = "undo"
    REDO = "redo"


@dataclass
class CatalogState:
    """All snapshot-able collections of one project at one instant.

    Takes are deliberately not part of it.
    """

    actors: list[Actor] = field(default_factory=list)
    bins: list[Bin] = field(default_factory=list)
    media: list[Media] = field(default_factory=list)
    scenes: list[Scene] = field(default_factory=list)

    def find_actor(self, actor_id: str | None) -> Actor | None:
        return next((a for a in self.actors if a.id == actor_id), None)

    def find_scene(self, scene_id: str | None) -> Scene | None:
        return next((s for s in self.scenes if s.id == scene_id), None)

    def find_bin(self, bin_id: str | None) -> Bin | None:
        return next((b for b in self.bins if b.id == bin_id), None)

    def find_media(self, media_id: str | None) -> Media | None:
        return next((m for m in self.media if m.id == media_id), None)


@dataclass(frozen=True)
class Snapshot:
    """Immutable copy of the catalog tagged with the action that followed it."""

    message: str
    catalog: CatalogState
    id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class HistoryState:
    """Read-only view of both stacks, used to drive undo/redo affordances."""

    count: int = 0
    can_undo: bool = False
    undo_message: str | None = None
    redo_count: int = 0
    can_redo: bool = False
    redo_message: str | None = None

    @classmethod
    def from_stacks(cls, undo: list[Snapshot], redo: list[Snapshot]) -> "HistoryState":
        return cls(
            count=len(undo),
            can_undo=bool(undo),
            undo_message=undo[-1].message if undo else None,
            redo_count=len(redo),
            can_redo=bool(redo),
            redo_message=redo[-1].message if redo else None,
        )


@dataclass(frozen=True)
class HistoryTransition:
    """Outcome of an undo or redo: the snapshot applied and the new stack heads."""

    snapshot: Snapshot
    catalog: CatalogState
    state: HistoryState


@dataclass(frozen=True)
class SnapshotSaveResult:
    """Best-effort outcome of saving a pre-mutation snapshot.

    ``saved`` is False when persistence failed; the mutation that asked for
    the snapshot goes ahead regardless.
    """

    saved: bool
    snapshot_id: str | None = None
    error: str | None = None
