"""Domain entity for takes — generated renditions of a media item."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4


class TakeStatus(str, Enum):
    """Review states of a take."""

    NEW = "new"
    APPROVED = "approved"
    REJECTED = "rejected"
    HIDDEN = "hidden"


@dataclass
class Take:
    """A generated file for a media item.

    Takes live outside the catalog snapshot: undo and redo never restore
    them, while cascading deletes do remove them.
    """

    media_id: str
    take_number: int
    filename: str
    path: str
    format: str = "wav"
    size_bytes: int = 0
    duration_sec: float | None = None
    status: TakeStatus = TakeStatus.NEW
    status_changed_at: datetime | None = None
    generation_params: dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def set_status(self, status: TakeStatus) -> None:
        if status != self.status:
            self.status = status
            self.status_changed_at = datetime.now(timezone.utc)

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
