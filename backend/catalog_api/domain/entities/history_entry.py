"""Domain entity for the client-facing audit history log."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4


class HistoryEntryType(str, Enum):
    OPERATION = "operation"
    UNDO = "undo"
    REDO = "redo"
    LOG = "log"


class HistoryLevel(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"


@dataclass
class HistoryEntry:
    """One line of the audit trail shown next to the catalog."""

    message: str
    entry_type: HistoryEntryType = HistoryEntryType.OPERATION
    level: HistoryLevel = HistoryLevel.INFO
    details: dict[str, Any] | None = None
    undone: bool = False
    undo_of: str | None = None
    redo_of: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
