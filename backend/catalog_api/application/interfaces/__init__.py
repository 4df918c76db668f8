from .catalog_repository import CatalogRepository
from .take_repository import TakeRepository
from .snapshot_store import SnapshotStore
from .history_log_repository import HistoryLogRepository
from .defaults_repository import DefaultsRepository

__all__ = [
    "CatalogRepository",
    "TakeRepository",
    "SnapshotStore",
    "HistoryLogRepository",
    "DefaultsRepository",
]
