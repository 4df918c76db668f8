from .project_paths import ProjectPaths
from .jsonl_store import JsonlCollection
from .jsonl_catalog_repository import JsonlCatalogRepository, JsonlTakeRepository
from .jsonl_snapshot_store import JsonlSnapshotStore
from .jsonl_history_log_repository import JsonlHistoryLogRepository
from .json_defaults_repository import JsonDefaultsRepository

__all__ = [
    "ProjectPaths",
    "JsonlCollection",
    "JsonlCatalogRepository",
    "JsonlTakeRepository",
    "JsonlSnapshotStore",
    "JsonlHistoryLogRepository",
    "JsonDefaultsRepository",
]
