from .catalog_reader import CatalogReader
from .snapshot_manager import SnapshotManager
from .actor_service import ActorService, ActorCreateResult, ActorRestoreResult
from .scene_service import SceneService
from .bin_service import BinService
from .media_service import MediaService, MediaCreateResult
from .take_service import TakeService
from .history_service import HistoryService
from .defaults_service import DefaultsService
from .provider_settings_resolver import ResolvedSettings, resolve_provider_settings

__all__ = [
    "CatalogReader",
    "SnapshotManager",
    "ActorService",
    "ActorCreateResult",
    "ActorRestoreResult",
    "SceneService",
    "BinService",
    "MediaService",
    "MediaCreateResult",
    "TakeService",
    "HistoryService",
    "DefaultsService",
    "ResolvedSettings",
    "resolve_provider_settings",
]
