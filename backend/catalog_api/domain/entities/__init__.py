from .provider_settings import (
    CustomSettings,
    InheritSettings,
    MediaType,
    OwnerType,
    ProviderBlock,
    ProviderSettings,
)
from .actor import Actor, slugify_filename
from .scene import Scene
from .bin import Bin
from .media import Media
from .take import Take, TakeStatus
from .snapshot import (
    CatalogState,
    HistoryStack,
    HistoryState,
    HistoryTransition,
    Snapshot,
    SnapshotSaveResult,
)
from .history_entry import HistoryEntry, HistoryEntryType, HistoryLevel
from .project_defaults import BUILTIN_PROVIDER_SETTINGS, ProjectDefaults

__all__ = [
    "CustomSettings",
    "InheritSettings",
    "MediaType",
    "OwnerType",
    "ProviderBlock",
    "ProviderSettings",
    "Actor",
    "slugify_filename",
    "Scene",
    "Bin",
    "Media",
    "Take",
    "TakeStatus",
    "CatalogState",
    "HistoryStack",
    "HistoryState",
    "HistoryTransition",
    "Snapshot",
    "SnapshotSaveResult",
    "HistoryEntry",
    "HistoryEntryType",
    "HistoryLevel",
    "BUILTIN_PROVIDER_SETTINGS",
    "ProjectDefaults",
]
