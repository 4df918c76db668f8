from .records import (
    ActorRecord,
    BinRecord,
    HistoryEntryRecord,
    MediaRecord,
    ProjectDefaultsRecord,
    SceneRecord,
    SnapshotRecord,
    TakeRecord,
    format_validation_errors,
    validate_entity,
)
from .catalog import (
    ActorCreate,
    ActorCreateResponse,
    ActorRestoreRequest,
    ActorUpdate,
    BinCreate,
    BinUpdate,
    MediaCreate,
    MediaCreateResponse,
    MediaUpdate,
    ProviderBlockUpdate,
    ResolvedSettingsResponse,
    SceneCreate,
    SceneUpdate,
    TakeUpdate,
)
from .history import (
    HistoryEntryCreate,
    HistoryEntryUpdate,
    HistoryTransitionResponse,
    SnapshotStateResponse,
)

__all__ = [
    "ActorRecord",
    "BinRecord",
    "HistoryEntryRecord",
    "MediaRecord",
    "ProjectDefaultsRecord",
    "SceneRecord",
    "SnapshotRecord",
    "TakeRecord",
    "format_validation_errors",
    "validate_entity",
    "ActorCreate",
    "ActorCreateResponse",
    "ActorRestoreRequest",
    "ActorUpdate",
    "BinCreate",
    "BinUpdate",
    "MediaCreate",
    "MediaCreateResponse",
    "MediaUpdate",
    "ProviderBlockUpdate",
    "ResolvedSettingsResponse",
    "SceneCreate",
    "SceneUpdate",
    "TakeUpdate",
    "HistoryEntryCreate",
    "HistoryEntryUpdate",
    "HistoryTransitionResponse",
    "SnapshotStateResponse",
]
