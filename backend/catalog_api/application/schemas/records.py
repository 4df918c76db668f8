"""Pydantic record schemas — the validated, stored form of every entity.

Each record converts from a domain entity (``from_entity``), back to one
(``to_entity``), and to its JSON-safe wire dict (``to_wire``). Services use
:func:`validate_entity` to check a freshly built entity before writing it.
"""

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, ValidationError, field_validator, model_validator

from catalog_api.domain.entities import (
    Actor,
    Bin,
    CatalogState,
    CustomSettings,
    HistoryEntry,
    HistoryEntryType,
    HistoryLevel,
    InheritSettings,
    Media,
    MediaType,
    OwnerType,
    ProjectDefaults,
    Scene,
    Snapshot,
    Take,
    TakeStatus,
)
from catalog_api.domain.entities.provider_settings import dump_block, parse_provider_settings
from catalog_api.domain.exceptions import ValidationFailedError


def format_validation_errors(exc: ValidationError) -> list[str]:
    """Flatten a pydantic error into ``"field: message"`` lines."""
    lines = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "record"
        lines.append(f"{location}: {error['msg']}")
    return lines


def _dump_block_map(value: Any) -> Any:
    """Accept tagged-variant blocks as well as raw dicts."""
    if value is None:
        return {}
    if isinstance(value, dict):
        return {
            key: dump_block(block) if isinstance(block, (InheritSettings, CustomSettings)) else block
            for key, block in value.items()
        }
    return value


class _Record(BaseModel):
    model_config = {"from_attributes": True}

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class _ProviderSettingsRecord(_Record):
    """Mixin for records carrying a ``provider_settings`` map."""

    provider_settings: dict[str, dict[str, Any]] = Field(default_factory=dict)

    @field_validator("provider_settings", mode="before")
    @classmethod
    def _dump_blocks(cls, value: Any) -> Any:
        return _dump_block_map(value)

    @field_validator("provider_settings")
    @classmethod
    def _check_blocks(cls, value: dict[str, dict[str, Any]]) -> dict[str, dict[str, Any]]:
        parse_provider_settings(value)
        return value


class _OwnedRecord(_ProviderSettingsRecord):
    owner_type: OwnerType
    owner_id: str | None = None

    @model_validator(mode="after")
    def _owner_id_matches_type(self) -> "_OwnedRecord":
        if self.owner_type == OwnerType.GLOBAL:
            if self.owner_id is not None:
                raise ValueError("owner_id must be null for global owners")
        elif not self.owner_id:
            raise ValueError(f"owner_id is required for {self.owner_type.value} owners")
        return self


class ActorRecord(_ProviderSettingsRecord):
    id: str = Field(min_length=1)
    display_name: str = Field(min_length=1, max_length=100)
    base_filename: str = Field(min_length=1, max_length=50)
    actor_complete: bool = False
    notes: str = ""
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, actor: Actor) -> "ActorRecord":
        return cls.model_validate(actor, from_attributes=True)

    def to_entity(self) -> Actor:
        return Actor(
            id=self.id,
            display_name=self.display_name,
            base_filename=self.base_filename,
            provider_settings=parse_provider_settings(self.provider_settings),
            actor_complete=self.actor_complete,
            notes=self.notes,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class SceneRecord(_ProviderSettingsRecord):
    id: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=100)
    description: str | None = None
    scene_complete: bool = False
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, scene: Scene) -> "SceneRecord":
        return cls.model_validate(scene, from_attributes=True)

    def to_entity(self) -> Scene:
        return Scene(
            id=self.id,
            name=self.name,
            description=self.description,
            provider_settings=parse_provider_settings(self.provider_settings),
            scene_complete=self.scene_complete,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class BinRecord(_OwnedRecord):
    id: str = Field(min_length=1)
    media_type: MediaType
    name: str = Field(min_length=1, max_length=100)
    bin_complete: bool = False
    scene_id: str | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, bin_: Bin) -> "BinRecord":
        return cls.model_validate(bin_, from_attributes=True)

    def to_entity(self) -> Bin:
        return Bin(
            id=self.id,
            owner_type=self.owner_type,
            owner_id=self.owner_id,
            media_type=self.media_type,
            name=self.name,
            provider_settings=parse_provider_settings(self.provider_settings),
            bin_complete=self.bin_complete,
            scene_id=self.scene_id,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class MediaRecord(_OwnedRecord):
    id: str = Field(min_length=1)
    bin_id: str | None = None
    media_type: MediaType
    name: str = Field(min_length=1, max_length=100)
    prompt: str | None = None
    filename: str | None = None
    all_approved: bool = False
    scene_id: str | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, media: Media) -> "MediaRecord":
        return cls.model_validate(media, from_attributes=True)

    def to_entity(self) -> Media:
        return Media(
            id=self.id,
            owner_type=self.owner_type,
            owner_id=self.owner_id,
            bin_id=self.bin_id,
            media_type=self.media_type,
            name=self.name,
            prompt=self.prompt,
            filename=self.filename,
            provider_settings=parse_provider_settings(self.provider_settings),
            all_approved=self.all_approved,
            scene_id=self.scene_id,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class TakeRecord(_Record):
    id: str = Field(min_length=1)
    media_id: str = Field(min_length=1)
    take_number: int = Field(ge=1)
    filename: str = Field(min_length=1)
    path: str = Field(min_length=1)
    format: str = "wav"
    size_bytes: int = Field(default=0, ge=0)
    duration_sec: float | None = Field(default=None, ge=0)
    status: TakeStatus = TakeStatus.NEW
    status_changed_at: datetime | None = None
    generation_params: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, take: Take) -> "TakeRecord":
        return cls.model_validate(take, from_attributes=True)

    def to_entity(self) -> Take:
        return Take(**self.model_dump())


class SnapshotRecord(_Record):
    id: str
    timestamp: datetime
    message: str
    actors: list[ActorRecord] = Field(default_factory=list)
    bins: list[BinRecord] = Field(default_factory=list)
    media: list[MediaRecord] = Field(default_factory=list)
    scenes: list[SceneRecord] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, snapshot: Snapshot) -> "SnapshotRecord":
        catalog = snapshot.catalog
        return cls(
            id=snapshot.id,
            timestamp=snapshot.timestamp,
            message=snapshot.message,
            actors=[ActorRecord.from_entity(a) for a in catalog.actors],
            bins=[BinRecord.from_entity(b) for b in catalog.bins],
            media=[MediaRecord.from_entity(m) for m in catalog.media],
            scenes=[SceneRecord.from_entity(s) for s in catalog.scenes],
        )

    def to_entity(self) -> Snapshot:
        return Snapshot(
            id=self.id,
            timestamp=self.timestamp,
            message=self.message,
            catalog=CatalogState(
                actors=[r.to_entity() for r in self.actors],
                bins=[r.to_entity() for r in self.bins],
                media=[r.to_entity() for r in self.media],
                scenes=[r.to_entity() for r in self.scenes],
            ),
        )


class HistoryEntryRecord(_Record):
    id: str = Field(min_length=1)
    entry_type: HistoryEntryType = HistoryEntryType.OPERATION
    timestamp: datetime
    level: HistoryLevel = HistoryLevel.INFO
    message: str
    details: dict[str, Any] | None = None
    undone: bool = False
    undo_of: str | None = None
    redo_of: str | None = None

    @classmethod
    def from_entity(cls, entry: HistoryEntry) -> "HistoryEntryRecord":
        return cls.model_validate(entry, from_attributes=True)

    def to_entity(self) -> HistoryEntry:
        return HistoryEntry(**self.model_dump())


class ProjectDefaultsRecord(_Record):
    schema_version: str = "2.0.0"
    media_types: dict[str, dict[str, Any]] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("media_types", "content_types"),
    )

    @field_validator("media_types", mode="before")
    @classmethod
    def _dump_blocks(cls, value: Any) -> Any:
        return _dump_block_map(value)

    @field_validator("media_types")
    @classmethod
    def _custom_only(cls, value: dict[str, dict[str, Any]]) -> dict[str, dict[str, Any]]:
        for media_type, block in parse_provider_settings(value).items():
            if isinstance(block, InheritSettings):
                raise ValueError(f"project defaults for '{media_type}' cannot inherit")
        return value

    @classmethod
    def from_entity(cls, defaults: ProjectDefaults) -> "ProjectDefaultsRecord":
        return cls.model_validate(defaults, from_attributes=True)

    def to_entity(self) -> ProjectDefaults:
        return ProjectDefaults(
            schema_version=self.schema_version,
            media_types=parse_provider_settings(self.media_types),
        )


def validate_entity(record_cls: type[_Record], entity: Any, entity_type: str) -> None:
    """Raise ValidationFailedError with field-level detail if ``entity`` is invalid."""
    try:
        record_cls.model_validate(entity, from_attributes=True)
    except ValidationError as exc:
        raise ValidationFailedError(
            f"Invalid {entity_type} data", format_validation_errors(exc)
        ) from exc
