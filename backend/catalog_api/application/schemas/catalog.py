"""Pydantic DTOs (Data Transfer Objects) for the catalog endpoints."""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from catalog_api.application.schemas.records import (
    ActorRecord,
    BinRecord,
    MediaRecord,
    SceneRecord,
)
from catalog_api.domain.entities import MediaType, OwnerType, TakeStatus
from catalog_api.domain.entities.provider_settings import parse_provider_settings


class _ProviderSettingsInput(BaseModel):
    """Validates an optional ``{media_type: block}`` map on input."""

    provider_settings: dict[str, dict[str, Any]] | None = None

    @field_validator("provider_settings")
    @classmethod
    def _check_blocks(cls, value: dict[str, dict[str, Any]] | None) -> dict[str, dict[str, Any]] | None:
        if value is not None:
            parse_provider_settings(value)
        return value


# ── Actors ───────────────────────────────────────────────────────────

class ActorCreate(_ProviderSettingsInput):
    """``display_name`` may hold several comma-separated names."""

    display_name: str = Field(..., min_length=1, examples=["Alice, Bob"])
    base_filename: str | None = Field(None, max_length=50)
    notes: str = ""


class ActorUpdate(_ProviderSettingsInput):
    """Schema for updating an actor — all fields optional."""

    display_name: str | None = Field(None, min_length=1, max_length=100)
    base_filename: str | None = Field(None, min_length=1, max_length=50)
    actor_complete: bool | None = None
    notes: str | None = None


class ActorCreateResponse(BaseModel):
    actors: list[ActorRecord]
    duplicates_skipped: list[str] = Field(default_factory=list)
    message: str | None = None


class ActorRestoreRequest(BaseModel):
    """A previously deleted actor with the bins and media it owned."""

    actor: ActorRecord
    bins: list[BinRecord] = Field(default_factory=list)
    media: list[MediaRecord] = Field(default_factory=list)


# ── Scenes ───────────────────────────────────────────────────────────

class SceneCreate(_ProviderSettingsInput):
    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None


class SceneUpdate(_ProviderSettingsInput):
    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None
    scene_complete: bool | None = None


# ── Bins ─────────────────────────────────────────────────────────────

class BinCreate(_ProviderSettingsInput):
    owner_type: OwnerType
    owner_id: str | None = None
    media_type: MediaType
    name: str | None = Field(None, min_length=1, max_length=100)
    scene_id: str | None = None

    @model_validator(mode="after")
    def _owner_id_required(self) -> "BinCreate":
        if self.owner_type != OwnerType.GLOBAL and not self.owner_id:
            raise ValueError("owner_id is required for actors and scenes")
        return self


class BinUpdate(_ProviderSettingsInput):
    name: str | None = Field(None, min_length=1, max_length=100)
    bin_complete: bool | None = None
    scene_id: str | None = None


# ── Media ────────────────────────────────────────────────────────────

class MediaCreate(_ProviderSettingsInput):
    """``name`` may hold several comma-separated names."""

    owner_type: OwnerType
    owner_id: str | None = None
    media_type: MediaType
    bin_id: str | None = None
    name: str = Field(..., min_length=1, examples=["hello, goodbye"])
    prompt: str | None = None
    filename: str | None = None
    scene_id: str | None = None

    @model_validator(mode="after")
    def _owner_id_required(self) -> "MediaCreate":
        if self.owner_type != OwnerType.GLOBAL and not self.owner_id:
            raise ValueError("owner_id is required for actors and scenes")
        return self


class MediaUpdate(_ProviderSettingsInput):
    name: str | None = Field(None, min_length=1, max_length=100)
    bin_id: str | None = None
    prompt: str | None = None
    filename: str | None = None
    all_approved: bool | None = None


class MediaCreateResponse(BaseModel):
    media: list[MediaRecord]
    duplicates_skipped: list[str] = Field(default_factory=list)
    message: str | None = None


class ResolvedSettingsResponse(BaseModel):
    media_type: MediaType
    provider: str
    settings: dict[str, Any]
    resolved_from: str
    source_name: str | None = None


# ── Takes ────────────────────────────────────────────────────────────

class TakeUpdate(BaseModel):
    status: TakeStatus | None = None
    generation_params: dict[str, Any] | None = None


# ── Defaults ─────────────────────────────────────────────────────────

class ProviderBlockUpdate(BaseModel):
    """Fields merged into one media type's project default block."""

    provider: str | None = Field(None, min_length=1)
    fields: dict[str, Any] = Field(default_factory=dict)

    @field_validator("provider")
    @classmethod
    def _no_inherit(cls, value: str | None) -> str | None:
        if value == "inherit":
            raise ValueError("project defaults cannot inherit")
        return value
