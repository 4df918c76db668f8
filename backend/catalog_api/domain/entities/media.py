"""Domain entity for media items — a single cue, track, clip or image."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from .provider_settings import MediaType, OwnerType, ProviderSettings


@dataclass
class Media:
    """One catalog item; takes are generated against it.

    ``bin_id`` is None for ungrouped media. When set, the bin must belong to
    the same owner as the media item.
    """

    owner_type: OwnerType
    owner_id: str | None
    media_type: MediaType
    name: str
    bin_id: str | None = None
    prompt: str | None = None
    filename: str | None = None
    provider_settings: ProviderSettings = field(default_factory=dict)
    all_approved: bool = False
    scene_id: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def owned_by(self, owner_type: OwnerType, owner_id: str | None) -> bool:
        return self.owner_type == owner_type and self.owner_id == owner_id

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
