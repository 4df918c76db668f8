"""Domain entity for bins — named groupings of one media type under an owner."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from .provider_settings import InheritSettings, MediaType, OwnerType, ProviderSettings


@dataclass
class Bin:
    """Groups media of a single type for an actor, a scene, or the project.

    ``owner_id`` is a weak reference: it is checked when the bin is written,
    not afterwards.
    """

    owner_type: OwnerType
    owner_id: str | None
    media_type: MediaType
    name: str
    provider_settings: ProviderSettings = field(default_factory=dict)
    bin_complete: bool = False
    scene_id: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if not self.provider_settings:
            self.provider_settings = {self.media_type.value: InheritSettings()}

    def owned_by(self, owner_type: OwnerType, owner_id: str | None) -> bool:
        return self.owner_type == owner_type and self.owner_id == owner_id

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
