"""Domain entity for scenes — the second owner axis next to actors."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from .provider_settings import ProviderSettings


@dataclass
class Scene:
    """A scene owns bins and media the same way an actor does."""

    name: str
    description: str | None = None
    provider_settings: ProviderSettings = field(default_factory=dict)
    scene_complete: bool = False
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
