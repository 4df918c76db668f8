"""Domain entity for actors — voice talent that owns bins and media."""

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from .provider_settings import ProviderSettings


def slugify_filename(name: str) -> str:
    """Derive the on-disk base filename from a display name.

    ``"Dr. Alice Smith"`` → ``"dr_alice_smith"``
    """
    return re.sub(r"[^a-z0-9]+", "_", name.lower()).strip("_")


@dataclass
class Actor:
    """An actor owns bins and, through them, media items and takes."""

    display_name: str
    base_filename: str = ""
    provider_settings: ProviderSettings = field(default_factory=dict)
    actor_complete: bool = False
    notes: str = ""
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if not self.base_filename:
            self.base_filename = slugify_filename(self.display_name)

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
