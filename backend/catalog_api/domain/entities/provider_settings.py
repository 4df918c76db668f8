"""Provider settings blocks — per media type, either inherited or custom.

A block is a tagged variant:

    InheritSettings            defer to the next level (bin → owner → defaults)
    CustomSettings(provider)   concrete provider plus free-form fields

Wire form (inside JSONL records):
    {"provider": "inherit"}                         → InheritSettings
    {"mode": "inherit"}                             → InheritSettings (legacy)
    {"provider": "elevenlabs", "stability": 0.5}    → CustomSettings
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class MediaType(str, Enum):
    """Kinds of media a bin can hold."""

    DIALOGUE = "dialogue"
    MUSIC = "music"
    SFX = "sfx"
    IMAGE = "image"
    VIDEO = "video"


class OwnerType(str, Enum):
    """Who a bin or media item is attached to."""

    ACTOR = "actor"
    SCENE = "scene"
    GLOBAL = "global"


INHERIT = "inherit"


@dataclass(frozen=True)
class InheritSettings:
    """Marker block — resolve from the owning level instead."""


@dataclass(frozen=True)
class CustomSettings:
    """Concrete provider configuration for one media type."""

    provider: str
    fields: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)


ProviderBlock = InheritSettings | CustomSettings
ProviderSettings = dict[str, ProviderBlock]


def parse_block(raw: dict[str, Any]) -> ProviderBlock:
    """Turn a stored block dict into its tagged variant."""
    if raw.get("mode") == INHERIT or raw.get("provider") == INHERIT:
        return InheritSettings()
    provider = raw.get("provider")
    if not isinstance(provider, str) or not provider:
        raise ValueError("provider settings block requires a 'provider' name")
    fields = {k: v for k, v in raw.items() if k not in ("provider", "mode")}
    return CustomSettings(provider=provider, fields=fields)


def dump_block(block: ProviderBlock) -> dict[str, Any]:
    """Inverse of :func:`parse_block`."""
    match block:
        case InheritSettings():
            return {"provider": INHERIT}
        case CustomSettings(provider=provider, fields=fields):
            return {"provider": provider, **fields}
    raise TypeError(f"Unknown provider block: {block!r}")


def parse_provider_settings(raw: dict[str, Any] | None) -> ProviderSettings:
    """Parse a ``{media_type: block}`` map; unknown media types are rejected."""
    if not raw:
        return {}
    settings: ProviderSettings = {}
    for media_type, block in raw.items():
        MediaType(media_type)
        if not isinstance(block, dict):
            raise ValueError(f"provider settings for '{media_type}' must be an object")
        settings[media_type] = parse_block(block)
    return settings


def dump_provider_settings(settings: ProviderSettings | None) -> dict[str, Any]:
    if not settings:
        return {}
    return {media_type: dump_block(block) for media_type, block in settings.items()}


def is_inherit(block: ProviderBlock | None) -> bool:
    return isinstance(block, InheritSettings)
