"""Domain entity for a project's ``defaults.json`` — the last inheritance level."""

from dataclasses import dataclass, field

from .provider_settings import CustomSettings, ProviderSettings

# Used when a project has no defaults.json
BUILTIN_PROVIDER_SETTINGS: dict[str, CustomSettings] = {
    "dialogue": CustomSettings(
        provider="elevenlabs",
        fields={
            "model_id": "eleven_multilingual_v2",
            "stability": 0.5,
            "similarity_boost": 0.75,
            "min_candidates": 1,
            "approval_count_default": 1,
        },
    ),
    "music": CustomSettings(
        provider="elevenlabs",
        fields={"duration_seconds": 30, "min_candidates": 1, "approval_count_default": 1},
    ),
    "sfx": CustomSettings(
        provider="elevenlabs",
        fields={"min_candidates": 1, "approval_count_default": 1},
    ),
    "image": CustomSettings(
        provider="openai",
        fields={
            "model": "dall-e-3",
            "style": "natural",
            "quality": "standard",
            "size": "1024x1024",
            "min_candidates": 1,
            "approval_count_default": 1,
        },
    ),
    "video": CustomSettings(
        provider="runway",
        fields={
            "model": "gen-3-alpha",
            "duration_seconds": 5,
            "aspect_ratio": "16:9",
            "fps": 24,
            "min_candidates": 1,
            "approval_count_default": 1,
        },
    ),
}

# Media types new actors get settings for
ACTOR_MEDIA_TYPES = ("dialogue", "music", "sfx")


@dataclass
class ProjectDefaults:
    """Project-wide provider settings per media type."""

    media_types: ProviderSettings = field(default_factory=dict)
    schema_version: str = "2.0.0"

    def actor_settings(self) -> ProviderSettings:
        """Initial provider settings copied onto a newly created actor."""
        if self.media_types:
            return dict(self.media_types)
        return {key: BUILTIN_PROVIDER_SETTINGS[key] for key in ACTOR_MEDIA_TYPES}
