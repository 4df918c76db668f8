"""Provider settings resolution along the inheritance chain.

    media override → bin → owner (actor/scene) → project defaults → built-in

The first ``CustomSettings`` block found for the media type wins; inherit
blocks and missing entries fall through to the next level.
"""

from dataclasses import dataclass

from catalog_api.domain.entities import (
    BUILTIN_PROVIDER_SETTINGS,
    Actor,
    Bin,
    CustomSettings,
    Media,
    MediaType,
    ProjectDefaults,
    Scene,
)
from catalog_api.domain.entities.provider_settings import ProviderSettings


@dataclass(frozen=True)
class ResolvedSettings:
    media_type: MediaType
    settings: CustomSettings
    resolved_from: str  # media | bin | owner | defaults | builtin
    source_name: str | None = None


def _custom_block(settings: ProviderSettings | None, key: str) -> CustomSettings | None:
    block = (settings or {}).get(key)
    return block if isinstance(block, CustomSettings) else None


def resolve_provider_settings(
    media_type: MediaType,
    media: Media | None = None,
    bin_: Bin | None = None,
    owner: Actor | Scene | None = None,
    defaults: ProjectDefaults | None = None,
) -> ResolvedSettings:
    key = media_type.value

    if media is not None and (block := _custom_block(media.provider_settings, key)):
        return ResolvedSettings(media_type, block, "media", media.name)

    if bin_ is not None and (block := _custom_block(bin_.provider_settings, key)):
        return ResolvedSettings(media_type, block, "bin", bin_.name)

    if owner is not None and (block := _custom_block(owner.provider_settings, key)):
        name = owner.display_name if isinstance(owner, Actor) else owner.name
        return ResolvedSettings(media_type, block, "owner", name)

    if defaults is not None and (block := _custom_block(defaults.media_types, key)):
        return ResolvedSettings(media_type, block, "defaults", "Project Defaults")

    return ResolvedSettings(media_type, BUILTIN_PROVIDER_SETTINGS[key], "builtin", "System Defaults")
