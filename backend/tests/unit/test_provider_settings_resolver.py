"""Unit tests for provider settings inheritance."""

from catalog_api.application.services import resolve_provider_settings
from catalog_api.domain.entities import (
    BUILTIN_PROVIDER_SETTINGS,
    Actor,
    Bin,
    CustomSettings,
    InheritSettings,
    Media,
    MediaType,
    OwnerType,
    ProjectDefaults,
    Scene,
)

ALICE_VOICE = CustomSettings("elevenlabs", {"voice_id": "alice"})


def _chain(media_block=None, bin_block=None):
    alice = Actor(display_name="Alice", provider_settings={"dialogue": ALICE_VOICE})
    lines = Bin(
        owner_type=OwnerType.ACTOR,
        owner_id=alice.id,
        media_type=MediaType.DIALOGUE,
        name="Lines",
        provider_settings={"dialogue": bin_block or InheritSettings()},
    )
    hello = Media(
        owner_type=OwnerType.ACTOR,
        owner_id=alice.id,
        media_type=MediaType.DIALOGUE,
        name="hello",
        bin_id=lines.id,
        provider_settings={"dialogue": media_block} if media_block else {},
    )
    return hello, lines, alice


def test_media_override_wins():
    override = CustomSettings("elevenlabs", {"voice_id": "special"})
    hello, lines, alice = _chain(media_block=override, bin_block=CustomSettings("x"))

    resolved = resolve_provider_settings(MediaType.DIALOGUE, hello, lines, alice)

    assert resolved.settings == override
    assert resolved.resolved_from == "media"
    assert resolved.source_name == "hello"


def test_inherit_falls_through_to_owner():
    hello, lines, alice = _chain()

    resolved = resolve_provider_settings(MediaType.DIALOGUE, hello, lines, alice)

    assert resolved.settings == ALICE_VOICE
    assert resolved.resolved_from == "owner"
    assert resolved.source_name == "Alice"


def test_scene_owner_name():
    intro = Scene(name="Intro", provider_settings={"sfx": CustomSettings("elevenlabs")})

    resolved = resolve_provider_settings(MediaType.SFX, owner=intro)

    assert resolved.resolved_from == "owner"
    assert resolved.source_name == "Intro"


def test_project_defaults_then_builtin():
    defaults = ProjectDefaults(media_types={"image": CustomSettings("openai", {"size": "512x512"})})

    from_defaults = resolve_provider_settings(MediaType.IMAGE, defaults=defaults)
    assert from_defaults.resolved_from == "defaults"
    assert from_defaults.source_name == "Project Defaults"
    assert from_defaults.settings.get("size") == "512x512"

    builtin = resolve_provider_settings(MediaType.VIDEO, defaults=defaults)
    assert builtin.resolved_from == "builtin"
    assert builtin.source_name == "System Defaults"
    assert builtin.settings == BUILTIN_PROVIDER_SETTINGS["video"]


def test_other_media_types_are_not_consulted():
    hello, lines, alice = _chain()

    resolved = resolve_provider_settings(MediaType.MUSIC, hello, lines, alice)

    assert resolved.resolved_from == "builtin"
    assert resolved.media_type == MediaType.MUSIC
