"""Unit tests for the MediaService."""

import pytest

from catalog_api.application.schemas import MediaCreate, MediaUpdate
from catalog_api.application.services import MediaService, SnapshotManager
from catalog_api.domain.entities import (
    Actor,
    Bin,
    CustomSettings,
    Media,
    MediaType,
    OwnerType,
    Take,
)
from catalog_api.domain.exceptions import (
    DuplicateNameError,
    EntityNotFoundError,
    ReferentialIntegrityError,
)


@pytest.fixture
def service(repository, take_repository, defaults_repository, reader, snapshots) -> MediaService:
    return MediaService(repository, take_repository, defaults_repository, reader, snapshots)


@pytest.fixture
def cast(seed_catalog):
    alice, bob = Actor(display_name="Alice"), Actor(display_name="Bob")
    lines = Bin(
        owner_type=OwnerType.ACTOR,
        owner_id=alice.id,
        media_type=MediaType.DIALOGUE,
        name="Lines",
        provider_settings={"dialogue": CustomSettings("elevenlabs", {"voice_id": "bin-voice"})},
    )
    bob_lines = Bin(owner_type=OwnerType.ACTOR, owner_id=bob.id, media_type=MediaType.DIALOGUE, name="Lines")
    seed_catalog(actors=[alice, bob], bins=[lines, bob_lines])
    return alice, bob, lines, bob_lines


def _create(owner: Actor, bin_: Bin, name: str) -> MediaCreate:
    return MediaCreate(
        owner_type=OwnerType.ACTOR,
        owner_id=owner.id,
        media_type=MediaType.DIALOGUE,
        bin_id=bin_.id,
        name=name,
    )


@pytest.mark.asyncio
async def test_batch_create_in_bin(service: MediaService, snapshots: SnapshotManager, cast):
    alice, _, lines, _ = cast

    result = await service.create_media(_create(alice, lines, "hello, Hello, goodbye"))

    assert [m.name for m in result.media] == ["hello", "goodbye"]
    assert [m.prompt for m in result.media] == ["Hello", "Goodbye"]
    assert result.duplicates_skipped == ["Hello"]
    assert result.message == "Created 2 items. Skipped 1 duplicates: Hello"
    state = await snapshots.refresh_state()
    assert state.undo_message == "Create media: actor → Alice → Lines → 2 items"


@pytest.mark.asyncio
async def test_duplicates_are_scoped_to_the_bin(service: MediaService, cast):
    alice, bob, lines, bob_lines = cast
    await service.create_media(_create(alice, lines, "hello"))

    with pytest.raises(DuplicateNameError):
        await service.create_media(_create(alice, lines, "HELLO"))

    result = await service.create_media(_create(bob, bob_lines, "hello"))
    assert len(result.media) == 1


@pytest.mark.asyncio
async def test_bin_of_another_owner_rejected(service: MediaService, snapshots: SnapshotManager, cast):
    alice, _, _, bob_lines = cast

    with pytest.raises(ReferentialIntegrityError) as exc_info:
        await service.create_media(_create(alice, bob_lines, "hello"))

    assert exc_info.value.errors == [f"Bin {bob_lines.id} belongs to a different owner"]
    assert (await snapshots.refresh_state()).count == 0


@pytest.mark.asyncio
async def test_unknown_bin_rejected(service: MediaService, cast):
    alice, *_ = cast
    data = MediaCreate(
        owner_type=OwnerType.ACTOR, owner_id=alice.id, media_type=MediaType.DIALOGUE, bin_id="gone", name="x"
    )
    with pytest.raises(ReferentialIntegrityError) as exc_info:
        await service.create_media(data)
    assert exc_info.value.errors == ["Invalid bin_id: gone"]


@pytest.mark.asyncio
async def test_list_filters(service: MediaService, cast):
    alice, bob, lines, bob_lines = cast
    await service.create_media(_create(alice, lines, "a, b"))
    await service.create_media(_create(bob, bob_lines, "c"))

    assert len(await service.list_media()) == 3
    assert [m.name for m in await service.list_media(owner_id=bob.id)] == ["c"]
    assert len(await service.list_media(bin_id=lines.id, media_type=MediaType.DIALOGUE)) == 2
    assert await service.list_media(media_type=MediaType.MUSIC) == []


@pytest.mark.asyncio
async def test_update_describes_change(service: MediaService, snapshots: SnapshotManager, cast):
    alice, _, lines, _ = cast
    [hello] = (await service.create_media(_create(alice, lines, "hello"))).media

    updated = await service.update_media(hello.id, MediaUpdate(all_approved=True))

    assert updated.all_approved is True
    assert (await snapshots.refresh_state()).undo_message == (
        "Update media: actor → Alice → Lines → hello - marked as complete"
    )


@pytest.mark.asyncio
async def test_move_to_foreign_bin_rejected(service: MediaService, cast):
    alice, _, lines, bob_lines = cast
    [hello] = (await service.create_media(_create(alice, lines, "hello"))).media

    with pytest.raises(ReferentialIntegrityError):
        await service.update_media(hello.id, MediaUpdate(bin_id=bob_lines.id))


@pytest.mark.asyncio
async def test_delete_removes_takes(service: MediaService, take_repository, snapshots: SnapshotManager, cast):
    alice, _, lines, _ = cast
    [hello] = (await service.create_media(_create(alice, lines, "hello"))).media
    await take_repository.append_takes(
        [Take(media_id=hello.id, take_number=1, filename="hello_001.wav", path="hello_001.wav")]
    )

    await service.delete_media(hello.id)

    assert await service.list_media() == []
    assert await take_repository.list_takes() == []
    assert (await snapshots.refresh_state()).undo_message == "Delete media: actor → Alice → Lines → hello"

    with pytest.raises(EntityNotFoundError):
        await service.delete_media(hello.id)


@pytest.mark.asyncio
async def test_resolved_settings_follow_inheritance(service: MediaService, cast):
    alice, _, lines, _ = cast
    [hello] = (await service.create_media(_create(alice, lines, "hello"))).media

    resolved = await service.resolve_settings(hello.id)

    assert resolved.media_type == MediaType.DIALOGUE
    assert resolved.resolved_from == "bin"
    assert resolved.source_name == "Lines"
    assert resolved.settings.get("voice_id") == "bin-voice"

    with pytest.raises(EntityNotFoundError):
        await service.resolve_settings("nope")


@pytest.mark.asyncio
async def test_loose_global_media(service: MediaService):
    data = MediaCreate(owner_type=OwnerType.GLOBAL, media_type=MediaType.MUSIC, name="theme", filename="theme.mp3")

    [theme] = (await service.create_media(data)).media

    assert theme.owner_id is None
    assert theme.bin_id is None
    assert theme.filename == "theme.mp3"
    resolved = await service.resolve_settings(theme.id)
    assert resolved.resolved_from == "builtin"
