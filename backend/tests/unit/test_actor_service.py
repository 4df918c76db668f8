"""Unit tests for the ActorService."""

import pytest

from catalog_api.application.schemas import (
    ActorCreate,
    ActorRecord,
    ActorRestoreRequest,
    ActorUpdate,
    BinRecord,
    MediaRecord,
)
from catalog_api.application.services import ActorService, SnapshotManager
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
    ValidationFailedError,
)


@pytest.fixture
def service(repository, take_repository, defaults_repository, reader, snapshots) -> ActorService:
    return ActorService(repository, take_repository, defaults_repository, reader, snapshots)


def _owned_catalog(actor: Actor, bins: int, media_per_bin: list[int], takes_per_media: int):
    """An actor with ``bins`` bins; bin i holds ``media_per_bin[i]`` items."""
    bin_list, media_list, take_list = [], [], []
    for i in range(bins):
        bin_ = Bin(owner_type=OwnerType.ACTOR, owner_id=actor.id, media_type=MediaType.DIALOGUE, name=f"bin{i}")
        bin_list.append(bin_)
        for j in range(media_per_bin[i]):
            item = Media(
                owner_type=OwnerType.ACTOR,
                owner_id=actor.id,
                media_type=MediaType.DIALOGUE,
                name=f"line{i}_{j}",
                bin_id=bin_.id,
            )
            media_list.append(item)
            for n in range(takes_per_media):
                take_list.append(
                    Take(media_id=item.id, take_number=n + 1, filename=f"{item.name}_{n + 1:03d}.wav", path=f"{item.name}_{n + 1:03d}.wav")
                )
    return bin_list, media_list, take_list


@pytest.mark.asyncio
async def test_batch_create_skips_duplicates(service: ActorService, snapshots: SnapshotManager):
    result = await service.create_actors(ActorCreate(display_name="Alice, Bob, Alice"))

    assert [a.display_name for a in result.actors] == ["Alice", "Bob"]
    assert result.duplicates_skipped == ["Alice"]
    assert result.message == "Created 2 actors. Skipped 1 duplicates: Alice"

    state = await snapshots.refresh_state()
    assert state.count == 1
    assert state.undo_message == "Create actors: Alice, Bob"


@pytest.mark.asyncio
async def test_all_duplicates_rejected_without_snapshot(service: ActorService, snapshots: SnapshotManager):
    await service.create_actors(ActorCreate(display_name="Alice"))

    with pytest.raises(DuplicateNameError) as exc_info:
        await service.create_actors(ActorCreate(display_name="alice"))

    assert exc_info.value.duplicates == ["alice"]
    assert (await snapshots.refresh_state()).count == 1
    assert len(await service.list_actors()) == 1


@pytest.mark.asyncio
async def test_blank_batch_rejected(service: ActorService):
    with pytest.raises(ValidationFailedError):
        await service.create_actors(ActorCreate(display_name=" , "))


@pytest.mark.asyncio
async def test_invalid_actor_leaves_no_history(service: ActorService, snapshots: SnapshotManager):
    with pytest.raises(ValidationFailedError) as exc_info:
        await service.create_actors(ActorCreate(display_name="x" * 101))

    assert exc_info.value.errors
    assert (await snapshots.refresh_state()).count == 0
    assert await service.list_actors() == []


@pytest.mark.asyncio
async def test_new_actor_gets_default_settings(service: ActorService):
    result = await service.create_actors(ActorCreate(display_name="Dr. Alice Smith"))

    [actor] = result.actors
    assert actor.base_filename == "dr_alice_smith"
    assert set(actor.provider_settings) == {"dialogue", "music", "sfx"}
    assert isinstance(actor.provider_settings["dialogue"], CustomSettings)
    assert result.message is None


@pytest.mark.asyncio
async def test_rename_is_described_and_undoable(service: ActorService, snapshots: SnapshotManager):
    [alice] = (await service.create_actors(ActorCreate(display_name="Alice"))).actors

    updated = await service.update_actor(alice.id, ActorUpdate(display_name="Alicia"))

    assert updated.display_name == "Alicia"
    assert (await snapshots.refresh_state()).undo_message == "Rename actor: Alice → Alicia"

    await snapshots.undo()
    assert [a.display_name for a in await service.list_actors()] == ["Alice"]


@pytest.mark.asyncio
async def test_update_single_field_message(service: ActorService, snapshots: SnapshotManager):
    [alice] = (await service.create_actors(ActorCreate(display_name="Alice"))).actors

    await service.update_actor(alice.id, ActorUpdate(actor_complete=True))

    state = await snapshots.refresh_state()
    assert state.undo_message == "Update actor: Alice - marked as complete"


@pytest.mark.asyncio
async def test_update_missing_actor(service: ActorService):
    with pytest.raises(EntityNotFoundError):
        await service.update_actor("nope", ActorUpdate(notes="x"))


@pytest.mark.asyncio
async def test_delete_cascades_and_undo_restores_catalog_only(
    service: ActorService, snapshots: SnapshotManager, repository, take_repository, seed_catalog
):
    alice, bob = Actor(display_name="Alice"), Actor(display_name="Bob")
    a_bins, a_media, _ = _owned_catalog(alice, 2, [3, 2], 0)
    a_takes = [
        Take(media_id=a_media[i % 5].id, take_number=i + 1, filename=f"t{i}.wav", path=f"t{i}.wav")
        for i in range(7)
    ]
    b_bins, b_media, b_takes = _owned_catalog(bob, 1, [1], 1)
    seed_catalog(
        actors=[alice, bob],
        bins=a_bins + b_bins,
        media=a_media + b_media,
        takes=a_takes + b_takes,
    )

    await service.delete_actor(alice.id)

    assert [a.display_name for a in await repository.list_actors()] == ["Bob"]
    assert [b.id for b in await repository.list_bins()] == [b_bins[0].id]
    assert [m.id for m in await repository.list_media()] == [b_media[0].id]
    assert [t.id for t in await take_repository.list_takes()] == [b_takes[0].id]
    assert (await snapshots.refresh_state()).undo_message == "Delete actor: Alice"

    await snapshots.undo()

    assert {a.display_name for a in await repository.list_actors()} == {"Alice", "Bob"}
    assert len(await repository.list_bins()) == 3
    assert len(await repository.list_media()) == 6
    # takes are outside snapshots
    assert len(await take_repository.list_takes()) == 1


@pytest.mark.asyncio
async def test_delete_missing_actor(service: ActorService, snapshots: SnapshotManager):
    with pytest.raises(EntityNotFoundError):
        await service.delete_actor("nope")
    assert (await snapshots.refresh_state()).count == 0


@pytest.mark.asyncio
async def test_restore_bypasses_history(service: ActorService, snapshots: SnapshotManager):
    carol = Actor(display_name="Carol")
    bins, media, _ = _owned_catalog(carol, 1, [2], 0)
    request = ActorRestoreRequest(
        actor=ActorRecord.from_entity(carol),
        bins=[BinRecord.from_entity(b) for b in bins],
        media=[MediaRecord.from_entity(m) for m in media],
    )

    result = await service.restore_actor(request)

    assert result.actor.id == carol.id
    assert [a.id for a in await service.list_actors()] == [carol.id]
    assert len(result.bins) == 1
    assert len(result.media) == 2
    assert (await snapshots.refresh_state()).count == 0


@pytest.mark.asyncio
async def test_create_goes_ahead_when_snapshot_cannot_be_saved(
    repository, take_repository, defaults_repository, reader, broken_snapshots
):
    service = ActorService(repository, take_repository, defaults_repository, reader, broken_snapshots)

    await service.create_actors(ActorCreate(display_name="Alice"))

    assert [a.display_name for a in await service.list_actors()] == ["Alice"]
    assert (await broken_snapshots.refresh_state()).count == 0


@pytest.mark.asyncio
async def test_batch_create_against_existing_actor(service: ActorService, snapshots: SnapshotManager):
    await service.create_actors(ActorCreate(display_name="Alice"))

    result = await service.create_actors(ActorCreate(display_name="Alice, Bob, Alice"))

    assert [a.display_name for a in result.actors] == ["Bob"]
    assert result.duplicates_skipped == ["Alice"]
    assert sorted(a.display_name for a in await service.list_actors()) == ["Alice", "Bob"]
    assert (await snapshots.refresh_state()).undo_message == "Create actor: Bob"


@pytest.mark.asyncio
async def test_update_several_fields_message(service: ActorService, snapshots: SnapshotManager):
    [alice] = (await service.create_actors(ActorCreate(display_name="Alice"))).actors

    await service.update_actor(alice.id, ActorUpdate(actor_complete=True, notes="retake Friday"))

    assert (await snapshots.refresh_state()).undo_message == "Update actor: Alice (2 changes)"


@pytest.mark.asyncio
async def test_null_notes_clears_them(service: ActorService):
    [alice] = (await service.create_actors(ActorCreate(display_name="Alice"))).actors
    await service.update_actor(alice.id, ActorUpdate(notes="lead"))

    updated = await service.update_actor(alice.id, ActorUpdate(notes=None, display_name=None))

    assert updated.notes == ""
    assert updated.display_name == "Alice"


@pytest.mark.asyncio
async def test_create_survives_corrupt_undo_file(service: ActorService, snapshots: SnapshotManager, paths):
    paths.undo_snapshots.parent.mkdir(parents=True, exist_ok=True)
    paths.undo_snapshots.write_bytes(b'\xff\xfe{"id": 1}\n')

    await service.create_actors(ActorCreate(display_name="Alice"))

    assert [a.display_name for a in await service.list_actors()] == ["Alice"]
    assert (await snapshots.refresh_state()).undo_message == "Create actor: Alice"
