"""Unit tests for breadcrumb labels."""

from catalog_api.application.services.path_builder import (
    build_actor_path,
    build_bin_path,
    build_media_path,
    owner_display_name,
)
from catalog_api.domain.entities import Actor, Bin, CatalogState, Media, MediaType, OwnerType, Scene


def _catalog():
    alice = Actor(display_name="Alice")
    intro = Scene(name="Intro")
    lines = Bin(owner_type=OwnerType.ACTOR, owner_id=alice.id, media_type=MediaType.DIALOGUE, name="Lines")
    return CatalogState(actors=[alice], scenes=[intro], bins=[lines]), alice, intro, lines


def test_owner_names():
    catalog, alice, intro, _ = _catalog()
    assert owner_display_name(OwnerType.ACTOR, alice.id, catalog) == "Alice"
    assert owner_display_name(OwnerType.SCENE, intro.id, catalog) == "Intro"
    assert owner_display_name(OwnerType.GLOBAL, None, catalog) == "global"
    assert owner_display_name(OwnerType.ACTOR, "gone", catalog) == "unknown actor"
    assert owner_display_name(OwnerType.SCENE, "gone", catalog) == "unknown scene"


def test_bin_and_media_paths():
    catalog, alice, _, lines = _catalog()
    hello = Media(
        owner_type=OwnerType.ACTOR,
        owner_id=alice.id,
        media_type=MediaType.DIALOGUE,
        name="hello",
        bin_id=lines.id,
    )

    assert build_actor_path(alice) == "Alice"
    assert build_bin_path(lines, catalog) == "actor → Alice → Lines"
    assert build_media_path(hello, catalog) == "actor → Alice → Lines → hello"
    assert build_media_path(hello, catalog, name="3 items") == "actor → Alice → Lines → 3 items"


def test_media_without_bin():
    catalog, *_ = _catalog()
    loose = Media(owner_type=OwnerType.GLOBAL, owner_id=None, media_type=MediaType.MUSIC, name="theme")
    orphan = Media(
        owner_type=OwnerType.GLOBAL, owner_id=None, media_type=MediaType.MUSIC, name="x", bin_id="gone"
    )

    assert build_media_path(loose, catalog) == "global → global → ungrouped → theme"
    assert build_media_path(orphan, catalog) == "global → global → unknown bin → x"
