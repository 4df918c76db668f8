"""Breadcrumb labels for log lines and undo messages.

    actor → Alice → Lines
    scene → Intro → Ambience → rain_loop
"""

from catalog_api.domain.entities import Actor, Bin, CatalogState, Media, OwnerType, Scene


def owner_display_name(owner_type: OwnerType, owner_id: str | None, catalog: CatalogState) -> str:
    if owner_type == OwnerType.GLOBAL:
        return "global"
    if owner_type == OwnerType.ACTOR:
        actor = catalog.find_actor(owner_id)
        return actor.display_name if actor else "unknown actor"
    scene = catalog.find_scene(owner_id)
    return scene.name if scene else "unknown scene"


def build_actor_path(actor: Actor) -> str:
    return actor.display_name


def build_scene_path(scene: Scene) -> str:
    return scene.name


def build_bin_path(bin_: Bin, catalog: CatalogState) -> str:
    owner = owner_display_name(bin_.owner_type, bin_.owner_id, catalog)
    return f"{bin_.owner_type.value} → {owner} → {bin_.name}"


def build_media_path(media: Media, catalog: CatalogState, name: str | None = None) -> str:
    """``name`` overrides the media name (used for batch labels)."""
    owner = owner_display_name(media.owner_type, media.owner_id, catalog)
    if media.bin_id is None:
        bin_name = "ungrouped"
    else:
        bin_ = catalog.find_bin(media.bin_id)
        bin_name = bin_.name if bin_ else "unknown bin"
    return f"{media.owner_type.value} → {owner} → {bin_name} → {name or media.name}"
