"""Referential checks at write time and cascade planning for deletes.

Owner and bin references are weak: they are verified when a bin or media
item is written and never re-checked afterwards. Deletes cascade
owner → bins → media → takes.
"""

from dataclasses import dataclass, field

from catalog_api.application.interfaces import CatalogRepository, TakeRepository
from catalog_api.domain.entities import CatalogState, Media, OwnerType, Take
from catalog_api.domain.exceptions import ReferentialIntegrityError


def check_references(
    catalog: CatalogState,
    owner_type: OwnerType,
    owner_id: str | None,
    *,
    bin_id: str | None = None,
    scene_id: str | None = None,
) -> None:
    """Raise ReferentialIntegrityError listing every dangling reference."""
    errors: list[str] = []

    if owner_type == OwnerType.ACTOR and catalog.find_actor(owner_id) is None:
        errors.append(f"Invalid owner_id (Actor): {owner_id}")
    elif owner_type == OwnerType.SCENE and catalog.find_scene(owner_id) is None:
        errors.append(f"Invalid owner_id (Scene): {owner_id}")

    if scene_id and catalog.find_scene(scene_id) is None:
        errors.append(f"Invalid scene_id: {scene_id}")

    if bin_id is not None:
        bin_ = catalog.find_bin(bin_id)
        if bin_ is None:
            errors.append(f"Invalid bin_id: {bin_id}")
        elif not bin_.owned_by(owner_type, owner_id):
            errors.append(f"Bin {bin_id} belongs to a different owner")

    if errors:
        raise ReferentialIntegrityError(errors)


@dataclass
class CascadePlan:
    """What remains of the catalog and takes after a delete."""

    catalog: CatalogState
    takes: list[Take]
    removed_bins: int = 0
    removed_media: int = 0
    removed_takes: int = 0
    removed_media_ids: set[str] = field(default_factory=set)
    # Collections the delete changed; only these are rewritten.
    touched: frozenset[str] = frozenset()


def _drop_media(catalog: CatalogState, takes: list[Take], doomed_ids: set[str]) -> tuple[list[Media], list[Take]]:
    media = [m for m in catalog.media if m.id not in doomed_ids]
    remaining_takes = [t for t in takes if t.media_id not in doomed_ids]
    return media, remaining_takes


def plan_owner_delete(
    catalog: CatalogState, takes: list[Take], owner_type: OwnerType, owner_id: str
) -> CascadePlan:
    """Remove an actor or scene with its bins, their media (and media owned directly) and takes."""
    doomed_bins = {b.id for b in catalog.bins if b.owned_by(owner_type, owner_id)}
    doomed_media = {
        m.id for m in catalog.media
        if m.bin_id in doomed_bins or m.owned_by(owner_type, owner_id)
    }
    media, remaining_takes = _drop_media(catalog, takes, doomed_media)

    if owner_type == OwnerType.ACTOR:
        actors = [a for a in catalog.actors if a.id != owner_id]
        scenes = list(catalog.scenes)
        owner_collection = "actors"
    else:
        actors = list(catalog.actors)
        scenes = [s for s in catalog.scenes if s.id != owner_id]
        owner_collection = "scenes"

    return CascadePlan(
        catalog=CatalogState(
            actors=actors,
            bins=[b for b in catalog.bins if b.id not in doomed_bins],
            media=media,
            scenes=scenes,
        ),
        takes=remaining_takes,
        removed_bins=len(doomed_bins),
        removed_media=len(doomed_media),
        removed_takes=len(takes) - len(remaining_takes),
        removed_media_ids=doomed_media,
        touched=frozenset({owner_collection, "bins", "media"}),
    )


def plan_bin_delete(catalog: CatalogState, takes: list[Take], bin_id: str) -> CascadePlan:
    doomed_media = {m.id for m in catalog.media if m.bin_id == bin_id}
    media, remaining_takes = _drop_media(catalog, takes, doomed_media)
    return CascadePlan(
        catalog=CatalogState(
            actors=list(catalog.actors),
            bins=[b for b in catalog.bins if b.id != bin_id],
            media=media,
            scenes=list(catalog.scenes),
        ),
        takes=remaining_takes,
        removed_bins=1,
        removed_media=len(doomed_media),
        removed_takes=len(takes) - len(remaining_takes),
        removed_media_ids=doomed_media,
        touched=frozenset({"bins", "media"}),
    )


def plan_media_delete(catalog: CatalogState, takes: list[Take], media_id: str) -> CascadePlan:
    media, remaining_takes = _drop_media(catalog, takes, {media_id})
    return CascadePlan(
        catalog=CatalogState(
            actors=list(catalog.actors),
            bins=list(catalog.bins),
            media=media,
            scenes=list(catalog.scenes),
        ),
        takes=remaining_takes,
        removed_media=1,
        removed_takes=len(takes) - len(remaining_takes),
        removed_media_ids={media_id},
        touched=frozenset({"media"}),
    )


async def apply_cascade(
    plan: CascadePlan, repository: CatalogRepository, take_repository: TakeRepository
) -> None:
    """Write the collections the delete touched, in cascade order."""
    if "actors" in plan.touched:
        await repository.replace_actors(plan.catalog.actors)
    if "scenes" in plan.touched:
        await repository.replace_scenes(plan.catalog.scenes)
    if "bins" in plan.touched:
        await repository.replace_bins(plan.catalog.bins)
    if "media" in plan.touched:
        await repository.replace_media(plan.catalog.media)
    if plan.removed_takes:
        await take_repository.replace_takes(plan.takes)
