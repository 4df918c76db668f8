"""Application service (use case) for actor operations.

Every mutation validates first, then saves the pre-mutation catalog as an
undo snapshot, then writes. Restore is the exception: it appends directly
and leaves the undo history untouched.
"""

import dataclasses
import logging
from dataclasses import dataclass, field

from catalog_api.application.interfaces import (
    CatalogRepository,
    DefaultsRepository,
    TakeRepository,
)
from catalog_api.application.schemas import (
    ActorCreate,
    ActorRecord,
    ActorRestoreRequest,
    ActorUpdate,
    validate_entity,
)
from catalog_api.application.services.batch_names import (
    partition_duplicates,
    skipped_message,
    split_batch_names,
)
from catalog_api.application.services.catalog_integrity import apply_cascade, plan_owner_delete
from catalog_api.application.services.catalog_reader import CatalogReader
from catalog_api.application.services.diff_describer import update_message
from catalog_api.application.services.path_builder import build_actor_path
from catalog_api.application.services.snapshot_manager import SnapshotManager
from catalog_api.domain.entities import Actor, Bin, Media, OwnerType, ProjectDefaults
from catalog_api.domain.entities.provider_settings import parse_provider_settings
from catalog_api.domain.exceptions import (
    DuplicateNameError,
    EntityNotFoundError,
    ValidationFailedError,
)
from catalog_api.infrastructure.logging.colored_logger import HistoryLogger, HistoryStage

logger = logging.getLogger(__name__)
hlog = HistoryLogger("ActorService")


@dataclass
class ActorCreateResult:
    actors: list[Actor]
    duplicates_skipped: list[str] = field(default_factory=list)
    message: str | None = None


@dataclass
class ActorRestoreResult:
    actor: Actor
    bins: list[Bin]
    media: list[Media]


class ActorService:
    """Orchestrates actor CRUD with undo snapshots and cascading deletes."""

    def __init__(
        self,
        repository: CatalogRepository,
        take_repository: TakeRepository,
        defaults_repository: DefaultsRepository,
        reader: CatalogReader,
        snapshots: SnapshotManager,
    ):
        self._repository = repository
        self._take_repository = take_repository
        self._defaults_repository = defaults_repository
        self._reader = reader
        self._snapshots = snapshots

    async def list_actors(self) -> list[Actor]:
        return await self._repository.list_actors()

    async def create_actors(self, data: ActorCreate) -> ActorCreateResult:
        """Create one actor per comma-separated name, skipping duplicates."""
        names = split_batch_names(data.display_name)
        if not names:
            raise ValidationFailedError("At least one valid actor name is required")

        catalog = await self._reader.read_catalog()
        fresh, duplicates = partition_duplicates(
            names, (a.display_name for a in catalog.actors)
        )
        if not fresh:
            raise DuplicateNameError("actor", duplicates)

        if data.provider_settings is not None:
            settings = parse_provider_settings(data.provider_settings)
        else:
            defaults = await self._defaults_repository.load() or ProjectDefaults()
            settings = defaults.actor_settings()

        actors = [
            Actor(
                display_name=name,
                base_filename=data.base_filename if len(fresh) == 1 and data.base_filename else "",
                provider_settings=dict(settings),
                notes=data.notes,
            )
            for name in fresh
        ]
        for actor in actors:
            validate_entity(ActorRecord, actor, f'actor "{actor.display_name}"')

        if len(fresh) == 1:
            message = f"Create actor: {fresh[0]}"
        else:
            message = f"Create actors: {', '.join(fresh)}"
        await self._snapshots.save(message, catalog)
        await self._repository.append_actors(actors)

        if duplicates:
            logger.info("Skipped duplicate actor names: %s", ", ".join(duplicates))
        return ActorCreateResult(
            actors=actors,
            duplicates_skipped=duplicates,
            message=skipped_message("actors", len(actors), duplicates),
        )

    async def update_actor(self, actor_id: str, data: ActorUpdate) -> Actor:
        catalog = await self._reader.read_catalog()
        current = catalog.find_actor(actor_id)
        if current is None:
            raise EntityNotFoundError("Actor", actor_id)

        changes = data.model_dump(exclude_unset=True)
        for key in ("display_name", "base_filename", "actor_complete", "provider_settings"):
            if changes.get(key, ...) is None:
                del changes[key]
        if "notes" in changes and changes["notes"] is None:
            changes["notes"] = ""
        if "provider_settings" in changes:
            changes["provider_settings"] = parse_provider_settings(changes["provider_settings"])
        updated = dataclasses.replace(current, **changes)
        updated.touch()
        validate_entity(ActorRecord, updated, "actor")

        message = update_message(
            "actor",
            build_actor_path(current),
            ActorRecord.from_entity(current).to_wire(),
            ActorRecord.from_entity(updated).to_wire(),
            name_field="display_name",
        )
        await self._snapshots.save(message, catalog)

        actors = [updated if a.id == actor_id else a for a in catalog.actors]
        await self._repository.replace_actors(actors)
        return updated

    async def delete_actor(self, actor_id: str) -> None:
        """Delete an actor with its bins, media and takes."""
        catalog = await self._reader.read_catalog()
        actor = catalog.find_actor(actor_id)
        if actor is None:
            raise EntityNotFoundError("Actor", actor_id)

        takes = await self._take_repository.list_takes()
        plan = plan_owner_delete(catalog, takes, OwnerType.ACTOR, actor_id)

        await self._snapshots.save(f"Delete actor: {build_actor_path(actor)}", catalog)
        await apply_cascade(plan, self._repository, self._take_repository)
        hlog.step(
            HistoryStage.CASCADE,
            f"Deleted actor {actor.display_name}",
            bins=plan.removed_bins,
            media=plan.removed_media,
            takes=plan.removed_takes,
        )

    async def restore_actor(self, data: ActorRestoreRequest) -> ActorRestoreResult:
        """Re-append a deleted actor with its bins and media, bypassing history."""
        actor = data.actor.to_entity()
        bins = [b.to_entity() for b in data.bins]
        media = [m.to_entity() for m in data.media]

        await self._repository.append_actors([actor])
        await self._repository.append_bins(bins)
        await self._repository.append_media(media)

        hlog.step(
            HistoryStage.RESTORE,
            f"Restored actor {actor.display_name}",
            bins=len(bins),
            media=len(media),
        )
        return ActorRestoreResult(actor=actor, bins=bins, media=media)
