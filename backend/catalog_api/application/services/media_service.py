"""Application service (use case) for media items."""

import dataclasses
import logging
from dataclasses import dataclass, field

from catalog_api.application.interfaces import (
    CatalogRepository,
    DefaultsRepository,
    TakeRepository,
)
from catalog_api.application.schemas import MediaCreate, MediaRecord, MediaUpdate, validate_entity
from catalog_api.application.services.batch_names import (
    partition_duplicates,
    skipped_message,
    split_batch_names,
)
from catalog_api.application.services.catalog_integrity import (
    apply_cascade,
    check_references,
    plan_media_delete,
)
from catalog_api.application.services.catalog_reader import CatalogReader
from catalog_api.application.services.diff_describer import update_message
from catalog_api.application.services.path_builder import build_media_path
from catalog_api.application.services.provider_settings_resolver import (
    ResolvedSettings,
    resolve_provider_settings,
)
from catalog_api.application.services.snapshot_manager import SnapshotManager
from catalog_api.domain.entities import Media, MediaType, OwnerType
from catalog_api.domain.entities.provider_settings import parse_provider_settings
from catalog_api.domain.exceptions import (
    DuplicateNameError,
    EntityNotFoundError,
    ValidationFailedError,
)

logger = logging.getLogger(__name__)


@dataclass
class MediaCreateResult:
    media: list[Media]
    duplicates_skipped: list[str] = field(default_factory=list)
    message: str | None = None


def _default_prompt(name: str) -> str:
    return name[:1].upper() + name[1:]


class MediaService:
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

    async def list_media(
        self,
        *,
        owner_id: str | None = None,
        owner_type: OwnerType | None = None,
        media_type: MediaType | None = None,
        bin_id: str | None = None,
    ) -> list[Media]:
        media = await self._repository.list_media()
        return [
            m for m in media
            if (owner_id is None or m.owner_id == owner_id)
            and (owner_type is None or m.owner_type == owner_type)
            and (media_type is None or m.media_type == media_type)
            and (bin_id is None or m.bin_id == bin_id)
        ]

    async def create_media(self, data: MediaCreate) -> MediaCreateResult:
        """Create one media item per comma-separated name in the target bin."""
        names = split_batch_names(data.name)
        if not names:
            raise ValidationFailedError("At least one valid name is required")

        owner_id = None if data.owner_type == OwnerType.GLOBAL else data.owner_id
        catalog = await self._reader.read_catalog()
        check_references(
            catalog, data.owner_type, owner_id, bin_id=data.bin_id, scene_id=data.scene_id
        )

        siblings = (
            m.name for m in catalog.media
            if m.owned_by(data.owner_type, owner_id) and m.bin_id == data.bin_id
        )
        fresh, duplicates = partition_duplicates(names, siblings)
        if not fresh:
            raise DuplicateNameError("media", duplicates)

        settings = parse_provider_settings(data.provider_settings)
        media = [
            Media(
                owner_type=data.owner_type,
                owner_id=owner_id,
                media_type=data.media_type,
                bin_id=data.bin_id,
                name=name,
                prompt=data.prompt or _default_prompt(name),
                filename=data.filename if len(fresh) == 1 else None,
                provider_settings=dict(settings),
                scene_id=data.scene_id,
            )
            for name in fresh
        ]
        for item in media:
            validate_entity(MediaRecord, item, f'media "{item.name}"')

        label = fresh[0] if len(fresh) == 1 else f"{len(fresh)} items"
        await self._snapshots.save(
            f"Create media: {build_media_path(media[0], catalog, name=label)}", catalog
        )
        await self._repository.append_media(media)

        if duplicates:
            logger.info("Skipped duplicate media names: %s", ", ".join(duplicates))
        return MediaCreateResult(
            media=media,
            duplicates_skipped=duplicates,
            message=skipped_message("items", len(media), duplicates),
        )

    async def update_media(self, media_id: str, data: MediaUpdate) -> Media:
        catalog = await self._reader.read_catalog()
        current = catalog.find_media(media_id)
        if current is None:
            raise EntityNotFoundError("Media", media_id)

        changes = data.model_dump(exclude_unset=True)
        for key in ("name", "all_approved", "provider_settings"):
            if changes.get(key, ...) is None:
                del changes[key]
        if changes.get("bin_id"):
            check_references(
                catalog, current.owner_type, current.owner_id, bin_id=changes["bin_id"]
            )
        if "provider_settings" in changes:
            changes["provider_settings"] = parse_provider_settings(changes["provider_settings"])
        updated = dataclasses.replace(current, **changes)
        updated.touch()
        validate_entity(MediaRecord, updated, "media")

        message = update_message(
            "media",
            build_media_path(current, catalog),
            MediaRecord.from_entity(current).to_wire(),
            MediaRecord.from_entity(updated).to_wire(),
        )
        await self._snapshots.save(message, catalog)

        media = [updated if m.id == media_id else m for m in catalog.media]
        await self._repository.replace_media(media)
        return updated

    async def delete_media(self, media_id: str) -> None:
        """Delete a media item and its takes."""
        catalog = await self._reader.read_catalog()
        item = catalog.find_media(media_id)
        if item is None:
            raise EntityNotFoundError("Media", media_id)

        takes = await self._take_repository.list_takes()
        plan = plan_media_delete(catalog, takes, media_id)

        await self._snapshots.save(f"Delete media: {build_media_path(item, catalog)}", catalog)
        await apply_cascade(plan, self._repository, self._take_repository)
        logger.info("Deleted media %s with %d takes", item.name, plan.removed_takes)

    async def resolve_settings(self, media_id: str) -> ResolvedSettings:
        """Effective provider settings for one media item."""
        catalog = await self._reader.read_catalog()
        item = catalog.find_media(media_id)
        if item is None:
            raise EntityNotFoundError("Media", media_id)

        bin_ = catalog.find_bin(item.bin_id)
        if item.owner_type == OwnerType.ACTOR:
            owner = catalog.find_actor(item.owner_id)
        elif item.owner_type == OwnerType.SCENE:
            owner = catalog.find_scene(item.owner_id)
        else:
            owner = None
        defaults = await self._defaults_repository.load()

        return resolve_provider_settings(item.media_type, item, bin_, owner, defaults)
