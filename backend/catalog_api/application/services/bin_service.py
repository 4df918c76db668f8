"""Application service (use case) for bin operations."""

import dataclasses

from catalog_api.application.interfaces import CatalogRepository, TakeRepository
from catalog_api.application.schemas import BinCreate, BinRecord, BinUpdate, validate_entity
from catalog_api.application.services.catalog_integrity import (
    apply_cascade,
    check_references,
    plan_bin_delete,
)
from catalog_api.application.services.catalog_reader import CatalogReader
from catalog_api.application.services.diff_describer import update_message
from catalog_api.application.services.path_builder import build_bin_path
from catalog_api.application.services.snapshot_manager import SnapshotManager
from catalog_api.domain.entities import Bin, OwnerType
from catalog_api.domain.entities.provider_settings import parse_provider_settings
from catalog_api.domain.exceptions import EntityNotFoundError, ValidationFailedError
from catalog_api.infrastructure.logging.colored_logger import HistoryLogger, HistoryStage

hlog = HistoryLogger("BinService")


class BinService:
    def __init__(
        self,
        repository: CatalogRepository,
        take_repository: TakeRepository,
        reader: CatalogReader,
        snapshots: SnapshotManager,
    ):
        self._repository = repository
        self._take_repository = take_repository
        self._reader = reader
        self._snapshots = snapshots

    async def list_bins(self) -> list[Bin]:
        return await self._repository.list_bins()

    async def create_bin(self, data: BinCreate) -> Bin:
        catalog = await self._reader.read_catalog()
        owner_id = None if data.owner_type == OwnerType.GLOBAL else data.owner_id
        check_references(catalog, data.owner_type, owner_id, scene_id=data.scene_id)

        bin_ = Bin(
            owner_type=data.owner_type,
            owner_id=owner_id,
            media_type=data.media_type,
            name=data.name or data.media_type.value,
            provider_settings=parse_provider_settings(data.provider_settings),
            scene_id=data.scene_id,
        )
        validate_entity(BinRecord, bin_, "bin")

        await self._snapshots.save(f"Create bin: {build_bin_path(bin_, catalog)}", catalog)
        await self._repository.append_bins([bin_])
        return bin_

    async def update_bin(self, bin_id: str, data: BinUpdate) -> Bin:
        catalog = await self._reader.read_catalog()
        current = catalog.find_bin(bin_id)
        if current is None:
            raise EntityNotFoundError("Bin", bin_id)

        if data.name and data.name != current.name:
            clash = next(
                (
                    b for b in catalog.bins
                    if b.id != bin_id
                    and b.owned_by(current.owner_type, current.owner_id)
                    and b.media_type == current.media_type
                    and b.name == data.name
                ),
                None,
            )
            if clash is not None:
                raise ValidationFailedError(
                    "A bin with this name already exists for this owner and type",
                    [f"name: {data.name}"],
                )

        changes = data.model_dump(exclude_unset=True)
        for key in ("name", "bin_complete", "provider_settings"):
            if changes.get(key, ...) is None:
                del changes[key]
        if changes.get("scene_id"):
            check_references(
                catalog, current.owner_type, current.owner_id, scene_id=changes["scene_id"]
            )
        if "provider_settings" in changes:
            changes["provider_settings"] = parse_provider_settings(changes["provider_settings"])
        updated = dataclasses.replace(current, **changes)
        updated.touch()
        validate_entity(BinRecord, updated, "bin")

        message = update_message(
            "bin",
            build_bin_path(current, catalog),
            BinRecord.from_entity(current).to_wire(),
            BinRecord.from_entity(updated).to_wire(),
        )
        await self._snapshots.save(message, catalog)

        bins = [updated if b.id == bin_id else b for b in catalog.bins]
        await self._repository.replace_bins(bins)
        return updated

    async def delete_bin(self, bin_id: str) -> None:
        """Delete a bin with its media and their takes."""
        catalog = await self._reader.read_catalog()
        bin_ = catalog.find_bin(bin_id)
        if bin_ is None:
            raise EntityNotFoundError("Bin", bin_id)

        takes = await self._take_repository.list_takes()
        plan = plan_bin_delete(catalog, takes, bin_id)

        await self._snapshots.save(f"Delete bin: {build_bin_path(bin_, catalog)}", catalog)
        await apply_cascade(plan, self._repository, self._take_repository)
        hlog.step(
            HistoryStage.CASCADE,
            f"Deleted bin {bin_.name}",
            media=plan.removed_media,
            takes=plan.removed_takes,
        )
