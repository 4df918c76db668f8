"""Application service (use case) for takes.

Takes are not captured by snapshots. Updating a take still records an undo
entry (of the catalog) so the action shows up in the history; deleting a
take does not.
"""

import logging

from catalog_api.application.interfaces import TakeRepository
from catalog_api.application.schemas import TakeRecord, TakeUpdate, validate_entity
from catalog_api.application.services.catalog_reader import CatalogReader
from catalog_api.application.services.diff_describer import update_message
from catalog_api.application.services.path_builder import build_media_path
from catalog_api.application.services.snapshot_manager import SnapshotManager
from catalog_api.domain.entities import Take
from catalog_api.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class TakeService:
    def __init__(
        self,
        take_repository: TakeRepository,
        reader: CatalogReader,
        snapshots: SnapshotManager,
    ):
        self._take_repository = take_repository
        self._reader = reader
        self._snapshots = snapshots

    async def list_takes(self, media_id: str | None = None) -> list[Take]:
        takes = await self._take_repository.list_takes()
        if media_id is None:
            return takes
        return [t for t in takes if t.media_id == media_id]

    async def update_take(self, take_id: str, data: TakeUpdate) -> Take:
        takes = await self._take_repository.list_takes()
        current = next((t for t in takes if t.id == take_id), None)
        if current is None:
            raise EntityNotFoundError("Take", take_id)

        before = TakeRecord.from_entity(current).to_wire()
        if data.status is not None:
            current.set_status(data.status)
        if data.generation_params is not None:
            current.generation_params = data.generation_params
        current.touch()
        validate_entity(TakeRecord, current, "take")

        catalog = await self._reader.read_catalog()
        media = catalog.find_media(current.media_id)
        path = current.filename
        if media is not None:
            path = f"{build_media_path(media, catalog)} → {current.filename}"
        message = update_message(
            "take", path, before, TakeRecord.from_entity(current).to_wire(), name_field="filename"
        )
        await self._snapshots.save(message, catalog)

        await self._take_repository.replace_takes(takes)
        return current

    async def delete_take(self, take_id: str) -> None:
        """Remove a take record and, when present, its file. No undo entry."""
        takes = await self._take_repository.list_takes()
        take = next((t for t in takes if t.id == take_id), None)
        if take is None:
            raise EntityNotFoundError("Take", take_id)

        await self._take_repository.replace_takes([t for t in takes if t.id != take_id])

        try:
            await self._take_repository.remove_file(take.path)
        except OSError as exc:
            logger.warning("Failed to delete take file %s: %s", take.path, exc)
