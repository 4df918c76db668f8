"""Application service for the client-facing audit history log."""

import dataclasses

from catalog_api.application.interfaces import HistoryLogRepository
from catalog_api.application.schemas import HistoryEntryCreate, HistoryEntryUpdate
from catalog_api.domain.entities import HistoryEntry
from catalog_api.domain.exceptions import EntityNotFoundError


class HistoryService:
    """Stores what the client reports; independent of the undo/redo stacks."""

    def __init__(self, repository: HistoryLogRepository):
        self._repository = repository

    async def list_entries(self) -> list[HistoryEntry]:
        """Newest first."""
        entries = await self._repository.list_entries()
        return list(reversed(entries))

    async def add_entry(self, data: HistoryEntryCreate) -> HistoryEntry:
        fields = data.model_dump(exclude_none=True)
        return await self._repository.append(HistoryEntry(**fields))

    async def update_entry(self, entry_id: str, data: HistoryEntryUpdate) -> HistoryEntry:
        entries = await self._repository.list_entries()
        index = next((i for i, e in enumerate(entries) if e.id == entry_id), None)
        if index is None:
            raise EntityNotFoundError("HistoryEntry", entry_id)

        entries[index] = dataclasses.replace(entries[index], **data.model_dump(exclude_unset=True))
        await self._repository.replace_all(entries)
        return entries[index]

    async def clear(self) -> None:
        await self._repository.replace_all([])
