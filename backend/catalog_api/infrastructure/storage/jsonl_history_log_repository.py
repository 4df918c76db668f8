"""Concrete repository for the audit trail (``history.jsonl``)."""

import logging

from pydantic import ValidationError

from catalog_api.application.interfaces import HistoryLogRepository
from catalog_api.application.schemas.records import HistoryEntryRecord
from catalog_api.domain.entities import HistoryEntry
from catalog_api.infrastructure.storage.jsonl_store import JsonlCollection
from catalog_api.infrastructure.storage.project_paths import ProjectPaths

logger = logging.getLogger(__name__)


class JsonlHistoryLogRepository(HistoryLogRepository):
    def __init__(self, paths: ProjectPaths):
        self._entries = JsonlCollection(paths.history)

    async def list_entries(self) -> list[HistoryEntry]:
        entries = []
        for raw in self._entries.read_all():
            try:
                entries.append(HistoryEntryRecord.model_validate(raw).to_entity())
            except ValidationError:
                logger.warning("Skipping invalid history entry %s", raw.get("id", "?"))
        return entries

    async def append(self, entry: HistoryEntry) -> HistoryEntry:
        self._entries.append([HistoryEntryRecord.from_entity(entry).to_wire()])
        return entry

    async def replace_all(self, entries: list[HistoryEntry]) -> None:
        self._entries.write_all(
            [HistoryEntryRecord.from_entity(e).to_wire() for e in entries]
        )
