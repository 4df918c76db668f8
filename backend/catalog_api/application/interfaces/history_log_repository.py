"""Abstract repository interface (port) for audit history entries."""

from abc import ABC, abstractmethod

from catalog_api.domain.entities import HistoryEntry


class HistoryLogRepository(ABC):
    """Port for the append-mostly audit trail of a project."""

    @abstractmethod
    async def list_entries(self) -> list[HistoryEntry]:
        """Entries in insertion order (oldest first)."""
        ...

    @abstractmethod
    async def append(self, entry: HistoryEntry) -> HistoryEntry:
        ...

    @abstractmethod
    async def replace_all(self, entries: list[HistoryEntry]) -> None:
        ...
