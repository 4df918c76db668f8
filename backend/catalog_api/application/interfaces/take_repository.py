"""Abstract repository interface (port) for Take persistence."""

from abc import ABC, abstractmethod

from catalog_api.domain.entities import Take


class TakeRepository(ABC):
    """Port for takes — kept apart from the snapshot-able catalog."""

    @abstractmethod
    async def list_takes(self) -> list[Take]:
        """Retrieve every take of the project."""
        ...

    @abstractmethod
    async def replace_takes(self, takes: list[Take]) -> None:
        """Overwrite the whole take collection."""
        ...

    @abstractmethod
    async def append_takes(self, takes: list[Take]) -> None:
        ...

    @abstractmethod
    async def remove_file(self, relative_path: str) -> bool:
        """Delete a take's media file. Returns True if a file was removed."""
        ...
