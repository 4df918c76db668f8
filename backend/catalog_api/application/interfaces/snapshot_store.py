"""Abstract store interface (port) for the persisted undo/redo stacks."""

from abc import ABC, abstractmethod

from catalog_api.domain.entities import HistoryStack, Snapshot


class SnapshotStore(ABC):
    """Port for the two history stacks of one project.

    Stacks are ordered oldest-first; the last element is the next to pop.
    Implementations raise ``SnapshotPersistenceError`` when a write fails.
    """

    @abstractmethod
    async def load(self, stack: HistoryStack) -> list[Snapshot]:
        """Return the stack, or an empty list when it was never written."""
        ...

    @abstractmethod
    async def write(self, stack: HistoryStack, snapshots: list[Snapshot]) -> None:
        """Overwrite the stack with ``snapshots``."""
        ...
