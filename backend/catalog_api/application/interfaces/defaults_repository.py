"""Abstract repository interface (port) for project defaults."""

from abc import ABC, abstractmethod

from catalog_api.domain.entities import ProjectDefaults


class DefaultsRepository(ABC):
    """Port for the project's ``defaults.json``."""

    @abstractmethod
    async def load(self) -> ProjectDefaults | None:
        """Return the stored defaults, or None when the project has none."""
        ...

    @abstractmethod
    async def save(self, defaults: ProjectDefaults) -> ProjectDefaults:
        ...
