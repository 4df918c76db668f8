"""Abstract repository interface (port) for the catalog entity collections."""

from abc import ABC, abstractmethod

from catalog_api.domain.entities import Actor, Bin, Media, Scene


class CatalogRepository(ABC):
    """Port for one project's actor, scene, bin and media collections.

    Every collection is read and written as a whole; ``replace_*`` overwrites
    the full collection, ``append_*`` adds records at the end.
    """

    @abstractmethod
    async def list_actors(self) -> list[Actor]:
        ...

    @abstractmethod
    async def list_scenes(self) -> list[Scene]:
        ...

    @abstractmethod
    async def list_bins(self) -> list[Bin]:
        ...

    @abstractmethod
    async def list_media(self) -> list[Media]:
        ...

    @abstractmethod
    async def replace_actors(self, actors: list[Actor]) -> None:
        ...

    @abstractmethod
    async def replace_scenes(self, scenes: list[Scene]) -> None:
        ...

    @abstractmethod
    async def replace_bins(self, bins: list[Bin]) -> None:
        ...

    @abstractmethod
    async def replace_media(self, media: list[Media]) -> None:
        ...

    @abstractmethod
    async def append_actors(self, actors: list[Actor]) -> None:
        ...

    @abstractmethod
    async def append_scenes(self, scenes: list[Scene]) -> None:
        ...

    @abstractmethod
    async def append_bins(self, bins: list[Bin]) -> None:
        ...

    @abstractmethod
    async def append_media(self, media: list[Media]) -> None:
        ...
