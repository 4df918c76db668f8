"""Loads the four snapshot-able collections of a project in one call."""

import asyncio
import logging

from catalog_api.application.interfaces import CatalogRepository
from catalog_api.domain.entities import CatalogState

logger = logging.getLogger(__name__)


class CatalogReader:
    """Reads actors, bins, media and scenes concurrently.

    A collection that fails to load is reported as empty, so a broken or
    missing scenes file never hides the actors.
    """

    def __init__(self, repository: CatalogRepository):
        self._repository = repository

    async def read_catalog(self) -> CatalogState:
        names = ("actors", "bins", "media", "scenes")
        results = await asyncio.gather(
            self._repository.list_actors(),
            self._repository.list_bins(),
            self._repository.list_media(),
            self._repository.list_scenes(),
            return_exceptions=True,
        )

        collections = {}
        for name, result in zip(names, results):
            if isinstance(result, BaseException):
                logger.warning("Could not read %s — treating as empty: %s", name, result)
                collections[name] = []
            else:
                collections[name] = result

        return CatalogState(**collections)
