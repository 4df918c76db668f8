"""Application service for a project's provider defaults (``defaults.json``)."""

import logging

from catalog_api.application.interfaces import DefaultsRepository
from catalog_api.application.schemas import ProviderBlockUpdate
from catalog_api.domain.entities import (
    BUILTIN_PROVIDER_SETTINGS,
    CustomSettings,
    MediaType,
    ProjectDefaults,
)
from catalog_api.domain.exceptions import ValidationFailedError

logger = logging.getLogger(__name__)


class DefaultsService:
    """Reads and edits project defaults. Not part of the undo history."""

    def __init__(self, repository: DefaultsRepository):
        self._repository = repository

    async def get_defaults(self) -> ProjectDefaults:
        """Stored defaults, or the built-in ones when the project has none."""
        stored = await self._repository.load()
        if stored is not None:
            return stored
        return ProjectDefaults(media_types=dict(BUILTIN_PROVIDER_SETTINGS))

    async def update_media_type(self, media_type: MediaType, data: ProviderBlockUpdate) -> ProjectDefaults:
        """Merge ``data`` into the default block of one media type."""
        defaults = await self.get_defaults()
        current = defaults.media_types.get(media_type.value)
        base = current if isinstance(current, CustomSettings) else BUILTIN_PROVIDER_SETTINGS[media_type.value]

        provider = data.provider or base.provider
        if "provider" in data.fields:
            raise ValidationFailedError("Invalid defaults", ["fields.provider: use the provider field"])

        defaults.media_types[media_type.value] = CustomSettings(
            provider=provider,
            fields={**base.fields, **data.fields},
        )
        logger.info("Updated %s defaults (provider=%s)", media_type.value, provider)
        return await self._repository.save(defaults)
