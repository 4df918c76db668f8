"""Unit tests for project provider defaults."""

import pytest

from catalog_api.application.schemas import ProviderBlockUpdate
from catalog_api.application.services import DefaultsService
from catalog_api.domain.entities import MediaType
from catalog_api.domain.exceptions import ValidationFailedError


@pytest.fixture
def service(defaults_repository) -> DefaultsService:
    return DefaultsService(defaults_repository)


@pytest.mark.asyncio
async def test_builtin_defaults_without_file(service: DefaultsService, paths):
    defaults = await service.get_defaults()

    assert not paths.defaults.exists()
    assert defaults.media_types["image"].provider == "openai"
    assert defaults.media_types["dialogue"].get("model_id") == "eleven_multilingual_v2"


@pytest.mark.asyncio
async def test_update_merges_fields(service: DefaultsService, paths):
    await service.update_media_type(MediaType.DIALOGUE, ProviderBlockUpdate(fields={"stability": 0.9}))

    assert paths.defaults.exists()
    dialogue = (await service.get_defaults()).media_types["dialogue"]
    assert dialogue.provider == "elevenlabs"
    assert dialogue.get("stability") == 0.9
    assert dialogue.get("model_id") == "eleven_multilingual_v2"


@pytest.mark.asyncio
async def test_switch_provider(service: DefaultsService):
    defaults = await service.update_media_type(MediaType.IMAGE, ProviderBlockUpdate(provider="stability"))
    assert defaults.media_types["image"].provider == "stability"


@pytest.mark.asyncio
async def test_provider_inside_fields_rejected(service: DefaultsService):
    with pytest.raises(ValidationFailedError):
        await service.update_media_type(MediaType.SFX, ProviderBlockUpdate(fields={"provider": "x"}))


@pytest.mark.asyncio
async def test_unreadable_file_falls_back_to_builtin(service: DefaultsService, paths):
    paths.defaults.write_text("{not json", encoding="utf-8")

    defaults = await service.get_defaults()

    assert defaults.media_types["video"].provider == "runway"


def test_inherit_provider_rejected():
    with pytest.raises(ValueError):
        ProviderBlockUpdate(provider="inherit")
