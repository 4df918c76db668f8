"""Project-wide default provider settings."""

from fastapi import APIRouter, Depends, status

from catalog_api.application.schemas import ProjectDefaultsRecord, ProviderBlockUpdate
from catalog_api.application.services import DefaultsService
from catalog_api.domain.entities import MediaType
from catalog_api.domain.exceptions import ValidationFailedError
from catalog_api.infrastructure.dependencies import get_defaults_service
from catalog_api.presentation.api.v1.endpoints.errors import bad_request

router = APIRouter(prefix="/defaults", tags=["Defaults"])


@router.get("", response_model=ProjectDefaultsRecord)
async def get_defaults(
    service: DefaultsService = Depends(get_defaults_service),
) -> ProjectDefaultsRecord:
    """Stored project defaults, or the built-in ones when none are saved."""
    defaults = await service.get_defaults()
    return ProjectDefaultsRecord.from_entity(defaults)


@router.put("/{media_type}", response_model=ProjectDefaultsRecord, status_code=status.HTTP_200_OK)
async def update_media_type_defaults(
    media_type: MediaType,
    data: ProviderBlockUpdate,
    service: DefaultsService = Depends(get_defaults_service),
) -> ProjectDefaultsRecord:
    """Merge provider fields into the defaults for one media type."""
    try:
        defaults = await service.update_media_type(media_type, data)
    except ValidationFailedError as e:
        raise bad_request(e)
    return ProjectDefaultsRecord.from_entity(defaults)
