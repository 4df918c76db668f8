"""Media item CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from catalog_api.application.schemas import (
    MediaCreate,
    MediaCreateResponse,
    MediaRecord,
    MediaUpdate,
    ResolvedSettingsResponse,
)
from catalog_api.application.services import MediaService
from catalog_api.domain.entities import MediaType, OwnerType
from catalog_api.domain.exceptions import EntityNotFoundError, ValidationFailedError
from catalog_api.infrastructure.dependencies import get_media_service
from catalog_api.presentation.api.v1.endpoints.errors import bad_request

router = APIRouter(prefix="/media", tags=["Media"])


@router.get("", response_model=list[MediaRecord])
async def list_media(
    owner_id: str | None = Query(None, description="Filter by owner ID"),
    owner_type: OwnerType | None = Query(None, description="Filter by owner type"),
    media_type: MediaType | None = Query(None, description="Filter by media type"),
    bin_id: str | None = Query(None, description="Filter by bin ID"),
    service: MediaService = Depends(get_media_service),
) -> list[MediaRecord]:
    """Retrieve media items, optionally filtered."""
    media = await service.list_media(
        owner_id=owner_id,
        owner_type=owner_type,
        media_type=media_type,
        bin_id=bin_id,
    )
    return [MediaRecord.from_entity(m) for m in media]


@router.post("", response_model=MediaCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_media(
    data: MediaCreate,
    service: MediaService = Depends(get_media_service),
) -> MediaCreateResponse:
    """Create one or more media items from a comma-separated ``name``."""
    try:
        result = await service.create_media(data)
    except ValidationFailedError as e:
        raise bad_request(e)
    return MediaCreateResponse(
        media=[MediaRecord.from_entity(m) for m in result.media],
        duplicates_skipped=result.duplicates_skipped,
        message=result.message,
    )


@router.get("/{media_id}/resolved-settings", response_model=ResolvedSettingsResponse)
async def get_resolved_settings(
    media_id: str,
    service: MediaService = Depends(get_media_service),
) -> ResolvedSettingsResponse:
    """Provider settings that apply to this item after inheritance."""
    try:
        resolved = await service.resolve_settings(media_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ResolvedSettingsResponse(
        media_type=resolved.media_type,
        provider=resolved.settings.provider,
        settings=resolved.settings.fields,
        resolved_from=resolved.resolved_from,
        source_name=resolved.source_name,
    )


@router.put("/{media_id}", response_model=MediaRecord)
async def update_media(
    media_id: str,
    data: MediaUpdate,
    service: MediaService = Depends(get_media_service),
) -> MediaRecord:
    try:
        media = await service.update_media(media_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationFailedError as e:
        raise bad_request(e)
    return MediaRecord.from_entity(media)


@router.delete("/{media_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_media(
    media_id: str,
    service: MediaService = Depends(get_media_service),
) -> None:
    """Delete a media item and its takes."""
    try:
        await service.delete_media(media_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
