"""Take endpoints. Takes are generated files attached to a media item."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from catalog_api.application.schemas import TakeRecord, TakeUpdate
from catalog_api.application.services import TakeService
from catalog_api.domain.exceptions import EntityNotFoundError, ValidationFailedError
from catalog_api.infrastructure.dependencies import get_take_service
from catalog_api.presentation.api.v1.endpoints.errors import bad_request

router = APIRouter(prefix="/takes", tags=["Takes"])


@router.get("", response_model=list[TakeRecord])
async def list_takes(
    media_id: str | None = Query(None, description="Filter by media item ID"),
    service: TakeService = Depends(get_take_service),
) -> list[TakeRecord]:
    takes = await service.list_takes(media_id)
    return [TakeRecord.from_entity(t) for t in takes]


@router.put("/{take_id}", response_model=TakeRecord)
async def update_take(
    take_id: str,
    data: TakeUpdate,
    service: TakeService = Depends(get_take_service),
) -> TakeRecord:
    """Change a take's review status or generation parameters."""
    try:
        take = await service.update_take(take_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationFailedError as e:
        raise bad_request(e)
    return TakeRecord.from_entity(take)


@router.delete("/{take_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_take(
    take_id: str,
    service: TakeService = Depends(get_take_service),
) -> None:
    """Delete a take record and its file. This cannot be undone."""
    try:
        await service.delete_take(take_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
