"""Bin CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from catalog_api.application.schemas import BinCreate, BinRecord, BinUpdate
from catalog_api.application.services import BinService
from catalog_api.domain.exceptions import EntityNotFoundError, ValidationFailedError
from catalog_api.infrastructure.dependencies import get_bin_service
from catalog_api.presentation.api.v1.endpoints.errors import bad_request

router = APIRouter(prefix="/bins", tags=["Bins"])


@router.get("", response_model=list[BinRecord])
async def list_bins(
    service: BinService = Depends(get_bin_service),
) -> list[BinRecord]:
    bins = await service.list_bins()
    return [BinRecord.from_entity(b) for b in bins]


@router.post("", response_model=BinRecord, status_code=status.HTTP_201_CREATED)
async def create_bin(
    data: BinCreate,
    service: BinService = Depends(get_bin_service),
) -> BinRecord:
    """Create a bin; its owner must exist."""
    try:
        bin_ = await service.create_bin(data)
    except ValidationFailedError as e:
        raise bad_request(e)
    return BinRecord.from_entity(bin_)


@router.put("/{bin_id}", response_model=BinRecord)
async def update_bin(
    bin_id: str,
    data: BinUpdate,
    service: BinService = Depends(get_bin_service),
) -> BinRecord:
    try:
        bin_ = await service.update_bin(bin_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationFailedError as e:
        raise bad_request(e)
    return BinRecord.from_entity(bin_)


@router.delete("/{bin_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_bin(
    bin_id: str,
    service: BinService = Depends(get_bin_service),
) -> None:
    """Delete a bin together with its media and their takes."""
    try:
        await service.delete_bin(bin_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
