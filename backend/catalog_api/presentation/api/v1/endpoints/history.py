"""Audit history log endpoints (separate from undo/redo snapshots)."""

from fastapi import APIRouter, Depends, HTTPException, status

from catalog_api.application.schemas import (
    HistoryEntryCreate,
    HistoryEntryRecord,
    HistoryEntryUpdate,
)
from catalog_api.application.services import HistoryService
from catalog_api.domain.exceptions import EntityNotFoundError
from catalog_api.infrastructure.dependencies import get_history_service

router = APIRouter(prefix="/history", tags=["History"])


@router.get("", response_model=list[HistoryEntryRecord])
async def list_entries(
    service: HistoryService = Depends(get_history_service),
) -> list[HistoryEntryRecord]:
    """Log entries, newest first."""
    entries = await service.list_entries()
    return [HistoryEntryRecord.from_entity(e) for e in entries]


@router.post("", response_model=HistoryEntryRecord, status_code=status.HTTP_201_CREATED)
async def add_entry(
    data: HistoryEntryCreate,
    service: HistoryService = Depends(get_history_service),
) -> HistoryEntryRecord:
    entry = await service.add_entry(data)
    return HistoryEntryRecord.from_entity(entry)


@router.put("/{entry_id}", response_model=HistoryEntryRecord)
async def update_entry(
    entry_id: str,
    data: HistoryEntryUpdate,
    service: HistoryService = Depends(get_history_service),
) -> HistoryEntryRecord:
    try:
        entry = await service.update_entry(entry_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return HistoryEntryRecord.from_entity(entry)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_entries(
    service: HistoryService = Depends(get_history_service),
) -> None:
    await service.clear()
