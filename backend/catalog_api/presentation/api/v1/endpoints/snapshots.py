"""Undo/redo endpoints over the project's snapshot stacks."""

from fastapi import APIRouter, Depends, HTTPException, status

from catalog_api.application.schemas import HistoryTransitionResponse, SnapshotStateResponse
from catalog_api.application.services import SnapshotManager
from catalog_api.domain.exceptions import NothingToRedoError, NothingToUndoError
from catalog_api.infrastructure.dependencies import get_snapshot_manager

router = APIRouter(prefix="/snapshots", tags=["Snapshots"])


@router.get("", response_model=SnapshotStateResponse)
async def get_state(
    manager: SnapshotManager = Depends(get_snapshot_manager),
) -> SnapshotStateResponse:
    """Counts and top-of-stack messages for both stacks."""
    state = await manager.refresh_state()
    return SnapshotStateResponse.from_state(state)


@router.post("/undo", response_model=HistoryTransitionResponse)
async def undo(
    manager: SnapshotManager = Depends(get_snapshot_manager),
) -> HistoryTransitionResponse:
    """Restore the catalog to the most recent snapshot."""
    try:
        transition = await manager.undo()
    except NothingToUndoError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return HistoryTransitionResponse.from_transition(transition, "UNDO")


@router.post("/redo", response_model=HistoryTransitionResponse)
async def redo(
    manager: SnapshotManager = Depends(get_snapshot_manager),
) -> HistoryTransitionResponse:
    """Re-apply the most recently undone change."""
    try:
        transition = await manager.redo()
    except NothingToRedoError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return HistoryTransitionResponse.from_transition(transition, "REDO")


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_history(
    manager: SnapshotManager = Depends(get_snapshot_manager),
) -> None:
    await manager.clear()
