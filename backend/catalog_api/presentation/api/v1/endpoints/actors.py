"""Actor CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from catalog_api.application.schemas import (
    ActorCreate,
    ActorCreateResponse,
    ActorRecord,
    ActorRestoreRequest,
    ActorUpdate,
    BinRecord,
    MediaRecord,
)
from catalog_api.application.services import ActorService
from catalog_api.domain.exceptions import EntityNotFoundError, ValidationFailedError
from catalog_api.infrastructure.dependencies import get_actor_service
from catalog_api.presentation.api.v1.endpoints.errors import bad_request

router = APIRouter(prefix="/actors", tags=["Actors"])


@router.get("", response_model=list[ActorRecord])
async def list_actors(
    service: ActorService = Depends(get_actor_service),
) -> list[ActorRecord]:
    """Retrieve every actor of the project."""
    actors = await service.list_actors()
    return [ActorRecord.from_entity(a) for a in actors]


@router.post("", response_model=ActorCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_actors(
    data: ActorCreate,
    service: ActorService = Depends(get_actor_service),
) -> ActorCreateResponse:
    """Create one or more actors from a comma-separated ``display_name``."""
    try:
        result = await service.create_actors(data)
    except ValidationFailedError as e:
        raise bad_request(e)
    return ActorCreateResponse(
        actors=[ActorRecord.from_entity(a) for a in result.actors],
        duplicates_skipped=result.duplicates_skipped,
        message=result.message,
    )


@router.post("/restore", response_model=ActorRestoreRequest, status_code=status.HTTP_201_CREATED)
async def restore_actor(
    data: ActorRestoreRequest,
    service: ActorService = Depends(get_actor_service),
) -> ActorRestoreRequest:
    """Re-insert a deleted actor with its bins and media. Not recorded in undo history."""
    result = await service.restore_actor(data)
    return ActorRestoreRequest(
        actor=ActorRecord.from_entity(result.actor),
        bins=[BinRecord.from_entity(b) for b in result.bins],
        media=[MediaRecord.from_entity(m) for m in result.media],
    )


@router.put("/{actor_id}", response_model=ActorRecord)
async def update_actor(
    actor_id: str,
    data: ActorUpdate,
    service: ActorService = Depends(get_actor_service),
) -> ActorRecord:
    """Update an actor; renames and field changes are described in the undo message."""
    try:
        actor = await service.update_actor(actor_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationFailedError as e:
        raise bad_request(e)
    return ActorRecord.from_entity(actor)


@router.delete("/{actor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_actor(
    actor_id: str,
    service: ActorService = Depends(get_actor_service),
) -> None:
    """Delete an actor together with its bins, media and takes."""
    try:
        await service.delete_actor(actor_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
