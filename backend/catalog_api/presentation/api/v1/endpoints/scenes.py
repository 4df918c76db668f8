"""Scene CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from catalog_api.application.schemas import SceneCreate, SceneRecord, SceneUpdate
from catalog_api.application.services import SceneService
from catalog_api.domain.exceptions import EntityNotFoundError, ValidationFailedError
from catalog_api.infrastructure.dependencies import get_scene_service
from catalog_api.presentation.api.v1.endpoints.errors import bad_request

router = APIRouter(prefix="/scenes", tags=["Scenes"])


@router.get("", response_model=list[SceneRecord])
async def list_scenes(
    service: SceneService = Depends(get_scene_service),
) -> list[SceneRecord]:
    scenes = await service.list_scenes()
    return [SceneRecord.from_entity(s) for s in scenes]


@router.post("", response_model=SceneRecord, status_code=status.HTTP_201_CREATED)
async def create_scene(
    data: SceneCreate,
    service: SceneService = Depends(get_scene_service),
) -> SceneRecord:
    try:
        scene = await service.create_scene(data)
    except ValidationFailedError as e:
        raise bad_request(e)
    return SceneRecord.from_entity(scene)


@router.put("/{scene_id}", response_model=SceneRecord)
async def update_scene(
    scene_id: str,
    data: SceneUpdate,
    service: SceneService = Depends(get_scene_service),
) -> SceneRecord:
    try:
        scene = await service.update_scene(scene_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationFailedError as e:
        raise bad_request(e)
    return SceneRecord.from_entity(scene)


@router.delete("/{scene_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_scene(
    scene_id: str,
    service: SceneService = Depends(get_scene_service),
) -> None:
    """Delete a scene together with its bins, media and takes."""
    try:
        await service.delete_scene(scene_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
