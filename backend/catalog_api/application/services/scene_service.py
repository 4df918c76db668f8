"""Application service (use case) for scene operations."""

import dataclasses

from catalog_api.application.interfaces import CatalogRepository, TakeRepository
from catalog_api.application.schemas import SceneCreate, SceneRecord, SceneUpdate, validate_entity
from catalog_api.application.services.catalog_integrity import apply_cascade, plan_owner_delete
from catalog_api.application.services.catalog_reader import CatalogReader
from catalog_api.application.services.diff_describer import update_message
from catalog_api.application.services.path_builder import build_scene_path
from catalog_api.application.services.snapshot_manager import SnapshotManager
from catalog_api.domain.entities import OwnerType, Scene
from catalog_api.domain.entities.provider_settings import parse_provider_settings
from catalog_api.domain.exceptions import EntityNotFoundError
from catalog_api.infrastructure.logging.colored_logger import HistoryLogger, HistoryStage

hlog = HistoryLogger("SceneService")


class SceneService:
    """Scenes own bins and media the same way actors do."""

    def __init__(
        self,
        repository: CatalogRepository,
        take_repository: TakeRepository,
        reader: CatalogReader,
        snapshots: SnapshotManager,
    ):
        self._repository = repository
        self._take_repository = take_repository
        self._reader = reader
        self._snapshots = snapshots

    async def list_scenes(self) -> list[Scene]:
        return await self._repository.list_scenes()

    async def create_scene(self, data: SceneCreate) -> Scene:
        scene = Scene(
            name=data.name.strip(),
            description=data.description,
            provider_settings=parse_provider_settings(data.provider_settings),
        )
        validate_entity(SceneRecord, scene, "scene")

        catalog = await self._reader.read_catalog()
        await self._snapshots.save(f"Create scene: {build_scene_path(scene)}", catalog)
        await self._repository.append_scenes([scene])
        return scene

    async def update_scene(self, scene_id: str, data: SceneUpdate) -> Scene:
        catalog = await self._reader.read_catalog()
        current = catalog.find_scene(scene_id)
        if current is None:
            raise EntityNotFoundError("Scene", scene_id)

        changes = data.model_dump(exclude_unset=True)
        for key in ("name", "scene_complete", "provider_settings"):
            if changes.get(key, ...) is None:
                del changes[key]
        if "provider_settings" in changes:
            changes["provider_settings"] = parse_provider_settings(changes["provider_settings"])
        updated = dataclasses.replace(current, **changes)
        updated.touch()
        validate_entity(SceneRecord, updated, "scene")

        message = update_message(
            "scene",
            build_scene_path(current),
            SceneRecord.from_entity(current).to_wire(),
            SceneRecord.from_entity(updated).to_wire(),
        )
        await self._snapshots.save(message, catalog)

        scenes = [updated if s.id == scene_id else s for s in catalog.scenes]
        await self._repository.replace_scenes(scenes)
        return updated

    async def delete_scene(self, scene_id: str) -> None:
        """Delete a scene with its bins, media and takes."""
        catalog = await self._reader.read_catalog()
        scene = catalog.find_scene(scene_id)
        if scene is None:
            raise EntityNotFoundError("Scene", scene_id)

        takes = await self._take_repository.list_takes()
        plan = plan_owner_delete(catalog, takes, OwnerType.SCENE, scene_id)

        await self._snapshots.save(f"Delete scene: {build_scene_path(scene)}", catalog)
        await apply_cascade(plan, self._repository, self._take_repository)
        hlog.step(
            HistoryStage.CASCADE,
            f"Deleted scene {scene.name}",
            bins=plan.removed_bins,
            media=plan.removed_media,
            takes=plan.removed_takes,
        )
