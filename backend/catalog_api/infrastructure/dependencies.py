"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Header, HTTPException, Query, status

from catalog_api.config import Settings, get_settings
from catalog_api.application.services import (
    ActorService,
    BinService,
    CatalogReader,
    DefaultsService,
    HistoryService,
    MediaService,
    SceneService,
    SnapshotManager,
    TakeService,
)
from catalog_api.domain.exceptions import EntityNotFoundError, NoProjectSelectedError
from catalog_api.infrastructure.project_context import ProjectContext, resolve_project
from catalog_api.infrastructure.storage import (
    JsonDefaultsRepository,
    JsonlCatalogRepository,
    JsonlHistoryLogRepository,
    JsonlSnapshotStore,
    JsonlTakeRepository,
)


def get_project_context(
    x_project: str | None = Header(None, description="Project directory name"),
    project: str | None = Query(None, description="Project directory name"),
    settings: Settings = Depends(get_settings),
) -> ProjectContext:
    """Resolves the project a request works on (header wins over query)."""
    try:
        return resolve_project(x_project or project, settings)
    except NoProjectSelectedError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


async def get_snapshot_manager(
    ctx: ProjectContext = Depends(get_project_context),
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[SnapshotManager, None]:
    """Provides the undo/redo manager of the selected project."""
    repository = JsonlCatalogRepository(ctx.paths)
    yield SnapshotManager(
        store=JsonlSnapshotStore(ctx.paths),
        repository=repository,
        reader=CatalogReader(repository),
        max_snapshots=settings.max_snapshots,
    )


async def get_actor_service(
    ctx: ProjectContext = Depends(get_project_context),
    snapshots: SnapshotManager = Depends(get_snapshot_manager),
) -> AsyncGenerator[ActorService, None]:
    repository = JsonlCatalogRepository(ctx.paths)
    yield ActorService(
        repository=repository,
        take_repository=JsonlTakeRepository(ctx.paths),
        defaults_repository=JsonDefaultsRepository(ctx.paths),
        reader=CatalogReader(repository),
        snapshots=snapshots,
    )


async def get_scene_service(
    ctx: ProjectContext = Depends(get_project_context),
    snapshots: SnapshotManager = Depends(get_snapshot_manager),
) -> AsyncGenerator[SceneService, None]:
    repository = JsonlCatalogRepository(ctx.paths)
    yield SceneService(
        repository=repository,
        take_repository=JsonlTakeRepository(ctx.paths),
        reader=CatalogReader(repository),
        snapshots=snapshots,
    )


async def get_bin_service(
    ctx: ProjectContext = Depends(get_project_context),
    snapshots: SnapshotManager = Depends(get_snapshot_manager),
) -> AsyncGenerator[BinService, None]:
    repository = JsonlCatalogRepository(ctx.paths)
    yield BinService(
        repository=repository,
        take_repository=JsonlTakeRepository(ctx.paths),
        reader=CatalogReader(repository),
        snapshots=snapshots,
    )


async def get_media_service(
    ctx: ProjectContext = Depends(get_project_context),
    snapshots: SnapshotManager = Depends(get_snapshot_manager),
) -> AsyncGenerator[MediaService, None]:
    repository = JsonlCatalogRepository(ctx.paths)
    yield MediaService(
        repository=repository,
        take_repository=JsonlTakeRepository(ctx.paths),
        defaults_repository=JsonDefaultsRepository(ctx.paths),
        reader=CatalogReader(repository),
        snapshots=snapshots,
    )


async def get_take_service(
    ctx: ProjectContext = Depends(get_project_context),
    snapshots: SnapshotManager = Depends(get_snapshot_manager),
) -> AsyncGenerator[TakeService, None]:
    yield TakeService(
        take_repository=JsonlTakeRepository(ctx.paths),
        reader=CatalogReader(JsonlCatalogRepository(ctx.paths)),
        snapshots=snapshots,
    )


async def get_history_service(
    ctx: ProjectContext = Depends(get_project_context),
) -> AsyncGenerator[HistoryService, None]:
    yield HistoryService(JsonlHistoryLogRepository(ctx.paths))


async def get_defaults_service(
    ctx: ProjectContext = Depends(get_project_context),
) -> AsyncGenerator[DefaultsService, None]:
    yield DefaultsService(JsonDefaultsRepository(ctx.paths))
