"""Health check endpoint — needs no project, always available."""

from pathlib import Path

from fastapi import APIRouter, Depends

from catalog_api.config import Settings, get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(settings: Settings = Depends(get_settings)) -> dict:
    """Reports version, environment and whether the projects directory is reachable."""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "projects_dir_available": Path(settings.projects_dir).is_dir(),
        "max_snapshots": settings.max_snapshots,
    }
