"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from catalog_api.presentation.api.v1.endpoints.health import router as health_router
from catalog_api.presentation.api.v1.endpoints.actors import router as actors_router
from catalog_api.presentation.api.v1.endpoints.scenes import router as scenes_router
from catalog_api.presentation.api.v1.endpoints.bins import router as bins_router
from catalog_api.presentation.api.v1.endpoints.media import router as media_router
from catalog_api.presentation.api.v1.endpoints.takes import router as takes_router
from catalog_api.presentation.api.v1.endpoints.snapshots import router as snapshots_router
from catalog_api.presentation.api.v1.endpoints.defaults import router as defaults_router
from catalog_api.presentation.api.v1.endpoints.history import router as history_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(actors_router)
router.include_router(scenes_router)
router.include_router(bins_router)
router.include_router(media_router)
router.include_router(takes_router)
router.include_router(snapshots_router)
router.include_router(defaults_router)
router.include_router(history_router)
