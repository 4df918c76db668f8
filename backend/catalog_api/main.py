"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog_api.config import get_settings
from catalog_api.infrastructure.logging.log_config import setup_logging
from catalog_api.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


def _list_projects(projects_dir: Path) -> list[str]:
    return sorted(p.name for p in projects_dir.iterdir() if p.is_dir())


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and prepare the project workspace."""
    settings = get_settings()
    setup_logging(settings)

    projects_dir = Path(settings.projects_dir)
    projects_dir.mkdir(parents=True, exist_ok=True)
    projects = _list_projects(projects_dir)
    logger.info(
        "Serving %d project(s) from %s (history depth %d)",
        len(projects), projects_dir.resolve(), settings.max_snapshots,
    )
    if settings.default_project and settings.default_project not in projects:
        logger.warning("Default project '%s' does not exist yet", settings.default_project)

    yield


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Project"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog_api.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
