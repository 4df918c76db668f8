import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Production Catalog API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Project workspace — each sub-directory is one project
    projects_dir: str = "projects"
    default_project: str | None = None

    # Undo/redo history depth per stack
    max_snapshots: int = 50

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_storage: str = "WARNING"       # JSONL collection reads/writes
    log_level_history: str = "INFO"          # Snapshot / undo / redo tracing
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Clamp the history depth to at least one entry."""
        if self.max_snapshots < 1:
            _config_logger.warning(
                "max_snapshots=%d is invalid — using 1", self.max_snapshots
            )
            object.__setattr__(self, "max_snapshots", 1)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
