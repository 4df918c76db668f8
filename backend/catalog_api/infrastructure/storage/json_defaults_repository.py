"""Project defaults stored as a plain JSON document (``defaults.json``)."""

import json
import logging

from pydantic import ValidationError

from catalog_api.application.interfaces import DefaultsRepository
from catalog_api.application.schemas.records import ProjectDefaultsRecord
from catalog_api.domain.entities import ProjectDefaults
from catalog_api.infrastructure.storage.project_paths import ProjectPaths

logger = logging.getLogger(__name__)


class JsonDefaultsRepository(DefaultsRepository):
    def __init__(self, paths: ProjectPaths):
        self._path = paths.defaults

    async def load(self) -> ProjectDefaults | None:
        """Read defaults.json, returning None if missing or unreadable."""
        if not self._path.exists():
            return None
        try:
            raw = json.loads(self._path.read_text("utf-8"))
            return ProjectDefaultsRecord.model_validate(raw).to_entity()
        except (json.JSONDecodeError, ValidationError, ValueError) as exc:
            logger.warning("Could not read %s — using built-in defaults: %s", self._path, exc)
            return None

    async def save(self, defaults: ProjectDefaults) -> ProjectDefaults:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        record = ProjectDefaultsRecord.from_entity(defaults)
        self._path.write_text(json.dumps(record.to_wire(), indent=2), encoding="utf-8")
        logger.info("Project defaults written to %s", self._path)
        return defaults
