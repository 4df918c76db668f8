"""Explicit per-request project context.

Every catalog, snapshot and history operation receives the project it works
on; there is no process-wide "current project".
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from catalog_api.config import Settings
from catalog_api.domain.exceptions import EntityNotFoundError, NoProjectSelectedError
from catalog_api.infrastructure.storage.project_paths import ProjectPaths

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectContext:
    name: str
    paths: ProjectPaths


def resolve_project(name: str | None, settings: Settings) -> ProjectContext:
    """Map a project name to its directory under ``settings.projects_dir``.

    Raises:
        NoProjectSelectedError: no name given and no default configured.
        EntityNotFoundError: the name is not an existing project directory.
    """
    name = (name or settings.default_project or "").strip()
    if not name:
        raise NoProjectSelectedError()

    projects_root = Path(settings.projects_dir).resolve()
    root = (projects_root / name).resolve()
    if root.parent != projects_root or not root.is_dir():
        logger.debug("Unknown project '%s' under %s", name, projects_root)
        raise EntityNotFoundError("Project", name)

    return ProjectContext(name=name, paths=ProjectPaths(root))
