"""Concrete repository implementations backed by per-project JSONL files."""

import logging
from typing import Any, TypeVar

from pydantic import ValidationError

from catalog_api.application.interfaces import CatalogRepository, TakeRepository
from catalog_api.application.schemas.records import (
    ActorRecord,
    BinRecord,
    MediaRecord,
    SceneRecord,
    TakeRecord,
    format_validation_errors,
)
from catalog_api.domain.entities import Actor, Bin, Media, Scene, Take
from catalog_api.infrastructure.storage.jsonl_store import JsonlCollection
from catalog_api.infrastructure.storage.project_paths import ProjectPaths

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", ActorRecord, SceneRecord, BinRecord, MediaRecord, TakeRecord)


def load_records(collection: JsonlCollection, record_cls: type[RecordT]) -> list[Any]:
    """Read a collection and map each valid line to its domain entity."""
    entities = []
    for raw in collection.read_all():
        try:
            entities.append(record_cls.model_validate(raw).to_entity())
        except (ValidationError, ValueError) as exc:
            details = (
                format_validation_errors(exc) if isinstance(exc, ValidationError) else [str(exc)]
            )
            logger.warning(
                "Skipping invalid %s record %s in %s: %s",
                record_cls.__name__,
                raw.get("id", "?"),
                collection.path,
                "; ".join(details),
            )
    return entities


def dump_records(entities: list[Any], record_cls: type[RecordT]) -> list[dict[str, Any]]:
    return [record_cls.from_entity(e).to_wire() for e in entities]


class JsonlCatalogRepository(CatalogRepository):
    """Implements the CatalogRepository port with one JSONL file per collection."""

    def __init__(self, paths: ProjectPaths):
        self._actors = JsonlCollection(paths.actors)
        self._scenes = JsonlCollection(paths.scenes)
        self._bins = JsonlCollection(paths.bins)
        self._media = JsonlCollection(paths.media)

    async def list_actors(self) -> list[Actor]:
        return load_records(self._actors, ActorRecord)

    async def list_scenes(self) -> list[Scene]:
        return load_records(self._scenes, SceneRecord)

    async def list_bins(self) -> list[Bin]:
        return load_records(self._bins, BinRecord)

    async def list_media(self) -> list[Media]:
        return load_records(self._media, MediaRecord)

    async def replace_actors(self, actors: list[Actor]) -> None:
        self._actors.write_all(dump_records(actors, ActorRecord))

    async def replace_scenes(self, scenes: list[Scene]) -> None:
        self._scenes.write_all(dump_records(scenes, SceneRecord))

    async def replace_bins(self, bins: list[Bin]) -> None:
        self._bins.write_all(dump_records(bins, BinRecord))

    async def replace_media(self, media: list[Media]) -> None:
        self._media.write_all(dump_records(media, MediaRecord))

    async def append_actors(self, actors: list[Actor]) -> None:
        self._actors.append(dump_records(actors, ActorRecord))

    async def append_scenes(self, scenes: list[Scene]) -> None:
        self._scenes.append(dump_records(scenes, SceneRecord))

    async def append_bins(self, bins: list[Bin]) -> None:
        self._bins.append(dump_records(bins, BinRecord))

    async def append_media(self, media: list[Media]) -> None:
        self._media.append(dump_records(media, MediaRecord))


class JsonlTakeRepository(TakeRepository):
    """Implements the TakeRepository port on ``takes.jsonl`` plus the media dir."""

    def __init__(self, paths: ProjectPaths):
        self._takes = JsonlCollection(paths.takes)
        self._media_dir = paths.media_dir

    async def list_takes(self) -> list[Take]:
        return load_records(self._takes, TakeRecord)

    async def replace_takes(self, takes: list[Take]) -> None:
        self._takes.write_all(dump_records(takes, TakeRecord))

    async def append_takes(self, takes: list[Take]) -> None:
        self._takes.append(dump_records(takes, TakeRecord))

    async def remove_file(self, relative_path: str) -> bool:
        media_root = self._media_dir.resolve()
        file_path = (media_root / relative_path).resolve()
        if not file_path.is_relative_to(media_root):
            logger.warning("Refusing to delete take file outside media dir: %s", relative_path)
            return False
        if not file_path.is_file():
            return False

        file_path.unlink(missing_ok=True)
        logger.info("Deleted take file from disk: %s", file_path)
        return True
