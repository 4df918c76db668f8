"""On-disk layout of a single project.

    <project>/catalog/actors.jsonl
    <project>/catalog/scenes.jsonl
    <project>/catalog/bins.jsonl
    <project>/catalog/media.jsonl
    <project>/catalog/takes.jsonl
    <project>/catalog/snapshots.jsonl        — undo stack, oldest first
    <project>/catalog/redo-snapshots.jsonl   — redo stack, oldest first
    <project>/catalog/history.jsonl          — audit trail
    <project>/defaults.json
    <project>/media/                         — take files (relative paths)
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ProjectPaths:
    root: Path

    @property
    def catalog_dir(self) -> Path:
        return self.root / "catalog"

    @property
    def actors(self) -> Path:
        return self.catalog_dir / "actors.jsonl"

    @property
    def scenes(self) -> Path:
        return self.catalog_dir / "scenes.jsonl"

    @property
    def bins(self) -> Path:
        return self.catalog_dir / "bins.jsonl"

    @property
    def media(self) -> Path:
        return self.catalog_dir / "media.jsonl"

    @property
    def takes(self) -> Path:
        return self.catalog_dir / "takes.jsonl"

    @property
    def undo_snapshots(self) -> Path:
        return self.catalog_dir / "snapshots.jsonl"

    @property
    def redo_snapshots(self) -> Path:
        return self.catalog_dir / "redo-snapshots.jsonl"

    @property
    def history(self) -> Path:
        return self.catalog_dir / "history.jsonl"

    @property
    def defaults(self) -> Path:
        return self.root / "defaults.json"

    @property
    def media_dir(self) -> Path:
        return self.root / "media"
