"""JSON Lines collection files — one record per line, whole-file rewrites.

A collection that has never been written reads as empty. Blank lines are
ignored; malformed lines are skipped with a warning so one bad record does
not hide the rest of the collection.
"""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class JsonlCollection:
    """A single ``.jsonl`` file holding an ordered list of JSON objects."""

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def ensure(self) -> None:
        """Create the file (and parent directories) if missing."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.touch(exist_ok=True)

    def read_all(self) -> list[dict[str, Any]]:
        if not self._path.exists():
            return []

        records: list[dict[str, Any]] = []
        with self._path.open("rb") as handle:
            for line_no, raw in enumerate(handle, start=1):
                if not raw.strip():
                    continue
                try:
                    record = json.loads(raw.decode("utf-8"))
                except (UnicodeDecodeError, json.JSONDecodeError):
                    logger.warning(
                        "Skipping malformed JSONL line %d in %s", line_no, self._path
                    )
                    continue
                if not isinstance(record, dict):
                    logger.warning(
                        "Skipping non-object JSONL line %d in %s", line_no, self._path
                    )
                    continue
                records.append(record)

        logger.debug("Read %d records from %s", len(records), self._path)
        return records

    def write_all(self, records: list[dict[str, Any]]) -> None:
        """Overwrite the collection with ``records`` (an empty list truncates)."""
        self.ensure()
        content = "".join(_dump_line(r) for r in records)
        self._path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %d records to %s", len(records), self._path)

    def append(self, records: list[dict[str, Any]]) -> None:
        if not records:
            return
        self.ensure()
        with self._path.open("a", encoding="utf-8") as handle:
            for record in records:
                handle.write(_dump_line(record))
        logger.debug("Appended %d records to %s", len(records), self._path)


def _dump_line(record: dict[str, Any]) -> str:
    return json.dumps(record, ensure_ascii=False) + "\n"
