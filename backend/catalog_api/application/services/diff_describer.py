"""Human-readable descriptions of what changed between two versions of a record.

Used for undo messages, so the wording is short and stable:

    >>> describe_changes({"stability": 0.5}, {"stability": 0.8}).changes
    ['stability: 0.5 → 0.8']
"""

from dataclasses import dataclass, field
from typing import Any

FIELD_LABELS: dict[str, str] = {
    "display_name": "name",
    "base_filename": "filename",
    "voice_id": "voice",
    "model_id": "model",
    "min_candidates": "minimum candidates",
    "approval_count_default": "approval count",
    "similarity_boost": "similarity",
    "duration_seconds": "duration",
    "provider_settings": "provider settings",
    "media_type": "type",
    "bin_id": "bin",
    "filename": "filename",
    "prompt": "prompt",
    "all_approved": "media completion",
    "actor_complete": "actor completion",
    "scene_complete": "scene completion",
    "bin_complete": "bin completion",
    "status": "take status",
}

IGNORED_FIELDS = frozenset({"id", "created_at", "updated_at", "status_changed_at"})

COMPLETION_FIELDS = frozenset({"all_approved", "actor_complete", "scene_complete", "bin_complete"})

_MAX_VALUE_LENGTH = 30


@dataclass(frozen=True)
class DiffResult:
    changes: list[str] = field(default_factory=list)
    changed_fields: list[str] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return bool(self.changes)

    @property
    def summary(self) -> str:
        """E.g. ``"Changed voice, stability"``; empty when nothing changed."""
        if not self.changed_fields:
            return ""
        return f"Changed {', '.join(self.changed_fields)}"


def field_label(name: str) -> str:
    return FIELD_LABELS.get(name, name.replace("_", " "))


def format_value(value: Any) -> str:
    if value is None:
        return "none"
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        if len(value) > _MAX_VALUE_LENGTH:
            return value[: _MAX_VALUE_LENGTH - 3] + "..."
        return value
    if isinstance(value, (list, tuple)):
        return "[list]"
    if isinstance(value, dict):
        return "[object]"
    return str(value)


def _describe_field(key: str, old: Any, new: Any) -> str:
    label = field_label(key)
    if key in COMPLETION_FIELDS:
        return "marked as complete" if new else "marked as incomplete"
    if key == "status":
        match new:
            case "approved":
                return "Approved take"
            case "rejected":
                return "Rejected take"
            case "new":
                return "Reset take to new"
        return f"Changed take status to {new}"
    if old is None:
        return f"Set {label} to {format_value(new)}"
    if new is None:
        return f"Cleared {label}"
    return f"{label}: {format_value(old)} → {format_value(new)}"


def describe_changes(old: dict[str, Any] | None, new: dict[str, Any] | None) -> DiffResult:
    """Compare two field maps (wire form) and describe each difference.

    Nested maps such as ``provider_settings`` are compared key by key; the
    parent field is reported once in ``changed_fields``.
    """
    if old is None and new is None:
        return DiffResult()
    if old is None:
        return DiffResult(changes=["created"], changed_fields=["created"])
    if new is None:
        return DiffResult(changes=["deleted"], changed_fields=["deleted"])

    changes: list[str] = []
    changed_fields: list[str] = []
    keys = list(old) + [k for k in new if k not in old]

    for key in keys:
        if key in IGNORED_FIELDS:
            continue
        old_value = old.get(key)
        new_value = new.get(key)

        if isinstance(old_value, dict) and isinstance(new_value, dict):
            nested = describe_changes(old_value, new_value)
            if nested.has_changes:
                changes.extend(nested.changes)
                changed_fields.append(field_label(key))
            continue

        if old_value != new_value:
            changed_fields.append(field_label(key))
            changes.append(_describe_field(key, old_value, new_value))

    return DiffResult(changes=changes, changed_fields=changed_fields)


def update_message(
    kind: str,
    path: str,
    old: dict[str, Any],
    new: dict[str, Any],
    name_field: str = "name",
) -> str:
    """Undo message for an update; a rename wins over any other change."""
    new_name = new.get(name_field)
    if new_name is not None and new_name != old.get(name_field):
        return f"Rename {kind}: {path} → {new_name}"

    diff = describe_changes(old, new)
    if not diff.has_changes:
        return f"Update {kind}: {path} (no changes)"
    if len(diff.changes) == 1:
        return f"Update {kind}: {path} - {diff.changes[0]}"
    return f"Update {kind}: {path} ({len(diff.changes)} changes)"
