"""Comma-separated batch names and case-insensitive duplicate filtering."""

from collections.abc import Iterable


def split_batch_names(raw: str | None) -> list[str]:
    """``"Alice, Bob,,  "`` → ``["Alice", "Bob"]``"""
    if not raw:
        return []
    return [name.strip() for name in raw.split(",") if name.strip()]


def partition_duplicates(names: list[str], existing: Iterable[str]) -> tuple[list[str], list[str]]:
    """Split ``names`` into (fresh, duplicates).

    A name is a duplicate when it matches an existing name or an earlier name
    of the same batch, ignoring case. Each duplicate is reported once, with
    its first spelling.
    """
    taken = {name.lower() for name in existing}
    fresh: list[str] = []
    duplicates: list[str] = []
    reported: set[str] = set()

    for name in names:
        key = name.lower()
        if key in taken:
            if key not in reported:
                duplicates.append(name)
                reported.add(key)
            continue
        taken.add(key)
        fresh.append(name)

    return fresh, duplicates


def skipped_message(kind_plural: str, created: int, duplicates: list[str]) -> str | None:
    if not duplicates:
        return None
    return (
        f"Created {created} {kind_plural}. "
        f"Skipped {len(duplicates)} duplicates: {', '.join(duplicates)}"
    )
