"""Unit tests for the audit history log."""

import pytest

from catalog_api.application.schemas import HistoryEntryCreate, HistoryEntryUpdate
from catalog_api.application.services import HistoryService
from catalog_api.domain.entities import HistoryEntryType, HistoryLevel
from catalog_api.domain.exceptions import EntityNotFoundError
from catalog_api.infrastructure.storage import JsonlHistoryLogRepository


@pytest.fixture
def service(paths) -> HistoryService:
    return HistoryService(JsonlHistoryLogRepository(paths))


@pytest.mark.asyncio
async def test_entries_listed_newest_first(service: HistoryService):
    first = await service.add_entry(HistoryEntryCreate(message="Create actor: Alice"))
    second = await service.add_entry(
        HistoryEntryCreate(message="UNDO: Create actor: Alice", entry_type=HistoryEntryType.UNDO, undo_of=first.id)
    )

    entries = await service.list_entries()

    assert [e.id for e in entries] == [second.id, first.id]
    assert entries[0].undo_of == first.id
    assert entries[1].level == HistoryLevel.INFO


@pytest.mark.asyncio
async def test_client_supplied_id_is_kept(service: HistoryService):
    entry = await service.add_entry(HistoryEntryCreate(id="client-1", message="hello"))
    assert entry.id == "client-1"


@pytest.mark.asyncio
async def test_mark_entry_undone(service: HistoryService):
    entry = await service.add_entry(HistoryEntryCreate(message="Delete bin: x"))

    updated = await service.update_entry(entry.id, HistoryEntryUpdate(undone=True))

    assert updated.undone is True
    assert updated.message == "Delete bin: x"
    [stored] = await service.list_entries()
    assert stored.undone is True


@pytest.mark.asyncio
async def test_update_missing_entry(service: HistoryService):
    with pytest.raises(EntityNotFoundError):
        await service.update_entry("nope", HistoryEntryUpdate(undone=True))


@pytest.mark.asyncio
async def test_clear(service: HistoryService):
    await service.add_entry(HistoryEntryCreate(message="a"))
    await service.clear()
    assert await service.list_entries() == []
