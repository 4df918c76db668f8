"""Unit tests for change descriptions used in undo messages."""

from catalog_api.application.services.diff_describer import (
    describe_changes,
    format_value,
    update_message,
)


def test_changed_number():
    diff = describe_changes({"stability": 0.5}, {"stability": 0.8})
    assert diff.changes == ["stability: 0.5 → 0.8"]
    assert diff.changed_fields == ["stability"]


def test_set_and_cleared_values_use_labels():
    diff = describe_changes(
        {"voice_id": None, "prompt": "Hello there"},
        {"voice_id": "abc123", "prompt": None},
    )
    assert diff.changes == ["Set voice to abc123", "Cleared prompt"]
    assert diff.summary == "Changed voice, prompt"


def test_completion_flags():
    assert describe_changes({"actor_complete": False}, {"actor_complete": True}).changes == [
        "marked as complete"
    ]
    assert describe_changes({"bin_complete": True}, {"bin_complete": False}).changes == [
        "marked as incomplete"
    ]


def test_take_status_phrases():
    assert describe_changes({"status": "new"}, {"status": "approved"}).changes == ["Approved take"]
    assert describe_changes({"status": "new"}, {"status": "rejected"}).changes == ["Rejected take"]
    assert describe_changes({"status": "approved"}, {"status": "new"}).changes == ["Reset take to new"]
    assert describe_changes({"status": "new"}, {"status": "hidden"}).changes == [
        "Changed take status to hidden"
    ]


def test_nested_settings_reported_under_parent_field():
    old = {"provider_settings": {"dialogue": {"provider": "elevenlabs", "stability": 0.5}}}
    new = {"provider_settings": {"dialogue": {"provider": "elevenlabs", "stability": 0.7}}}

    diff = describe_changes(old, new)

    assert diff.changes == ["stability: 0.5 → 0.7"]
    assert diff.changed_fields == ["provider settings"]


def test_bookkeeping_fields_are_ignored():
    diff = describe_changes(
        {"id": "a", "updated_at": "2024-01-01", "name": "x"},
        {"id": "b", "updated_at": "2024-02-01", "name": "x"},
    )
    assert not diff.has_changes
    assert diff.summary == ""


def test_created_and_deleted():
    assert describe_changes(None, {"name": "x"}).changes == ["created"]
    assert describe_changes({"name": "x"}, None).changes == ["deleted"]
    assert not describe_changes(None, None).has_changes


def test_format_value():
    assert format_value(None) == "none"
    assert format_value(True) == "yes"
    assert format_value(False) == "no"
    assert format_value(3) == "3"
    assert format_value([1, 2]) == "[list]"
    assert format_value({"a": 1}) == "[object]"

    long_value = format_value("x" * 40)
    assert long_value == "x" * 27 + "..."
    assert len(long_value) == 30


def test_update_message_rename_wins():
    message = update_message(
        "actor",
        "Alice",
        {"display_name": "Alice", "notes": ""},
        {"display_name": "Alicia", "notes": "lead"},
        name_field="display_name",
    )
    assert message == "Rename actor: Alice → Alicia"


def test_update_message_variants():
    assert update_message("scene", "Intro", {"name": "Intro"}, {"name": "Intro"}) == (
        "Update scene: Intro (no changes)"
    )
    assert update_message(
        "bin", "actor → Alice → Lines", {"bin_complete": False}, {"bin_complete": True}
    ) == "Update bin: actor → Alice → Lines - marked as complete"
    assert update_message(
        "media", "p", {"prompt": "a", "filename": "a.wav"}, {"prompt": "b", "filename": "b.wav"}
    ) == "Update media: p (2 changes)"
