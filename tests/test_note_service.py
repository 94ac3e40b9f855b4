"""Tests for note operations backed by the SQLModel repository."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from habitlog.services import notes as note_service


def test_add_note_keeps_text_and_starts_unpinned(note_repo, user):
    note = note_service.add_note(note_repo, "  Slept well\n[] stretch ", "2024-03-15", user_id=user.id)

    stored = note_repo.get_by_id(note.id, user_id=user.id)
    assert stored.text == "  Slept well\n[] stretch "
    assert stored.date == "2024-03-15"
    assert stored.is_sticky is False
    assert stored.created_at is not None


@pytest.mark.parametrize("text", ["", "   \n  "])
def test_add_note_rejects_blank_text(note_repo, user, text):
    with pytest.raises(ValueError):
        note_service.add_note(note_repo, text, "2024-03-15", user_id=user.id)


def test_add_note_rejects_malformed_date(note_repo, user):
    with pytest.raises(ValueError):
        note_service.add_note(note_repo, "hello", "March 15", user_id=user.id)


def test_edit_note_trims_text_and_moves_date(note_repo, note_factory, user):
    note = note_factory(text="draft", day="2024-03-01")
    updated = note_service.edit_note(note_repo, note.id, "  final  ", "2024-03-02", user_id=user.id)

    assert updated.text == "final"
    assert updated.date == "2024-03-02"
    assert note_repo.get_by_id(note.id, user_id=user.id).text == "final"


def test_edit_note_rejects_blank(note_repo, note_factory, user):
    note = note_factory(text="keep me")
    with pytest.raises(ValueError):
        note_service.edit_note(note_repo, note.id, " ", "2024-03-02", user_id=user.id)
    assert note_repo.get_by_id(note.id, user_id=user.id).text == "keep me"


def test_edit_unknown_note(note_repo, user):
    with pytest.raises(LookupError):
        note_service.edit_note(note_repo, "missing", "text", "2024-03-02", user_id=user.id)


def test_delete_note(note_repo, note_factory, user):
    note = note_factory()
    note_service.delete_note(note_repo, note.id, user_id=user.id)
    assert note_repo.get_by_id(note.id, user_id=user.id) is None


def test_toggle_sticky_flips_flag(note_repo, note_factory, user):
    note = note_factory()
    assert note_service.toggle_sticky(note_repo, note.id, user_id=user.id) is True
    assert note_service.toggle_sticky(note_repo, note.id, user_id=user.id) is False


def test_toggle_checkbox_persists(note_repo, note_factory, user):
    note = note_factory(text="Errands\n[] post office\n[] bank")
    updated = note_service.toggle_note_checkbox(note_repo, note.id, 2, True, user_id=user.id)

    assert updated.text == "Errands\n[] post office\n[x] bank"
    assert note_repo.get_by_id(note.id, user_id=user.id).text == "Errands\n[] post office\n[x] bank"


def test_toggle_checkbox_on_plain_line_is_noop(note_repo, note_factory, user):
    note = note_factory(text="Errands\n[] bank")
    updated = note_service.toggle_note_checkbox(note_repo, note.id, 0, True, user_id=user.id)
    assert updated.text == "Errands\n[] bank"


def test_list_notes_newest_first_and_split(note_repo, note_factory, user, user_factory):
    older = note_factory(text="old", created_at=datetime(2024, 3, 1, tzinfo=timezone.utc))
    pinned = note_factory(text="pinned", is_sticky=True, created_at=datetime(2024, 3, 2, tzinfo=timezone.utc))
    newer = note_factory(text="new", created_at=datetime(2024, 3, 3, tzinfo=timezone.utc))
    note_factory(text="someone else", owner=user_factory("eve"))

    notes = note_service.list_notes(note_repo, user_id=user.id)
    assert [n.id for n in notes] == [newer.id, pinned.id, older.id]

    sticky, regular = note_service.split_notes(notes)
    assert [n.id for n in sticky] == [pinned.id]
    assert [n.id for n in regular] == [newer.id, older.id]


def test_note_view_includes_rendered_html(note_factory):
    note = note_factory(text="**hi**\n[x] done")
    view = note_service.note_view(note)

    assert view["html"].startswith("<strong>hi</strong><br><label")
    assert view["id"] == note.id
    assert view["is_sticky"] is False


def test_note_view_reports_created_at_in_utc(note_repo, note_factory, user):
    note = note_factory(text="stamped", created_at=datetime(2024, 3, 15, 8, 30, tzinfo=timezone.utc))
    stored = note_repo.get_by_id(note.id, user_id=user.id)

    view = note_service.note_view(stored)

    assert view["created_at"] == "2024-03-15T08:30:00+00:00"
    assert datetime.fromisoformat(view["created_at"]).tzinfo is not None
