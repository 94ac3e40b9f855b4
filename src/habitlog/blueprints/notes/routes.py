"""Note routes."""

from __future__ import annotations

from flask import jsonify

from ...extensions import note_repository
from ...services import notes as note_service
from ...services.markup import render_note
from ..helpers import current_user_id, login_required, parse_form
from . import bp
from .forms import CheckboxForm, NoteForm, PreviewForm


@bp.get("/")
@login_required
def list_notes():
    """Return sticky and regular notes, newest first, with rendered HTML."""

    notes = note_service.list_notes(note_repository(), user_id=current_user_id())
    sticky, regular = note_service.split_notes(notes)
    return jsonify(
        {
            "sticky": [note_service.note_view(note) for note in sticky],
            "regular": [note_service.note_view(note) for note in regular],
        }
    )


@bp.post("/")
@login_required
def create_note():
    form = parse_form(NoteForm)
    note = note_service.add_note(note_repository(), form.text, form.date, user_id=current_user_id())
    return jsonify(note_service.note_view(note)), 201


@bp.patch("/<note_id>")
@login_required
def edit_note(note_id: str):
    form = parse_form(NoteForm)
    note = note_service.edit_note(
        note_repository(), note_id, form.text, form.date, user_id=current_user_id()
    )
    return jsonify(note_service.note_view(note))


@bp.delete("/<note_id>")
@login_required
def delete_note(note_id: str):
    note_service.delete_note(note_repository(), note_id, user_id=current_user_id())
    return "", 204


@bp.post("/<note_id>/sticky")
@login_required
def toggle_sticky(note_id: str):
    is_sticky = note_service.toggle_sticky(note_repository(), note_id, user_id=current_user_id())
    return jsonify({"id": note_id, "is_sticky": is_sticky})


@bp.post("/<note_id>/checkbox")
@login_required
def toggle_checkbox(note_id: str):
    form = parse_form(CheckboxForm)
    note = note_service.toggle_note_checkbox(
        note_repository(), note_id, form.line, form.checked, user_id=current_user_id()
    )
    return jsonify(note_service.note_view(note))


@bp.post("/preview")
@login_required
def preview():
    form = parse_form(PreviewForm)
    return jsonify({"html": render_note(form.text)})
