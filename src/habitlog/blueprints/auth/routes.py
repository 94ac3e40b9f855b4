"""Auth routes."""

from __future__ import annotations

from flask import jsonify, session

from ...extensions import get_session_factory
from ...models.user import User
from ...services import auth as auth_service
from ..helpers import current_user_id, login_required, parse_form
from . import bp
from .forms import CredentialsForm


def _user_payload(user: User) -> dict:
    return {"id": user.id, "username": user.username}


def _sign_in(user: User) -> None:
    session.clear()
    session["user_id"] = user.id
    session["username"] = user.username


@bp.post("/register")
def register():
    form = parse_form(CredentialsForm)
    user = auth_service.create_user(
        username=form.username,
        password=form.password,
        session_factory=get_session_factory(),
    )
    _sign_in(user)
    return jsonify(_user_payload(user)), 201


@bp.post("/login")
def login():
    form = parse_form(CredentialsForm)
    user = auth_service.authenticate(
        username=form.username,
        password=form.password,
        session_factory=get_session_factory(),
    )
    if user is None:
        return jsonify({"error": "invalid_credentials"}), 401
    _sign_in(user)
    return jsonify(_user_payload(user))


@bp.post("/logout")
def logout():
    session.clear()
    return "", 204


@bp.get("/me")
@login_required
def me():
    user = auth_service.get_user(current_user_id(), get_session_factory())
    if user is None:
        session.clear()
        return jsonify({"error": "authentication_required"}), 401
    return jsonify(_user_payload(user))
