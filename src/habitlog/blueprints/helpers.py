"""Request helpers shared by the JSON blueprints."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from flask import Flask, jsonify, request, session
from pydantic import BaseModel, ValidationError

from ..logging_config import get_logger

FormT = TypeVar("FormT", bound=BaseModel)

logger = get_logger("blueprints")


def current_user_id() -> int | None:
    return session.get("user_id")


def login_required(view: Callable[..., Any]) -> Callable[..., Any]:
    """Reject requests without a signed-in user with a 401 JSON body."""

    @functools.wraps(view)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if current_user_id() is None:
            return jsonify({"error": "authentication_required"}), 401
        return view(*args, **kwargs)

    return wrapper


def parse_form(form_cls: type[FormT]) -> FormT:
    """Validate the JSON body (or form fields) of the current request."""

    payload = request.get_json(silent=True)
    if payload is None:
        payload = request.form.to_dict()
    return form_cls.model_validate(payload)


def validation_errors(exc: ValidationError) -> dict[str, list[str]]:
    """Group pydantic errors by field name."""

    structured: dict[str, list[str]] = {}
    for error in exc.errors(include_url=False):
        loc = error.get("loc", ())
        key = str(loc[0]) if loc else "__root__"
        structured.setdefault(key, []).append(error.get("msg", "Invalid value"))
    return structured


def register_error_handlers(app: Flask) -> None:
    """Translate service exceptions into JSON error responses."""

    @app.errorhandler(ValidationError)
    def _invalid_payload(exc: ValidationError):
        return jsonify({"error": "invalid_payload", "fields": validation_errors(exc)}), 400

    @app.errorhandler(ValueError)
    def _invalid_value(exc: ValueError):
        logger.info("Rejected request: %s", exc, extra={"path": request.path})
        return jsonify({"error": "invalid_value", "message": str(exc)}), 400

    @app.errorhandler(LookupError)
    def _not_found(exc: LookupError):
        message = exc.args[0] if exc.args else "Not found"
        return jsonify({"error": "not_found", "message": message}), 404
