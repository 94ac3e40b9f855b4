"""Sign-in form definitions."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class CredentialsForm(BaseModel):
    """Username and password submitted to register or sign in.

    Passwords are taken verbatim; only the username is trimmed.
    """

    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=256)

    @field_validator("username", mode="before")
    @classmethod
    def _strip_username(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value


__all__ = ["CredentialsForm"]
