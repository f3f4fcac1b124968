"""The user record — the unit of validation and generation.

INVARIANT: A User is never constructed from invalid fields.
Strategies validate before constructing; the model re-checks so a
record can never exist in an invalid state.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_validator

from userctl.domain.validators import is_valid_email, is_valid_name, is_valid_password


class User(BaseModel):
    """Immutable ``{name, password, email}`` triple."""

    model_config = {"frozen": True}

    name: str
    password: str
    email: str

    @field_validator("name")
    @classmethod
    def _check_name(cls, v: str) -> str:
        if not is_valid_name(v):
            msg = "name must not be blank"
            raise ValueError(msg)
        return v

    @field_validator("password")
    @classmethod
    def _check_password(cls, v: str) -> str:
        if not is_valid_password(v):
            msg = "password is too short"
            raise ValueError(msg)
        return v

    @field_validator("email")
    @classmethod
    def _check_email(cls, v: str) -> str:
        if not is_valid_email(v):
            msg = "email must look like local@domain.tld"
            raise ValueError(msg)
        return v

    def to_row(self) -> dict[str, Any]:
        """Plain dict for result payloads."""
        return self.model_dump()
