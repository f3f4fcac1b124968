"""Tests for the immutable User record."""

import pytest
from pydantic import ValidationError

from userctl.domain.user import User


class TestUser:
    def test_construction(self) -> None:
        user = User(name="John", password="secret1", email="john@mail.com")
        assert user.name == "John"
        assert user.to_row() == {
            "name": "John",
            "password": "secret1",
            "email": "john@mail.com",
        }

    def test_frozen(self) -> None:
        user = User(name="John", password="secret1", email="john@mail.com")
        with pytest.raises(ValidationError):
            user.name = "Jane"  # type: ignore[misc]

    @pytest.mark.parametrize(
        "fields",
        [
            {"name": "  ", "password": "secret1", "email": "john@mail.com"},
            {"name": "John", "password": "short", "email": "john@mail.com"},
            {"name": "John", "password": "secret1", "email": "john@mail"},
            {"name": "John", "password": "secret1", "email": "john@mail.com\n"},
            {"name": "John", "password": "secret1", "email": "john@mail.com\r\n"},
        ],
    )
    def test_rejects_invalid_fields(self, fields: dict[str, str]) -> None:
        with pytest.raises(ValidationError):
            User(**fields)

    def test_equality_by_value(self) -> None:
        a = User(name="John", password="secret1", email="john@mail.com")
        b = User(name="John", password="secret1", email="john@mail.com")
        assert a == b
