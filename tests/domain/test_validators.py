"""Tests for the name, password and email validators."""

import pytest

from userctl.domain.validators import (
    MIN_PASSWORD_LENGTH,
    is_valid_email,
    is_valid_name,
    is_valid_password,
    validate_user,
)


class TestIsValidName:
    @pytest.mark.parametrize("value", ["John", " John ", "John Doe", "x"])
    def test_valid(self, value: str) -> None:
        assert is_valid_name(value)

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_invalid(self, value: str | None) -> None:
        assert not is_valid_name(value)


class TestIsValidPassword:
    @pytest.mark.parametrize("value", ["pass12", "123456", "verylongpassword", "  abcdef  "])
    def test_valid(self, value: str) -> None:
        assert is_valid_password(value)

    @pytest.mark.parametrize("value", [None, "", "   ", "pass1", "  pass1  "])
    def test_invalid(self, value: str | None) -> None:
        assert not is_valid_password(value)

    def test_no_character_class_requirement(self) -> None:
        """Only length matters; all-lowercase is accepted."""
        assert is_valid_password("a" * MIN_PASSWORD_LENGTH)

    def test_length_counts_after_trim(self) -> None:
        assert not is_valid_password(" " * 10)


class TestIsValidEmail:
    @pytest.mark.parametrize(
        "value",
        [
            "user@mail.com",
            "user.name@domain.com",
            "user+tag@mail.co.uk",
            "123@domain.com",
            "USER@MAIL.COM",
        ],
    )
    def test_valid(self, value: str) -> None:
        assert is_valid_email(value)

    @pytest.mark.parametrize(
        "value",
        [
            None,
            "",
            "user@",
            "@domain.com",
            "user@domain",
            "user domain.com",
            "user@.com",
            "@.",
            "user@domain.",
            "us er@mail.com",
            "user@mail .com",
            "a@b@mail.com",
            "invalid-email",
            "john@mail.com\n",
            "john@mail.com\r\n",
        ],
    )
    def test_invalid(self, value: str | None) -> None:
        assert not is_valid_email(value)


class TestValidateUser:
    def test_all_valid(self) -> None:
        assert validate_user("John", "secret1", "john@mail.com") == []

    def test_reports_failures_in_field_order(self) -> None:
        assert validate_user("", "abc", "nope") == ["name", "password", "email"]

    def test_single_failure(self) -> None:
        assert validate_user("John", "pass", "john@mail.com") == ["password"]
