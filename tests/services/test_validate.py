"""Tests for ValidateService."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from userctl.services.validate import ValidateService


class TestValidateService:
    def test_counts(self, write_users: Callable[..., Path]) -> None:
        path = write_users(
            "John;pass;john@mail.com\nJane;pass456;jane@gmail.com\nBob;pass123;invalid-email\n"
        )
        result = ValidateService().validate_file(path)
        assert result.ok
        assert result.op == "validate_file"
        assert result.data["accepted"] == 1
        assert result.data["rejected"] == 2
        assert result.data["path"] == str(path)

    def test_empty_file_warns(self, write_users: Callable[..., Path]) -> None:
        result = ValidateService().validate_file(write_users(""))
        assert result.ok
        assert result.data["accepted"] == 0
        assert result.warnings == ["File contains no valid data"]

    def test_missing_file(self, tmp_path: Path) -> None:
        result = ValidateService().validate_file(tmp_path / "nope.txt")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "FILE_READ_ERROR"
        assert result.error.detail["path"].endswith("nope.txt")
