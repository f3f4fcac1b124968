"""Tests for the pydantic config section models."""

import pytest
from pydantic import ValidationError

from userctl.config.models import FileConfig, OutputConfig, RandomConfig


class TestDefaults:
    def test_random(self) -> None:
        cfg = RandomConfig()
        assert cfg.count == 10
        assert cfg.variety is True
        assert cfg.seed is None

    def test_file(self) -> None:
        assert FileConfig().encoding == "utf-8"

    def test_output(self) -> None:
        assert OutputConfig().sort_by is None


class TestValidation:
    def test_negative_count_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RandomConfig(count=-1)

    def test_unknown_sort_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            OutputConfig(sort_by="age")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        cfg = RandomConfig()
        with pytest.raises(ValidationError):
            cfg.count = 3  # type: ignore[misc]
