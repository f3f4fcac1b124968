"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, userctl.toml only contains
overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

SortField = Literal["name", "email", "password"]


class RandomConfig(BaseModel):
    """[random] section."""

    model_config = {"frozen": True}

    count: int = Field(default=10, ge=0)
    variety: bool = True
    seed: int | None = None


class FileConfig(BaseModel):
    """[file] section."""

    model_config = {"frozen": True}

    encoding: str = "utf-8"


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    sort_by: SortField | None = None
