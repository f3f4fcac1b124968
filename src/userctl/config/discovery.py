"""Locate the userctl.toml that applies to an invocation.

Lookup order: ``--config``, then ``USERCTL_CONFIG``, then a walk up from
the working directory (the way git finds ``.git/``). The first two are
explicit requests, so a path that does not exist is an error rather than
a silent fall-through to the walk-up.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

CONFIG_FILENAME = "userctl.toml"
CONFIG_ENV_VAR = "USERCTL_CONFIG"


class ConfigNotFoundError(FileNotFoundError):
    """An explicitly requested config file does not exist."""

    def __init__(self, path: Path, origin: str) -> None:
        self.path = path
        self.origin = origin
        super().__init__(f"Config file from {origin} not found: {path}")


def walk_up(start: Path | None = None) -> Path | None:
    """Nearest ``userctl.toml`` in *start* (default: cwd) or its parents."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def find_config(
    explicit: str | Path | None = None,
    start: Path | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> Path | None:
    """Return the config file to load, or None when there is none.

    Raises:
        ConfigNotFoundError: If *explicit* or ``USERCTL_CONFIG`` names a
            path that is not a file.
    """
    if explicit:
        path = Path(explicit)
        if not path.is_file():
            raise ConfigNotFoundError(path, "--config")
        return path

    env_path = (os.environ if env is None else env).get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        if not path.is_file():
            raise ConfigNotFoundError(path, CONFIG_ENV_VAR)
        return path

    return walk_up(start)
