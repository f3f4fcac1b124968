"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``USERCTL_*`` prefix
  3. TOML file    — ``userctl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`userctl.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from userctl.config.discovery import ConfigNotFoundError, find_config
from userctl.config.models import FileConfig, OutputConfig, RandomConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``userctl.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class UserctlSettings(BaseSettings):
    """Unified settings for the userctl CLI.

    Merges CLI flags, environment variables, TOML config sections,
    and code-baked defaults into a single frozen object.  Stored on the
    :class:`~userctl.commands._context.AppContext` at the CLI root.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        seed: ``--seed`` override for the random generator.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "USERCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    trace_lines: bool = False
    no_interact: bool = False
    seed: int | None = None

    # --- TOML sections ---
    random: RandomConfig = Field(default_factory=RandomConfig)
    file: FileConfig = Field(default_factory=FileConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @property
    def effective_seed(self) -> int | None:
        """``--seed`` if given, else ``[random] seed``."""
        return self.seed if self.seed is not None else self.random.seed

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> UserctlSettings:
        """Construct settings from CLI invocation.

        Loads *config_path* or ``USERCTL_CONFIG`` when given (a missing file
        is a :class:`click.ClickException`), otherwise walks up from *start*
        (default: cwd) looking for ``userctl.toml``.
        CLI flags are merged as highest-priority overrides; ``None`` flags
        are dropped so they never mask env or TOML values.
        """
        try:
            toml_path = find_config(config_path, start)
        except ConfigNotFoundError as exc:
            import click

            raise click.ClickException(str(exc)) from exc

        overrides = {k: v for k, v in cli_flags.items() if v is not None}

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None
