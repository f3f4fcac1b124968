"""Load records from a ``name;password;email`` file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from userctl.infrastructure.parser import ParseResult, parse_user_file

if TYPE_CHECKING:
    from userctl.domain.user import User
    from userctl.infrastructure.console import Console

PATH_PROMPT = "Enter file path: "


class FileInputStrategy:
    """Parse a user file and report how many records were kept.

    Prompts for the path once unless one was given up front. The parse
    outcome of the last run is kept on :attr:`last_result` so callers can
    tell an empty file apart from an unreadable one.
    """

    name = "file"

    def __init__(
        self,
        console: Console,
        path: str | Path | None = None,
        *,
        encoding: str = "utf-8",
    ) -> None:
        self._console = console
        self._path = path
        self._encoding = encoding
        self.last_result: ParseResult | None = None

    def get_users(self) -> list[User]:
        path = self._path if self._path is not None else self._console.read_string(PATH_PROMPT)
        result = parse_user_file(path, encoding=self._encoding)
        self.last_result = result

        if result.read_failed:
            self._console.echo(f"✗ Error reading file: {result.error}")
        elif not result.users:
            self._console.echo("✗ File contains no valid data")
        else:
            self._console.echo(f"✓ Loaded users: {len(result.users)}")
            if result.invalid:
                self._console.echo(f"⚠ Skipped invalid records: {result.invalid}")
        return list(result.users)
