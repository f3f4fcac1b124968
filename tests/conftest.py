"""Shared pytest fixtures and test helpers for userctl tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from userctl.infrastructure.console import INT_ERROR


class ScriptedConsole:
    """In-memory Console that answers prompts from a script.

    ``answers`` maps a prompt to the values returned on successive calls;
    the last value repeats once the list is exhausted. Every echoed
    message and every prompt shown is recorded in order.
    """

    def __init__(self, answers: dict[str, list[str]] | None = None) -> None:
        self._answers = {k: list(v) for k, v in (answers or {}).items()}
        self.prompts: list[str] = []
        self.messages: list[str] = []

    def read_string(self, prompt: str) -> str:
        self.prompts.append(prompt)
        queue = self._answers.get(prompt)
        if not queue:
            msg = f"Unexpected prompt: {prompt!r}"
            raise AssertionError(msg)
        return queue.pop(0) if len(queue) > 1 else queue[0]

    def read_int(self, prompt: str) -> int:
        while True:
            try:
                return int(self.read_string(prompt).strip())
            except ValueError:
                self.echo(INT_ERROR)

    def echo(self, message: str) -> None:
        self.messages.append(message)

    @property
    def output(self) -> str:
        return "\n".join(self.messages)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_users(tmp_path: Path) -> Callable[[str], Path]:
    """Write *content* to ``users.txt`` in a temp dir and return its path."""

    def _write(content: str, name: str = "users.txt") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp dir so no stray userctl.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("USERCTL_CONFIG", raising=False)
