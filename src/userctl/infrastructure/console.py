"""Console I/O behind a small protocol.

Strategies talk to a :class:`Console`, never to stdin/stdout directly,
so tests can script the conversation. :class:`ClickConsole` is the
production implementation; it writes to stderr by default so that
``--json`` output on stdout stays machine-readable.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

import click

INT_ERROR = "Error: enter an integer"


@runtime_checkable
class Console(Protocol):
    """Minimal interactive surface used by input strategies."""

    def read_string(self, prompt: str) -> str: ...

    def read_int(self, prompt: str) -> int: ...

    def echo(self, message: str) -> None: ...


class ClickConsole:
    """Console backed by ``click.prompt`` / ``click.echo``."""

    def __init__(self, *, err: bool = True) -> None:
        self._err = err

    def read_string(self, prompt: str) -> str:
        value: str = click.prompt(
            prompt,
            default="",
            show_default=False,
            prompt_suffix="",
            err=self._err,
        )
        return value

    def read_int(self, prompt: str) -> int:
        """Prompt until the answer parses as an integer."""
        while True:
            raw = self.read_string(prompt)
            try:
                return int(raw.strip())
            except ValueError:
                self.echo(INT_ERROR)

    def echo(self, message: str) -> None:
        click.echo(message, err=self._err)


def read_valid(
    console: Console,
    prompt: str,
    is_valid: Callable[[str], bool],
    error: str,
) -> str:
    """Prompt until *is_valid* accepts the answer; echo *error* on each miss.

    There is no retry limit.
    """
    while True:
        value = console.read_string(prompt)
        if is_valid(value):
            return value
        console.echo(error)
