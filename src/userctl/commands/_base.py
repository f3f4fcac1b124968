"""Click base classes shared by the userctl commands.

``examples`` takes ``(arguments, note)`` pairs that are printed, aligned,
by an eager ``--examples`` flag so ``--help`` stays short. ``sortable``
attaches the ``--sort-by`` option every collect subcommand accepts.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click

PROG_NAME = "userctl"

Example = tuple[str, str]

SORT_BY_HELP = "Order users by this field (default: [output] sort_by, else source order)."


def format_examples(prog: str, examples: Sequence[Example]) -> str:
    """One ``$ prog arguments  # note`` line per example, notes aligned."""
    lines = [f"$ {prog} {args}" for args, _ in examples]
    width = max(len(line) for line in lines)
    return "\n".join(
        f"  {line.ljust(width)}  # {note}" if note else f"  {line}"
        for line, (_, note) in zip(lines, examples, strict=True)
    )


def _add_examples_option(cmd: click.Command, examples: Sequence[Example]) -> None:
    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(format_examples(PROG_NAME, examples))
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


def _add_sort_option(cmd: click.Command) -> None:
    from userctl.services.collect import SORT_FIELDS

    cmd.params.append(
        click.Option(
            ["--sort-by"],
            type=click.Choice(SORT_FIELDS),
            default=None,
            help=SORT_BY_HELP,
        )
    )


class UserctlCommand(click.Command):
    """Command with optional ``--examples`` and ``--sort-by``."""

    def __init__(
        self,
        *args: Any,
        examples: Sequence[Example] = (),
        sortable: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        if sortable:
            _add_sort_option(self)
        if self.examples:
            _add_examples_option(self, self.examples)


class UserctlGroup(click.Group):
    """Group whose subcommands are :class:`UserctlCommand` by default."""

    command_class = UserctlCommand

    def __init__(self, *args: Any, examples: Sequence[Example] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        if self.examples:
            _add_examples_option(self, self.examples)
