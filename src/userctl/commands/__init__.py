"""Subcommand modules for userctl.

Provides register_commands() which uses deferred imports to keep
``userctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``collect`` group and the ``validate`` command."""
    from userctl.commands.collect import collect
    from userctl.commands.validate import validate

    cli.add_command(collect)
    cli.add_command(validate)
