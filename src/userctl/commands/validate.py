"""Command: validate a user file without collecting it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from userctl.commands._base import UserctlCommand

if TYPE_CHECKING:
    from userctl.commands._context import AppContext


@click.command(
    cls=UserctlCommand,
    examples=(
        ("validate users.txt", "accepted and rejected counts"),
        ("--json validate users.txt", ""),
    ),
)
@click.argument("path")
@click.pass_obj
def validate(app: AppContext, path: str) -> None:
    """Count the accepted and rejected lines of a user file."""
    from userctl.services.validate import ValidateService

    app.emit(ValidateService(encoding=app.settings.file.encoding).validate_file(path))
