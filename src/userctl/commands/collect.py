"""Command group: collect users from manual entry, a file, or the generator."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from userctl.commands._base import UserctlGroup

if TYPE_CHECKING:
    from userctl.commands._context import AppContext
    from userctl.strategies.base import InputStrategy


@click.group(
    cls=UserctlGroup,
    examples=(
        ("collect manual", "type users at the prompt"),
        ("collect file users.txt --sort-by name", ""),
        ("collect random --count 5 --uniform", ""),
        ("--json --seed 42 collect random", "reproducible JSON"),
    ),
)
@click.pass_obj
def collect(app: AppContext) -> None:
    """Collect and validate user records."""


def _run(app: AppContext, strategy: InputStrategy, sort_by: str | None) -> None:
    from userctl.services.collect import CollectService

    effective = sort_by if sort_by is not None else app.settings.output.sort_by
    app.emit(CollectService(sort_by=effective).collect(strategy))


def _interactive_required(app: AppContext, what: str) -> None:
    from userctl.services.result import ErrorCode, Op, ServiceResult

    app.emit(
        ServiceResult.failure(
            Op.COLLECT_USERS,
            ErrorCode.INTERACTIVE_REQUIRED,
            f"{what} needs a terminal; drop --no-interact",
        )
    )


@collect.command(
    sortable=True,
    examples=(
        ("collect manual", ""),
        ("collect manual --sort-by email", ""),
    ),
)
@click.pass_obj
def manual(app: AppContext, sort_by: str | None) -> None:
    """Type users in one field at a time; invalid fields are asked again."""
    if app.settings.no_interact:
        _interactive_required(app, "Manual entry")
        return

    from userctl.strategies.manual import ManualInputStrategy

    _run(app, ManualInputStrategy(app.console), sort_by)


@collect.command(
    "file",
    sortable=True,
    examples=(
        ("collect file users.txt", ""),
        ("collect file", "prompts for the path"),
        ("--json collect file users.txt --sort-by email", ""),
    ),
)
@click.argument("path", required=False, default=None)
@click.pass_obj
def file_cmd(app: AppContext, path: str | None, sort_by: str | None) -> None:
    """Load users from a name;password;email file."""
    if path is None and app.settings.no_interact:
        _interactive_required(app, "Prompting for a file path")
        return

    from userctl.strategies.file import FileInputStrategy

    strategy = FileInputStrategy(app.console, path, encoding=app.settings.file.encoding)
    _run(app, strategy, sort_by)


@collect.command(
    "random",
    sortable=True,
    examples=(
        ("collect random", "[random] count users, mixed styles"),
        ("collect random --count 3 --uniform", ""),
        ("--seed 7 collect random --count 20", "same users every run"),
    ),
)
@click.option("--count", type=click.IntRange(min=0), default=None, help="Number of users.")
@click.option(
    "--variety/--uniform",
    default=None,
    help="Mix generation styles, or use one style for every user.",
)
@click.pass_obj
def random_cmd(
    app: AppContext,
    count: int | None,
    variety: bool | None,
    sort_by: str | None,
) -> None:
    """Generate synthetic users that pass validation."""
    from userctl.strategies.generated import RandomInputStrategy

    cfg = app.settings.random
    strategy = RandomInputStrategy(
        app.generator(),
        count if count is not None else cfg.count,
        variety=variety if variety is not None else cfg.variety,
    )
    _run(app, strategy, sort_by)
