"""Root CLI group for userctl: global flags, settings, command registration."""

from __future__ import annotations

from typing import Any

import click

from userctl import __version__
from userctl.commands import register_commands
from userctl.commands._context import AppContext
from userctl.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME
from userctl.config.settings import UserctlSettings

_EPILOG = (
    "Settings come from these flags, then USERCTL_* environment variables "
    f"(nested with '__', e.g. USERCTL_RANDOM__COUNT), then {CONFIG_FILENAME} "
    f"(--config, ${CONFIG_ENV_VAR}, or the nearest one above the working directory)."
)


def _overrides(*, encoding: str | None, seed: int | None, **flags: bool) -> dict[str, Any]:
    """CLI values that were actually given; unset flags defer to env and TOML."""
    overrides: dict[str, Any] = {name: True for name, on in flags.items() if on}
    if seed is not None:
        overrides["seed"] = seed
    if encoding is not None:
        overrides["file"] = {"encoding": encoding}
    return overrides


@click.group(invoke_without_command=True, epilog=_EPILOG)
@click.version_option(version=__version__, prog_name="userctl")
@click.option("--json", "json_output", is_flag=True, help="Print the result as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print collected names only.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and timing details.")
@click.option("--log-json", is_flag=True, help="Write log records to stderr as JSON lines.")
@click.option("--trace-lines", is_flag=True, help="Log why each dropped file line was rejected.")
@click.option("--no-interact", is_flag=True, help="Fail instead of prompting.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help=f"Use this file instead of discovering {CONFIG_FILENAME}.",
)
@click.option("--seed", type=int, default=None, help="Seed for the random generator.")
@click.option("--encoding", default=None, help="Encoding of user files (default: utf-8).")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    trace_lines: bool,
    no_interact: bool,
    config_path: str | None,
    seed: int | None,
    encoding: str | None,
) -> None:
    """userctl — collect, validate and generate user records."""
    if json_output and quiet:
        raise click.UsageError("--json and --quiet cannot be combined.")

    settings = UserctlSettings.from_cli(
        config_path=config_path,
        **_overrides(
            encoding=encoding,
            seed=seed,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
            trace_lines=trace_lines,
            no_interact=no_interact,
        ),
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
