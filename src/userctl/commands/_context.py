"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the console used by interactive strategies
and centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from userctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from userctl.config.settings import UserctlSettings
    from userctl.domain.generator import UserDataGenerator
    from userctl.infrastructure.console import Console
    from userctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: UserctlSettings, console: Console | None = None) -> None:
        self.settings = settings
        self._console = console

        from userctl.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            trace_lines=settings.trace_lines,
        )

    @property
    def console(self) -> Console:
        """Interactive console (created lazily; prompts go to stderr)."""
        if self._console is None:
            from userctl.infrastructure.console import ClickConsole

            self._console = ClickConsole(err=True)
        return self._console

    def generator(self) -> UserDataGenerator:
        """A fresh generator seeded from ``--seed`` / ``[random] seed``."""
        from userctl.domain.generator import UserDataGenerator

        return UserDataGenerator(self.settings.effective_seed)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(result.exit_code)
