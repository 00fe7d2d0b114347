"""AppContext: per-invocation state shared by the CLI entry point.

Configures logging, owns the stderr console, and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click

from askctl.config.logging import configure_logging
from askctl.output.console import create_console, print_error, print_warning

if TYPE_CHECKING:
    from askctl.config.settings import AskSettings
    from askctl.domain.errors import AskError
    from askctl.services.result import AnswerResult


class AppContext:
    """Shared context for one askctl invocation."""

    def __init__(self, settings: AskSettings) -> None:
        self.settings = settings
        self.console = create_console(colour=settings.colour)
        configure_logging(debug=settings.debug, log_json=settings.log_json, console=self.console)

    def emit(self, result: AnswerResult) -> NoReturn:
        """Output an AnswerResult and exit with its status.

        * Success: the formatted answer goes to stdout when echo is on.
        * Failure: the error message goes to stderr; nothing reaches stdout.
        Warnings always go to stderr.
        """
        for warning in result.warnings:
            print_warning(self.console, f"WARNING: {warning}")
        if result.ok:
            if result.echo and result.output is not None:
                click.echo(result.output)
            raise SystemExit(result.exit_code)
        message = result.error.message if result.error else "Unknown error"
        print_error(self.console, message)
        raise SystemExit(result.exit_code or 1)

    def fail_usage(self, ctx: click.Context, error: AskError) -> NoReturn:
        """Report a configuration error with the usage text and exit 1."""
        print_error(self.console, str(error))
        click.echo(ctx.get_help(), err=True)
        raise SystemExit(error.exit_code)
