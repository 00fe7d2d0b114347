"""Custom Click command class with --examples and a failing --help.

``--help`` prints to stderr and exits 1: stdout is reserved for answers and
a help request is never an answer.  ``--examples`` prints usage examples
and exits 0.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
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


def _add_help_option(cmd: click.Command) -> None:
    """Attach an eager ``--help`` flag that prints usage to stderr and fails."""

    def show_help(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(ctx.get_help(), err=True)
        ctx.exit(1)

    cmd.params.append(
        click.Option(
            ["--help"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_help,
            help="Show this message and exit with status 1.",
        )
    )


class AskCommand(click.Command):
    """Click Command subclass with ``--examples`` and a stderr ``--help``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        kwargs["add_help_option"] = False
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)
        _add_help_option(self)
