"""The askctl command: ask one question, validate the answer, print it."""

from __future__ import annotations

import click

from askctl import __version__
from askctl.commands._base import AskCommand
from askctl.commands._context import AppContext
from askctl.config.settings import AskSettings
from askctl.domain.errors import AskError
from askctl.domain.registry import resolve_type, type_names
from askctl.services.prompt import PromptService

_EXAMPLES = """\
  askctl "Deploy to production?"
  askctl --type=environment Which environment
  askctl --type=date --no-notify "Start of the maintenance window"
  askctl --type=list Hosts to drain
  askctl --accepted-inputs='^v[0-9]+$' --no-revalidate Release tag
  ENV=$(askctl --type=environment Target)"""


@click.command("askctl", cls=AskCommand, examples=_EXAMPLES)
@click.version_option(version=__version__, prog_name="askctl")
@click.argument("question", nargs=-1)
@click.option(
    "--type",
    "answer_type",
    default=None,
    metavar="NAME",
    help=f"Answer type, one of: {', '.join(type_names())}. Default: yes_no.",
)
@click.option(
    "--accepted-inputs",
    default=None,
    metavar="REGEX",
    help="Accept answers matching REGEX (implies --type=regex).",
)
@click.option("--no-colour", "--no-color", "no_colour", is_flag=True, help="Plain prompt.")
@click.option("--no-notify", is_flag=True, help="Skip the desktop notification.")
@click.option(
    "--no-revalidate",
    is_flag=True,
    help="Exit with status 1 on the first invalid answer instead of asking again.",
)
@click.option("--quiet", is_flag=True, help="Do not echo the final answer.")
@click.option("--verbose", is_flag=True, help="Always echo the final answer.")
@click.option("--title", default=None, help="Desktop notification title.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--debug", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    question: tuple[str, ...],
    answer_type: str | None,
    accepted_inputs: str | None,
    no_colour: bool,
    no_notify: bool,
    no_revalidate: bool,
    quiet: bool,
    verbose: bool,
    title: str | None,
    config_path: str | None,
    debug: bool,
    log_json: bool,
) -> None:
    """Ask QUESTION on the terminal and print the validated answer.

    The prompt goes to stderr and the answer to stdout, so
    ``VAR=$(askctl ...)`` captures just the answer.  For yes/no questions
    the exit status is 0 for yes and 1 for no.
    """
    settings = AskSettings.from_cli(
        config_path=config_path,
        question=" ".join(question).strip() or None,
        answer_type=answer_type,
        accepted_inputs=accepted_inputs,
        title=title,
        colour=False if no_colour else None,
        notify=False if no_notify else None,
        revalidate=False if no_revalidate else None,
        quiet=True if quiet else None,
        verbose=True if verbose else None,
        debug=True if debug else None,
        log_json=True if log_json else None,
    )
    app = AppContext(settings)
    try:
        spec = resolve_type(settings.effective_type(), settings.accepted_inputs)
    except AskError as exc:
        app.fail_usage(ctx, exc)

    app.emit(PromptService(settings, spec, app.console).ask())
