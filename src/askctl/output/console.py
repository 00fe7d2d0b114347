"""Rich Console factory and theme for askctl output.

Everything the user reads (prompt, hints, error messages) goes to stderr so
that stdout carries nothing but the answer.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

import sys
from io import StringIO
from typing import TextIO

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

ASK_THEME = Theme(
    {
        "ask.question": "bold",
        "ask.hint": "cyan",
        "ask.warning": "yellow",
        "ask.error": "bold red",
    }
)


def create_console(*, colour: bool = True, file: TextIO | None = None) -> Console:
    """Create a Console writing to *file* (default: the current ``sys.stderr``).

    Args:
        colour: When False, no ANSI escape codes are emitted.
        file: Override the output stream (useful in tests).
    """
    return Console(
        file=file if file is not None else sys.stderr,
        theme=ASK_THEME,
        no_color=not colour,
        highlight=False,
        soft_wrap=True,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def prompt_text(question: str, hint: str) -> Text:
    """Build ``<question> [<hint>] `` without interpreting markup in either part."""
    text = Text()
    if question:
        text.append(question, style="ask.question")
        text.append(" ")
    text.append(f"[{hint}]", style="ask.hint")
    text.append(" ")
    return text


def print_prompt(console: Console, question: str, hint: str) -> None:
    """Write the prompt without a trailing newline."""
    console.print(prompt_text(question, hint), end="")
    console.file.flush()


def print_warning(console: Console, message: str) -> None:
    console.print(Text(message, style="ask.warning"))


def print_error(console: Console, message: str) -> None:
    console.print(Text(message, style="ask.error"))
