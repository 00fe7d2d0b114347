"""Diagnostic logging for askctl.

Logs share stderr with the prompt, so human-readable records go through
the same Rich console the prompt is printed on.  ``--log-json`` swaps that
for one JSON object per line, for wrappers that collect askctl's stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from rich.highlighter import NullHighlighter
from rich.logging import RichHandler

from askctl.output.console import create_console

if TYPE_CHECKING:
    from rich.console import Console

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
]

_JSON_CHAIN: list[structlog.types.Processor] = [
    *_PRE_CHAIN,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _json_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_JSON_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
        )
    )
    return handler


def _console_handler(console: Console) -> logging.Handler:
    # RichHandler draws the level column; the renderer only supplies the message.
    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        markup=False,
        highlighter=NullHighlighter(),
    )
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.dev.ConsoleRenderer(colors=False, pad_event=0),
            ],
        )
    )
    return handler


def configure_logging(
    *,
    debug: bool = False,
    log_json: bool = False,
    console: Console | None = None,
) -> None:
    """Route askctl's loggers to stderr.

    Args:
        debug: Let askctl's DEBUG records through. Otherwise WARNING and up.
        log_json: Emit JSON lines instead of console records.
        console: Console for human-readable records (default: a new
            stderr console).
    """
    if log_json:
        handler = _json_handler()
        processors = _JSON_CHAIN
    else:
        handler = _console_handler(console if console is not None else create_console())
        processors = _PRE_CHAIN

    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)
    logging.getLogger("askctl").setLevel(logging.DEBUG if debug else logging.WARNING)
