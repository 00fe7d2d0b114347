"""Best-effort desktop notifications.

The notifier spawns whichever notification tool is installed and never
waits for it.  A missing tool or a failed spawn is logged at debug level
and otherwise ignored: notifications must never block or fail a prompt.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Callable

logger = logging.getLogger(__name__)


def _notify_send(title: str, message: str) -> list[str]:
    return ["notify-send", title, message]


def _terminal_notifier(title: str, message: str) -> list[str]:
    return ["terminal-notifier", "-title", title, "-message", message]


def _osascript(title: str, message: str) -> list[str]:
    script = (
        f"display notification {_applescript_string(message)} "
        f"with title {_applescript_string(title)}"
    )
    return ["osascript", "-e", script]


def _applescript_string(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


# Tried in order; the first installed tool wins.
NOTIFIERS: list[tuple[str, Callable[[str, str], list[str]]]] = [
    ("notify-send", _notify_send),
    ("terminal-notifier", _terminal_notifier),
    ("osascript", _osascript),
]


def notification_command(title: str, message: str) -> list[str] | None:
    """Build the argv for the first installed notifier, or None if there is none."""
    for name, build in NOTIFIERS:
        if shutil.which(name) is not None:
            return build(title, message)
    return None


def send_notification(title: str, message: str) -> bool:
    """Fire a desktop notification without waiting for it.

    Returns True when a notifier process was spawned.
    """
    argv = notification_command(title, message)
    if argv is None:
        logger.debug("No desktop notifier available")
        return False
    try:
        subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("Desktop notification failed: %s", exc)
        return False
    logger.debug("Sent desktop notification via %s", argv[0])
    return True
