"""PromptService: the prompt/read/validate loop.

States: awaiting input -> validating -> accepted | rejected-retry |
rejected-fatal.  A rejected answer loops back to the prompt only when
re-validation is on; the attempt budget ends the loop either way.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import TYPE_CHECKING

from askctl.domain.errors import AttemptLimitExceededError, InvalidAnswerError
from askctl.domain.formatting import exit_status, format_answer
from askctl.output.console import print_prompt, print_warning
from askctl.services.notify import send_notification
from askctl.services.result import AnswerError, AnswerResult
from askctl.services.validator import AnswerValidator

if TYPE_CHECKING:
    from rich.console import Console

    from askctl.config.settings import AskSettings
    from askctl.domain.registry import TypeSpec

logger = logging.getLogger(__name__)

Reader = Callable[[], str]
Notifier = Callable[[str, str], bool]


def read_line() -> str:
    """Read one line from the current stdin; EOF reads as an empty answer."""
    return sys.stdin.readline().rstrip("\r\n")


class PromptService:
    """Run one prompt session for a resolved type.

    Args:
        settings: Frozen invocation settings.
        spec: The resolved answer type.
        console: Where the prompt and retry messages go (stderr).
        reader: Returns one raw line per call (default: stdin).
        notifier: Fire-and-forget ``(title, message)`` notification sender.
    """

    def __init__(
        self,
        settings: AskSettings,
        spec: TypeSpec,
        console: Console,
        *,
        reader: Reader | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        self._settings = settings
        self._spec = spec
        self._console = console
        self._reader = reader or read_line
        self._notifier = notifier or send_notification
        self.validator = AnswerValidator(spec)

    def ask(self) -> AnswerResult:
        """Prompt until a valid answer arrives or the session fails."""
        warnings: list[str] = []
        if self._settings.notify:
            self._notify(warnings)

        echo = self._settings.echo_answer(self._spec.name)
        while True:
            print_prompt(self._console, self._settings.question, self._spec.hint)
            raw = self._reader()
            try:
                check = self.validator.validate(raw)
            except AttemptLimitExceededError as exc:
                return self._failure(exc, warnings)

            if check.accepted:
                output = format_answer(self._spec, check.answer)
                return AnswerResult(
                    ok=True,
                    answer=check.answer,
                    output=output,
                    echo=echo,
                    exit_code=exit_status(self._spec, check.answer, echo=echo),
                    attempts=self.validator.attempts,
                    warnings=warnings,
                )

            if not self._settings.revalidate:
                return self._failure(InvalidAnswerError(self._spec.error_message), warnings)
            print_warning(self._console, self._spec.error_message)

    def _notify(self, warnings: list[str]) -> None:
        message = self._settings.question or "Input required"
        try:
            self._notifier(self._settings.title, message)
        except Exception:
            logger.debug("Notification sender raised", exc_info=True)
            warnings.append("Desktop notification failed")

    def _failure(
        self,
        exc: InvalidAnswerError | AttemptLimitExceededError,
        warnings: list[str],
    ) -> AnswerResult:
        logger.debug("Prompt failed after %d attempts: %s", self.validator.attempts, exc)
        return AnswerResult(
            ok=False,
            exit_code=exc.exit_code,
            attempts=self.validator.attempts,
            warnings=warnings,
            error=AnswerError(code=exc.code, message=str(exc)),
        )
