"""Answer validation with an attempt budget.

:func:`is_valid` is the pure check.  :class:`AnswerValidator` wraps it with
the attempt counter: every call counts, including the very first check of
the first answer, and exceeding the budget is fatal.
"""

from __future__ import annotations

import logging

from askctl.domain.errors import AttemptLimitExceededError
from askctl.domain.registry import TypeSpec
from askctl.domain.rules import RuleCheck
from askctl.domain.types import MAX_ATTEMPTS

logger = logging.getLogger(__name__)


def is_valid(spec: TypeSpec, answer: str) -> RuleCheck:
    """Check *answer* against *spec*. Empty answers are always rejected."""
    if not answer:
        return RuleCheck(accepted=False, answer=answer)
    return spec.rule.check(answer)


class AnswerValidator:
    """Stateful validator counting attempts for one prompt session."""

    def __init__(self, spec: TypeSpec, *, max_attempts: int = MAX_ATTEMPTS) -> None:
        self.spec = spec
        self.max_attempts = max_attempts
        self.attempts = 0

    def validate(self, answer: str) -> RuleCheck:
        """Count an attempt and check *answer*.

        Raises:
            AttemptLimitExceededError: more than ``max_attempts`` calls.
        """
        self.attempts += 1
        if self.attempts > self.max_attempts:
            raise AttemptLimitExceededError(self.max_attempts)
        result = is_valid(self.spec, answer)
        logger.debug(
            "Attempt %d for type %s: %s",
            self.attempts,
            self.spec.name,
            "accepted" if result.accepted else "rejected",
        )
        return result
