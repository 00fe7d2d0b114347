"""Post-acceptance output formatting and exit status."""

from __future__ import annotations

from askctl.domain.registry import TypeSpec
from askctl.domain.types import AnswerType


def format_answer(spec: TypeSpec, answer: str) -> str:
    """Render an accepted *answer* for standard output.

    Lists become quoted tokens; every other type is returned unchanged, so
    formatting an already formatted answer is a no-op.
    """
    return spec.rule.format(answer)


def exit_status(spec: TypeSpec, answer: str, *, echo: bool) -> int:
    """Exit status for an accepted answer.

    A yes/no answer is conveyed through the status unless it is echoed:
    ``no`` exits 1.  Everything else exits 0.
    """
    if spec.name is AnswerType.YES_NO and not echo and answer != "yes":
        return 1
    return 0
