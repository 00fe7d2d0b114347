"""Answer rule ABC and concrete rules.

Each answer type carries one rule: a small strategy object that decides
whether a raw answer is acceptable (possibly rewriting it) and how an
accepted answer is rendered for output.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from askctl.domain.dates import DateNormalizer, format_timestamp
from askctl.domain.errors import DateParseError


@dataclass(frozen=True)
class RuleCheck:
    """Result of checking one answer against a rule.

    ``answer`` is the possibly rewritten answer; it equals the input unless
    the rule normalizes (dates do).
    """

    accepted: bool
    answer: str


class AnswerRule(ABC):
    """Abstract base class for answer rules."""

    @abstractmethod
    def check(self, answer: str) -> RuleCheck:
        """Decide acceptance of a non-empty *answer*."""
        ...

    def format(self, answer: str) -> str:
        """Render an accepted answer for output. Identity by default."""
        return answer


class PatternRule(AnswerRule):
    """Accept answers the pattern matches anywhere in the text.

    All built-in patterns anchor themselves with ``^...$``.
    """

    def __init__(self, pattern: re.Pattern[str]) -> None:
        self.pattern = pattern

    def check(self, answer: str) -> RuleCheck:
        return RuleCheck(accepted=self.pattern.search(answer) is not None, answer=answer)


class ExistingFileRule(AnswerRule):
    """Accept answers naming a regular file at check time."""

    def check(self, answer: str) -> RuleCheck:
        return RuleCheck(accepted=Path(answer).is_file(), answer=answer)


class DateRule(AnswerRule):
    """Accept parseable dates and rewrite them to a normalized timestamp."""

    def __init__(self, normalizer: DateNormalizer) -> None:
        self.normalizer = normalizer

    def check(self, answer: str) -> RuleCheck:
        try:
            parsed = self.normalizer.normalize(answer)
        except DateParseError:
            return RuleCheck(accepted=False, answer=answer)
        return RuleCheck(accepted=True, answer=format_timestamp(parsed))


_LIST_DELIMITER = re.compile(r"\s*,\s*")


class ListRule(AnswerRule):
    """Accept anything; output is a shell-ready list of quoted tokens."""

    def check(self, answer: str) -> RuleCheck:
        return RuleCheck(accepted=True, answer=answer)

    def format(self, answer: str) -> str:
        return quote_list(answer)


def quote_list(answer: str) -> str:
    """Split *answer* on commas and render ``"a" "b" "c"``.

    Space around each comma is dropped and embedded double quotes are
    backslash-escaped.
    """
    tokens = _LIST_DELIMITER.split(answer)
    return " ".join('"' + token.replace('"', '\\"') + '"' for token in tokens)
