"""Errors raised while configuring or running a prompt.

Every error is terminal for the process and maps to exit status 1.
"""

from __future__ import annotations


class AskError(Exception):
    """Base error for askctl."""

    code = "ASK_ERROR"
    exit_code = 1


class UnknownTypeError(AskError):
    """Raised when ``--type`` names no built-in answer type."""

    code = "UNKNOWN_TYPE"

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown type: {name!r}")
        self.name = name


class InvalidPatternError(AskError):
    """Raised when the accepted-inputs pattern is missing or does not compile."""

    code = "INVALID_PATTERN"


class MissingDateToolError(AskError):
    """Raised when the date type is requested but no date normalizer is available."""

    code = "MISSING_DATE_TOOL"


class DateParseError(AskError):
    """Raised by a date normalizer when the input is not a recognizable date."""

    code = "DATE_PARSE"


class InvalidAnswerError(AskError):
    """Raised when an answer fails validation and re-prompting is off."""

    code = "INVALID_ANSWER"


class AttemptLimitExceededError(AskError):
    """Raised when the validator is called more times than allowed."""

    code = "ATTEMPT_LIMIT"

    def __init__(self, limit: int) -> None:
        super().__init__(f"Too many invalid answers (limit is {limit} attempts)")
        self.limit = limit
