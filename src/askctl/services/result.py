"""AnswerResult and AnswerError: the prompt service contract.

INVARIANT: The prompt service returns AnswerResult for every expected
outcome; the CLI decides what reaches stdout and which status to exit with.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class AnswerError(BaseModel):
    """Structured error payload within an AnswerResult."""

    model_config = {"frozen": True}

    code: str
    message: str


class AnswerResult(BaseModel):
    """Outcome of one prompt session.

    Attributes:
        ok: Whether a valid answer was obtained.
        answer: The accepted answer after validation (dates normalized).
        output: The formatted answer to print when echoing.
        echo: Whether ``output`` should be written to stdout.
        exit_code: Process exit status for this outcome.
        attempts: Validation calls made.
        warnings: Non-fatal issues (e.g. a failed notification).
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    answer: str | None = None
    output: str | None = None
    echo: bool = False
    exit_code: int = 0
    attempts: int = 0
    warnings: list[str] = Field(default_factory=list)
    error: AnswerError | None = None
