"""Answer type enum.

The fixed set of validation/formatting policies selectable via ``--type``.
"""

from __future__ import annotations

from enum import StrEnum


class AnswerType(StrEnum):
    """Built-in answer types."""

    AMI = "ami"
    DATE = "date"
    ENVIRONMENT = "environment"
    EXISTING_FILE = "existing_file"
    INSTANCE_ID = "instance-id"
    INTEGER = "integer"
    LIST = "list"
    MULTIWORD = "multiword"
    REGEX = "regex"
    SINGLEWORD = "singleword"
    YES_NO = "yes_no"


DEFAULT_TYPE = AnswerType.YES_NO

# Validation calls allowed before the prompt gives up for good.
MAX_ATTEMPTS = 30
