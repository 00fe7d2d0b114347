"""Tests for the answer type enum."""

from askctl.domain.types import DEFAULT_TYPE, MAX_ATTEMPTS, AnswerType


class TestAnswerType:
    def test_values_match_cli_names(self) -> None:
        assert {t.value for t in AnswerType} == {
            "ami",
            "date",
            "environment",
            "existing_file",
            "instance-id",
            "integer",
            "list",
            "multiword",
            "regex",
            "singleword",
            "yes_no",
        }

    def test_default_is_yes_no(self) -> None:
        assert DEFAULT_TYPE is AnswerType.YES_NO

    def test_str_enum_compares_to_string(self) -> None:
        assert AnswerType.INSTANCE_ID == "instance-id"

    def test_attempt_budget(self) -> None:
        assert MAX_ATTEMPTS == 30
