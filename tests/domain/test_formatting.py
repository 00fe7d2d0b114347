"""Tests for answer formatting and exit status."""

from __future__ import annotations

import pytest

from askctl.domain.formatting import exit_status, format_answer
from askctl.domain.registry import resolve_type


class TestFormatAnswer:
    def test_list_is_quoted(self) -> None:
        assert format_answer(resolve_type("list"), "a, b , c") == '"a" "b" "c"'

    @pytest.mark.parametrize(
        ("name", "answer"),
        [
            ("integer", "42"),
            ("multiword", "hello there"),
            ("date", "2024-01-02 00:00:00+00:00"),
            ("yes_no", "yes"),
        ],
    )
    def test_non_list_is_idempotent(self, name: str, answer: str) -> None:
        spec = resolve_type(name)
        once = format_answer(spec, answer)
        assert once == answer
        assert format_answer(spec, once) == once


class TestExitStatus:
    def test_yes_exits_zero(self) -> None:
        assert exit_status(resolve_type("yes_no"), "yes", echo=False) == 0

    def test_no_exits_one(self) -> None:
        assert exit_status(resolve_type("yes_no"), "no", echo=False) == 1

    def test_echoed_no_exits_zero(self) -> None:
        assert exit_status(resolve_type("yes_no"), "no", echo=True) == 0

    def test_other_types_exit_zero(self) -> None:
        assert exit_status(resolve_type("integer"), "7", echo=False) == 0
