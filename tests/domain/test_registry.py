"""Tests for the type registry and type resolution."""

from __future__ import annotations

import pytest

from askctl.domain.dates import StdlibDateNormalizer
from askctl.domain.errors import InvalidPatternError, MissingDateToolError, UnknownTypeError
from askctl.domain.registry import (
    TYPE_REGISTRY,
    TypeSpec,
    parse_type,
    resolve_type,
    type_names,
)
from askctl.domain.rules import DateRule, ExistingFileRule, ListRule, PatternRule
from askctl.domain.types import AnswerType


class TestTypeRegistry:
    def test_static_types_registered(self) -> None:
        assert set(TYPE_REGISTRY) == set(AnswerType) - {AnswerType.DATE, AnswerType.REGEX}

    def test_every_type_resolves(self) -> None:
        for name in type_names():
            pattern = "^x$" if name == "regex" else None
            spec = resolve_type(name, pattern)
            assert isinstance(spec, TypeSpec)
            assert spec.name == name
            assert spec.hint
            assert spec.error_message

    @pytest.mark.parametrize(
        ("name", "hint"),
        [
            ("ami", "ami-xxxxxxxx"),
            ("date", "date"),
            ("environment", "testing|staging|production"),
            ("existing_file", "file"),
            ("instance-id", "i-xxxxxxxx"),
            ("integer", "integer"),
            ("list", "comma delimited list"),
            ("multiword", "string"),
            ("singleword", "single word"),
            ("yes_no", "yes|no"),
        ],
    )
    def test_hints(self, name: str, hint: str) -> None:
        assert resolve_type(name).hint == hint

    def test_rule_kinds(self) -> None:
        assert isinstance(resolve_type("existing_file").rule, ExistingFileRule)
        assert isinstance(resolve_type("list").rule, ListRule)
        assert isinstance(resolve_type("date").rule, DateRule)
        assert isinstance(resolve_type("integer").rule, PatternRule)

    def test_pattern_only_for_pattern_types(self) -> None:
        assert resolve_type("integer").pattern is not None
        assert resolve_type("list").pattern is None
        assert resolve_type("existing_file").pattern is None


class TestParseType:
    def test_none_is_default(self) -> None:
        assert parse_type(None) is AnswerType.YES_NO

    def test_known_name(self) -> None:
        assert parse_type("instance-id") is AnswerType.INSTANCE_ID

    def test_unknown_name(self) -> None:
        with pytest.raises(UnknownTypeError) as excinfo:
            parse_type("colour")
        assert excinfo.value.name == "colour"
        assert excinfo.value.exit_code == 1


class TestResolveType:
    def test_default_type(self) -> None:
        assert resolve_type(None).name is AnswerType.YES_NO

    def test_override_without_type_selects_regex(self) -> None:
        spec = resolve_type(None, "^v[0-9]+$")
        assert spec.name is AnswerType.REGEX
        assert spec.hint == "'^v[0-9]+$'"
        assert spec.rule.check("v12").accepted

    def test_regex_without_pattern_fails(self) -> None:
        with pytest.raises(InvalidPatternError):
            resolve_type("regex")

    def test_bad_pattern_fails(self) -> None:
        with pytest.raises(InvalidPatternError):
            resolve_type(None, "([unclosed")

    def test_override_replaces_builtin_pattern(self) -> None:
        spec = resolve_type("singleword", "^[a-z]+$")
        assert spec.name is AnswerType.SINGLEWORD
        assert spec.rule.check("abc").accepted
        assert not spec.rule.check("ABC").accepted

    def test_override_ignored_for_list(self) -> None:
        spec = resolve_type("list", "^x$")
        assert isinstance(spec.rule, ListRule)

    def test_unknown_type(self) -> None:
        with pytest.raises(UnknownTypeError):
            resolve_type("bogus")

    def test_date_without_normalizer(self) -> None:
        with pytest.raises(MissingDateToolError):
            resolve_type("date", use_default_normalizer=False)

    def test_date_with_explicit_normalizer(self) -> None:
        normalizer = StdlibDateNormalizer()
        spec = resolve_type("date", date_normalizer=normalizer, use_default_normalizer=False)
        assert isinstance(spec.rule, DateRule)
        assert spec.rule.normalizer is normalizer

    def test_registry_not_mutated_by_override(self) -> None:
        resolve_type("integer", "^x$")
        assert TYPE_REGISTRY[AnswerType.INTEGER].hint == "integer"
