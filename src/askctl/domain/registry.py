"""Answer type registry.

Maps every :class:`AnswerType` to its rule, default error message, and the
format hint shown in the prompt.  The table is built once at import time;
:func:`resolve_type` binds the pieces that depend on the invocation (the
accepted-inputs override and the date normalizer).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, replace

from askctl.domain.dates import DateNormalizer, StdlibDateNormalizer
from askctl.domain.errors import InvalidPatternError, MissingDateToolError, UnknownTypeError
from askctl.domain.rules import (
    AnswerRule,
    DateRule,
    ExistingFileRule,
    ListRule,
    PatternRule,
)
from askctl.domain.types import DEFAULT_TYPE, AnswerType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TypeSpec:
    """Validation policy for one answer type.

    Attributes:
        name: The answer type.
        rule: Acceptance and output strategy.
        error_message: Shown when an answer is rejected.
        hint: Short description of the expected input, shown in the prompt.
    """

    name: AnswerType
    rule: AnswerRule
    error_message: str
    hint: str

    @property
    def pattern(self) -> re.Pattern[str] | None:
        """The regex behind pattern-backed types, else None."""
        if isinstance(self.rule, PatternRule):
            return self.rule.pattern
        return None


def _pattern(name: AnswerType, regex: str, hint: str, error_message: str) -> TypeSpec:
    return TypeSpec(
        name=name,
        rule=PatternRule(re.compile(regex)),
        error_message=error_message,
        hint=hint,
    )


# Types whose rule needs invocation-time input are built by factories.
_FACTORIES: dict[AnswerType, Callable[[DateNormalizer | None, str | None], TypeSpec]] = {}

TYPE_REGISTRY: dict[AnswerType, TypeSpec] = {}


def _date_spec(normalizer: DateNormalizer | None, _pattern_override: str | None) -> TypeSpec:
    if normalizer is None:
        raise MissingDateToolError("The date type needs a date normalizer; none is configured")
    return TypeSpec(
        name=AnswerType.DATE,
        rule=DateRule(normalizer),
        error_message="Answer must be a recognizable date",
        hint="date",
    )


def _regex_spec(_normalizer: DateNormalizer | None, pattern: str | None) -> TypeSpec:
    if not pattern:
        raise InvalidPatternError("The regex type needs a pattern (use --accepted-inputs)")
    return TypeSpec(
        name=AnswerType.REGEX,
        rule=PatternRule(compile_pattern(pattern)),
        error_message=f"Answer must match {pattern!r}",
        hint=f"'{pattern}'",
    )


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a caller-supplied pattern or raise InvalidPatternError."""
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise InvalidPatternError(f"Invalid accepted-inputs pattern {pattern!r}: {exc}") from exc


def _register_types() -> None:
    """Populate :data:`TYPE_REGISTRY` and :data:`_FACTORIES` with built-in types."""
    TYPE_REGISTRY[AnswerType.AMI] = _pattern(
        AnswerType.AMI,
        r"^ami-[a-f0-9]{8}$",
        "ami-xxxxxxxx",
        "Answer must be an AMI id like ami-0123abcd",
    )
    TYPE_REGISTRY[AnswerType.ENVIRONMENT] = _pattern(
        AnswerType.ENVIRONMENT,
        r"^(testing|staging|production)$",
        "testing|staging|production",
        "Answer must be testing, staging or production",
    )
    TYPE_REGISTRY[AnswerType.EXISTING_FILE] = TypeSpec(
        name=AnswerType.EXISTING_FILE,
        rule=ExistingFileRule(),
        error_message="Answer must be the path of an existing file",
        hint="file",
    )
    TYPE_REGISTRY[AnswerType.INSTANCE_ID] = _pattern(
        AnswerType.INSTANCE_ID,
        r"^i-[a-f0-9]{8}$",
        "i-xxxxxxxx",
        "Answer must be an instance id like i-0123abcd",
    )
    TYPE_REGISTRY[AnswerType.INTEGER] = _pattern(
        AnswerType.INTEGER,
        r"^[0-9]+$",
        "integer",
        "Answer must be a whole number",
    )
    TYPE_REGISTRY[AnswerType.LIST] = TypeSpec(
        name=AnswerType.LIST,
        rule=ListRule(),
        error_message="Answer must be a comma delimited list",
        hint="comma delimited list",
    )
    TYPE_REGISTRY[AnswerType.MULTIWORD] = _pattern(
        AnswerType.MULTIWORD,
        r"\S",
        "string",
        "Answer must contain at least one non-space character",
    )
    TYPE_REGISTRY[AnswerType.SINGLEWORD] = _pattern(
        AnswerType.SINGLEWORD,
        r"^[^ ]+$",
        "single word",
        "Answer must be a single word",
    )
    TYPE_REGISTRY[AnswerType.YES_NO] = _pattern(
        AnswerType.YES_NO,
        r"^(yes|no)$",
        "yes|no",
        "Answer must be yes or no",
    )
    _FACTORIES[AnswerType.DATE] = _date_spec
    _FACTORIES[AnswerType.REGEX] = _regex_spec


_register_types()


def type_names() -> list[str]:
    """All selectable type names, sorted."""
    return sorted(t.value for t in AnswerType)


def parse_type(name: str | None) -> AnswerType:
    """Map a ``--type`` value to an AnswerType (``None`` means the default)."""
    if name is None:
        return DEFAULT_TYPE
    try:
        return AnswerType(name)
    except ValueError:
        raise UnknownTypeError(name) from None


def resolve_type(
    name: str | None,
    accepted_inputs: str | None = None,
    *,
    date_normalizer: DateNormalizer | None = None,
    use_default_normalizer: bool = True,
) -> TypeSpec:
    """Resolve a type name into a ready-to-use TypeSpec.

    With *accepted_inputs* and no explicit *name*, the type is ``regex``.
    For other pattern-backed types the override replaces the built-in
    pattern; types without a pattern ignore it.

    Raises:
        UnknownTypeError: *name* is not a built-in type.
        InvalidPatternError: the override does not compile, or ``regex``
            was chosen without one.
        MissingDateToolError: ``date`` was chosen with no normalizer.
    """
    if name is None and accepted_inputs:
        answer_type = AnswerType.REGEX
    else:
        answer_type = parse_type(name)

    if date_normalizer is None and use_default_normalizer:
        date_normalizer = StdlibDateNormalizer()

    factory = _FACTORIES.get(answer_type)
    if factory is not None:
        spec = factory(date_normalizer, accepted_inputs)
    else:
        spec = TYPE_REGISTRY[answer_type]
        if accepted_inputs:
            spec = _with_override(spec, accepted_inputs)

    logger.debug("Resolved answer type %s (hint %r)", spec.name, spec.hint)
    return spec


def _with_override(spec: TypeSpec, accepted_inputs: str) -> TypeSpec:
    if spec.pattern is None:
        logger.warning("Ignoring accepted-inputs pattern for type %s", spec.name)
        return spec
    return replace(
        spec,
        rule=PatternRule(compile_pattern(accepted_inputs)),
        hint=f"'{accepted_inputs}'",
    )
