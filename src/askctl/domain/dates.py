"""Date normalization for the ``date`` answer type.

A :class:`DateNormalizer` turns free-form user input into an aware
:class:`~datetime.datetime`.  The stdlib-backed implementation understands
the everyday subset of what ``date -d`` accepts: keywords, relative offsets,
epoch seconds, ISO-8601 and a handful of textual layouts.

Normalized answers are rendered as RFC-3339 with seconds accuracy, e.g.
``2024-01-02 00:00:00+00:00``.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from askctl.domain.errors import DateParseError

_ISO_ADAPTER: TypeAdapter[datetime] = TypeAdapter(datetime)

_KEYWORD_OFFSETS: dict[str, timedelta] = {
    "now": timedelta(0),
    "today": timedelta(0),
    "yesterday": timedelta(days=-1),
    "tomorrow": timedelta(days=1),
}

_UNITS: dict[str, timedelta] = {
    "second": timedelta(seconds=1),
    "sec": timedelta(seconds=1),
    "minute": timedelta(minutes=1),
    "min": timedelta(minutes=1),
    "hour": timedelta(hours=1),
    "day": timedelta(days=1),
    "week": timedelta(weeks=1),
}

_RELATIVE_RE = re.compile(
    r"^(?P<sign>[+-])?\s*(?P<count>\d+)\s+(?P<unit>[a-z]+?)s?(?P<ago>\s+ago)?$"
)
_EPOCH_RE = re.compile(r"^@(?P<seconds>-?\d+(?:\.\d+)?)$")
_NUMBER_RE = re.compile(r"^-?\d+(?:\.\d+)?$")
_CLOCK_FORMATS = ("%H:%M", "%H:%M:%S")
_DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y-%m-%d %H:%M",
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M",
    "%d %b %Y",
    "%d %B %Y",
    "%b %d %Y",
    "%B %d %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%a %b %d %H:%M:%S %Y",
)


class DateNormalizer(Protocol):
    """Capability: turn raw input into an aware datetime or raise DateParseError."""

    def normalize(self, raw: str) -> datetime: ...


class StdlibDateNormalizer:
    """Date normalizer backed by :mod:`datetime` and pydantic's ISO parser.

    Naive results are interpreted in the local time zone.

    Args:
        now: Clock returning the current aware datetime (injectable for tests).
    """

    def __init__(self, now: Callable[[], datetime] | None = None) -> None:
        self._now = now or (lambda: datetime.now(UTC).astimezone())

    def normalize(self, raw: str) -> datetime:
        text = " ".join(raw.split()).lower()
        if not text:
            raise DateParseError("empty date")
        if _NUMBER_RE.match(text):
            raise DateParseError(f"ambiguous date: {raw!r}")

        try:
            for parse in (self._keyword, self._relative, self._epoch, self._clock, self._layout):
                parsed = parse(text)
                if parsed is not None:
                    return _aware(parsed)
            return _aware(_ISO_ADAPTER.validate_python(raw.strip()))
        except ValidationError as exc:
            raise DateParseError(f"invalid date: {raw!r}") from exc
        except (OverflowError, ValueError, OSError) as exc:
            raise DateParseError(f"date out of range: {raw!r}") from exc

    def _keyword(self, text: str) -> datetime | None:
        if text not in _KEYWORD_OFFSETS:
            return None
        return self._now() + _KEYWORD_OFFSETS[text]

    def _relative(self, text: str) -> datetime | None:
        m = _RELATIVE_RE.match(text)
        if m is None:
            return None
        unit = _UNITS.get(m.group("unit"))
        if unit is None:
            return None
        delta = unit * int(m.group("count"))
        if m.group("ago") or m.group("sign") == "-":
            delta = -delta
        return self._now() + delta

    @staticmethod
    def _epoch(text: str) -> datetime | None:
        m = _EPOCH_RE.match(text)
        if m is None:
            return None
        return datetime.fromtimestamp(float(m.group("seconds")), UTC)

    def _clock(self, text: str) -> datetime | None:
        for fmt in _CLOCK_FORMATS:
            try:
                clock = datetime.strptime(text, fmt)
            except ValueError:
                continue
            return self._now().replace(
                hour=clock.hour, minute=clock.minute, second=clock.second, microsecond=0
            )
        return None

    @staticmethod
    def _layout(text: str) -> datetime | None:
        for fmt in _DATE_FORMATS:
            try:
                return datetime.strptime(text, fmt)
            except ValueError:
                continue
        return None


def _aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.astimezone()
    return value


def format_timestamp(value: datetime) -> str:
    """Render *value* as RFC-3339 with seconds accuracy and a space separator."""
    return value.replace(microsecond=0).isoformat(sep=" ", timespec="seconds")
