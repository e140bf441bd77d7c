"""LDML-style pattern formatting and parsing.

Supported pattern letters:
    y     - year (``y`` unpadded, ``yy`` two digits, ``yyyy`` zero-padded)
    M, L  - month (1-2 letters numeric, 3 abbreviated name, 4 full name)
    d     - day of month
    H     - hour, 24-hour clock
    m     - minute
    s     - second
    S     - fraction of second, read as milliseconds
    E     - weekday name (rendered only; accepted and ignored when parsing)

Text between single quotes is literal, ``''`` is a literal quote and any other
non-letter character is copied through. Month and weekday names come from the
:mod:`calendar` module and therefore follow the process locale.

Examples:
    >>> from datetime import datetime, UTC
    >>> PatternFormatter().format(datetime(2024, 1, 15, 14, 30, tzinfo=UTC), "dd.MM.yyyy")
    '15.01.2024'
    >>> PatternFormatter().parse("15.01.2024", "dd.MM.yyyy")
    ComponentValues(year=2024, month=1, day=15, hour=None, minute=None, second=None, millisecond=None)
"""

from __future__ import annotations

import calendar
import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING, Final, TypeAlias

from partialdate.domain.model.enums import Component
from partialdate.domain.model.primitives import ComponentValues

if TYPE_CHECKING:
    from collections.abc import Mapping

    from partialdate.domain.model.primitives import Instant
    from partialdate.domain.ports.calendar import FormatService

log = logging.getLogger(__name__)

SUPPORTED_LETTERS: Final[frozenset[str]] = frozenset("yMLdHmsSE")
TWO_DIGIT_YEAR_BASE: Final[int] = 2000

_NUMERIC_COMPONENTS: Final[dict[str, Component]] = {
    "y": Component.YEAR,
    "M": Component.MONTH,
    "L": Component.MONTH,
    "d": Component.DAY,
    "H": Component.HOUR,
    "m": Component.MINUTE,
    "s": Component.SECOND,
    "S": Component.MILLISECOND,
}


@dataclass(frozen=True, slots=True)
class _Field:
    letter: str
    width: int

    @property
    def is_text(self) -> bool:
        return self.letter == "E" or (self.letter in "ML" and self.width >= 3)


_Token: TypeAlias = _Field | str


def capitalize_first(text: str) -> str:
    """Upper-case the first character only; the rest is left untouched."""

    return text[:1].upper() + text[1:]


def _read_quoted(pattern: str, start: int) -> tuple[str, int]:
    """Return the literal text of a quoted section and the index after it."""

    chars: list[str] = []
    index = start + 1
    while index < len(pattern):
        char = pattern[index]
        if char == "'":
            if pattern[index + 1 : index + 2] == "'":
                chars.append("'")
                index += 2
                continue
            return "".join(chars), index + 1
        chars.append(char)
        index += 1
    return "".join(chars), index


@lru_cache(maxsize=128)
def _tokenize(pattern: str) -> tuple[_Token, ...] | None:
    tokens: list[_Token] = []
    literal: list[str] = []
    index = 0
    while index < len(pattern):
        char = pattern[index]
        if char == "'":
            if pattern[index + 1 : index + 2] == "'":
                literal.append("'")
                index += 2
                continue
            text, index = _read_quoted(pattern, index)
            literal.append(text)
            continue
        if char.isascii() and char.isalpha():
            if char not in SUPPORTED_LETTERS:
                log.warning("Unsupported pattern letter %r in %r", char, pattern)
                return None
            width = 1
            while pattern[index + width : index + width + 1] == char:
                width += 1
            if literal:
                tokens.append("".join(literal))
                literal = []
            tokens.append(_Field(char, width))
            index += width
            continue
        literal.append(char)
        index += 1
    if literal:
        tokens.append("".join(literal))
    return tuple(tokens)


def _month_names() -> dict[str, int]:
    names: dict[str, int] = {}
    for month in range(1, 13):
        names[calendar.month_name[month].casefold()] = month
        names[calendar.month_abbr[month].casefold()] = month
    return names


def _alternation(names: list[str]) -> str:
    ordered = sorted((name for name in names if name), key=len, reverse=True)
    return "(" + "|".join(re.escape(name) for name in ordered) + ")"


def _field_regex(field: _Field, *, followed_by_digits: bool) -> str:
    if field.letter == "E":
        return _alternation([*calendar.day_name, *calendar.day_abbr])
    if field.is_text:
        return _alternation([*calendar.month_name, *calendar.month_abbr])
    if field.letter == "y":
        if field.width == 2:
            return r"(\d{2})"
        if field.width == 1:
            return r"(\d+)"
        return rf"(\d{{{field.width}}})" if followed_by_digits else rf"(\d{{{field.width},}})"
    if field.letter == "S":
        return rf"(\d{{{field.width}}})" if followed_by_digits else r"(\d+)"
    if followed_by_digits and field.width > 1:
        return rf"(\d{{{field.width}}})"
    return r"(\d{1,2})" if field.width <= 2 else rf"(\d{{1,{field.width}}})"


@dataclass(frozen=True, slots=True)
class _CompiledPattern:
    regex: re.Pattern[str]
    fields: tuple[_Field, ...]
    # Snapshot of the locale taken together with ``regex`` so the two agree.
    month_numbers: Mapping[str, int]


@lru_cache(maxsize=128)
def _compile(pattern: str) -> _CompiledPattern | None:
    tokens = _tokenize(pattern)
    if tokens is None:
        return None
    parts: list[str] = []
    fields: list[_Field] = []
    for position, token in enumerate(tokens):
        if isinstance(token, str):
            parts.append(re.escape(token))
            continue
        following = tokens[position + 1] if position + 1 < len(tokens) else None
        followed_by_digits = isinstance(following, _Field) and not following.is_text
        parts.append(_field_regex(token, followed_by_digits=followed_by_digits))
        fields.append(token)
    return _CompiledPattern(
        regex=re.compile("".join(parts), re.IGNORECASE),
        fields=tuple(fields),
        month_numbers=MappingProxyType(_month_names()),
    )


def _render_field(field: _Field, instant: Instant) -> str:
    width = field.width
    match field.letter:
        case "y":
            if width == 2:
                return f"{instant.year % 100:02d}"
            return f"{instant.year:0{width}d}"
        case "M" | "L":
            if width == 3:
                return calendar.month_abbr[instant.month]
            if width >= 4:
                return calendar.month_name[instant.month]
            return f"{instant.month:0{width}d}"
        case "d":
            return f"{instant.day:0{width}d}"
        case "H":
            return f"{instant.hour:0{width}d}"
        case "m":
            return f"{instant.minute:0{width}d}"
        case "s":
            return f"{instant.second:0{width}d}"
        case "S":
            digits = f"{instant.microsecond // 1000:03d}"
            return digits[:width] if width <= 3 else digits.ljust(width, "0")
        case "E":
            names = calendar.day_abbr if width <= 3 else calendar.day_name
            return names[instant.weekday()]
        case _:
            raise AssertionError(f"unhandled pattern letter {field.letter!r}")


def _read_field(field: _Field, raw: str, month_numbers: Mapping[str, int]) -> int | None:
    if field.letter == "E":
        return None
    if field.is_text:
        return month_numbers.get(raw.casefold())
    if field.letter == "S":
        return int(raw[:3].ljust(3, "0"))
    value = int(raw)
    if field.letter == "y" and field.width == 2:
        return TWO_DIGIT_YEAR_BASE + value
    return value


@dataclass(frozen=True, slots=True)
class PatternFormatter:
    """Stateless formatter; compiled patterns live in an immutable LRU cache."""

    def format(self, instant: Instant, pattern: str) -> str:
        """Render the wall-clock fields of ``instant``; ``""`` for unsupported patterns."""

        tokens = _tokenize(pattern)
        if tokens is None:
            return ""
        return "".join(
            token if isinstance(token, str) else _render_field(token, instant) for token in tokens
        )

    def parse(self, text: str, pattern: str) -> ComponentValues | None:
        """Read the fields the pattern carries; every other field stays absent."""

        compiled = _compile(pattern)
        if compiled is None:
            return None
        match = compiled.regex.fullmatch(text.strip())
        if match is None:
            return None

        values: dict[str, int] = {}
        for field, raw in zip(compiled.fields, match.groups(), strict=True):
            value = _read_field(field, raw, compiled.month_numbers)
            if value is None:
                if field.letter != "E":
                    return None
                continue
            values[_NUMERIC_COMPONENTS[field.letter].value] = value
        return ComponentValues(**values)


DEFAULT_FORMATTER: Final[PatternFormatter] = PatternFormatter()


def parse_components(
    text: str,
    pattern: str,
    *,
    formatter: FormatService = DEFAULT_FORMATTER,
) -> tuple[int | None, int | None, int | None] | None:
    """Return the ``(year, month, day)`` triple read from ``text``, if it parses."""

    components = formatter.parse(text, pattern)
    if components is None:
        return None
    return components.year, components.month, components.day


__all__ = [
    "DEFAULT_FORMATTER",
    "PatternFormatter",
    "capitalize_first",
    "parse_components",
]
