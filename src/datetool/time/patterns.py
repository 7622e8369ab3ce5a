"""Compiles date/time format patterns such as ``yyyy-MM-dd HH:mm:ss``.

Pattern letters:

=======  ==========================================  ======
Letter   Meaning                                     Counts
=======  ==========================================  ======
``y``    year, ``yy`` is a two digit year in 2000s    any
``M``    month of year (1-12)                         1-2
``d``    day of month                                 1-2
``H``    hour of day (0-23)                           1-2
``h``    clock hour of am/pm (1-12)                   1-2
``m``    minute of hour                               1-2
``s``    second of minute                             1-2
``S``    fraction of second, one digit per letter     1-9
``a``    ``AM``/``PM`` marker                         1
=======  ==========================================  ======

Text inside single quotes is literal, ``''`` is an apostrophe, and any character that is
not an ASCII letter (separators, ``年``, ``时``, ...) is matched and printed as-is.
Pattern letters are case-sensitive: ``H`` and ``h`` are different fields.

Two parsing modes are offered:

* strict: the whole text must match, every field must have the digit count its letters
  ask for and be in range. A day-of-month past the end of its month is clamped to the last
  valid day.
* lenient: digit runs may be any length (except between two adjacent numeric fields),
  trailing text is ignored, and out-of-range fields roll over into the next larger field.
"""

from __future__ import annotations

# Standard Library Imports
import re
from calendar import monthrange
from datetime import datetime
from functools import lru_cache
from string import ascii_letters
from typing import TYPE_CHECKING, NamedTuple

# Local Imports
from ..common.exceptions import FormatError, PatternError
from ..common.logger import datetoolLogDebug
from .arithmetic import rollFields

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Final

MAX_LETTER_COUNTS: Final[dict[str, int | None]] = {
    "y": None,
    "M": 2,
    "d": 2,
    "H": 2,
    "h": 2,
    "m": 2,
    "s": 2,
    "S": 9,
    "a": 1,
}
"""``dict``: supported pattern letters, mapped to their maximum repeat count."""

NUMERIC_LETTERS: Final[frozenset[str]] = frozenset("yMdHhmsS")

AM_PM_MARKERS: Final[tuple[str, str]] = ("AM", "PM")

TWO_DIGIT_YEAR_BASE: int = 2000

DEFAULT_FIELDS: Final[dict[str, int]] = {
    "year": 1970,
    "month": 1,
    "day": 1,
    "hour": 0,
    "minute": 0,
    "second": 0,
    "microsecond": 0,
}
"""``dict``: values given to fields the pattern does not mention."""


class Token(NamedTuple):
    """Single element of a compiled pattern: a literal, or a field letter repeated `count` times."""

    letter: str | None
    count: int
    literal: str = ""

    @property
    def is_numeric(self) -> bool:
        """``bool``: whether this token is a numeric field."""
        return self.letter in NUMERIC_LETTERS


def tokenize(pattern: str) -> tuple[Token, ...]:
    """Split `pattern` into literal and field tokens.

    Args:
        pattern (``str``): format pattern

    Raises:
        :class:`.PatternError`: unknown letter, unsupported count, or unterminated quote

    Returns:
        ``tuple``: :class:`.Token` objects in pattern order
    """
    tokens: list[Token] = []
    literal: list[str] = []

    def flushLiteral():
        if literal:
            tokens.append(Token(None, 0, "".join(literal)))
            literal.clear()

    index = 0
    while index < len(pattern):
        char = pattern[index]
        if char == "'":
            if pattern.startswith("''", index):
                literal.append("'")
                index += 2
                continue

            # Quoted text runs to the next lone apostrophe
            index += 1
            while True:
                if index >= len(pattern):
                    raise PatternError(pattern, "unterminated quoted literal")
                if pattern.startswith("''", index):
                    literal.append("'")
                    index += 2
                elif pattern[index] == "'":
                    index += 1
                    break
                else:
                    literal.append(pattern[index])
                    index += 1

        elif char in ascii_letters:
            end = index
            while end < len(pattern) and pattern[end] == char:
                end += 1
            count = end - index

            if char not in MAX_LETTER_COUNTS:
                raise PatternError(pattern, f"unknown pattern letter {char!r}")
            max_count = MAX_LETTER_COUNTS[char]
            if max_count is not None and count > max_count:
                raise PatternError(pattern, f"too many pattern letters {char * count!r}")

            flushLiteral()
            tokens.append(Token(char, count))
            index = end

        else:
            literal.append(char)
            index += 1

    flushLiteral()
    return tuple(tokens)


def _formatError(text: str, pattern: str, reason: str) -> FormatError:
    """Build a :class:`.FormatError` and record it in the debug log."""
    err = FormatError(text, pattern, reason)
    datetoolLogDebug(str(err))
    return err


class CompiledPattern:
    """Immutable, reusable formatter and parser for a single pattern.

    Instances hold no per-call state, so one instance may be shared freely between threads.
    Use :func:`.compilePattern` rather than constructing these directly.
    """

    def __init__(self, pattern: str):
        """Tokenize `pattern` and build its strict and lenient regular expressions.

        Args:
            pattern (``str``): format pattern
        """
        if not isinstance(pattern, str):
            raise TypeError(f"Pattern must be a string, not {type(pattern).__name__}")

        self.pattern = pattern
        try:
            self.tokens = tokenize(pattern)
        except PatternError as err:
            datetoolLogDebug(str(err))
            raise
        self.fields = tuple(token for token in self.tokens if token.letter)
        self._strict_regex = re.compile(self._buildRegex(lenient=False), re.ASCII)
        self._lenient_regex = re.compile(self._buildRegex(lenient=True), re.ASCII)

    def _buildRegex(self, lenient: bool) -> str:
        """Return the regular expression source matching this pattern."""
        parts = []
        for position, token in enumerate(self.tokens):
            if token.letter is None:
                parts.append(re.escape(token.literal))
                continue

            following = self.tokens[position + 1] if position + 1 < len(self.tokens) else None
            if lenient and token.is_numeric and following is not None and following.is_numeric:
                # Adjacent numeric fields can only be split by their letter counts
                parts.append(rf"(\d{{{token.count}}})")
            else:
                parts.append(self._fieldRegex(token, lenient))

        return "".join(parts)

    @staticmethod
    def _fieldRegex(token: Token, lenient: bool) -> str:
        """Return a capturing group for a single field token."""
        if token.letter == "a":
            return "(AM|PM|am|pm)" if lenient else "(AM|PM)"

        if lenient:
            return r"(\d+)"

        if token.letter == "y":
            return r"(\d{2})" if token.count == 2 else rf"(\d{{{token.count},}})"
        if token.letter == "S":
            return rf"(\d{{{token.count}}})"
        return r"(\d{1,2})" if token.count == 1 else r"(\d{2})"

    def format(self, date_time: datetime) -> str:
        """Render the fields of `date_time` with this pattern.

        Args:
            date_time (``datetime``): value whose wall clock fields are printed as-is

        Returns:
            ``str``: formatted text
        """
        out = []
        for token in self.tokens:
            if token.letter is None:
                out.append(token.literal)
            elif token.letter == "y":
                if token.count == 2:
                    out.append(f"{date_time.year % 100:02d}")
                else:
                    out.append(f"{date_time.year:0{token.count}d}")
            elif token.letter == "a":
                out.append(AM_PM_MARKERS[date_time.hour >= 12])
            elif token.letter == "S":
                out.append(f"{date_time.microsecond:06d}000"[: token.count])
            else:
                value = {
                    "M": date_time.month,
                    "d": date_time.day,
                    "H": date_time.hour,
                    "h": date_time.hour % 12 or 12,
                    "m": date_time.minute,
                    "s": date_time.second,
                }[token.letter]
                out.append(f"{value:0{token.count}d}")

        return "".join(out)

    def parse(self, text: str, lenient: bool = False) -> datetime:
        """Parse `text` into a naive ``datetime`` holding the wall clock fields it names.

        Args:
            text (``str``): text to parse
            lenient (``bool``, optional): use lenient rather than strict parsing. Defaults to ``False``.

        Raises:
            :class:`.FormatError`: `text` does not match this pattern

        Returns:
            ``datetime``: naive value, fields absent from the pattern take :data:`.DEFAULT_FIELDS`
        """
        if lenient:
            match = self._lenient_regex.match(text)
        else:
            match = self._strict_regex.fullmatch(text)
        if match is None:
            raise _formatError(text, self.pattern, "text does not match pattern")

        fields = dict(DEFAULT_FIELDS)
        hour_of_ampm = None
        is_pm = False
        try:
            for token, value in zip(self.fields, match.groups()):
                if token.letter == "y":
                    number = int(value)
                    if len(value) == 2 and token.count == 2:
                        number += TWO_DIGIT_YEAR_BASE
                    fields["year"] = number
                elif token.letter == "M":
                    fields["month"] = int(value)
                elif token.letter == "d":
                    fields["day"] = int(value)
                elif token.letter == "H":
                    fields["hour"] = int(value)
                elif token.letter == "h":
                    hour_of_ampm = int(value)
                elif token.letter == "m":
                    fields["minute"] = int(value)
                elif token.letter == "s":
                    fields["second"] = int(value)
                elif token.letter == "S":
                    fields["microsecond"] = int(value[:6].ljust(6, "0"))
                elif token.letter == "a":
                    is_pm = value.upper() == "PM"
        except ValueError as err:
            # Digit runs past the interpreter's integer conversion limit
            raise _formatError(text, self.pattern, str(err)) from err

        if lenient:
            return self._resolveLenient(text, fields, hour_of_ampm, is_pm)
        return self._resolveStrict(text, fields, hour_of_ampm, is_pm)

    def _resolveStrict(self, text: str, fields: dict, hour_of_ampm: int | None, is_pm: bool) -> datetime:
        """Validate each field's range and build the value."""
        if hour_of_ampm is not None and not any(token.letter == "H" for token in self.fields):
            if not 1 <= hour_of_ampm <= 12:  # noqa: PLR2004
                raise _formatError(text, self.pattern, f"invalid clock hour {hour_of_ampm}")
            fields["hour"] = hour_of_ampm % 12 + (12 if is_pm else 0)

        limits = {
            "year": (1, 9999),
            "month": (1, 12),
            "day": (1, 31),
            "hour": (0, 23),
            "minute": (0, 59),
            "second": (0, 59),
        }
        for name, (low, high) in limits.items():
            if not low <= fields[name] <= high:
                raise _formatError(text, self.pattern, f"invalid {name} {fields[name]}")

        # Clamp the day to the end of its month
        last_day = monthrange(fields["year"], fields["month"])[1]
        fields["day"] = min(fields["day"], last_day)

        return datetime(**fields)

    def _resolveLenient(self, text: str, fields: dict, hour_of_ampm: int | None, is_pm: bool) -> datetime:
        """Roll out-of-range fields over into the next larger field and build the value."""
        if hour_of_ampm is not None and not any(token.letter == "H" for token in self.fields):
            fields["hour"] = hour_of_ampm % 12 + (12 if is_pm else 0)

        try:
            return rollFields(**fields)
        except (ValueError, OverflowError) as err:
            raise _formatError(text, self.pattern, str(err)) from err


@lru_cache(maxsize=128)
def compilePattern(pattern: str) -> CompiledPattern:
    """Return the shared :class:`.CompiledPattern` for `pattern`.

    Raises:
        :class:`.PatternError`: `pattern` is malformed
    """
    return CompiledPattern(pattern)
