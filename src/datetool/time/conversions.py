"""Helper functions that convert between timestamps, instants and civil date-times.

Two date representations are used throughout:

* :class:`.Instant`: epoch milliseconds, whose calendar view uses the host-local zone.
* civil date-time: a naive ``datetime`` whose fields are always read at
  :data:`.CIVIL_UTC_OFFSET` (UTC+8), never at the host zone. Epoch millisecond ``0`` is
  therefore the civil date-time ``1970-01-01 08:00:00``.

Every conversion returns ``None`` when given ``None``.
"""

from __future__ import annotations

# Standard Library Imports
import re
from datetime import datetime

# Local Imports
from ..common.exceptions import NumberFormatError
from ..common.logger import datetoolLogDebug
from ..common.utilities import checkType
from .constants import CIVIL_UTC_OFFSET, EPOCH_MS_MAX, EPOCH_MS_MIN, SEC2MS
from .instant import Instant, localDatetimeToInstant
from .patterns import compilePattern

EPOCH_MS_REGEX = re.compile(r"[+-]?[0-9]+")
"""``re.Pattern``: decimal text accepted as epoch milliseconds."""

MAX_MILLIS_DIGITS: int = len(str(max(-EPOCH_MS_MIN, EPOCH_MS_MAX)))
"""``int``: most significant digits a supported epoch millisecond value can have."""


def parseEpochMillis(text: str) -> int:
    """Parse decimal text holding epoch milliseconds.

    Only an optional sign followed by ASCII digits is accepted, within
    :data:`.EPOCH_MS_MIN`-:data:`.EPOCH_MS_MAX`; whitespace, underscores and decimal points are
    rejected.

    Args:
        text (``str``): text to parse, such as ``"1710469800000"``

    Raises:
        :class:`.NumberFormatError`: `text` does not hold a valid integer

    Returns:
        ``int``: epoch milliseconds
    """
    checkType(text, "text", str)
    if EPOCH_MS_REGEX.fullmatch(text) is None:
        err = NumberFormatError(text)
        datetoolLogDebug(str(err))
        raise err

    # Digit runs longer than any supported value never reach `int`
    digits = text.lstrip("+-").lstrip("0") or "0"
    if len(digits) > MAX_MILLIS_DIGITS:
        err = NumberFormatError(text)
        datetoolLogDebug(f"{err} (out of range)")
        raise err

    value = -int(digits) if text.startswith("-") else int(digits)
    if not EPOCH_MS_MIN <= value <= EPOCH_MS_MAX:
        err = NumberFormatError(text)
        datetoolLogDebug(f"{err} (out of range)")
        raise err

    return value


def toCivilDateTime(source, pattern: str | None = None) -> datetime | None:
    """Convert `source` into a civil date-time at UTC+8.

    Args:
        source: one of

            - :class:`.Instant` or ``int``: epoch milliseconds
            - ``str`` without `pattern`: decimal epoch milliseconds
            - ``str`` with `pattern`: date text, parsed strictly by `pattern`
            - ``datetime``: aware values are shifted to UTC+8, naive values are copied
        pattern (``str``, optional): format pattern for date text. Defaults to ``None``.

    Raises:
        :class:`.NumberFormatError`: malformed epoch millisecond text
        :class:`.FormatError`: date text does not match `pattern`
        :class:`.EpochRangeError`: epoch milliseconds outside the supported range

    Returns:
        ``datetime | None``: naive civil date-time, or ``None`` if `source` is ``None``
    """
    if source is None:
        return None

    if pattern is not None:
        checkType(source, "source", str)
        return compilePattern(pattern).parse(source)

    checkType(source, "source", datetime, str, int)
    if isinstance(source, datetime):
        if source.tzinfo is None:
            return source.replace()
        return source.astimezone(CIVIL_UTC_OFFSET).replace(tzinfo=None)

    if isinstance(source, str):
        source = parseEpochMillis(source)

    return Instant(source).toDatetime(CIVIL_UTC_OFFSET).replace(tzinfo=None)


def toInstant(source) -> Instant | None:
    """Convert `source` into an :class:`.Instant`.

    Args:
        source: one of

            - ``datetime``: civil date-time projected at UTC+8, aware values keep their own zone
            - :class:`.Instant` or ``int``: epoch milliseconds
            - ``str``: decimal epoch milliseconds

    Raises:
        :class:`.NumberFormatError`: malformed epoch millisecond text

    Returns:
        :class:`.Instant` | ``None``: converted value, or ``None`` if `source` is ``None``
    """
    if source is None:
        return None

    checkType(source, "source", datetime, str, int)
    if isinstance(source, datetime):
        if source.tzinfo is None:
            source = source.replace(tzinfo=CIVIL_UTC_OFFSET)
        return Instant.fromDatetime(source)

    if isinstance(source, str):
        source = parseEpochMillis(source)

    return Instant(source)


def parseInstant(text: str, pattern: str) -> Instant | None:
    """Parse date text into an :class:`.Instant`, reading its fields in the host-local zone.

    Note:
        Unlike :func:`.toCivilDateTime`, this is not pinned to UTC+8 and parses leniently:
        ``"2024-3-5"`` matches ``yyyy-MM-dd``, trailing text is ignored and out-of-range
        fields roll over.

    Args:
        text (``str``): date text
        pattern (``str``): format pattern

    Raises:
        :class:`.FormatError`: `text` does not match `pattern`

    Returns:
        :class:`.Instant` | ``None``: parsed value, or ``None`` if `text` is ``None``
    """
    if text is None:
        return None

    checkType(text, "text", str)
    wall_clock = compilePattern(pattern).parse(text, lenient=True)
    return localDatetimeToInstant(wall_clock)


def toEpochMillis(value) -> int | None:
    """Return the epoch milliseconds of an :class:`.Instant` or civil date-time.

    Args:
        value (:class:`.Instant` | ``datetime``): civil values are projected at UTC+8

    Returns:
        ``int | None``: milliseconds since the epoch, or ``None`` if `value` is ``None``
    """
    if value is None:
        return None

    checkType(value, "value", datetime, int)
    return int(toInstant(value))


def toEpochSeconds(value) -> int | None:
    """Return the epoch seconds of an :class:`.Instant` or civil date-time, rounded down.

    Args:
        value (:class:`.Instant` | ``datetime``): civil values are projected at UTC+8

    Returns:
        ``int | None``: seconds since the epoch, or ``None`` if `value` is ``None``
    """
    millis = toEpochMillis(value)
    if millis is None:
        return None

    return millis // SEC2MS
