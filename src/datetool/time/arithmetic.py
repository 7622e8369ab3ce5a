"""Calendar arithmetic, day boundaries and construction from partial field lists.

The functions here accept either an :class:`.Instant` or a civil date-time ``datetime``.
Calendar fields of an :class:`.Instant` are read on the host-local wall clock; a civil
date-time is shifted on its own fields.
"""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime, timedelta
from enum import Enum

# Third Party Imports
from dateutil.relativedelta import relativedelta

# Local Imports
from ..common.logger import datetoolLogError
from ..common.utilities import checkType
from .constants import HOUR2MS, MIN2MS, MS2US, SEC2MS
from .instant import Instant, instantToLocalDatetime, localDatetimeToInstant

MAX_FIELD_COUNT: int = 7
"""``int``: year, month, day, hour, minute, second, millisecond."""


class CalendarField(str, Enum):
    """Enumeration of the calendar fields that can be added to."""

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"

    @property
    def is_date(self) -> bool:
        """``bool``: whether adding to this field keeps the wall clock time of day."""
        return self in (CalendarField.YEAR, CalendarField.MONTH, CalendarField.DAY)

    @property
    def milliseconds(self) -> int:
        """``int``: length of one unit of a time-of-day field, in milliseconds."""
        return {
            CalendarField.HOUR: HOUR2MS,
            CalendarField.MINUTE: MIN2MS,
            CalendarField.SECOND: SEC2MS,
            CalendarField.MILLISECOND: 1,
        }[self]

    def delta(self, amount: int) -> relativedelta:
        """Return a :class:`relativedelta` of `amount` units of this field."""
        if self is CalendarField.MILLISECOND:
            return relativedelta(microseconds=amount * MS2US)
        return relativedelta(**{f"{self.value}s": amount})


def rollFields(year, month=1, day=1, hour=0, minute=0, second=0, microsecond=0) -> datetime:
    """Build a naive ``datetime``, rolling out-of-range fields over into the next larger field.

    .. code-block:: python

        rollFields(2024, 13, 1)  # datetime(2025, 1, 1)
        rollFields(2024, 3, 0)  # datetime(2024, 2, 29)

    Raises:
        ``ValueError``: the rolled-over year lies outside 1-9999
    """
    return datetime(year, 1, 1) + relativedelta(months=month - 1) + timedelta(
        days=day - 1,
        hours=hour,
        minutes=minute,
        seconds=second,
        microseconds=microsecond,
    )


def addField(value, field: CalendarField | str, amount: int):
    """Add a signed `amount` of a calendar `field` to `value`.

    Adding months or years to a day that does not exist in the target month clamps to the
    month's last day, e.g. January 31st plus one month is the last day of February.

    Args:
        value (:class:`.Instant` | ``datetime``): instant or civil date-time to shift
        field (:class:`.CalendarField` | ``str``): field to add to, such as ``"month"``
        amount (``int``): units to add, negative values subtract

    Returns:
        :class:`.Instant` | ``datetime``: new value of the same kind as `value`
    """
    field = CalendarField(field)
    checkType(amount, "amount", int)
    checkType(value, "value", datetime, int)

    if isinstance(value, datetime):
        return value + field.delta(amount)

    if field.is_date:
        wall_clock = instantToLocalDatetime(value)
        return localDatetimeToInstant(wall_clock + field.delta(amount))

    return Instant(int(value) + amount * field.milliseconds)


def addYear(value, years: int):
    """Add (negative subtracts) `years` years to `value`."""
    return addField(value, CalendarField.YEAR, years)


def addMonth(value, months: int):
    """Add (negative subtracts) `months` months to `value`."""
    return addField(value, CalendarField.MONTH, months)


def addDay(value, days: int):
    """Add (negative subtracts) `days` days to `value`."""
    return addField(value, CalendarField.DAY, days)


def addHour(value, hours: int):
    """Add (negative subtracts) `hours` hours to `value`."""
    return addField(value, CalendarField.HOUR, hours)


def addMinute(value, minutes: int):
    """Add (negative subtracts) `minutes` minutes to `value`."""
    return addField(value, CalendarField.MINUTE, minutes)


def addSecond(value, seconds: int):
    """Add (negative subtracts) `seconds` seconds to `value`."""
    return addField(value, CalendarField.SECOND, seconds)


def addMillisecond(value, milliseconds: int):
    """Add (negative subtracts) `milliseconds` milliseconds to `value`."""
    return addField(value, CalendarField.MILLISECOND, milliseconds)


def _atTimeOfDay(value, month, day, hour, minute, second, millisecond=None):
    """Move `value`, or the date `value`-`month`-`day`, to a time of day.

    A `millisecond` of ``None`` keeps the existing millisecond: that of `value`, or that of
    the current moment when building from year, month and day.
    """
    if month is None and day is None:
        checkType(value, "value", datetime, int)
        if isinstance(value, datetime):
            wall_clock = value
        else:
            wall_clock = instantToLocalDatetime(value)

        wall_clock = wall_clock.replace(hour=hour, minute=minute, second=second)
        if millisecond is not None:
            wall_clock = wall_clock.replace(microsecond=millisecond * MS2US)

        if isinstance(value, datetime):
            return wall_clock
        return localDatetimeToInstant(wall_clock)

    if month is None or day is None:
        msg = "Both month and day are required alongside a year"
        datetoolLogError(msg)
        raise TypeError(msg)

    for name, field in (("year", value), ("month", month), ("day", day)):
        checkType(field, name, int)

    if millisecond is None:
        millisecond = instantToLocalDatetime(Instant.now()).microsecond // MS2US

    wall_clock = rollFields(value, month, day, hour, minute, second, millisecond * MS2US)
    return localDatetimeToInstant(wall_clock)


def startOfDay(value, month: int | None = None, day: int | None = None):
    """Return midnight at the start of a day.

    Called as ``startOfDay(value)`` with an :class:`.Instant` or civil ``datetime``, or as
    ``startOfDay(year, month, day)`` for an :class:`.Instant` on the host-local calendar.

    Note:
        Only hours, minutes and seconds are zeroed. The millisecond field keeps its
        existing value: that of `value`, or that of the current moment when called with
        year, month and day.

    Returns:
        :class:`.Instant` | ``datetime``: start of the day
    """
    return _atTimeOfDay(value, month, day, 0, 0, 0)


def endOfDay(value, month: int | None = None, day: int | None = None):
    """Return 23:59:59.999 at the end of a day.

    Called as ``endOfDay(value)`` with an :class:`.Instant` or civil ``datetime``, or as
    ``endOfDay(year, month, day)`` for an :class:`.Instant` on the host-local calendar.

    Returns:
        :class:`.Instant` | ``datetime``: end of the day
    """
    return _atTimeOfDay(value, month, day, 23, 59, 59, 999)


def fromFields(*fields: int) -> Instant:
    """Build an :class:`.Instant` from up to seven host-local calendar fields.

    Fields are read in the order year, month, day, hour, minute, second, millisecond.
    Missing year, month and day fields default to ``1``, missing time fields to ``0``, and
    out-of-range fields roll over (month ``13`` is January of the next year).

    .. code-block:: python

        fromFields(2024, 3, 15)  # 2024-03-15 00:00:00.000
        fromFields(2024, 3, 15, 10, 30)  # 2024-03-15 10:30:00.000
        fromFields()  # now

    Args:
        fields (``int``): calendar fields

    Raises:
        ``TypeError``: more than seven fields are given

    Returns:
        :class:`.Instant`: the current moment if no fields are given
    """
    if not fields:
        return Instant.now()

    if len(fields) > MAX_FIELD_COUNT:
        msg = f"fromFields() takes at most {MAX_FIELD_COUNT} fields ({len(fields)} given)"
        datetoolLogError(msg)
        raise TypeError(msg)

    for field in fields:
        checkType(field, "fields", int)

    year, month, day, hour, minute, second, millisecond = fields + (1, 1, 1, 0, 0, 0, 0)[len(fields) :]
    wall_clock = rollFields(year, month, day, hour, minute, second, millisecond * MS2US)
    return localDatetimeToInstant(wall_clock)
