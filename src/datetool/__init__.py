"""Main Module Documentation.

DATETOOL is a static collection of date/time helpers: conversions between epoch timestamps,
formatted strings, :class:`.Instant` values and civil date-times pinned to UTC+8, plus
day-boundary and calendar-arithmetic helpers. The public functions are re-exported here.

.. code-block:: python

    import datetool

    datetool.toCivilDateTime(0)  # datetime(1970, 1, 1, 8, 0)
    datetool.reformat("2024-03-15", datetool.DATE, datetool.DATE_COMPACT)  # "20240315"
"""

from __future__ import annotations

# Local Imports
from .common.exceptions import DatetoolError, EpochRangeError, FormatError, NumberFormatError, PatternError
from .time.arithmetic import (
    CalendarField,
    addDay,
    addField,
    addHour,
    addMillisecond,
    addMinute,
    addMonth,
    addSecond,
    addYear,
    endOfDay,
    fromFields,
    startOfDay,
)
from .time.constants import (
    CIVIL_UTC_OFFSET,
    DATE,
    DATE_CN,
    DATE_COMPACT,
    DATETIME,
    DATETIME_CN,
    DATETIME_COMPACT,
    TIME_COMPACT,
)
from .time.conversions import (
    parseEpochMillis,
    parseInstant,
    toCivilDateTime,
    toEpochMillis,
    toEpochSeconds,
    toInstant,
)
from .time.formatting import format, reformat  # noqa: A004
from .time.instant import Instant

__version__ = "1.0.0"

__all__ = [
    "CIVIL_UTC_OFFSET",
    "DATE",
    "DATE_CN",
    "DATE_COMPACT",
    "DATETIME",
    "DATETIME_CN",
    "DATETIME_COMPACT",
    "TIME_COMPACT",
    "CalendarField",
    "DatetoolError",
    "EpochRangeError",
    "FormatError",
    "Instant",
    "NumberFormatError",
    "PatternError",
    "addDay",
    "addField",
    "addHour",
    "addMillisecond",
    "addMinute",
    "addMonth",
    "addSecond",
    "addYear",
    "endOfDay",
    "format",
    "fromFields",
    "parseEpochMillis",
    "parseInstant",
    "reformat",
    "startOfDay",
    "toCivilDateTime",
    "toEpochMillis",
    "toEpochSeconds",
    "toInstant",
]
