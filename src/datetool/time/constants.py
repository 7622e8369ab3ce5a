"""Global date & time constants.

This module holds the format patterns and unit conversions that are used in
various places across the codebase, allowing for a consistent place to store them.
"""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime, timedelta, timezone

# Format patterns
DATE: str = "yyyy-MM-dd"
"""``str``: date only, joined by hyphens."""

DATE_CN: str = "yyyy年MM月dd日"
"""``str``: date only, joined by Chinese year/month/day labels."""

DATETIME: str = "yyyy-MM-dd HH:mm:ss"
"""``str``: date and 24-hour time, hyphens and colons."""

DATETIME_CN: str = "yyyy年MM月dd日 HH时mm分ss秒"
"""``str``: date and 24-hour time, Chinese labels."""

DATETIME_COMPACT: str = "yyyyMMddHHmmss"
"""``str``: date and 24-hour time, digits only."""

DATE_COMPACT: str = "yyyyMMdd"
"""``str``: date only, digits only."""

TIME_COMPACT: str = "HHmmss"
"""``str``: 24-hour time only, digits only."""

# Zones
CIVIL_UTC_OFFSET: timezone = timezone(timedelta(hours=8))
"""``timezone``: fixed offset every civil date-time is interpreted at."""

EPOCH: datetime = datetime(1970, 1, 1, tzinfo=timezone.utc)
"""``datetime``: the Unix epoch, as an aware UTC ``datetime``."""

# Conversion constants
SEC2MS = 1000
MIN2MS = 60 * SEC2MS
HOUR2MS = 60 * MIN2MS
MS2US = 1000
ONE_MILLISECOND = timedelta(milliseconds=1)

# Range of epoch milliseconds whose calendar fields can be read in any zone. A day is kept
# clear of either end of the `datetime` year range for zone offsets.
EPOCH_MS_MIN: int = (datetime(1, 1, 2, tzinfo=timezone.utc) - EPOCH) // ONE_MILLISECOND
"""``int``: earliest supported instant, 0001-01-02T00:00:00Z."""

EPOCH_MS_MAX: int = (datetime(9999, 12, 31, tzinfo=timezone.utc) - EPOCH) // ONE_MILLISECOND - 1
"""``int``: latest supported instant, 9999-12-30T23:59:59.999Z."""
