"""Defines the :class:`.Instant` class and its host-local calendar view.

An :class:`.Instant` is a point in time stored as epoch milliseconds. Subclassing
`int` keeps it usable anywhere an epoch timestamp is expected, while calling
`type` on the variable reveals that it is a point in time rather than a plain count.

.. code-block:: python

    instant = Instant(1710469800000)
    int(instant)  # 1710469800000
    isinstance(instant, int)  # True

Unlike the civil date-time values in :mod:`.conversions`, which are always read at
:data:`.CIVIL_UTC_OFFSET`, the calendar view of an :class:`.Instant` uses the host-local
zone configured by ``[time] LocalTimezone``.
"""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime, timedelta, timezone, tzinfo

# Third Party Imports
from dateutil import tz

# Local Imports
from ..common.behavioral_config import BehavioralConfig
from ..common.exceptions import EpochRangeError
from ..common.logger import datetoolLogDebug, datetoolLogError
from .constants import EPOCH, EPOCH_MS_MAX, EPOCH_MS_MIN, ONE_MILLISECOND

LOCAL_ZONE_NAME: str = "local"
"""``str``: config value selecting the operating system's zone."""


def getLocalZone() -> tzinfo:
    """Return the host-local zone used by the :class:`.Instant` calendar view.

    Raises:
        ``ValueError``: the configured zone name is unknown

    Returns:
        ``tzinfo``: operating system zone, or the configured IANA zone
    """
    name = BehavioralConfig.getConfig().time.LocalTimezone
    if not name or name.lower() == LOCAL_ZONE_NAME:
        return tz.tzlocal()

    zone = tz.gettz(name)
    if zone is None:
        msg = f"Unknown time zone configured for [time] LocalTimezone: {name!r}"
        datetoolLogError(msg)
        raise ValueError(msg)

    return zone


class Instant(int):
    """Class representing a point in time as integer epoch milliseconds."""

    @classmethod
    def now(cls) -> Instant:
        """Return the current moment read from the host clock."""
        return cls((datetime.now(timezone.utc) - EPOCH) // ONE_MILLISECOND)

    @classmethod
    def fromDatetime(cls, date_time: datetime) -> Instant:
        """Return the :class:`.Instant` of an aware ``datetime``."""
        return cls((date_time - EPOCH) // ONE_MILLISECOND)

    def toDatetime(self, zone: tzinfo | None = None) -> datetime:
        """Return this instant as an aware ``datetime`` in `zone`, UTC by default.

        Raises:
            :class:`.EpochRangeError`: this instant lies outside
                :data:`.EPOCH_MS_MIN`-:data:`.EPOCH_MS_MAX`
        """
        if not EPOCH_MS_MIN <= self <= EPOCH_MS_MAX:
            err = EpochRangeError(int(self))
            datetoolLogDebug(str(err))
            raise err

        utc = EPOCH + timedelta(milliseconds=int(self))
        if zone is None:
            return utc
        return utc.astimezone(zone)

    def __repr__(self):
        """Return a string representation of this :class:`.Instant`."""
        try:
            iso = self.toDatetime().isoformat(timespec="milliseconds")
        except OverflowError:
            return f"Instant({int(self)} ms)"

        return f"Instant({int(self)} ms, ISO={iso})"

    def __str__(self):
        """Return a string representation of this :class:`.Instant`."""
        return self.__repr__()


def instantToLocalDatetime(instant: Instant | int, zone: tzinfo | None = None) -> datetime:
    """Return the naive host-local wall clock reading of `instant`.

    Args:
        instant (:class:`.Instant` | ``int``): epoch milliseconds
        zone (``tzinfo``, optional): zone to read the wall clock in. Defaults to
            :func:`.getLocalZone`.

    Returns:
        ``datetime``: naive wall clock fields
    """
    if zone is None:
        zone = getLocalZone()
    return Instant(instant).toDatetime(zone).replace(tzinfo=None)


def localDatetimeToInstant(wall_clock: datetime, zone: tzinfo | None = None) -> Instant:
    """Return the :class:`.Instant` at which the host-local wall clock reads `wall_clock`.

    Note:
        Wall clock readings skipped by a daylight saving transition are moved forward
        by the size of the gap, ambiguous readings resolve to the earlier instant.

    Args:
        wall_clock (``datetime``): naive wall clock fields
        zone (``tzinfo``, optional): zone the fields are read in. Defaults to
            :func:`.getLocalZone`.

    Returns:
        :class:`.Instant`: corresponding point in time
    """
    if zone is None:
        zone = getLocalZone()
    aware = tz.resolve_imaginary(wall_clock.replace(tzinfo=zone, fold=0))
    return Instant.fromDatetime(aware)
