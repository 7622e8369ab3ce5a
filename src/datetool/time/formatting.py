"""Helper functions that render date values as text and re-render date text."""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime

# Local Imports
from ..common.utilities import checkType
from .conversions import toCivilDateTime
from .instant import Instant, instantToLocalDatetime
from .patterns import compilePattern


def format(value, pattern: str) -> str | None:  # noqa: A001
    """Render `value` as text using `pattern`.

    Args:
        value: one of

            - :class:`.Instant`: rendered at the host-local zone
            - ``datetime``: civil date-time, rendered as-is (aware values shifted to UTC+8)
            - ``int``: epoch milliseconds, rendered as a civil date-time at UTC+8
        pattern (``str``): format pattern, such as :data:`.DATETIME`

    Returns:
        ``str | None``: formatted text, or ``None`` if `value` is ``None``
    """
    if value is None:
        return None

    checkType(value, "value", datetime, int)
    if isinstance(value, Instant):
        wall_clock = instantToLocalDatetime(value)
    else:
        wall_clock = toCivilDateTime(value)

    return compilePattern(pattern).format(wall_clock)


def reformat(source, pattern: str, pattern_to: str | None = None) -> str | None:
    """Re-render date text or an epoch timestamp with another pattern.

    .. code-block:: python

        reformat("2024-03-15", "yyyy-MM-dd", "yyyyMMdd")  # "20240315"
        reformat("0", "yyyy-MM-dd HH:mm:ss")  # "1970-01-01 08:00:00"

    Args:
        source (``str`` | ``int``): date text, or epoch milliseconds when `pattern_to` is omitted
        pattern (``str``): pattern `source` is written in, or the output pattern when
            `pattern_to` is omitted
        pattern_to (``str``, optional): output pattern. Defaults to ``None``.

    Raises:
        :class:`.FormatError`: `source` does not match `pattern`
        :class:`.NumberFormatError`: malformed epoch millisecond text

    Returns:
        ``str | None``: re-rendered text, or ``None`` if `source` is ``None``
    """
    if source is None:
        return None

    if pattern_to is None:
        # Epoch milliseconds are always rendered as civil date-times, even for an `Instant`
        checkType(source, "source", str, int)
        civil = toCivilDateTime(int(source) if isinstance(source, int) else source)
        return compilePattern(pattern).format(civil)

    return compilePattern(pattern_to).format(toCivilDateTime(source, pattern))
