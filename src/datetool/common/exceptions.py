"""Contains all the custom-defined exceptions used in DATETOOL."""

from __future__ import annotations


class DatetoolError(Exception):
    """Base class for errors raised by DATETOOL."""


class FormatError(DatetoolError, ValueError):
    """Exception indicating a date string does not conform to its pattern."""

    def __init__(self, text: str, pattern: str, reason: str | None = None):
        """Record the offending text and pattern.

        Args:
            text (``str``): date string that failed to parse
            pattern (``str``): pattern the string was parsed with
            reason (``str``, optional): short description of the mismatch
        """
        self.text = text
        self.pattern = pattern
        self.reason = reason
        msg = f"Text {text!r} does not match pattern {pattern!r}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class NumberFormatError(DatetoolError, ValueError):
    """Exception indicating a string expected to hold an integer does not."""

    def __init__(self, text: str):
        """Record the offending text."""
        self.text = text
        super().__init__(f"For input string: {text!r}")


class PatternError(DatetoolError, ValueError):
    """Exception indicating a malformed or unsupported format pattern."""

    def __init__(self, pattern: str, reason: str):
        """Record the offending pattern."""
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")


class EpochRangeError(DatetoolError, OverflowError):
    """Exception indicating epoch milliseconds outside the range calendar fields can be read for."""

    def __init__(self, millis: int):
        """Record the offending value."""
        self.millis = millis
        super().__init__(f"Epoch milliseconds out of range: {millis}")
