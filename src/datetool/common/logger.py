"""Defines the :class:`.Logger` class and the one-line logging helpers."""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from os import makedirs
from os.path import exists, join

# Local Imports
from .behavioral_config import BehavioralConfig

LOGGER_NAME: str = "datetool"
"""``str``: name of the top-level package logger."""


def pathSafeTime(dt: datetime | None = None) -> str:
    """Return a timestamp usable in a log file name, `dt` defaults to now."""
    if dt is None:
        dt = datetime.now()
    return dt.isoformat(timespec="milliseconds").replace(":", "-").replace(".", "-")


class Logger:
    """Extended logger wraps the standard Python logging package.

    It also creates a standard file name and log format for any log files that are saved.
    """

    def __init__(self, name, level=None, path=None, allow_multiple_handlers=None):
        """Configure the logging information for this Logger instance.

        Args:
            name (``string``): Name of the the logger instance
            level (``logging.LOG_LEVEL``): Determines what level of log messages are published
            path (``string``): Path to where the log file will be stored
            allow_multiple_handlers (``bool``, optional): whether multiple log handlers are permitted
        """
        if not level:
            level = BehavioralConfig.getConfig().logging.Level
        if not path:
            path = BehavioralConfig.getConfig().logging.OutputLocation
        if not allow_multiple_handlers:
            allow_multiple_handlers = BehavioralConfig.getConfig().logging.AllowMultipleHandlers
        # Grab the logger
        self.logger = logging.getLogger(name)
        self.filename = None
        if not self.logger.handlers or allow_multiple_handlers is True:
            # Write logs to file if path was provided, otherwise write to stdout
            if path == "stdout":
                self.filename = "stdout"
                handler = logging.StreamHandler(sys.stdout)

            else:
                # Create the path if it doesn't exist.
                if not exists(path):
                    self.logger.info(f"Path did not exist: {path!r}. Creating path...")
                    makedirs(path)

                # Set the timestamp for the file name, and construct the entire filename
                log_name = f"{name}_{pathSafeTime()}.log"
                self.filename = join(path, log_name)

                handler = RotatingFileHandler(
                    self.filename,
                    maxBytes=BehavioralConfig.getConfig().logging.MaxFileSize,
                    backupCount=BehavioralConfig.getConfig().logging.MaxFileCount,
                    encoding="utf-8",
                )

            formatter = logging.Formatter("%(asctime)s - %(module)s - %(levelname)s - %(message)s")
            handler.setFormatter(formatter)

            self.logger.setLevel(level)
            self.logger.addHandler(handler)

    def __getattr__(self, name):
        """Delegate everything else to the wrapped :class:`logging.Logger`."""
        return getattr(self.logger, name)


def _datetoolLog(message: str, level: int):
    """Log a message to the top-level log record.

    This provides a simple, easy one-liner that doesn't require pre-initializing a logger object.
    The primary use case is for simple functions that need to log messages.

    Args:
        message (``str``): message to record with in the log.
        level (``int``): level at which to log this message, corresponding to `logging.LOG_LEVEL`.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.log(msg=message, level=level)


def datetoolLogCritical(message: str):
    """Log a CRITICAL message to the top-level log record."""
    _datetoolLog(message, level=logging.CRITICAL)


def datetoolLogError(message: str):
    """Log a ERROR message to the top-level log record.

    See Also:
        :func:`._datetoolLog`

    Args:
        message (``str``): message to record with in the log.
    """
    _datetoolLog(message, level=logging.ERROR)


def datetoolLogWarning(message: str):
    """Log a WARNING message to the top-level log record."""
    _datetoolLog(message, level=logging.WARNING)


def datetoolLogInfo(message: str):
    """Log a INFO message to the top-level log record."""
    _datetoolLog(message, level=logging.INFO)


def datetoolLogDebug(message: str):
    """Log a DEBUG message to the top-level log record.

    See Also:
        :func:`._datetoolLog`

    Args:
        message (``str``): message to record with in the log.
    """
    _datetoolLog(message, level=logging.DEBUG)
