"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime
from pathlib import Path

# Common file paths
FIXTURE_DATA_DIR = Path(__file__).parent / "datafiles"
CUSTOM_CONFIG_FILE = Path("custom_behavior.config")

# Host-local zone the legacy instant pathway is pinned to during tests. It observes daylight
# saving time and is far from UTC+8, so mixing up the two pathways shows in the results.
TEST_LOCAL_ZONE: str = "America/New_York"

# Common civil date-times and their epoch milliseconds
TEST_CIVIL_DATETIME = datetime(2024, 3, 15, 10, 30)
TEST_EPOCH_MILLIS: int = 1710469800000

SAMPLE_CIVIL_DATETIMES: tuple[datetime, ...] = (
    datetime(1970, 1, 1, 8),
    datetime(1970, 1, 1, 0),
    datetime(1969, 12, 31, 23, 59, 59),
    datetime(2000, 2, 29, 12, 0, 1),
    datetime(2024, 3, 15, 10, 30),
    datetime(2024, 12, 31, 23, 59, 59),
    datetime(2038, 1, 19, 11, 14, 8),
    datetime(1900, 6, 1, 6, 6, 6),
)
