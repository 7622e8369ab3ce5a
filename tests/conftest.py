from __future__ import annotations

# Standard Library Imports
import logging
import sys
from typing import TYPE_CHECKING

# Third Party Imports
import pytest
from dateutil import tz

# DATETOOL Imports
from datetool.common.behavioral_config import CONFIG_ENV_VARIABLE, BehavioralConfig

# Local Imports
from . import TEST_LOCAL_ZONE

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from datetime import tzinfo


@pytest.fixture(autouse=True)
def _patchMissingEnvVariables(monkeypatch: pytest.MonkeyPatch) -> None:
    """Automatically delete each environment variable, if set.

    Args:
        monkeypatch (:class:`pytest.MonkeyPatch`): monkeypatch obj to track changes

    Note:
        This is used so tests can assume a "blank" configuration, and it won't
        overwrite a user's custom-set environment variables.
    """
    with monkeypatch.context() as m_patch:
        m_patch.delenv(CONFIG_ENV_VARIABLE, raising=False)
        yield
        # Make sure we reset the config after each test function
        BehavioralConfig.getConfig()


@pytest.fixture(autouse=True)
def _pinLocalTimezone(monkeypatch: pytest.MonkeyPatch, request: pytest.FixtureRequest) -> None:
    """Pin the host-local zone used by the instant pathway to :data:`.TEST_LOCAL_ZONE`.

    Args:
        monkeypatch (:class:`pytest.MonkeyPatch`): monkeypatch obj to track changes
        request (:class:`pytest.FixtureRequest`): request obj to test for marks to bypass this

    Note:
        This keeps the instant tests independent of the machine running them.
    """
    if "host_zone" in request.keywords:
        return

    monkeypatch.setattr(BehavioralConfig.getConfig().time, "LocalTimezone", TEST_LOCAL_ZONE)


@pytest.fixture(name="local_zone")
def getLocalZone() -> tzinfo:
    """Return the ``tzinfo`` of :data:`.TEST_LOCAL_ZONE`."""
    return tz.gettz(TEST_LOCAL_ZONE)


@pytest.fixture(scope="session", name="test_logger")
def getTestLoggerObject() -> logging.Logger:
    """Create a custom :class:`logging.Logger` object."""
    logger = logging.getLogger("Unit Test Logger")
    logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest options without an .ini file."""
    config.addinivalue_line("markers", "host_zone: use the configured host zone, not the pinned test zone")
    config.addinivalue_line("markers", "quirk: documents inherited behavior kept on purpose")
