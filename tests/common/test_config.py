from __future__ import annotations

# Standard Library Imports
import os
from collections import OrderedDict
from logging import ERROR, INFO, WARNING
from typing import TYPE_CHECKING

# Third Party Imports
import pytest

# DATETOOL Imports
from datetool.common.behavioral_config import CONFIG_ENV_VARIABLE, BehavioralConfig, SubConfig

# Local Imports
from .. import CUSTOM_CONFIG_FILE, FIXTURE_DATA_DIR

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from logging import Logger

CONFIG_FILE_PARTIAL: tuple[str, ...] = (
    "[logging]\n",
    "Level = ERROR\n",
)

CORRECT_DEFAULTS = OrderedDict(
    {
        "logging": {
            "OutputLocation": "stdout",
            "Level": WARNING,
            "MaxFileSize": 1048576,
            "MaxFileCount": 50,
            "AllowMultipleHandlers": False,
        },
        "time": {
            "LocalTimezone": "local",
        },
    },
)


@pytest.fixture(name="fresh_config")
def resetSharedConfig(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop the shared config for the duration of a test, restoring it afterwards."""
    monkeypatch.setattr(BehavioralConfig, "_BehavioralConfig__shared_inst", None)


def testPackagedDefaults(fresh_config: None):
    """Test that the packaged config file results in the default values."""
    config = BehavioralConfig()
    for section, section_conf in CORRECT_DEFAULTS.items():
        for option, value in section_conf.items():
            conf_section = getattr(config, section)
            conf_option = getattr(conf_section, option)
            assert value == conf_option


def testSinglePattern():
    """Test that :class:`.BehavioralConfig` is a proper Singleton class."""
    config = BehavioralConfig.getConfig()
    # DATETOOL Imports
    from datetool.common.behavioral_config import BehavioralConfig as SecondConfig

    assert config is SecondConfig.getConfig()


def testOverwrite(monkeypatch: pytest.MonkeyPatch):
    """Test overwriting the shared :class:`.BehavioralConfig` directly with custom settings."""
    custom_config = BehavioralConfig.getConfig()
    monkeypatch.setattr(custom_config.logging, "Level", INFO)
    monkeypatch.setattr(custom_config.time, "LocalTimezone", "Europe/Paris")

    second_config = BehavioralConfig.getConfig()
    assert second_config.logging.Level == INFO
    assert second_config.time.LocalTimezone == "Europe/Paris"
    assert custom_config is second_config


@pytest.mark.datafiles(FIXTURE_DATA_DIR)
def testNonDefaultFile(test_logger: Logger, datafiles, fresh_config: None, monkeypatch: pytest.MonkeyPatch):
    """Test building the shared :class:`.BehavioralConfig` from the environment variable's file.

    Args:
        test_logger (:class:`logging.Logger`): unit test logger object
        datafiles (:class:`pathlib.Path`): location of current test data directory
        fresh_config (``None``): drops the shared config
        monkeypatch (:class:`pytest.MonkeyPatch`): monkeypatch obj to track changes
    """
    monkeypatch.setenv(CONFIG_ENV_VARIABLE, os.path.join(datafiles, CUSTOM_CONFIG_FILE))
    test_logger.debug(f"{CONFIG_ENV_VARIABLE}: {os.environ.get(CONFIG_ENV_VARIABLE)}")

    config = BehavioralConfig.getConfig()
    assert config.logging.OutputLocation == "./logs/"
    assert config.logging.Level == INFO
    assert config.logging.MaxFileSize == 2048
    assert config.logging.MaxFileCount == 10
    assert config.time.LocalTimezone == "Asia/Tokyo"

    # Options absent from the file keep their defaults
    assert config.logging.AllowMultipleHandlers is False

    assert config is BehavioralConfig.getConfig()


def testPartialFile(tmp_path, fresh_config: None):
    """Test that a config file only overrides the options it names."""
    config_path = tmp_path / "partial.config"
    with open(config_path, "w", encoding="utf-8") as config_file:
        config_file.writelines(CONFIG_FILE_PARTIAL)

    config = BehavioralConfig.getConfig(str(config_path))
    assert config.logging.Level == ERROR
    assert config.logging.OutputLocation == CORRECT_DEFAULTS["logging"]["OutputLocation"]
    assert config.time.LocalTimezone == CORRECT_DEFAULTS["time"]["LocalTimezone"]


def testMissingFile(tmp_path, fresh_config: None):
    """Test that a missing config file falls back to the defaults."""
    config = BehavioralConfig.getConfig(str(tmp_path / "missing.config"))
    assert config.logging.Level == WARNING
    assert config.time.LocalTimezone == "local"


def testSubConfigSetOnce():
    """Test that a :class:`.SubConfig` field cannot be set twice."""
    sub = SubConfig("time")
    sub.setonce("LocalTimezone", "UTC")
    assert sub.LocalTimezone == "UTC"

    with pytest.raises(AttributeError, match="already has a value set"):
        sub.setonce("LocalTimezone", "Asia/Tokyo")

    with pytest.raises(TypeError):
        SubConfig(5)
