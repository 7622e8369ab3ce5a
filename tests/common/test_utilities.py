from __future__ import annotations

# Standard Library Imports
import logging
from datetime import datetime

# Third Party Imports
import pytest

# DATETOOL Imports
import datetool.common.utilities as utils
from datetool.common.logger import LOGGER_NAME


def testGetTypeString():
    """Ensure proper type string is returned for parent & child classes."""

    # Dummy classes for testing type string
    class DummyClass1:
        pass

    class DummyClass2(DummyClass1):
        pass

    # Create proper instances
    dummy1 = DummyClass1()
    dummy2 = DummyClass2()

    assert utils.getTypeString(dummy1) == "DummyClass1"
    assert utils.getTypeString(dummy2) == "DummyClass2"


def testCheckTypeAccepts():
    """Ensure matching values pass through silently."""
    utils.checkType("2024-03-15", "text", str)
    utils.checkType(5, "amount", int)
    utils.checkType(datetime(2024, 3, 15), "value", int, str, datetime)


@pytest.mark.parametrize("value", [1.5, None, b"12", ["12"]])
def testCheckTypeRejects(value, caplog: pytest.LogCaptureFixture):
    """Ensure mismatched values raise and are logged as errors."""
    with caplog.at_level(logging.ERROR, logger=LOGGER_NAME):
        with pytest.raises(TypeError, match="Incorrect type for value param"):
            utils.checkType(value, "value", int, str)

    assert any(record.levelno == logging.ERROR for record in caplog.records)


def testCheckTypeRejectsBool():
    """Ensure flags are not mistaken for integer timestamps."""
    with pytest.raises(TypeError, match="Incorrect type for millis param: bool"):
        utils.checkType(True, "millis", int)
