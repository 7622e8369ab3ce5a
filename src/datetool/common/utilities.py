"""Various helper functions that are used across multiple modules."""

from __future__ import annotations

# Local Imports
from .logger import datetoolLogError


def getTypeString(class_instance):
    """Return the class type as a string without any base class information.

    Args:
        class_instance (generic class instance): instance of a general class

    Returns:
        ``str``: name of the class without base classes
    """
    return class_instance.__class__.__name__


def checkType(value, name: str, *types: type):
    """Throw a ``TypeError`` if `value` is not an instance of any of `types`.

    Note:
        ``bool`` is rejected even when ``int`` is allowed, so flags are never read as timestamps.

    Args:
        value: value to check.
        name (str): name of the argument, used in the error message.
        types (type): accepted types.

    Raises:
        TypeError: If `value` doesn't match `types`.
    """
    if isinstance(value, bool) or not isinstance(value, types):
        err = f"Incorrect type for {name} param: {getTypeString(value)}"
        datetoolLogError(err)
        raise TypeError(err)
