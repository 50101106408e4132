"""
Errors and warnings raised by the wind field engine.

Errors abort the current call. Warnings are emitted through the ``warnings``
module and logged, and execution continues.
"""

import logging
import warnings
from typing import Type

logger = logging.getLogger(__name__)


class WindFieldError(Exception):
    """Base exception for wind field errors."""
    pass


class EmptyInputError(WindFieldError):
    """No measured winds are available for the requested operation."""
    pass


class InsufficientSamplesError(WindFieldError):
    """Interpolation needs at least two measured altitudes."""
    pass


class InvalidRangeError(WindFieldError):
    """An altitude range or resolution is malformed."""
    pass


class OutOfRangeError(WindFieldError):
    """The requested altitudes fall outside the available wind data."""
    pass


class NotInterpolatedError(WindFieldError):
    """A range average was requested before an interpolated table exists."""
    pass


class WindFieldWarning(UserWarning):
    """Base category for recoverable wind field conditions."""
    pass


class DuplicateAltitudeWarning(WindFieldWarning):
    """A wind was recorded twice at one altitude; the later one is kept."""
    pass


class LengthMismatchWarning(WindFieldWarning):
    """Bulk input sequences differ in length; the shortest length is used."""
    pass


class TableConsistencyWarning(WindFieldWarning):
    """The interpolated table failed its post-build invariant check."""
    pass


def notify(message: str, category: Type[WindFieldWarning], source_logger: logging.Logger = logger) -> None:
    """
    Surface a recoverable condition to the caller.

    Args:
        message: Human-readable description of the condition
        category: Warning class describing the condition
        source_logger: Logger of the module reporting the condition
    """
    source_logger.warning(message)
    warnings.warn(message, category, stacklevel=3)
