"""
Wind field module.

This module stores winds aloft measured at discrete altitudes, averages them
as vectors, and interpolates them between the measured altitudes.
"""

from .exceptions import (
    WindFieldError,
    EmptyInputError,
    InsufficientSamplesError,
    InvalidRangeError,
    OutOfRangeError,
    NotInterpolatedError,
    WindFieldWarning,
    DuplicateAltitudeWarning,
    LengthMismatchWarning,
    TableConsistencyWarning,
)
from .vectors import point_to_heading_degrees, circular_mean_wind
from .field import WindField

__all__ = [
    'WindField',
    'point_to_heading_degrees',
    'circular_mean_wind',
    'WindFieldError',
    'EmptyInputError',
    'InsufficientSamplesError',
    'InvalidRangeError',
    'OutOfRangeError',
    'NotInterpolatedError',
    'WindFieldWarning',
    'DuplicateAltitudeWarning',
    'LengthMismatchWarning',
    'TableConsistencyWarning',
]
