"""
Wind sample data models.

This module defines the data structure for a wind observation at one altitude.
"""

from dataclasses import dataclass
from typing import Iterable, Dict, Any
import pandas as pd

WIND_SAMPLE_COLUMNS = ['altitude', 'speed', 'heading']


@dataclass(frozen=True)
class WindSample:
    """
    Represents a wind observation.

    Samples are either measured (supplied by the jumper, e.g. from a winds
    aloft forecast) or interpolated between two measured altitudes.
    """
    altitude: float  # Feet above ground
    speed: float  # Miles per hour
    heading: float  # Compass degrees, 0 = north, clockwise

    def to_dict(self) -> Dict[str, Any]:
        """Convert sample to dictionary for DataFrame creation."""
        return {
            'altitude': self.altitude,
            'speed': self.speed,
            'heading': self.heading
        }


def samples_to_dataframe(samples: Iterable[WindSample]) -> pd.DataFrame:
    """
    Convert wind samples to a pandas DataFrame.

    Args:
        samples: WindSample objects

    Returns:
        pandas DataFrame with altitude, speed and heading columns
    """
    data = [sample.to_dict() for sample in samples]
    return pd.DataFrame(data, columns=WIND_SAMPLE_COLUMNS)
