"""
Drift estimate data model.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any

from core.constants import FEET_PER_MILE


@dataclass
class DriftEstimate:
    """
    Horizontal drift of a jumper during freefall.

    The range wind is averaged between deployment and exit altitude and drives
    the displacement. The overall wind averages every measured altitude
    equally and is reported for reference.
    """
    exit_altitude: float  # Feet
    deployment_altitude: float  # Feet

    range_wind_speed: float  # mph, averaged from deployment to exit
    range_wind_heading: float  # Degrees (0-360)
    overall_wind_speed: float  # mph, averaged over all measured altitudes
    overall_wind_heading: float  # Degrees (0-360)

    freefall_time_seconds: float
    horizontal_distance_feet: float
    east_displacement_feet: float
    north_displacement_feet: float

    measured_samples: int
    interpolated_samples: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert estimate to a dictionary."""
        return asdict(self)

    def rounded(self, digits: int) -> Dict[str, Any]:
        """Dictionary with every float rounded to ``digits`` places."""
        return {
            key: round(value, digits) if isinstance(value, float) else value
            for key, value in self.to_dict().items()
        }

    @property
    def horizontal_distance_miles(self) -> float:
        """Horizontal distance in statute miles."""
        return self.horizontal_distance_feet / FEET_PER_MILE
