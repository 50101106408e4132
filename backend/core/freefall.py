"""
Freefall kinematics.

Freefall time uses a crude two-phase model: the first part of the drop takes a
fixed time while the jumper accelerates, and the rest is fallen at terminal
velocity. Drag and the real acceleration profile are not modelled.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from core.constants import (
    MPH_TO_FEET_PER_SECOND, FEET_PER_SECOND_TO_MPH, MIN_EXIT_ALTITUDE_FEET,
    MIN_DEPLOYMENT_ALTITUDE_FEET, TERMINAL_VELOCITY_MPH, ACCELERATION_PHASE_FEET,
    ACCELERATION_PHASE_SECONDS
)
from core.models.drift import DriftEstimate
from core.validation import validate_jump_altitudes
from core.wind import WindField
from core.wind.vectors import wind_components

logger = logging.getLogger(__name__)


@dataclass
class FreefallParams:
    """Physical assumptions of the freefall model."""
    min_exit_altitude: float = MIN_EXIT_ALTITUDE_FEET
    min_deployment_altitude: float = MIN_DEPLOYMENT_ALTITUDE_FEET
    terminal_velocity_mph: float = TERMINAL_VELOCITY_MPH
    acceleration_phase_feet: float = ACCELERATION_PHASE_FEET
    acceleration_phase_seconds: float = ACCELERATION_PHASE_SECONDS

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for function calls."""
        return {
            'min_exit_altitude': self.min_exit_altitude,
            'min_deployment_altitude': self.min_deployment_altitude,
            'terminal_velocity_mph': self.terminal_velocity_mph,
            'acceleration_phase_feet': self.acceleration_phase_feet,
            'acceleration_phase_seconds': self.acceleration_phase_seconds
        }


def mph_to_fps(speed_mph: float) -> float:
    """Convert miles per hour to feet per second."""
    return speed_mph * MPH_TO_FEET_PER_SECOND


def fps_to_mph(speed_fps: float) -> float:
    """Convert feet per second to miles per hour."""
    return speed_fps * FEET_PER_SECOND_TO_MPH


def freefall_time_seconds(
    exit_altitude: float,
    deployment_altitude: float,
    params: Optional[FreefallParams] = None
) -> float:
    """
    Approximate time spent in freefall.

    Args:
        exit_altitude: Exit altitude in feet
        deployment_altitude: Deployment altitude in feet
        params: Freefall parameters, or None to use defaults

    Returns:
        float: Seconds in freefall
    """
    if params is None:
        params = FreefallParams()

    drop = exit_altitude - deployment_altitude
    if drop > params.acceleration_phase_feet:
        feet_at_terminal = drop - params.acceleration_phase_feet
        return params.acceleration_phase_seconds + feet_at_terminal / mph_to_fps(params.terminal_velocity_mph)

    # Short drops never reach terminal velocity; pro-rate the acceleration phase
    return params.acceleration_phase_seconds * drop / params.acceleration_phase_feet


class FreefallCalculator:
    """
    Calculates freefall time, average wind and horizontal drift for a jump.

    Example:
        calculator = FreefallCalculator(12000, 3500)
        calculator.add_wind(12000, 25, 0)
        calculator.add_wind(3000, 25, 270)
        calculator.horizontal_distance_feet()
    """

    def __init__(
        self,
        exit_altitude: float,
        deployment_altitude: float,
        winds: Optional[WindField] = None,
        params: Optional[FreefallParams] = None
    ):
        """
        Args:
            exit_altitude: The altitude that the jumper exits the plane (feet)
            deployment_altitude: The altitude that the jumper deploys the parachute (feet)
            winds: Measured winds, or None to start with no winds
            params: Freefall parameters, or None to use defaults

        Raises:
            ValidationError: If the altitudes are out of bounds
        """
        self.params = params if params is not None else FreefallParams()
        validate_jump_altitudes(exit_altitude, deployment_altitude, self.params)

        self.exit_altitude = float(exit_altitude)
        self.deployment_altitude = float(deployment_altitude)
        self.winds = winds if winds is not None else WindField()

    def add_wind(self, altitude: float, speed: float, heading: float) -> None:
        """Record a measured wind (speed in mph)."""
        self.winds.add_measured_wind(altitude, speed, heading)

    def freefall_time_seconds(self) -> float:
        """Seconds from exit to deployment."""
        return freefall_time_seconds(self.exit_altitude, self.deployment_altitude, self.params)

    def average_wind(self) -> Tuple[float, float]:
        """
        Wind averaged between deployment and exit altitude.

        Returns:
            tuple: (speed in mph, heading in degrees)
        """
        return self.winds.average_wind_in_range(self.deployment_altitude, self.exit_altitude)

    def horizontal_distance_feet(self) -> float:
        """Distance traveled horizontally during freefall in feet."""
        speed_mph, _ = self.average_wind()
        return mph_to_fps(speed_mph) * self.freefall_time_seconds()

    def drift(self) -> DriftEstimate:
        """
        Full drift estimate for the jump.

        Returns:
            DriftEstimate with wind, time and displacement
        """
        range_speed, range_heading = self.average_wind()
        overall_speed, overall_heading = self.winds.average_wind()
        seconds = self.freefall_time_seconds()

        distance = mph_to_fps(range_speed) * seconds
        east, north = wind_components(distance, range_heading)

        logger.info(
            f"Freefall {self.exit_altitude:g}-{self.deployment_altitude:g} ft: "
            f"{seconds:.1f}s, wind {range_speed:.1f} mph at {range_heading:.1f}°, drift {distance:.0f} ft"
        )

        return DriftEstimate(
            exit_altitude=self.exit_altitude,
            deployment_altitude=self.deployment_altitude,
            range_wind_speed=range_speed,
            range_wind_heading=range_heading,
            overall_wind_speed=overall_speed,
            overall_wind_heading=overall_heading,
            freefall_time_seconds=seconds,
            horizontal_distance_feet=distance,
            east_displacement_feet=east,
            north_displacement_feet=north,
            measured_samples=len(self.winds),
            interpolated_samples=len(self.winds.interpolated_altitudes)
        )
