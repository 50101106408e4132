"""
Wind vector calculations.

Winds are measured as a speed and a compass heading. Averaging or blending
headings directly breaks at the 0/360 degree wraparound, so every calculation
here works on Cartesian components instead:

    east  = speed * sin(heading)
    north = speed * cos(heading)

Compass headings swap the unit circle axes, so converting back always passes
the north component as ``x`` and the east component as ``y``.
"""

import math
import numpy as np
from typing import Sequence, Tuple

from core.constants import FULL_CIRCLE_DEGREES, NORTH_HEADING_DEGREES


def wind_components(speed: float, heading: float) -> Tuple[float, float]:
    """
    Split a wind into its east and north components.

    Args:
        speed: Wind speed (any unit)
        heading: Compass heading in degrees, not necessarily normalized

    Returns:
        tuple: (east, north) in the unit of ``speed``
    """
    heading_rad = math.radians(heading)
    return speed * math.sin(heading_rad), speed * math.cos(heading_rad)


def point_to_heading_radians(x: float, y: float) -> float:
    """
    Convert a point into a compass heading in radians.

    Since we're using compass headings instead of the unit circle, ``x`` is the
    north component and ``y`` the east component.

    Args:
        x: North component
        y: East component

    Returns:
        float: Heading in radians, 0 for the zero vector
    """
    if x == 0 and y == 0:
        return math.radians(NORTH_HEADING_DEGREES)
    if x == 0:
        # Due east or due west, atan(y/x) is undefined
        return math.pi / 2 if y > 0 else 3 * math.pi / 2

    heading = math.atan(y / x)
    if x < 0:
        heading += math.pi
    elif y < 0:
        # atan lands in (-pi/2, 0) for this quadrant
        heading += 2 * math.pi
    return heading


def point_to_heading_degrees(x: float, y: float) -> float:
    """
    Convert a point into a compass heading in degrees.

    Args:
        x: North component
        y: East component

    Returns:
        float: Heading in [0, 360)
    """
    return math.degrees(point_to_heading_radians(x, y)) % FULL_CIRCLE_DEGREES


def components_to_wind(east: float, north: float) -> Tuple[float, float]:
    """
    Combine east and north components back into a wind.

    Returns:
        tuple: (speed, heading in degrees)
    """
    return math.hypot(east, north), point_to_heading_degrees(north, east)


def mean_wind_components(speeds: Sequence[float], headings: Sequence[float]) -> Tuple[float, float]:
    """
    Average winds as vectors.

    Args:
        speeds: Wind speeds
        headings: Compass headings in degrees, same length as ``speeds``

    Returns:
        tuple: (mean east component, mean north component)

    Raises:
        ValueError: If no winds are given or the lengths differ
    """
    speeds = np.asarray(speeds, dtype=float)
    headings_rad = np.radians(np.asarray(headings, dtype=float))

    if speeds.size == 0:
        raise ValueError("Cannot average an empty set of winds")
    if speeds.shape != headings_rad.shape:
        raise ValueError(f"Got {speeds.size} speeds but {headings_rad.size} headings")

    east = float(np.mean(speeds * np.sin(headings_rad)))
    north = float(np.mean(speeds * np.cos(headings_rad)))
    return east, north


def circular_mean_wind(speeds: Sequence[float], headings: Sequence[float]) -> Tuple[float, float]:
    """
    Circular mean of a set of winds.

    Opposing winds cancel out: four equal winds from 0, 90, 180 and 270
    degrees average to a calm.

    Returns:
        tuple: (mean speed, mean heading in degrees)
    """
    east, north = mean_wind_components(speeds, headings)
    return components_to_wind(east, north)


def blend_components(
    low: Tuple[float, float],
    high: Tuple[float, float],
    fraction: float
) -> Tuple[float, float]:
    """Linearly blend two (east, north) vectors; ``fraction`` 0 is ``low``, 1 is ``high``."""
    return (
        (1 - fraction) * low[0] + fraction * high[0],
        (1 - fraction) * low[1] + fraction * high[1],
    )
