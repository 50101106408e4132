"""
Wind field made of winds aloft measured at discrete altitudes.

The field averages measured winds as vectors and linearly interpolates them
between measured altitudes, so that the wind over part of a jump (e.g. from
deployment altitude up to exit altitude) can be averaged accurately.
"""

import logging
import math
import numpy as np
import pandas as pd
from typing import Dict, List, Optional, Sequence, Tuple

from core.constants import (
    GROUND_ALTITUDE_FEET, FEET_PER_INTERPOLATION_STEP, MIN_SAMPLES_FOR_INTERPOLATION,
    STEP_ROUNDING_TOLERANCE
)
from core.models.wind_sample import WindSample, samples_to_dataframe, WIND_SAMPLE_COLUMNS
from core.wind.exceptions import (
    EmptyInputError, InsufficientSamplesError, InvalidRangeError, OutOfRangeError,
    NotInterpolatedError, DuplicateAltitudeWarning, LengthMismatchWarning,
    TableConsistencyWarning, notify
)
from core.wind.vectors import (
    wind_components, components_to_wind, blend_components, circular_mean_wind
)

logger = logging.getLogger(__name__)


class WindField:
    """
    Measured winds at different altitudes plus their interpolated table.

    Measured winds are unique per altitude; recording a second wind at the same
    altitude replaces the first. The interpolated table is rebuilt lazily and
    only when the measured winds or the requested resolution changed.

    Not thread-safe: one owner adds winds and then queries them.
    """

    def __init__(
        self,
        altitudes: Optional[Sequence[float]] = None,
        speeds: Optional[Sequence[float]] = None,
        headings: Optional[Sequence[float]] = None
    ):
        """
        Create a wind field, optionally from parallel sequences.

        Args:
            altitudes: Altitudes of the winds in feet
            speeds: Wind speeds, one per altitude
            headings: Wind headings in degrees, one per altitude
        """
        self._measured: Dict[float, WindSample] = {}
        self._is_sorted = True

        # Interpolated winds are kept as parallel sequences indexed by altitude
        self.interpolated_altitudes: List[float] = []
        self.interpolated_speeds: List[float] = []
        self.interpolated_headings: List[float] = []
        self._interpolated_index: Dict[float, int] = {}
        self._table_key: Optional[Tuple[int, float, float, float]] = None
        self._table_altitudes: Optional[np.ndarray] = None

        if altitudes is None and speeds is None and headings is None:
            return

        altitudes = list(altitudes) if altitudes is not None else []
        speeds = list(speeds) if speeds is not None else []
        headings = list(headings) if headings is not None else []

        count = min(len(altitudes), len(speeds), len(headings))
        if not len(altitudes) == len(speeds) == len(headings):
            notify(
                f"Wind inputs differ in length (altitudes: {len(altitudes)}, "
                f"speeds: {len(speeds)}, headings: {len(headings)}). Using the first {count} winds.",
                LengthMismatchWarning,
                logger
            )

        for altitude, speed, heading in zip(altitudes[:count], speeds[:count], headings[:count]):
            self.add_measured_wind(altitude, speed, heading)

    def __len__(self) -> int:
        return len(self._measured)

    def __repr__(self) -> str:
        return f"WindField(measured={len(self._measured)}, interpolated={len(self.interpolated_altitudes)})"

    # =========================================================================
    # SAMPLE STORAGE
    # =========================================================================

    def add_measured_wind(self, altitude: float, speed: float, heading: float) -> None:
        """
        Record a wind at a certain altitude.

        Args:
            altitude: Altitude of the wind in feet
            speed: Wind speed
            heading: Wind heading in degrees
        """
        altitude, speed, heading = float(altitude), float(speed), float(heading)
        if altitude in self._measured:
            notify(
                f"Wind already recorded at altitude {altitude:g}. "
                f"Wind speed of {speed:g} will be used.",
                DuplicateAltitudeWarning,
                logger
            )
            del self._measured[altitude]

        self._measured[altitude] = WindSample(altitude, speed, heading)
        self._is_sorted = False
        self._invalidate_table()

    def _add_interpolated_wind(self, altitude: float, speed: float, heading: float) -> None:
        """Record an interpolated wind, replacing one already at ``altitude``."""
        index = self._interpolated_index.get(altitude)
        if index is not None:
            notify(
                f"Interpolated wind already recorded at altitude {altitude:g}. "
                f"Wind speed of {speed:g} will be used.",
                DuplicateAltitudeWarning,
                logger
            )
            self.interpolated_speeds[index] = speed
            self.interpolated_headings[index] = heading
            return

        self._interpolated_index[altitude] = len(self.interpolated_altitudes)
        self.interpolated_altitudes.append(altitude)
        self.interpolated_speeds.append(speed)
        self.interpolated_headings.append(heading)

    def _invalidate_table(self) -> None:
        self.interpolated_altitudes = []
        self.interpolated_speeds = []
        self.interpolated_headings = []
        self._interpolated_index = {}
        self._table_key = None
        self._table_altitudes = None

    def measured_wind_at(self, altitude: float) -> Optional[WindSample]:
        """Return the measured wind at exactly ``altitude``, if any."""
        return self._measured.get(float(altitude))

    @property
    def measured_samples(self) -> List[WindSample]:
        """Measured winds, ascending by altitude."""
        return self.sort_by_altitude_ascending()

    def to_dataframe(self) -> pd.DataFrame:
        """Measured winds as a DataFrame, ascending by altitude."""
        return samples_to_dataframe(self.sort_by_altitude_ascending())

    # =========================================================================
    # SORTING
    # =========================================================================

    def sort_by_altitude_ascending(self) -> List[WindSample]:
        """
        Sort the measured winds by altitude.

        The sort is skipped when nothing was added since the last one.

        Returns:
            List of measured winds, lowest altitude first
        """
        if not self._is_sorted:
            ordered = sorted(self._measured.values(), key=lambda sample: sample.altitude)
            self._measured = {sample.altitude: sample for sample in ordered}
            self._is_sorted = True
        return list(self._measured.values())

    def min_altitude(self) -> float:
        """
        Lowest measured altitude.

        Raises:
            EmptyInputError: If no winds have been recorded
        """
        samples = self.sort_by_altitude_ascending()
        if not samples:
            raise EmptyInputError("No winds recorded; add a wind before asking for its altitude range")
        return samples[0].altitude

    def max_altitude(self) -> float:
        """
        Highest measured altitude.

        Raises:
            EmptyInputError: If no winds have been recorded
        """
        samples = self.sort_by_altitude_ascending()
        if not samples:
            raise EmptyInputError("No winds recorded; add a wind before asking for its altitude range")
        return samples[-1].altitude

    # =========================================================================
    # AVERAGES OVER ALL MEASURED WINDS
    # =========================================================================

    def average_wind(self) -> Tuple[float, float]:
        """
        Vector average of every measured wind, each altitude weighted equally.

        Returns:
            tuple: (speed, heading in degrees)

        Raises:
            EmptyInputError: If no winds have been recorded
        """
        if not self._measured:
            raise EmptyInputError("No winds recorded; nothing to average")

        samples = list(self._measured.values())
        return circular_mean_wind(
            [sample.speed for sample in samples],
            [sample.heading for sample in samples]
        )

    def average_heading(self) -> float:
        """Average heading of the measured winds in degrees (0-360)."""
        return self.average_wind()[1]

    def average_wind_speed(self) -> float:
        """Wind speed averaged over the measured altitudes."""
        return self.average_wind()[0]

    # =========================================================================
    # INTERPOLATION
    # =========================================================================

    @property
    def is_interpolated(self) -> bool:
        """True when the interpolated table matches the measured winds."""
        return self._table_key is not None

    @property
    def interpolated_table(self) -> pd.DataFrame:
        """Interpolated winds as a DataFrame, ascending by altitude."""
        return pd.DataFrame({
            'altitude': self.interpolated_altitudes,
            'speed': self.interpolated_speeds,
            'heading': self.interpolated_headings,
        }, columns=WIND_SAMPLE_COLUMNS)

    def interpolate(self, steps: float) -> pd.DataFrame:
        """
        Linearly interpolate the winds between the measured altitudes.

        Each pair of neighbouring measured winds is blended as vectors, so a
        wind veering from 350 to 10 degrees passes through north rather than
        south.

        Args:
            steps: Number of steps across the measured altitude range. With a
                lowest measured altitude of 2000ft and a highest of 3000ft,
                1000 steps estimates the wind at every foot and 500 steps at
                every other foot.

        Returns:
            The interpolated table (see ``interpolated_table``)

        Raises:
            InvalidRangeError: If ``steps`` is not a positive finite number
            EmptyInputError: If no winds have been recorded
            InsufficientSamplesError: If fewer than two winds have been recorded
        """
        if not (math.isfinite(steps) and steps > 0):
            raise InvalidRangeError(f"Interpolation steps must be a positive number, got {steps}")

        samples = self.sort_by_altitude_ascending()
        if not samples:
            raise EmptyInputError("No winds recorded; nothing to interpolate")
        if len(samples) < MIN_SAMPLES_FOR_INTERPOLATION:
            raise InsufficientSamplesError(
                f"Interpolation needs at least {MIN_SAMPLES_FOR_INTERPOLATION} winds "
                f"at different altitudes, got {len(samples)}"
            )

        table_key = (len(samples), float(steps), samples[0].altitude, samples[-1].altitude)
        if table_key == self._table_key:
            logger.debug(f"Reusing interpolated table of {len(self.interpolated_altitudes)} winds")
            return self.interpolated_table

        self._invalidate_table()
        feet_per_step = (samples[-1].altitude - samples[0].altitude) / steps

        for lower, upper in zip(samples, samples[1:]):
            self._interpolate_pair(lower, upper, feet_per_step)

        # The loop only adds the lower wind of each pair
        highest = samples[-1]
        self._add_interpolated_wind(highest.altitude, highest.speed, highest.heading)

        self._check_table()
        self._table_altitudes = np.asarray(self.interpolated_altitudes, dtype=float)
        self._table_key = table_key

        logger.info(
            f"Interpolated {len(samples)} measured winds into {len(self.interpolated_altitudes)} "
            f"winds ({feet_per_step:g} ft per step)"
        )
        return self.interpolated_table

    def _interpolate_pair(self, lower: WindSample, upper: WindSample, feet_per_step: float) -> None:
        """Add ``lower`` and the blended winds strictly between ``lower`` and ``upper``."""
        steps_between = (upper.altitude - lower.altitude) / feet_per_step
        low = wind_components(lower.speed, lower.heading)
        high = wind_components(upper.speed, upper.heading)

        self._add_interpolated_wind(lower.altitude, lower.speed, lower.heading)

        # Steps within rounding error of the upper wind land on it
        upper_limit = upper.altitude - feet_per_step * STEP_ROUNDING_TOLERANCE

        for j in range(math.ceil(steps_between)):
            altitude = lower.altitude + (j + 1) * feet_per_step
            if altitude >= upper_limit:
                break
            # Step lands exactly on a wind that is already in the table
            if altitude in self._interpolated_index:
                continue

            east, north = blend_components(low, high, (j + 1) / steps_between)
            speed, heading = components_to_wind(east, north)
            self._add_interpolated_wind(altitude, speed, heading)

    def _check_table(self) -> None:
        """Warn when the interpolated sequences are out of step with each other."""
        altitude_count = len(self.interpolated_altitudes)
        if altitude_count != len(self.interpolated_speeds) or altitude_count != len(self.interpolated_headings):
            notify(
                f"Unequal number of interpolated altitudes ({altitude_count}), "
                f"speeds ({len(self.interpolated_speeds)}) and headings ({len(self.interpolated_headings)})",
                TableConsistencyWarning,
                logger
            )
        elif np.any(np.diff(self.interpolated_altitudes) <= 0):
            notify(
                "Interpolated altitudes are not strictly ascending",
                TableConsistencyWarning,
                logger
            )

    # =========================================================================
    # RANGE QUERIES
    # =========================================================================

    def average_wind_in_range(self, lo: float, hi: float) -> Tuple[float, float]:
        """
        Vector average of the interpolated winds between two altitudes.

        Interpolates at one sample per foot first if the table is missing or
        out of date. The wind at ``hi`` itself is not included.

        Args:
            lo: Low altitude of the range in feet (e.g. deployment altitude)
            hi: High altitude of the range in feet (e.g. exit altitude)

        Returns:
            tuple: (speed, heading in degrees)

        Raises:
            InvalidRangeError: If ``lo`` is not below ``hi``
            OutOfRangeError: If ``hi`` is above the highest measured wind or ``lo`` is below ground
            EmptyInputError: If no winds have been recorded
            InsufficientSamplesError: If fewer than two winds have been recorded
            NotInterpolatedError: If no interpolated table could be built
        """
        if not (math.isfinite(lo) and math.isfinite(hi)):
            raise InvalidRangeError(f"Altitude range must be finite, got {lo} to {hi}")
        if hi <= lo:
            raise InvalidRangeError(
                f"The low altitude ({lo:g} ft) is greater than or equal to the high altitude ({hi:g} ft)"
            )

        max_altitude = self.max_altitude()
        if max_altitude < hi:
            raise OutOfRangeError(
                f"No wind data available above {max_altitude:g} feet. "
                f"Wind information was requested at {hi:g} feet."
            )
        if lo < GROUND_ALTITUDE_FEET:
            raise OutOfRangeError(f"No wind data available below the ground; {lo:g} feet was requested.")

        span = max_altitude - self.min_altitude()
        self.interpolate(span / FEET_PER_INTERPOLATION_STEP)

        if not self.is_interpolated:
            raise NotInterpolatedError(
                "The altitude range needs to be interpolated before averaging a limited range"
            )

        lo_index, hi_index = self._range_indices(lo, hi)
        logger.debug(f"Averaging interpolated winds {lo_index}-{hi_index} for {lo:g}-{hi:g} ft")
        return circular_mean_wind(
            self.interpolated_speeds[lo_index:hi_index],
            self.interpolated_headings[lo_index:hi_index]
        )

    def _range_indices(self, lo: float, hi: float) -> Tuple[int, int]:
        """Table positions of ``lo`` and ``hi``, or of the first wind above them."""
        lo_index = int(np.searchsorted(self._table_altitudes, lo, side='left'))
        hi_index = int(np.searchsorted(self._table_altitudes, hi, side='left'))
        if hi_index <= lo_index:
            # Range falls between two table entries
            hi_index = lo_index + 1
        return lo_index, hi_index

    def average_windspeed_in_range(self, lo: float, hi: float) -> float:
        """Average wind speed between two altitudes. See ``average_wind_in_range``."""
        return self.average_wind_in_range(lo, hi)[0]

    def average_heading_in_range(self, lo: float, hi: float) -> float:
        """Average wind heading between two altitudes. See ``average_wind_in_range``."""
        return self.average_wind_in_range(lo, hi)[1]
