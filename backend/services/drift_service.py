"""
Freefall drift service.

This module provides business logic for turning a table of winds aloft into a
freefall drift estimate or an interpolated wind table, used by the API backend.
"""

import pandas as pd
import logging
from dataclasses import dataclass, field
from typing import Optional

from core.freefall import FreefallCalculator, FreefallParams
from core.models.drift import DriftEstimate
from core.validation import ValidationError, validate_winds_dataframe
from core.wind import WindField
from config.settings import (
    DEFAULT_EXIT_ALTITUDE,
    DEFAULT_DEPLOYMENT_ALTITUDE,
    WindConfig
)

logger = logging.getLogger(__name__)


@dataclass
class DriftAnalysisParams:
    """Parameters for drift analysis."""
    exit_altitude: float = DEFAULT_EXIT_ALTITUDE
    deployment_altitude: float = DEFAULT_DEPLOYMENT_ALTITUDE
    freefall: FreefallParams = field(default_factory=FreefallParams)


class DriftService:
    """
    Service for freefall drift calculations.

    This class centralizes the business logic for building wind fields from
    user input and estimating drift from them.
    """

    @staticmethod
    def build_wind_field(winds: pd.DataFrame) -> WindField:
        """
        Build a wind field from a table of winds.

        Args:
            winds: DataFrame with altitude, speed and heading columns

        Returns:
            WindField holding every complete row

        Raises:
            ValidationError: If the table is unusable or spans too many feet
                to interpolate at the default resolution
        """
        cleaned = validate_winds_dataframe(
            winds,
            max_altitude=WindConfig.MAX_ALTITUDE,
            max_span=WindConfig.MAX_INTERPOLATED_SAMPLES * WindConfig.FEET_PER_STEP
        )
        return WindField(
            cleaned['altitude'].tolist(),
            cleaned['speed'].tolist(),
            cleaned['heading'].tolist()
        )

    def estimate_drift(
        self,
        winds: pd.DataFrame,
        params: Optional[DriftAnalysisParams] = None
    ) -> DriftEstimate:
        """
        Estimate horizontal drift in freefall.

        Args:
            winds: DataFrame with altitude, speed (mph) and heading columns
            params: Parameters for drift analysis, or None to use defaults

        Returns:
            DriftEstimate: Wind, freefall time and displacement

        Raises:
            ValidationError: If the winds or altitudes are invalid
            WindFieldError: If the winds do not cover the jump
        """
        if params is None:
            params = DriftAnalysisParams()

        calculator = FreefallCalculator(
            params.exit_altitude,
            params.deployment_altitude,
            winds=self.build_wind_field(winds),
            params=params.freefall
        )
        logger.info(
            f"Estimating drift for {len(calculator.winds)} winds between "
            f"{calculator.winds.min_altitude():g} and {calculator.winds.max_altitude():g} ft"
        )
        return calculator.drift()

    def interpolate_winds(self, winds: pd.DataFrame, steps: Optional[float] = None) -> pd.DataFrame:
        """
        Interpolate winds between the measured altitudes.

        Args:
            winds: DataFrame with altitude, speed and heading columns
            steps: Steps across the measured altitude range, or None for one
                sample per foot

        Returns:
            DataFrame of interpolated winds, ascending by altitude

        Raises:
            ValidationError: If the winds are invalid or ``steps`` is too large
        """
        if steps is not None and steps > WindConfig.MAX_INTERPOLATED_SAMPLES:
            raise ValidationError(
                f"Interpolation steps {steps:g} exceed the maximum of {WindConfig.MAX_INTERPOLATED_SAMPLES}"
            )

        wind_field = self.build_wind_field(winds)
        if steps is None:
            span = wind_field.max_altitude() - wind_field.min_altitude()
            steps = span / WindConfig.FEET_PER_STEP
        return wind_field.interpolate(steps)


def get_drift_service() -> DriftService:
    """
    Get a DriftService instance.

    Returns:
        DriftService instance
    """
    return DriftService()
