"""
Input validation utilities for core functions.

This module validates data at the boundary of the application (wind tables
and jump altitudes) before it reaches the wind field and freefall calculations.
"""

import pandas as pd
import numpy as np
import logging
from typing import Optional, TYPE_CHECKING

from core.constants import MIN_EXIT_ALTITUDE_FEET, MIN_DEPLOYMENT_ALTITUDE_FEET
from core.models.wind_sample import WIND_SAMPLE_COLUMNS

if TYPE_CHECKING:
    from core.freefall import FreefallParams

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Custom exception for validation errors."""
    pass


def validate_winds_dataframe(
    df: pd.DataFrame,
    context: str = "Winds",
    max_altitude: Optional[float] = None,
    max_span: Optional[float] = None
) -> pd.DataFrame:
    """
    Validate a winds DataFrame has required columns and usable data.

    Rows with a missing altitude, speed or heading (e.g. a blank row in an
    input form) are dropped rather than rejected.

    Args:
        df: DataFrame with altitude, speed and heading columns
        context: Context description for error messages
        max_altitude: Highest altitude accepted in feet, or None for no limit
        max_span: Largest distance between the lowest and highest wind in
            feet, or None for no limit

    Returns:
        Cleaned DataFrame with float columns

    Raises:
        ValidationError: If validation fails
    """
    if df is None:
        raise ValidationError(f"{context}: DataFrame is None")

    missing_columns = [col for col in WIND_SAMPLE_COLUMNS if col not in df.columns]
    if missing_columns:
        raise ValidationError(f"{context}: Missing required columns: {missing_columns}")

    try:
        cleaned = df[WIND_SAMPLE_COLUMNS].astype(float)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{context}: Non-numeric wind values: {e}") from e

    # Drop incomplete rows
    incomplete = cleaned.isna().any(axis=1)
    if incomplete.any():
        logger.info(f"{context}: Ignoring {incomplete.sum()} incomplete rows")
        cleaned = cleaned[~incomplete]

    if np.isinf(cleaned.to_numpy()).any():
        invalid_count = int(np.isinf(cleaned.to_numpy()).any(axis=1).sum())
        raise ValidationError(f"{context}: {invalid_count} rows with infinite values")

    if cleaned.empty:
        raise ValidationError(f"{context}: No complete wind rows provided")

    if max_altitude is not None and (cleaned['altitude'] > max_altitude).any():
        raise ValidationError(
            f"{context}: Altitude {cleaned['altitude'].max():g} is above the maximum of {max_altitude:g} feet"
        )

    span = cleaned['altitude'].max() - cleaned['altitude'].min()
    if max_span is not None and span > max_span:
        raise ValidationError(
            f"{context}: Altitudes span {span:g} feet, more than the maximum of {max_span:g} feet"
        )

    if (cleaned['speed'] < 0).any():
        negative_count = int((cleaned['speed'] < 0).sum())
        logger.warning(f"{context}: {negative_count} winds with negative speed")

    logger.debug(f"{context}: Validation passed for {len(cleaned)} winds")
    return cleaned.reset_index(drop=True)


def validate_jump_altitudes(
    exit_altitude: float,
    deployment_altitude: float,
    params: Optional["FreefallParams"] = None
) -> None:
    """
    Validate the exit and deployment altitudes of a jump.

    Args:
        exit_altitude: Altitude at which the jumper exits the aircraft (feet)
        deployment_altitude: Altitude at which the parachute is deployed (feet)
        params: Freefall parameters holding the minimum altitudes

    Raises:
        ValidationError: If an altitude is below its minimum or exit is not above deployment
    """
    min_exit = params.min_exit_altitude if params else MIN_EXIT_ALTITUDE_FEET
    min_deployment = params.min_deployment_altitude if params else MIN_DEPLOYMENT_ALTITUDE_FEET

    for name, value in (("Exit altitude", exit_altitude), ("Deployment altitude", deployment_altitude)):
        if value is None or not np.isfinite(value):
            raise ValidationError(f"{name}: Invalid value: {value}")

    if exit_altitude < min_exit:
        raise ValidationError(
            f"Exit altitude {exit_altitude:g} must be greater than minimum value of {min_exit:g}"
        )

    if deployment_altitude < min_deployment:
        raise ValidationError(
            f"Deployment altitude {deployment_altitude:g} must be greater than minimum value of {min_deployment:g}"
        )

    if deployment_altitude >= exit_altitude:
        raise ValidationError(
            f"Deployment altitude {deployment_altitude:g} must be below exit altitude {exit_altitude:g}"
        )
