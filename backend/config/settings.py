"""
Application settings and configuration.

This module contains application-specific configuration and defaults.
For physical and algorithmic constants, see core.constants module.
"""

import logging
from typing import Dict, Any

# Import physical constants from core module
from core.constants import (
    MIN_EXIT_ALTITUDE_FEET,
    MIN_DEPLOYMENT_ALTITUDE_FEET,
    TERMINAL_VELOCITY_MPH,
    ACCELERATION_PHASE_FEET,
    ACCELERATION_PHASE_SECONDS,
    FEET_PER_INTERPOLATION_STEP
)

# App information
APP_NAME = "Freefall Drift"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = "Estimate a skydiver's horizontal drift in freefall from winds aloft"

# Jump defaults
DEFAULT_EXIT_ALTITUDE = 12000  # Feet
DEFAULT_DEPLOYMENT_ALTITUDE = 3500  # Feet

# Results are reported to the nearest hundredth
ROUND_DIGITS = 2

# Input form limits
MAX_WIND_ROWS = 50  # Maximum winds aloft accepted in one request
MAX_WIND_ALTITUDE = 40000  # Feet, above any altitude jumped from
MAX_INTERPOLATED_SAMPLES = 50000  # Largest interpolated table built for one request

# API configuration
API_HOST = "0.0.0.0"
API_PORT = 8000
CORS_ORIGINS = [
    "http://localhost:3000",  # Frontend dev server
    "http://localhost:3001",  # Frontend dev server (alt port)
]

# Logging configuration
LOGGING_CONFIG = {
    "level": logging.INFO,
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    "handlers": [
        logging.StreamHandler(),
    ]
}


# =============== Configuration Classes ===============
# These classes provide typed access to configuration sections

class FreefallConfig:
    """Configuration parameters for the freefall model."""
    EXIT_ALTITUDE = DEFAULT_EXIT_ALTITUDE
    DEPLOYMENT_ALTITUDE = DEFAULT_DEPLOYMENT_ALTITUDE
    MIN_EXIT_ALTITUDE = MIN_EXIT_ALTITUDE_FEET  # From core.constants
    MIN_DEPLOYMENT_ALTITUDE = MIN_DEPLOYMENT_ALTITUDE_FEET  # From core.constants
    TERMINAL_VELOCITY_MPH = TERMINAL_VELOCITY_MPH  # From core.constants
    ACCELERATION_PHASE_FEET = ACCELERATION_PHASE_FEET  # From core.constants
    ACCELERATION_PHASE_SECONDS = ACCELERATION_PHASE_SECONDS  # From core.constants

    @classmethod
    def as_dict(cls) -> Dict[str, Any]:
        """Get freefall configuration as a dictionary."""
        return {
            'exit_altitude': cls.EXIT_ALTITUDE,
            'deployment_altitude': cls.DEPLOYMENT_ALTITUDE,
            'min_exit_altitude': cls.MIN_EXIT_ALTITUDE,
            'min_deployment_altitude': cls.MIN_DEPLOYMENT_ALTITUDE,
            'terminal_velocity_mph': cls.TERMINAL_VELOCITY_MPH,
            'acceleration_phase_feet': cls.ACCELERATION_PHASE_FEET,
            'acceleration_phase_seconds': cls.ACCELERATION_PHASE_SECONDS,
        }


class WindConfig:
    """Configuration parameters for wind input and interpolation."""
    FEET_PER_STEP = FEET_PER_INTERPOLATION_STEP  # From core.constants
    MAX_ROWS = MAX_WIND_ROWS
    MAX_ALTITUDE = MAX_WIND_ALTITUDE
    MAX_INTERPOLATED_SAMPLES = MAX_INTERPOLATED_SAMPLES

    @classmethod
    def as_dict(cls) -> Dict[str, Any]:
        """Get wind configuration as a dictionary."""
        return {
            'feet_per_step': cls.FEET_PER_STEP,
            'max_rows': cls.MAX_ROWS,
            'max_altitude': cls.MAX_ALTITUDE,
            'max_interpolated_samples': cls.MAX_INTERPOLATED_SAMPLES,
        }


class ApiConfig:
    """Configuration parameters for the HTTP API."""
    HOST = API_HOST
    PORT = API_PORT
    CORS_ORIGINS = CORS_ORIGINS
    ROUND_DIGITS = ROUND_DIGITS

    @classmethod
    def as_dict(cls) -> Dict[str, Any]:
        """Get API configuration as a dictionary."""
        return {
            'host': cls.HOST,
            'port': cls.PORT,
            'cors_origins': list(cls.CORS_ORIGINS),
            'round_digits': cls.ROUND_DIGITS,
        }
