"""
Constants for the Freefall Drift application.

This module contains all the mathematical, physical, and domain-specific
constants used throughout the codebase. Constants are grouped by their purpose
and documented with their units where applicable.
"""

# =============================================================================
# CONVERSION FACTORS
# =============================================================================

# Speed conversions
MPH_TO_FEET_PER_SECOND = 66.0 / 45.0  # 1 mph = 1.4667 ft/s
FEET_PER_SECOND_TO_MPH = 1 / MPH_TO_FEET_PER_SECOND

# Distance conversions
FEET_PER_MILE = 5280

# =============================================================================
# ANGLE CONSTANTS (all in degrees)
# =============================================================================

FULL_CIRCLE_DEGREES = 360
NORTH_HEADING_DEGREES = 0  # Heading reported for a calm (zero) wind vector

# =============================================================================
# ALTITUDE LIMITS (feet above ground)
# =============================================================================

MIN_EXIT_ALTITUDE_FEET = 2000  # Lowest exit altitude accepted
MIN_DEPLOYMENT_ALTITUDE_FEET = 1000  # Lowest parachute deployment altitude accepted
GROUND_ALTITUDE_FEET = 0  # No wind data exists below the ground

# =============================================================================
# FREEFALL TIMING
# =============================================================================

# Two-phase model: a fixed acceleration phase, then terminal velocity
TERMINAL_VELOCITY_MPH = 120
ACCELERATION_PHASE_FEET = 1000  # Altitude lost before reaching terminal velocity
ACCELERATION_PHASE_SECONDS = 12  # Time taken to fall the acceleration phase

# =============================================================================
# INTERPOLATION
# =============================================================================

FEET_PER_INTERPOLATION_STEP = 1  # Range queries resample at one foot
MIN_SAMPLES_FOR_INTERPOLATION = 2  # Need at least one altitude pair
STEP_ROUNDING_TOLERANCE = 1e-9  # Fraction of a step treated as float rounding error

# =============================================================================
# VALIDATION
# =============================================================================

assert abs(MPH_TO_FEET_PER_SECOND * FEET_PER_SECOND_TO_MPH - 1.0) < 1e-12, \
    "Speed conversion factors must be reciprocal"
