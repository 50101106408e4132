"""
Tests for freefall kinematics and drift estimation.
"""

import math
import pytest

from core.freefall import (
    FreefallCalculator,
    FreefallParams,
    freefall_time_seconds,
    mph_to_fps,
    fps_to_mph,
)
from core.validation import ValidationError
from core.wind import WindField, OutOfRangeError

# Terminal velocity of 120 mph is 176 ft/s
TERMINAL_FPS = 176.0


@pytest.fixture
def calculator():
    """Calculator for a 12000ft exit and 3500ft deployment with the example winds."""
    calc = FreefallCalculator(12000, 3500)
    calc.add_wind(12000, 25, 0)
    calc.add_wind(9000, 25, 90)
    calc.add_wind(6000, 25, 180)
    calc.add_wind(3000, 25, 270)
    return calc


class TestUnitConversions:
    """Tests for speed conversions."""

    def test_mph_to_fps(self):
        """45 mph is 66 ft/s."""
        assert mph_to_fps(45) == pytest.approx(66)

    def test_fps_to_mph(self):
        """66 ft/s is 45 mph."""
        assert fps_to_mph(66) == pytest.approx(45)


class TestFreefallTime:
    """Tests for the two-phase freefall time model."""

    def test_long_freefall(self):
        """12 seconds for the first 1000ft, then terminal velocity."""
        expected = 12 + 7500 / TERMINAL_FPS
        assert freefall_time_seconds(12000, 3500) == pytest.approx(expected)

    def test_short_freefall_is_prorated(self):
        """Drops shorter than the acceleration phase take a share of its time."""
        assert freefall_time_seconds(2500, 2000) == pytest.approx(6)

    def test_continuous_at_phase_boundary(self):
        """Exactly one acceleration phase takes exactly its time."""
        assert freefall_time_seconds(3000, 2000) == pytest.approx(12)
        assert freefall_time_seconds(3000.001, 2000) == pytest.approx(12, abs=1e-3)

    def test_custom_terminal_velocity(self):
        """A faster terminal velocity shortens freefall."""
        params = FreefallParams(terminal_velocity_mph=150)
        expected = 12 + 7500 / mph_to_fps(150)
        assert freefall_time_seconds(12000, 3500, params) == pytest.approx(expected)

    def test_params_to_dict(self):
        """Parameters export every field."""
        params = FreefallParams()
        assert params.to_dict()['terminal_velocity_mph'] == 120
        assert set(params.to_dict()) == {
            'min_exit_altitude', 'min_deployment_altitude', 'terminal_velocity_mph',
            'acceleration_phase_feet', 'acceleration_phase_seconds'
        }


class TestCalculatorValidation:
    """Tests for altitude checks when creating a calculator."""

    def test_exit_below_minimum(self):
        """Exit altitude must be at least 2000ft."""
        with pytest.raises(ValidationError, match="Exit altitude"):
            FreefallCalculator(1500, 1000)

    def test_deployment_below_minimum(self):
        """Deployment altitude must be at least 1000ft."""
        with pytest.raises(ValidationError, match="Deployment altitude"):
            FreefallCalculator(12000, 500)

    def test_deployment_above_exit(self):
        """The jumper must deploy below the exit altitude."""
        with pytest.raises(ValidationError):
            FreefallCalculator(5000, 5000)

    def test_custom_minimums(self):
        """Minimum altitudes come from the parameters."""
        params = FreefallParams(min_exit_altitude=1000, min_deployment_altitude=500)
        calc = FreefallCalculator(1500, 600, params=params)
        assert calc.exit_altitude == 1500

    def test_existing_wind_field(self):
        """A calculator can share a prepared wind field."""
        winds = WindField([3000, 12000], [10, 10], [90, 90])
        calc = FreefallCalculator(12000, 3500, winds=winds)
        assert calc.winds is winds


class TestDrift:
    """Tests for horizontal drift."""

    def test_uniform_wind_drift(self):
        """Drift is wind speed times freefall time, along the wind heading."""
        calc = FreefallCalculator(12000, 3500, winds=WindField([3000, 12000], [20, 20], [90, 90]))
        seconds = calc.freefall_time_seconds()
        expected = mph_to_fps(20) * seconds

        assert calc.horizontal_distance_feet() == pytest.approx(expected)

        estimate = calc.drift()
        assert estimate.range_wind_speed == pytest.approx(20)
        assert estimate.range_wind_heading == pytest.approx(90)
        assert estimate.east_displacement_feet == pytest.approx(expected)
        assert estimate.north_displacement_feet == pytest.approx(0, abs=1e-6)
        assert estimate.horizontal_distance_miles == pytest.approx(expected / 5280)

    def test_example_jump(self, calculator):
        """The example winds give a finite drift and full counts."""
        estimate = calculator.drift()

        assert math.isfinite(estimate.horizontal_distance_feet)
        assert estimate.horizontal_distance_feet >= 0
        assert estimate.overall_wind_speed == pytest.approx(0, abs=1e-9)
        assert estimate.measured_samples == 4
        assert estimate.interpolated_samples == 9001
        assert estimate.freefall_time_seconds == pytest.approx(12 + 7500 / TERMINAL_FPS)

    def test_displacement_matches_distance(self, calculator):
        """East and north displacement recombine into the horizontal distance."""
        estimate = calculator.drift()
        combined = math.hypot(estimate.east_displacement_feet, estimate.north_displacement_feet)
        assert combined == pytest.approx(estimate.horizontal_distance_feet)

    def test_rounded(self, calculator):
        """Rounded output keeps integers and rounds floats."""
        rounded = calculator.drift().rounded(2)
        assert rounded['measured_samples'] == 4
        assert rounded['freefall_time_seconds'] == round(12 + 7500 / TERMINAL_FPS, 2)

    def test_exit_above_winds_raises(self):
        """Winds must reach the exit altitude."""
        calc = FreefallCalculator(13500, 5000, winds=WindField([3000, 12000], [20, 20], [90, 90]))
        with pytest.raises(OutOfRangeError):
            calc.drift()
