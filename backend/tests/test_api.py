"""
Tests for the FastAPI backend.
"""

import pytest
from fastapi.testclient import TestClient

from api.main import app
from config.settings import MAX_WIND_ROWS, MAX_INTERPOLATED_SAMPLES

EXAMPLE_WINDS = [
    {"altitude": 12000, "speed": 25, "heading": 0},
    {"altitude": 9000, "speed": 25, "heading": 90},
    {"altitude": 6000, "speed": 25, "heading": 180},
    {"altitude": 3000, "speed": 25, "heading": 270},
]


@pytest.fixture
def client():
    return TestClient(app)


class TestInfoEndpoints:
    """Tests for the informational endpoints."""

    def test_health(self, client):
        """Health check reports healthy."""
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, client):
        """Root lists the endpoints."""
        response = client.get("/")
        assert response.status_code == 200
        assert "POST /api/drift" in response.json()["endpoints"]

    def test_config(self, client):
        """Config exposes the freefall defaults."""
        data = client.get("/api/config").json()
        assert data["freefall"]["exit_altitude"] == 12000
        assert data["freefall"]["terminal_velocity_mph"] == 120
        assert data["wind"]["feet_per_step"] == 1
        assert data["wind"]["max_interpolated_samples"] == MAX_INTERPOLATED_SAMPLES
        assert data["api"]["round_digits"] == 2


class TestDriftEndpoint:
    """Tests for POST /api/drift."""

    def test_example_jump(self, client):
        """A blank form row is ignored and results are rounded."""
        response = client.post("/api/drift", json={
            "exit_altitude": 12000,
            "deployment_altitude": 3500,
            "winds": EXAMPLE_WINDS + [{"altitude": None, "speed": None, "heading": None}],
        })
        assert response.status_code == 200
        data = response.json()
        assert data["measured_samples"] == 4
        assert data["interpolated_samples"] == 9001
        assert data["freefall_time_seconds"] == pytest.approx(54.61)
        assert data["horizontal_distance_feet"] >= 0
        assert data["warnings"] == []

    def test_uniform_wind(self, client):
        """Uniform wind drifts the jumper along its heading."""
        response = client.post("/api/drift", json={
            "winds": [
                {"altitude": 2000, "speed": 30, "heading": 180},
                {"altitude": 14000, "speed": 30, "heading": 180},
            ],
        })
        assert response.status_code == 200
        data = response.json()
        assert data["range_wind_speed"] == pytest.approx(30)
        assert data["range_wind_heading"] == pytest.approx(180)
        assert data["north_displacement_feet"] < 0

    def test_duplicate_altitude_reported(self, client):
        """Overwritten winds are reported back as warnings."""
        response = client.post("/api/drift", json={
            "winds": EXAMPLE_WINDS + [{"altitude": 9000, "speed": 40, "heading": 45}],
        })
        assert response.status_code == 200
        data = response.json()
        assert data["measured_samples"] == 4
        assert any("9000" in warning for warning in data["warnings"])

    def test_exit_above_winds(self, client):
        """Missing winds at exit altitude is a client error."""
        response = client.post("/api/drift", json={
            "exit_altitude": 13500,
            "winds": EXAMPLE_WINDS,
        })
        assert response.status_code == 400
        assert "above 12000 feet" in response.json()["detail"]

    def test_exit_too_low(self, client):
        """Altitude validation is a client error."""
        response = client.post("/api/drift", json={
            "exit_altitude": 1500,
            "deployment_altitude": 1000,
            "winds": EXAMPLE_WINDS,
        })
        assert response.status_code == 400

    def test_no_winds(self, client):
        """An empty wind table is a client error."""
        response = client.post("/api/drift", json={"winds": []})
        assert response.status_code == 400

    def test_too_many_winds(self, client):
        """Requests are limited in size."""
        winds = [{"altitude": 1000 + i, "speed": 10, "heading": 90} for i in range(MAX_WIND_ROWS + 1)]
        response = client.post("/api/drift", json={"winds": winds})
        assert response.status_code == 400

    def test_altitude_span_too_large(self, client):
        """Winds spread over too many feet to interpolate are rejected."""
        response = client.post("/api/drift", json={
            "winds": [
                {"altitude": -1e9, "speed": 10, "heading": 90},
                {"altitude": 14000, "speed": 10, "heading": 90},
            ],
        })
        assert response.status_code == 400
        assert "span" in response.json()["detail"]


class TestInterpolateEndpoint:
    """Tests for POST /api/interpolate."""

    def test_default_resolution(self, client):
        """Without steps the winds are interpolated every foot."""
        response = client.post("/api/interpolate", json={
            "winds": [
                {"altitude": 1000, "speed": 10, "heading": 90},
                {"altitude": 1010, "speed": 20, "heading": 90},
            ],
        })
        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 11
        assert data["points"][5]["altitude"] == 1005
        assert data["points"][5]["speed"] == pytest.approx(15)

    def test_explicit_steps(self, client):
        """Steps set the resolution."""
        response = client.post("/api/interpolate", json={"winds": EXAMPLE_WINDS, "steps": 3})
        assert response.status_code == 200
        assert [p["altitude"] for p in response.json()["points"]] == [3000, 6000, 9000, 12000]

    def test_single_wind(self, client):
        """One wind cannot be interpolated."""
        response = client.post("/api/interpolate", json={"winds": EXAMPLE_WINDS[:1]})
        assert response.status_code == 400

    def test_too_many_steps(self, client):
        """The interpolated table size is limited."""
        response = client.post("/api/interpolate", json={
            "winds": [
                {"altitude": 0, "speed": 10, "heading": 90},
                {"altitude": 1, "speed": 20, "heading": 90},
            ],
            "steps": 2_000_000,
        })
        assert response.status_code == 400
        assert "steps" in response.json()["detail"]

    def test_altitude_too_high(self, client):
        """Winds far above any jump altitude are rejected."""
        response = client.post("/api/interpolate", json={
            "winds": [
                {"altitude": 0, "speed": 10, "heading": 90},
                {"altitude": 1e9, "speed": 20, "heading": 90},
            ],
            "steps": 10,
        })
        assert response.status_code == 400
        assert "maximum" in response.json()["detail"]
