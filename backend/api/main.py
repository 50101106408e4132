"""
FastAPI backend for Freefall Drift.

This provides REST API endpoints for freefall drift estimation and wind
interpolation, enabling framework-agnostic frontend development.
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import Dict, List, Optional, Any
import pandas as pd
import logging
import warnings

from config.settings import (
    APP_NAME, APP_VERSION, APP_DESCRIPTION, LOGGING_CONFIG, MAX_WIND_ROWS,
    FreefallConfig, WindConfig, ApiConfig
)
from core.freefall import FreefallParams
from core.models.wind_sample import WIND_SAMPLE_COLUMNS
from core.validation import ValidationError
from core.wind import WindFieldError, WindFieldWarning
from services.drift_service import DriftAnalysisParams, get_drift_service

# Initialize logging
logging.basicConfig(**LOGGING_CONFIG)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=f"{APP_NAME} API",
    description=APP_DESCRIPTION,
    version=APP_VERSION
)

# Add CORS middleware for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=ApiConfig.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


# Pydantic models for API requests/responses
class WindObservation(BaseModel):
    """One row of winds aloft; blank fields mark a row to be ignored."""
    altitude: Optional[float] = Field(None, description="Altitude in feet")
    speed: Optional[float] = Field(None, description="Wind speed in mph")
    heading: Optional[float] = Field(None, description="Wind heading in degrees")


class DriftRequest(BaseModel):
    exit_altitude: float = FreefallConfig.EXIT_ALTITUDE
    deployment_altitude: float = FreefallConfig.DEPLOYMENT_ALTITUDE
    terminal_velocity_mph: float = FreefallConfig.TERMINAL_VELOCITY_MPH
    winds: List[WindObservation]


class DriftResponse(BaseModel):
    exit_altitude: float
    deployment_altitude: float
    range_wind_speed: float
    range_wind_heading: float
    overall_wind_speed: float
    overall_wind_heading: float
    freefall_time_seconds: float
    horizontal_distance_feet: float
    east_displacement_feet: float
    north_displacement_feet: float
    measured_samples: int
    interpolated_samples: int
    warnings: List[str] = []


class InterpolationRequest(BaseModel):
    winds: List[WindObservation]
    steps: Optional[float] = Field(None, description="Steps across the measured range; default is one per foot")


class InterpolationResponse(BaseModel):
    points: List[Dict[str, float]]
    count: int
    warnings: List[str] = []


def winds_to_dataframe(winds: List[WindObservation]) -> pd.DataFrame:
    """Convert request winds to a DataFrame for the service layer."""
    if len(winds) > MAX_WIND_ROWS:
        raise ValidationError(f"Too many winds: {len(winds)} (max {MAX_WIND_ROWS})")
    rows = [{'altitude': w.altitude, 'speed': w.speed, 'heading': w.heading} for w in winds]
    return pd.DataFrame(rows, columns=WIND_SAMPLE_COLUMNS, dtype=float)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "message": f"{APP_NAME} API",
        "version": APP_VERSION,
        "endpoints": {
            "POST /api/drift": "Estimate horizontal drift in freefall",
            "POST /api/interpolate": "Interpolate winds between measured altitudes",
            "GET /api/config": "Default configuration values",
            "GET /api/health": "Health check endpoint"
        }
    }


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "freefall-drift-api"}


@app.get("/api/config")
async def get_config():
    """Get default configuration values."""
    return {
        "freefall": FreefallConfig.as_dict(),
        "wind": WindConfig.as_dict(),
        "api": ApiConfig.as_dict()
    }


@app.post("/api/drift", response_model=DriftResponse)
async def estimate_drift(request: DriftRequest):
    """
    Estimate horizontal drift during freefall.

    Args:
        request: Exit and deployment altitude plus the winds aloft

    Returns:
        Average wind over the freefall, freefall time and horizontal displacement
    """
    try:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", WindFieldWarning)

            params = DriftAnalysisParams(
                exit_altitude=request.exit_altitude,
                deployment_altitude=request.deployment_altitude,
                freefall=FreefallParams(terminal_velocity_mph=request.terminal_velocity_mph)
            )
            estimate = get_drift_service().estimate_drift(winds_to_dataframe(request.winds), params)

        return DriftResponse(
            **estimate.rounded(ApiConfig.ROUND_DIGITS),
            warnings=[str(w.message) for w in caught if issubclass(w.category, WindFieldWarning)]
        )

    except (ValidationError, WindFieldError) as e:
        logger.warning(f"Rejected drift request: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error estimating drift: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Error estimating drift: {str(e)}")


@app.post("/api/interpolate", response_model=InterpolationResponse)
async def interpolate_winds(request: InterpolationRequest):
    """
    Interpolate winds between the measured altitudes.

    Args:
        request: Winds aloft and an optional resolution

    Returns:
        Interpolated winds, ascending by altitude
    """
    try:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", WindFieldWarning)
            table = get_drift_service().interpolate_winds(winds_to_dataframe(request.winds), request.steps)

        points: List[Dict[str, Any]] = table.round(ApiConfig.ROUND_DIGITS).to_dict(orient='records')
        return InterpolationResponse(
            points=points,
            count=len(points),
            warnings=[str(w.message) for w in caught if issubclass(w.category, WindFieldWarning)]
        )

    except (ValidationError, WindFieldError) as e:
        logger.warning(f"Rejected interpolation request: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error interpolating winds: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Error interpolating winds: {str(e)}")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=ApiConfig.HOST, port=ApiConfig.PORT)
