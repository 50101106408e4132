"""
Services package.

Provides business logic layer between API and core algorithms.

Modules:
    drift_service: Freefall drift estimation and wind interpolation
"""

from services.drift_service import DriftService, DriftAnalysisParams, get_drift_service

__all__ = [
    'DriftService',
    'DriftAnalysisParams',
    'get_drift_service',
]
