#!/usr/bin/env python3
"""
Run the FastAPI backend server.

Usage:
    python run_api.py
"""

import uvicorn

from config.settings import ApiConfig

if __name__ == "__main__":
    print("Starting Freefall Drift API server...")
    print(f"API will be available at: http://localhost:{ApiConfig.PORT}")
    print(f"Documentation at: http://localhost:{ApiConfig.PORT}/docs")
    print("Press CTRL+C to stop\n")

    # When using reload=True, we need to pass the app as a string import path
    # instead of the actual app object
    uvicorn.run(
        "api.main:app",
        host=ApiConfig.HOST,
        port=ApiConfig.PORT,
        reload=True  # Enable auto-reload during development
    )
