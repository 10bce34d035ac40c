"""
Webhook API Server entry point.
Starts the FastAPI server that receives water test readings (POST /webhook)
and lists them (GET /readings, SQLite backend only).

Usage:
    READINGS_DB=/var/lib/pool/readings.db python3 api_server.py

Or with uvicorn:
    uvicorn pool_readings.server.app:build_app --factory --host 0.0.0.0 --port 8080
"""
from dotenv import load_dotenv
load_dotenv()

import sys
import uvicorn

from pool_readings.config import (
    logger,
    setup_logging,
    ConfigError,
    API_HOST,
    API_PORT,
    DEBUG,
)
from pool_readings.server.app import build_app
from pool_readings.storage import StorageError


def main():
    setup_logging()
    logger.info(f"Webhook server starting on {API_HOST}:{API_PORT}")

    try:
        app = build_app()
    except (ConfigError, StorageError) as e:
        logger.critical(f"Failed to start webhook server: {e}")
        sys.exit(1)

    if DEBUG:
        # Reload needs an import string, so the worker rebuilds the app from the environment
        app.state.backend.close()
        uvicorn.run(
            "pool_readings.server.app:build_app",
            factory=True,
            host=API_HOST,
            port=API_PORT,
            reload=True
        )
        return

    uvicorn.run(
        app,
        host=API_HOST,
        port=API_PORT,
        reload=False
    )


if __name__ == "__main__":
    main()
