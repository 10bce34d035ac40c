"""
FastAPI application for receiving and listing water test readings.

Entry point: api_server.py

Or with uvicorn:
    uvicorn pool_readings.server.app:build_app --factory --host 0.0.0.0 --port 8080
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request, Response

from pool_readings.config import logger, CORS_HEADERS, STORAGE_BACKEND
from pool_readings.server import readings, webhook
from pool_readings.storage import StorageBackend, create_backend


def create_app(backend: StorageBackend) -> FastAPI:
    """Assemble the app around an already-initialized storage backend"""
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        backend.close()

    app = FastAPI(
        title="Pool Readings Webhook",
        version="1.0.0",
        description="Receive water test readings from webhooks and store them",
        lifespan=lifespan
    )
    app.state.backend = backend

    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        # Preflight requests never reach the routes
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=CORS_HEADERS)

        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    @app.get("/health")
    def health():
        return {
            "status": "ok",
            "backend": backend.name,
            "time": datetime.now(timezone.utc).isoformat(),
        }

    app.include_router(webhook.router)
    if backend.supports_listing:
        app.include_router(readings.router)

    return app


def build_app() -> FastAPI:
    """Create, initialize, and wire up the backend named in the environment"""
    backend = create_backend()
    backend.initialize()
    logger.info(f"Using {backend.name} storage backend (STORAGE_BACKEND={STORAGE_BACKEND})")
    return create_app(backend)
