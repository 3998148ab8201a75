"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import os
import time
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from yapee.api.endpoints.auth import router as auth_router
from yapee.api.endpoints.catalogue import router as catalogue_router
from yapee.database.storage import create_local_storage
from yapee.error_handler import ErrorHandler
from yapee.utils.config_loader import AppConfig, environment_name, is_production, load_app_config, resolve_port

PRODUCTION = is_production()

# Setup logging
logging.basicConfig(level=logging.INFO if PRODUCTION else logging.DEBUG)
logger = logging.getLogger(__name__)

try:
    app_config = load_app_config()
except FileNotFoundError as e:
    logger.warning("%s; using built-in defaults", e)
    app_config = AppConfig()

logger.info("Environment: %s", environment_name())
logger.info("Is Production: %s", PRODUCTION)

# Initialize FastAPI app
app = FastAPI(
    title="Yapee Storefront API",
    description="Mock catalogue, category and login endpoints for the Yapee storefront",
    version=app_config.server.version,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=app_config.allowed_origins(PRODUCTION),
    allow_credentials=True,
    allow_methods=app_config.cors.methods,
    allow_headers=app_config.cors.headers,
)

# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================

# Real Redis when REDIS_URL is set, else the in-memory stub
local_storage = create_local_storage(client_id="api", namespace=app_config.storage.namespace)
error_handler = ErrorHandler(production=PRODUCTION)
started_at = time.monotonic()

app.include_router(catalogue_router, prefix="/api")
app.include_router(auth_router, prefix="/api")


def get_storage():
    """Dependency for the key-value storage"""
    return local_storage


# ============================================================================
# ERROR HANDLERS
# ============================================================================
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return JSONResponse(status_code=404, content=error_handler.not_found(request.method, request.url.path))
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=getattr(exc, "headers", None))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    body = error_handler.handle_exception(exc, context={"method": request.method, "url": str(request.url)})
    return JSONResponse(status_code=500, content=body)


# ============================================================================
# ENDPOINTS
# ============================================================================
@app.get("/health", tags=["Health"])
async def health_check():
    """Liveness check."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": environment_name(),
        "uptime": round(time.monotonic() - started_at, 3),
        "version": app_config.server.version,
    }


@app.get("/api/health", tags=["Health"])
async def api_health_check():
    """Readiness check (storage)."""
    return {
        "status": "API healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "mock",
        "cache": "connected" if get_storage().ping() else "disconnected",
    }


if __name__ == "__main__":
    import uvicorn

    port = resolve_port(app_config)
    logger.info("Yapee storefront API starting on port %s", port)
    uvicorn.run(app, host=os.getenv("HOST", app_config.server.host), port=port)
