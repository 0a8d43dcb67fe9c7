"""Bangalore Traffic Router API - FastAPI application entry point.

Simulates road congestion across Bangalore and recommends the fastest of
several fixed route alternatives between two known locations.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import Scope

from app.api.v1 import locations, routes, traffic
from app.config import get_settings
from app.core.exceptions import TrafficRouteException
from app.core.logging_config import get_logger, setup_logging
from app.core.middleware import (
    MetricsMiddleware,
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
)
from app.core.rate_limit import limiter

logger = get_logger(__name__)


class ClientStaticFiles(StaticFiles):
    """Static files for the map client, answering unknown paths with index.html."""

    async def get_response(self, path: str, scope: Scope):
        try:
            return await super().get_response(path, scope)
        except StarletteHTTPException as exc:
            if exc.status_code != 404:
                raise
            return await super().get_response("index.html", scope)


def mount_client(application: FastAPI, static_dir: Optional[str]) -> None:
    """Serve the map client at / when its directory exists.

    Must be called after the API routers are included so they take precedence.
    """
    if static_dir and Path(static_dir).is_dir():
        application.mount("/", ClientStaticFiles(directory=static_dir, html=True), name="client")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Application lifespan events."""
    settings = get_settings()
    setup_logging()
    logger.info(f"Starting Traffic Router API in {settings.APP_ENV} mode")
    yield
    logger.info("Shutting down Traffic Router API")


app = FastAPI(
    title="Bangalore Traffic Router API",
    description="""Simulated traffic conditions and ranked route recommendations for Bangalore.

Traffic is simulated per road segment from the time of day, a seasonal weather draw and random variation. Routes between known locations are scored against the current conditions and ranked by estimated travel time.
    """,
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "health", "description": "Health checks and metrics"},
        {"name": "traffic", "description": "Simulated traffic conditions"},
        {"name": "routes", "description": "Traffic-scored route recommendations"},
        {"name": "locations", "description": "Known origins and destinations"},
    ],
)

settings = get_settings()

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)

# Added last, executes first
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.exception_handler(TrafficRouteException)
async def traffic_route_exception_handler(request: Request, exc: TrafficRouteException):
    """Render application errors as {error, details}."""
    content = {"error": exc.message}
    if exc.details is not None:
        content["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {str(exc)}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Something went wrong! Please try again later.",
            "details": str(exc),
        },
    )


@app.get("/health", tags=["health"])
async def health_check():
    """Basic liveness check."""
    return {"status": "ok"}


@app.get("/metrics", tags=["health"])
async def get_metrics():
    """Request counts, response times and status codes."""
    return MetricsMiddleware.get_metrics()


app.include_router(traffic.router, prefix="/api/traffic", tags=["traffic"])
app.include_router(routes.router, prefix="/api/routes", tags=["routes"])
app.include_router(locations.router, prefix="/api/locations", tags=["locations"])

mount_client(app, settings.STATIC_DIR)


if __name__ == "__main__":
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
