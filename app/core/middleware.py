"""Middleware for request logging, correlation IDs, security headers and metrics."""

import time
from typing import Callable, Dict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.core.logging_config import clear_request_id, get_logger, set_request_id

logger = get_logger(__name__)

SECURITY_HEADERS: Dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs HTTP requests with correlation IDs and timing."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Log request and response with timing and correlation ID.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware or route handler

        Returns:
            HTTP response
        """
        correlation_id = set_request_id(request.headers.get("X-Request-ID"))
        start_time = time.perf_counter()

        logger.info(
            "Request started",
            extra={
                "extra_fields": {
                    "method": request.method,
                    "path": request.url.path,
                    "query_params": dict(request.query_params),
                }
            },
        )

        try:
            response = await call_next(request)
            duration_ms = round((time.perf_counter() - start_time) * 1000, 2)

            logger.info(
                "Request completed",
                extra={
                    "extra_fields": {
                        "method": request.method,
                        "path": request.url.path,
                        "status_code": response.status_code,
                        "duration_ms": duration_ms,
                    }
                },
            )

            response.headers["X-Request-ID"] = correlation_id
            response.headers["X-Response-Time"] = f"{duration_ms}ms"
            return response

        except Exception as e:
            logger.error(
                "Request failed",
                extra={
                    "extra_fields": {
                        "method": request.method,
                        "path": request.url.path,
                        "error": str(e),
                        "error_type": type(e).__name__,
                    }
                },
                exc_info=True,
            )
            raise

        finally:
            clear_request_id()


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds browser hardening headers to every response."""

    def __init__(self, app: ASGIApp, headers: Dict[str, str] | None = None):
        super().__init__(app)
        self.headers = headers or SECURITY_HEADERS

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        for name, value in self.headers.items():
            response.headers[name] = value
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Collects request counts, status codes and durations.

    Counters are shared through a class-level registry so the metrics
    endpoint can read them regardless of which instance Starlette builds.
    """

    _metrics: Dict = {
        "requests_total": 0,
        "requests_in_progress": 0,
        "requests_by_endpoint": {},
        "requests_by_status": {},
        "total_duration_seconds": 0.0,
    }

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        metrics = MetricsMiddleware._metrics
        metrics["requests_in_progress"] += 1
        start_time = time.perf_counter()

        try:
            response = await call_next(request)

            duration = time.perf_counter() - start_time
            endpoint = f"{request.method} {request.url.path}"

            metrics["requests_total"] += 1
            metrics["total_duration_seconds"] += duration

            endpoint_data = metrics["requests_by_endpoint"].setdefault(
                endpoint, {"count": 0, "total_duration": 0.0}
            )
            endpoint_data["count"] += 1
            endpoint_data["total_duration"] += duration

            status_code = response.status_code
            metrics["requests_by_status"][status_code] = (
                metrics["requests_by_status"].get(status_code, 0) + 1
            )

            return response

        finally:
            metrics["requests_in_progress"] -= 1

    @classmethod
    def get_metrics(cls) -> dict:
        """Get current metrics with per-endpoint average durations."""
        metrics = cls._metrics
        avg_duration = 0.0
        if metrics["requests_total"] > 0:
            avg_duration = metrics["total_duration_seconds"] / metrics["requests_total"]

        endpoints = {
            endpoint: {
                "count": data["count"],
                "avg_duration_seconds": round(data["total_duration"] / data["count"], 4),
            }
            for endpoint, data in metrics["requests_by_endpoint"].items()
            if data["count"] > 0
        }

        return {
            "requests_total": metrics["requests_total"],
            "requests_in_progress": metrics["requests_in_progress"],
            "avg_duration_seconds": round(avg_duration, 4),
            "requests_by_endpoint": endpoints,
            "requests_by_status": metrics["requests_by_status"],
        }
