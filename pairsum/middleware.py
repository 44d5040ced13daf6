"""Request logging middleware and metrics for the Pair Partition Total service."""

import logging
import time
import uuid
from typing import Any

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from pairsum.logging_config import request_id_ctx

logger = logging.getLogger(__name__)


class RequestMetrics:
    """Simple in-memory request metrics collector."""

    def __init__(self) -> None:
        self.total_requests: int = 0
        self.total_duration_ms: float = 0.0
        self.status_counts: dict[int, int] = {}

    @property
    def avg_duration_ms(self) -> float:
        if self.total_requests == 0:
            return 0.0
        return self.total_duration_ms / self.total_requests

    def record(self, status_code: int, duration_ms: float) -> None:
        self.total_requests += 1
        self.total_duration_ms += duration_ms
        self.status_counts[status_code] = self.status_counts.get(status_code, 0) + 1

    def reset(self) -> None:
        self.total_requests = 0
        self.total_duration_ms = 0.0
        self.status_counts.clear()

    def snapshot(self) -> dict[str, Any]:
        return {
            "total_requests": self.total_requests,
            "avg_duration_ms": round(self.avg_duration_ms, 2),
            "status_counts": dict(self.status_counts),
        }


# Module-level singleton
metrics = RequestMetrics()


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs every request with method, path, status code, and duration."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        req_id = request.headers.get("x-request-id") or uuid.uuid4().hex[:12]
        token = request_id_ctx.set(req_id)
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start) * 1000.0
            metrics.record(500, duration_ms)
            logger.error(
                "%s %s failed after %.1fms",
                request.method, request.url.path, duration_ms,
            )
            raise
        finally:
            request_id_ctx.reset(token)
        duration_ms = (time.perf_counter() - start) * 1000.0

        metrics.record(response.status_code, duration_ms)
        logger.info(
            "%s %s -> %d (%.1fms)",
            request.method, request.url.path, response.status_code, duration_ms,
            extra={"extra_data": {
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "duration_ms": round(duration_ms, 2),
                "request_id": req_id,
            }},
        )

        response.headers["x-request-id"] = req_id
        return response


def setup_middleware(app: FastAPI) -> None:
    """Attach middleware and utility routes to the app."""
    app.add_middleware(LoggingMiddleware)

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, Any]:
        """Liveness / readiness probe."""
        return {"status": "healthy"}

    @app.get("/metrics", tags=["system"])
    async def get_metrics() -> dict[str, Any]:
        """Return basic request metrics."""
        return metrics.snapshot()
