import time
from typing import Callable, Optional
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from utils.config import settings
from utils.logging import app_logger, log_request_start, log_request_end, log_error, log_periodic_stats

UNLOGGED_PATHS = ("/health", "/docs", "/redoc", "/openapi.json")
GENERATION_PATHS = ("/generate-quiz",)


def quiz_outcome(request: Request) -> Optional[str]:
    """The difficulty/source of the quiz a route served, if it served one."""
    return getattr(request.state, "quiz_outcome", None)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request with its caller, quiz outcome and status class"""

    def __init__(self, app, log_periodic_stats_interval: int = 300):
        super().__init__(app)
        self.log_periodic_stats_interval = log_periodic_stats_interval
        self.last_stats_log = time.time()

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in UNLOGGED_PATHS:
            return await call_next(request)

        user_id = request.headers.get("x-user-id")
        endpoint = f"{request.method} {request.url.path}"
        start_time = time.time()
        request_info = log_request_start(request, endpoint, user_id)

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            log_error(e, endpoint, user_id, {"duration_ms": duration_ms})
            log_request_end(request_info, duration_ms, 500)
            return JSONResponse(status_code=500, content={"detail": "Internal server error"})

        duration_ms = (time.time() - start_time) * 1000
        log_request_end(request_info, duration_ms, response.status_code, quiz_outcome(request))

        if time.time() - self.last_stats_log > self.log_periodic_stats_interval:
            log_periodic_stats()
            self.last_stats_log = time.time()

        return response


class PerformanceLoggingMiddleware(BaseHTTPMiddleware):
    """
    Flags slow requests and reports timing headers.

    Quiz generation waits on the completion provider, so it is measured
    against the generation timeout instead of the general threshold.
    """

    def __init__(
        self,
        app,
        slow_request_threshold_ms: float = 1000,
        slow_generation_threshold_ms: float = settings.generation_timeout * 1000,
    ):
        super().__init__(app)
        self.slow_request_threshold_ms = slow_request_threshold_ms
        self.slow_generation_threshold_ms = slow_generation_threshold_ms

    def threshold_for(self, path: str) -> float:
        if path in GENERATION_PATHS:
            return self.slow_generation_threshold_ms
        return self.slow_request_threshold_ms

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()
        response = await call_next(request)
        duration_ms = (time.time() - start_time) * 1000

        threshold_ms = self.threshold_for(request.url.path)
        if duration_ms > threshold_ms:
            app_logger.logger.warning(
                f"🐌 SLOW REQUEST | {request.method} {request.url.path} | "
                f"Duration: {duration_ms:.2f}ms | Threshold: {threshold_ms}ms"
            )

        response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"
        outcome = quiz_outcome(request)
        if outcome:
            response.headers["X-Quiz-Outcome"] = outcome

        return response
