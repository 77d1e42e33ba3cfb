import logging
import time
from collections.abc import Callable

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from aquamonitor.core.config import Settings
from aquamonitor.core.errors import PayloadTooLarge, RateLimited, ServiceError, error_response

logger = logging.getLogger(__name__)


class RateLimiter:
    """Fixed-window request counter keyed by client address."""

    def __init__(self, limit: int, window_seconds: float = 60.0, clock: Callable[[], float] = time.monotonic) -> None:
        self.limit = limit
        self.window_seconds = window_seconds
        self.clock = clock
        self._windows: dict[str, tuple[float, int]] = {}

    def hit(self, key: str) -> bool:
        now = self.clock()
        start, count = self._windows.get(key, (now, 0))
        if now - start >= self.window_seconds:
            start, count = now, 0
        count += 1
        self._windows[key] = (start, count)
        if len(self._windows) > 10_000:
            self._prune(now)
        return count <= self.limit

    def _prune(self, now: float) -> None:
        expired = [key for key, (start, _) in self._windows.items() if now - start >= self.window_seconds]
        for key in expired:
            del self._windows[key]


def _client_key(request: Request) -> str:
    return request.client.host if request.client else "unknown"


async def _body_too_large(request: Request, limit: int) -> bool:
    """Check Content-Length when sent, otherwise measure the chunked body.

    request.body() caches the bytes, so the route still sees the body.
    """
    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit():
        return int(content_length) > limit
    if request.method not in ("POST", "PUT", "PATCH"):
        return False
    return len(await request.body()) > limit


def install_middleware(app: FastAPI, settings: Settings) -> None:
    limiter = RateLimiter(settings.rate_limit_per_minute)
    app.state.rate_limiter = limiter

    @app.middleware("http")
    async def boundary_policies(request: Request, call_next):
        if not limiter.hit(_client_key(request)):
            logger.warning("Rate limit exceeded for %s", _client_key(request))
            return error_response(RateLimited())

        if await _body_too_large(request, settings.max_body_bytes):
            return error_response(PayloadTooLarge())

        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error in %s %s", request.method, request.url.path)
            return error_response(ServiceError())

    # Added last so it wraps every other response, 429s included.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
