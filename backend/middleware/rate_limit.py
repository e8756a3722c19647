"""
In-memory rate limiting for the sign-in endpoint.

Slows down password guessing against customer logins. Uses a sliding window
of request timestamps per (client IP, route) key, held in process memory;
each worker process keeps its own window.
"""
import logging
import time
from collections import defaultdict, deque

from fastapi import HTTPException, Request

logger = logging.getLogger(__name__)


class RateLimiter:
    """Sliding-window counter keyed by an arbitrary string."""

    def __init__(self):
        self._requests: dict[str, deque[float]] = defaultdict(deque)

    def _cleanup(self, key: str, window_seconds: int, now: float) -> int:
        """Drop expired timestamps; a key whose window empties is removed. Returns the live count."""
        window = self._requests.get(key)
        if window is None:
            return 0
        cutoff = now - window_seconds
        while window and window[0] <= cutoff:
            window.popleft()
        if not window:
            del self._requests[key]
            return 0
        return len(window)

    def check(self, key: str, max_requests: int, window_seconds: int) -> bool:
        """Record a request and return False if it exceeds the limit."""
        now = time.monotonic()
        if self._cleanup(key, window_seconds, now) >= max_requests:
            return False
        self._requests[key].append(now)
        return True

    def remaining(self, key: str, max_requests: int, window_seconds: int) -> int:
        return max(0, max_requests - self._cleanup(key, window_seconds, time.monotonic()))

    def reset(self) -> None:
        self._requests.clear()


# Global rate limiter instance
limiter = RateLimiter()


def rate_limit(max_requests: int = 10, window_seconds: int = 60):
    """
    FastAPI dependency factory.

    Usage:
        @router.post("/sign-in")
        async def sign_in(..., _rate=Depends(rate_limit(10, 60))):
            ...
    """
    async def _check_rate_limit(request: Request):
        client_ip = request.client.host if request.client else "unknown"
        key = f"{client_ip}:{request.url.path}"

        if not limiter.check(key, max_requests, window_seconds):
            logger.warning(
                f"Rate limit exceeded: {client_ip} on {request.url.path} "
                f"({max_requests}/{window_seconds}s)"
            )
            raise HTTPException(
                status_code=429,
                detail=f"Too many attempts. Try again in {window_seconds} seconds.",
                headers={
                    "Retry-After": str(window_seconds),
                    "X-RateLimit-Limit": str(max_requests),
                    "X-RateLimit-Remaining": "0",
                },
            )

    return _check_rate_limit
