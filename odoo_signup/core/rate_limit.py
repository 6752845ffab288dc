"""
Token bucket rate limiting for the API routes
"""

import threading
import time
from typing import Callable

from fastapi import Request
import structlog

from odoo_signup.core.exceptions import RateLimitExceeded

logger = structlog.get_logger(__name__)


class TokenBucket:
    """Process-wide token bucket: `rate` tokens per second, at most `burst`"""

    def __init__(self, rate: float, burst: int, clock: Callable[[], float] = time.monotonic):
        self.rate = rate
        self.burst = burst
        self.clock = clock
        self._tokens = float(burst)
        self._updated = clock()
        self._lock = threading.Lock()

    def allow(self) -> bool:
        """Take one token if available"""
        with self._lock:
            now = self.clock()
            self._tokens = min(float(self.burst), self._tokens + (now - self._updated) * self.rate)
            self._updated = now
            if self._tokens >= 1.0:
                self._tokens -= 1.0
                return True
            return False


def enforce_rate_limit(request: Request) -> None:
    """FastAPI dependency rejecting the request when the bucket is empty"""
    limiter: TokenBucket = request.app.state.rate_limiter
    if not limiter.allow():
        logger.warning("Rate limit exceeded", path=request.url.path)
        raise RateLimitExceeded()
