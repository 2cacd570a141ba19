"""
Per-user rate limiter for the Pages API.

Fixed-window counters kept in process memory. State is lost on restart,
which simply hands every user a fresh budget.
"""

import math
import threading
import time
from dataclasses import dataclass

try:
    from ..config import RATE_LIMIT_MAX_REQUESTS, RATE_LIMIT_WINDOW_SECONDS, RATE_LIMIT_SWEEP_INTERVAL
except ImportError:
    from config import RATE_LIMIT_MAX_REQUESTS, RATE_LIMIT_WINDOW_SECONDS, RATE_LIMIT_SWEEP_INTERVAL


@dataclass(frozen=True)
class RateLimitResult:
    allowed: bool
    remaining: int
    reset_at: float  # unix seconds


class RateLimiter:
    """Fixed-window request counter keyed by user id.

    Rejected requests still increment the counter, so a client hammering
    the API keeps itself locked out until the window resets.
    """

    def __init__(self, max_requests=RATE_LIMIT_MAX_REQUESTS, window_seconds=RATE_LIMIT_WINDOW_SECONDS,
                 sweep_interval=RATE_LIMIT_SWEEP_INTERVAL, clock=time.time):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.sweep_interval = sweep_interval
        self._clock = clock
        self._windows: dict[str, dict] = {}
        self._lock = threading.Lock()
        self._next_sweep_at = clock() + sweep_interval

    def check(self, identity: str) -> RateLimitResult:
        """Count one request for `identity` and decide whether it is allowed."""
        now = self._clock()
        if now >= self._next_sweep_at:
            self.cleanup()

        with self._lock:
            window = self._windows.get(identity)
            if window is None or now >= window["reset_at"]:
                window = {"count": 0, "reset_at": now + self.window_seconds}
                self._windows[identity] = window

            window["count"] += 1
            count = window["count"]
            reset_at = window["reset_at"]

        allowed = count <= self.max_requests
        if not allowed:
            print(f"[RATE] Limit exceeded for user {identity} ({count}/{self.max_requests})")
        return RateLimitResult(
            allowed=allowed,
            remaining=max(0, self.max_requests - count),
            reset_at=reset_at,
        )

    def cleanup(self) -> int:
        """Drop expired windows. Returns the number removed."""
        now = self._clock()
        with self._lock:
            expired = [key for key, window in self._windows.items() if now >= window["reset_at"]]
            for key in expired:
                del self._windows[key]
            self._next_sweep_at = now + self.sweep_interval
        if expired:
            print(f"[RATE] Swept {len(expired)} expired windows")
        return len(expired)

    def headers(self, result: RateLimitResult) -> dict:
        """Build the X-RateLimit-* response headers for a check result."""
        return {
            "X-RateLimit-Limit": str(self.max_requests),
            "X-RateLimit-Remaining": str(result.remaining),
            "X-RateLimit-Reset": str(math.ceil(result.reset_at)),
        }

    def stats(self) -> dict:
        with self._lock:
            active = len(self._windows)
        return {
            "active_windows": active,
            "max_requests": self.max_requests,
            "window_seconds": self.window_seconds,
        }


rate_limiter = RateLimiter()
