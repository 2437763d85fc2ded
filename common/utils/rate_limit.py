"""
In-memory fixed-window rate limiting.

Counts hits per key inside a window that opens on the first hit. State lives
in the process, so limits are per worker. Expired windows are swept during
normal checks so the map only holds keys that are still active.
"""

import time
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Union


@dataclass
class RateLimitResult:
    """Outcome of a single rate limit check."""
    allowed: bool
    remaining: int
    reset_at: float
    retry_after: int = 1  # whole seconds until reset, at least 1


@dataclass
class _Window:
    count: int
    reset_at: float


class RateLimiter:
    """
    Simple in-memory rate limiter.

    Example:
        limiter = RateLimiter()
        result = limiter.check("ai:user-1", limit=10, window_seconds=60)
        if not result.allowed:
            ...
    """

    def __init__(
        self,
        clock: Optional[Callable[[], float]] = None,
        cleanup_interval: float = 60.0,
    ):
        self._clock = clock or time.time
        self._windows: Dict[str, _Window] = {}
        self._cleanup_interval = cleanup_interval
        self._next_cleanup = self._clock() + cleanup_interval

    def check(self, key: str, limit: int, window_seconds: float) -> RateLimitResult:
        """
        Record a hit for key and report whether it is within the limit.

        Args:
            key: Identifier to rate limit (usually built with build_rate_limit_key)
            limit: Maximum hits allowed in the window
            window_seconds: Window length in seconds

        Returns:
            RateLimitResult for this hit
        """
        now = self._clock()
        if now >= self._next_cleanup:
            self.cleanup_expired()

        window = self._windows.get(key)

        if window is None or window.reset_at <= now:
            window = _Window(count=0, reset_at=now + window_seconds)
            self._windows[key] = window

        window.count += 1
        return RateLimitResult(
            allowed=window.count <= limit,
            remaining=max(0, limit - window.count),
            reset_at=window.reset_at,
            retry_after=max(1, int(window.reset_at - now + 0.999)),
        )

    def cleanup_expired(self) -> None:
        """Drop windows that have already reset."""
        now = self._clock()
        for key in list(self._windows.keys()):
            if self._windows[key].reset_at <= now:
                del self._windows[key]
        self._next_cleanup = now + self._cleanup_interval

    def reset(self) -> None:
        """Forget all windows."""
        self._windows.clear()


def build_rate_limit_key(parts: Iterable[Union[str, int, None]]) -> str:
    """Join the non-empty parts of a key with ':'."""
    return ":".join(str(part) for part in parts if part)


# Global rate limiter instance
rate_limiter = RateLimiter()
