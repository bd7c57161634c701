"""
Request throttling for the TRaSH Guides client.

The unauthenticated GitHub API allows only a small number of requests per
hour; a token bucket in front of the fetcher keeps bursts under control.
"""

import asyncio
import time


class RateLimiter:
    """
    Async token bucket.

    Usage:
        limiter = RateLimiter(requests_per_minute=60, burst=10)
        await limiter.acquire()  # waits when the bucket is empty
    """

    def __init__(
        self,
        requests_per_minute: int = 60,
        burst: int = 10,
        enabled: bool = True,
    ):
        if requests_per_minute <= 0:
            raise ValueError("requests_per_minute must be greater than 0")
        if burst <= 0:
            raise ValueError("burst must be greater than 0")
        self._rpm = requests_per_minute
        self._burst = burst
        self._enabled = enabled

        self._tokens = float(burst)
        self._last_refill = time.monotonic()
        self._lock = asyncio.Lock()

        self._granted = 0
        self._throttled = 0
        self._waited = 0.0

    @property
    def is_enabled(self) -> bool:
        return self._enabled

    @property
    def requests_per_minute(self) -> int:
        return self._rpm

    @property
    def burst(self) -> int:
        return self._burst

    def _refill(self) -> None:
        now = time.monotonic()
        per_second = self._rpm / 60.0
        self._tokens = min(float(self._burst), self._tokens + (now - self._last_refill) * per_second)
        self._last_refill = now

    async def acquire(self) -> float:
        """
        Take one token, sleeping until one is available.

        Returns:
            Seconds spent waiting (0 when a token was available)
        """
        if not self._enabled:
            return 0.0

        async with self._lock:
            self._refill()
            self._granted += 1
            if self._tokens >= 1.0:
                self._tokens -= 1.0
                return 0.0

            # Holding the lock while sleeping keeps waiters in FIFO order
            delay = (1.0 - self._tokens) / (self._rpm / 60.0)
            self._throttled += 1
            self._waited += delay
            await asyncio.sleep(delay)
            self._refill()
            self._tokens = max(0.0, self._tokens - 1.0)
            return delay

    def get_stats(self) -> dict:
        return {
            "total_requests": self._granted,
            "throttled_count": self._throttled,
            "total_wait_time": self._waited,
            "available_tokens": self._tokens,
            "enabled": self._enabled,
        }

    def reset(self) -> None:
        """Refill the bucket and zero the counters."""
        self._tokens = float(self._burst)
        self._last_refill = time.monotonic()
        self._granted = 0
        self._throttled = 0
        self._waited = 0.0
