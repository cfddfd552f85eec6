"""Token-bucket rate limiter shared by every request to whatismymmr.com."""
import asyncio
import logging
import time
from typing import Awaitable, Callable, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
Sleep = Callable[[float], Awaitable[None]]


class TokenBucketRateLimiter:
    """
    Hands out ``tokens_per_interval`` tokens per ``interval`` seconds.

      - Bucket : starts full, drips back at tokens_per_interval / interval per
                 second, never holds more than tokens_per_interval
      - Window : at most tokens_per_interval tokens inside one fixed window;
                 the window restarts on the first acquire after it elapsed

    A full bucket lets a burst through immediately; the window keeps that
    burst from being followed by a steady drip inside the same interval.
    """

    def __init__(
        self,
        tokens_per_interval: int = 60,
        interval: float = 60.0,
        *,
        clock: Clock = time.monotonic,
        sleep: Sleep = asyncio.sleep,
    ):
        if tokens_per_interval <= 0:
            raise ValueError("tokens_per_interval must be positive")
        if interval <= 0:
            raise ValueError("interval must be positive")

        self.tokens_per_interval = tokens_per_interval
        self.interval = interval
        self._clock = clock
        self._sleep = sleep

        now = clock()
        self._tokens: float = float(tokens_per_interval)
        self._last_drip = now
        self._window_start = now
        self._used_in_window = 0

        self._lock: Optional[asyncio.Lock] = None
        self._lock_loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def drip_rate(self) -> float:
        """Tokens regained per second."""
        return self.tokens_per_interval / self.interval

    def _get_lock(self) -> asyncio.Lock:
        # a shared limiter outlives any single asyncio.run() call
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    def _drip(self, now: float) -> None:
        elapsed = max(0.0, now - self._last_drip)
        self._tokens = min(float(self.tokens_per_interval), self._tokens + elapsed * self.drip_rate)
        self._last_drip = now

    async def acquire(self, count: int = 1) -> None:
        if count > self.tokens_per_interval:
            raise ValueError(
                f"cannot acquire {count} tokens from a bucket of {self.tokens_per_interval}"
            )
        async with self._get_lock():
            while True:
                now = self._clock()

                if now - self._window_start >= self.interval:
                    self._window_start = now
                    self._used_in_window = 0

                if self._used_in_window + count > self.tokens_per_interval:
                    wait = self.interval - (now - self._window_start)
                    logger.debug(f"Rate limit window exhausted, waiting {wait:.2f}s")
                    await self._sleep(wait)
                    continue

                self._drip(now)
                if self._tokens >= count:
                    self._tokens -= count
                    self._used_in_window += count
                    return

                wait = (count - self._tokens) / self.drip_rate
                logger.debug(f"Rate limit bucket empty, waiting {wait:.2f}s")
                await self._sleep(wait)

    def get_status(self) -> Tuple[int, int]:
        """(tokens available right now, tokens per interval)."""
        now = self._clock()
        elapsed = max(0.0, now - self._last_drip)
        bucket = min(float(self.tokens_per_interval), self._tokens + elapsed * self.drip_rate)
        if now - self._window_start >= self.interval:
            window_left = self.tokens_per_interval
        else:
            window_left = self.tokens_per_interval - self._used_in_window
        return int(min(bucket, window_left)), self.tokens_per_interval

    async def reset(self) -> None:
        async with self._get_lock():
            now = self._clock()
            self._tokens = float(self.tokens_per_interval)
            self._last_drip = now
            self._window_start = now
            self._used_in_window = 0


_shared: Dict[Tuple[int, float], TokenBucketRateLimiter] = {}


def shared_limiter(tokens_per_interval: int = 60, interval: float = 60.0) -> TokenBucketRateLimiter:
    """The process-wide limiter for one rate-limit configuration."""
    key = (tokens_per_interval, float(interval))
    limiter = _shared.get(key)
    if limiter is None:
        limiter = _shared[key] = TokenBucketRateLimiter(tokens_per_interval, interval)
    return limiter
