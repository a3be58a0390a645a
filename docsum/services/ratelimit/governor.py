"""
Dual sliding-window admission control (requests per window, tokens per window).

Callers await admit() before every remote call. Admission is always granted eventually;
the only effect of a full window is a delay. Histories are append-only and filtered lazily
at each check. Not internally synchronized: one caller at a time.
"""

import asyncio
from typing import Awaitable, Callable, NamedTuple

from docsum.config.logging import get_logger
from docsum.config.pipeline.models import PipelineConfig
from docsum.services.errors import ConfigurationError
from docsum.utils.time import monotonic_ms

logger = get_logger(__name__)


class RequestEvent(NamedTuple):
    timestamp: int


class TokenEvent(NamedTuple):
    timestamp: int
    token_count: int


class RateGovernor:
    """Blocks (asynchronously) until a call fits under both ceilings, then records it."""

    def __init__(
        self,
        max_requests: int = 200,
        max_tokens: int = 150000,
        window_ms: int = 60000,
        slack_ms: int = 1000,
        clock: Callable[[], int] = monotonic_ms,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if max_requests < 1 or max_tokens < 1 or window_ms < 1:
            raise ConfigurationError("Rate ceilings and window must be positive")
        if slack_ms < 0:
            raise ConfigurationError(f"slack_ms must be non-negative, got {slack_ms}")
        self.max_requests = max_requests
        self.max_tokens = max_tokens
        self.window_ms = window_ms
        self.slack_ms = slack_ms
        self._clock = clock
        self._sleep = sleep
        self._requests: list[RequestEvent] = []
        self._tokens: list[TokenEvent] = []

    @classmethod
    def from_config(cls, config: PipelineConfig, **kwargs) -> "RateGovernor":
        """Build a governor from pipeline config. kwargs may inject clock/sleep."""
        return cls(
            max_requests=config.max_requests_per_window,
            max_tokens=config.max_tokens_per_window,
            window_ms=config.rate_window_ms,
            slack_ms=config.rate_limit_slack_ms,
            **kwargs,
        )

    @property
    def request_events(self) -> tuple[RequestEvent, ...]:
        return tuple(self._requests)

    @property
    def token_events(self) -> tuple[TokenEvent, ...]:
        return tuple(self._tokens)

    def _in_window(self, now: int) -> tuple[list[RequestEvent], list[TokenEvent]]:
        requests = [e for e in self._requests if now - e.timestamp < self.window_ms]
        tokens = [e for e in self._tokens if now - e.timestamp < self.window_ms]
        return requests, tokens

    def current_usage(self) -> tuple[int, int]:
        """Return (requests, tokens) recorded within the window ending now."""
        requests, tokens = self._in_window(self._clock())
        return len(requests), sum(e.token_count for e in tokens)

    def _wait_for(self, now: int, oldest: int) -> int:
        """Milliseconds until `oldest` leaves the window, plus slack. Never negative."""
        return max(0, self.window_ms - (now - oldest) + self.slack_ms)

    async def _pause(self, wait_ms: int, limit: str, in_use: int, ceiling: int) -> None:
        logger.info(
            "%s limit reached, waiting %.1fs",
            limit.capitalize(),
            wait_ms / 1000,
            extra={"limit": limit, "wait_ms": wait_ms, "in_use": in_use, "ceiling": ceiling},
        )
        await self._sleep(wait_ms / 1000)

    async def admit(self, estimated_tokens: int) -> int:
        """
        Wait until one more request and `estimated_tokens` more tokens fit in the window, then
        record both at the current time. Returns the total milliseconds waited.
        """
        if estimated_tokens < 0:
            raise ConfigurationError(f"estimated_tokens must be non-negative, got {estimated_tokens}")
        waited = 0
        now = self._clock()
        requests, tokens = self._in_window(now)

        while len(requests) >= self.max_requests:
            wait_ms = self._wait_for(now, min(e.timestamp for e in requests))
            if wait_ms > 0:
                await self._pause(wait_ms, "request", len(requests), self.max_requests)
                waited += wait_ms
            now = self._clock()
            requests, tokens = self._in_window(now)

        used = sum(e.token_count for e in tokens)
        while tokens and used + estimated_tokens > self.max_tokens:
            wait_ms = self._wait_for(now, min(e.timestamp for e in tokens))
            if wait_ms > 0:
                await self._pause(wait_ms, "token", used, self.max_tokens)
                waited += wait_ms
            now = self._clock()
            requests, tokens = self._in_window(now)
            used = sum(e.token_count for e in tokens)

        if estimated_tokens > self.max_tokens:
            logger.warning(
                "Estimated tokens exceed the per-window ceiling; admitting into an empty window",
                extra={"estimated_tokens": estimated_tokens, "ceiling": self.max_tokens},
            )

        self._requests.append(RequestEvent(now))
        self._tokens.append(TokenEvent(now, estimated_tokens))
        return waited
