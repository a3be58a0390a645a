"""
Shared test fixtures.

Provides: controllable clock/sleep for the rate governor and progress tracker,
a recording summarizer fake, and a settings cache reset.
"""

import asyncio

import pytest

from docsum.config.settings import get_settings
from docsum.config.summarizer.models import SummarizerConfig
from docsum.schema.directive import LengthDirective
from docsum.services.summarizer.base import BaseSummarizerStrategy


class FakeClock:
    """Millisecond clock that only moves when told to, or when `sleep` is awaited."""

    def __init__(self, start_ms: int = 0):
        self.now_ms = start_ms
        self.sleeps: list[float] = []

    def __call__(self) -> int:
        return self.now_ms

    def seconds(self) -> float:
        return self.now_ms / 1000

    def advance(self, ms: int) -> None:
        self.now_ms += ms

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now_ms += round(seconds * 1000)


class RecordingSummarizer(BaseSummarizerStrategy):
    """Summarizer fake that records every call and tracks how many are in flight."""

    def __init__(self, fail_on_map: int | None = None, fail_on_combine: bool = False, clock: FakeClock | None = None):
        super().__init__(SummarizerConfig(strategy="recording", model="test-model"))
        self.map_calls: list[tuple[str, LengthDirective]] = []
        self.combine_calls: list[tuple[list[str], LengthDirective]] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.fail_on_map = fail_on_map
        self.fail_on_combine = fail_on_combine
        self.clock = clock

    @property
    def strategy_name(self) -> str:
        return "recording"

    async def _enter(self) -> None:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        await asyncio.sleep(0)
        if self.clock is not None:
            self.clock.advance(100)
        self.in_flight -= 1

    async def map_summarize(self, chunk_text: str, directive: LengthDirective) -> str:
        index = len(self.map_calls)
        self.map_calls.append((chunk_text, directive))
        await self._enter()
        if self.fail_on_map == index:
            raise RuntimeError("upstream 500")
        return f"summary-{index}"

    async def combine_summarize(self, partial_summaries: list[str], directive: LengthDirective) -> str:
        self.combine_calls.append((list(partial_summaries), directive))
        await self._enter()
        if self.fail_on_combine:
            raise RuntimeError("upstream 503")
        return " | ".join(partial_summaries)


@pytest.fixture
def fake_clock() -> FakeClock:
    """Provide a fake millisecond clock starting at zero."""
    return FakeClock()


@pytest.fixture
def recording_summarizer() -> RecordingSummarizer:
    """Provide a summarizer fake that succeeds on every call."""
    return RecordingSummarizer()


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Settings are cached per process; tests that touch env vars need a fresh read."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
