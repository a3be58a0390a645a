"""Progress tracking for a pipeline run. Observational only: logs steps and elapsed time."""

import time
from typing import Callable

from docsum.config.logging import get_logger
from docsum.services.errors import ConfigurationError

logger = get_logger(__name__)


class ProgressTracker:
    """Counts steps toward a fixed total and logs `[current/total] (percent%) label - elapsed: Ns`."""

    def __init__(self, total_steps: int, clock: Callable[[], float] = time.monotonic):
        if total_steps < 1:
            raise ConfigurationError(f"total_steps must be positive, got {total_steps}")
        self._total = total_steps
        self._current = 0
        self._clock = clock
        self._started = clock()

    @property
    def current(self) -> int:
        return self._current

    @property
    def total(self) -> int:
        return self._total

    @property
    def elapsed_seconds(self) -> int:
        return int(self._clock() - self._started)

    def step(self, label: str) -> None:
        self._current += 1
        percent = self._current * 100 // self._total
        logger.info(
            "[%d/%d] (%d%%) %s - elapsed: %ds",
            self._current,
            self._total,
            percent,
            label,
            self.elapsed_seconds,
            extra={"step": self._current, "total_steps": self._total},
        )

    def complete(self) -> None:
        logger.info("Processing complete - total elapsed: %ds", self.elapsed_seconds)
