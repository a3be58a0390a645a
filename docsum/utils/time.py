"""Time utilities. Rate windows use integer monotonic milliseconds."""

import time


def monotonic_ms() -> int:
    """Return monotonic clock reading in whole milliseconds. Arbitrary epoch; only differences matter."""
    return time.monotonic_ns() // 1_000_000
