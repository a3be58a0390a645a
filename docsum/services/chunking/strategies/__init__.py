"""Chunking strategy implementations. Each returns (start, end) spans over the normalized text."""

from typing import Callable

from docsum.services.chunking.strategies.recursive_boundary import recursive_boundary_spans
from docsum.services.chunking.strategies.sliding_window import sliding_window_spans

SpanFn = Callable[[str, int, int, int | None], list[tuple[int, int]]]

STRATEGY_REGISTRY: dict[str, SpanFn] = {
    "recursive": recursive_boundary_spans,
    "recursive_boundary": recursive_boundary_spans,  # alias
    "sliding_window": sliding_window_spans,
}


def get_strategy_fn(strategy_name: str) -> SpanFn | None:
    """Return the chunking function for the given strategy name, or None."""
    return STRATEGY_REGISTRY.get(strategy_name)
