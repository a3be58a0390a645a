"""Sliding-window chunking. Overlapping character windows with hard cuts at the size limit."""

from typing import Callable

# (text, start, limit) -> end, with start < end <= limit
EndChooser = Callable[[str, int, int], int]


def window_spans(text: str, size: int, overlap: int, choose_end: EndChooser) -> list[tuple[int, int]]:
    """
    Walk the text producing (start, end) spans of at most `size` characters. Each span after
    the first starts `overlap` characters before the previous end; the last span ends at len(text).
    choose_end must return an end more than `overlap` characters past start so the walk advances.
    """
    n = len(text)
    spans: list[tuple[int, int]] = []
    start = 0
    while start < n:
        limit = start + size
        if limit >= n:
            spans.append((start, n))
            break
        end = choose_end(text, start, limit)
        spans.append((start, end))
        start = end - overlap
    return spans


def sliding_window_spans(
    text: str, size: int, overlap: int, boundary_lookback: int | None = None
) -> list[tuple[int, int]]:
    """Fixed windows of `size` characters stepping by (size - overlap). Lookback is ignored."""
    return window_spans(text, size, overlap, lambda _text, _start, limit: limit)
