"""Boundary-preferring chunking: end each window at a paragraph, sentence or word break near the limit."""

import re

from docsum.services.chunking.strategies.sliding_window import window_spans

_PARAGRAPH_BREAK = "\n\n"
# Latin sentence end needs trailing whitespace; CJK full stops do not
_SENTENCE_END = re.compile(r"[.!?]\s|[。！？]")
_WORD_BREAK = re.compile(r"\s")


def _last_match_end(pattern: re.Pattern[str], text: str, lower: int, limit: int) -> int | None:
    """End offset of the last match lying fully inside text[lower:limit], or None."""
    end = None
    for m in pattern.finditer(text, lower, limit):
        end = m.end()
    return end


def choose_boundary(text: str, lower: int, limit: int) -> int:
    """
    Pick the end of a window: the last paragraph break in [lower, limit), else the last
    sentence end, else the last whitespace, else a hard cut at limit.
    """
    if lower >= limit:
        return limit
    pos = text.rfind(_PARAGRAPH_BREAK, lower, limit)
    if pos != -1:
        return pos + len(_PARAGRAPH_BREAK)
    for pattern in (_SENTENCE_END, _WORD_BREAK):
        end = _last_match_end(pattern, text, lower, limit)
        if end is not None:
            return end
    return limit


def effective_lookback(size: int, overlap: int, boundary_lookback: int | None) -> int:
    """Default lookback is a fifth of the window; never so large that a chunk could be <= overlap."""
    lookback = size // 5 if boundary_lookback is None else boundary_lookback
    return max(0, min(lookback, size - overlap - 1))


def recursive_boundary_spans(
    text: str, size: int, overlap: int, boundary_lookback: int | None = None
) -> list[tuple[int, int]]:
    """Overlapping windows of at most `size` characters, each ending at the best natural break."""
    lookback = effective_lookback(size, overlap, boundary_lookback)
    return window_spans(
        text,
        size,
        overlap,
        lambda t, _start, limit: choose_boundary(t, limit - lookback, limit),
    )
