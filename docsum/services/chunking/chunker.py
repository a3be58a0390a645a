"""
Chunker: takes normalized text + size/overlap + strategy and returns ordered Chunk records.
Deterministic: same input and parameters always yield the same chunks.
"""

from docsum.config.logging import get_logger
from docsum.schema.chunk import Chunk
from docsum.services.chunking.strategies import get_strategy_fn
from docsum.services.errors import ConfigurationError
from docsum.utils.ids import generate_chunk_id

logger = get_logger(__name__)


def validate_split_params(max_chunk_size: int, overlap: int) -> None:
    """Raise ConfigurationError unless 0 <= overlap < max_chunk_size."""
    if max_chunk_size < 1:
        raise ConfigurationError(f"max_chunk_size must be positive, got {max_chunk_size}")
    if overlap < 0:
        raise ConfigurationError(f"overlap must be non-negative, got {overlap}")
    if overlap >= max_chunk_size:
        raise ConfigurationError(
            f"overlap ({overlap}) must be smaller than max_chunk_size ({max_chunk_size})"
        )


def split_text(
    text: str,
    max_chunk_size: int,
    overlap: int,
    strategy: str = "recursive",
    boundary_lookback: int | None = None,
) -> list[Chunk]:
    """
    Split text into overlapping chunks of at most max_chunk_size characters.
    Every chunk after the first starts `overlap` characters before the previous one ends.
    Returns [] for empty text; callers reject empty input before splitting.
    """
    validate_split_params(max_chunk_size, overlap)
    strategy_fn = get_strategy_fn(strategy)
    if strategy_fn is None:
        raise ConfigurationError(f"Unknown chunking strategy: {strategy!r}")
    if not text:
        return []
    spans = strategy_fn(text, max_chunk_size, overlap, boundary_lookback)
    chunks = [
        Chunk(
            chunk_id=generate_chunk_id(i, text[start:end]),
            index=i,
            text=text[start:end],
            start=start,
            end=end,
        )
        for i, (start, end) in enumerate(spans)
    ]
    logger.debug(
        "Text split into chunks",
        extra={"strategy": strategy, "chunk_count": len(chunks), "text_length": len(text)},
    )
    return chunks


def reconstruct_text(chunks: list[Chunk], overlap: int) -> str:
    """Inverse of split_text: concatenate chunks, dropping the overlapping prefix of each after the first."""
    parts = [c.text if c.index == 0 else c.text[overlap:] for c in chunks]
    return "".join(parts)
