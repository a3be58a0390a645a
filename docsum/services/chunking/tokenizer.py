"""Token estimation for rate admission. Character ratio by default; tiktoken counting on request."""

import math
from functools import lru_cache

import tiktoken

DEFAULT_ENCODING = "cl100k_base"


@lru_cache
def _get_encoding(name: str = DEFAULT_ENCODING) -> "tiktoken.Encoding":
    """Lazy-load a tiktoken encoding (cl100k_base used by OpenAI chat models)."""
    return tiktoken.get_encoding(name)


def count_tokens(text: str) -> int:
    """Return the tiktoken token count for text."""
    if not text:
        return 0
    return len(_get_encoding().encode(text))


def estimate_tokens_from_chars(char_count: int, tokens_per_character: float) -> int:
    """Conservative estimate: ceil(char_count * tokens_per_character)."""
    if char_count <= 0:
        return 0
    return math.ceil(char_count * tokens_per_character)
