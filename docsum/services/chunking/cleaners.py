"""Text cleaners for chunking input. Strip model sentinel tokens and NUL bytes before splitting."""

import re

# <|endoftext|>, <|startoftext|>, <|im_start|> and any other pipe-delimited control token
_CONTROL_TOKEN = re.compile(r"<\|[^|]*\|>")


def strip_control_tokens(text: str) -> str:
    """
    Remove control tokens and NUL bytes. Repeats until nothing changes, since a removal
    can join the halves of another marker (e.g. "<|a<|x|>|>" or "<\\x00|x|>").
    """
    previous = None
    while previous != text:
        previous = text
        text = _CONTROL_TOKEN.sub("", text).replace("\x00", "")
    return text


def normalize_text(raw: str) -> str:
    """Clean raw content before chunking: strip control tokens and NULs, then trim. Idempotent."""
    if not raw:
        return ""
    return strip_control_tokens(raw).strip()
