"""Resolve a --length specifier into a LengthDirective."""

import re

from docsum.config.logging import get_logger
from docsum.schema.directive import LengthDirective, LengthKind

logger = get_logger(__name__)

_INSTRUCTIONS: dict[LengthKind, str] = {
    LengthKind.SHORT: "Summarize concisely in 2-3 sentences.",
    LengthKind.MEDIUM: "Summarize at a moderate length, about 5-8 sentences.",
    LengthKind.LONG: "Summarize in detail, about 10-15 sentences.",
}

_KEYWORDS: dict[str, LengthKind] = {
    "short": LengthKind.SHORT,
    "brief": LengthKind.SHORT,
    "medium": LengthKind.MEDIUM,
    "normal": LengthKind.MEDIUM,
    "long": LengthKind.LONG,
    "detailed": LengthKind.LONG,
}

_CHARACTER_TARGET = re.compile(r"\d+")


def character_target_instruction(target_chars: int) -> str:
    return f"Summarize in approximately {target_chars} characters."


def resolve_directive(length_arg: str | None) -> LengthDirective:
    """
    Keywords match case-insensitively; a bare positive integer is a character target.
    Anything else falls back to DEFAULT, which carries the medium instruction.
    """
    length_arg = (length_arg or "").strip()
    kind = _KEYWORDS.get(length_arg.lower())
    if kind is not None:
        return LengthDirective(kind=kind, instruction=_INSTRUCTIONS[kind])
    if _CHARACTER_TARGET.fullmatch(length_arg) and int(length_arg) > 0:
        target = int(length_arg)
        return LengthDirective(
            kind=LengthKind.CHARACTER_TARGET,
            instruction=character_target_instruction(target),
            target_chars=target,
        )
    logger.warning("Unrecognized length %r, using medium", length_arg)
    return LengthDirective(kind=LengthKind.DEFAULT, instruction=_INSTRUCTIONS[LengthKind.MEDIUM])
