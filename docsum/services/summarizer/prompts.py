"""Prompt templates for map and combine calls."""

from docsum.schema.directive import LengthDirective

MAP_TEMPLATE = """{instruction}

Text: {text}

Summary:"""

COMBINE_TEMPLATE = """{instruction}

Summaries:
{summaries}

Final summary:"""


def render_map_prompt(chunk_text: str, directive: LengthDirective) -> str:
    return MAP_TEMPLATE.format(instruction=directive.instruction, text=chunk_text)


def render_combine_prompt(partial_summaries: list[str], directive: LengthDirective) -> str:
    """Partial summaries are numbered in document order."""
    summaries = "\n".join(f"{i}. {s.strip()}" for i, s in enumerate(partial_summaries, start=1))
    return COMBINE_TEMPLATE.format(instruction=directive.instruction, summaries=summaries)
