"""Mock summarizer strategy for tests and dry runs. Deterministic, no network."""

import re

from docsum.schema.directive import LengthDirective
from docsum.services.summarizer.base import BaseSummarizerStrategy

# Max characters of a chunk echoed back as its "summary"
MOCK_SUMMARY_CHARS = 200

_FIRST_SENTENCE = re.compile(r"^.*?(?:[.!?](?=\s)|[。！？]|$)", re.DOTALL)


class MockSummarizerStrategy(BaseSummarizerStrategy):
    """
    Map returns the directive tag plus the first sentence of the chunk (capped);
    combine joins the partials in order. Same input -> same output.
    """

    @property
    def strategy_name(self) -> str:
        return "mock"

    async def map_summarize(self, chunk_text: str, directive: LengthDirective) -> str:
        m = _FIRST_SENTENCE.match(chunk_text.strip())
        first = (m.group(0) if m else chunk_text)[:MOCK_SUMMARY_CHARS]
        return f"[{directive.kind.value}] {first.strip()}"

    async def combine_summarize(self, partial_summaries: list[str], directive: LengthDirective) -> str:
        return "\n".join(partial_summaries)
