"""Base summarizer strategy and contract for map and combine calls."""

from abc import ABC, abstractmethod

from docsum.config.summarizer.models import SummarizerConfig
from docsum.schema.directive import LengthDirective


class BaseSummarizerStrategy(ABC):
    """
    Abstract summarizer. One call per method invocation, no internal retries; transport and
    service errors propagate to the caller. Rate admission is the caller's responsibility.
    """

    def __init__(self, config: SummarizerConfig):
        self.config = config

    @abstractmethod
    async def map_summarize(self, chunk_text: str, directive: LengthDirective) -> str:
        """Summarize one chunk, shaped by the length directive."""
        ...

    @abstractmethod
    async def combine_summarize(self, partial_summaries: list[str], directive: LengthDirective) -> str:
        """Combine ordered partial summaries into the final summary."""
        ...

    @property
    @abstractmethod
    def strategy_name(self) -> str:
        """Strategy identifier, e.g. 'openai', 'bedrock'."""
        ...
