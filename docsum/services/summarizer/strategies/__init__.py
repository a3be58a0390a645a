"""Summarizer strategy implementations."""

from docsum.config.summarizer.models import SummarizerConfig
from docsum.services.summarizer.base import BaseSummarizerStrategy
from docsum.services.summarizer.strategies.bedrock_strategy import BedrockSummarizerStrategy
from docsum.services.summarizer.strategies.mock_strategy import MockSummarizerStrategy
from docsum.services.summarizer.strategies.openai_strategy import OpenAISummarizerStrategy

STRATEGY_REGISTRY: dict[str, type[BaseSummarizerStrategy]] = {
    "openai": OpenAISummarizerStrategy,
    "bedrock": BedrockSummarizerStrategy,
    "mock": MockSummarizerStrategy,
}


def get_summarizer_strategy(config: SummarizerConfig) -> BaseSummarizerStrategy | None:
    """Return an instance of the summarizer strategy named by config.strategy, or None."""
    cls = STRATEGY_REGISTRY.get(config.strategy)
    if cls is None:
        return None
    return cls(config)
