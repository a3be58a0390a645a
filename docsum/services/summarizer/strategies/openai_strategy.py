"""OpenAI chat completions summarizer strategy."""

from typing import Any

from openai import AsyncOpenAI

from docsum.config.settings import get_settings
from docsum.config.summarizer.models import SummarizerConfig
from docsum.schema.directive import LengthDirective
from docsum.services.errors import ConfigurationError
from docsum.services.summarizer.base import BaseSummarizerStrategy
from docsum.services.summarizer.prompts import render_combine_prompt, render_map_prompt


class OpenAISummarizerStrategy(BaseSummarizerStrategy):
    """
    OpenAI Chat Completions API. Models: gpt-4o-mini, gpt-4o, etc.
    API key from config.api_key or settings.openai_api_key. Client retries are disabled.
    """

    def __init__(self, config: SummarizerConfig, client: AsyncOpenAI | None = None):
        super().__init__(config)
        self._client = client

    @property
    def strategy_name(self) -> str:
        return "openai"

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            api_key = self.config.api_key or get_settings().openai_api_key or None
            if not api_key:
                raise ConfigurationError("OpenAI API key is required (set in config or OPENAI_API_KEY)")
            kwargs: dict[str, Any] = {"api_key": api_key, "max_retries": 0}
            if self.config.timeout_seconds is not None:
                kwargs["timeout"] = self.config.timeout_seconds
            self._client = AsyncOpenAI(**kwargs)
        return self._client

    async def _complete(self, prompt: str) -> str:
        params: dict[str, Any] = {
            "model": self.config.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.config.temperature,
        }
        if self.config.max_output_tokens is not None:
            params["max_tokens"] = self.config.max_output_tokens
        response = await self._get_client().chat.completions.create(**params)
        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise ValueError("OpenAI response contained no text")
        return content.strip()

    async def map_summarize(self, chunk_text: str, directive: LengthDirective) -> str:
        return await self._complete(render_map_prompt(chunk_text, directive))

    async def combine_summarize(self, partial_summaries: list[str], directive: LengthDirective) -> str:
        return await self._complete(render_combine_prompt(partial_summaries, directive))
