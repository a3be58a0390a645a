"""Amazon Bedrock summarizer strategy (Converse API)."""

import asyncio
from typing import Any

import boto3
import botocore.exceptions
from botocore.config import Config

from docsum.config.settings import get_settings
from docsum.config.summarizer.models import SummarizerConfig
from docsum.schema.directive import LengthDirective
from docsum.services.summarizer.base import BaseSummarizerStrategy
from docsum.services.summarizer.prompts import render_combine_prompt, render_map_prompt


class BedrockSummarizerStrategy(BaseSummarizerStrategy):
    """
    Amazon Bedrock text generation through the model-agnostic Converse API.
    Uses IAM credentials (profile/env/instance). Region from config.region or
    settings.aws_region. Single attempt per call; boto3 runs in a worker thread.
    """

    def __init__(self, config: SummarizerConfig, client: Any | None = None):
        super().__init__(config)
        self._client = client

    @property
    def strategy_name(self) -> str:
        return "bedrock"

    def _get_client(self) -> Any:
        if self._client is None:
            region = self.config.region or get_settings().aws_region or None
            client_config = Config(
                retries={"total_max_attempts": 1, "mode": "standard"},
                read_timeout=self.config.timeout_seconds or 60,
            )
            self._client = boto3.client("bedrock-runtime", region_name=region, config=client_config)
        return self._client

    def _converse(self, prompt: str) -> str:
        inference: dict[str, Any] = {"temperature": self.config.temperature}
        if self.config.max_output_tokens is not None:
            inference["maxTokens"] = self.config.max_output_tokens
        try:
            response = self._get_client().converse(
                modelId=self.config.model,
                messages=[{"role": "user", "content": [{"text": prompt}]}],
                inferenceConfig=inference,
            )
        except botocore.exceptions.ClientError as e:
            raise ValueError(f"Bedrock converse failed: {e}") from e
        blocks = response.get("output", {}).get("message", {}).get("content", [])
        text = "".join(b.get("text", "") for b in blocks)
        if not text:
            raise ValueError("Bedrock response contained no text")
        return text.strip()

    async def map_summarize(self, chunk_text: str, directive: LengthDirective) -> str:
        return await asyncio.to_thread(self._converse, render_map_prompt(chunk_text, directive))

    async def combine_summarize(self, partial_summaries: list[str], directive: LengthDirective) -> str:
        return await asyncio.to_thread(self._converse, render_combine_prompt(partial_summaries, directive))
