"""Summarizer configuration models. Read-only; no business logic."""

from pydantic import BaseModel, Field


class SummarizerConfig(BaseModel):
    """Summarizer strategy and model parameters."""

    strategy: str = Field(..., description="openai|bedrock|mock")
    model: str = Field(..., description="Model identifier")
    temperature: float = Field(default=0.1, ge=0, le=2)
    max_output_tokens: int | None = Field(default=None, ge=1, description="Cap on generated tokens per call")
    timeout_seconds: float | None = Field(default=None, gt=0, description="Per-call timeout passed to the client")
    api_key: str | None = Field(default=None, description="OpenAI API key when strategy is openai")
    region: str | None = Field(default=None, description="AWS region when strategy is bedrock")
