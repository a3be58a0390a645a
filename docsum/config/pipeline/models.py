"""Pipeline configuration models. Read-only; no business logic."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator


class PipelineConfig(BaseModel):
    """Chunking, rate-limit and token-estimate parameters for one summarization run."""

    max_chunk_size: int = Field(default=30000, ge=1, description="Max characters per chunk")
    chunk_overlap: int = Field(default=1000, ge=0, description="Characters shared by adjacent chunks")
    chunk_strategy: str = Field(default="recursive", description="recursive|sliding_window")
    boundary_lookback: int | None = Field(
        default=None, ge=0, description="Chars before the limit searched for a natural break"
    )

    rate_window_ms: int = Field(default=60000, ge=1, description="Sliding window duration (ms)")
    max_requests_per_window: int = Field(default=200, ge=1)
    max_tokens_per_window: int = Field(default=150000, ge=1)
    rate_limit_slack_ms: int = Field(default=1000, ge=0, description="Added to every computed wait (ms)")

    tokens_per_character_estimate: float = Field(default=0.25, gt=0, le=1)
    token_estimator: Literal["ratio", "tiktoken"] = Field(default="ratio")

    @model_validator(mode="after")
    def _overlap_below_chunk_size(self) -> "PipelineConfig":
        if self.chunk_overlap >= self.max_chunk_size:
            raise ValueError(
                f"chunk_overlap ({self.chunk_overlap}) must be smaller than max_chunk_size ({self.max_chunk_size})"
            )
        return self
