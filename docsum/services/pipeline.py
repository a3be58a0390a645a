"""
Summarization pipeline: normalize → split → map each chunk (admit, then call) → combine
(admit, then call) → final text. Calls are strictly sequential: one outstanding remote call
at most, and the combine call only after every map call has returned.
"""

import time
from dataclasses import dataclass, field
from typing import Callable

from docsum.config.logging import get_logger
from docsum.config.pipeline.models import PipelineConfig
from docsum.schema.chunk import Chunk
from docsum.schema.directive import LengthDirective
from docsum.services.chunking.chunker import split_text
from docsum.services.chunking.cleaners import normalize_text
from docsum.services.chunking.tokenizer import count_tokens, estimate_tokens_from_chars
from docsum.services.errors import DocsumError, InputError, SummarizationError
from docsum.services.progress.tracker import ProgressTracker
from docsum.services.ratelimit.governor import RateGovernor
from docsum.services.summarizer.base import BaseSummarizerStrategy
from docsum.services.summarizer.directive import resolve_directive
from docsum.utils.ids import generate_run_id

logger = get_logger(__name__)


@dataclass
class PipelineState:
    """Per-run state. partial_summaries is in chunk order; final_summary is set once."""

    chunk_index: int = 0
    partial_summaries: list[str] = field(default_factory=list)
    final_summary: str | None = None


class SummarizationOrchestrator:
    """Runs one document through the rate-governed map-reduce summarization."""

    def __init__(
        self,
        summarizer: BaseSummarizerStrategy,
        config: PipelineConfig | None = None,
        governor: RateGovernor | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.summarizer = summarizer
        self.config = config or PipelineConfig()
        self.governor = governor or RateGovernor.from_config(self.config)
        self._clock = clock

    def estimate_tokens(self, text: str) -> int:
        """Token cost charged to the governor for a call over `text`."""
        if self.config.token_estimator == "tiktoken":
            return count_tokens(text)
        return estimate_tokens_from_chars(self.config.max_chunk_size, self.config.tokens_per_character_estimate)

    async def _map(self, chunk: Chunk, directive: LengthDirective, run_id: str) -> str:
        waited = await self.governor.admit(self.estimate_tokens(chunk.text))
        logger.debug(
            "Dispatching map call",
            extra={"run_id": run_id, "chunk_id": chunk.chunk_id, "chunk_index": chunk.index, "waited_ms": waited},
        )
        try:
            return await self.summarizer.map_summarize(chunk.text, directive)
        except DocsumError:
            raise
        except Exception as e:
            raise SummarizationError(
                f"map call failed: {type(e).__name__}: {e}", phase="map", chunk_index=chunk.index, cause=e
            ) from e

    async def _combine(self, partials: list[str], directive: LengthDirective, run_id: str) -> str:
        waited = await self.governor.admit(self.estimate_tokens("\n".join(partials)))
        logger.debug("Dispatching combine call", extra={"run_id": run_id, "waited_ms": waited})
        try:
            return await self.summarizer.combine_summarize(partials, directive)
        except DocsumError:
            raise
        except Exception as e:
            raise SummarizationError(
                f"combine call failed: {type(e).__name__}: {e}", phase="combine", cause=e
            ) from e

    async def run(self, raw_text: str, length_arg: str = "medium") -> str:
        """
        Summarize raw_text. Raises InputError when nothing remains after normalization (no calls
        are made) and SummarizationError when any map or combine call fails.
        """
        run_id = generate_run_id()
        text = normalize_text(raw_text)
        if not text:
            raise InputError("No processable text found after normalization")

        directive = resolve_directive(length_arg)
        chunks = split_text(
            text,
            self.config.max_chunk_size,
            self.config.chunk_overlap,
            strategy=self.config.chunk_strategy,
            boundary_lookback=self.config.boundary_lookback,
        )
        tracker = ProgressTracker(len(chunks) + 2, clock=self._clock)
        logger.info(
            "Summarizing %d characters in %d chunks (%d requests expected), length=%s",
            len(text),
            len(chunks),
            len(chunks) + 1,
            directive.kind.value,
            extra={"run_id": run_id, "summarizer": self.summarizer.strategy_name},
        )
        tracker.step("Setup complete")

        state = PipelineState()
        for chunk in chunks:
            state.chunk_index = chunk.index
            state.partial_summaries.append(await self._map(chunk, directive, run_id))
            tracker.step(f"Chunk {chunk.index + 1}/{len(chunks)} summarized")

        state.final_summary = await self._combine(state.partial_summaries, directive, run_id)
        tracker.step("Processing complete")
        tracker.complete()
        return state.final_summary
