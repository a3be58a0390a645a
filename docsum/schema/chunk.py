"""Chunk record produced by the splitter and consumed read-only by the pipeline."""

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """One slice of the normalized document. `start`/`end` are character offsets into it."""

    model_config = ConfigDict(frozen=True)

    chunk_id: str = Field(..., description="Deterministic id from index and text")
    index: int = Field(..., ge=0, description="Zero-based position in the chunk sequence")
    text: str
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)

    @property
    def length(self) -> int:
        return len(self.text)
