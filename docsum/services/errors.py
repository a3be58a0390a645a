"""Error taxonomy for the summarization pipeline. Raised by services; converted to exit codes by the CLI."""


class DocsumError(Exception):
    """Base error. Keeps the underlying exception (if any) as `cause`."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class ConfigurationError(DocsumError):
    """Invalid configuration: splitter parameters, rate ceilings, unknown profiles or strategies."""


class InputError(DocsumError):
    """Missing or unreadable input file, or no processable text after normalization."""


class SummarizationError(DocsumError):
    """A summarizer call failed during the map or combine phase. Never retried."""

    def __init__(
        self,
        message: str,
        phase: str,
        chunk_index: int | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause=cause)
        self.phase = phase
        self.chunk_index = chunk_index

    def describe(self) -> str:
        """Human-readable context: phase and (for map) chunk position."""
        if self.chunk_index is not None:
            return f"{self.phase} phase, chunk {self.chunk_index + 1}: {self}"
        return f"{self.phase} phase: {self}"
