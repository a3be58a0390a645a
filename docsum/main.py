"""CLI entry: settings, logging, input file, pipeline run, and exit codes."""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from docsum.config.logging import configure_logging, get_logger
from docsum.config.pipeline.static import resolve_pipeline_config
from docsum.config.settings import get_settings
from docsum.config.summarizer.static import resolve_summarizer_config
from docsum.services.errors import ConfigurationError, InputError, SummarizationError
from docsum.services.pipeline import SummarizationOrchestrator
from docsum.services.summarizer.strategies import get_summarizer_strategy

logger = get_logger(__name__)

USAGE = """Usage:
  docsum --file=<path> --length=<short|medium|long|number>
Example:
  docsum --file=./sample.txt --length=short"""

app = typer.Typer(
    name="docsum",
    help="Summarize a large text file with rate-limited map-reduce LLM calls.",
    add_completion=False,
)


def read_input(path: Path) -> str:
    """Read the input file as UTF-8. Raises InputError when missing or unreadable."""
    if not path.is_file():
        raise InputError(f"File not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Could not read file {path}: {e}", cause=e) from e


def build_orchestrator(summarizer_profile: str, pipeline_profile: str) -> SummarizationOrchestrator:
    """Resolve both profiles and wire the summarizer strategy into an orchestrator."""
    summarizer_config = resolve_summarizer_config(summarizer_profile)
    summarizer = get_summarizer_strategy(summarizer_config)
    if summarizer is None:
        raise ConfigurationError(f"Unknown summarizer strategy: {summarizer_config.strategy!r}")
    pipeline_config = resolve_pipeline_config(pipeline_profile)
    return SummarizationOrchestrator(summarizer, pipeline_config)


@app.command()
def summarize(
    file: Optional[Path] = typer.Option(None, "--file", help="Text file to summarize."),
    length: str = typer.Option("medium", "--length", help="short|brief|medium|normal|long|detailed|<chars>"),
    profile: Optional[str] = typer.Option(None, "--profile", help="Summarizer profile (openai_default, bedrock_default, mock)."),
    pipeline_profile: Optional[str] = typer.Option(None, "--pipeline-profile", help="Chunking and rate-limit profile."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override LOG_LEVEL."),
) -> None:
    """Summarize a text file and print the result."""
    settings = get_settings()
    configure_logging(log_level or ("DEBUG" if settings.debug else None))
    path = file or Path(settings.default_input_path)
    logger.info("Starting %s", settings.app_name, extra={"file": str(path), "length": length})

    try:
        raw_text = read_input(path)
        orchestrator = build_orchestrator(
            profile or settings.summarizer_profile,
            pipeline_profile or settings.pipeline_profile,
        )
        summary = asyncio.run(orchestrator.run(raw_text, length))
    except ConfigurationError as e:
        typer.secho(f"Configuration error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)
    except InputError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    except SummarizationError as e:
        typer.secho(f"Summarization failed ({e.describe()})", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo("=== Summary ===")
    typer.echo(summary)
    typer.echo("")
    typer.echo(USAGE)


if __name__ == "__main__":
    app()
