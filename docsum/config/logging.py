"""Structured logging setup. Read-only config; no business logic."""

import logging
import sys

from docsum.config.settings import get_settings


def configure_logging(level_name: str | None = None) -> None:
    """Configure logging for the CLI. Logs go to stderr so stdout carries only the summary."""
    name = level_name or get_settings().log_level
    level = getattr(logging, name.upper(), logging.INFO)

    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt = "%Y-%m-%dT%H:%M:%S"

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    # Reduce noise from third parties
    for noisy in ("urllib3", "httpx", "openai", "botocore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)
