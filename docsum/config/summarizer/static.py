"""Static summarizer config loader. Read-only; no business logic."""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from docsum.config.summarizer.models import SummarizerConfig
from docsum.services.errors import ConfigurationError

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, SummarizerConfig] | None = None

_STRATEGY_TO_PROFILE: dict[str, str] = {
    "openai": "openai_default",
    "bedrock": "bedrock_default",
}


def load_summarizer_profiles() -> dict[str, SummarizerConfig]:
    """Load summarizer profiles from static.json. Keys are profile names."""
    global _cached
    if _cached is not None:
        return _cached
    data = json.loads(_config_path.read_text(encoding="utf-8"))
    _cached = {k: SummarizerConfig.model_validate(v) for k, v in data.get("profiles", {}).items()}
    return _cached


def get_summarizer_config(profile_name: str) -> SummarizerConfig | None:
    """Return summarizer config for the given profile, or None if missing."""
    return load_summarizer_profiles().get(profile_name)


def resolve_summarizer_config(
    profile_name: str,
    inline_config: dict[str, Any] | None = None,
) -> SummarizerConfig:
    """
    Resolve summarizer config by profile name and optional inline overrides.
    Strategy names 'openai' and 'bedrock' map to openai_default / bedrock_default.
    Raises ConfigurationError if the profile is missing or the merged config is invalid.
    """
    name = _STRATEGY_TO_PROFILE.get(profile_name, profile_name)
    base = get_summarizer_config(name)
    if base is None:
        raise ConfigurationError(f"Unknown summarizer profile: {name!r}")
    if not inline_config:
        return base
    merged = {**base.model_dump(), **inline_config}
    try:
        return SummarizerConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid summarizer configuration: {e}", cause=e) from e
