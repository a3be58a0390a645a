"""Static pipeline config loader. Read-only; no business logic."""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from docsum.config.pipeline.models import PipelineConfig
from docsum.services.errors import ConfigurationError

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, PipelineConfig] | None = None


def _load_raw_data() -> dict[str, Any]:
    """Load raw JSON; used to read both profiles and active."""
    raw = _config_path.read_text(encoding="utf-8")
    return json.loads(raw)


def load_pipeline_profiles() -> dict[str, PipelineConfig]:
    """Load pipeline profiles from static.json. Keys are profile names."""
    global _cached
    if _cached is not None:
        return _cached
    data = _load_raw_data()
    profiles = data.get("profiles", {})
    try:
        _cached = {k: PipelineConfig.model_validate(v) for k, v in profiles.items()}
    except ValidationError as e:
        raise ConfigurationError(f"Invalid pipeline profile in {_config_path.name}: {e}", cause=e) from e
    return _cached


def get_pipeline_config(profile_name: str) -> PipelineConfig | None:
    """Return pipeline config for the given profile, or None if missing."""
    return load_pipeline_profiles().get(profile_name)


def get_active_profile_name() -> str:
    """Return the profile name marked as active in static.json. Defaults to 'default' if missing."""
    return _load_raw_data().get("active", "default")


def resolve_pipeline_config(profile_name: str, inline_config: dict[str, Any] | None = None) -> PipelineConfig:
    """
    Resolve pipeline config by profile name and optional inline overrides.
    If profile_name is "active", use the profile marked as active in static.json.
    Inline overrides are merged over the profile and re-validated.
    Raises ConfigurationError for unknown profiles or invalid values.
    """
    name = get_active_profile_name() if profile_name == "active" else profile_name
    base = get_pipeline_config(name)
    if base is None:
        raise ConfigurationError(f"Unknown pipeline profile: {name!r}")
    if not inline_config:
        return base
    merged = {**base.model_dump(), **inline_config}
    try:
        return PipelineConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid pipeline configuration: {e}", cause=e) from e
