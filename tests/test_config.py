"""Tests for settings and profile resolution."""

import pytest

from docsum.config.pipeline.models import PipelineConfig
from docsum.config.pipeline.static import load_pipeline_profiles, resolve_pipeline_config
from docsum.config.settings import get_settings
from docsum.config.summarizer.static import resolve_summarizer_config
from docsum.services.errors import ConfigurationError


class TestPipelineConfig:
    """Test suite for PipelineConfig defaults and profile resolution."""

    def test_defaults(self) -> None:
        config = PipelineConfig()

        assert config.max_chunk_size == 30000
        assert config.chunk_overlap == 1000
        assert config.rate_window_ms == 60000
        assert config.max_requests_per_window == 200
        assert config.max_tokens_per_window == 150000
        assert config.rate_limit_slack_ms == 1000
        assert config.tokens_per_character_estimate == 0.25
        assert config.token_estimator == "ratio"

    def test_default_profile_matches_model_defaults(self) -> None:
        assert resolve_pipeline_config("default") == PipelineConfig()

    def test_active_profile_resolves(self) -> None:
        assert resolve_pipeline_config("active") == resolve_pipeline_config("default")

    def test_all_profiles_are_valid(self) -> None:
        profiles = load_pipeline_profiles()

        assert {"default", "conservative", "sliding"} <= set(profiles)

    def test_inline_overrides_merge_over_profile(self) -> None:
        config = resolve_pipeline_config("default", {"max_chunk_size": 8000, "chunk_overlap": 200})

        assert config.max_chunk_size == 8000
        assert config.chunk_overlap == 200
        assert config.max_requests_per_window == 200

    def test_overlap_not_below_chunk_size_is_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            resolve_pipeline_config("default", {"max_chunk_size": 500, "chunk_overlap": 500})

    def test_unknown_profile_is_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown pipeline profile"):
            resolve_pipeline_config("turbo")


class TestSummarizerConfig:
    """Test suite for summarizer profile resolution."""

    def test_strategy_name_maps_to_default_profile(self) -> None:
        config = resolve_summarizer_config("openai")

        assert config.strategy == "openai"
        assert config.model == "gpt-4o-mini"

    def test_mock_profile(self) -> None:
        assert resolve_summarizer_config("mock").strategy == "mock"

    def test_inline_override(self) -> None:
        config = resolve_summarizer_config("bedrock_default", {"region": "eu-west-1"})

        assert config.strategy == "bedrock"
        assert config.region == "eu-west-1"

    def test_invalid_override_is_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            resolve_summarizer_config("openai_default", {"temperature": 5})

    def test_unknown_profile_is_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            resolve_summarizer_config("local_llama")


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUMMARIZER_PROFILE", "mock")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = get_settings()

    assert settings.summarizer_profile == "mock"
    assert settings.log_level == "DEBUG"
    assert settings.pipeline_profile == "default"
