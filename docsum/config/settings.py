"""Environment-based application settings. Read-only; no business logic."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="docsum", description="Tool name")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Log level name")

    # Profiles (see config/summarizer and config/pipeline static.json)
    summarizer_profile: str = Field(default="openai_default", description="Summarizer profile name")
    pipeline_profile: str = Field(default="default", description="Pipeline profile name")

    # Input
    default_input_path: str = Field(default="sample.txt", description="File summarized when --file is omitted")

    # OpenAI (for summarizer strategy)
    openai_api_key: str = Field(default="", description="OpenAI API key for chat completions")

    # AWS Bedrock (for summarizer strategy)
    aws_region: str = Field(default="us-east-1", description="AWS region for Bedrock")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance. Use for process lifetime."""
    return Settings()
