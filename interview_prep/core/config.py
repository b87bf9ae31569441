"""Application configuration using Pydantic Settings.

Configuration is environment-aware:
- APP_ENV determines which .env file to load
- Supports: development, testing, staging, production
- Each environment has its own .env.{environment} file
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Determine which environment to load (default: development)
APP_ENV = os.getenv("APP_ENV", "development")

# Project root (so .env resolution doesn't depend on current working directory)
PROJECT_ROOT = Path(__file__).resolve().parents[2]

ENV_FILE_MAP = {
    "development": ".env.development",
    "testing": ".env.testing",
    "staging": ".env.staging",
    "production": ".env.production",
}

_env_filename = ENV_FILE_MAP.get(APP_ENV, ".env.development")
_env_path = PROJECT_ROOT / _env_filename

# Only load from file if it exists (production might inject via env vars only)
_env_file = str(_env_path) if _env_path.is_file() else None


# Nested BaseSettings don't inherit env_file, so populate os.environ first
if _env_file:
    from dotenv import load_dotenv
    load_dotenv(_env_file, override=True)


def _build_llm_settings() -> "LLMSettings":
    """Build LLM settings from environment.

    Static type checkers treat required fields as required constructor
    arguments, which is not how BaseSettings is intended to be used.
    """

    return LLMSettings()  # type: ignore[call-arg]


def _build_app_settings() -> "AppSettings":
    return AppSettings()  # type: ignore[call-arg]


def _build_log_settings() -> "LogSettings":
    return LogSettings()  # type: ignore[call-arg]


class LLMSettings(BaseSettings):
    """LLM provider configuration used for answer scoring."""

    provider: str = Field(
        "openai",
        description="LLM provider name (e.g., openai)",
    )
    model: str = Field(
        "gpt-4o",
        description="Model name used to score answers",
    )
    api_key: str | None = Field(
        None,
        description="API key for cloud providers (required for OpenAI)",
    )
    base_url: str | None = Field(
        None,
        description="Custom API endpoint (e.g., an OpenAI-compatible proxy)",
    )
    timeout_seconds: float = Field(
        45.0,
        description="Request timeout in seconds",
    )
    temperature: float = Field(
        0.3,
        description="Sampling temperature for evaluation calls",
        ge=0.0,
        le=2.0,
    )

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        case_sensitive=False,
    )


class AppSettings(BaseSettings):
    """Application-wide configuration."""

    debug: bool = Field(
        False,
        description="Enable debug mode with verbose logging",
    )
    api_key_required: bool = Field(
        True,
        description="Whether API key authentication is required",
    )
    api_keys: str | None = Field(
        None,
        description="Comma-separated list of valid API keys for authentication",
    )
    seed_questions: bool = Field(
        True,
        description="Load the built-in question catalog when no repository is supplied",
    )
    default_time_estimate_minutes: int = Field(
        10,
        description="Time estimate stored for questions created without one",
        ge=1,
        le=480,
    )

    rate_limit_enabled: bool = Field(
        True,
        description="Enable per-caller rate limiting",
    )
    rate_limit_window_seconds: int = Field(
        60,
        description="Window size in seconds shared by all rate limit classes",
        ge=1,
    )
    rate_limit_evaluate_requests: int = Field(
        10,
        description="Requests per window for AI-backed evaluation",
        ge=1,
    )
    rate_limit_api_requests: int = Field(
        60,
        description="Requests per window for mutating API calls",
        ge=1,
    )
    rate_limit_read_requests: int = Field(
        100,
        description="Requests per window for read-only calls",
        ge=1,
    )
    rate_limit_cleanup_interval_seconds: int = Field(
        300,
        description="Minimum seconds between sweeps of expired rate limit entries",
        ge=0,
    )
    rate_limit_include_headers: bool = Field(
        True,
        description="Include X-RateLimit-* and Retry-After headers when throttling",
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        case_sensitive=False,
    )


class LogSettings(BaseSettings):
    """Logging output configuration."""

    level: str = Field("INFO", description="Root log level")
    format: str = Field("json", description="Log format: json or plain")
    output: str = Field("stdout", description="Log destination: stdout or file")
    file_path: str | None = Field(None, description="Log file path when output=file")
    max_bytes: int = Field(
        10 * 1024 * 1024,
        description="Rotate the log file after this many bytes (0 disables rotation)",
    )
    backup_count: int = Field(5, description="Rotated log files to keep")
    request_id_header: str = Field(
        "X-Request-ID",
        description="Header used to read and propagate the request id",
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        case_sensitive=False,
    )


class Settings(BaseSettings):
    """Main application settings container.

    Automatically loads from the appropriate .env.{APP_ENV} file.
    Raises validation errors on startup if settings are invalid.
    """

    app_env: str = APP_ENV
    llm: LLMSettings = Field(default_factory=_build_llm_settings)
    app: AppSettings = Field(default_factory=_build_app_settings)
    log: LogSettings = Field(default_factory=_build_log_settings)

    model_config = SettingsConfigDict(
        case_sensitive=False,
    )


# Nested settings are created via default_factory so env loading works.
settings = Settings()
