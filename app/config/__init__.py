"""
Configuration loading for the app1 data API.

Configuration values are resolved using the following precedence:

1. Explicit keyword overrides passed to `load_config`
2. Environment variables (e.g., APP1_API_PREFIX)
3. `app1.toml` if present in the working directory
4. Built-in defaults
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import tomllib
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

__all__ = [
    "AppSettings",
    "ConfigError",
    "load_config",
]


DEFAULT_CONFIG_FILE = Path("app1.toml")

_TIMEZONES = {"utc", "local"}
_LOG_FORMATS = {"json", "console"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(RuntimeError):
    """Raised when configuration cannot be loaded or validated."""


class AppSettings(BaseModel):
    """Top-level settings shared by the server, logging and metrics layers."""

    app_name: str = Field("app1", description="Application identifier echoed in responses", min_length=1)
    api_prefix: str = Field("/api", description="Path prefix the data router is mounted under")
    timestamp_tz: str = Field("utc", description="Timezone used for response timestamps")
    log_level: str = Field("INFO", description="Root log level")
    log_format: str = Field("json", description="Log renderer: json or console")
    metrics_enabled: bool = Field(True, description="Expose /metrics and record request metrics")
    host: str = Field("127.0.0.1", description="Bind address for the uvicorn runner")
    port: int = Field(8000, description="Bind port for the uvicorn runner", ge=1, le=65535)

    model_config = ConfigDict(frozen=True)

    @field_validator("api_prefix")
    @classmethod
    def _normalize_prefix(cls, value: str) -> str:
        value = value.strip()
        if not value or value == "/":
            return ""
        return "/" + value.strip("/")

    @field_validator("timestamp_tz")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in _TIMEZONES:
            raise ValueError(f"timestamp_tz must be one of {sorted(_TIMEZONES)}")
        return normalized

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in _LOG_FORMATS:
            raise ValueError(f"log_format must be one of {sorted(_LOG_FORMATS)}")
        return normalized

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return normalized


def load_config(config_path: Optional[Path | str] = None, **overrides: Any) -> AppSettings:
    """
    Load settings from overrides/environment/file/defaults.

    Args:
        config_path: Optional explicit path to an `app1.toml` file.
        **overrides: Field values that take precedence over everything else.

    Returns:
        AppSettings populated with the resolved values.

    Raises:
        ConfigError: if the config path does not exist, parsing fails or a
            resolved value is invalid.
    """

    raw_data = _load_toml_data(config_path)
    server_data = raw_data.get("server", {})
    logging_data = raw_data.get("logging", {})
    defaults = AppSettings.model_construct()

    values: Dict[str, Any] = {
        "app_name": _env_or_value("APP1_APP_NAME", raw_data.get("app_name"), defaults.app_name),
        "api_prefix": _env_or_value("APP1_API_PREFIX", raw_data.get("api_prefix"), defaults.api_prefix),
        "timestamp_tz": _env_or_value(
            "APP1_TIMESTAMP_TZ", raw_data.get("timestamp_tz"), defaults.timestamp_tz
        ),
        "log_level": _env_or_value("APP1_LOG_LEVEL", logging_data.get("level"), defaults.log_level),
        "log_format": _env_or_value("APP1_LOG_FORMAT", logging_data.get("format"), defaults.log_format),
        "metrics_enabled": _env_bool(
            "APP1_METRICS_ENABLED", raw_data.get("metrics_enabled", defaults.metrics_enabled)
        ),
        "host": _env_or_value("APP1_HOST", server_data.get("host"), defaults.host),
        "port": _env_or_value("APP1_PORT", server_data.get("port"), defaults.port),
    }
    values.update(overrides)

    try:
        return AppSettings(**values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def _load_toml_data(config_path: Optional[Path | str]) -> Dict[str, Any]:
    """Load data from a TOML file if one can be resolved."""

    resolved = _resolve_config_path(config_path)
    if resolved is None:
        return {}

    if not resolved.exists():
        raise ConfigError(f"Configuration file not found: {resolved}")

    try:
        with resolved.open("rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Could not parse {resolved}: {exc}") from exc


def _resolve_config_path(config_path: Optional[Path | str]) -> Optional[Path]:
    """Resolve configuration path with environment fallback."""

    if config_path:
        return Path(config_path)

    env_path = os.getenv("APP1_CONFIG_FILE")
    if env_path:
        return Path(env_path)

    return DEFAULT_CONFIG_FILE if DEFAULT_CONFIG_FILE.exists() else None


def _env_bool(env_var: str, default: Any) -> bool:
    """Resolve boolean from environment with fallback."""

    value = os.getenv(env_var)
    if value is None:
        return bool(default)
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    raise ConfigError(f"Invalid boolean for {env_var}: {value}")


def _env_or_value(env_var: str, value: Any, default: Any) -> str:
    """Return environment variable value if set, otherwise fallback to provided/default values."""

    env_value = os.getenv(env_var)
    if env_value is not None:
        return env_value
    if value is not None:
        return str(value)
    return str(default)
