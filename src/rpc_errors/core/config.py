"""Configuration loading and validation."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class TranslatorConfig(BaseSettings):
    """Error translation configuration."""

    model_config = SettingsConfigDict(env_prefix="RPC_ERRORS_", extra="ignore")

    catalog_path: Path = Field(default=Path("config/errors.yaml"))
    default_language: str = "en"
    log_level: str = "WARNING"

    @field_validator('default_language')
    @classmethod
    def validate_default_language(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("default_language must not be empty")
        return v.strip()

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got '{v}'"
            )
        return level


def load_config(config_path: Path = Path("config/rpc-errors.yaml")) -> TranslatorConfig:
    """Load translator configuration from a YAML file.

    Settings may sit under an ``rpc_errors:`` key or at the top level.
    Environment variables (``RPC_ERRORS_*``) fill anything the file omits.
    """
    if not config_path.exists():
        logger.warning(
            f"Config file not found: {config_path}. Using default configuration."
        )
        return TranslatorConfig()

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    data = data.get("rpc_errors", data) or {}
    data = _expand_env_vars(data)
    return TranslatorConfig(**data)


def _expand_env_vars(data: Any, _path: str = "") -> Any:
    """Recursively expand ``${VAR}`` string values from the environment.

    Args:
        data: Config data to process
        _path: Internal tracking for warnings (e.g., "catalog_path")
    """
    if isinstance(data, dict):
        return {k: _expand_env_vars(v, f"{_path}.{k}" if _path else k) for k, v in data.items()}
    elif isinstance(data, list):
        return [_expand_env_vars(item, f"{_path}[{i}]") for i, item in enumerate(data)]
    elif isinstance(data, str) and data.startswith("${") and data.endswith("}"):
        env_var = data[2:-1]
        value = os.environ.get(env_var)
        if value is None:
            logger.warning(
                f"Environment variable '{env_var}' not set (referenced at config path: {_path or 'root'}). "
                f"The literal string '{data}' will be used."
            )
            return data
        return value
    return data
