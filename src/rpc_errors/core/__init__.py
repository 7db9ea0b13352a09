"""Configuration."""

from .config import TranslatorConfig, load_config

__all__ = [
    "TranslatorConfig",
    "load_config",
]
