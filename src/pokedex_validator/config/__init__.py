"""Configuration models and YAML loader."""

from pokedex_validator.config.loader import ConfigError, ConfigLoader, load_config
from pokedex_validator.config.models import (
    AppConfig,
    InputConfig,
    ReportConfig,
    ValidatorConfig,
)

__all__ = [
    "ConfigError",
    "ConfigLoader",
    "load_config",
    "AppConfig",
    "InputConfig",
    "ReportConfig",
    "ValidatorConfig",
]
