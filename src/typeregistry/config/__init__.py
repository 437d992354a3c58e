"""Config module exports."""

from typeregistry.config.loader import load_config
from typeregistry.config.models import (
    LoggingConfig,
    LogOutputConfig,
    RegistryConfig,
    TypeRegistryConfig,
)

__all__ = [
    "load_config",
    "TypeRegistryConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "RegistryConfig",
]
