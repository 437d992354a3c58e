"""Core module exports."""

from typeregistry.core.errors import (
    ConfigError,
    ErrorCode,
    InternalError,
    LifecycleError,
    TypeRegistryError,
)
from typeregistry.core.logging import configure_logging, get_log_file_path, get_logger

__all__ = [
    # Errors
    "TypeRegistryError",
    "ConfigError",
    "ErrorCode",
    "InternalError",
    "LifecycleError",
    # Logging
    "configure_logging",
    "get_log_file_path",
    "get_logger",
]
