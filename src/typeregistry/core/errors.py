"""Error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Registry lifecycle
- 9xxx: Internal

A reference that cannot be resolved is not an error: the resolver returns
None and the caller decides what a miss means.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Registry (3xxx)
    REGISTRY_INDEX_UNINITIALIZED = 3001
    REGISTRY_NOT_HARVESTED = 3002

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class TypeRegistryError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(TypeRegistryError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class LifecycleError(TypeRegistryError):
    """Registry used out of order (Collection -> Harvest -> Query).

    Always fatal. Nothing in the registry retries after one of these.
    """

    @classmethod
    def index_uninitialized(cls) -> "LifecycleError":
        return cls(
            code=ErrorCode.REGISTRY_INDEX_UNINITIALIZED,
            message="Could not harvest types: the ambiguous-name index was never initialized",
        )

    @classmethod
    def not_harvested(cls, reference: str) -> "LifecycleError":
        return cls(
            code=ErrorCode.REGISTRY_NOT_HARVESTED,
            message=f"Cannot resolve '{reference}' before the harvest pass has run",
            details={"reference": reference},
        )


class InternalError(TypeRegistryError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
