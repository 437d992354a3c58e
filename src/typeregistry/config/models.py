"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (TYPEREGISTRY__SECTION__KEY)
3. Repo YAML (.typeregistry/config.yaml)
4. Global YAML (~/.config/typeregistry/config.yaml)
5. Built-in defaults (this file)

Examples:
    TYPEREGISTRY__LOGGING__LEVEL=DEBUG
    TYPEREGISTRY__REGISTRY__PSEUDO_PACKAGE_PREFIX=internal/
    TYPEREGISTRY__REGISTRY__STRICT_LIFECYCLE=true
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
SchemaType = Literal["integer", "number", "boolean", "string"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        TYPEREGISTRY__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every evicted index key.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class RegistryConfig(BaseModel):
    """Type registry and resolver configuration.

    Env vars:
        TYPEREGISTRY__REGISTRY__PSEUDO_PACKAGE_PREFIX: Prefix of the reserved pseudo-package
        TYPEREGISTRY__REGISTRY__STRICT_LIFECYCLE: Fail queries issued before harvest
    """

    pseudo_package_prefix: str = Field(
        default="pkg/",
        description="Package path prefix tried for a qualifier no import explains "
        "(`models.User` -> package `pkg/models`).",
    )
    strict_lifecycle: bool = Field(
        default=False,
        description="Raise instead of warning when resolve() runs before harvest().",
    )
    extra_primitives: list[str] = Field(
        default_factory=list,
        description="Additional type names the default classifier treats as primitive.",
    )
    primitive_schema_types: dict[str, SchemaType] = Field(
        default_factory=dict,
        description="Canonical schema type for each extra primitive. Defaults to 'string'.",
    )

    @field_validator("pseudo_package_prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        if not v.endswith("/"):
            raise ValueError(f"Pseudo-package prefix must end with '/': {v!r}")
        return v

    @field_validator("extra_primitives")
    @classmethod
    def validate_extra_primitives(cls, v: list[str]) -> list[str]:
        for name in v:
            if not name or "." in name:
                raise ValueError(f"Primitive names must be bare identifiers: {name!r}")
        return v


class TypeRegistryConfig(BaseModel):
    """Root configuration.

    All settings can be configured via:
    1. Environment variables: TYPEREGISTRY__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
