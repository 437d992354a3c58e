"""typeregistry - cross-package type definition registry and name resolver.

Finds every named type declaration in a set of parsed source files and
resolves bare or package-qualified type references back to their
declarations, following import aliases, blank imports and dot-imports.
"""

from typeregistry.core.errors import ConfigError, LifecycleError, TypeRegistryError
from typeregistry.registry import (
    GeneratedSchema,
    GoPrimitiveClassifier,
    ImportSpec,
    OtherDeclaration,
    ParsedFile,
    PrimitiveClassifier,
    SourceUnit,
    TypeDeclaration,
    TypeDefinition,
    TypeExpr,
    TypeRegistry,
)

__version__ = "0.1.0"

__all__ = [
    "TypeRegistry",
    "ParsedFile",
    "ImportSpec",
    "TypeDeclaration",
    "OtherDeclaration",
    "TypeExpr",
    "SourceUnit",
    "TypeDefinition",
    "GeneratedSchema",
    "PrimitiveClassifier",
    "GoPrimitiveClassifier",
    "TypeRegistryError",
    "ConfigError",
    "LifecycleError",
]
