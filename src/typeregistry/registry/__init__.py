"""Registry module - cross-package type definitions and name resolution.

Public API is in `typeregistry.registry.ops`:
- TypeRegistry: collection, harvest and query over one registry state

Data model is in `typeregistry.registry.models`; internal components are in
`typeregistry.registry._internal/`.
"""

from typeregistry.registry._internal import RegistryState, is_alias_package_name
from typeregistry.registry.models import (
    Declaration,
    GeneratedSchema,
    HarvestStats,
    ImportSpec,
    OtherDeclaration,
    PackageRecord,
    ParsedFile,
    PrimitiveSchema,
    SourceUnit,
    TypeDeclaration,
    TypeDefinition,
    TypeExpr,
    TypeExprKind,
    full_type_name,
)
from typeregistry.registry.ops import TypeRegistry
from typeregistry.registry.primitives import GoPrimitiveClassifier, PrimitiveClassifier

__all__ = [
    # Public API (ops.py)
    "TypeRegistry",
    "RegistryState",
    "is_alias_package_name",
    # Classifier
    "PrimitiveClassifier",
    "GoPrimitiveClassifier",
    # Parsed input
    "ImportSpec",
    "TypeExpr",
    "TypeExprKind",
    "TypeDeclaration",
    "OtherDeclaration",
    "Declaration",
    "ParsedFile",
    # Registry model
    "SourceUnit",
    "TypeDefinition",
    "PackageRecord",
    "PrimitiveSchema",
    "GeneratedSchema",
    "HarvestStats",
    "full_type_name",
]
