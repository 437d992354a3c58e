"""Internal registry components. Public API lives in typeregistry.registry.ops."""

from typeregistry.registry._internal.harvest import harvest_types
from typeregistry.registry._internal.packages import (
    AmbiguousNameIndex,
    IndexOutcome,
    PackageRegistry,
)
from typeregistry.registry._internal.resolver import TypeResolver, is_alias_package_name
from typeregistry.registry._internal.state import RegistryState
from typeregistry.registry._internal.store import SourceUnitStore, register_unit

__all__ = [
    "AmbiguousNameIndex",
    "IndexOutcome",
    "PackageRegistry",
    "RegistryState",
    "SourceUnitStore",
    "TypeResolver",
    "harvest_types",
    "is_alias_package_name",
    "register_unit",
]
