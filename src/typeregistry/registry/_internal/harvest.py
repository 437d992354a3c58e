"""Harvest pass: turn registered type declarations into definitions.

Runs once after collection. For every top-level type declaration of every
registered unit it:

1. Builds a TypeDefinition owned by the unit's package path.
2. Precomputes a schema when the declaration aliases a primitive directly
   (``type UserID int64``).
3. Offers the definition to the ambiguous name index, which keeps it, keeps an
   earlier copy from the same package, or evicts the key on collision.
4. Writes it into the owning package's local map, whatever the index did.
"""

from __future__ import annotations

from collections.abc import Callable

from typeregistry.core.errors import InternalError, LifecycleError
from typeregistry.core.logging import get_logger
from typeregistry.registry._internal.packages import IndexOutcome
from typeregistry.registry._internal.state import RegistryState
from typeregistry.registry.models import (
    GeneratedSchema,
    HarvestStats,
    SourceUnit,
    TypeDeclaration,
    TypeDefinition,
)
from typeregistry.registry.primitives import PrimitiveClassifier

log = get_logger("registry.harvest")


def build_definition(unit: SourceUnit, declaration: TypeDeclaration) -> TypeDefinition:
    return TypeDefinition(
        package_path=unit.package_path,
        file_path=unit.file_path,
        package_name=unit.package_name,
        name=declaration.name,
        type_expr=declaration.type_expr,
    )


def primitive_schema_for(
    definition: TypeDefinition,
    classifier: PrimitiveClassifier,
) -> GeneratedSchema | None:
    """Schema for a definition whose underlying type is a bare primitive name."""
    expr = definition.type_expr
    if not expr.is_bare_identifier or not classifier.is_primitive(expr.name):
        return None
    return GeneratedSchema(
        package_path=definition.package_path,
        name=definition.package_name,
        schema=classifier.canonical_schema(expr.name),
    )


def harvest_types(
    state: RegistryState,
    classifier: PrimitiveClassifier,
    on_progress: Callable[[int, int], None] | None = None,
) -> dict[TypeDefinition, GeneratedSchema]:
    """Run the harvest pass over every registered unit.

    Args:
        state: Registry state filled during collection
        classifier: Primitive type classifier
        on_progress: Optional callback(units_done, units_total)

    Returns:
        Schemas for declarations that directly alias a primitive type.

    Raises:
        LifecycleError: If the state carries no ambiguous name index.
    """
    index = state.index
    if index is None:
        raise LifecycleError.index_uninitialized()

    stats = HarvestStats()
    schemas: dict[TypeDefinition, GeneratedSchema] = {}
    total = len(state.store)

    for done, (file_path, unit) in enumerate(state.store.iterate(), start=1):
        stats.units_scanned += 1
        record = None
        if not unit.is_headless:
            record = state.packages.get(unit.package_path)
            if record is None:
                raise InternalError.unexpected(
                    "registered unit has no package record",
                    file_path=file_path,
                    package_path=unit.package_path,
                )

        for declaration in unit.parsed.type_declarations():
            definition = build_definition(unit, declaration)
            stats.definitions += 1

            schema = primitive_schema_for(definition, classifier)
            if schema is not None:
                schemas[definition] = schema
                stats.primitive_schemas += 1

            outcome = index.offer(definition)
            if outcome is IndexOutcome.INSERTED:
                stats.index_inserted += 1
            elif outcome is IndexOutcome.DUPLICATE:
                stats.index_duplicates += 1
            elif outcome is IndexOutcome.EVICTED:
                stats.index_evicted += 1
                log.debug(
                    "ambiguous_name_evicted",
                    key=definition.full_name,
                    package_path=definition.package_path,
                    file_path=file_path,
                )

            if record is not None:
                record.type_definitions[definition.name] = definition

        if on_progress:
            on_progress(done, total)

    state.harvested = True
    state.last_stats = stats
    log.info(
        "harvest_complete",
        units=stats.units_scanned,
        definitions=stats.definitions,
        indexed=len(index),
        evicted=stats.index_evicted,
        primitive_schemas=stats.primitive_schemas,
    )
    return schemas
