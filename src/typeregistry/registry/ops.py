"""Public entry point of the type registry.

TypeRegistry owns one RegistryState and walks it through its three phases:

    Collection: register_unit() for every parsed file, any order
    Harvest:    harvest() once, building package maps and the name index
    Query:      resolve() as often as needed, read-only

Example::

    registry = TypeRegistry()
    models = registry.register_unit("app/models", "app/models/user.go", parsed_user)
    handlers = registry.register_unit("app/handlers", "app/handlers/h.go", parsed_handlers)
    schemas = registry.harvest()
    user = registry.resolve("models.User", handlers)
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from typeregistry.config.models import RegistryConfig
from typeregistry.registry._internal import (
    RegistryState,
    TypeResolver,
    harvest_types,
    register_unit,
)
from typeregistry.registry.models import (
    GeneratedSchema,
    HarvestStats,
    PackageRecord,
    ParsedFile,
    SourceUnit,
    TypeDefinition,
)
from typeregistry.registry.primitives import GoPrimitiveClassifier, PrimitiveClassifier


class TypeRegistry:
    """Cross-package type definition registry and resolver.

    Not thread-safe: hosts that parse files concurrently must serialize
    every register_unit() call and finish harvest() before querying.
    """

    def __init__(
        self,
        config: RegistryConfig | None = None,
        classifier: PrimitiveClassifier | None = None,
        state: RegistryState | None = None,
    ) -> None:
        self._config = config or RegistryConfig()
        self._classifier = classifier or GoPrimitiveClassifier.from_config(self._config)
        self._state = state if state is not None else RegistryState()
        self._resolver = TypeResolver(
            self._state,
            self._classifier,
            pseudo_package_prefix=self._config.pseudo_package_prefix,
            strict_lifecycle=self._config.strict_lifecycle,
        )

    @property
    def state(self) -> RegistryState:
        return self._state

    @property
    def classifier(self) -> PrimitiveClassifier:
        return self._classifier

    @property
    def last_stats(self) -> HarvestStats | None:
        return self._state.last_stats

    # -----------------------------------------------------------------
    # Collection
    # -----------------------------------------------------------------

    def register_unit(self, package_path: str, file_path: str, parsed: ParsedFile) -> SourceUnit:
        """Collect a parsed file. Re-registering a file path replaces it."""
        return register_unit(self._state.store, self._state.packages, package_path, file_path, parsed)

    def iterate_units(self) -> Iterator[tuple[str, SourceUnit]]:
        """Yield (file_path, unit) for every registered file, in no set order."""
        return self._state.store.iterate()

    def range_units(self, handler: Callable[[str, SourceUnit], None]) -> None:
        """Call ``handler(file_path, unit)`` per file. Its first exception propagates."""
        self._state.store.range(handler)

    # -----------------------------------------------------------------
    # Harvest
    # -----------------------------------------------------------------

    def harvest(
        self,
        on_progress: Callable[[int, int], None] | None = None,
    ) -> dict[TypeDefinition, GeneratedSchema]:
        """Index every registered type declaration.

        Returns:
            Precomputed schemas for types declared as primitive aliases.

        Raises:
            LifecycleError: If the state has no ambiguous name index.
        """
        return harvest_types(self._state, self._classifier, on_progress)

    # -----------------------------------------------------------------
    # Query
    # -----------------------------------------------------------------

    def resolve(self, reference: str, context: SourceUnit | None) -> TypeDefinition | None:
        """Resolve a type reference seen in ``context``; None when not found."""
        return self._resolver.resolve(reference, context)

    def find_in_package(self, package_path: str, type_name: str) -> TypeDefinition | None:
        return self._state.packages.find_type(package_path, type_name)

    def package(self, package_path: str) -> PackageRecord | None:
        return self._state.packages.get(package_path)

    def unit_of(self, definition: TypeDefinition) -> SourceUnit | None:
        """Declaring unit of ``definition``, looked up in the store."""
        return self._state.store.get(definition.file_path)
