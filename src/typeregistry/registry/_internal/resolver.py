"""Import-aware type name resolution.

Resolves a type reference seen in one source unit back to its TypeDefinition.
Strategies are tried in a fixed order; the first hit wins.

Qualified references (``qualifier.Name``):
1. Literal ambiguous-index hit on the whole reference, unless ``qualifier`` is
   an explicit import alias of the file.
2. Qualifier -> package path through the file's imports: explicit alias,
   then an unaliased import whose package short name matches, then a blank
   import whose package short name matches.
3. The file's own package when the qualifier is its own short name.
4. The reserved pseudo-package ``<prefix><qualifier>``.
5. Package-local lookup in the resolved path.

Step 1 can shadow genuine ``qualifier.Type`` syntax when a short name in the
index happens to equal the qualifier of an unaliased import of another
package with the same short name. The precedence is kept as is; callers
relying on it pass references already in ``short.Type`` form.

Unqualified references:
1. Ambiguous index under the file's own short name.
2. The file's own package.
3. Each dot-imported package, in import order.

Every step is a bounded lookup. An unresolved package path ends the pipeline
with a miss instead of another round of resolution.
"""

from __future__ import annotations

from typeregistry.core.errors import LifecycleError
from typeregistry.core.logging import get_logger
from typeregistry.registry._internal.state import RegistryState
from typeregistry.registry.models import (
    QUALIFIER_SEPARATOR,
    SourceUnit,
    TypeDefinition,
    full_type_name,
)
from typeregistry.registry.primitives import PrimitiveClassifier

log = get_logger("registry.resolver")


def is_alias_package_name(unit: SourceUnit | None, name: str) -> bool:
    """Whether ``name`` is the explicit alias of one of ``unit``'s imports."""
    if unit is None:
        return False
    return any(imp.alias == name for imp in unit.imports if imp.is_named)


class TypeResolver:
    """Answers read-only type lookups against a harvested RegistryState.

    Usage after harvest::

        resolver = TypeResolver(state, GoPrimitiveClassifier())
        definition = resolver.resolve("models.User", unit)
    """

    def __init__(
        self,
        state: RegistryState,
        classifier: PrimitiveClassifier,
        *,
        pseudo_package_prefix: str = "pkg/",
        strict_lifecycle: bool = False,
    ) -> None:
        self._state = state
        self._classifier = classifier
        self._pseudo_package_prefix = pseudo_package_prefix
        self._strict_lifecycle = strict_lifecycle
        self._warned_unharvested = False

    def resolve(self, reference: str, context: SourceUnit | None) -> TypeDefinition | None:
        """Find the definition ``reference`` names when used in ``context``.

        Returns None for primitives and for references nothing declares.
        Without a context, ``reference`` is looked up verbatim in the
        ambiguous index (``"models.User"``).
        """
        if self._classifier.is_primitive(reference):
            return None

        self._check_lifecycle(reference)

        if context is None:
            return self._from_index(reference)

        qualifier, sep, name = reference.partition(QUALIFIER_SEPARATOR)
        if sep:
            return self._resolve_qualified(reference, qualifier, name, context)
        return self._resolve_unqualified(reference, context)

    def package_path_from_imports(self, qualifier: str, context: SourceUnit) -> str:
        """Package path ``qualifier`` refers to in ``context``, or "" if none.

        Explicit aliases and unaliased imports are matched in import order. Blank
        imports are only consulted when neither matched.
        """
        packages = self._state.packages
        has_anonymous = False

        for imp in context.imports:
            if imp.is_named:
                if imp.alias == qualifier:
                    return imp.path
                if imp.is_anonymous:
                    has_anonymous = True
            elif packages.short_name(imp.path) == qualifier:
                return imp.path

        if has_anonymous:
            for imp in context.imports:
                if imp.is_anonymous and packages.short_name(imp.path) == qualifier:
                    return imp.path

        return ""

    def _resolve_qualified(
        self,
        reference: str,
        qualifier: str,
        name: str,
        context: SourceUnit,
    ) -> TypeDefinition | None:
        packages = self._state.packages

        if not is_alias_package_name(context, qualifier):
            definition = self._from_index(reference)
            if definition is not None:
                return definition

        package_path = self.package_path_from_imports(qualifier, context)
        if not package_path and qualifier == context.package_name:
            package_path = context.package_path

        if not package_path:
            definition = packages.find_type(self._pseudo_package_prefix + qualifier, name)
            if definition is not None:
                return definition

        return packages.find_type(package_path, name)

    def _resolve_unqualified(self, reference: str, context: SourceUnit) -> TypeDefinition | None:
        packages = self._state.packages

        definition = self._from_index(full_type_name(context.package_name, reference))
        if definition is not None:
            return definition

        definition = packages.find_type(context.package_path, reference)
        if definition is not None:
            return definition

        for imp in context.imports:
            if imp.is_dot:
                definition = packages.find_type(imp.path, reference)
                if definition is not None:
                    return definition

        return None

    def _from_index(self, key: str) -> TypeDefinition | None:
        index = self._state.index
        if index is None:
            return None
        return index.get(key)

    def _check_lifecycle(self, reference: str) -> None:
        if self._state.harvested:
            return
        if self._strict_lifecycle:
            raise LifecycleError.not_harvested(reference)
        if not self._warned_unharvested:
            self._warned_unharvested = True
            log.warning("resolve_before_harvest", reference=reference)
