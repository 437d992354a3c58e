"""Explicit registry state passed through collection, harvest and query."""

from __future__ import annotations

from dataclasses import dataclass, field

from typeregistry.registry._internal.packages import AmbiguousNameIndex, PackageRegistry
from typeregistry.registry._internal.store import SourceUnitStore
from typeregistry.registry.models import HarvestStats


@dataclass
class RegistryState:
    """Everything the registry knows, as one value.

    Not thread-safe. Collection and harvest must finish on one thread before
    any query runs, and nothing may mutate the state while queries run.
    ``index`` is None only when a caller deliberately builds a state without
    one; harvesting such a state is a lifecycle error.
    """

    store: SourceUnitStore = field(default_factory=SourceUnitStore)
    packages: PackageRegistry = field(default_factory=PackageRegistry)
    index: AmbiguousNameIndex | None = field(default_factory=AmbiguousNameIndex)
    harvested: bool = False
    last_stats: HarvestStats | None = None
