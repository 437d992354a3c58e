"""Package registry and the ambiguous global name index.

Two tiers of lookup:

- PackageRegistry: package path -> PackageRecord. Each record's local map is
  the authoritative answer for names declared in that package.
- AmbiguousNameIndex: "<short name>.<type name>" -> TypeDefinition. A fast
  unqualified shortcut keyed by short name, which different import paths can
  share. On collision the key is evicted, never overwritten, and stays evicted
  so the outcome does not depend on harvest order.
"""

from __future__ import annotations

from enum import Enum

from typeregistry.registry.models import PackageRecord, SourceUnit, TypeDefinition


class PackageRegistry:
    """Package path -> PackageRecord, created lazily on first registration."""

    def __init__(self) -> None:
        self._packages: dict[str, PackageRecord] = {}

    def __len__(self) -> int:
        return len(self._packages)

    def __contains__(self, package_path: object) -> bool:
        return package_path in self._packages

    def get(self, package_path: str) -> PackageRecord | None:
        return self._packages.get(package_path)

    def add_unit(self, unit: SourceUnit) -> PackageRecord:
        """Attach ``unit`` to its package record, creating the record if needed."""
        record = self._packages.get(unit.package_path)
        if record is None:
            record = PackageRecord(name=unit.package_name)
            self._packages[unit.package_path] = record
        record.files[unit.file_path] = unit
        return record

    def remove_file(self, package_path: str, file_path: str) -> None:
        """Detach ``file_path`` from its record; a record left empty is dropped."""
        record = self._packages.get(package_path)
        if record is None:
            return
        record.files.pop(file_path, None)
        if not record.files:
            del self._packages[package_path]

    def find_type(self, package_path: str, type_name: str) -> TypeDefinition | None:
        """Package-local lookup. An empty or unknown path finds nothing."""
        if not package_path:
            return None
        record = self._packages.get(package_path)
        if record is None:
            return None
        return record.type_definitions.get(type_name)

    def short_name(self, package_path: str) -> str | None:
        record = self._packages.get(package_path)
        return record.name if record is not None else None


class IndexOutcome(str, Enum):
    """What AmbiguousNameIndex.offer() did with a definition."""

    INSERTED = "inserted"
    DUPLICATE = "duplicate"  # same key, same definition identity: existing entry kept
    EVICTED = "evicted"  # same key, other package path or headless file: entry removed
    SUPPRESSED = "suppressed"  # key already evicted earlier


class AmbiguousNameIndex:
    """Short-name keyed shortcut that drops keys on collision."""

    def __init__(self) -> None:
        self._definitions: dict[str, TypeDefinition] = {}
        self._evicted: set[str] = set()

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, key: object) -> bool:
        return key in self._definitions

    def get(self, key: str) -> TypeDefinition | None:
        return self._definitions.get(key)

    def is_evicted(self, key: str) -> bool:
        return key in self._evicted

    def offer(self, definition: TypeDefinition) -> IndexOutcome:
        """Insert, keep, or evict the key of ``definition``.

        An evicted key is never inserted again, even though it is absent from
        the map: a third declaration of ``short.Type`` stays suppressed
        instead of winning just because it was harvested last.
        """
        key = definition.full_name
        if key in self._evicted:
            return IndexOutcome.SUPPRESSED

        existing = self._definitions.get(key)
        if existing is None:
            self._definitions[key] = definition
            return IndexOutcome.INSERTED
        if existing == definition:
            return IndexOutcome.DUPLICATE

        del self._definitions[key]
        self._evicted.add(key)
        return IndexOutcome.EVICTED
