"""Source unit store and package registration.

Collection phase: the host hands over parsed files one at a time, in any
order. Each file lands in the store keyed by its file path; files with a
package path are also added to that package's record.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from typeregistry.core.logging import get_logger
from typeregistry.registry._internal.packages import PackageRegistry
from typeregistry.registry.models import ParsedFile, SourceUnit

log = get_logger("registry.store")


class SourceUnitStore:
    """File path -> SourceUnit. Sole owner of every registered unit."""

    def __init__(self) -> None:
        self._units: dict[str, SourceUnit] = {}

    def __len__(self) -> int:
        return len(self._units)

    def __contains__(self, file_path: object) -> bool:
        return file_path in self._units

    def register(self, parsed: ParsedFile, file_path: str, package_path: str) -> SourceUnit:
        """Add or replace the unit stored under ``file_path``."""
        unit = SourceUnit(file_path=file_path, package_path=package_path, parsed=parsed)
        self._units[file_path] = unit
        return unit

    def get(self, file_path: str) -> SourceUnit | None:
        return self._units.get(file_path)

    def iterate(self) -> Iterator[tuple[str, SourceUnit]]:
        """Yield (file_path, unit) pairs. Order is not part of the contract."""
        for file_path, unit in self._units.items():
            yield file_path, unit

    def range(self, handler: Callable[[str, SourceUnit], None]) -> None:
        """Call ``handler`` for each unit; its first exception stops the walk."""
        for file_path, unit in self.iterate():
            handler(file_path, unit)


def register_unit(
    store: SourceUnitStore,
    packages: PackageRegistry,
    package_path: str,
    file_path: str,
    parsed: ParsedFile,
) -> SourceUnit:
    """Collect one parsed file.

    Repeated calls for the same file path overwrite the earlier entry, and a
    file moved to another package path leaves its previous package. An
    empty ``package_path`` keeps the file out of the package registry: it is
    still iterated and harvested, but never owns a package-local definition.
    """
    previous = store.get(file_path)
    if previous is not None and previous.package_path != package_path and not previous.is_headless:
        packages.remove_file(previous.package_path, file_path)
        log.debug(
            "unit_moved",
            file_path=file_path,
            old_package_path=previous.package_path,
            package_path=package_path,
        )

    unit = store.register(parsed, file_path, package_path)
    if unit.is_headless:
        log.debug("headless_unit_registered", file_path=file_path)
        return unit

    record = packages.add_unit(unit)
    if record.name != unit.package_name:
        log.debug(
            "package_name_mismatch",
            package_path=package_path,
            kept=record.name,
            seen=unit.package_name,
            file_path=file_path,
        )
    return unit
