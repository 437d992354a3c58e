"""Primitive type classification.

The registry consumes a classifier rather than owning a primitive table:
hosts documenting another language pass their own. ``GoPrimitiveClassifier``
covers Go built-ins and is what ``TypeRegistry`` uses when none is given.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from typeregistry.registry.models import PrimitiveSchema

if TYPE_CHECKING:
    from typeregistry.config.models import RegistryConfig


@runtime_checkable
class PrimitiveClassifier(Protocol):
    """Decides which type names need no definition lookup."""

    def is_primitive(self, name: str) -> bool: ...

    def canonical_schema(self, name: str) -> PrimitiveSchema: ...


_GO_INTEGERS: frozenset[str] = frozenset(
    (
        "int",
        "int8",
        "int16",
        "int32",
        "int64",
        "uint",
        "uint8",
        "uint16",
        "uint32",
        "uint64",
        "byte",  # alias of uint8
        "rune",  # alias of int32
    )
)

_GO_SCHEMA_TYPES: dict[str, str] = {
    **{name: "integer" for name in _GO_INTEGERS},
    "float32": "number",
    "float64": "number",
    "bool": "boolean",
    "string": "string",
}


class GoPrimitiveClassifier:
    """Go built-in types mapped to schema primitive types.

    ``extra`` extends the table, e.g. for well-known named types the host
    wants documented as plain strings.
    """

    def __init__(self, extra: Mapping[str, str] | None = None) -> None:
        self._schema_types = dict(_GO_SCHEMA_TYPES)
        if extra:
            self._schema_types.update(extra)

    @classmethod
    def from_config(cls, config: RegistryConfig) -> GoPrimitiveClassifier:
        extra = {
            name: config.primitive_schema_types.get(name, "string")
            for name in config.extra_primitives
        }
        return cls(extra)

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._schema_types)

    def is_primitive(self, name: str) -> bool:
        return name in self._schema_types

    def canonical_schema(self, name: str) -> PrimitiveSchema:
        # Unknown names pass through unchanged
        return PrimitiveSchema(self._schema_types.get(name, name))
