"""Data model for the type registry.

Input side (supplied by the host's parser):
- ImportSpec, TypeExpr, TypeDeclaration/OtherDeclaration, ParsedFile

Registry side (built by registration and the harvest pass):
- SourceUnit, TypeDefinition, PackageRecord, PrimitiveSchema, GeneratedSchema,
  HarvestStats

Parsed syntax is reduced to small tagged variants. The registry only ever asks
whether a type expression is a bare identifier; everything else is carried as
an opaque payload for the schema renderer downstream.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Import alias conventions
BLANK_ALIAS = "_"
DOT_ALIAS = "."

QUALIFIER_SEPARATOR = "."


def full_type_name(package_name: str, type_name: str) -> str:
    """Ambiguous-index key: package short name + type name.

    Distinct import paths may share a short name, so this key is not unique.
    """
    return f"{package_name}{QUALIFIER_SEPARATOR}{type_name}"


# ============================================================================
# PARSED INPUT
# ============================================================================


@dataclass(frozen=True, slots=True)
class ImportSpec:
    """One import of a source file.

    ``raw_path`` is kept as written (possibly quoted); ``path`` is the
    unquoted import path used as a package key.
    """

    raw_path: str
    alias: str | None = None

    @property
    def path(self) -> str:
        return self.raw_path.strip('"`')

    @property
    def is_named(self) -> bool:
        return self.alias is not None

    @property
    def is_anonymous(self) -> bool:
        """Blank import, kept for side effects only."""
        return self.alias == BLANK_ALIAS

    @property
    def is_dot(self) -> bool:
        """Import merging the package's names into the file scope."""
        return self.alias == DOT_ALIAS


class TypeExprKind(str, Enum):
    """Shape of a declaration's underlying type expression."""

    PRIMITIVE = "primitive"  # bare identifier the parser already knows is built in
    NAMED = "named"  # bare identifier
    QUALIFIED = "qualified"  # qualifier.Name
    OTHER = "other"  # struct, map, func, pointer ... opaque here


@dataclass(frozen=True, slots=True)
class TypeExpr:
    """Tagged type expression."""

    kind: TypeExprKind
    name: str = ""
    qualifier: str | None = None
    payload: Any = field(default=None, compare=False, hash=False)

    @classmethod
    def primitive(cls, name: str) -> TypeExpr:
        return cls(TypeExprKind.PRIMITIVE, name)

    @classmethod
    def named(cls, name: str) -> TypeExpr:
        return cls(TypeExprKind.NAMED, name)

    @classmethod
    def qualified(cls, qualifier: str, name: str) -> TypeExpr:
        return cls(TypeExprKind.QUALIFIED, name, qualifier)

    @classmethod
    def other(cls, text: str = "", payload: Any = None) -> TypeExpr:
        return cls(TypeExprKind.OTHER, text, payload=payload)

    @property
    def is_bare_identifier(self) -> bool:
        return self.kind in (TypeExprKind.PRIMITIVE, TypeExprKind.NAMED)

    def __str__(self) -> str:
        if self.kind is TypeExprKind.QUALIFIED:
            return f"{self.qualifier}{QUALIFIER_SEPARATOR}{self.name}"
        return self.name


@dataclass(frozen=True, slots=True)
class TypeDeclaration:
    """``type Name <expr>`` at file top level."""

    name: str
    type_expr: TypeExpr


@dataclass(frozen=True, slots=True)
class OtherDeclaration:
    """Any other top-level declaration (func, var, const ...)."""

    kind: str = "other"


Declaration = TypeDeclaration | OtherDeclaration


@dataclass(frozen=True, slots=True)
class ParsedFile:
    """A parsed source file as handed over by the host."""

    package_name: str
    imports: tuple[ImportSpec, ...] = ()
    declarations: tuple[Declaration, ...] = ()

    def type_declarations(self) -> list[TypeDeclaration]:
        return [d for d in self.declarations if isinstance(d, TypeDeclaration)]


# ============================================================================
# REGISTRY
# ============================================================================


@dataclass(frozen=True, slots=True)
class SourceUnit:
    """A registered file: the parsed handle plus where it came from."""

    file_path: str
    package_path: str
    parsed: ParsedFile

    @property
    def package_name(self) -> str:
        return self.parsed.package_name

    @property
    def imports(self) -> tuple[ImportSpec, ...]:
        return self.parsed.imports

    @property
    def is_headless(self) -> bool:
        """Tracked for iteration only, outside any package."""
        return not self.package_path


@dataclass(frozen=True, eq=False, slots=True)
class TypeDefinition:
    """One named type declaration.

    Identity is (package_path, name). Headless definitions have no package
    path, so their identity also includes ``file_path``: same-named types in
    two package-less files stay distinct. ``file_path`` refers back to the
    declaring SourceUnit through the store; the definition never owns it.
    """

    package_path: str
    file_path: str
    package_name: str
    name: str
    type_expr: TypeExpr

    @property
    def key(self) -> tuple[str, str, str]:
        """(package_path, headless file path or "", name)."""
        if self.package_path:
            return (self.package_path, "", self.name)
        return ("", self.file_path, self.name)

    @property
    def full_name(self) -> str:
        return full_type_name(self.package_name, self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeDefinition):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)


@dataclass
class PackageRecord:
    """All files sharing one package path plus their type definitions.

    ``name`` is taken from the first file registered under the path and is
    never corrected afterwards.
    """

    name: str
    files: dict[str, SourceUnit] = field(default_factory=dict)
    type_definitions: dict[str, TypeDefinition] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class PrimitiveSchema:
    """Canonical schema of a primitive type."""

    type: str

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type}


@dataclass(frozen=True, slots=True)
class GeneratedSchema:
    """Schema precomputed for a type declared as a bare primitive alias."""

    package_path: str
    name: str  # package short name of the declaring file
    schema: PrimitiveSchema


@dataclass
class HarvestStats:
    """Statistics from one harvest pass."""

    units_scanned: int = 0
    definitions: int = 0
    index_inserted: int = 0
    index_duplicates: int = 0
    index_evicted: int = 0
    primitive_schemas: int = 0
