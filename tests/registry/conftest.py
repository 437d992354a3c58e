"""Shared builders for registry tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from typeregistry.registry import (
    GoPrimitiveClassifier,
    ImportSpec,
    OtherDeclaration,
    ParsedFile,
    TypeDeclaration,
    TypeExpr,
    TypeRegistry,
)


def parsed_file(
    package_name: str,
    types: dict[str, TypeExpr] | None = None,
    imports: list[tuple[str | None, str]] | None = None,
    *,
    with_funcs: bool = False,
) -> ParsedFile:
    """Build a ParsedFile.

    ``imports`` are (alias, path) pairs; ``types`` maps declared names to
    their underlying expressions, in declaration order.
    """
    declarations: list[TypeDeclaration | OtherDeclaration] = []
    if with_funcs:
        declarations.append(OtherDeclaration("func"))
    for name, expr in (types or {}).items():
        declarations.append(TypeDeclaration(name, expr))
    return ParsedFile(
        package_name=package_name,
        imports=tuple(ImportSpec(f'"{path}"', alias) for alias, path in (imports or [])),
        declarations=tuple(declarations),
    )


@pytest.fixture
def make_file() -> Callable[..., ParsedFile]:
    return parsed_file


@pytest.fixture
def classifier() -> GoPrimitiveClassifier:
    return GoPrimitiveClassifier()


@pytest.fixture
def registry(classifier: GoPrimitiveClassifier) -> TypeRegistry:
    return TypeRegistry(classifier=classifier)
