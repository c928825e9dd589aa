"""
Values returned by definition builders.

A builder returns a Definition: the literal it built plus the runtime
dependencies and generated type imports that literal needs. Definitions
are immutable; ``inject`` and friends return new values, so builders stay
free of side effects and can be tested without a generator.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field, replace

from ..ts_ast import ObjectLiteral, Parameter, TypeNode, TypeReference


def as_type_node(type_reference: TypeNode | str) -> TypeNode:
    if isinstance(type_reference, str):
        return TypeReference(name=type_reference)
    return type_reference


@dataclass(frozen=True)
class Dependency:
    """A named, typed runtime value the caller must supply."""

    name: str
    type: TypeNode


@dataclass(frozen=True)
class DependencySet:
    """Ordered, name-unique collection of dependencies.

    Order is first-injection order. Adding a name that is already present
    keeps its position and takes the new type.
    """

    entries: tuple[Dependency, ...] = ()

    def add(self, name: str, type_reference: TypeNode | str) -> DependencySet:
        dependency = Dependency(name=name, type=as_type_node(type_reference))
        entries = list(self.entries)
        for i, existing in enumerate(entries):
            if existing.name == name:
                entries[i] = dependency
                return DependencySet(tuple(entries))
        entries.append(dependency)
        return DependencySet(tuple(entries))

    def merge(self, other: DependencySet) -> DependencySet:
        merged = self
        for dependency in other:
            merged = merged.add(dependency.name, dependency.type)
        return merged

    def names(self) -> list[str]:
        return [d.name for d in self.entries]

    def to_parameters(self) -> list[Parameter]:
        return [Parameter(name=d.name, type=d.type) for d in self.entries]

    def __iter__(self) -> Iterator[Dependency]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class Definition:
    """A built definition literal and what it requires from its surroundings."""

    expression: ObjectLiteral
    dependencies: DependencySet = field(default_factory=DependencySet)

    # Generated type names referenced by the literal (to be imported)
    type_imports: tuple[str, ...] = ()

    def inject(self, name: str, type_reference: TypeNode | str) -> Definition:
        """Declare that this definition needs a runtime value ``name`` of the given type."""
        return replace(self, dependencies=self.dependencies.add(name, type_reference))

    def with_type_imports(self, *names: str) -> Definition:
        imports = list(self.type_imports)
        imports.extend(n for n in names if n not in imports)
        return replace(self, type_imports=tuple(imports))

    def with_expression(self, expression: ObjectLiteral) -> Definition:
        """Replace the literal, keeping dependencies and imports."""
        return replace(self, expression=expression)
