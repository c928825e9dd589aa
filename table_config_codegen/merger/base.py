"""
Base types for statement reconciliation.

A file is seen as an ordered list of top-level statements, each carrying an
identity key. Reconciliation pairs generated and existing statements by key
and lets a conflict resolver decide what survives.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum


class CodeMergeError(Exception):
    """Raised when generated code cannot be merged or validated.

    This can happen when:
    - The generated code does not parse
    - A merged file fails validation before it is written
    """

    pass


class StatementKind(str, Enum):
    """How a statement's identity key was derived."""

    NAME = "name"  # Named declaration, keyed by its declared name
    IMPORT = "import"  # Import statement, keyed by module specifier
    TEXT = "text"  # Anything else, keyed by a digest of its text


@dataclass(frozen=True)
class Statement:
    """One top-level statement of a TypeScript file.

    Attributes:
        text: Source text of the statement
        kind: How the identity key was derived
        key: Declared name, module specifier or text digest
        names: All names declared by the statement (``const a = 1, b = 2``)
        managed: Whether the statement declares a name the generator owns,
            i.e. one its naming policies produce for the file's functions
    """

    text: str
    kind: StatementKind
    key: str
    names: tuple[str, ...] = ()
    managed: bool = False

    @property
    def identity(self) -> tuple[str, str]:
        return (self.kind.value, self.key)

    def matches(self, other: Statement) -> bool:
        """Whether ``other`` is the same statement as this one, possibly with a different body."""
        if self.kind == StatementKind.NAME:
            return other.kind == StatementKind.NAME and self.names[0] in other.names
        return self.identity == other.identity

    def with_text(self, text: str) -> Statement:
        return replace(self, text=text)

    def is_stale(self, new: Statement | None) -> bool:
        """A generator-owned statement that generation no longer produces."""
        return new is None and self.managed


# Decides what to keep for a pair of matched statements. Either side may be
# None; returning None drops the statement from the output.
ConflictResolver = Callable[[Statement | None, Statement | None], Statement | None]


def regenerate(new: Statement | None, existing: Statement | None) -> Statement | None:
    """Always keep the generated statement; statements generation no longer produces are dropped."""
    return new


def prefer_generated(new: Statement | None, existing: Statement | None) -> Statement | None:
    """Keep the generated statement when there is one, otherwise keep the existing one.

    Stale generator-owned statements are dropped.
    """
    if existing is not None and existing.is_stale(new):
        return None
    return new if new is not None else existing


def prefer_existing(new: Statement | None, existing: Statement | None) -> Statement | None:
    """Keep the existing statement when there is one, otherwise take the generated one.

    Stale generator-owned statements are dropped.
    """
    if existing is not None and existing.is_stale(new):
        return None
    return existing if existing is not None else new


class ConflictPolicy(str, Enum):
    """Built-in conflict resolvers, selectable by name."""

    PREFER_GENERATED = "prefer-generated"
    REGENERATE = "regenerate"
    PREFER_EXISTING = "prefer-existing"

    @property
    def resolver(self) -> ConflictResolver:
        return _RESOLVERS[self]


_RESOLVERS: dict[ConflictPolicy, ConflictResolver] = {
    ConflictPolicy.PREFER_GENERATED: prefer_generated,
    ConflictPolicy.REGENERATE: regenerate,
    ConflictPolicy.PREFER_EXISTING: prefer_existing,
}
