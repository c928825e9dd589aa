"""
Merger module.

Reconciles generated TypeScript with existing files statement by statement,
keeping hand-written declarations, and writes the result atomically.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter
from .base import (
    CodeMergeError,
    ConflictPolicy,
    ConflictResolver,
    Statement,
    StatementKind,
    prefer_existing,
    prefer_generated,
    regenerate,
)
from .reader import read_existing_file
from .reconciler import StatementReconciler, find_matching_statement
from .statements import IndexedFile, TypeScriptStatementIndexer

__all__ = [
    "AtomicWriter",
    "CodeMergeError",
    "ConflictPolicy",
    "ConflictResolver",
    "IndexedFile",
    "Statement",
    "StatementKind",
    "StatementReconciler",
    "TypeScriptStatementIndexer",
    "find_matching_statement",
    "prefer_existing",
    "prefer_generated",
    "read_existing_file",
    "regenerate",
]
