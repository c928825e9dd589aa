"""
Reconciles freshly generated TypeScript with the file it replaces.

Statements are paired by identity, not by line. A forward pass walks the
generated statements looking for their existing counterparts; a backward
pass picks up existing statements generation did not produce. The conflict
resolver decides every pair whose texts differ.
"""

from __future__ import annotations

import logging
from collections.abc import Collection
from dataclasses import replace

from .base import CodeMergeError, ConflictResolver, Statement, prefer_generated
from .statements import TypeScriptStatementIndexer

logger = logging.getLogger(__name__)


def find_matching_statement(needle: Statement, haystack: list[Statement | None], skip: set[int] | None = None) -> int | None:
    """Index of the first statement in ``haystack`` with the same identity as ``needle``."""
    for i, candidate in enumerate(haystack):
        if candidate is None or (skip and i in skip):
            continue
        if needle.matches(candidate):
            return i
    return None


class StatementReconciler:
    """Merges generated code into existing code statement by statement."""

    def __init__(
        self,
        resolver: ConflictResolver = prefer_generated,
        indexer: TypeScriptStatementIndexer | None = None,
    ):
        """Initialize the reconciler.

        Args:
            resolver: Conflict resolver applied to differing statement pairs
            indexer: Statement indexer (a new one is created if not given)
        """
        self.resolver = resolver
        self.indexer = indexer or TypeScriptStatementIndexer()

    def reconcile(
        self,
        generated_code: str,
        existing_code: str | None,
        managed_names: Collection[str] = (),
    ) -> str:
        """Merge generated code into existing code.

        Args:
            generated_code: The newly generated file content
            existing_code: The previous file content, or None when there is none
            managed_names: Declaration names the generator owns in this file; existing
                statements declaring one of them are marked as managed

        Returns:
            The merged file content (the generated content when there is nothing to merge)

        Raises:
            CodeMergeError: If the generated code does not parse
        """
        if not existing_code:
            return generated_code

        generated, generated_has_errors = self.indexer.index(generated_code)
        if generated_has_errors:
            raise CodeMergeError("Generated TypeScript code does not parse")

        existing, existing_has_errors = self.indexer.index(existing_code)
        if existing_has_errors:
            logger.warning("Existing file has syntax errors, unparseable regions are merged as plain text")

        managed = set(managed_names)
        existing.statements = [replace(s, managed=True) if managed.intersection(s.names) else s for s in existing.statements]

        output: list[Statement | None] = list(generated.statements)
        handled_existing: set[int] = set()
        appended: list[Statement] = []

        for i, new_statement in enumerate(generated.statements):
            j = find_matching_statement(new_statement, existing.statements, skip=handled_existing)
            existing_statement = None
            if j is not None:
                handled_existing.add(j)
                existing_statement = existing.statements[j]

            if existing_statement is not None and existing_statement.text == new_statement.text:
                continue

            resolved = self.resolver(new_statement, existing_statement)
            if resolved is None:
                logger.debug("Dropping generated statement %s", new_statement.key)
                output[i] = None
            elif resolved.text != new_statement.text:
                output[i] = new_statement.with_text(resolved.text)

        for j, existing_statement in enumerate(existing.statements):
            if j in handled_existing:
                continue

            i = find_matching_statement(existing_statement, output)
            new_statement = output[i] if i is not None else None

            if new_statement is not None and new_statement.text == existing_statement.text:
                continue

            resolved = self.resolver(new_statement, existing_statement)
            if resolved is None:
                logger.debug("Dropping existing statement %s", existing_statement.key)
            elif new_statement is None:
                appended.append(resolved)
            elif resolved.text != new_statement.text:
                output[i] = new_statement.with_text(resolved.text)

        return generated.render(output, appended)
