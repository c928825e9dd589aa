"""
Top-level statement indexing for TypeScript sources.

Uses tree-sitter and tree-sitter-typescript to split a file into its
top-level statements and derive an identity key for each of them.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field

import tree_sitter_typescript as ts_typescript
from tree_sitter import Language, Node, Parser, Tree

from .base import CodeMergeError, Statement, StatementKind

# Declarations identified by their `name` field
NAMED_DECLARATIONS = {
    "function_declaration",
    "generator_function_declaration",
    "function_signature",
    "class_declaration",
    "abstract_class_declaration",
    "interface_declaration",
    "type_alias_declaration",
    "enum_declaration",
    "module",
    "internal_module",
}

# Declarations identified by the names of their declarators
VARIABLE_DECLARATIONS = {"lexical_declaration", "variable_declaration"}


def text_digest(text: str) -> str:
    return hashlib.sha256(text.strip().encode("utf-8")).hexdigest()


@dataclass
class IndexedFile:
    """A source file split into top-level statements.

    Attributes:
        leading: Text before the first statement
        statements: Statements in source order
        separators: Text between each statement and the one before it ("" for the first)
    """

    leading: str = ""
    statements: list[Statement] = field(default_factory=list)
    separators: list[str] = field(default_factory=list)

    def render(self, statements: list[Statement | None] | None = None, appended: list[Statement] | None = None) -> str:
        """Render the file back to text.

        Args:
            statements: Replacement for ``self.statements`` (same length, None drops a statement)
            appended: Statements added after the last one, separated by a blank line

        Returns:
            The file content, ending with exactly one newline
        """
        if statements is None:
            statements = list(self.statements)

        parts = [self.leading]
        emitted = False

        for statement, separator in zip(statements, self.separators):
            if statement is None:
                continue
            if emitted:
                parts.append(separator or "\n")
            parts.append(statement.text)
            emitted = True

        for statement in appended or []:
            if emitted:
                parts.append("\n\n")
            parts.append(statement.text)
            emitted = True

        return "".join(parts).rstrip() + "\n"


class TypeScriptStatementIndexer:
    """Splits TypeScript code into keyed top-level statements."""

    def __init__(self):
        self._parser = Parser(Language(ts_typescript.language_typescript()))

    def parse(self, code: str) -> Tree:
        """Parse TypeScript code into a tree-sitter tree (error nodes included)."""
        return self._parser.parse(code.encode("utf-8"))

    def find_errors(self, node: Node) -> list[Node]:
        """Find all ERROR and missing nodes below ``node``."""
        errors = []
        if node.type == "ERROR" or node.is_missing:
            errors.append(node)
        for child in node.children:
            errors.extend(self.find_errors(child))
        return errors

    def validate(self, code: str) -> None:
        """Check that code parses without errors.

        Raises:
            CodeMergeError: If the code has syntax errors
        """
        tree = self.parse(code)
        if tree.root_node.has_error:
            errors = self.find_errors(tree.root_node)
            line = errors[0].start_point[0] + 1 if errors else 1
            raise CodeMergeError(f"Failed to parse TypeScript code at line {line}")

    def index(self, code: str) -> tuple[IndexedFile, bool]:
        """Split code into statements.

        Returns:
            The indexed file and whether the code contained syntax errors
        """
        source = code.encode("utf-8")
        tree = self._parser.parse(source)

        indexed = IndexedFile()
        previous_end = 0

        for node in tree.root_node.children:
            between = source[previous_end : node.start_byte].decode("utf-8")
            if indexed.statements:
                indexed.separators.append(between)
            else:
                indexed.leading = between
                indexed.separators.append("")

            indexed.statements.append(self._statement(node, source))
            previous_end = node.end_byte

        return indexed, tree.root_node.has_error

    def _statement(self, node: Node, source: bytes) -> Statement:
        text = source[node.start_byte : node.end_byte].decode("utf-8")

        if node.type == "import_statement":
            module = self._import_source(node, source)
            if module is not None:
                return Statement(text=text, kind=StatementKind.IMPORT, key=module)

        names = self._declared_names(node, source)
        if names:
            return Statement(text=text, kind=StatementKind.NAME, key=names[0], names=names)

        return Statement(text=text, kind=StatementKind.TEXT, key=text_digest(text))

    def _declared_names(self, node: Node, source: bytes) -> tuple[str, ...]:
        """Names declared by a (possibly exported or ambient) declaration."""
        if node.type == "export_statement":
            declaration = node.child_by_field_name("declaration")
            return self._declared_names(declaration, source) if declaration is not None else ()

        if node.type == "ambient_declaration":
            for child in node.named_children:
                names = self._declared_names(child, source)
                if names:
                    return names
            return ()

        if node.type in VARIABLE_DECLARATIONS:
            names = []
            for child in node.named_children:
                if child.type == "variable_declarator":
                    name = child.child_by_field_name("name")
                    if name is not None:
                        names.append(self._node_text(name, source))
            return tuple(names)

        if node.type in NAMED_DECLARATIONS:
            name = node.child_by_field_name("name")
            if name is not None:
                return (self._node_text(name, source),)

        return ()

    def _import_source(self, node: Node, source: bytes) -> str | None:
        module = node.child_by_field_name("source")
        if module is None:
            return None
        return self._node_text(module, source).strip("'\"")

    def _node_text(self, node: Node, source: bytes) -> str:
        return source[node.start_byte : node.end_byte].decode("utf-8")
