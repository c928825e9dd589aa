"""
TypeScript AST Serializer.

Converts TypeScript AST nodes to source code. Follows the style of the
code the react-table-state-psm consumers write:
- 2-space indentation
- Single quotes for labels, trailing commas in multiline literals
- Semicolon-terminated statements
"""

from __future__ import annotations

import re

from .nodes import (
    ArrayLiteral,
    ArrayType,
    ArrowFunction,
    BooleanLiteral,
    Expression,
    FunctionType,
    Identifier,
    ImportDeclaration,
    KeywordType,
    ObjectLiteral,
    Parameter,
    PropertyAccess,
    StringLiteral,
    TypeNode,
    TypeReference,
    VariableStatement,
)

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


class TypeScriptSerializer:
    """Serializes TypeScript AST nodes to source code."""

    INDENT = "  "  # 2 spaces

    def serialize_statement(self, statement: VariableStatement | ImportDeclaration) -> str:
        """Serialize a top-level statement."""
        if isinstance(statement, ImportDeclaration):
            return self._serialize_import(statement)
        if isinstance(statement, VariableStatement):
            return self._serialize_variable(statement)
        raise TypeError(f"Cannot serialize statement of type {type(statement).__name__}")

    def serialize_expression(self, expression: Expression, level: int = 0) -> str:
        """Serialize an expression whose first line starts at indentation ``level``."""
        if isinstance(expression, Identifier):
            return expression.name
        if isinstance(expression, StringLiteral):
            return self._quote(expression.value, expression.single_quote)
        if isinstance(expression, BooleanLiteral):
            return "true" if expression.value else "false"
        if isinstance(expression, PropertyAccess):
            return f"{expression.expression}.{expression.name}"
        if isinstance(expression, ObjectLiteral):
            return self._serialize_object(expression, level)
        if isinstance(expression, ArrayLiteral):
            return self._serialize_array(expression, level)
        if isinstance(expression, ArrowFunction):
            params = self._serialize_parameters(expression.parameters)
            return f"({params}) => {self.serialize_expression(expression.body, level)}"
        raise TypeError(f"Cannot serialize expression of type {type(expression).__name__}")

    def serialize_type(self, type_node: TypeNode) -> str:
        """Serialize a type annotation."""
        if isinstance(type_node, KeywordType):
            return type_node.keyword
        if isinstance(type_node, TypeReference):
            if type_node.type_arguments:
                args = ", ".join(self.serialize_type(arg) for arg in type_node.type_arguments)
                return f"{type_node.name}<{args}>"
            return type_node.name
        if isinstance(type_node, ArrayType):
            element = self.serialize_type(type_node.element_type)
            if isinstance(type_node.element_type, FunctionType):
                element = f"({element})"
            return f"{element}[]"
        if isinstance(type_node, FunctionType):
            params = self._serialize_parameters(type_node.parameters)
            return f"({params}) => {self.serialize_type(type_node.return_type)}"
        raise TypeError(f"Cannot serialize type of type {type(type_node).__name__}")

    def _serialize_variable(self, statement: VariableStatement) -> str:
        prefix = "export const" if statement.exported else "const"
        annotation = f": {self.serialize_type(statement.type)}" if statement.type else ""
        initializer = self.serialize_expression(statement.initializer, 0)
        return f"{prefix} {statement.name}{annotation} = {initializer};"

    def _serialize_import(self, statement: ImportDeclaration) -> str:
        names = sorted(set(statement.names))
        type_only = set(statement.type_only_names)
        if names and all(name in type_only for name in names):
            return f"import type {{ {', '.join(names)} }} from {self._quote(statement.module, True)};"
        specifiers = [f"type {name}" if name in type_only else name for name in names]
        return f"import {{ {', '.join(specifiers)} }} from {self._quote(statement.module, True)};"

    def _serialize_object(self, literal: ObjectLiteral, level: int) -> str:
        if not literal.properties:
            return "{}"

        if not literal.multiline:
            props = ", ".join(f"{self._property_name(p.name)}: {self.serialize_expression(p.value, level)}" for p in literal.properties)
            return f"{{ {props} }}"

        inner = self.INDENT * (level + 1)
        lines = ["{"]
        for prop in literal.properties:
            lines.append(f"{inner}{self._property_name(prop.name)}: {self.serialize_expression(prop.value, level + 1)},")
        lines.append(f"{self.INDENT * level}}}")
        return "\n".join(lines)

    def _serialize_array(self, literal: ArrayLiteral, level: int) -> str:
        if not literal.elements:
            return "[]"

        if not literal.multiline:
            return "[" + ", ".join(self.serialize_expression(e, level) for e in literal.elements) + "]"

        inner = self.INDENT * (level + 1)
        lines = ["["]
        for element in literal.elements:
            lines.append(f"{inner}{self.serialize_expression(element, level + 1)},")
        lines.append(f"{self.INDENT * level}]")
        return "\n".join(lines)

    def _serialize_parameters(self, parameters: list[Parameter]) -> str:
        return ", ".join(f"{p.name}: {self.serialize_type(p.type)}" if p.type else p.name for p in parameters)

    def _property_name(self, name: str) -> str:
        return name if _IDENTIFIER.match(name) else self._quote(name, True)

    @staticmethod
    def _quote(value: str, single: bool) -> str:
        quote = "'" if single else '"'
        escaped = value.replace("\\", "\\\\").replace(quote, f"\\{quote}").replace("\n", "\\n").replace("\r", "\\r")
        return f"{quote}{escaped}{quote}"
