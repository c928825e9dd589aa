"""
TypeScript AST node definitions.

These nodes represent the subset of TypeScript the table config generator
emits: exported const declarations holding object/array literals, arrow
functions, type references and import declarations. They are serialized to
source code by TypeScriptSerializer.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TsNode:
    """Base class for all TypeScript AST nodes."""

    pass


# Expressions


@dataclass
class Expression(TsNode):
    pass


@dataclass
class Identifier(Expression):
    name: str = ""


@dataclass
class StringLiteral(Expression):
    value: str = ""
    single_quote: bool = False


@dataclass
class BooleanLiteral(Expression):
    value: bool = False


@dataclass
class PropertyAccess(Expression):
    """Member access such as ``WidgetStatus.Active``."""

    expression: str = ""
    name: str = ""


@dataclass
class PropertyAssignment(TsNode):
    name: str = ""
    value: Expression | None = None


@dataclass
class ObjectLiteral(Expression):
    properties: list[PropertyAssignment] = field(default_factory=list)
    multiline: bool = False

    def get(self, name: str) -> Expression | None:
        """Return the value assigned to ``name``, if any."""
        return next((p.value for p in self.properties if p.name == name), None)


@dataclass
class ArrayLiteral(Expression):
    elements: list[Expression] = field(default_factory=list)
    multiline: bool = False


# Types


@dataclass
class TypeNode(TsNode):
    pass


@dataclass
class KeywordType(TypeNode):
    """Built-in type keyword (string, number, boolean, ...)."""

    keyword: str = "string"


@dataclass
class TypeReference(TypeNode):
    name: str = ""
    type_arguments: list[TypeNode] = field(default_factory=list)


@dataclass
class ArrayType(TypeNode):
    element_type: TypeNode | None = None


@dataclass
class Parameter(TsNode):
    name: str = ""
    type: TypeNode | None = None


@dataclass
class FunctionType(TypeNode):
    parameters: list[Parameter] = field(default_factory=list)
    return_type: TypeNode | None = None


@dataclass
class ArrowFunction(Expression):
    parameters: list[Parameter] = field(default_factory=list)
    body: Expression | None = None


# Statements


@dataclass
class VariableStatement(TsNode):
    """An ``export const name: type = initializer;`` declaration."""

    name: str = ""
    type: TypeNode | None = None
    initializer: Expression | None = None
    exported: bool = True


@dataclass
class ImportDeclaration(TsNode):
    module: str = ""
    names: list[str] = field(default_factory=list)

    # Subset of names imported as types only
    type_only_names: list[str] = field(default_factory=list)
