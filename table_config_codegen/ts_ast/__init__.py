"""
TypeScript AST nodes and serializer for emitted declarations.
"""

from __future__ import annotations

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
    PropertyAssignment,
    StringLiteral,
    TsNode,
    TypeNode,
    TypeReference,
    VariableStatement,
)
from .serializer import TypeScriptSerializer

__all__ = [
    "ArrayLiteral",
    "ArrayType",
    "ArrowFunction",
    "BooleanLiteral",
    "Expression",
    "FunctionType",
    "Identifier",
    "ImportDeclaration",
    "KeywordType",
    "ObjectLiteral",
    "Parameter",
    "PropertyAccess",
    "PropertyAssignment",
    "StringLiteral",
    "TsNode",
    "TypeNode",
    "TypeReference",
    "TypeScriptSerializer",
    "VariableStatement",
]
