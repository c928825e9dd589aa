"""
Schema graph consumed by the table config generator.

Provides the schema variant nodes, the graph with path lookups, and the
parser that turns a JSON API description into a graph.
"""

from __future__ import annotations

from .graph import SchemaError, SchemaGraph
from .nodes import (
    AnySchema,
    ArraySchema,
    BooleanSchema,
    DateSchema,
    DecimalSchema,
    EnumOption,
    EnumSchema,
    FieldSchema,
    FloatSchema,
    GeneratedClientFunction,
    GeneratedSchema,
    IntegerSchema,
    KeySchema,
    ListOptions,
    MapSchema,
    Method,
    ObjectSchema,
    OneOfSchema,
    PolymorphicSchema,
    PropertyDef,
    RefSchema,
    StringSchema,
    TimestampSchema,
)
from .parser import ApiDocumentParser, method_name, parse_api_document, type_name

__all__ = [
    "AnySchema",
    "ApiDocumentParser",
    "ArraySchema",
    "BooleanSchema",
    "DateSchema",
    "DecimalSchema",
    "EnumOption",
    "EnumSchema",
    "FieldSchema",
    "FloatSchema",
    "GeneratedClientFunction",
    "GeneratedSchema",
    "IntegerSchema",
    "KeySchema",
    "ListOptions",
    "MapSchema",
    "Method",
    "ObjectSchema",
    "OneOfSchema",
    "PolymorphicSchema",
    "PropertyDef",
    "RefSchema",
    "SchemaError",
    "SchemaGraph",
    "StringSchema",
    "TimestampSchema",
    "method_name",
    "parse_api_document",
    "type_name",
]
