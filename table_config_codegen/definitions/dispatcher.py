"""
Field classification and builder dispatch.

Classification walks an ordered table of (kind, predicate) pairs and the
first predicate that accepts the schema wins. Dates and timestamps travel
as strings with a format hint, so they come before the plain string entry.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from ..schema import (
    AnySchema,
    BooleanSchema,
    DateSchema,
    DecimalSchema,
    EnumSchema,
    FieldSchema,
    FloatSchema,
    IntegerSchema,
    KeySchema,
    OneOfSchema,
    PolymorphicSchema,
    StringSchema,
    TimestampSchema,
)
from .context import Definition
from .shared import DefinitionWriterOptions

logger = logging.getLogger(__name__)


class FieldKind(str, Enum):
    """Semantic kinds a field can be classified as."""

    ANY = "any"
    POLYMORPHIC = "polymorphic"
    DATE = "date"
    TIMESTAMP = "timestamp"
    DECIMAL = "decimal"
    STRING = "string"
    KEY = "key"
    ONE_OF = "one_of"
    ENUM = "enum"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"


def _string_format(schema: FieldSchema) -> str | None:
    return schema.format if isinstance(schema, StringSchema) else None


def is_date(schema: FieldSchema) -> bool:
    return isinstance(schema, DateSchema) or _string_format(schema) == "date"


def is_timestamp(schema: FieldSchema) -> bool:
    return isinstance(schema, TimestampSchema) or _string_format(schema) == "date-time"


# Precedence order, first match wins
DISPATCH_TABLE: list[tuple[FieldKind, Callable[[FieldSchema], bool]]] = [
    (FieldKind.ANY, lambda s: isinstance(s, AnySchema)),
    (FieldKind.POLYMORPHIC, lambda s: isinstance(s, PolymorphicSchema)),
    (FieldKind.DATE, is_date),
    (FieldKind.TIMESTAMP, is_timestamp),
    (FieldKind.DECIMAL, lambda s: isinstance(s, DecimalSchema)),
    (FieldKind.STRING, lambda s: isinstance(s, StringSchema)),
    (FieldKind.KEY, lambda s: isinstance(s, KeySchema)),
    (FieldKind.ONE_OF, lambda s: isinstance(s, OneOfSchema)),
    (FieldKind.ENUM, lambda s: isinstance(s, EnumSchema)),
    (FieldKind.BOOLEAN, lambda s: isinstance(s, BooleanSchema)),
    (FieldKind.INTEGER, lambda s: isinstance(s, IntegerSchema)),
    (FieldKind.FLOAT, lambda s: isinstance(s, FloatSchema)),
]


def classify_field(schema: FieldSchema | None) -> FieldKind | None:
    """Return the kind of the first matching table entry, or None when nothing matches."""
    if schema is None:
        return None
    for kind, predicate in DISPATCH_TABLE:
        if predicate(schema):
            return kind
    return None


def build_type_definition(options: DefinitionWriterOptions) -> Definition | None:
    """Classify the field and run the configured builder for its kind."""
    kind = classify_field(options.field_schema)
    if kind is None:
        logger.debug(
            "Skipping field %s of %s: unsupported schema %s",
            options.field.name,
            options.generated_function.generated_name,
            type(options.field_schema).__name__,
        )
        return None
    return options.config.builder_for(kind.value)(options)
