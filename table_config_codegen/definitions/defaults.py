"""
Default filter values.

Raw default tokens are typed by the kind of their field: one value becomes
``{ exact: v }`` and several become ``{ in: [...] }``. Enum and oneOf tokens
go through the generated member names; tokens without one are dropped.
"""

from __future__ import annotations

import logging

from ..schema import GeneratedSchema
from ..ts_ast import ArrayLiteral, BooleanLiteral, Expression, ObjectLiteral, PropertyAssignment, StringLiteral
from .context import Definition
from .dispatcher import FieldKind, classify_field
from .filter import (
    PSM_EXACT_PARAMETER_NAME,
    PSM_FILTER_TYPE_PARAMETER_NAME,
    PSM_FILTERS_PARAMETER_NAME,
    PSM_IN_PARAMETER_NAME,
    PSM_VALUE_PARAMETER_NAME,
)
from .shared import PSM_ID_PARAMETER_NAME, DefinitionWriterOptions, build_enum_id_expression, field_id_expression

logger = logging.getLogger(__name__)

# Kinds whose defaults are passed through as string literals
LITERAL_KINDS = frozenset(
    {
        FieldKind.STRING,
        FieldKind.KEY,
        FieldKind.DATE,
        FieldKind.TIMESTAMP,
        FieldKind.DECIMAL,
        FieldKind.INTEGER,
        FieldKind.FLOAT,
    }
)


def match_value(values: list[Expression]) -> ObjectLiteral | None:
    """``{ exact: v }`` for one value, ``{ in: [...] }`` for several."""
    if not values:
        return None
    if len(values) == 1:
        return ObjectLiteral([PropertyAssignment(PSM_EXACT_PARAMETER_NAME, values[0])])
    return ObjectLiteral([PropertyAssignment(PSM_IN_PARAMETER_NAME, ArrayLiteral(list(values)))])


def resolve_enum_tokens(enum_schema: GeneratedSchema | None, tokens: list[str]) -> list[Expression]:
    if enum_schema is None:
        return []

    values = []
    for token in tokens:
        value = build_enum_id_expression(enum_schema, enum_schema.generated_value_names.get(token))
        if value is None:
            logger.debug("Dropping default value %r: not a member of %s", token, enum_schema.generated_name)
            continue
        values.append(value)
    return values


def token_enum(options: DefinitionWriterOptions, kind: FieldKind | None) -> GeneratedSchema | None:
    """The generated enum default tokens of an enum or oneOf field resolve against."""
    generated = options.generated_field_schema
    if generated is None:
        return None
    if kind == FieldKind.ENUM:
        return generated
    if kind == FieldKind.ONE_OF:
        return generated.derived_one_of_enum
    return None


def build_default_filter_value(options: DefinitionWriterOptions, tokens: list[str]) -> ObjectLiteral | None:
    """Type the raw default tokens of one field, or None when none of them resolve."""
    if not tokens:
        return None

    kind = classify_field(options.field_schema)

    if kind in LITERAL_KINDS:
        return match_value([StringLiteral(token) for token in tokens])

    if kind == FieldKind.BOOLEAN:
        return match_value([BooleanLiteral(tokens[0].lower() == "true")])

    if kind in (FieldKind.ENUM, FieldKind.ONE_OF):
        return match_value(resolve_enum_tokens(token_enum(options, kind), tokens))

    logger.debug("Ignoring default values of %s: no default value support for %s fields", options.field.name, kind)
    return None


def build_default_filter(options: DefinitionWriterOptions, tokens: list[str]) -> Definition | None:
    """``{ type: { filters: [{ id, value }] } }`` for one field with default values."""
    id_expression = field_id_expression(options)
    if id_expression is None:
        return None

    value = build_default_filter_value(options, tokens)
    if value is None:
        return None

    entry = ObjectLiteral(
        [
            PropertyAssignment(PSM_ID_PARAMETER_NAME, id_expression),
            PropertyAssignment(PSM_VALUE_PARAMETER_NAME, value),
        ]
    )

    enum_schema = token_enum(options, classify_field(options.field_schema))
    imports = (enum_schema.generated_name,) if enum_schema is not None and enum_schema.is_enum_declaration else ()

    literal = ObjectLiteral(
        [
            PropertyAssignment(
                PSM_FILTER_TYPE_PARAMETER_NAME,
                ObjectLiteral([PropertyAssignment(PSM_FILTERS_PARAMETER_NAME, ArrayLiteral([entry]))], multiline=True),
            )
        ],
        multiline=True,
    )
    return Definition(literal, type_imports=imports)
