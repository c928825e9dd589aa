"""
Definition builders, one per schema variant.

Each builder produces the ``type`` literal of a filter definition
(``{ enum: { options: [...] } }``, ``{ date: { allowTime } }``,
``{ numeric: {} }``, ...). DefinitionWriterConfig bundles the builders so
that any single one can be replaced.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum

from ..schema import GeneratedSchema
from ..ts_ast import ArrayLiteral, BooleanLiteral, ObjectLiteral, PropertyAssignment
from .context import Definition
from .shared import (
    DefinitionWriter,
    DefinitionWriterOptions,
    LabelWriter,
    as_label_expression,
    build_enum_id_expression,
    default_label_writer,
)

logger = logging.getLogger(__name__)

OPTIONS_PARAMETER_NAME = "options"
OPTION_VALUE_PARAMETER_NAME = "value"
OPTION_LABEL_PARAMETER_NAME = "label"
DATE_ALLOW_TIME_PARAMETER_NAME = "allowTime"


class FilterType(str, Enum):
    """Filter categories understood by react-table-state-psm."""

    ENUM = "enum"
    ONE_OF = "oneOf"
    DATE = "date"
    NUMERIC = "numeric"
    STRING = "string"
    BOOLEAN = "boolean"


def _marker(filter_type: FilterType) -> Definition:
    """A literal naming its filter category with no further configuration."""
    return Definition(ObjectLiteral([PropertyAssignment(filter_type.value, ObjectLiteral())]))


def _build_options(
    options: DefinitionWriterOptions,
    enum_schema: GeneratedSchema,
    label_writer: LabelWriter,
) -> tuple[list[ObjectLiteral], tuple[str, ...]]:
    """Resolve ``{ value, label }`` for each option of ``enum_schema`` in declaration order.

    Options without a generated identifier or without a label are skipped.
    """
    literals: list[ObjectLiteral] = []

    for option in enum_schema.options:
        value = build_enum_id_expression(enum_schema, enum_schema.generated_value_names.get(option.name))
        if value is None:
            logger.debug("Skipping option %s of %s: no generated identifier", option.name, enum_schema.generated_name)
            continue

        label = label_writer(replace(options, field=option))
        if not label:
            logger.debug("Skipping option %s of %s: no label", option.name, enum_schema.generated_name)
            continue

        literals.append(
            ObjectLiteral(
                [
                    PropertyAssignment(OPTION_VALUE_PARAMETER_NAME, value),
                    PropertyAssignment(OPTION_LABEL_PARAMETER_NAME, as_label_expression(label)),
                ]
            )
        )

    imports = (enum_schema.generated_name,) if literals and enum_schema.is_enum_declaration else ()
    return literals, imports


def _options_definition(filter_type: FilterType, literals: list[ObjectLiteral], imports: tuple[str, ...]) -> Definition:
    return Definition(
        ObjectLiteral(
            [
                PropertyAssignment(
                    filter_type.value,
                    ObjectLiteral(
                        [PropertyAssignment(OPTIONS_PARAMETER_NAME, ArrayLiteral(list(literals), multiline=True))],
                        multiline=True,
                    ),
                )
            ],
            multiline=True,
        ),
        type_imports=imports,
    )


def default_enum_filter_definition_builder(options: DefinitionWriterOptions) -> Definition:
    literals: list[ObjectLiteral] = []
    imports: tuple[str, ...] = ()
    if options.generated_field_schema is not None:
        literals, imports = _build_options(options, options.generated_field_schema, options.config.enum_option_label_writer)
    return _options_definition(FilterType.ENUM, literals, imports)


def default_one_of_filter_definition_builder(options: DefinitionWriterOptions) -> Definition:
    """Same as the enum builder, over the oneOf's derived type enum."""
    literals: list[ObjectLiteral] = []
    imports: tuple[str, ...] = ()
    generated = options.generated_field_schema
    if generated is not None and generated.derived_one_of_enum is not None:
        literals, imports = _build_options(options, generated.derived_one_of_enum, options.config.one_of_option_label_writer)
    return _options_definition(FilterType.ONE_OF, literals, imports)


def _date_definition(allow_time: bool) -> Definition:
    return Definition(
        ObjectLiteral(
            [
                PropertyAssignment(
                    FilterType.DATE.value,
                    ObjectLiteral([PropertyAssignment(DATE_ALLOW_TIME_PARAMETER_NAME, BooleanLiteral(allow_time))]),
                )
            ],
            multiline=True,
        )
    )


def default_date_filter_definition_builder(options: DefinitionWriterOptions) -> Definition:
    return _date_definition(allow_time=False)


def default_timestamp_filter_definition_builder(options: DefinitionWriterOptions) -> Definition:
    return _date_definition(allow_time=True)


def default_string_filter_definition_builder(options: DefinitionWriterOptions) -> Definition:
    return _marker(FilterType.STRING)


def default_key_filter_definition_builder(options: DefinitionWriterOptions) -> Definition:
    return _marker(FilterType.STRING)


def default_boolean_filter_definition_builder(options: DefinitionWriterOptions) -> Definition:
    return _marker(FilterType.BOOLEAN)


def default_numeric_filter_definition_builder(options: DefinitionWriterOptions) -> Definition:
    """Shared by integer, float and decimal fields."""
    return _marker(FilterType.NUMERIC)


def default_any_filter_definition_builder(options: DefinitionWriterOptions) -> Definition:
    return _marker(FilterType.STRING)


def default_polymorphic_filter_definition_builder(options: DefinitionWriterOptions) -> Definition:
    return _marker(FilterType.STRING)


@dataclass
class DefinitionWriterConfig:
    """Builders per field kind; attribute names match FieldKind values."""

    enum: DefinitionWriter = default_enum_filter_definition_builder
    enum_option_label_writer: LabelWriter = default_label_writer
    one_of: DefinitionWriter = default_one_of_filter_definition_builder
    one_of_option_label_writer: LabelWriter = default_label_writer
    date: DefinitionWriter = default_date_filter_definition_builder
    timestamp: DefinitionWriter = default_timestamp_filter_definition_builder
    string: DefinitionWriter = default_string_filter_definition_builder
    key: DefinitionWriter = default_key_filter_definition_builder
    boolean: DefinitionWriter = default_boolean_filter_definition_builder
    integer: DefinitionWriter = default_numeric_filter_definition_builder
    float: DefinitionWriter = default_numeric_filter_definition_builder
    decimal: DefinitionWriter = default_numeric_filter_definition_builder
    any: DefinitionWriter = default_any_filter_definition_builder
    polymorphic: DefinitionWriter = default_polymorphic_filter_definition_builder

    def builder_for(self, kind: str) -> DefinitionWriter:
        return getattr(self, kind)

    def with_overrides(self, **overrides: DefinitionWriter | LabelWriter) -> DefinitionWriterConfig:
        """Return a copy with some builders or option label writers replaced."""
        unknown = [name for name in overrides if not hasattr(self, name)]
        if unknown:
            raise ValueError(f"Unknown definition writer(s): {', '.join(unknown)}")
        return replace(self, **overrides)
