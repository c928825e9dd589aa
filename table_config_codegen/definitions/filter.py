"""
Filter definitions: ``BaseTableFilter<Fields, string, BaseFilterType>[]``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..schema import GeneratedClientFunction, GeneratedSchema
from ..ts_ast import ArrayType, KeywordType, ObjectLiteral, PropertyAssignment, TypeNode, TypeReference
from ..utils import camel_case, constant_case, pascal_case
from .context import Definition
from .dispatcher import build_type_definition
from .shared import (
    PSM_ID_PARAMETER_NAME,
    PSM_LABEL_PARAMETER_NAME,
    REACT_TABLE_STATE_PSM_IMPORT_PATH,
    DefinitionWriterOptions,
    as_label_expression,
    default_label_writer,
    field_id_expression,
)

if TYPE_CHECKING:
    from ..output import GeneratedFile

FILTER_STATE_TYPE_NAME = "FilterState"
REACT_TABLE_STATE_PSM_BASE_TABLE_FILTER_TYPE_NAME = "BaseTableFilter"
REACT_TABLE_STATE_PSM_BASE_TABLE_FILTER_TYPE_TYPE_NAME = "BaseFilterType"

PSM_FILTER_TYPE_PARAMETER_NAME = "type"
PSM_FILTERS_PARAMETER_NAME = "filters"
PSM_VALUE_PARAMETER_NAME = "value"
PSM_EXACT_PARAMETER_NAME = "exact"
PSM_IN_PARAMETER_NAME = "in"


def default_filter_definition_variable_name_writer(generated_function: GeneratedClientFunction, is_factory: bool) -> str:
    base = f"{generated_function.generated_name}-Filters"
    if is_factory:
        return camel_case(f"get-{base}")
    return pascal_case(base)


def default_filter_variable_name_writer(generated_function: GeneratedClientFunction) -> str:
    return constant_case(f"{generated_function.generated_name}-Default-Filters")


default_filter_label_writer = default_label_writer


def field_enum_type(field_enum: GeneratedSchema) -> TypeNode:
    if field_enum.generated_name:
        return TypeReference(name=field_enum.generated_name)
    return KeywordType(keyword="string")


def default_filter_type_reference_writer(
    file: GeneratedFile,
    generated_function: GeneratedClientFunction,
    field_enum: GeneratedSchema,
) -> TypeNode:
    """``BaseTableFilter<FieldEnum, string, BaseFilterType>[]``, importing the table-state types it names."""
    names = [REACT_TABLE_STATE_PSM_BASE_TABLE_FILTER_TYPE_NAME, REACT_TABLE_STATE_PSM_BASE_TABLE_FILTER_TYPE_TYPE_NAME]
    file.add_manual_import(REACT_TABLE_STATE_PSM_IMPORT_PATH, names, names)

    return ArrayType(
        element_type=TypeReference(
            name=REACT_TABLE_STATE_PSM_BASE_TABLE_FILTER_TYPE_NAME,
            type_arguments=[
                field_enum_type(field_enum),
                KeywordType(keyword="string"),
                TypeReference(name=REACT_TABLE_STATE_PSM_BASE_TABLE_FILTER_TYPE_TYPE_NAME),
            ],
        )
    )


def default_filter_type_definition_writer(options: DefinitionWriterOptions) -> Definition | None:
    """Build ``{ id, label, type }`` for one filterable field.

    Returns None when the field has no identifier in its field set or when
    no builder accepts its schema.
    """
    id_expression = field_id_expression(options)
    if id_expression is None:
        return None

    type_definition = build_type_definition(options)
    if type_definition is None:
        return None

    label = options.label_writer(options) if options.label_writer else None
    label_expression = as_label_expression(label) if label else id_expression

    return type_definition.with_expression(
        ObjectLiteral(
            [
                PropertyAssignment(PSM_ID_PARAMETER_NAME, id_expression),
                PropertyAssignment(PSM_LABEL_PARAMETER_NAME, label_expression),
                PropertyAssignment(PSM_FILTER_TYPE_PARAMETER_NAME, type_definition.expression),
            ],
            multiline=True,
        )
    )
