"""
Search definitions: ``BaseTableSearch<Fields>[]``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..schema import GeneratedClientFunction, GeneratedSchema
from ..ts_ast import ArrayType, ObjectLiteral, PropertyAssignment, TypeNode, TypeReference
from ..utils import camel_case, pascal_case
from .context import Definition
from .filter import field_enum_type
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

REACT_TABLE_STATE_PSM_BASE_TABLE_SEARCH_TYPE_NAME = "BaseTableSearch"


def default_search_definition_variable_name_writer(generated_function: GeneratedClientFunction, is_factory: bool) -> str:
    base = f"{generated_function.generated_name}-Search-Fields"
    if is_factory:
        return camel_case(f"get-{base}")
    return pascal_case(base)


default_search_label_writer = default_label_writer


def default_search_type_reference_writer(
    file: GeneratedFile,
    generated_function: GeneratedClientFunction,
    field_enum: GeneratedSchema,
) -> TypeNode:
    names = [REACT_TABLE_STATE_PSM_BASE_TABLE_SEARCH_TYPE_NAME]
    file.add_manual_import(REACT_TABLE_STATE_PSM_IMPORT_PATH, names, names)

    return ArrayType(element_type=TypeReference(name=REACT_TABLE_STATE_PSM_BASE_TABLE_SEARCH_TYPE_NAME, type_arguments=[field_enum_type(field_enum)]))


def default_search_type_definition_writer(options: DefinitionWriterOptions) -> Definition | None:
    """Build ``{ id, label }`` for one searchable field; the label falls back to the id."""
    id_expression = field_id_expression(options)
    if id_expression is None:
        return None

    label = options.label_writer(options) if options.label_writer else None
    label_expression = as_label_expression(label) if label else id_expression

    return Definition(
        ObjectLiteral(
            [
                PropertyAssignment(PSM_ID_PARAMETER_NAME, id_expression),
                PropertyAssignment(PSM_LABEL_PARAMETER_NAME, label_expression),
            ],
            multiline=True,
        )
    )
