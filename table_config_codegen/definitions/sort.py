"""
Default sorts: ``SortingState<Fields>``.
"""

from __future__ import annotations

from ..schema import GeneratedClientFunction, GeneratedSchema
from ..ts_ast import BooleanLiteral, ObjectLiteral, PropertyAssignment
from ..utils import constant_case
from .shared import PSM_ID_PARAMETER_NAME, build_enum_id_expression

SORTING_STATE_TYPE_NAME = "SortingState"
PSM_DESC_PARAMETER_NAME = "desc"


def default_sort_variable_name_writer(generated_function: GeneratedClientFunction) -> str:
    return constant_case(f"{generated_function.generated_name}-Default-Sorts")


def build_default_sort(field_enum: GeneratedSchema, field_name: str, direction: str) -> ObjectLiteral | None:
    """``{ id, desc }`` for a field with a default sort direction, or None when the field has no identifier."""
    id_expression = build_enum_id_expression(field_enum, field_enum.generated_value_names.get(field_name))
    if id_expression is None:
        return None

    return ObjectLiteral(
        [
            PropertyAssignment(PSM_ID_PARAMETER_NAME, id_expression),
            PropertyAssignment(PSM_DESC_PARAMETER_NAME, BooleanLiteral(direction == "desc")),
        ],
        multiline=True,
    )
