"""
Names, option types and helpers shared by the filter, search and sort
definition writers.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..schema import EnumOption, FieldSchema, GeneratedClientFunction, GeneratedSchema
from ..ts_ast import Expression, PropertyAccess, StringLiteral
from ..utils import last_path_segment, sentence_case

if TYPE_CHECKING:
    from .builders import DefinitionWriterConfig
    from .context import Definition

REACT_TABLE_STATE_PSM_IMPORT_PATH = "@pentops/react-table-state-psm"

PSM_ID_PARAMETER_NAME = "id"
PSM_LABEL_PARAMETER_NAME = "label"


@dataclass(frozen=True)
class DefinitionWriterOptions:
    """Everything a definition writer or builder gets to look at for one field."""

    generated_function: GeneratedClientFunction

    # The field set (filterable/searchable/sortable fields) the field belongs to
    field_enum: GeneratedSchema

    # The field's entry in the field set, or an enum option when passed to an option label writer
    field: EnumOption

    # Resolved schema of the field, used for dispatch
    field_schema: FieldSchema | None

    # Generated schema of the field's type (enums and oneOfs)
    generated_field_schema: GeneratedSchema | None

    config: DefinitionWriterConfig
    label_writer: LabelWriter | None = None


# Returns a label string, a label expression, or None when no label can be produced
LabelWriter = Callable[[DefinitionWriterOptions], "str | Expression | None"]

# Builds a definition for one field, or declines with None
DefinitionWriter = Callable[[DefinitionWriterOptions], "Definition | None"]

# Transforms or discards a definition after it was built
DefinitionHook = Callable[[DefinitionWriterOptions, "Definition"], "Definition | None"]

# Naming policy: (generated function, is factory) -> identifier
DefinitionVariableNameWriter = Callable[[GeneratedClientFunction, bool], str]


def build_enum_id_expression(enum_schema: GeneratedSchema, key_name: str | None) -> Expression | None:
    """Build the expression referring to one member of a generated enum.

    Enum declarations are referred to by member access (``Status.Active``),
    string unions by the literal itself.
    """
    if not key_name:
        return None

    if enum_schema.is_enum_declaration:
        return PropertyAccess(expression=enum_schema.generated_name, name=key_name)
    return StringLiteral(value=key_name)


def field_id_expression(options: DefinitionWriterOptions) -> Expression | None:
    """Expression identifying the field within its field set."""
    key_name = options.field_enum.generated_value_names.get(options.field.name)
    return build_enum_id_expression(options.field_enum, key_name)


def as_label_expression(label: str | Expression) -> Expression:
    if isinstance(label, str):
        return StringLiteral(value=label, single_quote=True)
    return label


def default_label_writer(options: DefinitionWriterOptions) -> str:
    """Sentence case of the last segment of the field (or option) name."""
    return sentence_case(last_path_segment(options.field.name))
