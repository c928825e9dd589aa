"""
Definition writers for filter, search and sort declarations.
"""

from __future__ import annotations

from .builders import (
    DefinitionWriterConfig,
    FilterType,
    default_any_filter_definition_builder,
    default_boolean_filter_definition_builder,
    default_date_filter_definition_builder,
    default_enum_filter_definition_builder,
    default_key_filter_definition_builder,
    default_numeric_filter_definition_builder,
    default_one_of_filter_definition_builder,
    default_polymorphic_filter_definition_builder,
    default_string_filter_definition_builder,
    default_timestamp_filter_definition_builder,
)
from .context import Definition, Dependency, DependencySet
from .defaults import build_default_filter, build_default_filter_value, match_value
from .dispatcher import DISPATCH_TABLE, FieldKind, build_type_definition, classify_field
from .filter import (
    FILTER_STATE_TYPE_NAME,
    default_filter_definition_variable_name_writer,
    default_filter_label_writer,
    default_filter_type_definition_writer,
    default_filter_type_reference_writer,
    default_filter_variable_name_writer,
)
from .search import (
    default_search_definition_variable_name_writer,
    default_search_label_writer,
    default_search_type_definition_writer,
    default_search_type_reference_writer,
)
from .shared import (
    REACT_TABLE_STATE_PSM_IMPORT_PATH,
    DefinitionHook,
    DefinitionVariableNameWriter,
    DefinitionWriter,
    DefinitionWriterOptions,
    LabelWriter,
    build_enum_id_expression,
    default_label_writer,
)
from .sort import SORTING_STATE_TYPE_NAME, build_default_sort, default_sort_variable_name_writer

__all__ = [
    "DISPATCH_TABLE",
    "FILTER_STATE_TYPE_NAME",
    "REACT_TABLE_STATE_PSM_IMPORT_PATH",
    "SORTING_STATE_TYPE_NAME",
    "Definition",
    "DefinitionHook",
    "DefinitionVariableNameWriter",
    "DefinitionWriter",
    "DefinitionWriterConfig",
    "DefinitionWriterOptions",
    "Dependency",
    "DependencySet",
    "FieldKind",
    "FilterType",
    "LabelWriter",
    "build_default_filter",
    "build_default_filter_value",
    "build_default_sort",
    "build_enum_id_expression",
    "build_type_definition",
    "classify_field",
    "default_any_filter_definition_builder",
    "default_boolean_filter_definition_builder",
    "default_date_filter_definition_builder",
    "default_enum_filter_definition_builder",
    "default_filter_definition_variable_name_writer",
    "default_filter_label_writer",
    "default_filter_type_definition_writer",
    "default_filter_type_reference_writer",
    "default_filter_variable_name_writer",
    "default_key_filter_definition_builder",
    "default_label_writer",
    "default_numeric_filter_definition_builder",
    "default_one_of_filter_definition_builder",
    "default_polymorphic_filter_definition_builder",
    "default_search_definition_variable_name_writer",
    "default_search_label_writer",
    "default_search_type_definition_writer",
    "default_search_type_reference_writer",
    "default_sort_variable_name_writer",
    "default_string_filter_definition_builder",
    "default_timestamp_filter_definition_builder",
    "match_value",
]
