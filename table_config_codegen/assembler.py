"""
Declaration assembler.

Turns the per-field definitions of one client function into exported
declarations: default sorts, search definitions, default filters and filter
definitions. A declaration whose definitions injected dependencies becomes
a factory taking those dependencies as parameters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .config import DefinitionTypeReferenceWriter, TableConfigGeneratorConfig
from .definitions import (
    FILTER_STATE_TYPE_NAME,
    REACT_TABLE_STATE_PSM_IMPORT_PATH,
    SORTING_STATE_TYPE_NAME,
    Definition,
    DefinitionHook,
    DefinitionVariableNameWriter,
    DefinitionWriter,
    DefinitionWriterConfig,
    DefinitionWriterOptions,
    DependencySet,
    LabelWriter,
    build_default_filter,
    build_default_sort,
)
from .output import GeneratedFile
from .schema import EnumOption, GeneratedClientFunction, GeneratedSchema, SchemaGraph
from .ts_ast import (
    ArrayLiteral,
    ArrowFunction,
    Expression,
    FunctionType,
    Parameter,
    TypeNode,
    TypeReference,
    VariableStatement,
)

logger = logging.getLogger(__name__)


@dataclass
class DeclarationSpec:
    """One exported declaration: a constant array, or a factory returning one."""

    name: str
    is_factory: bool
    parameters: list[Parameter] = field(default_factory=list)
    body: Expression | None = None
    type: TypeNode | None = None

    def to_statement(self) -> VariableStatement:
        if self.is_factory:
            return VariableStatement(
                name=self.name,
                type=FunctionType(parameters=list(self.parameters), return_type=self.type),
                initializer=ArrowFunction(parameters=list(self.parameters), body=self.body),
            )
        return VariableStatement(name=self.name, type=self.type, initializer=self.body)


@dataclass
class CollectedDefinitions:
    """Definitions built for the fields of one field set, in field order."""

    elements: list[Expression] = field(default_factory=list)
    dependencies: DependencySet = field(default_factory=DependencySet)
    type_imports: list[str] = field(default_factory=list)

    def add(self, definition: Definition) -> None:
        self.elements.append(definition.expression)
        self.dependencies = self.dependencies.merge(definition.dependencies)
        for name in definition.type_imports:
            if name not in self.type_imports:
                self.type_imports.append(name)


class DeclarationAssembler:
    """Assembles the declarations of client functions into generated files."""

    def __init__(self, graph: SchemaGraph, config: TableConfigGeneratorConfig):
        self.graph = graph
        self.config = config

    def assemble(self, file: GeneratedFile, generated_function: GeneratedClientFunction) -> list[VariableStatement]:
        """Build every declaration of one client function and add them to ``file``."""
        statements = []
        for build in (
            self.assemble_default_sorts,
            self.assemble_search_definitions,
            self.assemble_default_filters,
            self.assemble_filter_definitions,
        ):
            statement = build(file, generated_function)
            if statement is not None:
                file.add_statement(statement)
                statements.append(statement)
        return statements

    def declaration_names(self, generated_function: GeneratedClientFunction) -> set[str]:
        """Every name the naming policies can give a declaration of ``generated_function``.

        Covers both the constant and the factory name of each definitions
        declaration, whether or not the function currently produces it.
        """
        names = {
            self.config.filter.initial_values_variable_name_writer(generated_function),
            self.config.sort.initial_values_variable_name_writer(generated_function),
        }
        for name_writer in (self.config.filter.definition_variable_name_writer, self.config.search.definition_variable_name_writer):
            names.add(name_writer(generated_function, False))
            names.add(name_writer(generated_function, True))
        return names

    def managed_names(self, file: GeneratedFile) -> set[str]:
        """Names owned by the generator in ``file``, including those set by hooks."""
        names = {statement.name for statement in file.statements}
        for generated_function in file.functions:
            names |= self.declaration_names(generated_function)
        return names

    def field_options(
        self,
        generated_function: GeneratedClientFunction,
        field_enum: GeneratedSchema,
        entry: EnumOption,
        writer_config: DefinitionWriterConfig,
        label_writer: LabelWriter | None = None,
    ) -> DefinitionWriterOptions:
        """Resolve a field of a field set against the root entity of its function."""
        root_entity = generated_function.method.root_entity_schema
        field_schema = self.graph.get_property_by_path(entry.name, root_entity.schema if root_entity else None)
        if field_schema is None:
            field_schema = self.graph.resolve(entry.generic_reference)

        return DefinitionWriterOptions(
            generated_function=generated_function,
            field_enum=field_enum,
            field=entry,
            field_schema=field_schema,
            generated_field_schema=self.graph.get_generated_schema(field_schema),
            config=writer_config,
            label_writer=label_writer,
        )

    def collect_definitions(
        self,
        generated_function: GeneratedClientFunction,
        field_enum: GeneratedSchema,
        writer: DefinitionWriter,
        writer_config: DefinitionWriterConfig,
        label_writer: LabelWriter,
        hook: DefinitionHook | None,
    ) -> CollectedDefinitions:
        collected = CollectedDefinitions()

        for entry in field_enum.options:
            options = self.field_options(generated_function, field_enum, entry, writer_config, label_writer)

            definition = writer(options)
            if definition is not None and hook is not None:
                definition = hook(options, definition)

            if definition is None:
                logger.debug("No definition for field %s of %s", entry.name, generated_function.generated_name)
                continue

            collected.add(definition)

        return collected

    def _definitions_declaration(
        self,
        file: GeneratedFile,
        generated_function: GeneratedClientFunction,
        field_enum: GeneratedSchema,
        collected: CollectedDefinitions,
        name_writer: DefinitionVariableNameWriter,
        type_reference_writer: DefinitionTypeReferenceWriter,
    ) -> VariableStatement | None:
        if not collected.elements:
            return None

        is_factory = len(collected.dependencies) > 0

        file.add_generated_type_import(field_enum.generated_name)
        for name in collected.type_imports:
            file.add_generated_type_import(name)

        spec = DeclarationSpec(
            name=name_writer(generated_function, is_factory),
            is_factory=is_factory,
            parameters=collected.dependencies.to_parameters(),
            body=ArrayLiteral(collected.elements, multiline=True),
            type=type_reference_writer(file, generated_function, field_enum),
        )
        return spec.to_statement()

    def assemble_filter_definitions(self, file: GeneratedFile, generated_function: GeneratedClientFunction) -> VariableStatement | None:
        list_options = generated_function.method.list
        if generated_function.method.root_entity_schema is None or list_options is None or list_options.filterable_fields is None:
            return None

        filter_config = self.config.filter
        field_enum = list_options.filterable_fields
        collected = self.collect_definitions(
            generated_function,
            field_enum,
            filter_config.type_definition_writer,
            filter_config.type_definition_writer_config,
            filter_config.label_writer,
            filter_config.after_build_definition_hook,
        )
        return self._definitions_declaration(
            file,
            generated_function,
            field_enum,
            collected,
            filter_config.definition_variable_name_writer,
            filter_config.type_reference_writer,
        )

    def assemble_search_definitions(self, file: GeneratedFile, generated_function: GeneratedClientFunction) -> VariableStatement | None:
        list_options = generated_function.method.list
        if generated_function.method.root_entity_schema is None or list_options is None or list_options.searchable_fields is None:
            return None

        search_config = self.config.search
        field_enum = list_options.searchable_fields
        collected = self.collect_definitions(
            generated_function,
            field_enum,
            search_config.type_definition_writer,
            search_config.type_definition_writer_config,
            search_config.label_writer,
            search_config.after_build_definition_hook,
        )
        return self._definitions_declaration(
            file,
            generated_function,
            field_enum,
            collected,
            search_config.definition_variable_name_writer,
            search_config.type_reference_writer,
        )

    def assemble_default_filters(self, file: GeneratedFile, generated_function: GeneratedClientFunction) -> VariableStatement | None:
        list_options = generated_function.method.list
        if generated_function.method.root_entity_schema is None or list_options is None or list_options.filterable_fields is None:
            return None

        field_enum = list_options.filterable_fields
        collected = CollectedDefinitions()

        for entry in field_enum.options:
            tokens = list_options.default_filters.get(entry.name)
            if not tokens:
                continue
            options = self.field_options(generated_function, field_enum, entry, self.config.filter.type_definition_writer_config)
            definition = build_default_filter(options, tokens)
            if definition is not None:
                collected.add(definition)

        if not collected.elements:
            return None

        file.add_generated_type_import(field_enum.generated_name)
        for name in collected.type_imports:
            file.add_generated_type_import(name)
        file.add_manual_import(REACT_TABLE_STATE_PSM_IMPORT_PATH, [FILTER_STATE_TYPE_NAME], [FILTER_STATE_TYPE_NAME])

        statement = VariableStatement(
            name=self.config.filter.initial_values_variable_name_writer(generated_function),
            type=TypeReference(name=FILTER_STATE_TYPE_NAME, type_arguments=[TypeReference(name=field_enum.generated_name)]),
            initializer=ArrayLiteral(collected.elements, multiline=True),
        )

        hook = self.config.filter.after_build_initial_values_hook
        return hook(statement, generated_function, file) if hook else statement

    def assemble_default_sorts(self, file: GeneratedFile, generated_function: GeneratedClientFunction) -> VariableStatement | None:
        list_options = generated_function.method.list
        if generated_function.method.root_entity_schema is None or list_options is None or list_options.sortable_fields is None:
            return None

        field_enum = list_options.sortable_fields
        elements: list[Expression] = []

        for entry in field_enum.options:
            direction = list_options.default_sorts.get(entry.name)
            if direction is None:
                continue
            element = build_default_sort(field_enum, entry.name, direction)
            if element is not None:
                elements.append(element)

        if not elements:
            return None

        file.add_generated_type_import(field_enum.generated_name)
        file.add_manual_import(REACT_TABLE_STATE_PSM_IMPORT_PATH, [SORTING_STATE_TYPE_NAME], [SORTING_STATE_TYPE_NAME])

        statement = VariableStatement(
            name=self.config.sort.initial_values_variable_name_writer(generated_function),
            type=TypeReference(name=SORTING_STATE_TYPE_NAME, type_arguments=[TypeReference(name=field_enum.generated_name)]),
            initializer=ArrayLiteral(elements, multiline=True),
        )

        hook = self.config.sort.after_build_initial_values_hook
        return hook(statement, generated_function, file) if hook else statement
