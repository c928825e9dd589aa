"""
API description parser that builds the schema graph.

Stands in for the host generator: it parses the JSON API description,
resolves field paths and assigns the generated names (type names, enum
member names, client function names) the table config generator consumes.
"""

from __future__ import annotations

import re
from typing import Any

from ..utils import camel_case, pascal_case
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

_NAME_SEPARATORS = re.compile(r"[./]")


def type_name(full_name: str) -> str:
    """Generated type name for a fully qualified schema name ("foo.v1.Widget" -> "FooV1Widget")."""
    return "".join(pascal_case(part) for part in _NAME_SEPARATORS.split(full_name) if part)


def method_name(full_grpc_name: str) -> str:
    """Generated client function name ("/foo.v1.WidgetService/ListWidgets" -> "fooV1WidgetServiceListWidgets")."""
    parts = [part for part in _NAME_SEPARATORS.split(full_grpc_name) if part]
    if not parts:
        return ""
    return camel_case(parts[0]) + "".join(pascal_case(part) for part in parts[1:])


class ApiDocumentParser:
    """Parses a JSON API description into a SchemaGraph."""

    # Payload-less variants
    SIMPLE_VARIANTS: dict[str, type[FieldSchema]] = {
        "bool": BooleanSchema,
        "boolean": BooleanSchema,
        "decimal": DecimalSchema,
        "date": DateSchema,
        "timestamp": TimestampSchema,
        "any": AnySchema,
    }

    # Variants carrying an optional format hint
    FORMATTED_VARIANTS: dict[str, type[FieldSchema]] = {
        "string": StringSchema,
        "key": KeySchema,
        "integer": IntegerSchema,
        "float": FloatSchema,
    }

    def __init__(self, enum_declarations: bool = True):
        """
        Initialize the parser.

        Args:
            enum_declarations: Whether generated enums are TypeScript `enum`
                declarations (member access) or string-literal unions
        """
        self.enum_declarations = enum_declarations

    def parse(self, document: dict[str, Any]) -> SchemaGraph:
        """
        Parse an API description.

        Args:
            document: The decoded JSON document

        Returns:
            SchemaGraph with schemas, generated schemas and client functions

        Raises:
            SchemaError: If the document is malformed
        """
        if not isinstance(document, dict):
            raise SchemaError("API description must be a JSON object")

        if "enumType" in document:
            self.enum_declarations = document["enumType"] != "union"

        graph = SchemaGraph()

        for name, raw in (document.get("schemas") or {}).items():
            graph.schemas[name] = self._parse_schema(raw, name)

        for name, schema in graph.schemas.items():
            generated = self._generate_schema(name, schema)
            if generated is not None:
                graph.generated_schemas[name] = generated

        for schema in list(graph.schemas.values()):
            self._generate_inline_schemas(schema, graph)

        for raw_method in document.get("methods") or []:
            if not isinstance(raw_method, dict):
                raise SchemaError("Method entries must be JSON objects")
            graph.generated_client_functions.append(self._parse_method(raw_method, graph))

        return graph

    def _parse_schema(self, raw: Any, path: str) -> FieldSchema:
        """
        Parse a schema object recursively.

        Args:
            raw: A one-key mapping {variant: payload}
            path: Name of the schema, or property path for inline schemas

        Returns:
            Appropriate FieldSchema subclass
        """
        if not isinstance(raw, dict) or not raw:
            raise SchemaError(f"Schema at '{path}' must be a non-empty object")

        description = raw.get("description")
        variants = [k for k in raw if k != "description"]
        if len(variants) != 1:
            raise SchemaError(f"Schema at '{path}' must declare exactly one variant, got {variants}")

        variant = variants[0]
        payload = raw[variant] if isinstance(raw[variant], dict) else {}

        if variant in ("ref", "$ref"):
            ref = raw[variant] if isinstance(raw[variant], str) else payload.get("schema", "")
            return RefSchema(name="", description=description, ref=ref)

        if variant in self.SIMPLE_VARIANTS:
            return self.SIMPLE_VARIANTS[variant](name=path, description=description)

        if variant in self.FORMATTED_VARIANTS:
            return self.FORMATTED_VARIANTS[variant](name=path, description=description, format=payload.get("format"))

        if variant == "enum":
            options = [self._parse_option(o, path) for o in payload.get("options", [])]
            return EnumSchema(name=path, description=description, options=options)

        if variant == "object":
            return ObjectSchema(name=path, description=description, properties=self._parse_properties(payload, path))

        if variant == "oneOf":
            return OneOfSchema(name=path, description=description, properties=self._parse_properties(payload, path))

        if variant in ("polymorph", "polymorphic"):
            return PolymorphicSchema(name=path, description=description, types=list(payload.get("types", [])))

        if variant == "array":
            return ArraySchema(name=path, description=description, items=self._parse_schema(payload.get("items"), f"{path}[]"))

        if variant == "map":
            return MapSchema(name=path, description=description, items=self._parse_schema(payload.get("items"), f"{path}{{}}"))

        raise SchemaError(f"Unknown schema variant '{variant}' at '{path}'")

    def _parse_option(self, raw: Any, path: str) -> EnumOption:
        if isinstance(raw, str):
            return EnumOption(name=raw)
        if not isinstance(raw, dict) or "name" not in raw:
            raise SchemaError(f"Enum option at '{path}' must be a string or an object with a name")
        return EnumOption(name=raw["name"], description=raw.get("description"))

    def _parse_properties(self, payload: dict[str, Any], path: str) -> list[PropertyDef]:
        raw_properties = payload.get("properties", [])
        if isinstance(raw_properties, dict):
            raw_properties = [{"name": k, "schema": v} for k, v in raw_properties.items()]

        properties = []
        for raw in raw_properties:
            name = raw.get("name")
            if not name:
                raise SchemaError(f"Property without a name at '{path}'")
            properties.append(PropertyDef(name=name, schema=self._parse_schema(raw.get("schema"), f"{path}.{name}")))
        return properties

    def _generate_schema(self, name: str, schema: FieldSchema) -> GeneratedSchema | None:
        """Assign generated names to a named schema."""
        if isinstance(schema, EnumSchema):
            return self._generate_enum(type_name(name), schema)

        if isinstance(schema, OneOfSchema):
            generated_name = type_name(name)
            derived = EnumSchema(
                name=f"{name}.type",
                options=[EnumOption(name=p.name, description=p.schema.description if p.schema else None) for p in schema.properties],
            )
            return GeneratedSchema(
                generated_name=generated_name,
                schema=schema,
                is_enum_declaration=self.enum_declarations,
                derived_one_of_enum=self._generate_enum(f"{generated_name}Type", derived),
            )

        if isinstance(schema, ObjectSchema):
            return GeneratedSchema(generated_name=type_name(name), schema=schema, is_enum_declaration=False)

        return None

    def _generate_inline_schemas(self, schema: FieldSchema | None, graph: SchemaGraph) -> None:
        """Name the enums and oneOfs declared inline below ``schema``, keyed by property path."""
        if isinstance(schema, (ObjectSchema, OneOfSchema)):
            children = [p.schema for p in schema.properties]
        elif isinstance(schema, (ArraySchema, MapSchema)):
            children = [schema.items]
        else:
            return

        for child in children:
            if isinstance(child, (EnumSchema, OneOfSchema)) and child.name not in graph.generated_schemas:
                graph.generated_schemas[child.name] = self._generate_schema(child.name, child)
            self._generate_inline_schemas(child, graph)

    def _generate_enum(self, generated_name: str, schema: EnumSchema) -> GeneratedSchema:
        value_names: dict[str, str] = {}
        for option in schema.options:
            identifier = pascal_case(option.name)
            if identifier:
                value_names[option.name] = identifier
        return GeneratedSchema(
            generated_name=generated_name,
            schema=schema,
            generated_value_names=value_names,
            is_enum_declaration=self.enum_declarations,
        )

    def _parse_method(self, raw: dict[str, Any], graph: SchemaGraph) -> GeneratedClientFunction:
        full_grpc_name = raw.get("fullGrpcName")
        if not full_grpc_name:
            raise SchemaError("Method without fullGrpcName")

        function_name = method_name(full_grpc_name)
        method = Method(full_grpc_name=full_grpc_name)

        root_name = raw.get("rootEntity")
        if root_name:
            if root_name not in graph.schemas:
                raise SchemaError(f"Method '{full_grpc_name}' lists unknown entity '{root_name}'")
            method.root_entity_schema = graph.generated_schemas.get(root_name) or GeneratedSchema(
                generated_name=type_name(root_name), schema=graph.schemas[root_name]
            )

        raw_list = raw.get("list")
        if raw_list is not None:
            if not isinstance(raw_list, dict):
                raise SchemaError(f"List options of '{full_grpc_name}' must be a JSON object")
            root = method.root_entity_schema.schema if method.root_entity_schema else None
            list_options = ListOptions()
            prefix = pascal_case(function_name)

            filterable = self._field_entries(raw_list.get("filterableFields"), full_grpc_name)
            searchable = self._field_entries(raw_list.get("searchableFields"), full_grpc_name)
            sortable = self._field_entries(raw_list.get("sortableFields"), full_grpc_name)

            if filterable:
                list_options.filterable_fields = self._field_set(f"{prefix}FilterableFields", filterable, root, graph)
                for entry in filterable:
                    if entry.get("defaultValues"):
                        list_options.default_filters[entry["name"]] = [str(v) for v in entry["defaultValues"]]
            if searchable:
                list_options.searchable_fields = self._field_set(f"{prefix}SearchableFields", searchable, root, graph)
            if sortable:
                list_options.sortable_fields = self._field_set(f"{prefix}SortableFields", sortable, root, graph)
                for entry in sortable:
                    if entry.get("defaultSort"):
                        list_options.default_sorts[entry["name"]] = entry["defaultSort"]

            method.list = list_options

        return GeneratedClientFunction(generated_name=function_name, method=method)

    def _field_entries(self, raw: Any, full_grpc_name: str) -> list[dict[str, Any]]:
        entries = []
        for entry in raw or []:
            if isinstance(entry, str):
                entry = {"name": entry}
            if not isinstance(entry, dict) or not entry.get("name"):
                raise SchemaError(f"Field entry of '{full_grpc_name}' must be a name or an object with a name")
            entries.append(entry)
        return entries

    def _field_set(
        self,
        generated_name: str,
        entries: list[dict[str, Any]],
        root: FieldSchema | None,
        graph: SchemaGraph,
    ) -> GeneratedSchema:
        """Build the generated enum listing the fields of one field set."""
        options: list[EnumOption] = []
        value_names: dict[str, str] = {}
        seen_identifiers: set[str] = set()

        for entry in entries:
            name = entry["name"]
            if name in value_names:
                raise SchemaError(f"Field '{name}' listed twice in {generated_name}")

            identifier = pascal_case(name)
            if identifier in seen_identifiers:
                raise SchemaError(f"Fields of {generated_name} collide on identifier '{identifier}'")
            seen_identifiers.add(identifier)
            value_names[name] = identifier

            options.append(
                EnumOption(
                    name=name,
                    description=entry.get("description"),
                    generic_reference=graph.get_property_by_path(name, root),
                )
            )

        return GeneratedSchema(
            generated_name=generated_name,
            schema=EnumSchema(name=generated_name, options=options),
            generated_value_names=value_names,
            is_enum_declaration=self.enum_declarations,
        )


def parse_api_document(document: dict[str, Any], enum_declarations: bool = True) -> SchemaGraph:
    """Parse a JSON API description into a SchemaGraph."""
    return ApiDocumentParser(enum_declarations).parse(document)
