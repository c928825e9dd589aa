"""
Node definitions for the API schema graph.

These nodes describe the schemas and list operations of an API as the
host generator sees them: the raw schema variants, the names the host
generated for them, and the list request options of each client function.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FieldSchema:
    """Base class for all schema variants."""

    # Fully qualified name for named schemas, property path for inline ones
    name: str = ""
    description: str | None = None


@dataclass
class StringSchema(FieldSchema):
    """A string value, optionally carrying a format hint ("date", "date-time", ...)."""

    format: str | None = None


@dataclass
class KeySchema(FieldSchema):
    """An entity key (usually a UUID rendered as a string)."""

    format: str | None = None


@dataclass
class BooleanSchema(FieldSchema):
    pass


@dataclass
class IntegerSchema(FieldSchema):
    format: str | None = None


@dataclass
class FloatSchema(FieldSchema):
    format: str | None = None


@dataclass
class DecimalSchema(FieldSchema):
    pass


@dataclass
class DateSchema(FieldSchema):
    pass


@dataclass
class TimestampSchema(FieldSchema):
    pass


@dataclass
class EnumOption:
    """One declared option of an enum, or one entry of a field set."""

    name: str = ""
    description: str | None = None

    # Schema of the field this entry points at (field sets only)
    generic_reference: FieldSchema | None = None


@dataclass
class EnumSchema(FieldSchema):
    options: list[EnumOption] = field(default_factory=list)


@dataclass
class PropertyDef:
    """A property of an object or oneOf schema."""

    name: str = ""
    schema: FieldSchema | None = None


@dataclass
class ObjectSchema(FieldSchema):
    properties: list[PropertyDef] = field(default_factory=list)

    def get_property(self, name: str) -> PropertyDef | None:
        return next((p for p in self.properties if p.name == name), None)


@dataclass
class OneOfSchema(FieldSchema):
    """A discriminated union; each property is one alternative."""

    properties: list[PropertyDef] = field(default_factory=list)

    def get_property(self, name: str) -> PropertyDef | None:
        return next((p for p in self.properties if p.name == name), None)


@dataclass
class PolymorphicSchema(FieldSchema):
    types: list[str] = field(default_factory=list)


@dataclass
class AnySchema(FieldSchema):
    pass


@dataclass
class ArraySchema(FieldSchema):
    items: FieldSchema | None = None


@dataclass
class MapSchema(FieldSchema):
    items: FieldSchema | None = None


@dataclass
class RefSchema(FieldSchema):
    """An unresolved reference to a named schema."""

    ref: str = ""


@dataclass
class GeneratedSchema:
    """A schema together with the names the host generated for it."""

    generated_name: str = ""
    schema: FieldSchema | None = None

    # Raw option name -> generated member identifier, in declaration order
    generated_value_names: dict[str, str] = field(default_factory=dict)

    # True when the enum is emitted as a TypeScript `enum` declaration,
    # False when it is emitted as a string-literal union type
    is_enum_declaration: bool = True

    # The implicit enum of alternative names of a oneOf schema
    derived_one_of_enum: GeneratedSchema | None = None

    @property
    def options(self) -> list[EnumOption]:
        if isinstance(self.schema, EnumSchema):
            return self.schema.options
        return []


@dataclass
class ListOptions:
    """List request options of one method."""

    filterable_fields: GeneratedSchema | None = None
    searchable_fields: GeneratedSchema | None = None
    sortable_fields: GeneratedSchema | None = None

    # Field name -> raw default value tokens
    default_filters: dict[str, list[str]] = field(default_factory=dict)

    # Field name -> "asc" | "desc"
    default_sorts: dict[str, str] = field(default_factory=dict)


@dataclass
class Method:
    full_grpc_name: str = ""
    root_entity_schema: GeneratedSchema | None = None
    list: ListOptions | None = None


@dataclass
class GeneratedClientFunction:
    """A client function generated by the host for one API method."""

    generated_name: str = ""
    method: Method = field(default_factory=Method)
