"""
Schema graph: named schemas, generated schemas and client functions.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .nodes import (
    ArraySchema,
    FieldSchema,
    GeneratedClientFunction,
    GeneratedSchema,
    MapSchema,
    ObjectSchema,
    OneOfSchema,
    RefSchema,
)


class SchemaError(Exception):
    """Raised when the API description cannot be turned into a schema graph.

    This can happen when:
    - A schema uses an unknown variant
    - A reference points at a schema that does not exist
    - A field set names the same field twice
    """

    pass


@dataclass
class SchemaGraph:
    """All schemas of an API and the client functions generated for it."""

    # Full name -> schema
    schemas: dict[str, FieldSchema] = field(default_factory=dict)

    # Full name -> generated schema (enums, oneOfs and objects)
    generated_schemas: dict[str, GeneratedSchema] = field(default_factory=dict)

    generated_client_functions: list[GeneratedClientFunction] = field(default_factory=list)

    def resolve(self, schema: FieldSchema | None) -> FieldSchema | None:
        """Follow references until a concrete schema is reached."""
        seen: set[str] = set()
        while isinstance(schema, RefSchema):
            if schema.ref in seen:
                raise SchemaError(f"Circular reference: {schema.ref}")
            seen.add(schema.ref)
            target = self.schemas.get(schema.ref)
            if target is None:
                raise SchemaError(f"Reference to unknown schema '{schema.ref}'")
            schema = target
        return schema

    def get_property_by_path(self, path: str, root: FieldSchema | None) -> FieldSchema | None:
        """Find the schema of a dotted property path below ``root``.

        References are followed at every step and arrays/maps unwrap to
        their item schema. Returns None when any segment does not exist.
        """
        current = self.resolve(root)

        for segment in path.split("."):
            current = self._unwrap(current)
            if not isinstance(current, (ObjectSchema, OneOfSchema)):
                return None
            prop = current.get_property(segment)
            if prop is None:
                return None
            current = self.resolve(prop.schema)

        return current

    def get_generated_schema(self, schema: FieldSchema | None) -> GeneratedSchema | None:
        """Return the generated counterpart of a named or inline schema, if any."""
        if schema is None or not schema.name:
            return None
        return self.generated_schemas.get(schema.name)

    def _unwrap(self, schema: FieldSchema | None) -> FieldSchema | None:
        while isinstance(schema, (ArraySchema, MapSchema)):
            schema = self.resolve(schema.items)
        return schema
