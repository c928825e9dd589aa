from conftest import make_options

from table_config_codegen.definitions import DefinitionWriterConfig, build_type_definition
from table_config_codegen.schema import (
    AnySchema,
    BooleanSchema,
    DecimalSchema,
    EnumOption,
    EnumSchema,
    FloatSchema,
    GeneratedSchema,
    IntegerSchema,
    KeySchema,
    OneOfSchema,
    PolymorphicSchema,
    StringSchema,
    TimestampSchema,
)
from table_config_codegen.ts_ast import TypeScriptSerializer


def status_enum(value_names=None, is_enum_declaration=True):
    options = [EnumOption(name="ACTIVE"), EnumOption(name="INACTIVE"), EnumOption(name="ARCHIVED")]
    return GeneratedSchema(
        generated_name="WidgetStatus",
        schema=EnumSchema(name="test.v1.WidgetStatus", options=options),
        generated_value_names=value_names if value_names is not None else {"ACTIVE": "Active", "INACTIVE": "Inactive", "ARCHIVED": "Archived"},
        is_enum_declaration=is_enum_declaration,
    )


def render(definition):
    return TypeScriptSerializer().serialize_expression(definition.expression)


class TestEnumBuilder:
    """Enum filter definitions"""

    def test_options_in_declaration_order(self):
        generated = status_enum()
        definition = build_type_definition(make_options(generated.schema, generated_field_schema=generated))

        assert render(definition) == (
            "{\n"
            "  enum: {\n"
            "    options: [\n"
            "      { value: WidgetStatus.Active, label: 'Active' },\n"
            "      { value: WidgetStatus.Inactive, label: 'Inactive' },\n"
            "      { value: WidgetStatus.Archived, label: 'Archived' },\n"
            "    ],\n"
            "  },\n"
            "}"
        )
        assert definition.type_imports == ("WidgetStatus",)

    def test_unresolvable_option_is_skipped(self):
        """Options A, B, C where B has no generated identifier yield exactly A, C"""
        generated = status_enum({"ACTIVE": "Active", "ARCHIVED": "Archived"})
        definition = build_type_definition(make_options(generated.schema, generated_field_schema=generated))
        options = definition.expression.get("enum").get("options").elements

        assert [o.get("value").name for o in options] == ["Active", "Archived"]

    def test_option_without_label_is_skipped(self):
        generated = status_enum()
        config = DefinitionWriterConfig(enum_option_label_writer=lambda options: None if options.field.name == "ACTIVE" else "Label")
        definition = build_type_definition(make_options(generated.schema, generated_field_schema=generated, config=config))
        options = definition.expression.get("enum").get("options").elements

        assert [o.get("value").name for o in options] == ["Inactive", "Archived"]

    def test_string_union_values(self):
        generated = status_enum(is_enum_declaration=False)
        definition = build_type_definition(make_options(generated.schema, generated_field_schema=generated))

        assert "{ value: \"Active\", label: 'Active' }" in render(definition)
        assert definition.type_imports == ()

    def test_without_generated_schema(self):
        definition = build_type_definition(make_options(EnumSchema()))

        assert render(definition) == "{\n  enum: {\n    options: [],\n  },\n}"


class TestOneOfBuilder:
    """oneOf filter definitions iterate the derived type enum"""

    def test_uses_derived_enum(self):
        derived = GeneratedSchema(
            generated_name="WidgetKindType",
            schema=EnumSchema(options=[EnumOption(name="gadget"), EnumOption(name="gizmo")]),
            generated_value_names={"gadget": "Gadget", "gizmo": "Gizmo"},
        )
        generated = GeneratedSchema(generated_name="WidgetKind", schema=OneOfSchema(), derived_one_of_enum=derived)
        definition = build_type_definition(make_options(generated.schema, field_name="kind", generated_field_schema=generated))

        rendered = render(definition)
        assert rendered.startswith("{\n  oneOf: {")
        assert "{ value: WidgetKindType.Gadget, label: 'Gadget' }" in rendered
        assert "{ value: WidgetKindType.Gizmo, label: 'Gizmo' }" in rendered
        assert definition.type_imports == ("WidgetKindType",)


class TestScalarBuilders:
    """Date, timestamp and marker-only builders"""

    def test_timestamp_allows_time(self):
        definition = build_type_definition(make_options(StringSchema(format="date-time"), field_name="createdAt"))
        assert render(definition) == "{\n  date: { allowTime: true },\n}"

    def test_date_does_not_allow_time(self):
        definition = build_type_definition(make_options(StringSchema(format="date"), field_name="releaseDate"))
        assert render(definition) == "{\n  date: { allowTime: false },\n}"

    def test_timestamp_schema(self):
        definition = build_type_definition(make_options(TimestampSchema()))
        assert "allowTime: true" in render(definition)

    def test_markers(self):
        cases = [
            (StringSchema(), "{ string: {} }"),
            (KeySchema(), "{ string: {} }"),
            (BooleanSchema(), "{ boolean: {} }"),
            (IntegerSchema(), "{ numeric: {} }"),
            (FloatSchema(), "{ numeric: {} }"),
            (DecimalSchema(), "{ numeric: {} }"),
        ]
        for schema, expected in cases:
            assert render(build_type_definition(make_options(schema))) == expected

    def test_any_and_polymorphic_degrade_to_string(self):
        assert render(build_type_definition(make_options(AnySchema()))) == "{ string: {} }"
        assert render(build_type_definition(make_options(PolymorphicSchema()))) == "{ string: {} }"

    def test_markers_have_no_dependencies(self):
        definition = build_type_definition(make_options(StringSchema()))
        assert len(definition.dependencies) == 0
