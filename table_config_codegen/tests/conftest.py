import json
from pathlib import Path

import pytest

from table_config_codegen.definitions import DefinitionWriterConfig, DefinitionWriterOptions
from table_config_codegen.schema import (
    EnumOption,
    EnumSchema,
    GeneratedClientFunction,
    GeneratedSchema,
    Method,
    parse_api_document,
)

TEST_DATA = Path(__file__).parent / "test_data"


@pytest.fixture
def api_document():
    """The widget API description used across the tests."""
    with open(TEST_DATA / "api.json") as f:
        return json.load(f)


@pytest.fixture
def graph(api_document):
    return parse_api_document(api_document)


def field_set(name, fields, is_enum_declaration=True):
    """A generated field set enum over ``fields``, with PascalCase member names."""
    return GeneratedSchema(
        generated_name=name,
        schema=EnumSchema(name=name, options=[EnumOption(name=f) for f in fields]),
        generated_value_names={f: f[0].upper() + f[1:] for f in fields},
        is_enum_declaration=is_enum_declaration,
    )


def make_options(
    field_schema,
    field_name="status",
    generated_field_schema=None,
    config=None,
    label_writer=None,
    is_enum_declaration=True,
):
    """Definition writer options for a single field of a ``ListWidgets`` function."""
    return DefinitionWriterOptions(
        generated_function=GeneratedClientFunction(generated_name="listWidgets", method=Method(full_grpc_name="/test.v1.WidgetService/ListWidgets")),
        field_enum=field_set("ListWidgetsFilterableFields", [field_name], is_enum_declaration),
        field=EnumOption(name=field_name),
        field_schema=field_schema,
        generated_field_schema=generated_field_schema,
        config=config or DefinitionWriterConfig(),
        label_writer=label_writer,
    )
