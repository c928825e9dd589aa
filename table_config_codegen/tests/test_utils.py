import pytest

from table_config_codegen.utils import (
    camel_case,
    constant_case,
    last_path_segment,
    pascal_case,
    sentence_case,
    split_words,
)


class TestCaseConversion:
    """Identifier case conversion used for declaration names and labels"""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("createdAt", ["created", "At"]),
            ("list-widgets_v1", ["list", "widgets", "v1"]),
            ("HTTPServer", ["HTTP", "Server"]),
            ("", []),
        ],
    )
    def test_split_words(self, text, expected):
        assert split_words(text) == expected

    def test_pascal_case(self):
        assert pascal_case("listWidgets-Filters") == "ListWidgetsFilters"
        assert pascal_case("testV1WidgetServiceListWidgets") == "TestV1WidgetServiceListWidgets"
        assert pascal_case("ACTIVE") == "Active"

    def test_camel_case(self):
        assert camel_case("get-listWidgets-Filters") == "getListWidgetsFilters"
        assert camel_case("") == ""

    def test_constant_case(self):
        assert constant_case("listWidgets-Default-Sorts") == "LIST_WIDGETS_DEFAULT_SORTS"
        assert constant_case("testV1WidgetServiceListWidgets-Default-Filters") == "TEST_V1_WIDGET_SERVICE_LIST_WIDGETS_DEFAULT_FILTERS"

    def test_sentence_case(self):
        assert sentence_case("createdAt") == "Created at"
        assert sentence_case("widget_id") == "Widget id"
        assert sentence_case("ACTIVE") == "Active"

    def test_last_path_segment(self):
        assert last_path_segment("metadata.updatedAt") == "updatedAt"
        assert last_path_segment("name") == "name"
