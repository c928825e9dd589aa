"""
Command line tests.

The click command is invoked through CliRunner against the widget API.
"""

import json

from click.testing import CliRunner
from conftest import TEST_DATA

from table_config_codegen.table_config_codegen import table_config_codegen

API = str(TEST_DATA / "api.json")


class TestCli:
    """The table_config_codegen command"""

    def test_writes_default_file(self, tmp_path):
        result = CliRunner().invoke(table_config_codegen, [API, str(tmp_path)])

        assert result.exit_code == 0, result.output
        assert result.output == f"Wrote {tmp_path.resolve() / 'index.ts'}\n"
        assert "TestV1WidgetServiceListWidgetsFilters" in (tmp_path / "index.ts").read_text()

    def test_config_file(self, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(
            json.dumps(
                {
                    "files": [{"path": "widgets/table.ts", "methods": ["/test.v1.WidgetService/*"]}],
                    "generated_types_import_path": "../api",
                    "add_generation_comment": False,
                }
            )
        )
        output = tmp_path / "out"

        result = CliRunner().invoke(table_config_codegen, ["--config", str(config), API, str(output)])

        assert result.exit_code == 0, result.output
        content = (output / "widgets" / "table.ts").read_text()
        assert content.startswith("import type {")
        assert "} from '../api';" in content
        assert "ListGadgets" not in content

    def test_error_mode_refuses_existing_file(self, tmp_path):
        (tmp_path / "index.ts").write_text("export const pageSize = 25;\n")

        result = CliRunner().invoke(table_config_codegen, ["--mode", "error", API, str(tmp_path)])

        assert result.exit_code != 0
        assert isinstance(result.exception, FileExistsError)

    def test_merge_keeps_hand_written_code(self, tmp_path):
        (tmp_path / "index.ts").write_text("export const pageSize = 25;\n")

        result = CliRunner().invoke(table_config_codegen, [API, str(tmp_path)])

        assert result.exit_code == 0, result.output
        content = (tmp_path / "index.ts").read_text()
        assert content.startswith("// @generated by table_config_codegen")
        assert content.endswith("];\n\nexport const pageSize = 25;\n")

    def test_conflict_flag(self, tmp_path):
        (tmp_path / "index.ts").write_text("export const pageSize = 25;\n")

        result = CliRunner().invoke(table_config_codegen, ["--conflict", "regenerate", API, str(tmp_path)])

        assert result.exit_code == 0, result.output
        assert "pageSize" not in (tmp_path / "index.ts").read_text()

    def test_invalid_mode(self, tmp_path):
        result = CliRunner().invoke(table_config_codegen, ["--mode", "append", API, str(tmp_path)])
        assert result.exit_code == 2
