"""
Statement reconciliation tests.

Generated TypeScript is merged into existing files that carry edits,
hand-written statements, stale declarations or syntax errors.
"""

import logging

import pytest

from table_config_codegen.merger import (
    CodeMergeError,
    ConflictPolicy,
    Statement,
    StatementKind,
    StatementReconciler,
    TypeScriptStatementIndexer,
    prefer_existing,
    regenerate,
)

GENERATED = """// @generated by table_config_codegen

import type { SortingState } from '@pentops/react-table-state-psm';
import { ListWidgetsSortableFields } from './api';

export const LIST_WIDGETS_DEFAULT_SORTS: SortingState<ListWidgetsSortableFields> = [
  {
    id: ListWidgetsSortableFields.CreatedAt,
    desc: true,
  },
];
"""

EDITED_SORTS = """export const LIST_WIDGETS_DEFAULT_SORTS: SortingState<ListWidgetsSortableFields> = [
  {
    id: ListWidgetsSortableFields.Name,
    desc: false,
  },
];"""

HAND_WRITTEN = "export const pageSize = 25;"


def existing_with(*statements):
    return GENERATED.replace(
        GENERATED[GENERATED.index("export const LIST_WIDGETS_DEFAULT_SORTS") :],
        "\n\n".join(statements) + "\n",
    )


class TestStatementIndexer:
    """Identity keys of top-level statements"""

    def setup_method(self):
        self.indexer = TypeScriptStatementIndexer()

    def statements(self, code):
        indexed, has_errors = self.indexer.index(code)
        assert not has_errors
        return indexed.statements

    def test_named_declarations(self):
        code = "export const A = 1;\ninterface B {}\ntype C = string;\nfunction d() {}\nenum E { X }\nclass F {}\n"
        assert [(s.kind, s.key) for s in self.statements(code)] == [
            (StatementKind.NAME, "A"),
            (StatementKind.NAME, "B"),
            (StatementKind.NAME, "C"),
            (StatementKind.NAME, "d"),
            (StatementKind.NAME, "E"),
            (StatementKind.NAME, "F"),
        ]

    def test_multiple_declarators(self):
        (statement,) = self.statements("const a = 1, b = 2;\n")
        assert statement.names == ("a", "b")

    def test_imports_are_keyed_by_module(self):
        statements = self.statements("import { A } from './api';\nimport type { B } from \"@pentops/react-table-state-psm\";\n")
        assert [(s.kind, s.key) for s in statements] == [
            (StatementKind.IMPORT, "./api"),
            (StatementKind.IMPORT, "@pentops/react-table-state-psm"),
        ]

    def test_other_statements_are_keyed_by_text(self):
        first, second = self.statements("// a comment\nconsole.log('x');\n")
        assert first.kind == StatementKind.TEXT
        assert second.kind == StatementKind.TEXT
        assert first.key != second.key

    def test_render_round_trips(self):
        code = "// heading\n\nimport { A } from './api';\n\nexport const B = A;\n"
        indexed, _ = self.indexer.index(code)
        assert indexed.render() == code

    def test_validate(self):
        self.indexer.validate("export const A = [1, 2];\n")
        with pytest.raises(CodeMergeError, match="Failed to parse"):
            self.indexer.validate("export const A = 1;\nexport const B = {;\n")


class TestStatementReconciler:
    """Merging generated code into an existing file"""

    def setup_method(self):
        self.reconciler = StatementReconciler()

    def test_no_existing_file(self):
        assert self.reconciler.reconcile(GENERATED, None) == GENERATED
        assert self.reconciler.reconcile(GENERATED, "") == GENERATED

    def test_unchanged_file(self):
        assert self.reconciler.reconcile(GENERATED, GENERATED) == GENERATED

    def test_hand_written_statement_is_preserved(self):
        existing = existing_with(EDITED_SORTS, HAND_WRITTEN)
        merged = self.reconciler.reconcile(GENERATED, existing)

        assert merged == GENERATED + "\n" + HAND_WRITTEN + "\n"

    def test_hand_written_statement_in_the_middle_moves_to_the_end(self):
        existing = GENERATED.replace("export const LIST", HAND_WRITTEN + "\n\nexport const LIST")
        merged = self.reconciler.reconcile(GENERATED, existing)

        assert merged.endswith("];\n\n" + HAND_WRITTEN + "\n")
        assert merged.count(HAND_WRITTEN) == 1

    def test_idempotent(self):
        existing = existing_with(EDITED_SORTS, HAND_WRITTEN)
        once = self.reconciler.reconcile(GENERATED, existing)

        assert self.reconciler.reconcile(GENERATED, once) == once

    def test_deterministic(self):
        existing = existing_with(EDITED_SORTS, HAND_WRITTEN)
        assert self.reconciler.reconcile(GENERATED, existing) == StatementReconciler().reconcile(GENERATED, existing)

    def test_imports_merge_by_module(self):
        existing = GENERATED.replace("import { ListWidgetsSortableFields } from './api';", 'import { Other } from "./api";')
        merged = self.reconciler.reconcile(GENERATED, existing)

        assert merged == GENERATED

    def test_output_ends_with_one_newline(self):
        merged = self.reconciler.reconcile(GENERATED, existing_with(HAND_WRITTEN) + "\n\n\n")
        assert merged.endswith(";\n")
        assert not merged.endswith("\n\n")

    def test_generated_code_must_parse(self):
        with pytest.raises(CodeMergeError):
            self.reconciler.reconcile("export const A = {;\n", GENERATED)

    def test_existing_file_with_syntax_errors(self, caplog):
        with caplog.at_level(logging.WARNING):
            merged = self.reconciler.reconcile(GENERATED, "export const broken = {;\n")

        assert "LIST_WIDGETS_DEFAULT_SORTS" in merged
        assert "syntax errors" in caplog.text


class TestConflictPolicies:
    """Built-in and custom conflict resolvers"""

    def test_prefer_generated_is_the_default(self):
        assert ConflictPolicy("prefer-generated").resolver is StatementReconciler().resolver

    def test_regenerate_drops_hand_written_statements(self):
        existing = existing_with(EDITED_SORTS, HAND_WRITTEN)
        merged = StatementReconciler(regenerate).reconcile(GENERATED, existing)

        assert merged == GENERATED

    def test_prefer_existing_keeps_edits_in_place(self):
        existing = existing_with(EDITED_SORTS, HAND_WRITTEN)
        merged = StatementReconciler(prefer_existing).reconcile(GENERATED, existing)

        assert "ListWidgetsSortableFields.Name" in merged
        assert "ListWidgetsSortableFields.CreatedAt" not in merged
        assert merged.index("ListWidgetsSortableFields.Name") < merged.index(HAND_WRITTEN)

    def test_custom_resolver_sees_both_sides(self):
        calls = []

        def resolver(new, existing):
            calls.append((new.key if new else None, existing.key if existing else None))
            return new if new is not None else existing

        StatementReconciler(resolver).reconcile(GENERATED, existing_with(EDITED_SORTS, HAND_WRITTEN))

        assert calls == [("LIST_WIDGETS_DEFAULT_SORTS", "LIST_WIDGETS_DEFAULT_SORTS"), (None, "pageSize")]

    def test_custom_resolver_can_drop_generated_statements(self):
        def resolver(new, existing):
            if new is not None and new.kind == StatementKind.NAME:
                return None
            return new if new is not None else existing

        merged = StatementReconciler(resolver).reconcile(GENERATED, existing_with(EDITED_SORTS))

        assert "LIST_WIDGETS_DEFAULT_SORTS" not in merged
        assert merged.endswith("from './api';\n")


class TestStatement:
    def test_name_statements_match_any_declared_name(self):
        single = Statement(text="const b = 3;", kind=StatementKind.NAME, key="b", names=("b",))
        multiple = Statement(text="const a = 1, b = 2;", kind=StatementKind.NAME, key="a", names=("a", "b"))

        assert single.matches(multiple)
        assert not multiple.matches(single)


class TestManagedStatements:
    """Existing declarations of names the generator owns"""

    STALE_FILTERS = "export const LIST_WIDGETS_DEFAULT_FILTERS: FilterState<ListWidgetsFilterableFields> = [];"

    def test_stale_managed_declaration_is_dropped(self):
        existing = existing_with(EDITED_SORTS, self.STALE_FILTERS, HAND_WRITTEN)
        merged = StatementReconciler().reconcile(GENERATED, existing, {"LIST_WIDGETS_DEFAULT_SORTS", "LIST_WIDGETS_DEFAULT_FILTERS"})

        assert "LIST_WIDGETS_DEFAULT_FILTERS" not in merged
        assert merged == GENERATED + "\n" + HAND_WRITTEN + "\n"

    def test_unmanaged_declaration_is_kept(self):
        existing = existing_with(EDITED_SORTS, self.STALE_FILTERS)
        merged = StatementReconciler().reconcile(GENERATED, existing, {"LIST_WIDGETS_DEFAULT_SORTS"})

        assert merged.endswith(self.STALE_FILTERS + "\n")

    def test_prefer_existing_drops_stale_declarations(self):
        existing = existing_with(EDITED_SORTS, self.STALE_FILTERS)
        merged = StatementReconciler(prefer_existing).reconcile(GENERATED, existing, {"LIST_WIDGETS_DEFAULT_FILTERS"})

        assert "ListWidgetsSortableFields.Name" in merged
        assert "LIST_WIDGETS_DEFAULT_FILTERS" not in merged

    def test_resolver_sees_managed_flag(self):
        seen = {}

        def resolver(new, existing):
            if existing is not None:
                seen[existing.key] = existing.managed
            return new if new is not None else existing

        existing = existing_with(EDITED_SORTS, self.STALE_FILTERS, HAND_WRITTEN)
        StatementReconciler(resolver).reconcile(GENERATED, existing, {"LIST_WIDGETS_DEFAULT_SORTS", "LIST_WIDGETS_DEFAULT_FILTERS"})

        assert seen == {
            "LIST_WIDGETS_DEFAULT_SORTS": True,
            "LIST_WIDGETS_DEFAULT_FILTERS": True,
            "pageSize": False,
        }

    def test_is_stale(self):
        managed = Statement(text="const a = 1;", kind=StatementKind.NAME, key="a", names=("a",), managed=True)
        hand_written = Statement(text="const b = 1;", kind=StatementKind.NAME, key="b", names=("b",))

        assert managed.is_stale(None)
        assert not managed.is_stale(managed.with_text("const a = 2;"))
        assert not hand_written.is_stale(None)
