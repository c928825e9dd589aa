"""
Output files collecting the declarations of one or more client functions.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from .config import FileConfig
from .schema import GeneratedClientFunction
from .ts_ast import ImportDeclaration, TypeScriptSerializer, VariableStatement

GENERATION_HEADING = [
    "@generated by table_config_codegen",
    "Generated declarations are updated in place on every run; other statements in this file are preserved.",
]


class GeneratedFile:
    """A TypeScript file under construction.

    Tracks the declarations added for matching client functions and the
    imports they need. ``content`` holds the final text once the file has
    been rendered and reconciled with what is on disk.
    """

    def __init__(self, config: FileConfig, generated_types_import_path: str, add_generation_comment: bool = True):
        self.config = config
        self.generated_types_import_path = generated_types_import_path
        self.add_generation_comment = add_generation_comment

        # module -> {name: type_only}
        self.manual_imports: dict[str, dict[str, bool]] = {}
        self.generated_type_imports: list[str] = []
        self.statements: list[VariableStatement] = []
        self.functions: list[GeneratedClientFunction] = []

        self.content: str | None = None

        self._serializer = TypeScriptSerializer()
        template_dir = Path(__file__).parent / "templates" / "typescript"
        self._jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self._template = self._jinja_env.get_template("file.ts.jinja2")

    @property
    def path(self) -> str:
        return self.config.path

    @property
    def has_content(self) -> bool:
        return bool(self.statements)

    def is_for_function(self, generated_function: GeneratedClientFunction) -> bool:
        return self.config.matches(generated_function)

    def add_manual_import(self, module: str, names: list[str], type_only_names: list[str] | None = None) -> None:
        """Import names from a module that is not part of the generated API types."""
        type_only = set(type_only_names or [])
        imported = self.manual_imports.setdefault(module, {})
        for name in names:
            # A value import of the same name wins over a type-only one
            imported[name] = imported.get(name, True) and name in type_only

    def add_generated_type_import(self, name: str) -> None:
        if name and name not in self.generated_type_imports:
            self.generated_type_imports.append(name)

    def add_function(self, generated_function: GeneratedClientFunction) -> None:
        self.functions.append(generated_function)

    def add_statement(self, statement: VariableStatement) -> None:
        self.statements.append(statement)

    def import_declarations(self) -> list[ImportDeclaration]:
        declarations = []
        for module in sorted(self.manual_imports):
            imported = self.manual_imports[module]
            declarations.append(
                ImportDeclaration(
                    module=module,
                    names=list(imported),
                    type_only_names=[name for name, type_only in imported.items() if type_only],
                )
            )
        if self.generated_type_imports:
            declarations.append(ImportDeclaration(module=self.generated_types_import_path, names=list(self.generated_type_imports)))
        return declarations

    def render(self) -> str:
        """Render the file from its imports and declarations."""
        rendered = self._template.render(
            heading=GENERATION_HEADING if self.add_generation_comment else [],
            imports=[self._serializer.serialize_statement(i) for i in self.import_declarations()],
            declarations=[self._serializer.serialize_statement(s) for s in self.statements],
        )
        return rendered.rstrip() + "\n"
