"""
Configuration for the table config generator.

Every naming, labelling, building and hook policy is a plain callable on
these dataclasses. from_dict/to_dict cover the JSON-serialisable subset.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from fnmatch import fnmatchcase
from typing import TYPE_CHECKING

from .definitions import (
    DefinitionHook,
    DefinitionVariableNameWriter,
    DefinitionWriter,
    DefinitionWriterConfig,
    LabelWriter,
    default_filter_definition_variable_name_writer,
    default_filter_label_writer,
    default_filter_type_definition_writer,
    default_filter_type_reference_writer,
    default_filter_variable_name_writer,
    default_search_definition_variable_name_writer,
    default_search_label_writer,
    default_search_type_definition_writer,
    default_search_type_reference_writer,
    default_sort_variable_name_writer,
)
from .merger import ConflictPolicy, ConflictResolver
from .schema import GeneratedClientFunction, GeneratedSchema
from .ts_ast import TypeNode, VariableStatement

if TYPE_CHECKING:
    from .output import GeneratedFile

# (file, generated function, field enum) -> declared type of the array
DefinitionTypeReferenceWriter = Callable[["GeneratedFile", GeneratedClientFunction, GeneratedSchema], TypeNode]

# generated function -> identifier of a default-values declaration
VariableNameWriter = Callable[[GeneratedClientFunction], str]

# Transforms or discards an assembled default-values declaration
GeneratorHook = Callable[[VariableStatement, GeneratedClientFunction, "GeneratedFile"], "VariableStatement | None"]


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Raise error if file exists
    FORCE = "force"  # Overwrite without merging
    MERGE = "merge"  # Default: merge with existing file, preserving hand-written statements


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to check that the TypeScript parses before writing
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.MERGE
    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class FileConfig:
    """One output file and the client functions it collects.

    Attributes:
        path: Output path, relative to the output directory
        methods: Glob patterns matched against the gRPC name and the generated
            function name; empty matches every function
    """

    path: str = "index.ts"
    methods: list[str] = field(default_factory=list)

    def matches(self, generated_function: GeneratedClientFunction) -> bool:
        if not self.methods:
            return True
        candidates = (generated_function.method.full_grpc_name, generated_function.generated_name)
        return any(fnmatchcase(candidate, pattern) for pattern in self.methods for candidate in candidates)


@dataclass
class FilterConfig:
    """Filter definitions and default filters."""

    definition_variable_name_writer: DefinitionVariableNameWriter = default_filter_definition_variable_name_writer
    initial_values_variable_name_writer: VariableNameWriter = default_filter_variable_name_writer
    type_definition_writer: DefinitionWriter = default_filter_type_definition_writer
    type_definition_writer_config: DefinitionWriterConfig = field(default_factory=DefinitionWriterConfig)
    type_reference_writer: DefinitionTypeReferenceWriter = default_filter_type_reference_writer
    label_writer: LabelWriter = default_filter_label_writer
    after_build_definition_hook: DefinitionHook | None = None
    after_build_initial_values_hook: GeneratorHook | None = None


@dataclass
class SearchConfig:
    """Search definitions."""

    definition_variable_name_writer: DefinitionVariableNameWriter = default_search_definition_variable_name_writer
    type_definition_writer: DefinitionWriter = default_search_type_definition_writer
    type_definition_writer_config: DefinitionWriterConfig = field(default_factory=DefinitionWriterConfig)
    type_reference_writer: DefinitionTypeReferenceWriter = default_search_type_reference_writer
    label_writer: LabelWriter = default_search_label_writer
    after_build_definition_hook: DefinitionHook | None = None


@dataclass
class SortConfig:
    """Default sorts."""

    initial_values_variable_name_writer: VariableNameWriter = default_sort_variable_name_writer
    after_build_initial_values_hook: GeneratorHook | None = None


@dataclass
class TableConfigGeneratorConfig:
    """Configuration options for table config generation."""

    files: list[FileConfig] = field(default_factory=lambda: [FileConfig()])

    # Module the generated API types (field enums, enums) are imported from
    generated_types_import_path: str = "./api"

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Built-in conflict resolver, used unless statement_conflict_handler is set
    conflict_policy: ConflictPolicy = ConflictPolicy.PREFER_GENERATED
    statement_conflict_handler: ConflictResolver | None = None

    filter: FilterConfig = field(default_factory=FilterConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    sort: SortConfig = field(default_factory=SortConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @property
    def resolver(self) -> ConflictResolver:
        return self.statement_conflict_handler or self.conflict_policy.resolver

    @staticmethod
    def from_dict(d: dict) -> TableConfigGeneratorConfig:
        """Create a config from a dictionary."""
        config = TableConfigGeneratorConfig()
        for k, v in d.items():
            if k == "files" and isinstance(v, list):
                config.files = [FileConfig(path=f["path"], methods=list(f.get("methods", []))) if isinstance(f, dict) else FileConfig(path=f) for f in v]
            elif k == "conflict_policy":
                config.conflict_policy = ConflictPolicy(v)
            elif k == "output" and isinstance(v, dict):
                config.output = OutputConfig(
                    mode=OutputMode(v.get("mode", OutputMode.MERGE)),
                    validate_before_write=v.get("validate_before_write", True),
                    atomic_write=v.get("atomic_write", True),
                )
            elif k in ("generated_types_import_path", "add_generation_comment"):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert the serialisable part of the config to a dictionary."""
        return {
            "files": [{"path": f.path, "methods": f.methods} for f in self.files],
            "generated_types_import_path": self.generated_types_import_path,
            "add_generation_comment": self.add_generation_comment,
            "conflict_policy": self.conflict_policy.value,
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }
