"""Table Config Code Generator

Generates the filter, search and sort declarations a react-table-state-psm
table needs from an API description, and merges them into existing
TypeScript files without losing hand-written declarations.
"""

__version__ = "1.0.0"

from .assembler import DeclarationAssembler, DeclarationSpec
from .config import (
    FileConfig,
    FilterConfig,
    OutputConfig,
    OutputMode,
    SearchConfig,
    SortConfig,
    TableConfigGeneratorConfig,
)
from .definitions import Definition, DefinitionWriterConfig, DependencySet, FieldKind
from .generator import TableConfigGenerator
from .merger import AtomicWriter, CodeMergeError, ConflictPolicy, StatementReconciler
from .output import GeneratedFile
from .schema import SchemaError, SchemaGraph, parse_api_document

__all__ = [
    "TableConfigGenerator",
    "TableConfigGeneratorConfig",
    "FileConfig",
    "FilterConfig",
    "SearchConfig",
    "SortConfig",
    "OutputConfig",
    "OutputMode",
    "DefinitionWriterConfig",
    "Definition",
    "DependencySet",
    "FieldKind",
    "DeclarationAssembler",
    "DeclarationSpec",
    "GeneratedFile",
    "StatementReconciler",
    "ConflictPolicy",
    "CodeMergeError",
    "AtomicWriter",
    "SchemaError",
    "SchemaGraph",
    "parse_api_document",
]
