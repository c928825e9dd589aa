"""
Table config generator.

Orchestrates the generation pipeline:
1. Assemble the declarations of every client function into its output files
2. Render each file and reconcile it with the file already on disk
3. Write the results
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path

from .assembler import DeclarationAssembler
from .config import OutputMode, TableConfigGeneratorConfig
from .merger import AtomicWriter, StatementReconciler, read_existing_file
from .output import GeneratedFile
from .schema import SchemaGraph

logger = logging.getLogger(__name__)

# Async reader of the current content of an output file
ExistingFileReader = Callable[[Path], Awaitable["str | None"]]


class TableConfigGenerator:
    """
    Generates table filter, search and sort declarations for an API.

    Usage:
        generator = TableConfigGenerator(graph, config, output_dir)
        written = generator.run()
    """

    def __init__(
        self,
        graph: SchemaGraph,
        config: TableConfigGeneratorConfig | None = None,
        output_dir: Path | str = ".",
    ):
        """
        Initialize the generator.

        Args:
            graph: The parsed API schema graph
            config: Generation configuration
            output_dir: Directory file paths are relative to
        """
        self.graph = graph
        self.config = config or TableConfigGeneratorConfig()
        self.output_dir = Path(output_dir)
        self.assembler = DeclarationAssembler(self.graph, self.config)

    def build_files(self) -> list[GeneratedFile]:
        """
        Assemble the output files, before any merging.

        Returns:
            Files that received at least one declaration, in configuration order
        """
        files = []
        for file_config in self.config.files:
            file = GeneratedFile(file_config, self.config.generated_types_import_path, self.config.add_generation_comment)

            for generated_function in self.graph.generated_client_functions:
                if file.is_for_function(generated_function):
                    file.add_function(generated_function)
                    self.assembler.assemble(file, generated_function)

            if file.has_content:
                files.append(file)
            else:
                logger.info("Skipping %s: no declarations", file.path)

        return files

    async def generate(self, reader: ExistingFileReader = read_existing_file) -> list[GeneratedFile]:
        """
        Build, render and reconcile every output file.

        Existing files are read concurrently; each file is then merged on
        its own. In force and error modes no existing file is read.

        Args:
            reader: Async reader returning the current content of a path, or None

        Returns:
            Files with their final ``content`` set
        """
        files = self.build_files()
        reconciler = StatementReconciler(self.config.resolver)
        merge = self.config.output.mode == OutputMode.MERGE

        async def finish(file: GeneratedFile) -> GeneratedFile:
            rendered = file.render()
            if merge:
                existing = await reader(self.output_dir / file.path)
                file.content = reconciler.reconcile(rendered, existing, self.assembler.managed_names(file))
            else:
                file.content = rendered
            return file

        return list(await asyncio.gather(*(finish(file) for file in files)))

    def write(self, files: list[GeneratedFile]) -> list[Path]:
        """
        Write generated files according to the output mode.

        Raises:
            FileExistsError: In error mode, if an output file already exists
            CodeMergeError: If a file fails validation
        """
        output = self.config.output
        writer = AtomicWriter()
        written = []

        for file in files:
            path = self.output_dir / file.path
            content = file.content if file.content is not None else file.render()

            if output.mode == OutputMode.ERROR_IF_EXISTS:
                writer.write_if_not_exists(path, content, validate=output.validate_before_write)
            elif output.atomic_write:
                writer.write(path, content, validate=output.validate_before_write)
            else:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(content, encoding="utf-8")

            written.append(path)

        return written

    def run(self) -> list[Path]:
        """Generate and write every output file."""
        return self.write(asyncio.run(self.generate()))
