"""
Atomic file writer for generated TypeScript.

Ensures that file writes are atomic so an interrupted run never leaves a
half-written table config behind.
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Callable
from pathlib import Path

from .statements import TypeScriptStatementIndexer

logger = logging.getLogger(__name__)


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate_typescript: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_typescript: Optional validation function for TypeScript code
        """
        self._validate_typescript = validate_typescript or TypeScriptStatementIndexer().validate

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            CodeMergeError: If validation fails
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory keeps the rename on one filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate:
                self._validate_typescript(content)

            temp_path.replace(path)
            logger.debug("Wrote %s", path)

        except Exception:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    logger.warning("Could not remove temporary file %s", temp_path)
            raise

    def write_if_not_exists(self, path: Path, content: str, validate: bool = True) -> bool:
        """Write content only if the file doesn't exist.

        Returns:
            True once the file was written

        Raises:
            FileExistsError: If the file already exists
            CodeMergeError: If validation fails
        """
        if path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite or merge mode to preserve custom code.")

        self.write(path, content, validate)
        return True
