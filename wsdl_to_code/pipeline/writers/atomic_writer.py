"""
Atomic file writer for safe code generation.

Ensures that file writes are atomic to prevent data corruption
from interrupted operations.
"""

from __future__ import annotations

import ast
import logging
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..config import OutputConfig, OutputMode
from ..errors import CodeValidationError, OutputExistsError

logger = logging.getLogger(__name__)


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file

    This ensures that an interrupted write operation never leaves
    the target file in an incomplete state.
    """

    def __init__(
        self,
        output: OutputConfig | None = None,
        validate_python: Callable[[str], None] | None = None,
    ):
        """Initialize the atomic writer.

        Args:
            output: Output handling configuration
            validate_python: Optional validation function for Python code
        """
        self.output = output or OutputConfig()
        self._validate_python = validate_python or self._default_validate_python

    def write(self, path: Path, content: str) -> None:
        """Write content to file, honouring the configured output mode.

        Args:
            path: Target file path
            content: Content to write

        Raises:
            OutputExistsError: If the file exists and the mode forbids overwriting
            CodeValidationError: If validation fails
            OSError: If file operations fail
        """
        if self.output.mode == OutputMode.ERROR_IF_EXISTS and path.exists():
            raise OutputExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")

        if not self.output.atomic_write:
            if self.output.validate_before_write:
                self._validate_python(content)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        else:
            self._write_atomic(path, content, self.output.validate_before_write)
        logger.debug("Wrote %s", path)

    def _write_atomic(self, path: Path, content: str, validate: bool) -> None:
        # Ensure parent directory exists
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
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
                self._validate_python(content)

            # On POSIX systems, rename() is atomic if source and dest are on same filesystem
            temp_path.replace(path)

        except Exception:
            # Clean up temp file on any error
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    pass  # Best effort cleanup
            raise

    def _default_validate_python(self, content: str) -> None:
        """Default Python validation.

        Raises:
            CodeValidationError: If the code does not parse
        """
        try:
            ast.parse(content)
        except SyntaxError as e:
            raise CodeValidationError(f"Generated Python code is not valid: {e}") from e
