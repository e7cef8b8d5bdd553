"""File system operations for output generation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from db_openapi_spec.core.config import config
from db_openapi_spec.openapi.assembler import serialize


class OutputManager:
    """Manages file system operations for output generation.

    This class handles creating the output directory and writing the
    assembled OpenAPI document.
    """

    def __init__(self, output_file: Path = config.output_file) -> None:
        """Initialize the output manager.

        Args:
            output_file: Path of the JSON document to write
        """
        self.output_file = output_file

    def create_output_structure(self) -> None:
        """Create the directory that will hold the output file.

        Raises:
            PermissionError: If unable to create directories
        """
        try:
            self.output_file.parent.mkdir(parents=True, exist_ok=True)
        except Exception as e:
            raise PermissionError(
                f"Failed to create output directory {self.output_file.parent}: {e}"
            ) from e

    def write_document(self, document: dict[str, Any]) -> Path:
        """Write an OpenAPI document as pretty-printed UTF-8 JSON.

        Args:
            document: Assembled OpenAPI document

        Returns:
            Path where the file was written

        Raises:
            PermissionError: If unable to write file
        """
        content = serialize(document)
        self.create_output_structure()
        try:
            with open(self.output_file, "w", encoding="utf-8") as f:
                f.write(content)

            return self.output_file

        except Exception as e:
            raise PermissionError(
                f"Failed to write document to {self.output_file}: {e}"
            ) from e
