"""Main class that orchestrates the OpenAPI generation process."""

from __future__ import annotations

import sys
from contextlib import AbstractContextManager
from pathlib import Path
from typing import Any, Callable

from db_openapi_spec.core.config import DatabaseSettings, config
from db_openapi_spec.core.exceptions import (
    ConfigurationError,
    DatabaseConnectionError,
    DescribeTableError,
    InvalidNameError,
    NameCollisionError,
    OpenAPIGenerationError,
    ValidationError,
)
from db_openapi_spec.core.schemas import TableDescriptor
from db_openapi_spec.database.inspector import open_table_source
from db_openapi_spec.database.interfaces import ITableSource
from db_openapi_spec.io.output_manager import OutputManager
from db_openapi_spec.logger import logger, setup_logger
from db_openapi_spec.openapi.assembler import assemble
from db_openapi_spec.validation.document_validator import DocumentValidator

TableSourceFactory = Callable[[DatabaseSettings], AbstractContextManager[ITableSource]]


class OpenAPIGenerator:
    """Main class that orchestrates the OpenAPI generation process.

    This class connects to the database, reads every table description,
    assembles and validates the document and writes it to the output file.
    The database connection is released whether or not generation succeeds.
    """

    def __init__(
        self,
        database: DatabaseSettings,
        output_path: Path = config.output_file,
        table_source_factory: TableSourceFactory = open_table_source,
    ) -> None:
        """Initialize the generator.

        Args:
            database: Connection settings for the database to introspect
            output_path: Path of the JSON document to write
            table_source_factory: Opens the table source for the settings
        """
        self.database = database
        self.output_path = output_path
        self.table_source_factory = table_source_factory
        self.output_manager = OutputManager(output_path)
        self.validator = DocumentValidator()

    def run(self) -> Path:
        """Run the complete generation process.

        Returns:
            Path where the document was written

        Raises:
            SystemExit: If any error occurs during generation
        """
        exit_codes = config.exit_codes
        try:
            setup_logger()
            logger.info("Generating OpenAPI document...")
            output_file = self.generate()
            logger.info(
                "OpenAPI document has been generated and saved to %s", output_file
            )
            return output_file
        except DatabaseConnectionError as e:
            logger.error("%s", e)
            sys.exit(exit_codes.error_connection)
        except DescribeTableError as e:
            logger.error("Error converting database tables to OpenAPI: %s", e)
            sys.exit(exit_codes.error_describe_table)
        except NameCollisionError as e:
            logger.error("Name collision: %s", e)
            sys.exit(exit_codes.error_name_collision)
        except InvalidNameError as e:
            logger.error("Invalid name: %s", e)
            sys.exit(exit_codes.error_invalid_name)
        except ValidationError as e:
            logger.error("Generated document is invalid: %s", e)
            sys.exit(exit_codes.error_validation_failed)
        except ConfigurationError as e:
            logger.error("Configuration error: %s", e)
            sys.exit(exit_codes.error_configuration)
        except OpenAPIGenerationError as e:
            logger.error("OpenAPI generation error: %s", e, exc_info=True)
            sys.exit(exit_codes.error_validation_failed)
        except PermissionError as e:
            logger.error("Unable to write output: %s", e)
            sys.exit(exit_codes.error_file_system)
        except Exception:
            logger.exception("Unexpected error occurred")
            sys.exit(exit_codes.error_unexpected)

    def run_for_testing(self) -> Path:
        """Run the complete generation process for testing.

        Unlike run(), this method raises exceptions instead of calling sys.exit(),
        making it suitable for unit tests.

        Returns:
            Path where the document was written

        Raises:
            OpenAPIGenerationError: If any error occurs during generation
            PermissionError: If the output file cannot be written
        """
        logger.info("Generating OpenAPI document...")
        return self.generate()

    def generate(self) -> Path:
        """Connect, read the tables, assemble, validate and write the document.

        Returns:
            Path where the document was written
        """
        with self.table_source_factory(self.database) as source:
            tables = self.read_tables(source)
            document = self.build_document(tables)
            return self.output_manager.write_document(document)

    def read_tables(self, source: ITableSource) -> list[TableDescriptor]:
        """Describe every table in the order the database lists them.

        Args:
            source: Connected table source

        Returns:
            Table descriptors in listing order

        Raises:
            DescribeTableError: If any table cannot be described
        """
        table_names = source.list_tables()
        logger.info("Discovered %d table(s)", len(table_names))

        tables: list[TableDescriptor] = []
        for name in table_names:
            logger.info("Describing table %s", name)
            description = source.describe_table(name)
            tables.append(TableDescriptor.from_description(name, description))
        return tables

    def build_document(self, tables: list[TableDescriptor]) -> dict[str, Any]:
        """Assemble and validate the document for the given tables.

        Raises:
            NameCollisionError: If two tables derive the same schema name or path
            ValidationError: If the assembled document is invalid
        """
        document = assemble(tables, title=config.api_title, version=config.api_version)

        validation_result = self.validator.validate_document(document)
        for warning in validation_result.warnings:
            logger.warning(warning)
        if not validation_result.is_valid:
            raise ValidationError(validation_result.errors)

        return document
