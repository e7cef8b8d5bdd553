"""Assemble per-table schemas and paths into one OpenAPI document."""

from __future__ import annotations

import json
from typing import Any, Iterable

from db_openapi_spec.core.config import config
from db_openapi_spec.core.exceptions import InvalidNameError, NameCollisionError
from db_openapi_spec.core.schemas import TableDescriptor
from db_openapi_spec.logger import logger
from db_openapi_spec.openapi.naming import derive_names
from db_openapi_spec.openapi.path_builder import build_paths
from db_openapi_spec.openapi.schema_builder import build_schema


def _check_path_segment(kind: str, name: str, table: str) -> None:
    if "{" in name or "}" in name:
        raise InvalidNameError(kind, name, table)


class DocumentBuilder:
    """Accumulates tables into an OpenAPI document.

    Paths and component schemas are only ever added to. Each derived key
    remembers the table that registered it so a second table deriving the
    same key is reported instead of overwriting the first.
    """

    def __init__(
        self,
        title: str = config.api_title,
        version: str = config.api_version,
        openapi_version: str = config.openapi_version,
    ) -> None:
        """Initialize an empty document.

        Args:
            title: Value of info.title
            version: Value of info.version
            openapi_version: Value of the top-level openapi field
        """
        self.title = title
        self.version = version
        self.openapi_version = openapi_version
        self.paths: dict[str, dict[str, Any]] = {}
        self.schemas: dict[str, dict[str, Any]] = {}
        self._schema_owners: dict[str, str] = {}
        self._path_owners: dict[str, str] = {}

    def add_table(self, table: TableDescriptor) -> None:
        """Add the schema and CRUD paths for one table.

        Args:
            table: Table to add

        Raises:
            NameCollisionError: If the table derives a schema name or path
                already registered by an earlier table
            InvalidNameError: If the table or primary key name contains a
                curly brace
        """
        names = derive_names(table.name)
        schema, primary_key = build_schema(table.columns)
        _check_path_segment("table", names.kebab, table.name)
        _check_path_segment("primary key", primary_key, table.name)
        paths = build_paths(
            table.name,
            names.kebab,
            names.upper_camel,
            names.singular,
            names.plural,
            primary_key,
        )

        # Check every key before touching the document
        if names.upper_camel in self._schema_owners:
            raise NameCollisionError(
                "schema",
                names.upper_camel,
                self._schema_owners[names.upper_camel],
                table.name,
            )
        for path in paths:
            if path in self._path_owners:
                raise NameCollisionError(
                    "path", path, self._path_owners[path], table.name
                )

        self.schemas[names.upper_camel] = schema
        self._schema_owners[names.upper_camel] = table.name
        for path, item in paths.items():
            self.paths[path] = item
            self._path_owners[path] = table.name

        logger.debug(
            "Added table %s as schema %s with paths %s",
            table.name,
            names.upper_camel,
            ", ".join(paths),
        )

    def build(self) -> dict[str, Any]:
        """Return the document built so far."""
        return {
            "openapi": self.openapi_version,
            "info": {"title": self.title, "version": self.version},
            "paths": self.paths,
            "components": {"schemas": self.schemas},
        }


def assemble(
    tables: Iterable[TableDescriptor],
    title: str = config.api_title,
    version: str = config.api_version,
) -> dict[str, Any]:
    """Build the OpenAPI document for tables in the order given.

    Args:
        tables: Tables in the order returned by the database
        title: Value of info.title
        version: Value of info.version

    Returns:
        The OpenAPI document as a JSON-compatible dictionary

    Raises:
        NameCollisionError: If two tables derive the same schema name or path
    """
    builder = DocumentBuilder(title=title, version=version)
    for table in tables:
        builder.add_table(table)
    return builder.build()


def serialize(document: dict[str, Any], indent: int = config.json_indent) -> str:
    """Serialize a document to pretty-printed JSON text."""
    return json.dumps(document, indent=indent, ensure_ascii=False) + "\n"
