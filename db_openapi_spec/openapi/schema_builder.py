"""Build the OpenAPI Schema Object for one table."""

from __future__ import annotations

from typing import Any

from db_openapi_spec.core.schemas import ColumnMetadata
from db_openapi_spec.logger import logger
from db_openapi_spec.openapi.type_mapper import map_format, map_type

DEFAULT_PRIMARY_KEY = "id"


def build_property(column: ColumnMetadata) -> dict[str, Any]:
    """Build the schema property for a single column.

    Array columns are always described as arrays of strings; their element
    type, nullability and default are not modeled.

    Args:
        column: Column metadata as reported by the database

    Returns:
        Schema property with absent keys omitted rather than set to null
    """
    mapped = map_type(column.raw_type)
    prop: dict[str, Any]
    if mapped == "array":
        prop = {"type": "array", "items": {"type": "string"}}
    else:
        prop = {"type": [mapped, "null"] if column.nullable else mapped}
        fmt = map_format(column.raw_type)
        if fmt is not None:
            prop["format"] = fmt
        if column.default_value is not None:
            prop["default"] = column.default_value
    if column.comment:
        prop["description"] = column.comment
    if column.is_primary_key:
        prop["readOnly"] = True
    return prop


def build_schema(columns: list[ColumnMetadata]) -> tuple[dict[str, Any], str]:
    """Build the object schema for a table's columns.

    Args:
        columns: Columns in database order

    Returns:
        Tuple of (schema, primary key name). The primary key name is the first
        primary-key column, or "id" when the table has none.
    """
    properties: dict[str, Any] = {}
    required: list[str] = []
    primary_keys: list[str] = []

    for column in columns:
        properties[column.name] = build_property(column)
        if not column.nullable:
            required.append(column.name)
        if column.is_primary_key:
            primary_keys.append(column.name)

    if len(primary_keys) > 1:
        logger.warning(
            "Composite primary key (%s) is not modeled, using '%s'",
            ", ".join(primary_keys),
            primary_keys[0],
        )

    schema: dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema, primary_keys[0] if primary_keys else DEFAULT_PRIMARY_KEY
