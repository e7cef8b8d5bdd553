"""Build the CRUD Path Item Objects for one table.

Pattern:
  GET    /{kebab}        -> list {plural}
  POST   /{kebab}        -> create a {singular}
  GET    /{kebab}/{pk}   -> get a {singular}
  PUT    /{kebab}/{pk}   -> update a {singular}
  DELETE /{kebab}/{pk}   -> delete a {singular}
"""

from __future__ import annotations

from typing import Any

from db_openapi_spec.core.config import config


def schema_ref(upper_camel_name: str) -> dict[str, str]:
    """Return a $ref object pointing at a component schema."""
    return {
        config.openapi_fields.ref_field: (
            f"{config.openapi_fields.schema_ref_prefix}{upper_camel_name}"
        )
    }


def _json_content(schema: dict[str, Any]) -> dict[str, Any]:
    return {config.openapi_fields.media_type: {"schema": schema}}


def _path_parameter(primary_key_name: str) -> dict[str, Any]:
    # Path parameters are always exposed as strings
    return {
        "name": primary_key_name,
        "in": "path",
        "required": True,
        "schema": {"type": "string"},
    }


def _not_found(singular_name: str) -> dict[str, Any]:
    return {"description": f"{singular_name} not found"}


def collection_path(kebab_name: str) -> str:
    return f"/{kebab_name}"


def item_path(kebab_name: str, primary_key_name: str) -> str:
    return f"/{kebab_name}/{{{primary_key_name}}}"


def build_paths(
    table_name: str,
    kebab_name: str,
    upper_camel_name: str,
    singular_name: str,
    plural_name: str,
    primary_key_name: str,
) -> dict[str, dict[str, Any]]:
    """Build the collection and item path entries for a table.

    Args:
        table_name: Raw table name, used in operation descriptions
        kebab_name: URL path segment
        upper_camel_name: Component schema name
        singular_name: Name used for single-entity operations
        plural_name: Name used for list operations
        primary_key_name: Name of the item path parameter

    Returns:
        Mapping of the two path strings to their Path Item Objects
    """
    ref = schema_ref(upper_camel_name)
    parameters = [_path_parameter(primary_key_name)]

    collection = {
        "get": {
            "summary": f"Get list of {plural_name}",
            "description": f"List all rows of table {table_name}",
            "responses": {
                "200": {
                    "description": f"A list of {plural_name}",
                    "content": _json_content({"type": "array", "items": ref}),
                },
            },
        },
        "post": {
            "summary": f"Create a new {singular_name}",
            "requestBody": {"required": True, "content": _json_content(ref)},
            "responses": {
                "201": {"description": f"{singular_name} created successfully"},
            },
        },
    }

    item = {
        "get": {
            "summary": f"Get a specific {singular_name} by {primary_key_name}",
            "parameters": parameters,
            "responses": {
                "200": {
                    "description": f"A single {singular_name}",
                    "content": _json_content(ref),
                },
                "404": _not_found(singular_name),
            },
        },
        "put": {
            "summary": f"Update a specific {singular_name} by {primary_key_name}",
            "parameters": parameters,
            "requestBody": {"required": True, "content": _json_content(ref)},
            "responses": {
                "200": {"description": f"{singular_name} updated successfully"},
                "404": _not_found(singular_name),
            },
        },
        "delete": {
            "summary": f"Delete a specific {singular_name} by {primary_key_name}",
            "parameters": parameters,
            "responses": {
                "200": {"description": f"{singular_name} deleted successfully"},
                "404": _not_found(singular_name),
            },
        },
    }

    return {
        collection_path(kebab_name): collection,
        item_path(kebab_name, primary_key_name): item,
    }
