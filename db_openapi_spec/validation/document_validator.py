"""Validation of assembled OpenAPI documents."""

from __future__ import annotations

import re
from typing import Any

import jsonschema
from jsonschema import Draft7Validator

from db_openapi_spec.core.config import config
from db_openapi_spec.core.schemas import ValidationResult

REQUIRED_TOP_LEVEL_KEYS = ("openapi", "info", "paths", "components")
HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")

_PATH_TEMPLATE = re.compile(r"\{([^}]+)\}")


class DocumentValidator:
    """Validates generated OpenAPI documents.

    Component schemas are checked against JSON Schema Draft 7, references and
    path templates are checked against the rest of the document.
    """

    def validate_document(self, document: dict[str, Any]) -> ValidationResult:
        """Validate an assembled OpenAPI document.

        Args:
            document: Document to validate

        Returns:
            ValidationResult with validation status and any errors/warnings
        """
        result = ValidationResult(is_valid=True)

        self._validate_top_level(document, result)
        if not result.is_valid:
            return result

        schemas = document["components"].get("schemas", {})
        for name, schema in schemas.items():
            self._validate_component_schema(name, schema, result)

        for path, item in document["paths"].items():
            self._validate_path_item(path, item, result)

        self._check_refs(document, set(schemas), result, "")
        return result

    def _validate_top_level(
        self, document: dict[str, Any], result: ValidationResult
    ) -> None:
        for key in REQUIRED_TOP_LEVEL_KEYS:
            if key not in document:
                result.add_error(f"Missing '{key}' field in document")
        if not result.is_valid:
            return

        if not str(document["openapi"]).startswith("3.0"):
            result.add_error(f"Unsupported OpenAPI version '{document['openapi']}'")

        info = document["info"]
        if not isinstance(info, dict) or "title" not in info or "version" not in info:
            result.add_error("'info' must be an object with 'title' and 'version'")

        if not isinstance(document["paths"], dict):
            result.add_error("'paths' field must be an object")
        if not isinstance(document["components"], dict):
            result.add_error("'components' field must be an object")

    def _validate_component_schema(
        self, name: str, schema: Any, result: ValidationResult
    ) -> None:
        if not isinstance(schema, dict):
            result.add_error(f"Schema '{name}' must be an object")
            return
        try:
            Draft7Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            result.add_error(f"Schema '{name}' is not a valid JSON Schema: {e.message}")
            return

        properties = schema.get("properties") or {}
        if not properties:
            result.add_warning(f"Schema '{name}' has no properties")
        elif not any(prop.get("readOnly") for prop in properties.values()):
            result.add_warning(
                f"Schema '{name}' has no primary key column, item paths use 'id'"
            )

        for required in schema.get("required", []):
            if required not in properties:
                result.add_error(
                    f"Schema '{name}' requires undefined property '{required}'"
                )

    def _validate_path_item(
        self, path: str, item: dict[str, Any], result: ValidationResult
    ) -> None:
        template_params = set(_PATH_TEMPLATE.findall(path))
        for method, operation in item.items():
            if method not in HTTP_METHODS:
                result.add_error(f"Unknown operation '{method}' at path {path}")
                continue
            declared = {
                param.get("name")
                for param in operation.get("parameters", [])
                if param.get("in") == "path"
            }
            missing = template_params - declared
            if missing:
                result.add_error(
                    f"{method.upper()} {path} does not declare path parameter(s): "
                    + ", ".join(sorted(missing))
                )
            if not operation.get("responses"):
                result.add_error(f"{method.upper()} {path} has no responses")

    def _check_refs(
        self, obj: Any, schema_names: set[str], result: ValidationResult, path: str
    ) -> None:
        """Recursively check that every $ref points at a defined component schema.

        Args:
            obj: Object to check
            schema_names: Names defined under components.schemas
            result: Result to append errors to
            path: Current path in the object tree for error reporting
        """
        ref_field = config.openapi_fields.ref_field
        prefix = config.openapi_fields.schema_ref_prefix
        if isinstance(obj, dict):
            for key, value in obj.items():
                current_path = f"{path}.{key}" if path else str(key)
                if key == ref_field and isinstance(value, str):
                    target = value[len(prefix) :] if value.startswith(prefix) else None
                    if target not in schema_names:
                        result.add_error(
                            f"Unresolved reference at {current_path}: {value}"
                        )
                else:
                    self._check_refs(value, schema_names, result, current_path)
        elif isinstance(obj, list):
            for i, item in enumerate(obj):
                current_path = f"{path}[{i}]" if path else f"[{i}]"
                self._check_refs(item, schema_names, result, current_path)
