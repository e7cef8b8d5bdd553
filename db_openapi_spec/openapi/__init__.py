"""Mapping of table metadata to OpenAPI schemas, paths and documents."""

from db_openapi_spec.openapi.assembler import DocumentBuilder, assemble, serialize
from db_openapi_spec.openapi.naming import derive_names
from db_openapi_spec.openapi.path_builder import build_paths
from db_openapi_spec.openapi.schema_builder import build_schema
from db_openapi_spec.openapi.type_mapper import map_format, map_type

__all__ = [
    "DocumentBuilder",
    "assemble",
    "serialize",
    "derive_names",
    "build_paths",
    "build_schema",
    "map_format",
    "map_type",
]
