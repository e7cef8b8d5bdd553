"""Core data models and shared types."""

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
from db_openapi_spec.core.schemas import (
    ColumnMetadata,
    TableDescriptor,
    TableNames,
    ValidationResult,
)

__all__ = [
    "ColumnMetadata",
    "TableDescriptor",
    "TableNames",
    "ValidationResult",
    "OpenAPIGenerationError",
    "DatabaseConnectionError",
    "DescribeTableError",
    "NameCollisionError",
    "InvalidNameError",
    "ConfigurationError",
    "ValidationError",
    "DatabaseSettings",
    "config",
]
