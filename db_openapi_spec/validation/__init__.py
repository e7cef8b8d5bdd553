"""Validation of generated OpenAPI documents."""

from db_openapi_spec.validation.document_validator import DocumentValidator

__all__ = ["DocumentValidator"]
