"""
Database OpenAPI Spec Generator

A Python package for generating OpenAPI 3.0 documents that describe CRUD
endpoints for every table of a relational database.
"""

__version__ = "1.0.0"

from db_openapi_spec.cli.generator import OpenAPIGenerator  # noqa: E402

__all__ = ["OpenAPIGenerator", "__version__"]
