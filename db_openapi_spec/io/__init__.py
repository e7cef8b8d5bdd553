"""Output file handling."""

from db_openapi_spec.io.output_manager import OutputManager

__all__ = ["OutputManager"]
