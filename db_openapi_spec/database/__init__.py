"""Database introspection components."""

from db_openapi_spec.database.inspector import DatabaseInspector, open_table_source
from db_openapi_spec.database.interfaces import ITableSource

__all__ = ["DatabaseInspector", "ITableSource", "open_table_source"]
