from typing import Protocol

from db_openapi_spec.core.schemas import ColumnMetadata


class ITableSource(Protocol):
    def list_tables(self) -> list[str]: ...

    def describe_table(self, name: str) -> dict[str, ColumnMetadata]: ...
