"""Database connection and table introspection via SQLAlchemy."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import ARRAY, create_engine, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import CompileError, SQLAlchemyError

from db_openapi_spec.core.config import DatabaseSettings
from db_openapi_spec.core.exceptions import DatabaseConnectionError, DescribeTableError
from db_openapi_spec.core.schemas import ColumnMetadata
from db_openapi_spec.logger import logger


class DatabaseInspector:
    """Lists tables and describes their columns.

    Wraps a SQLAlchemy inspector so the rest of the generator only sees
    table names and ColumnMetadata.
    """

    def __init__(self, engine: Engine) -> None:
        """Initialize the inspector.

        Args:
            engine: Connected SQLAlchemy engine, owned by the caller
        """
        self.engine = engine
        self._inspector = inspect(engine)

    def list_tables(self) -> list[str]:
        """Return table names in the order reported by the database.

        Raises:
            DescribeTableError: If the table listing fails
        """
        try:
            return list(self._inspector.get_table_names())
        except SQLAlchemyError as e:
            raise DescribeTableError(None, e) from e

    def describe_table(self, name: str) -> dict[str, ColumnMetadata]:
        """Describe the columns of a table.

        Args:
            name: Table name

        Returns:
            Mapping of column name to metadata, in column order

        Raises:
            DescribeTableError: If the table cannot be described
        """
        try:
            raw_columns = self._inspector.get_columns(name)
            pk_constraint = self._inspector.get_pk_constraint(name)
        except SQLAlchemyError as e:
            raise DescribeTableError(name, e) from e

        pk_columns = set(pk_constraint.get("constrained_columns") or [])
        columns: dict[str, ColumnMetadata] = {}
        for col in raw_columns:
            columns[col["name"]] = ColumnMetadata(
                name=col["name"],
                raw_type=self._compile_type(col["type"]),
                nullable=col.get("nullable", True),
                is_primary_key=col["name"] in pk_columns,
                default_value=self._default_value(col.get("default")),
                comment=col.get("comment"),
            )
            logger.debug(
                "Column %s.%s: %s", name, col["name"], columns[col["name"]].raw_type
            )
        return columns

    def _compile_type(self, column_type: Any) -> str:
        # Dialects render arrays as "<ELEMENT>[]", which would map to the element type
        if isinstance(column_type, ARRAY):
            return "ARRAY"
        try:
            return str(column_type.compile(dialect=self.engine.dialect))
        except CompileError:
            # Types without DDL (e.g. undeclared sqlite columns)
            return type(column_type).__name__.upper()

    @staticmethod
    def _default_value(default: Any) -> Any:
        if default is None or isinstance(default, (str, int, float, bool)):
            return default
        return str(default)


@contextmanager
def open_table_source(settings: DatabaseSettings) -> Iterator[DatabaseInspector]:
    """Connect to the database and yield an inspector.

    The engine is disposed when the block exits, whether it succeeds or fails.

    Args:
        settings: Connection settings

    Raises:
        DatabaseConnectionError: If the engine cannot be created or connected
    """
    url = settings.sqlalchemy_url()
    masked_url = url.render_as_string(hide_password=True)
    try:
        engine = create_engine(url, pool_pre_ping=True)
    except (SQLAlchemyError, ImportError) as e:
        # ImportError covers a missing DBAPI driver
        raise DatabaseConnectionError(masked_url, e) from e

    try:
        try:
            with engine.connect():
                pass
            inspector = DatabaseInspector(engine)
        except SQLAlchemyError as e:
            raise DatabaseConnectionError(masked_url, e) from e
        logger.info("Connected to %s", masked_url)
        yield inspector
    finally:
        engine.dispose()
        logger.debug("Released connection to %s", masked_url)
