"""Shared test fixtures."""

from contextlib import contextmanager
from pathlib import Path

import pytest
from sqlalchemy import create_engine, text

from db_openapi_spec.core.config import DatabaseSettings
from db_openapi_spec.core.exceptions import DescribeTableError
from db_openapi_spec.core.schemas import ColumnMetadata, TableDescriptor


def make_column(name, raw_type="INTEGER", nullable=False, primary_key=False, **extra):
    """Build a ColumnMetadata with terse defaults."""
    return ColumnMetadata(
        name=name,
        raw_type=raw_type,
        nullable=nullable,
        is_primary_key=primary_key,
        **extra,
    )


def make_table(name, *columns):
    return TableDescriptor(name=name, columns=list(columns))


@pytest.fixture
def users_table():
    """The users table used throughout the scenarios."""
    return make_table(
        "users",
        make_column("id", "INTEGER", nullable=False, primary_key=True),
        make_column("email", "VARCHAR(255)", nullable=False),
        make_column("bio", "TEXT", nullable=True),
    )


@pytest.fixture
def order_items_table():
    return make_table(
        "order_items",
        make_column("order_item_id", "BIGINT", primary_key=True),
        make_column("price", "DECIMAL(10,2)"),
        make_column("created_at", "TIMESTAMP", nullable=True),
    )


@pytest.fixture
def sqlite_db(tmp_path: Path) -> Path:
    """Create a SQLite database file with two tables."""
    db_path = tmp_path / "shop.db"
    engine = create_engine(f"sqlite:///{db_path}")
    with engine.begin() as conn:
        conn.execute(
            text(
                "CREATE TABLE users ("
                "id INTEGER PRIMARY KEY NOT NULL, "
                "email VARCHAR(255) NOT NULL, "
                "bio TEXT NULL)"
            )
        )
        conn.execute(
            text(
                "CREATE TABLE order_items ("
                "order_id INTEGER NOT NULL, "
                "product_id INTEGER NOT NULL, "
                "quantity INTEGER DEFAULT 1, "
                "PRIMARY KEY (order_id, product_id))"
            )
        )
    engine.dispose()
    return db_path


def sqlite_settings(database: str) -> DatabaseSettings:
    return DatabaseSettings(
        type="sqlite",
        host="localhost",
        port=5432,
        username="user",
        password="secret",
        database=database,
    )


@pytest.fixture
def sqlite_db_settings(sqlite_db: Path) -> DatabaseSettings:
    return sqlite_settings(str(sqlite_db))


class FakeTableSource:
    """In-memory table source that records whether it was released."""

    def __init__(self, tables, fail_on=None):
        self.tables = tables
        self.fail_on = fail_on
        self.released = False
        self.described: list[str] = []

    def list_tables(self):
        return [table.name for table in self.tables]

    def describe_table(self, name):
        if name == self.fail_on:
            raise DescribeTableError(name, RuntimeError("table vanished"))
        self.described.append(name)
        table = next(t for t in self.tables if t.name == name)
        return {column.name: column for column in table.columns}

    def factory(self):
        """Return a table source factory yielding this fake."""

        @contextmanager
        def open_source(settings):
            try:
                yield self
            finally:
                self.released = True

        return open_source
