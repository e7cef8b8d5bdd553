"""Tests for SQLAlchemy-backed table introspection against SQLite."""

from unittest.mock import Mock, patch

import pytest
from sqlalchemy import ARRAY, Integer, Text, create_engine

from conftest import sqlite_settings
from db_openapi_spec.core.exceptions import DatabaseConnectionError, DescribeTableError
from db_openapi_spec.database.inspector import DatabaseInspector, open_table_source
from db_openapi_spec.openapi.schema_builder import build_property


def test_list_tables(sqlite_db_settings):
    with open_table_source(sqlite_db_settings) as source:
        assert source.list_tables() == ["order_items", "users"]


def test_describe_users(sqlite_db_settings):
    with open_table_source(sqlite_db_settings) as source:
        columns = source.describe_table("users")

    assert list(columns) == ["id", "email", "bio"]
    assert columns["id"].raw_type == "INTEGER"
    assert columns["id"].is_primary_key
    assert not columns["id"].nullable
    assert columns["email"].raw_type == "VARCHAR(255)"
    assert not columns["email"].nullable
    assert not columns["email"].is_primary_key
    assert columns["bio"].raw_type == "TEXT"
    assert columns["bio"].nullable


def test_describe_composite_key_and_default(sqlite_db_settings):
    with open_table_source(sqlite_db_settings) as source:
        columns = source.describe_table("order_items")

    assert columns["order_id"].is_primary_key
    assert columns["product_id"].is_primary_key
    assert not columns["quantity"].is_primary_key
    assert columns["quantity"].default_value == "1"


def test_describe_missing_table(sqlite_db_settings):
    with open_table_source(sqlite_db_settings) as source:
        with pytest.raises(DescribeTableError) as exc_info:
            source.describe_table("missing")
    assert exc_info.value.table_name == "missing"


def test_connection_failure(tmp_path):
    settings = sqlite_settings(str(tmp_path / "no" / "such" / "dir" / "db.sqlite"))
    with pytest.raises(DatabaseConnectionError):
        with open_table_source(settings):
            pass


def test_engine_disposed_after_success(sqlite_db_settings):
    with patch("sqlalchemy.engine.Engine.dispose", autospec=True) as dispose:
        with open_table_source(sqlite_db_settings) as source:
            source.list_tables()
            dispose.assert_not_called()
    dispose.assert_called_once()


def test_engine_disposed_after_failure(sqlite_db_settings):
    with patch("sqlalchemy.engine.Engine.dispose", autospec=True) as dispose:
        with pytest.raises(RuntimeError):
            with open_table_source(sqlite_db_settings):
                raise RuntimeError("boom")
    dispose.assert_called_once()


def test_engine_disposed_after_connection_failure(tmp_path):
    settings = sqlite_settings(str(tmp_path / "missing" / "db.sqlite"))
    with patch("sqlalchemy.engine.Engine.dispose", autospec=True) as dispose:
        with pytest.raises(DatabaseConnectionError):
            with open_table_source(settings):
                pass
    dispose.assert_called_once()


def test_array_columns_are_reported_as_array():
    engine = create_engine("sqlite://")
    inspector = DatabaseInspector(engine)
    inspector._inspector = Mock(
        get_columns=Mock(
            return_value=[
                {"name": "scores", "type": ARRAY(Integer), "nullable": True, "default": None},
                {"name": "tags", "type": ARRAY(Text), "nullable": False, "default": None},
            ]
        ),
        get_pk_constraint=Mock(return_value={"constrained_columns": []}),
    )

    columns = inspector.describe_table("players")
    engine.dispose()

    assert columns["scores"].raw_type == "ARRAY"
    assert columns["tags"].raw_type == "ARRAY"
    assert build_property(columns["scores"]) == {"type": "array", "items": {"type": "string"}}
