"""Test configuration loading and error handling."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from db_openapi_spec.core.config import Config, DatabaseSettings
from db_openapi_spec.core.exceptions import ConfigurationError

FULL_SETTINGS = {
    "type": "postgres",
    "host": "db.internal",
    "port": 5432,
    "username": "reader",
    "password": "s3cret",
    "database": "shop",
}


def test_config_defaults():
    with patch.dict(os.environ, {}, clear=True):
        config = Config(_env_file=None)
    assert config.output_file == Path("openapi.json")
    assert config.openapi_version == "3.0.0"
    assert config.api_title == "Generated API"
    assert config.api_version == "1.0.0"
    assert config.json_indent == 2
    assert config.exit_codes.success == 0


def test_config_reads_environment():
    with patch.dict(os.environ, {"API_TITLE": "Shop API"}, clear=True):
        config = Config(_env_file=None)
    assert config.api_title == "Shop API"


def test_missing_database_setting_raises_configuration_error():
    """Missing values are reported by their environment variable name."""
    with patch.dict(os.environ, {}, clear=True):
        with pytest.raises(ConfigurationError) as exc_info:
            DatabaseSettings(_env_file=None)

    error = exc_info.value
    assert error.variable_name == "DB_TYPE"
    assert "Required configuration variable 'DB_TYPE' is not set" in str(error)


def test_missing_host_is_reported():
    settings = {k: v for k, v in FULL_SETTINGS.items() if k != "host"}
    with patch.dict(os.environ, {}, clear=True):
        with pytest.raises(ConfigurationError) as exc_info:
            DatabaseSettings(_env_file=None, **settings)
    assert exc_info.value.variable_name == "DB_HOST"


def test_database_settings_from_environment():
    env = {f"DB_{k.upper()}": str(v) for k, v in FULL_SETTINGS.items()}
    with patch.dict(os.environ, env, clear=True):
        settings = DatabaseSettings(_env_file=None)
    assert settings.host == "db.internal"
    assert settings.port == 5432
    assert settings.password.get_secret_value() == "s3cret"


def test_unsupported_database_type():
    with pytest.raises(ConfigurationError) as exc_info:
        DatabaseSettings(_env_file=None, **{**FULL_SETTINGS, "type": "cassandra"})
    assert exc_info.value.variable_name == "DB_TYPE"
    assert "Unsupported database type 'cassandra'" in str(exc_info.value)


@pytest.mark.parametrize("port", [0, 70000])
def test_out_of_range_port(port):
    with pytest.raises(ConfigurationError) as exc_info:
        DatabaseSettings(_env_file=None, **{**FULL_SETTINGS, "port": port})
    assert exc_info.value.variable_name == "DB_PORT"
    assert "Invalid configuration variable 'DB_PORT'" in str(exc_info.value)


def test_non_numeric_port_from_environment():
    env = {f"DB_{k.upper()}": str(v) for k, v in FULL_SETTINGS.items()}
    env["DB_PORT"] = "five"
    with patch.dict(os.environ, env, clear=True):
        with pytest.raises(ConfigurationError) as exc_info:
            DatabaseSettings(_env_file=None)
    assert exc_info.value.variable_name == "DB_PORT"


def test_database_type_is_normalized():
    settings = DatabaseSettings(_env_file=None, **{**FULL_SETTINGS, "type": "PostgreSQL"})
    assert settings.type == "postgresql"


def test_sqlalchemy_url_for_network_database():
    settings = DatabaseSettings(_env_file=None, **FULL_SETTINGS)
    url = settings.sqlalchemy_url()
    assert url.drivername == "postgresql+psycopg2"
    assert url.host == "db.internal"
    assert url.port == 5432
    assert url.database == "shop"
    assert url.password == "s3cret"
    assert "s3cret" not in url.render_as_string(hide_password=True)


def test_sqlalchemy_url_for_sqlite_ignores_network_settings():
    settings = DatabaseSettings(
        _env_file=None, **{**FULL_SETTINGS, "type": "sqlite", "database": "/tmp/app.db"}
    )
    url = settings.sqlalchemy_url()
    assert url.drivername == "sqlite"
    assert url.database == "/tmp/app.db"
    assert url.host is None
