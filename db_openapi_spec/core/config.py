"""Configuration for the OpenAPI document generator."""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL

from .exceptions import ConfigurationError

# Database type accepted on the command line -> SQLAlchemy driver name
SUPPORTED_DRIVERS: dict[str, str] = {
    "postgres": "postgresql+psycopg2",
    "postgresql": "postgresql+psycopg2",
    "mysql": "mysql+pymysql",
    "mariadb": "mariadb+pymysql",
    "mssql": "mssql+pyodbc",
    "oracle": "oracle+oracledb",
    "sqlite": "sqlite",
}


class OpenAPIFieldsConfig(BaseModel):
    """Configuration for OpenAPI field names and fixed values."""

    ref_field: str = "$ref"
    schema_ref_prefix: str = "#/components/schemas/"
    media_type: str = "application/json"


class ExitCodesConfig(BaseModel):
    """Configuration for exit codes."""

    success: int = 0
    error_connection: int = 1
    error_describe_table: int = 2
    error_name_collision: int = 3
    error_validation_failed: int = 4
    error_file_system: int = 5
    error_configuration: int = 6
    error_invalid_name: int = 7
    error_unexpected: int = 8


class Config(BaseSettings):
    """Main configuration class for the OpenAPI document generator."""

    output_file: Path = Field(
        default=Path("openapi.json"), description="Default output file"
    )

    # Document header
    openapi_version: str = Field(default="3.0.0", description="OpenAPI version")
    api_title: str = Field(default="Generated API", description="info.title")
    api_version: str = Field(default="1.0.0", description="info.version")
    json_indent: int = Field(default=2, ge=0, description="JSON indentation")

    # Nested configurations
    openapi_fields: OpenAPIFieldsConfig = Field(default_factory=OpenAPIFieldsConfig)
    exit_codes: ExitCodesConfig = Field(default_factory=ExitCodesConfig)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


class DatabaseSettings(BaseSettings):
    """Connection settings for the database being introspected.

    Values come from keyword arguments (the command line) or from the
    ``DB_*`` environment variables.
    """

    type: str = Field(..., description="Database type (e.g. postgres, mysql)")
    host: str = Field(..., description="Database host")
    port: int = Field(..., gt=0, lt=65536, description="Database port")
    username: str = Field(..., description="Database username")
    password: SecretStr = Field(..., description="Database password")
    database: str = Field(..., description="Database name (file path for sqlite)")

    model_config = {
        "env_prefix": "DB_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    def __init__(self, **data):
        """Initialize settings, reporting the first invalid value as ConfigurationError."""
        try:
            super().__init__(**data)
        except ValidationError as e:
            error = e.errors()[0]
            field_name = error["loc"][0] if error["loc"] else "unknown"
            env_var_name = f"DB_{str(field_name).upper()}"
            if error["type"] == "missing":
                raise ConfigurationError(variable_name=env_var_name) from e
            raise ConfigurationError(
                variable_name=env_var_name, reason=error["msg"]
            ) from e

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        """Normalize the database type and reject unsupported ones."""
        normalized = v.strip().lower()
        if normalized not in SUPPORTED_DRIVERS:
            raise ValueError(
                f"Unsupported database type '{v}', expected one of: "
                + ", ".join(sorted(SUPPORTED_DRIVERS))
            )
        return normalized

    def sqlalchemy_url(self) -> URL:
        """Build the SQLAlchemy URL for these settings.

        For sqlite the database name is the file path and the network
        settings are ignored.
        """
        drivername = SUPPORTED_DRIVERS[self.type]
        if self.type == "sqlite":
            return URL.create(drivername, database=self.database)
        return URL.create(
            drivername,
            username=self.username,
            password=self.password.get_secret_value(),
            host=self.host,
            port=self.port,
            database=self.database,
        )


# At application import time, populate os.environ from .env (if present).
load_dotenv()
config = Config()
