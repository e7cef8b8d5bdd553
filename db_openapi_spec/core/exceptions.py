"""Custom exception classes for the OpenAPI document generator."""

from __future__ import annotations


class OpenAPIGenerationError(Exception):
    """Base exception for OpenAPI generation errors.

    All custom exceptions in the generator inherit from this class.
    """

    pass


class DatabaseConnectionError(OpenAPIGenerationError):
    """Error when the database cannot be reached.

    Raised when the engine cannot be created or the first connection fails,
    for example because the host is unreachable or authentication is refused.

    Args:
        url: Database URL with the password masked
        cause: The underlying exception reported by the driver
    """

    def __init__(self, url: str, cause: Exception) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Unable to connect to database '{url}': {cause}")


class DescribeTableError(OpenAPIGenerationError):
    """Error while reading table metadata.

    Raised when listing the tables or describing one of them fails. The whole
    run is aborted; tables are never skipped.

    Args:
        table_name: The table being described, or None while listing tables
        cause: The underlying exception reported by the driver
    """

    def __init__(self, table_name: str | None, cause: Exception) -> None:
        self.table_name = table_name
        self.cause = cause
        if table_name is None:
            message = f"Failed to list database tables: {cause}"
        else:
            message = f"Failed to describe table '{table_name}': {cause}"
        super().__init__(message)


class NameCollisionError(OpenAPIGenerationError):
    """Error when two tables derive the same schema name or path.

    Args:
        kind: Which derived key collided ("schema" or "path")
        key: The colliding schema name or path
        existing_table: Table that registered the key first
        table: Table that tried to register it again
    """

    def __init__(self, kind: str, key: str, existing_table: str, table: str) -> None:
        self.kind = kind
        self.key = key
        self.existing_table = existing_table
        self.table = table
        super().__init__(
            f"Tables '{existing_table}' and '{table}' both map to {kind} '{key}'"
        )


class ValidationError(OpenAPIGenerationError):
    """Error during document validation.

    Raised when the assembled document fails validation with one or more errors.

    Args:
        errors: List of validation error messages
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Document validation failed: {'; '.join(errors)}")


class ConfigurationError(OpenAPIGenerationError):
    """Error in application configuration.

    Raised when required configuration values are missing or invalid,
    such as missing environment variables or an unsupported database type.

    Args:
        variable_name: The name of the configuration variable that caused the error
        reason: Optional explanation of why the value is invalid
    """

    def __init__(self, variable_name: str, reason: str | None = None) -> None:
        self.variable_name = variable_name
        self.reason = reason
        if reason is None:
            message = f"Required configuration variable '{variable_name}' is not set"
        else:
            message = f"Invalid configuration variable '{variable_name}': {reason}"
        super().__init__(message)


class InvalidNameError(OpenAPIGenerationError):
    """Error when a table or column name cannot be used in a path.

    Curly braces delimit path template parameters, so a name containing them
    would produce a path that declares parameters which do not exist.

    Args:
        kind: Which name is unusable ("table" or "primary key")
        name: The offending name
        table: Table the name belongs to
    """

    def __init__(self, kind: str, name: str, table: str) -> None:
        self.kind = kind
        self.name = name
        self.table = table
        super().__init__(
            f"The {kind} name '{name}' of table '{table}' contains '{{' or '}}' "
            "and cannot be used in a path"
        )
