"""Command-line interface for the OpenAPI document generator."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from db_openapi_spec import __version__
from db_openapi_spec.cli.generator import OpenAPIGenerator
from db_openapi_spec.core.config import DatabaseSettings, config
from db_openapi_spec.core.exceptions import ConfigurationError

app = typer.Typer(
    name="db-openapi-spec",
    help="Generate OpenAPI documentation from a database.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.command()
def generate(
    db_type: Annotated[
        str,
        typer.Option(
            "--type", "-t", envvar="DB_TYPE", help="Database type (e.g., postgres, mysql)"
        ),
    ],
    host: Annotated[
        str, typer.Option("--host", "-h", envvar="DB_HOST", help="Database host")
    ],
    port: Annotated[
        int, typer.Option("--port", "-p", envvar="DB_PORT", help="Database port")
    ],
    username: Annotated[
        str,
        typer.Option("--username", "-u", envvar="DB_USERNAME", help="Database username"),
    ],
    password: Annotated[
        str,
        typer.Option("--password", "-P", envvar="DB_PASSWORD", help="Database password"),
    ],
    database: Annotated[
        str,
        typer.Option("--database", "-d", envvar="DB_DATABASE", help="Database name"),
    ],
    output: Annotated[
        Path,
        typer.Option(
            "--output", "-o", help="Output file for the OpenAPI document"
        ),
    ] = config.output_file,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = None,
) -> None:
    """Generate an OpenAPI document describing CRUD endpoints for every table."""
    try:
        settings = DatabaseSettings(
            type=db_type,
            host=host,
            port=port,
            username=username,
            password=password,
            database=database,
        )
    except ConfigurationError as e:
        typer.secho(f"Configuration error: {e}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=config.exit_codes.error_configuration)

    output_file = OpenAPIGenerator(settings, output_path=output).run()
    typer.echo(f"OpenAPI document has been generated and saved to {output_file}")


def main() -> None:
    app()
