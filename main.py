"""
Database OpenAPI Spec Generator

Entry point for the OpenAPI generator script.
"""

from db_openapi_spec.cli.app import main

if __name__ == "__main__":
    main()
