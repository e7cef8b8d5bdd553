"""Pydantic models for type-safe data validation and parsing."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ColumnMetadata(BaseModel):
    """Database-reported attributes of one table column.

    Instances are immutable once read from the database.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Column name")
    raw_type: str = Field(
        "", description="Database-native type descriptor, e.g. VARCHAR(255)"
    )
    nullable: bool = Field(True, description="Whether the column allows NULL")
    is_primary_key: bool = Field(
        False, description="Whether the column is part of the primary key"
    )
    default_value: Any | None = Field(None, description="Column default, if any")
    comment: str | None = Field(None, description="Column comment, if any")


class TableDescriptor(BaseModel):
    """One table and its columns in database order."""

    name: str = Field(..., description="Raw table name")
    columns: list[ColumnMetadata] = Field(default_factory=list)

    @classmethod
    def from_description(
        cls, name: str, description: dict[str, ColumnMetadata]
    ) -> TableDescriptor:
        """Build a descriptor from a describe-table mapping, keeping its order."""
        return cls(name=name, columns=list(description.values()))

    def __str__(self) -> str:
        return f"{self.name} ({len(self.columns)} columns)"


class TableNames(BaseModel):
    """Names derived from a raw table name."""

    raw: str
    kebab: str
    upper_camel: str
    singular: str
    plural: str


class ValidationResult(BaseModel):
    """Result of document validation with type safety.

    Provides validated results for document validation operations.
    """

    is_valid: bool = Field(..., description="Whether the document passed validation")
    errors: list[str] = Field(
        default_factory=list, description="Validation error messages"
    )
    warnings: list[str] = Field(
        default_factory=list, description="Validation warning messages"
    )

    def add_error(self, message: str) -> None:
        """Add an error message to the validation result."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message to the validation result."""
        self.warnings.append(message)
