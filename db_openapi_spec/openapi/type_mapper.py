"""Map database-native column types to OpenAPI types and formats.

Raw type descriptors often embed length or precision (``VARCHAR(255)``,
``DECIMAL(10,2)``), so matching is a case-insensitive substring test against
ordered rule tables. The first matching rule wins.

Examples:
  INTEGER         -> integer / int32
  DECIMAL(10,2)   -> number  / double
  VARCHAR(255)    -> string
  TIMESTAMP       -> string  / date-time
  GEOMETRY        -> string  (no format)
"""

from __future__ import annotations

DEFAULT_TYPE = "string"

# (keywords, OpenAPI type) in priority order
TYPE_RULES: list[tuple[tuple[str, ...], str]] = [
    (("INT",), "integer"),
    (("FLOAT", "DOUBLE", "DECIMAL", "REAL"), "number"),
    (("CHAR", "TEXT", "STRING", "CLOB", "DATE"), "string"),
    (("BOOLEAN",), "boolean"),
    (("JSON",), "object"),
    (("ARRAY",), "array"),
]

# (keywords, OpenAPI format) in priority order
FORMAT_RULES: list[tuple[tuple[str, ...], str]] = [
    (("INT",), "int32"),
    (("FLOAT", "REAL"), "float"),
    (("DOUBLE", "DECIMAL"), "double"),
    (("DATETIME", "TIMESTAMP"), "date-time"),
    (("DATE",), "date"),
    (("TIME",), "time"),
    (("UUID",), "uuid"),
]


def _first_match(
    raw_type: str, rules: list[tuple[tuple[str, ...], str]]
) -> str | None:
    """Return the result of the first rule with a keyword contained in raw_type."""
    upper = (raw_type or "").upper()
    for keywords, result in rules:
        if any(keyword in upper for keyword in keywords):
            return result
    return None


def map_type(raw_type: str) -> str:
    """Return the OpenAPI type for a raw column type, defaulting to string."""
    return _first_match(raw_type, TYPE_RULES) or DEFAULT_TYPE


def map_format(raw_type: str) -> str | None:
    """Return the OpenAPI format for a raw column type, or None."""
    return _first_match(raw_type, FORMAT_RULES)
