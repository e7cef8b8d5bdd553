"""Derive URL path segments and schema component names from table names.

  order_items -> kebab "order-items", upper camel "OrderItems",
                 singular "order-item", plural "order-items"
  userProfile -> kebab "user-profile", upper camel "UserProfile",
                 singular "user-profile", plural "user-profiles"

Pluralization is naive: a trailing "s" marks a plural name.
"""

from __future__ import annotations

import re

from db_openapi_spec.core.schemas import TableNames

_SEPARATORS = re.compile(r"[ _]")
_CASE_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_SEPARATOR_RUN = re.compile(r"[ _]+(\w?)")


def kebab_name(name: str) -> str:
    """Convert a table name to kebab-case for URL paths."""
    hyphenated = _SEPARATORS.sub("-", name)
    return _CASE_BOUNDARY.sub(r"\1-\2", hyphenated).lower()


def upper_camel_name(name: str) -> str:
    """Convert a table name to UpperCamelCase for schema component names."""
    joined = _SEPARATOR_RUN.sub(lambda m: m.group(1).upper(), name)
    return joined[:1].upper() + joined[1:]


def singular_name(name: str) -> str:
    if name.lower().endswith("s"):
        return name[:-1]
    return name


def plural_name(name: str) -> str:
    if name.lower().endswith("s"):
        return name
    return name + "s" if name else name


def derive_names(name: str) -> TableNames:
    """Derive every name used for one table."""
    kebab = kebab_name(name)
    return TableNames(
        raw=name,
        kebab=kebab,
        upper_camel=upper_camel_name(name),
        singular=singular_name(kebab),
        plural=plural_name(kebab),
    )
