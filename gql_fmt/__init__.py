"""Canonical formatter for GraphQL queries and schemas."""

from .core import FormatOptions, UnsupportedConstructError, format_query, format_schema

__version__ = "0.1.0"

__all__ = ["FormatOptions", "UnsupportedConstructError", "format_query", "format_schema"]
