"""Core modules for canonical GraphQL formatting."""

from .errors import FormatError, UnsupportedConstructError
from .formatter import (
    format_query,
    format_schema,
    print_query_document,
    print_schema_document,
)
from .ir import (
    IRArgument,
    IRDirective,
    IREnum,
    IREnumValue,
    IRField,
    IRFieldDefinition,
    IRFragment,
    IRFragmentSpread,
    IRInlineFragment,
    IRInputObject,
    IRInputValue,
    IRInterface,
    IRObjectType,
    IROperation,
    IRQueryDocument,
    IRScalar,
    IRSchemaDefinition,
    IRSchemaDocument,
    IRUnion,
    IRVariable,
)
from .options import FormatOptions
from .output import Indentation, Output
from .parser import QueryParser, SchemaParser
from .query_printer import QueryPrinter
from .schema_printer import SchemaPrinter

__all__ = [
    # Entry points
    "format_query",
    "format_schema",
    "print_query_document",
    "print_schema_document",
    "FormatOptions",
    # Errors
    "FormatError",
    "UnsupportedConstructError",
    # IR types
    "IRArgument",
    "IRDirective",
    "IREnum",
    "IREnumValue",
    "IRField",
    "IRFieldDefinition",
    "IRFragment",
    "IRFragmentSpread",
    "IRInlineFragment",
    "IRInputObject",
    "IRInputValue",
    "IRInterface",
    "IRObjectType",
    "IROperation",
    "IRQueryDocument",
    "IRScalar",
    "IRSchemaDefinition",
    "IRSchemaDocument",
    "IRUnion",
    "IRVariable",
    # Parsers
    "QueryParser",
    "SchemaParser",
    # Printers
    "Indentation",
    "Output",
    "QueryPrinter",
    "SchemaPrinter",
]
