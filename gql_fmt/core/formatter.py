"""Entry points that turn GraphQL text into its canonical form.

Examples:
    format_query("{ b a c { x } }")
    format_schema("enum Number { ONE TWO THREE }")
    format_query(text, FormatOptions(indent_width=4, max_width=100))
"""

import logging

from .ir import IRQueryDocument, IRSchemaDocument
from .options import FormatOptions
from .output import Indentation, Output
from .parser import QueryParser, SchemaParser
from .query_printer import QueryPrinter
from .schema_printer import SchemaPrinter

logger = logging.getLogger(__name__)


def _new_output(options: FormatOptions) -> Output:
    return Output(Indentation(options.indent_width), max_width=options.max_width)


def print_query_document(document: IRQueryDocument, options: FormatOptions | None = None) -> str:
    """Render an already parsed query document."""
    options = options or FormatOptions()
    output = _new_output(options)
    QueryPrinter(output).print_document(document)
    return output.finish()


def print_schema_document(document: IRSchemaDocument, options: FormatOptions | None = None) -> str:
    """Render an already parsed schema document."""
    options = options or FormatOptions()
    output = _new_output(options)
    SchemaPrinter(output, strict_descriptions=options.strict_descriptions).print_document(document)
    return output.finish()


def format_query(text: str, options: FormatOptions | None = None) -> str:
    """Format an executable document (operations and fragments).

    Args:
        text: GraphQL query source
        options: Layout options, defaults when omitted

    Returns:
        The canonical text, without leading or trailing whitespace

    Raises:
        GraphQLSyntaxError: If the text is not valid GraphQL
        UnsupportedConstructError: If the document uses directives or
            contains type-system definitions
    """
    document = QueryParser().parse(text)
    logger.debug("Formatting query document with %d definitions", len(document.definitions))
    return print_query_document(document, options)


def format_schema(text: str, options: FormatOptions | None = None) -> str:
    """Format a type-system document.

    Args:
        text: GraphQL schema source
        options: Layout options, defaults when omitted

    Returns:
        The canonical text, without leading or trailing whitespace

    Raises:
        GraphQLSyntaxError: If the text is not valid GraphQL
        UnsupportedConstructError: If the document uses directives, type
            extensions, directive definitions or executable definitions
    """
    document = SchemaParser().parse(text)
    logger.debug("Formatting schema document with %d definitions", len(document.definitions))
    return print_schema_document(document, options)
