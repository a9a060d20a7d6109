"""Errors raised while formatting GraphQL documents.

Syntax errors are not wrapped: ``graphql.GraphQLSyntaxError`` from
graphql-core reaches the caller unchanged.
"""


class FormatError(Exception):
    """Base exception for formatting failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnsupportedConstructError(FormatError):
    """Raised when a valid document uses a construct the formatter cannot print.

    ``label`` names the offending construct, e.g. ``directive @skip on field "user"``.
    """

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Unsupported construct: {label}")


def check_directives(directives, owner: str):
    """Reject any directive usage on ``owner``; directives have no canonical placement."""
    if directives:
        raise UnsupportedConstructError(f"directive @{directives[0].name} on {owner}")
