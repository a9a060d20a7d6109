"""Command-line interface for gql-fmt."""

import difflib
import re
from pathlib import Path

import click
from graphql import GraphQLSyntaxError

from .core.errors import FormatError
from .core.formatter import format_query, format_schema
from .core.options import DEFAULT_INDENT_WIDTH, DEFAULT_MAX_WIDTH, FormatOptions

SCHEMA_LINE = re.compile(r"^schema", re.MULTILINE)


def is_schema(contents: str) -> bool:
    """Return True if any line opens a schema block, i.e. the text is a type-system document."""
    return SCHEMA_LINE.search(contents) is not None


def format_text(contents: str, options: FormatOptions) -> str:
    """Format query or schema text, picking the entry point from its contents."""
    if is_schema(contents):
        return format_schema(contents, options)
    return format_query(contents, options)


def echo_diff(path: Path, original: str, formatted: str):
    """Print a colored unified diff from the file contents to the formatted text."""
    diff = difflib.unified_diff(
        original.splitlines(),
        formatted.splitlines(),
        fromfile=str(path),
        tofile=f"{path} (formatted)",
        lineterm="",
    )
    for line in diff:
        if line.startswith("+") and not line.startswith("+++"):
            click.secho(line, fg="green")
        elif line.startswith("-") and not line.startswith("---"):
            click.secho(line, fg="red")
        else:
            click.echo(line)


@click.group()
@click.version_option(package_name="gql-fmt")
def main():
    """Canonical formatter for GraphQL queries and schemas."""
    pass


@main.command(name="format")
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--write",
    "-w",
    is_flag=True,
    help="Write the formatted output back to the file.",
)
@click.option(
    "--check",
    is_flag=True,
    help="Exit with status 1 and print a diff if a file is not formatted.",
)
@click.option(
    "--indent",
    default=DEFAULT_INDENT_WIDTH,
    show_default=True,
    type=click.IntRange(min=0),
    help="Spaces per indentation level.",
)
@click.option(
    "--max-width",
    default=DEFAULT_MAX_WIDTH,
    show_default=True,
    type=click.IntRange(min=1),
    help="Column after which argument lists are wrapped.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
@click.pass_context
def format_command(
    ctx: click.Context,
    files: tuple[Path, ...],
    write: bool,
    check: bool,
    indent: int,
    max_width: int,
    verbose: bool,
):
    """Format GraphQL query or schema files.

    A file is treated as a schema when one of its lines starts with the
    `schema` keyword, and as a query otherwise.

    Examples:

        gql-fmt format query.graphql

        gql-fmt format --write schema.graphql

        gql-fmt format --check queries/*.graphql
    """
    if write and check:
        raise click.UsageError("format cannot both check and write")

    options = FormatOptions(indent_width=indent, max_width=max_width)
    unformatted = []

    for path in files:
        contents = path.read_text().strip()
        if verbose:
            kind = "schema" if is_schema(contents) else "query"
            click.echo(f"Formatting {path} as {kind}...", err=True)

        try:
            formatted = format_text(contents, options)
        except (FormatError, GraphQLSyntaxError) as e:
            raise click.ClickException(f"{path}: {e}") from e

        if write:
            path.write_text(formatted + "\n")
            if verbose:
                click.echo(f"  Wrote {path}", err=True)
        elif check:
            if formatted != contents:
                echo_diff(path, contents, formatted)
                unformatted.append(path)
        else:
            click.echo(formatted)

    if unformatted:
        click.echo(f"\n{len(unformatted)} file(s) would be reformatted.", err=True)
        ctx.exit(1)


if __name__ == "__main__":
    main()
