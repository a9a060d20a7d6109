#!/usr/bin/env python3
"""Demonstration of the canonical GraphQL formatter.

This script shows how to:
1. Format a query document
2. Format a schema document
3. Use custom layout options
4. Handle unsupported constructs
"""

from gql_fmt.core import (
    FormatOptions,
    UnsupportedConstructError,
    format_query,
    format_schema,
)

QUERY = """
query Viewer($first: Int = 10, $after: String) {
  viewer { repositories(orderBy: {field: NAME, direction: ASC}, first: $first, after: $after, privacy: PUBLIC, isFork: false) { totalCount nodes { name id ...RepoParts } } login }
}

fragment RepoParts on Repository { url ... on Starrable { stargazerCount } description }
"""

SCHEMA = """
schema { query: Query mutation: Mutation }

"A repository"
type Repository implements Node & Starrable { name: String! id: ID! url: String }

enum Privacy { PUBLIC PRIVATE INTERNAL }

input RepositoryOrder { "Field to order by" field: String "Direction" direction: Direction }
"""


def main():
    print("=== Canonical GraphQL Formatter Demo ===\n")

    print("1. Query document:\n")
    print(format_query(QUERY))

    print("\n2. Schema document:\n")
    print(format_schema(SCHEMA))

    print("\n3. Four-space indentation, 60 columns:\n")
    print(format_query(QUERY, FormatOptions(indent_width=4, max_width=60)))

    print("\n4. Unsupported constructs:\n")
    try:
        format_query("{ viewer @include(if: $loggedIn) { login } }")
    except UnsupportedConstructError as e:
        print(f"   {e}")

    print("\n=== Demo Complete ===")


if __name__ == "__main__":
    main()
