"""Tests for schema document formatting."""

import pytest
from graphql import GraphQLSyntaxError

from gql_fmt.core import FormatOptions, UnsupportedConstructError, format_schema


class TestSchemaBlock:
    """Tests for the schema definition block."""

    def test_root_types_in_fixed_order(self):
        result = format_schema("schema { subscription: S query: Q mutation: M }")
        assert result == "schema {\n  mutation: M\n  query: Q\n  subscription: S\n}"

    def test_missing_root_types_are_skipped(self):
        assert format_schema("schema { query: Query }") == "schema {\n  query: Query\n}"

    def test_description(self):
        result = format_schema('"Entry points" schema { query: Query }')
        assert result == '"Entry points"\nschema {\n  query: Query\n}'


class TestObjectTypes:
    """Tests for object types and interfaces."""

    def test_fields_sorted(self):
        result = format_schema("type User { name: String id: ID! friends: [User!]! }")
        assert result == "type User {\n  friends: [User!]!\n  id: ID!\n  name: String\n}"

    def test_interfaces_keep_declared_order(self):
        result = format_schema("type User implements Foo & Bar & Baz { id: ID }")
        assert result == "type User implements Foo & Bar & Baz {\n  id: ID\n}"

    def test_descriptions(self):
        schema = '''
        "A user"
        type User {
          "The name"
          name: String
          id: ID!
        }
        '''
        assert format_schema(schema) == (
            '"A user"\n'
            "type User {\n"
            "  id: ID!\n"
            '  "The name"\n'
            "  name: String\n"
            "}"
        )

    def test_block_string_description_is_quoted(self):
        result = format_schema('"""A date"""\nscalar Date')
        assert result == '"A date"\nscalar Date'

    def test_description_quotes_are_escaped(self):
        result = format_schema('"""say "hi" now"""\nscalar Greeting')
        assert result == '"say \\"hi\\" now"\nscalar Greeting'

    @pytest.mark.parametrize(
        "schema",
        [
            '"""say "hi" now"""\nscalar Greeting',
            '"a \\"b\\" c:\\\\d"\ntype T { "x \\"y\\"" f: Int }',
            'input I { "the \\"key\\"" k: String }',
        ],
    )
    def test_escaped_descriptions_round_trip(self, schema):
        once = format_schema(schema)
        assert format_schema(once) == once

    def test_interface(self):
        result = format_schema('"Has an id" interface Node { id: ID! createdAt: String }')
        assert result == '"Has an id"\ninterface Node {\n  createdAt: String\n  id: ID!\n}'

    def test_interface_implementing_interfaces(self):
        result = format_schema("interface Image implements Resource & Node { url: String }")
        assert result == "interface Image implements Resource & Node {\n  url: String\n}"

    def test_field_arguments_sorted(self):
        result = format_schema("type Query { users(first: Int = 10, after: String): [User] }")
        assert result == "type Query {\n  users(after: String, first: Int = 10): [User]\n}"

    def test_field_arguments_wrap(self):
        schema = (
            "type Query { search(foxtrot: String, echo: String, delta: String, "
            "charlie: String, bravo: String, alpha: String): [Result] }"
        )
        assert format_schema(schema) == (
            "type Query {\n"
            "  search(\n"
            "    alpha: String,\n"
            "    bravo: String,\n"
            "    charlie: String,\n"
            "    delta: String,\n"
            "    echo: String,\n"
            "    foxtrot: String,\n"
            "  ): [Result]\n"
            "}"
        )

    def test_described_arguments_go_one_per_line(self):
        result = format_schema('type Query { user(name: String, "The id" id: ID!): User }')
        assert result == (
            "type Query {\n"
            "  user(\n"
            '    "The id"\n'
            "    id: ID!,\n"
            "    name: String,\n"
            "  ): User\n"
            "}"
        )


class TestOtherTypes:
    """Tests for enums, unions, scalars and inputs."""

    def test_enum_values_sorted(self):
        assert format_schema("enum Number { ONE TWO THREE }") == (
            "enum Number {\n  ONE\n  THREE\n  TWO\n}"
        )

    def test_enum_value_descriptions(self):
        result = format_schema('enum Role { "Can do anything" ADMIN GUEST }')
        assert result == 'enum Role {\n  "Can do anything"\n  ADMIN\n  GUEST\n}'

    def test_union_members_sorted(self):
        result = format_schema("union SearchResult = User | Post | Comment")
        assert result == "union SearchResult = Comment | Post | User"

    def test_scalar(self):
        assert format_schema("scalar DateTime") == "scalar DateTime"

    def test_input_without_descriptions(self):
        result = format_schema("input UserInput { name: String age: Int = 3 }")
        assert result == "input UserInput {\n  age: Int = 3\n  name: String\n}"

    def test_input_with_descriptions(self):
        result = format_schema('input UserInput { "Name" name: String "Age" age: Int }')
        assert result == (
            "input UserInput {\n"
            '  "Age"\n'
            "  age: Int\n"
            "\n"
            '  "Name"\n'
            "  name: String\n"
            "\n"
            "}"
        )

    def test_input_with_mixed_descriptions(self):
        result = format_schema('input UserInput { "Name" name: String age: Int }')
        assert result == (
            "input UserInput {\n"
            "  age: Int\n"
            "\n"
            '  "Name"\n'
            "  name: String\n"
            "\n"
            "}"
        )

    def test_input_with_mixed_descriptions_strict(self):
        options = FormatOptions(strict_descriptions=True)
        with pytest.raises(UnsupportedConstructError) as exc_info:
            format_schema('input UserInput { "Name" name: String age: Int }', options)
        assert "UserInput" in exc_info.value.label

    def test_empty_type(self):
        assert format_schema("type Marker") == "type Marker"


class TestDocument:
    """Tests for whole documents."""

    def test_definitions_keep_source_order(self):
        schema = """
        type Query { user: User }
        schema { query: Query }
        enum Role { USER ADMIN }
        """
        assert format_schema(schema) == (
            "type Query {\n"
            "  user: User\n"
            "}\n"
            "\n"
            "schema {\n"
            "  query: Query\n"
            "}\n"
            "\n"
            "enum Role {\n"
            "  ADMIN\n"
            "  USER\n"
            "}"
        )

    def test_custom_indent(self):
        options = FormatOptions(indent_width=4)
        assert format_schema("enum E { B A }", options) == "enum E {\n    A\n    B\n}"

    def test_round_trip(self):
        schema = '''
        schema { query: Query mutation: Mutation }
        "A user"
        type User implements Node & Entity {
          "Id" id: ID!
          posts(first: Int = 10, after: String, before: String, last: Int, orderBy: PostOrder): [Post!]!
          name(format: String): String
        }
        input PostOrder { "Dir" direction: Direction "Field" field: String }
        input Filter { b: Int a: [String!] = ["x"] }
        enum Direction { DESC ASC }
        union Entity = User | Post
        scalar Date
        interface Node { id: ID! }
        type Query { node("Node id" id: ID!): Node }
        '''
        once = format_schema(schema)
        assert format_schema(once) == once


class TestErrors:
    """Tests for unsupported constructs and syntax errors."""

    @pytest.mark.parametrize(
        "schema, label",
        [
            ("extend type User { age: Int }", 'object type extension "User"'),
            ("extend schema { query: Query }", "schema extension"),
            ("directive @auth on FIELD_DEFINITION", 'directive definition "@auth"'),
            ('type User @key(fields: "id") { id: ID }', 'directive @key on type "User"'),
            ("type User { name: String @deprecated }", 'directive @deprecated on field "User.name"'),
            ("enum Role { ADMIN @deprecated }", 'directive @deprecated on enum value "Role.ADMIN"'),
            ("input I { a: Int @x }", 'directive @x on input field "I.a"'),
            ("type Q { f(a: Int @x): Int }", 'directive @x on argument "Q.f(a)"'),
            ("schema @x { query: Q }", "directive @x on schema"),
            ("scalar Date @x", 'directive @x on scalar "Date"'),
            ("union U @x = A", 'directive @x on union "U"'),
        ],
    )
    def test_unsupported_constructs(self, schema, label):
        with pytest.raises(UnsupportedConstructError) as exc_info:
            format_schema(schema)
        assert exc_info.value.label == label

    def test_operation_in_schema_document(self):
        with pytest.raises(UnsupportedConstructError) as exc_info:
            format_schema("schema { query: Query } query { a }")
        assert exc_info.value.label == "operation definition in schema document"

    def test_syntax_error_propagates(self):
        with pytest.raises(GraphQLSyntaxError):
            format_schema("type User {")
