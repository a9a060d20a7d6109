"""GraphQL document parsers using graphql-core.

Parse query and schema text and produce the IR consumed by the printers.
"""

from graphql import (
    DirectiveDefinitionNode,
    EnumTypeDefinitionNode,
    ExecutableDefinitionNode,
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    ObjectTypeDefinitionNode,
    OperationDefinitionNode,
    ScalarTypeDefinitionNode,
    SchemaDefinitionNode,
    SelectionSetNode,
    TypeSystemExtensionNode,
    UnionTypeDefinitionNode,
    parse,
    print_ast,
)

from .errors import UnsupportedConstructError
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
    IRSelection,
    IRUnion,
    IRVariable,
)


def _description(node) -> str | None:
    return node.description.value if node.description else None


def _directives(node) -> list[IRDirective]:
    return [IRDirective(name=d.name.value) for d in node.directives or ()]


def _definition_label(node) -> str:
    """Describe a top-level definition for error messages, e.g. 'type extension "User"'."""
    kind = node.kind.replace("_", " ")
    name = getattr(node, "name", None)
    return f'{kind} "{name.value}"' if name else kind


class QueryParser:
    """Parses executable GraphQL documents (operations and fragments) into IR."""

    def parse(self, text: str) -> IRQueryDocument:
        """Parse query text; raises GraphQLSyntaxError on invalid syntax."""
        document = parse(text, no_location=True)
        ir = IRQueryDocument()
        for definition in document.definitions:
            if isinstance(definition, OperationDefinitionNode):
                ir.definitions.append(self._process_operation(definition))
            elif isinstance(definition, FragmentDefinitionNode):
                ir.definitions.append(self._process_fragment(definition))
            else:
                raise UnsupportedConstructError(
                    f"{_definition_label(definition)} in query document"
                )
        return ir

    def _process_operation(self, node: OperationDefinitionNode) -> IROperation:
        return IROperation(
            operation_type=node.operation.value,
            name=node.name.value if node.name else None,
            variables=[
                IRVariable(
                    name=v.variable.name.value,
                    type_name=print_ast(v.type),
                    default_value=print_ast(v.default_value) if v.default_value else None,
                    directives=_directives(v),
                )
                for v in node.variable_definitions or ()
            ],
            directives=_directives(node),
            selections=self._process_selection_set(node.selection_set),
        )

    def _process_fragment(self, node: FragmentDefinitionNode) -> IRFragment:
        return IRFragment(
            name=node.name.value,
            type_condition=node.type_condition.name.value,
            directives=_directives(node),
            selections=self._process_selection_set(node.selection_set),
        )

    def _process_selection_set(self, node: SelectionSetNode | None) -> list[IRSelection]:
        if node is None:
            return []

        selections: list[IRSelection] = []
        for selection in node.selections:
            if isinstance(selection, FieldNode):
                selections.append(
                    IRField(
                        name=selection.name.value,
                        alias=selection.alias.value if selection.alias else None,
                        arguments=[
                            IRArgument(name=a.name.value, value=print_ast(a.value))
                            for a in selection.arguments or ()
                        ],
                        directives=_directives(selection),
                        selections=self._process_selection_set(selection.selection_set),
                    )
                )
            elif isinstance(selection, FragmentSpreadNode):
                selections.append(
                    IRFragmentSpread(
                        name=selection.name.value,
                        directives=_directives(selection),
                    )
                )
            elif isinstance(selection, InlineFragmentNode):
                type_condition = selection.type_condition
                selections.append(
                    IRInlineFragment(
                        type_condition=type_condition.name.value if type_condition else None,
                        directives=_directives(selection),
                        selections=self._process_selection_set(selection.selection_set),
                    )
                )
        return selections


class SchemaParser:
    """Parses GraphQL type-system documents into IR."""

    def parse(self, text: str) -> IRSchemaDocument:
        """Parse schema text; raises GraphQLSyntaxError on invalid syntax."""
        document = parse(text, no_location=True)
        ir = IRSchemaDocument()
        for definition in document.definitions:
            ir.definitions.append(self._process_definition(definition))
        return ir

    def _process_definition(self, node):
        if isinstance(node, TypeSystemExtensionNode):
            raise UnsupportedConstructError(_definition_label(node))
        if isinstance(node, DirectiveDefinitionNode):
            raise UnsupportedConstructError(f'directive definition "@{node.name.value}"')
        if isinstance(node, ExecutableDefinitionNode):
            raise UnsupportedConstructError(
                f"{_definition_label(node)} in schema document"
            )

        if isinstance(node, SchemaDefinitionNode):
            return self._process_schema(node)
        elif isinstance(node, ObjectTypeDefinitionNode):
            return IRObjectType(
                name=node.name.value,
                fields=self._process_fields(node.fields),
                interfaces=[i.name.value for i in node.interfaces or ()],
                description=_description(node),
                directives=_directives(node),
            )
        elif isinstance(node, InterfaceTypeDefinitionNode):
            return IRInterface(
                name=node.name.value,
                fields=self._process_fields(node.fields),
                interfaces=[i.name.value for i in node.interfaces or ()],
                description=_description(node),
                directives=_directives(node),
            )
        elif isinstance(node, InputObjectTypeDefinitionNode):
            return IRInputObject(
                name=node.name.value,
                fields=self._process_input_values(node.fields),
                description=_description(node),
                directives=_directives(node),
            )
        elif isinstance(node, EnumTypeDefinitionNode):
            return IREnum(
                name=node.name.value,
                values=[
                    IREnumValue(
                        name=v.name.value,
                        description=_description(v),
                        directives=_directives(v),
                    )
                    for v in node.values or ()
                ],
                description=_description(node),
                directives=_directives(node),
            )
        elif isinstance(node, ScalarTypeDefinitionNode):
            return IRScalar(
                name=node.name.value,
                description=_description(node),
                directives=_directives(node),
            )
        elif isinstance(node, UnionTypeDefinitionNode):
            return IRUnion(
                name=node.name.value,
                types=[t.name.value for t in node.types or ()],
                description=_description(node),
                directives=_directives(node),
            )
        raise UnsupportedConstructError(_definition_label(node))

    @staticmethod
    def _process_schema(node: SchemaDefinitionNode) -> IRSchemaDefinition:
        schema = IRSchemaDefinition(
            description=_description(node),
            directives=_directives(node),
        )
        for operation_type in node.operation_types:
            setattr(schema, operation_type.operation.value, operation_type.type.name.value)
        return schema

    def _process_fields(self, field_nodes) -> list[IRFieldDefinition]:
        """Process field definitions into the IRFieldDefinition list."""
        return [
            IRFieldDefinition(
                name=node.name.value,
                type_name=print_ast(node.type),
                description=_description(node),
                arguments=self._process_input_values(node.arguments),
                directives=_directives(node),
            )
            for node in field_nodes or ()
        ]

    @staticmethod
    def _process_input_values(nodes: list[InputValueDefinitionNode] | None) -> list[IRInputValue]:
        return [
            IRInputValue(
                name=node.name.value,
                type_name=print_ast(node.type),
                description=_description(node),
                default_value=print_ast(node.default_value) if node.default_value else None,
                directives=_directives(node),
            )
            for node in nodes or ()
        ]
