"""Printer for type-system documents.

Definitions keep their source order. Inside each definition, fields,
arguments, enum values, input fields and union members are sorted by
name. Implemented interfaces keep the order they were declared in.
"""

from .errors import UnsupportedConstructError, check_directives
from .ir import (
    IREnum,
    IRFieldDefinition,
    IRInputObject,
    IRInputValue,
    IRInterface,
    IRObjectType,
    IRScalar,
    IRSchemaDefinition,
    IRSchemaDocument,
    IRUnion,
)
from .output import Output

# Root operation lines are always written in this order.
ROOT_OPERATION_TYPES = ("mutation", "query", "subscription")


def _by_name(items):
    return sorted(items, key=lambda item: item.name)


class SchemaPrinter:
    """Writes an IRSchemaDocument into an Output buffer."""

    def __init__(self, output: Output, strict_descriptions: bool = False):
        self.output = output
        self.strict_descriptions = strict_descriptions
        self._printers = {
            IRSchemaDefinition: self._print_schema,
            IRObjectType: self._print_object,
            IRInterface: self._print_interface,
            IRInputObject: self._print_input_object,
            IREnum: self._print_enum,
            IRScalar: self._print_scalar,
            IRUnion: self._print_union,
        }

    def print_document(self, document: IRSchemaDocument):
        for definition in document.definitions:
            printer = self._printers.get(type(definition))
            if printer is None:
                raise UnsupportedConstructError(type(definition).__name__)
            printer(definition)
            self.output.push("\n")

    def _print_schema(self, schema: IRSchemaDefinition):
        check_directives(schema.directives, "schema")

        out = self.output
        out.push_description(schema.description)
        out.push_indented("schema {\n")
        out.indent.increment()
        for operation_type in ROOT_OPERATION_TYPES:
            type_name = getattr(schema, operation_type)
            if type_name:
                out.push_indented(f"{operation_type}: {type_name}\n")
        out.indent.decrement()
        out.push_indented("}\n")

    def _print_object(self, object_type: IRObjectType):
        self._print_header("type", object_type)
        self._print_interfaces(object_type.interfaces)
        self._print_fields(object_type.name, object_type.fields)

    def _print_interface(self, interface: IRInterface):
        self._print_header("interface", interface)
        self._print_interfaces(interface.interfaces)
        self._print_fields(interface.name, interface.fields)

    def _print_scalar(self, scalar: IRScalar):
        self._print_header("scalar", scalar)
        self.output.push("\n")

    def _print_union(self, union: IRUnion):
        self._print_header("union", union)
        if union.types:
            self.output.push(" = " + " | ".join(sorted(union.types)))
        self.output.push("\n")

    def _print_enum(self, enum: IREnum):
        self._print_header("enum", enum)
        if not enum.values:
            self.output.push("\n")
            return

        out = self.output
        out.push(" {\n")
        out.indent.increment()
        for value in _by_name(enum.values):
            check_directives(value.directives, f'enum value "{enum.name}.{value.name}"')
            out.push_description(value.description)
            out.push_indented(f"{value.name}\n")
        out.indent.decrement()
        out.push_indented("}\n")

    def _print_input_object(self, input_object: IRInputObject):
        self._print_header("input", input_object)
        if not input_object.fields:
            self.output.push("\n")
            return

        described = [f.description is not None for f in input_object.fields]
        if self.strict_descriptions and any(described) and not all(described):
            raise UnsupportedConstructError(
                f'input "{input_object.name}" mixing described and undescribed fields'
            )
        spaced = any(described)

        out = self.output
        out.push(" {\n")
        out.indent.increment()
        for input_value in _by_name(input_object.fields):
            check_directives(
                input_value.directives, f'input field "{input_object.name}.{input_value.name}"'
            )
            out.push_description(input_value.description)
            out.push_indented(f"{input_value.render()}\n")
            # Described blocks follow every entry with a blank line, the last one included.
            if spaced:
                out.push("\n")
        out.indent.decrement()
        out.push_indented("}\n")

    def _print_header(self, keyword: str, definition):
        check_directives(definition.directives, f'{keyword} "{definition.name}"')
        self.output.push_description(definition.description)
        self.output.push_indented(f"{keyword} {definition.name}")

    def _print_interfaces(self, interfaces: list[str]):
        if interfaces:
            self.output.push(" implements " + " & ".join(interfaces))

    def _print_fields(self, type_name: str, fields: list[IRFieldDefinition]):
        out = self.output
        if not fields:
            out.push("\n")
            return

        out.push(" {\n")
        out.indent.increment()
        for ir_field in _by_name(fields):
            owner = f"{type_name}.{ir_field.name}"
            check_directives(ir_field.directives, f'field "{owner}"')
            out.push_description(ir_field.description)
            out.push_indented(ir_field.name)
            if ir_field.arguments:
                self._print_arguments(owner, ir_field.arguments)
            out.push(f": {ir_field.type_name}\n")
        out.indent.decrement()
        out.push_indented("}\n")

    def _print_arguments(self, owner: str, arguments: list[IRInputValue]):
        """Write a field's arguments, one per line under their descriptions if any have one."""
        arguments = _by_name(arguments)
        for argument in arguments:
            check_directives(argument.directives, f'argument "{owner}({argument.name})"')

        out = self.output
        if all(a.description is None for a in arguments):
            out.push_arguments([a.render() for a in arguments])
            return

        out.push("(\n")
        out.indent.increment()
        for argument in arguments:
            out.push_description(argument.description)
            out.push_indented(f"{argument.render()},\n")
        out.indent.decrement()
        out.push_indented(")")
