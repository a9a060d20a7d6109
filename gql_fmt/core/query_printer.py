"""Printer for executable documents (operations and fragments).

Selection sets are printed in a canonical order:

1. leaf fields, by field name
2. fields with a selection set, by field name
3. fragment spreads, by fragment name
4. inline fragments with a type condition, by type name
5. inline fragments without a type condition, in source order
"""

from .errors import check_directives
from .ir import (
    IRField,
    IRFragment,
    IRFragmentSpread,
    IRInlineFragment,
    IROperation,
    IRQueryDocument,
    IRSelection,
)
from .output import Output


def selection_sort_key(selection: IRSelection) -> tuple[int, str]:
    """Return the (tier, name) key a selection is ordered by."""
    if isinstance(selection, IRField):
        return (0 if selection.is_leaf else 1, selection.name)
    if isinstance(selection, IRFragmentSpread):
        return (2, selection.name)
    if selection.type_condition is not None:
        return (3, selection.type_condition)
    return (4, "")


class QueryPrinter:
    """Writes an IRQueryDocument into an Output buffer."""

    def __init__(self, output: Output):
        self.output = output

    def print_document(self, document: IRQueryDocument):
        for definition in document.definitions:
            if isinstance(definition, IROperation):
                self._print_operation(definition)
            else:
                self._print_fragment(definition)
            self.output.push("\n")

    def _print_operation(self, operation: IROperation):
        owner = f'{operation.operation_type} "{operation.name or "<anonymous>"}"'
        check_directives(operation.directives, owner)

        out = self.output
        out.push_indented(operation.operation_type)
        if operation.name:
            out.push(f" {operation.name}")

        if operation.variables:
            if not operation.name:
                out.push(" ")
            rendered = []
            for variable in operation.variables:
                check_directives(variable.directives, f'variable "${variable.name}"')
                rendered.append(variable.render())
            out.push(f"({', '.join(rendered)})")

        self._print_selection_set(operation.selections)

    def _print_fragment(self, fragment: IRFragment):
        check_directives(fragment.directives, f'fragment "{fragment.name}"')
        self.output.push_indented(f"fragment {fragment.name} on {fragment.type_condition}")
        self._print_selection_set(fragment.selections)

    def _print_selection_set(self, selections: list[IRSelection]):
        if not selections:
            return

        out = self.output
        out.push(" {\n")
        out.indent.increment()
        for selection in sorted(selections, key=selection_sort_key):
            self._print_selection(selection)
        out.indent.decrement()
        out.push_indented("}\n")

    def _print_selection(self, selection: IRSelection):
        if isinstance(selection, IRField):
            self._print_field(selection)
        elif isinstance(selection, IRFragmentSpread):
            check_directives(selection.directives, f'fragment spread "...{selection.name}"')
            self.output.push_indented(f"...{selection.name}\n")
        else:
            self._print_inline_fragment(selection)

    def _print_inline_fragment(self, fragment: IRInlineFragment):
        if fragment.type_condition is not None:
            check_directives(fragment.directives, f'inline fragment on "{fragment.type_condition}"')
            self.output.push_indented(f"... on {fragment.type_condition}")
        else:
            check_directives(fragment.directives, "inline fragment")
            self.output.push_indented("...")
        self._print_selection_set(fragment.selections)

    def _print_field(self, ir_field: IRField):
        check_directives(ir_field.directives, f'field "{ir_field.name}"')

        out = self.output
        if ir_field.alias:
            out.push_indented(f"{ir_field.alias}: {ir_field.name}")
        else:
            out.push_indented(ir_field.name)

        if ir_field.arguments:
            arguments = sorted(ir_field.arguments, key=lambda a: a.name)
            out.push_arguments([a.render() for a in arguments])

        if ir_field.selections:
            self._print_selection_set(ir_field.selections)
        else:
            out.push("\n")
