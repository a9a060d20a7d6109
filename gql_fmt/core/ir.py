"""Intermediate Representation (IR) for GraphQL documents.

This module defines dataclasses that represent the parts of a GraphQL
document the formatter understands. Values and types are kept as the
strings produced by the parser; the printers never reparse them.
"""

from dataclasses import dataclass, field


@dataclass
class IRDirective:
    """A directive usage such as ``@skip(if: $flag)``."""
    name: str


@dataclass
class IRArgument:
    """Represents a ``name: value`` argument on a field."""
    name: str
    value: str

    def render(self) -> str:
        return f"{self.name}: {self.value}"


@dataclass
class IRVariable:
    """Represents a variable definition of an operation."""
    name: str
    type_name: str
    default_value: str | None = None
    directives: list[IRDirective] = field(default_factory=list)

    def render(self) -> str:
        text = f"${self.name}: {self.type_name}"
        if self.default_value is not None:
            text += f" = {self.default_value}"
        return text


@dataclass
class IRField:
    """Represents a field selection, possibly aliased."""
    name: str
    alias: str | None = None
    arguments: list[IRArgument] = field(default_factory=list)
    directives: list[IRDirective] = field(default_factory=list)
    selections: list["IRSelection"] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.selections


@dataclass
class IRFragmentSpread:
    """Represents ``...FragmentName``."""
    name: str
    directives: list[IRDirective] = field(default_factory=list)


@dataclass
class IRInlineFragment:
    """Represents ``... on Type { ... }`` or a bare ``... { ... }``."""
    type_condition: str | None = None
    directives: list[IRDirective] = field(default_factory=list)
    selections: list["IRSelection"] = field(default_factory=list)


IRSelection = IRField | IRFragmentSpread | IRInlineFragment


@dataclass
class IROperation:
    """Represents a query, mutation or subscription.

    The three operation kinds share one shape; only ``operation_type``
    tells them apart.
    """
    operation_type: str  # 'query', 'mutation' or 'subscription'
    name: str | None = None
    variables: list[IRVariable] = field(default_factory=list)
    directives: list[IRDirective] = field(default_factory=list)
    selections: list[IRSelection] = field(default_factory=list)


@dataclass
class IRFragment:
    """Represents a named fragment definition."""
    name: str
    type_condition: str
    directives: list[IRDirective] = field(default_factory=list)
    selections: list[IRSelection] = field(default_factory=list)


@dataclass
class IRQueryDocument:
    """An executable document, definitions kept in source order."""
    definitions: list[IROperation | IRFragment] = field(default_factory=list)


@dataclass
class IRInputValue:
    """Represents a field argument or an input object field."""
    name: str
    type_name: str
    description: str | None = None
    default_value: str | None = None
    directives: list[IRDirective] = field(default_factory=list)

    def render(self) -> str:
        text = f"{self.name}: {self.type_name}"
        if self.default_value is not None:
            text += f" = {self.default_value}"
        return text


@dataclass
class IRFieldDefinition:
    """Represents a field in an object type or interface."""
    name: str
    type_name: str
    description: str | None = None
    arguments: list[IRInputValue] = field(default_factory=list)
    directives: list[IRDirective] = field(default_factory=list)


@dataclass
class IRSchemaDefinition:
    """Represents the ``schema { ... }`` block."""
    query: str | None = None
    mutation: str | None = None
    subscription: str | None = None
    description: str | None = None
    directives: list[IRDirective] = field(default_factory=list)


@dataclass
class IRObjectType:
    """Represents a GraphQL object type."""
    name: str
    fields: list[IRFieldDefinition] = field(default_factory=list)
    interfaces: list[str] = field(default_factory=list)
    description: str | None = None
    directives: list[IRDirective] = field(default_factory=list)


@dataclass
class IRInterface:
    """Represents a GraphQL interface type."""
    name: str
    fields: list[IRFieldDefinition] = field(default_factory=list)
    interfaces: list[str] = field(default_factory=list)
    description: str | None = None
    directives: list[IRDirective] = field(default_factory=list)


@dataclass
class IRInputObject:
    """Represents a GraphQL input object type."""
    name: str
    fields: list[IRInputValue] = field(default_factory=list)
    description: str | None = None
    directives: list[IRDirective] = field(default_factory=list)


@dataclass
class IREnumValue:
    """Represents a single value in a GraphQL enum."""
    name: str
    description: str | None = None
    directives: list[IRDirective] = field(default_factory=list)


@dataclass
class IREnum:
    """Represents a GraphQL enum type."""
    name: str
    values: list[IREnumValue] = field(default_factory=list)
    description: str | None = None
    directives: list[IRDirective] = field(default_factory=list)


@dataclass
class IRScalar:
    """Represents a GraphQL scalar type."""
    name: str
    description: str | None = None
    directives: list[IRDirective] = field(default_factory=list)


@dataclass
class IRUnion:
    """Represents a GraphQL union type."""
    name: str
    types: list[str] = field(default_factory=list)
    description: str | None = None
    directives: list[IRDirective] = field(default_factory=list)


IRTypeSystemDefinition = (
    IRSchemaDefinition
    | IRObjectType
    | IRInterface
    | IRInputObject
    | IREnum
    | IRScalar
    | IRUnion
)


@dataclass
class IRSchemaDocument:
    """A type-system document, definitions kept in source order."""
    definitions: list[IRTypeSystemDefinition] = field(default_factory=list)
