"""Text accumulation shared by the query and schema printers."""

from graphql import StringValueNode, print_ast

from .options import DEFAULT_INDENT_WIDTH, DEFAULT_MAX_WIDTH


class Indentation:
    """Tracks the nesting depth and renders it as spaces."""

    def __init__(self, size: int = DEFAULT_INDENT_WIDTH):
        self.size = size
        self.count = 0

    def increment(self):
        self.count += 1

    def decrement(self):
        assert self.count > 0, "Indentation decremented below zero"
        self.count -= 1

    def spaces(self) -> str:
        return " " * (self.size * self.count)


class Output:
    """Append-only buffer for formatted text.

    Keeps the length of the last (possibly unterminated) line so argument
    lists can decide whether they fit within ``max_width``.
    """

    def __init__(self, indent: Indentation, max_width: int = DEFAULT_MAX_WIDTH):
        self.indent = indent
        self.max_width = max_width
        self._chunks: list[str] = []
        self._line_length = 0

    def push(self, text: str):
        """Append text as-is."""
        self._chunks.append(text)
        newline = text.rfind("\n")
        if newline == -1:
            self._line_length += len(text)
        else:
            self._line_length = len(text) - newline - 1

    def push_indented(self, text: str):
        """Append text prefixed with the current indentation."""
        self.push(self.indent.spaces() + text)

    def line_length(self) -> int:
        return self._line_length

    def push_description(self, description: str | None):
        """Write a quoted description line above the entity about to be printed.

        Quotes, backslashes and newlines in the text are escaped so the line
        parses back to the same description.
        """
        if description is not None:
            self.push_indented(print_ast(StringValueNode(value=description)) + "\n")

    def push_arguments(self, rendered: list[str]):
        """Write a parenthesized argument list, wrapping it if it overflows.

        The list stays on the current line when the opening parenthesis,
        the comma-joined arguments and the closing parenthesis fit within
        ``max_width``. Otherwise every argument goes on its own line with a
        trailing comma and the closing parenthesis returns to the current
        indentation.
        """
        self.push("(")
        inline = ", ".join(rendered) + ")"
        if self.line_length() + len(inline) <= self.max_width:
            self.push(inline)
            return

        self.indent.increment()
        self.push("\n")
        for argument in rendered:
            self.push_indented(f"{argument},\n")
        self.indent.decrement()
        self.push_indented(")")

    def finish(self) -> str:
        """Return the accumulated text without leading or trailing whitespace."""
        return "".join(self._chunks).strip()
