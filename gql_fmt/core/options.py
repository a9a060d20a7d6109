"""Formatting options."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_INDENT_WIDTH = 2
DEFAULT_MAX_WIDTH = 80


class FormatOptions(BaseModel):
    """Layout constants for one formatting call.

    Attributes:
        indent_width: Spaces per nesting level
        max_width: Column past which an argument list is wrapped one per line
        strict_descriptions: Reject input blocks where only some entries
            carry a description instead of spacing them as described blocks
    """

    model_config = ConfigDict(frozen=True)

    indent_width: int = Field(default=DEFAULT_INDENT_WIDTH, ge=0)
    max_width: int = Field(default=DEFAULT_MAX_WIDTH, ge=1)
    strict_descriptions: bool = False
