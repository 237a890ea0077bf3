"""Template parts and the short-form template parser."""

from shq.ast.parser import parse
from shq.ast.spec import (
    Escaped,
    EscapedList,
    Identifier,
    Interpolated,
    InterpolatedList,
    Literal,
    Number,
    Part,
    Text,
    atom,
    literal,
)

__all__ = [
    "Escaped",
    "EscapedList",
    "Identifier",
    "Interpolated",
    "InterpolatedList",
    "Literal",
    "Number",
    "Part",
    "Text",
    "atom",
    "literal",
    "parse",
]
