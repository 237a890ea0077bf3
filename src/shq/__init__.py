"""Shq - safely quoted POSIX shell command templates"""

__version__ = "0.1.0"

# Re-export from ast
from shq.ast import (
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
    parse,
)

# Re-export from compiler
from shq.compiler import (
    ChainContext,
    Expander,
    FrameContext,
    MappingContext,
    SequenceContext,
    expand,
    quote,
    quote_word,
    render_atom,
)
from shq.exceptions import (
    BadAtom,
    ConfigError,
    ShqError,
    TemplateSyntaxError,
    TypeMismatch,
    UnresolvedReference,
)
from shq.template import Template, sh

__all__ = [
    "__version__",
    # ast
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
    # compiler
    "ChainContext",
    "Expander",
    "FrameContext",
    "MappingContext",
    "SequenceContext",
    "expand",
    "quote",
    "quote_word",
    "render_atom",
    # exceptions
    "BadAtom",
    "ConfigError",
    "ShqError",
    "TemplateSyntaxError",
    "TypeMismatch",
    "UnresolvedReference",
    # template
    "Template",
    "sh",
]
