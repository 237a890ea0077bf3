"""Shq compiler - quotes, resolves and expands template parts."""

from shq.compiler.context import (
    ChainContext,
    FrameContext,
    MappingContext,
    SequenceContext,
)
from shq.compiler.expander import Expander, expand
from shq.compiler.quoting import quote, quote_word, render_atom

__all__ = [
    "ChainContext",
    "Expander",
    "FrameContext",
    "MappingContext",
    "SequenceContext",
    "expand",
    "quote",
    "quote_word",
    "render_atom",
]
