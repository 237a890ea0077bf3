"""Expander - turns a part sequence and a context into one command line."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Iterable

from shq.ast.spec import (
    Escaped,
    EscapedList,
    Interpolated,
    InterpolatedList,
    Literal,
    Part,
    atom,
)
from shq.compiler.context import as_context
from shq.compiler.quoting import QuoteStyle, quote_word, render_atom
from shq.exceptions import BadAtom, Ref, TypeMismatch, UnresolvedReference

log = logging.getLogger(__name__)


def _is_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


class Expander:
    """Renders parts to shell tokens.

    Literal, Interpolated and InterpolatedList tokens are quoted; Escaped and
    EscapedList tokens are inserted as-is. List parts always produce a single
    token, so an empty list leaves an empty field between its neighbours.
    """

    def __init__(self, style: QuoteStyle = "minimal"):
        if style not in ("minimal", "always"):
            raise ValueError(f"Unknown quote style: {style!r}")
        self.style = style

    def expand(self, parts: Iterable[Part], context: Any = None) -> str:
        ctx = as_context(context)
        tokens = [self._token(i, part, ctx) for i, part in enumerate(parts)]
        log.debug("Expanded %d parts", len(tokens))
        return " ".join(tokens)

    def _token(self, index: int, part: Part, ctx: Any) -> str:
        if isinstance(part, Literal):
            return self._quote(render_atom(part.atom))

        if isinstance(part, (Interpolated, Escaped)):
            text = self._scalar(index, part.ref, ctx)
            return self._quote(text) if isinstance(part, Interpolated) else text

        if isinstance(part, (InterpolatedList, EscapedList)):
            texts = self._list(index, part.ref, ctx)
            if isinstance(part, InterpolatedList):
                texts = [self._quote(t) for t in texts]
            return " ".join(texts)

        raise TypeError(f"Not a template part at {index}: {part!r}")

    def _quote(self, text: str) -> str:
        return quote_word(text, self.style)

    def _lookup(self, index: int, ref: Ref, ctx: Any) -> Any:
        try:
            return ctx.resolve(ref)
        except UnresolvedReference as e:
            raise e.at(index) from None

    def _scalar(self, index: int, ref: Ref, ctx: Any) -> str:
        value = self._lookup(index, ref, ctx)
        if _is_list(value):
            raise TypeMismatch(ref, "scalar", value, index=index)
        return self._render(index, ref, value)

    def _list(self, index: int, ref: Ref, ctx: Any) -> list[str]:
        value = self._lookup(index, ref, ctx)
        if not _is_list(value):
            raise TypeMismatch(ref, "list", value, index=index)
        return [self._render(index, ref, item) for item in value]

    def _render(self, index: int, ref: Ref, value: Any) -> str:
        try:
            return render_atom(atom(value))
        except BadAtom as e:
            raise e.at(index, ref) from None


def expand(
    parts: Iterable[Part], context: Any = None, *, style: QuoteStyle = "minimal"
) -> str:
    """Expand ``parts`` against ``context`` into a single command line.

    Args:
        parts: Template parts, in output order.
        context: Object with ``resolve(ref)``, or a mapping / sequence.
        style: ``minimal`` leaves safe words bare, ``always`` quotes every
            quoted token.

    Returns:
        The tokens joined with single spaces.

    Raises:
        UnresolvedReference: A ref has no binding.
        TypeMismatch: A scalar part got a list or a list part got a scalar.
        BadAtom: A resolved value is not a string or number.
    """
    return Expander(style).expand(parts, context)
