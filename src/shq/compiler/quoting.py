"""POSIX shell quoting and atom rendering."""

from __future__ import annotations

import re
from typing import Any, Literal

from shq.ast.spec import Identifier, Number, Text
from shq.exceptions import BadAtom

QuoteStyle = Literal["minimal", "always"]

# Characters that are never special to a POSIX shell in any word position.
# No "=": a leading bare NAME=value word is an assignment.
_SAFE_WORD = re.compile(r"[A-Za-z0-9@%+:,./_-]+")


def quote(s: str) -> str:
    """Single-quote ``s`` for a POSIX shell.

    Embedded single quotes become ``'\\''``: close the quoted region, emit an
    escaped quote, reopen. Nothing else is special inside single quotes.

    Example:
        >>> quote("a'b")
        "'a'\\\\''b'"
    """
    return "'" + s.replace("'", "'\\''") + "'"


def quote_word(s: str, style: QuoteStyle = "minimal") -> str:
    """Quote ``s`` as one shell word.

    With the ``minimal`` style, non-empty words made only of safe characters
    are left bare. The ``always`` style is plain ``quote``.
    """
    if style == "minimal" and _SAFE_WORD.fullmatch(s):
        return s
    return quote(s)


def render_atom(a: Any) -> str:
    """Return the unquoted text of an atom."""
    if isinstance(a, Identifier):
        return a.name
    if isinstance(a, Text):
        return a.value
    if isinstance(a, Number):
        return a.text
    raise BadAtom(a)
