"""Short-form template parser.

Turns a template string like ``cp -r {*files} 'My Files'`` into parts:

    {name}      Interpolated       quoted scalar
    {*name}     InterpolatedList   quoted list
    {!name}     Escaped            verbatim scalar
    {!*name}    EscapedList        verbatim list
    'text'      Literal(Text)      also "text", with \\" and \\\\ escapes
    42, -1.5    Literal(Number)
    word        Literal(Identifier)

``name`` is an identifier or a position. ``{{`` and ``}}`` are literal braces
inside bare words.
"""

from __future__ import annotations

import logging
import re

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
)
from shq.exceptions import TemplateSyntaxError

log = logging.getLogger(__name__)

PLACEHOLDER = re.compile(r"\{(!?)(\*?)([A-Za-z_][A-Za-z0-9_]*|[0-9]+)\}")
NUMBER = re.compile(r"-?[0-9]+(\.[0-9]+)?")

_PLACEHOLDER_PARTS = {
    ("", ""): Interpolated,
    ("", "*"): InterpolatedList,
    ("!", ""): Escaped,
    ("!", "*"): EscapedList,
}


class Parser:
    """Scans a template string word by word."""

    def __init__(self, template: str):
        self.template = template
        self.pos = 0

    def parse(self) -> list[Part]:
        parts: list[Part] = []
        while True:
            self._skip_space()
            if self.pos >= len(self.template):
                break
            parts.append(self._word())
        log.debug("Parsed %d parts from %r", len(parts), self.template)
        return parts

    def _error(self, message: str, column: int | None = None) -> TemplateSyntaxError:
        return TemplateSyntaxError(
            message, self.template, self.pos if column is None else column
        )

    def _skip_space(self) -> None:
        while self.pos < len(self.template) and self.template[self.pos].isspace():
            self.pos += 1

    def _at_word_end(self) -> bool:
        return self.pos >= len(self.template) or self.template[self.pos].isspace()

    def _word(self) -> Part:
        start = self.pos
        ch = self.template[start]

        if ch == "{" and not self.template.startswith("{{", start):
            match = PLACEHOLDER.match(self.template, start)
            if match is None:
                raise self._error("Malformed placeholder")
            self.pos = match.end()
            if not self._at_word_end():
                raise self._error("Placeholder must be a whole word", start)
            bang, star, name = match.groups()
            ref = int(name) if name.isdigit() else name
            return _PLACEHOLDER_PARTS[(bang, star)](ref)

        if ch in "'\"":
            text = self._quoted(ch)
            if not self._at_word_end():
                raise self._error("Quoted text must be a whole word", start)
            return Literal(Text(text))

        word = self._bare()
        if NUMBER.fullmatch(word):
            return Literal(Number(word))
        return Literal(Identifier(word))

    def _quoted(self, quote: str) -> str:
        start = self.pos
        self.pos += 1
        chars: list[str] = []
        while self.pos < len(self.template):
            ch = self.template[self.pos]
            if ch == quote:
                self.pos += 1
                return "".join(chars)
            if quote == '"' and ch == "\\" and self.pos + 1 < len(self.template):
                nxt = self.template[self.pos + 1]
                if nxt in '"\\':
                    chars.append(nxt)
                    self.pos += 2
                    continue
            chars.append(ch)
            self.pos += 1
        raise self._error("Unterminated quote", start)

    def _bare(self) -> str:
        chars: list[str] = []
        while not self._at_word_end():
            ch = self.template[self.pos]
            if ch in "{}":
                if self.template.startswith(ch * 2, self.pos):
                    chars.append(ch)
                    self.pos += 2
                    continue
                raise self._error(f"Unexpected {ch!r}")
            if ch in "'\"":
                raise self._error("Quote inside a bare word")
            chars.append(ch)
            self.pos += 1
        return "".join(chars)


def parse(template: str) -> list[Part]:
    """Parse a short-form template string into parts."""
    if not isinstance(template, str):
        raise TypeError(f"Template must be a string, got {type(template).__name__}")
    return Parser(template).parse()
