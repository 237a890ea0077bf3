"""Template part model.

Atoms are resolved scalar values; parts are the five ways a template word can
be produced. Both are frozen msgspec structs so templates can be shared freely
and dumped to JSON.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Union

import msgspec

from shq.exceptions import BadAtom, Ref, TemplateSyntaxError


class AtomBase(msgspec.Struct, frozen=True, tag_field="kind"):
    pass


class Identifier(AtomBase, tag="identifier"):
    """A bare name, e.g. a command like ``cp``."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise BadAtom(self.name)


class Text(AtomBase, tag="text"):
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise BadAtom(self.value)


class Number(AtomBase, tag="number"):
    """A number kept in its canonical decimal text form."""

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or self.text != self.text.strip():
            raise BadAtom(self.text)
        try:
            finite = Decimal(self.text).is_finite()
        except InvalidOperation:
            raise BadAtom(self.text) from None
        if not finite:
            raise BadAtom(self.text)

    @classmethod
    def of(cls, value: Union[int, float, Decimal]) -> "Number":
        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
            raise BadAtom(value)
        return cls(str(value))


Atom = Union[Identifier, Text, Number]
ATOM_TYPES = (Identifier, Text, Number)


def atom(value: Any) -> Atom:
    """Classify a plain Python value as an Atom.

    Strings become Text, numbers (but not bools) become Number, atoms pass
    through unchanged. Anything else raises BadAtom.
    """
    if isinstance(value, ATOM_TYPES):
        return value
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return Number.of(value)
    raise BadAtom(value)


# =============================================================================
# Parts
# =============================================================================


class PartBase(msgspec.Struct, frozen=True, tag_field="kind"):
    pass


class Literal(PartBase, tag="literal"):
    """A scalar known when the template is written. Always quoted."""

    atom: Atom

    def __post_init__(self) -> None:
        if not isinstance(self.atom, ATOM_TYPES):
            raise BadAtom(self.atom)


class RefPart(PartBase):
    """Base for parts that look a value up in the expansion context."""

    ref: Union[str, int]

    def __post_init__(self) -> None:
        _check_ref(self.ref)


class Interpolated(RefPart, tag="interpolated"):
    """A dynamic scalar, quoted."""


class InterpolatedList(RefPart, tag="interpolated-list"):
    """A dynamic list, each element quoted."""


class Escaped(RefPart, tag="escaped"):
    """A dynamic scalar inserted verbatim."""


class EscapedList(RefPart, tag="escaped-list"):
    """A dynamic list inserted verbatim."""


Part = Union[Literal, Interpolated, InterpolatedList, Escaped, EscapedList]
LIST_PARTS = (InterpolatedList, EscapedList)
QUOTED_PARTS = (Literal, Interpolated, InterpolatedList)


def _check_ref(ref: Ref) -> None:
    if isinstance(ref, bool):
        raise TemplateSyntaxError(f"Invalid reference {ref!r}")
    if isinstance(ref, str):
        if not ref:
            raise TemplateSyntaxError("Empty reference name")
        return
    if isinstance(ref, int):
        if ref < 0:
            raise TemplateSyntaxError(f"Negative reference position {ref}")
        return
    raise TemplateSyntaxError(f"Invalid reference {ref!r}")


def literal(value: Any) -> Literal:
    """Build a Literal from a plain value, classifying it with ``atom``."""
    return Literal(atom(value))


def refs(parts: list[Part]) -> list[Ref]:
    """Return the references used by ``parts`` in order, without duplicates."""
    seen: list[Ref] = []
    for part in parts:
        if isinstance(part, RefPart) and part.ref not in seen:
            seen.append(part.ref)
    return seen


def dumps(parts: list[Part]) -> bytes:
    """Encode parts as JSON."""
    return msgspec.json.encode(parts)


def loads(data: Union[bytes, str]) -> list[Part]:
    """Decode parts from JSON produced by ``dumps``."""
    return msgspec.json.decode(data, type=list[Part])
