"""Expansion contexts - where template references get their values.

A context is anything with a ``resolve(ref)`` method that returns a scalar or a
sequence, and raises UnresolvedReference when the ref is unbound.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from shq.exceptions import Ref, UnresolvedReference


@runtime_checkable
class Context(Protocol):
    def resolve(self, ref: Ref) -> Any: ...


@dataclass(frozen=True)
class MappingContext:
    """Resolves names against a mapping."""

    values: Mapping[str, Any] = field(default_factory=dict)

    def resolve(self, ref: Ref) -> Any:
        try:
            return self.values[ref]  # type: ignore[index]
        except (KeyError, TypeError):
            raise UnresolvedReference(ref) from None


@dataclass(frozen=True)
class SequenceContext:
    """Resolves positions against a sequence."""

    values: Sequence[Any] = ()

    def resolve(self, ref: Ref) -> Any:
        if isinstance(ref, bool) or not isinstance(ref, int):
            raise UnresolvedReference(ref)
        if not 0 <= ref < len(self.values):
            raise UnresolvedReference(ref)
        return self.values[ref]


class ChainContext:
    """Tries each context in turn; the first one that resolves wins."""

    def __init__(self, *contexts: Any):
        self.contexts = [as_context(c) for c in contexts]

    def resolve(self, ref: Ref) -> Any:
        for ctx in self.contexts:
            try:
                return ctx.resolve(ref)
            except UnresolvedReference:
                continue
        raise UnresolvedReference(ref)


class FrameContext(MappingContext):
    """Snapshot of a caller's variables, locals shadowing globals."""

    @classmethod
    def capture(cls, depth: int = 0) -> "FrameContext":
        """Capture the caller's variables, or those ``depth`` frames further up."""
        frame = sys._getframe(depth + 1)
        try:
            values = dict(frame.f_globals)
            values.update(frame.f_locals)
        finally:
            del frame
        return cls(values)


def as_context(obj: Any) -> Context:
    """Wrap mappings and sequences; pass anything with ``resolve`` through."""
    if obj is None:
        return MappingContext()
    if isinstance(obj, Context):
        return obj
    if isinstance(obj, Mapping):
        return MappingContext(obj)
    if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes)):
        return SequenceContext(obj)
    raise TypeError(f"Cannot use {type(obj).__name__} as an expansion context")
