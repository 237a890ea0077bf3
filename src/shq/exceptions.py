"""Shq Exceptions

Custom exceptions for shell template parsing and expansion.
"""

from __future__ import annotations

from typing import Any, Union

Ref = Union[str, int]


def _where(index: int | None, ref: Ref | None) -> str:
    bits = []
    if index is not None:
        bits.append(f"part {index}")
    if ref is not None:
        bits.append(f"ref {ref!r}")
    return f" ({', '.join(bits)})" if bits else ""


class ShqError(Exception):
    """Base exception for all shq errors."""

    pass


class BadAtom(ShqError, TypeError):
    """Raised when a value presented as a scalar is not an identifier, text or number."""

    def __init__(
        self, value: Any, index: int | None = None, ref: Ref | None = None
    ):
        self.value = value
        self.index = index
        self.ref = ref
        super().__init__(
            f"Not a valid atom: {value!r} of type {type(value).__name__}"
            f"{_where(index, ref)}"
        )

    def at(self, index: int, ref: Ref | None) -> "BadAtom":
        """Return a copy of this error located at a template part."""
        return BadAtom(self.value, index=index, ref=ref)


class UnresolvedReference(ShqError, LookupError):
    """Raised when a reference has no binding in the expansion context."""

    def __init__(self, ref: Ref, index: int | None = None):
        self.ref = ref
        self.index = index
        super().__init__(f"Unresolved reference: {ref!r}{_where(index, None)}")

    def at(self, index: int) -> "UnresolvedReference":
        """Return a copy of this error located at a template part."""
        return UnresolvedReference(self.ref, index=index)


class TypeMismatch(ShqError, TypeError):
    """Raised when a scalar part resolves to a list, or a list part to a scalar."""

    def __init__(self, ref: Ref, expected: str, value: Any, index: int | None = None):
        self.ref = ref
        self.expected = expected
        self.value = value
        self.index = index
        super().__init__(
            f"Expected a {expected} for {ref!r}, got {type(value).__name__}"
            f"{_where(index, None)}"
        )


class TemplateSyntaxError(ShqError, ValueError):
    """Raised when a short-form template string cannot be parsed."""

    def __init__(self, message: str, template: str = "", column: int | None = None):
        self.template = template
        self.column = column
        suffix = f" at column {column}" if column is not None else ""
        super().__init__(f"{message}{suffix}")


class ConfigError(ShqError):
    """Raised when shq.yaml is unreadable or invalid."""

    def __init__(self, path: Any, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config {path}: {reason}")
