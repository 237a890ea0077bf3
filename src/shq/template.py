"""Template facade: parse once, expand many times."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from shq.ast.parser import parse
from shq.ast.spec import Part, refs
from shq.compiler.context import ChainContext, FrameContext, MappingContext, as_context
from shq.compiler.expander import Expander
from shq.compiler.quoting import QuoteStyle
from shq.exceptions import Ref


class Template:
    """A parsed shell template.

    Example:
        >>> Template("cp -r {*files} {dest}").expand(files=["a b"], dest="/tmp")
        "cp -r 'a b' /tmp"
    """

    def __init__(self, source: str | Iterable[Part], style: QuoteStyle = "minimal"):
        if isinstance(source, str):
            self.source: Optional[str] = source
            self.parts: tuple[Part, ...] = tuple(parse(source))
        else:
            self.source = None
            self.parts = tuple(source)
        self.expander = Expander(style)

    @property
    def names(self) -> list[Ref]:
        """References used by the template, in order of first use."""
        return refs(list(self.parts))

    def expand(self, context: Any = None, **values: Any) -> str:
        """Expand against ``context``; keyword values take precedence."""
        if values and context is not None:
            ctx: Any = ChainContext(MappingContext(values), as_context(context))
        elif values:
            ctx = MappingContext(values)
        else:
            ctx = context
        return self.expander.expand(self.parts, ctx)

    def __repr__(self) -> str:
        if self.source is not None:
            return f"Template({self.source!r})"
        return f"Template({list(self.parts)!r})"


def sh(source: str, context: Any = None, **values: Any) -> str:
    """Parse and expand ``source`` in one go.

    Without a context or keyword values the caller's variables are used, so
    ``sh("rm -- {*paths}")`` picks up a local ``paths``.
    """
    if context is None and not values:
        context = FrameContext.capture(1)
    return Template(source).expand(context, **values)
