"""Jinja2 helpers for embedding safe command lines in generated scripts."""

from collections.abc import Sequence
from typing import Any

from jinja2 import Environment

from shq.ast.spec import atom
from shq.compiler.quoting import quote_word, render_atom
from shq.template import Template


def shquote(value: Any, style: str = "minimal") -> str:
    """Quote a scalar, or each element of a list, as shell words.

    Example:
        {{ files | shquote }}  ->  'a b' c
    """
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return " ".join(quote_word(render_atom(atom(v)), style) for v in value)
    return quote_word(render_atom(atom(value)), style)


def sh_global(source: str, **values: Any) -> str:
    """Expand a short-form template from inside a Jinja template.

    Example:
        {{ sh("rsync -a {*src} {dest}", src=sources, dest=target) }}
    """
    return Template(source).expand(**values)


def get_shq_jinja_env(**options: Any) -> Environment:
    """Create a Jinja2 Environment with the shquote filter and sh global.

    Returns:
        Configured Jinja2 Environment.
    """
    env = Environment(**options)
    env.filters["shquote"] = shquote
    env.globals["sh"] = sh_global
    return env
