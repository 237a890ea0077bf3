"""Tests for the Jinja2 helpers."""

import pytest

from shq.compiler.extensions import get_shq_jinja_env, shquote
from shq.exceptions import BadAtom


def test_shquote_scalar_and_list():
    assert shquote("a b") == "'a b'"
    assert shquote(["a b", "c", 1]) == "'a b' c 1"
    assert shquote("c", "always") == "'c'"


def test_shquote_rejects_non_scalars():
    with pytest.raises(BadAtom):
        shquote(None)


def test_filter_in_template():
    env = get_shq_jinja_env()
    tmpl = env.from_string("tar czf {{ out | shquote }} {{ files | shquote }}")
    assert tmpl.render(out="my backup.tgz", files=["a", "b c"]) == "tar czf 'my backup.tgz' a 'b c'"


def test_sh_global_in_template():
    env = get_shq_jinja_env()
    tmpl = env.from_string('ssh host {{ sh("rm -- {*paths}", paths=paths) }}')
    assert tmpl.render(paths=["x y"]) == "ssh host rm -- 'x y'"
