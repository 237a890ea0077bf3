"""Tests for quoting and atom rendering."""

import shutil
import subprocess

import pytest

from shq.ast.spec import Identifier, Number, Text, atom
from shq.compiler.quoting import quote, quote_word, render_atom
from shq.exceptions import BadAtom

TRICKY = [
    "",
    "plain",
    "with space",
    "$HOME",
    "`id`",
    "$(rm -rf /)",
    "*.py",
    "~",
    "{a,b}",
    "a'b",
    "'",
    "''''",
    "line\nbreak",
    "tab\there",
    'double "quotes" \\ backslash',
    "; echo pwned &",
]


def test_quote_empty():
    assert quote("") == "''"


def test_quote_embedded_single_quote():
    assert quote("a'b") == "'a'\\''b'"


def test_quote_only_quotes():
    assert quote("''") == "''\\'''\\'''"


@pytest.mark.parametrize("s", TRICKY)
def test_quote_is_wrapped(s):
    q = quote(s)
    assert q.startswith("'") and q.endswith("'")


def test_quote_word_minimal_leaves_safe_words_bare():
    assert quote_word("cp") == "cp"
    assert quote_word("-r") == "-r"
    assert quote_word("/usr/local/bin") == "/usr/local/bin"
    assert quote_word("value,x:y@z%") == "value,x:y@z%"


def test_quote_word_minimal_quotes_assignments():
    assert quote_word("key=value,x:y@z%") == "'key=value,x:y@z%'"
    assert quote_word("X=1") == "'X=1'"
    assert quote_word("=") == "'='"


def test_quote_word_minimal_quotes_unsafe_words():
    assert quote_word("") == "''"
    assert quote_word("My Files") == "'My Files'"
    assert quote_word("~") == "'~'"
    assert quote_word("*") == "'*'"
    assert quote_word("a\n") == "'a\n'"


def test_quote_word_always():
    assert quote_word("cp", "always") == "'cp'"


def test_render_atom():
    assert render_atom(Identifier("cp")) == "cp"
    assert render_atom(Text("My Files")) == "My Files"
    assert render_atom(Number("-1.5")) == "-1.5"
    assert render_atom(atom(10)) == "10"
    assert render_atom(atom(2.0)) == "2.0"


@pytest.mark.parametrize("value", ["cp", 1, None, ["a"]])
def test_render_atom_rejects_non_atoms(value):
    with pytest.raises(BadAtom) as exc_info:
        render_atom(value)
    assert exc_info.value.value is value


needs_sh = pytest.mark.skipif(shutil.which("sh") is None, reason="no POSIX sh")


def _shell_echo(words: str) -> str:
    result = subprocess.run(
        ["sh", "-c", f"printf '%s|' {words}"],
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


@needs_sh
@pytest.mark.parametrize("s", TRICKY)
def test_quote_round_trips_through_shell(s):
    assert _shell_echo(quote(s)) == s + "|"


@needs_sh
@pytest.mark.parametrize("s", TRICKY)
def test_quote_word_round_trips_through_shell(s):
    assert _shell_echo(quote_word(s)) == s + "|"


@needs_sh
@pytest.mark.parametrize("a", [Identifier("cp"), Text("it's $x"), Number("3.25")])
def test_rendered_atom_round_trips(a):
    assert _shell_echo(quote(render_atom(a))) == render_atom(a) + "|"
