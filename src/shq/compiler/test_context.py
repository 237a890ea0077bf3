import pytest

from shq.compiler.context import (
    ChainContext,
    FrameContext,
    MappingContext,
    SequenceContext,
    as_context,
)
from shq.exceptions import UnresolvedReference

GLOBAL_NAME = "from globals"


def test_mapping_context():
    ctx = MappingContext({"a": 1})
    assert ctx.resolve("a") == 1
    with pytest.raises(UnresolvedReference):
        ctx.resolve("b")
    with pytest.raises(UnresolvedReference):
        ctx.resolve(0)


def test_sequence_context():
    ctx = SequenceContext(["x", "y"])
    assert ctx.resolve(1) == "y"
    for ref in (2, "0", True):
        with pytest.raises(UnresolvedReference):
            ctx.resolve(ref)


def test_chain_context_first_wins():
    ctx = ChainContext({"a": "first"}, {"a": "second", "b": "b"}, ["zero"])
    assert ctx.resolve("a") == "first"
    assert ctx.resolve("b") == "b"
    assert ctx.resolve(0) == "zero"
    with pytest.raises(UnresolvedReference):
        ctx.resolve("c")


def test_frame_context_captures_caller():
    local_name = "from locals"

    ctx = FrameContext.capture()
    assert ctx.resolve("local_name") == local_name
    assert ctx.resolve("GLOBAL_NAME") == GLOBAL_NAME


def test_frame_context_locals_shadow_globals():
    GLOBAL_NAME = "shadowed"  # noqa: F841

    assert FrameContext.capture().resolve("GLOBAL_NAME") == "shadowed"


def test_as_context():
    assert isinstance(as_context({"a": 1}), MappingContext)
    assert isinstance(as_context(["a"]), SequenceContext)
    assert isinstance(as_context(None), MappingContext)
    ctx = MappingContext({})
    assert as_context(ctx) is ctx
    with pytest.raises(TypeError):
        as_context("not a context")
