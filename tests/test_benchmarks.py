"""Benchmarks for the mirror pad pipeline: tree build, padding, end-to-end."""

import numpy as np
import pytest

from mirrorpad import MirrorPadContext, MirrorPadOp, PadSpec, mirror_pad
from mirrorpad._tree import (
    ROOT,
    apply_padding,
    bind_tree,
    build_tree,
    flatten_tree,
    validate_tree,
)
from mirrorpad.dtypes import ElementType

pytest.importorskip("pytest_benchmark")

SHAPE = (8, 16, 16)  # Image-like input: channels x height x width
PADDINGS = PadSpec.from_pairs([(0, 0), (2, 2), (2, 2)])

# -----------------------------------------------------------------------------
# Stages
# -----------------------------------------------------------------------------


@pytest.mark.benchmark(group="stages")
def test_build(benchmark):
    """Tree allocation and linking"""
    benchmark(build_tree, SHAPE)


@pytest.mark.benchmark(group="stages")
def test_build_reused_arena(benchmark):
    """Tree linking into an existing arena"""
    arena = build_tree(SHAPE)
    benchmark(build_tree, SHAPE, arena)


@pytest.mark.benchmark(group="stages")
def test_apply(benchmark):
    """Mirror list construction"""
    x = np.ones(SHAPE, dtype=np.float32).reshape(-1)
    arena = build_tree(SHAPE)
    bind_tree(arena, SHAPE, x)
    validate_tree(arena, ROOT, PADDINGS, 1)
    benchmark(apply_padding, arena, ROOT, PADDINGS, 1)


@pytest.mark.benchmark(group="stages")
def test_flatten(benchmark):
    """Output flattening"""
    x = np.ones(SHAPE, dtype=np.float32).reshape(-1)
    arena = build_tree(SHAPE)
    bind_tree(arena, SHAPE, x)
    validate_tree(arena, ROOT, PADDINGS, 1)
    apply_padding(arena, ROOT, PADDINGS, 1)
    out = np.empty(8 * 20 * 20, dtype=np.float32)
    benchmark(flatten_tree, arena, x, out, ElementType.FLOAT32)


# -----------------------------------------------------------------------------
# End-to-end
# -----------------------------------------------------------------------------


@pytest.mark.benchmark(group="end_to_end")
def test_mirror_pad(benchmark):
    """Full pad with a fresh arena per call"""
    x = np.ones(SHAPE, dtype=np.float32)
    benchmark(mirror_pad, x, PADDINGS, "reflect")


@pytest.mark.benchmark(group="end_to_end")
def test_mirror_pad_with_context(benchmark):
    """Full pad reusing one arena"""
    x = np.ones(SHAPE, dtype=np.float32)
    ctx = MirrorPadContext()
    benchmark(mirror_pad, x, PADDINGS, "reflect", context=ctx)


@pytest.mark.benchmark(group="end_to_end")
def test_op_eval(benchmark):
    """Prepared operator evaluation"""
    op = MirrorPadOp("symmetric")
    op.prepare(SHAPE, PADDINGS)
    x = np.ones(int(np.prod(SHAPE)), dtype=np.float32)
    benchmark(op.eval, x)
