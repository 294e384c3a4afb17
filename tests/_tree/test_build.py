"""Tests for building the mirror tree and binding its leaves.

Covers the closed-form arena size, level-by-level linking,
row-major leaf order, arena reuse, and bind errors.
"""

import math

import numpy as np
import pytest

from mirrorpad import ShapeError
from mirrorpad._tree import (
    ROOT,
    PadNode,
    arena_size,
    bind_tree,
    build_tree,
    iter_leaves,
)


def _depth_nodes(arena, depth):
    """Arena indices of all nodes at ``depth``, in order."""
    level = [ROOT]
    for _ in range(depth):
        level = [child for node in level for child in arena[node].children]
    return level


# Arena size


@pytest.mark.tree
@pytest.mark.parametrize(
    ("shape", "expected"),
    [
        ((), 1),
        ((4,), 5),
        ((2, 3), 9),
        ((2, 3, 4), 33),
        ((3, 0, 2), 4),
    ],
)
def test_arena_size(shape, expected):
    """One root plus one node per index prefix."""
    assert arena_size(shape) == expected


@pytest.mark.tree
def test_arena_size_exceeds_element_count():
    """Internal nodes need storage on top of the leaves."""
    shape = (2, 3, 4)
    assert arena_size(shape) > math.prod(shape)
    assert arena_size(shape) == 1 + 2 + 2 * 3 + 2 * 3 * 4


# Build


@pytest.mark.tree
def test_build_links_children_breadth_first():
    """Shape (2, 3): root -> [1, 2], node 1 -> [3, 4, 5], node 2 -> [6, 7, 8]."""
    arena = build_tree((2, 3))

    assert len(arena) == 9
    assert arena[ROOT].children == [1, 2]
    assert arena[1].children == [3, 4, 5]
    assert arena[2].children == [6, 7, 8]
    for leaf in range(3, 9):
        assert arena[leaf].children == []
        assert arena[leaf].value is None


@pytest.mark.tree
@pytest.mark.parametrize("shape", [(5,), (2, 3), (3, 1, 4), (2, 2, 2, 2)])
def test_build_child_counts_per_depth(shape):
    """Every internal node at depth d has shape[d] children."""
    arena = build_tree(shape)
    for depth, size in enumerate(shape):
        nodes = _depth_nodes(arena, depth)
        assert len(nodes) == math.prod(shape[:depth])
        assert all(len(arena[node].children) == size for node in nodes)
    assert len(_depth_nodes(arena, len(shape))) == math.prod(shape)


@pytest.mark.tree
def test_build_rank_zero_is_single_leaf():
    """A scalar's tree is just the root."""
    arena = build_tree(())
    assert len(arena) == 1
    assert arena[ROOT].children == []


@pytest.mark.tree
def test_build_zero_sized_dimension():
    """Nodes above a zero-sized dimension exist but have no children."""
    arena = build_tree((3, 0, 2))
    assert arena[ROOT].children == [1, 2, 3]
    assert all(arena[node].children == [] for node in (1, 2, 3))
    assert list(iter_leaves(arena, 3)) == []


@pytest.mark.tree
def test_build_reuses_matching_arena():
    """An arena of the right size is reset and relinked in place."""
    arena = build_tree((2, 3))
    arena[1].left_mirrors.append(4)
    arena[5].value = 2
    first_node = arena[0]

    rebuilt = build_tree((2, 3), arena)

    assert rebuilt is arena
    assert rebuilt[0] is first_node
    assert rebuilt[1].left_mirrors == []
    assert rebuilt[5].value is None
    assert rebuilt[ROOT].children == [1, 2]


@pytest.mark.tree
def test_build_replaces_mismatched_arena():
    """An arena of the wrong size is not reused."""
    arena = [PadNode() for _ in range(3)]
    rebuilt = build_tree((2, 3), arena)
    assert rebuilt is not arena
    assert len(rebuilt) == 9


@pytest.mark.tree
@pytest.mark.parametrize("shape", [(-1,), (2, 1.5), (True, 2)])
def test_build_rejects_invalid_shape(shape):
    """Dimension sizes must be non-negative integers."""
    with pytest.raises(ShapeError, match="non-negative integer"):
        build_tree(shape)


# Bind


@pytest.mark.tree
def test_iter_leaves_row_major():
    """Leaves come out in row-major order."""
    arena = build_tree((2, 3))
    assert list(iter_leaves(arena, 2)) == [3, 4, 5, 6, 7, 8]


@pytest.mark.tree
@pytest.mark.parametrize("shape", [(), (4,), (2, 3), (2, 1, 3)])
def test_bind_row_major(shape):
    """Leaf i is bound to flat input index i."""
    arena = build_tree(shape)
    buffer = np.arange(math.prod(shape))
    bind_tree(arena, shape, buffer)

    values = [arena[leaf].value for leaf in iter_leaves(arena, len(shape))]
    assert values == list(range(math.prod(shape)))


@pytest.mark.tree
def test_bind_leaves_internal_nodes_unbound():
    """Only leaves get a value."""
    arena = build_tree((2, 3))
    bind_tree(arena, (2, 3), np.zeros(6))
    assert [arena[node].value for node in (0, 1, 2)] == [None, None, None]


@pytest.mark.tree
def test_bind_missing_buffer():
    """An absent buffer cannot be bound."""
    arena = build_tree((2,))
    with pytest.raises(ShapeError, match="missing"):
        bind_tree(arena, (2,), None)


@pytest.mark.tree
@pytest.mark.parametrize("size", [5, 7])
def test_bind_element_count_mismatch(size):
    """The buffer must hold exactly prod(shape) elements."""
    arena = build_tree((2, 3))
    with pytest.raises(ShapeError, match=f"{size} elements"):
        bind_tree(arena, (2, 3), np.zeros(size))
