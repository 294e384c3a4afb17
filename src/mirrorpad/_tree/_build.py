"""Allocation of the mirror tree and binding of its leaves to input elements."""

from collections.abc import Iterator, Sequence

import numpy as np
from numpy.typing import NDArray

from mirrorpad.errors import InternalConsistencyError, ShapeError

from ._commons import ROOT, Arena, PadNode, arena_size, check_shape, numel


def build_tree(shape: Sequence[int], arena: Arena | None = None) -> Arena:
    """Allocate and link the mirror tree of an array with ``shape``.

    The tree is built breadth-first, one dimension at a time.
    Each node of the current frontier receives ``shape[d]`` fresh children,
    and the concatenation of all new children (in order) becomes the next frontier.
    After the last dimension the frontier holds the leaves in row-major order.

    Example: shape ``(2, 3)``
        root 0 -> children [1, 2]
        node 1 -> children [3, 4, 5]
        node 2 -> children [6, 7, 8]
        leaves 3..8 stand for x[0, 0], x[0, 1], ..., x[1, 2]

    Args:
        shape: Shape of the unpadded input.
        arena: Optional node storage from a previous build.
            It is reused (after resetting every node)
            when it has exactly ``arena_size(shape)`` nodes.

    Returns:
        The arena holding the tree, with the root at index ``ROOT``.
        Leaves are not bound yet; see `bind_tree`.
    """
    shape = check_shape(shape)
    size = arena_size(shape)
    if arena is None or len(arena) != size:
        arena = [PadNode() for _ in range(size)]
    else:
        for node in arena:
            node.reset()

    frontier = [ROOT]
    next_index = ROOT + 1
    for dim_size in shape:
        next_frontier: list[int] = []
        for parent in frontier:
            children = range(next_index, next_index + dim_size)
            arena[parent].children.extend(children)
            next_frontier.extend(children)
            next_index += dim_size
        frontier = next_frontier

    if next_index != size:
        msg = f"Mirror tree for shape {shape} linked {next_index} of {size} nodes."
        raise InternalConsistencyError(msg)
    return arena


def iter_leaves(arena: Arena, rank: int) -> Iterator[int]:
    """Yield the arena indices of all leaves in row-major order.

    A node is a leaf when it sits at depth ``rank``.
    Internal nodes of a zero-sized dimension have no children
    and are therefore not leaves.
    """
    stack = [(ROOT, 0)]
    while stack:
        node, depth = stack.pop()
        if depth == rank:
            yield node
            continue
        stack.extend((child, depth + 1) for child in reversed(arena[node].children))


def bind_tree(arena: Arena, shape: Sequence[int], buffer: NDArray | None) -> None:
    """Bind every leaf to the input element at the same row-major position.

    Leaves store the flat index into ``buffer``, never the value itself.

    Raises:
        ShapeError: If ``buffer`` is missing,
            or its element count does not match ``shape``.
    """
    if buffer is None:
        msg = "Input buffer is missing; cannot bind the mirror tree."
        raise ShapeError(msg)

    expected = numel(shape)
    num_elements = int(np.size(buffer))
    if num_elements != expected:
        msg = (
            f"Input buffer has {num_elements} elements "
            f"but shape {tuple(shape)} needs {expected}."
        )
        raise ShapeError(msg)

    flat_index = 0
    for leaf in iter_leaves(arena, len(shape)):
        arena[leaf].value = flat_index
        flat_index += 1

    if flat_index != expected:
        msg = f"Mirror tree for shape {tuple(shape)} has {flat_index} leaves, expected {expected}."
        raise InternalConsistencyError(msg)
