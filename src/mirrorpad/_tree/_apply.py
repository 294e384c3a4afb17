"""Attaching mirror lists to every internal node of the tree."""

from mirrorpad.errors import InternalConsistencyError
from mirrorpad.padding import PadSpec

from ._commons import Arena


def apply_padding(
    arena: Arena, node: int, paddings: PadSpec, offset: int, dimension: int = 0
) -> None:
    """Fill ``left_mirrors`` and ``right_mirrors`` of ``node`` and all its descendants.

    Mirror lists hold children in the order they are emitted.
    For children ``[a, b, c, d]`` and a pad of 2 on both sides:

        reflect   (offset=1): left [c, b], right [c, b] -> c b a b c d c b
        symmetric (offset=0): left [b, a], right [d, c] -> b a a b c d d c

    Unlike validation, this visits every node at every depth,
    since each node mirrors its own children.
    Must only run after `validate_tree` succeeded.

    Raises:
        InternalConsistencyError: If a mirror index falls outside the children.
    """
    if dimension >= paddings.rank:
        return

    current = arena[node]
    children = current.children
    n = len(children)
    left = paddings.left(dimension)
    right = paddings.right(dimension)

    # Left run ends at index offset, right run starts at index n - 1 - offset.
    if left and left + offset - 1 >= n:
        msg = f"Left mirror of dimension {dimension} reads index {left + offset - 1} of {n}."
        raise InternalConsistencyError(msg)
    if right and n - offset - right < 0:
        msg = f"Right mirror of dimension {dimension} reads index {n - offset - right} of {n}."
        raise InternalConsistencyError(msg)

    current.left_mirrors = [children[i] for i in range(left + offset - 1, offset - 1, -1)]
    current.right_mirrors = [
        children[i] for i in range(n - 1 - offset, n - 1 - offset - right, -1)
    ]

    for child in children:
        apply_padding(arena, child, paddings, offset, dimension + 1)
