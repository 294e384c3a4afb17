"""Validation of pad amounts against the data available for mirroring."""

from mirrorpad.errors import InsufficientPaddingDataError
from mirrorpad.padding import PadSpec

from ._commons import Arena


def validate_tree(
    arena: Arena, node: int, paddings: PadSpec, offset: int, dimension: int = 0
) -> None:
    """Check that every dimension has enough elements to mirror from.

    A pad of ``p`` needs ``p + offset`` elements along its dimension:
    reflect (``offset=1``) skips the border element, symmetric (``offset=0``) reuses it.

    All nodes at one depth have the same number of children in a dense array,
    so only one representative per depth is checked.
    The recursion descends through the representative's first child.

    Raises:
        InsufficientPaddingDataError: For the first dimension
            (outermost first, left before right) that cannot supply its pad.
    """
    if dimension >= paddings.rank:
        return

    available = len(arena[node].children)
    left = paddings.left(dimension) + offset
    if left > available:
        raise InsufficientPaddingDataError(dimension, left, available, "left")
    right = paddings.right(dimension) + offset
    if right > available:
        raise InsufficientPaddingDataError(dimension, right, available, "right")

    if arena[node].children:
        validate_tree(arena, arena[node].children[0], paddings, offset, dimension + 1)
