"""Types, constants, and utilities for the mirror tree."""

import math
import numbers
from collections.abc import Sequence
from dataclasses import dataclass, field

from mirrorpad.errors import ShapeError

ROOT = 0
"""Arena index of the root node."""


@dataclass(slots=True)
class PadNode:
    """One node of the mirror tree.

    Nodes never hold references to each other or to the input buffer.
    Every link is an integer: arena indices for ``children`` and the mirror lists,
    a flat input index for ``value``.

    Attributes:
        children: Arena indices of the child nodes, in order.
            Empty for leaves.
        value: Flat index of the input element a leaf reads from,
            ``None`` until the leaf is bound (and always for internal nodes).
        left_mirrors: Arena indices of the children emitted before ``children``.
        right_mirrors: Arena indices of the children emitted after ``children``.
    """

    children: list[int] = field(default_factory=list)
    value: int | None = None
    left_mirrors: list[int] = field(default_factory=list)
    right_mirrors: list[int] = field(default_factory=list)

    def reset(self) -> None:
        """Forget all links so the node can be reused by another build."""
        self.children.clear()
        self.value = None
        self.left_mirrors.clear()
        self.right_mirrors.clear()


Arena = list[PadNode]
"""Flat node storage; the root lives at index ``ROOT``."""


# Shape and size


def numel(shape: Sequence[int]) -> int:
    """Compute the total number of elements from a shape tuple."""
    return math.prod(shape) if shape else 1


def check_shape(shape: Sequence[int]) -> tuple[int, ...]:
    """Return ``shape`` as a tuple of ints, rejecting negative or non-integer sizes."""
    result = []
    for d, size in enumerate(shape):
        if isinstance(size, bool) or not isinstance(size, numbers.Integral) or size < 0:
            msg = f"Dimension {d} of shape {tuple(shape)} must be a non-negative integer"
            raise ShapeError(msg)
        result.append(int(size))
    return tuple(result)


def arena_size(shape: Sequence[int]) -> int:
    """Number of nodes in the mirror tree of an array with ``shape``.

    One root plus, for every depth ``d``, one node per index prefix
    ``shape[0..d]``. For shape ``(2, 3)`` that is ``1 + 2 + 6 = 9``.
    """
    total = 1
    level = 1
    for size in shape:
        level *= size
        total += level
    return total
