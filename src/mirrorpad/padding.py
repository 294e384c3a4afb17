"""Pad specifications, pad modes, and the padded output shape."""

from __future__ import annotations

import enum
import numbers
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from mirrorpad.errors import ShapeError


class PadMode(enum.Enum):
    """How elements are mirrored across a boundary.

    ``REFLECT`` mirrors around the border element without repeating it:
    ``[1, 2, 3]`` padded by 2 on the left gives ``[3, 2, 1, 2, 3]``.
    ``SYMMETRIC`` mirrors around the border itself, so the border element repeats:
    ``[1, 2, 3]`` padded by 2 on the left gives ``[2, 1, 1, 2, 3]``.
    """

    REFLECT = "reflect"
    SYMMETRIC = "symmetric"

    @property
    def offset(self) -> int:
        """Index of the first mirrored element, counted from the boundary."""
        return 1 if self is PadMode.REFLECT else 0


@dataclass(frozen=True)
class PadSpec:
    """Per-dimension ``(left, right)`` pad amounts, outermost dimension first.

    Attributes:
        pairs: One ``(left, right)`` pair of non-negative integers per dimension.
    """

    pairs: tuple[tuple[int, int], ...]

    def __post_init__(self) -> None:
        """Validate and normalize pad amounts to plain ints."""
        normalized = []
        for d, pair in enumerate(self.pairs):
            if len(pair) != 2:
                msg = f"Pad spec entry for dimension {d} must be a (left, right) pair, got {pair!r}"
                raise ShapeError(msg)
            normalized.append(
                (_pad_amount(pair[0], d, "left"), _pad_amount(pair[1], d, "right"))
            )
        object.__setattr__(self, "pairs", tuple(normalized))

    # Properties

    @property
    def rank(self) -> int:
        """Number of dimensions this spec pads."""
        return len(self.pairs)

    def left(self, dimension: int) -> int:
        """Amount added before the first element of ``dimension``."""
        return self.pairs[dimension][0]

    def right(self, dimension: int) -> int:
        """Amount added after the last element of ``dimension``."""
        return self.pairs[dimension][1]

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self.pairs)

    # Constructors

    @classmethod
    def from_pairs(cls, pairs: Sequence[Sequence[int]]) -> PadSpec:
        """Create a spec from a sequence of ``(left, right)`` pairs."""
        try:
            return cls(tuple(tuple(pair) for pair in pairs))
        except TypeError:
            msg = f"Pad spec must be a sequence of (left, right) pairs, got {pairs!r}"
            raise ShapeError(msg) from None

    @classmethod
    def from_matrix(cls, matrix: ArrayLike) -> PadSpec:
        """Create a spec from an integer matrix of shape ``(rank, 2)``.

        Each row holds the left and right pad amount of one dimension.
        """
        matrix = np.asarray(matrix)
        if matrix.shape in {(0,), (0, 2)}:
            matrix = matrix.reshape(0, 2)
        if matrix.ndim != 2 or matrix.shape[1] != 2:
            msg = f"Padding matrix must have shape (rank, 2), got {matrix.shape}"
            raise ShapeError(msg)
        if matrix.size and not np.issubdtype(matrix.dtype, np.integer):
            msg = f"Padding matrix must hold integers, got dtype {matrix.dtype}"
            raise ShapeError(msg)
        return cls(tuple((int(left), int(right)) for left, right in matrix))

    @classmethod
    def coerce(cls, value: PadSpec | ArrayLike) -> PadSpec:
        """Accept a PadSpec, an integer matrix, or a nested sequence of pairs."""
        if isinstance(value, cls):
            return value
        if isinstance(value, np.ndarray) or hasattr(value, "__array__"):
            return cls.from_matrix(value)
        return cls.from_pairs(value)

    # Conversion methods

    def to_matrix(self) -> NDArray[np.int64]:
        """Return the spec as an ``int64`` matrix of shape ``(rank, 2)``."""
        return np.array(self.pairs, dtype=np.int64).reshape(self.rank, 2)


def _pad_amount(value: object, dimension: int, side: str) -> int:
    """Check a single pad amount is a non-negative integer."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        msg = f"{side.capitalize()} pad of dimension {dimension} must be an integer, got {value!r}"
        raise ShapeError(msg)
    if value < 0:
        msg = f"{side.capitalize()} pad of dimension {dimension} must be non-negative, got {value}"
        raise ShapeError(msg)
    return int(value)


def padded_shape(
    input_shape: Sequence[int], paddings: PadSpec | ArrayLike
) -> tuple[int, ...]:
    """Compute the output shape of a mirror pad.

    ``output_shape[d] = input_shape[d] + left[d] + right[d]``.

    Raises:
        ShapeError: If the spec rank differs from the input rank,
            or a pad amount is negative.
    """
    paddings = PadSpec.coerce(paddings)
    if paddings.rank != len(input_shape):
        msg = (
            f"Pad spec has rank {paddings.rank} "
            f"but the input has rank {len(input_shape)} (shape {tuple(input_shape)})"
        )
        raise ShapeError(msg)
    return tuple(
        int(size) + left + right
        for size, (left, right) in zip(input_shape, paddings, strict=True)
    )
