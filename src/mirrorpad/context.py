"""Reusable storage for the mirror tree."""

from __future__ import annotations

from collections.abc import Sequence

from numpy.typing import NDArray

from mirrorpad._tree import (
    ROOT,
    Arena,
    PadNode,
    apply_padding,
    arena_size,
    bind_tree,
    build_tree,
    check_shape,
    flatten_tree,
    validate_tree,
)
from mirrorpad.dtypes import ElementType
from mirrorpad.padding import PadMode, PadSpec


class MirrorPadContext:
    """Holds the node arena of the mirror tree between pad calls.

    Padding many arrays of the same shape through one context
    allocates the arena once and only relinks it on every call.
    A context is not thread-safe: use one per thread.

    Example:
        >>> ctx = MirrorPadContext()
        >>> for x in batch:
        ...     y = mirror_pad(x, [(1, 1), (2, 2)], "symmetric", context=ctx)
    """

    def __init__(self) -> None:
        self._arena: Arena | None = None
        self._shape: tuple[int, ...] | None = None

    @property
    def prepared_shape(self) -> tuple[int, ...] | None:
        """Input shape the arena is currently sized for."""
        return self._shape

    @property
    def arena_capacity(self) -> int:
        """Number of nodes currently allocated."""
        return 0 if self._arena is None else len(self._arena)

    def prepare(self, shape: Sequence[int]) -> int:
        """Size the arena for inputs of ``shape``.

        Does nothing when the arena already fits ``shape``.

        Returns:
            The number of nodes in the arena.
        """
        shape = check_shape(shape)
        if self._arena is None or self._shape != shape:
            self._arena = [PadNode() for _ in range(arena_size(shape))]
            self._shape = shape
        return len(self._arena)

    def reset(self) -> None:
        """Drop the arena."""
        self._arena = None
        self._shape = None

    def run(
        self,
        buffer: NDArray,
        shape: Sequence[int],
        paddings: PadSpec,
        mode: PadMode,
        element_type: ElementType,
        out: NDArray,
    ) -> NDArray:
        """Mirror pad the flat ``buffer`` of ``shape`` into the flat ``out``.

        Runs build, bind, validate, apply, and flatten in sequence.
        Arguments are expected to be checked and normalized by the caller
        (see `mirrorpad.pad_buffer`).

        Returns:
            ``out``, filled in place.
        """
        self.prepare(shape)
        arena = build_tree(self._shape, self._arena)
        bind_tree(arena, self._shape, buffer)
        validate_tree(arena, ROOT, paddings, mode.offset)
        apply_padding(arena, ROOT, paddings, mode.offset)
        flatten_tree(arena, buffer, out, element_type)
        return out
