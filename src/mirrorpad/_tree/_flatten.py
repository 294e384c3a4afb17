"""Writing the padded tree into a flat row-major output buffer."""

import numpy as np
from numpy.typing import NDArray

from mirrorpad.dtypes import ElementType
from mirrorpad.errors import InternalConsistencyError, UnsupportedTypeError

from ._commons import ROOT, Arena


def fill_output(
    arena: Arena, node: int, source: NDArray, out: NDArray, cursor: int = 0
) -> int:
    """Write the values below ``node`` into ``out`` starting at ``cursor``.

    A leaf writes its bound input element.
    An internal node writes its left mirrors, then its children,
    then its right mirrors, each recursively.
    Since mirrors are children too, a mirrored row brings its own padding along.

    Returns:
        The cursor after the last written element.
    """
    current = arena[node]
    if current.value is not None:
        if cursor >= out.shape[0]:
            msg = f"Mirror pad wrote past the end of its {out.shape[0]}-element output."
            raise InternalConsistencyError(msg)
        out[cursor] = source[current.value]
        return cursor + 1

    for child in current.left_mirrors:
        cursor = fill_output(arena, child, source, out, cursor)
    for child in current.children:
        cursor = fill_output(arena, child, source, out, cursor)
    for child in current.right_mirrors:
        cursor = fill_output(arena, child, source, out, cursor)
    return cursor


def flatten_tree(
    arena: Arena, source: NDArray, out: NDArray, element_type: ElementType
) -> None:
    """Drain the padded tree rooted at ``ROOT`` into the flat buffer ``out``.

    Args:
        arena: A built, bound, validated, and padded mirror tree.
        source: Flat input buffer the leaves index into.
        out: Flat output buffer with exactly ``prod(padded_shape)`` elements.
        element_type: Type tag the output is written as.

    Raises:
        UnsupportedTypeError: Before any write,
            if ``element_type`` is not a supported type tag
            or ``out`` does not hold that type.
        InternalConsistencyError: If the tree does not fill ``out`` exactly.
    """
    if not isinstance(element_type, ElementType):
        raise UnsupportedTypeError(element_type)
    if out.dtype != element_type.dtype:
        raise UnsupportedTypeError(out.dtype)

    written = fill_output(arena, ROOT, np.asarray(source), out)
    if written != out.shape[0]:
        msg = f"Mirror pad wrote {written} elements into a {out.shape[0]}-element output."
        raise InternalConsistencyError(msg)
