"""Mirror padding of flat buffers and arrays."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from mirrorpad._tree import check_shape, numel
from mirrorpad.context import MirrorPadContext
from mirrorpad.dtypes import ElementType, resolve_element_type
from mirrorpad.errors import ShapeError, UnsupportedTypeError
from mirrorpad.padding import PadMode, PadSpec, padded_shape


def mirror_pad(
    x: ArrayLike,
    paddings: PadSpec | ArrayLike,
    mode: PadMode | str = "reflect",
    *,
    context: MirrorPadContext | None = None,
) -> np.ndarray:
    """Pad every dimension of ``x`` by mirroring it across its borders.

    Args:
        x: Input array of any rank (numpy or JAX array, or nested sequences).
        paddings: One ``(left, right)`` pair per dimension of ``x``,
            as a `PadSpec`, a nested sequence, or an integer matrix of shape ``(rank, 2)``.
        mode: ``"reflect"`` (border element not repeated)
            or ``"symmetric"`` (border element repeated).
        context: Optional `MirrorPadContext` to reuse tree storage across calls.

    Returns:
        A new numpy array with the dtype of ``x``
        and shape ``x.shape[d] + left[d] + right[d]`` per dimension.

    Raises:
        ShapeError: If ``paddings`` does not fit the rank of ``x``.
        InsufficientPaddingDataError: If a dimension is too small for its pad.
        UnsupportedTypeError: If the dtype of ``x`` cannot be padded.

    Example:
        >>> mirror_pad(np.array([1, 2, 3, 4]), [(2, 2)], "reflect")
        array([3, 2, 1, 2, 3, 4, 3, 2])
    """
    x = np.asarray(x)
    paddings = PadSpec.coerce(paddings)
    out_shape = padded_shape(x.shape, paddings)
    flat = pad_buffer(x.reshape(-1), x.shape, paddings, mode, context=context)
    return flat.reshape(out_shape)


def pad_buffer(
    buffer: ArrayLike | bytes | bytearray | memoryview | None,
    shape: Sequence[int],
    paddings: PadSpec | ArrayLike,
    mode: PadMode | str,
    element_type: ElementType | DTypeLike | None = None,
    *,
    out: NDArray | None = None,
    context: MirrorPadContext | None = None,
) -> NDArray:
    """Mirror pad a flat row-major buffer.

    This is the entry point for hosts that hand over raw storage:
    a read-only buffer, its shape, and its element type.

    Args:
        buffer: Flat input data.
            Raw bytes are interpreted as ``element_type``,
            arrays are flattened in row-major order.
        shape: Shape of the unpadded input.
        paddings: One ``(left, right)`` pair per dimension.
        mode: ``"reflect"`` or ``"symmetric"``.
        element_type: Type tag of the elements.
            Required for raw bytes; for arrays it defaults to their dtype
            and must agree with it when given.
        out: Optional flat, writable output buffer
            with ``prod(padded_shape(shape, paddings))`` elements of ``element_type``.
            Allocated when omitted.
        context: Optional `MirrorPadContext` to reuse tree storage across calls.

    Returns:
        The flat padded output (``out`` itself when given).
        On error, the contents of a supplied ``out`` must be discarded.
    """
    mode = PadMode(mode)
    paddings = PadSpec.coerce(paddings)
    shape = check_shape(shape)
    out_shape = padded_shape(shape, paddings)
    source, element_type = _as_source(buffer, element_type)
    out = _as_output(out, numel(out_shape), element_type)

    if context is None:
        context = MirrorPadContext()
    return context.run(source, shape, paddings, mode, element_type, out)


def _as_source(
    buffer: ArrayLike | bytes | bytearray | memoryview | None,
    element_type: ElementType | DTypeLike | None,
) -> tuple[NDArray, ElementType]:
    """Turn the input buffer into a flat array and resolve its element type."""
    if buffer is None:
        msg = "Input buffer is missing."
        raise ShapeError(msg)

    if isinstance(buffer, bytes | bytearray | memoryview):
        if element_type is None:
            raise UnsupportedTypeError(None)
        element_type = resolve_element_type(element_type, None)
        itemsize = element_type.dtype.itemsize
        if memoryview(buffer).nbytes % itemsize:
            msg = f"Byte buffer length is not a multiple of the {element_type.value} item size {itemsize}."
            raise ShapeError(msg)
        return np.frombuffer(buffer, dtype=element_type.dtype), element_type

    source = np.asarray(buffer).reshape(-1)
    resolved = resolve_element_type(element_type, source.dtype)
    if ElementType.from_dtype(source.dtype) is not resolved:
        raise UnsupportedTypeError(source.dtype)
    return source, resolved


def _as_output(out: NDArray | None, size: int, element_type: ElementType) -> NDArray:
    """Allocate the output buffer, or check the one supplied by the caller."""
    if out is None:
        return np.empty(size, dtype=element_type.dtype)
    if not isinstance(out, np.ndarray) or out.ndim != 1 or out.shape[0] != size:
        msg = f"Output buffer must be a flat array of {size} elements, got shape {np.shape(out)}."
        raise ShapeError(msg)
    if out.dtype != element_type.dtype:
        raise UnsupportedTypeError(out.dtype)
    if not out.flags.writeable:
        msg = "Output buffer is read-only."
        raise ShapeError(msg)
    return out
