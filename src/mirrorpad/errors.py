"""Exceptions raised by the mirror padding engine.

Every failure of a pad call surfaces as one of these,
and no partial output is ever returned alongside an error.
"""


class MirrorPadError(Exception):
    """Base class for all errors raised by mirrorpad."""


class ShapeError(MirrorPadError, ValueError):
    """Raised when shapes, pad specs, or buffers do not fit together.

    Covers a pad spec whose rank differs from the input rank,
    negative or non-integer pad amounts,
    and input buffers whose element count disagrees with the declared shape.
    """


class InsufficientPaddingDataError(MirrorPadError, ValueError):
    """Raised when a dimension has too few elements to mirror from.

    Reflect padding needs ``pad + 1`` elements along a dimension
    (the border element is never repeated),
    symmetric padding needs ``pad`` elements.

    Attributes:
        dimension: Index of the offending dimension.
        required: Number of source elements the pad amount needs.
        available: Number of elements the dimension actually has.
        side: ``"left"`` or ``"right"``.
    """

    def __init__(self, dimension: int, required: int, available: int, side: str):
        self.dimension = dimension
        self.required = required
        self.available = available
        self.side = side
        msg = (
            f"Not enough values for mirror pad in dimension {dimension} ({side}): "
            f"required {required}, available {available}."
        )
        super().__init__(msg)


class UnsupportedTypeError(MirrorPadError, TypeError):
    """Raised when the element type of a buffer cannot be padded.

    Attributes:
        dtype: The rejected dtype (or type tag) as given by the caller.
    """

    def __init__(self, dtype: object):
        self.dtype = dtype
        msg = f"Unsupported element type for mirror pad: {dtype!r}."
        super().__init__(msg)


class InternalConsistencyError(MirrorPadError, RuntimeError):
    """Raised when the mirror tree disagrees with the shapes it was built for.

    This indicates a bug in mirrorpad, not a caller error:
    validation should have rejected anything that could trigger it.
    If you encounter this error,
    please report it together with the input shape, pad spec, and mode.
    """
