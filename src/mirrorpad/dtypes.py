"""Element types the mirror pad engine can copy."""

from __future__ import annotations

import enum

import numpy as np
from numpy.typing import DTypeLike

from mirrorpad.errors import UnsupportedTypeError


class ElementType(enum.Enum):
    """Type tag of the scalars held in an input buffer.

    Each member's value is the name of the matching numpy dtype.
    """

    FLOAT32 = "float32"
    FLOAT64 = "float64"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    BOOL = "bool"

    @property
    def dtype(self) -> np.dtype:
        """The numpy dtype for this element type."""
        return np.dtype(self.value)

    @classmethod
    def from_dtype(cls, dtype: DTypeLike) -> ElementType:
        """Look up the element type of a numpy dtype.

        Raises:
            UnsupportedTypeError: If ``dtype`` has no matching element type.
        """
        try:
            name = np.dtype(dtype).name
        except TypeError:
            raise UnsupportedTypeError(dtype) from None
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedTypeError(dtype) from None


def resolve_element_type(
    element_type: ElementType | DTypeLike | None, fallback: DTypeLike
) -> ElementType:
    """Turn a type tag, a dtype, or ``None`` into an ElementType.

    ``None`` means the element type is taken from ``fallback``,
    usually the dtype of the input buffer.
    """
    if isinstance(element_type, ElementType):
        return element_type
    if element_type is None:
        return ElementType.from_dtype(fallback)
    return ElementType.from_dtype(element_type)
