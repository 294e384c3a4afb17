"""mirrorpad - N-dimensional reflect and symmetric padding via a mirror tree.

Each dimension of the input is extended by mirroring its own elements
across the border, either without repeating the border element ("reflect")
or repeating it ("symmetric").
The padded array is described by a rank-deep index tree
and flattened in row-major order, for any rank.
"""

from mirrorpad.context import MirrorPadContext
from mirrorpad.dtypes import ElementType
from mirrorpad.errors import (
    InsufficientPaddingDataError,
    InternalConsistencyError,
    MirrorPadError,
    ShapeError,
    UnsupportedTypeError,
)
from mirrorpad.op import MirrorPadOp
from mirrorpad.pad import mirror_pad, pad_buffer
from mirrorpad.padding import PadMode, PadSpec, padded_shape
from mirrorpad.verify import VerificationError, check_mirror_pad_correctness

__all__ = [
    "ElementType",
    "InsufficientPaddingDataError",
    "InternalConsistencyError",
    "MirrorPadContext",
    "MirrorPadError",
    "MirrorPadOp",
    "PadMode",
    "PadSpec",
    "ShapeError",
    "UnsupportedTypeError",
    "VerificationError",
    "check_mirror_pad_correctness",
    "mirror_pad",
    "pad_buffer",
    "padded_shape",
]
