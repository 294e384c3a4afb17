"""Operator-style wrapper for hosts with a prepare/eval life cycle."""

from __future__ import annotations

from collections.abc import Sequence

from numpy.typing import ArrayLike, DTypeLike, NDArray

from mirrorpad._tree import check_shape
from mirrorpad.context import MirrorPadContext
from mirrorpad.dtypes import ElementType
from mirrorpad.errors import ShapeError
from mirrorpad.padding import PadMode, PadSpec, padded_shape
from mirrorpad.pad import pad_buffer


class MirrorPadOp:
    """A mirror pad operator bound to one mode and one input shape.

    The host calls `prepare` once the input shape is known
    and `eval` for every invocation.
    When the pad spec is given to `prepare` it is *constant*
    and the output shape is known ahead of time.
    Otherwise the op is *dynamic*: each `eval` receives its own pad spec
    and the host can only size the output after that.

    Example:
        >>> op = MirrorPadOp("symmetric")
        >>> op.prepare((2, 3), [(0, 0), (1, 1)])
        (2, 5)
        >>> op.eval(np.arange(6, dtype=np.int32)).tolist()
        [0, 0, 1, 2, 2, 3, 3, 4, 5, 5]

    Attributes:
        mode: Pad mode, fixed for the lifetime of the op.
    """

    def __init__(self, mode: PadMode | str = PadMode.REFLECT) -> None:
        self.mode = PadMode(mode)
        self._context = MirrorPadContext()
        self._input_shape: tuple[int, ...] | None = None
        self._paddings: PadSpec | None = None

    @property
    def is_dynamic(self) -> bool:
        """Whether the pad spec is only known per invocation."""
        return self._paddings is None

    @property
    def input_shape(self) -> tuple[int, ...] | None:
        """Input shape given to `prepare`, or ``None`` before that."""
        return self._input_shape

    def prepare(
        self,
        input_shape: Sequence[int],
        paddings: PadSpec | ArrayLike | None = None,
    ) -> tuple[int, ...] | None:
        """Size the tree storage for ``input_shape`` and fix the pad spec if known.

        Returns:
            The output shape for a constant pad spec,
            or ``None`` when the output is dynamic.

        Raises:
            ShapeError: If a constant pad spec does not fit ``input_shape``.
        """
        input_shape = check_shape(input_shape)
        if paddings is None:
            spec, output_shape = None, None
        else:
            spec = PadSpec.coerce(paddings)
            output_shape = padded_shape(input_shape, spec)
        self._context.prepare(input_shape)
        self._input_shape = input_shape
        self._paddings = spec
        return output_shape

    def output_shape(self, paddings: PadSpec | ArrayLike | None = None) -> tuple[int, ...]:
        """Output shape for ``paddings``, or for the constant pad spec."""
        return padded_shape(self._require_shape(), self._resolve_paddings(paddings))

    def eval(
        self,
        buffer: ArrayLike | bytes | bytearray | memoryview | None,
        paddings: PadSpec | ArrayLike | None = None,
        *,
        element_type: ElementType | DTypeLike | None = None,
        out: NDArray | None = None,
    ) -> NDArray:
        """Pad ``buffer`` (flat, row-major, of the prepared shape).

        Args:
            buffer: Flat input data.
            paddings: Pad spec for this invocation.
                Required for dynamic ops;
                for constant ops it must match the prepared spec if given.
            element_type: Type tag of ``buffer``; see `mirrorpad.pad_buffer`.
            out: Optional flat output buffer allocated by the host.

        Returns:
            The flat padded output.

        Raises:
            RuntimeError: If `prepare` was not called.
        """
        shape = self._require_shape()
        return pad_buffer(
            buffer,
            shape,
            self._resolve_paddings(paddings),
            self.mode,
            element_type,
            out=out,
            context=self._context,
        )

    def _require_shape(self) -> tuple[int, ...]:
        if self._input_shape is None:
            msg = "MirrorPadOp.prepare must be called before it can be evaluated."
            raise RuntimeError(msg)
        return self._input_shape

    def _resolve_paddings(self, paddings: PadSpec | ArrayLike | None) -> PadSpec:
        if paddings is None:
            if self._paddings is None:
                msg = "Dynamic MirrorPadOp needs a pad spec for every invocation."
                raise ShapeError(msg)
            return self._paddings
        paddings = PadSpec.coerce(paddings)
        if self._paddings is not None and paddings != self._paddings:
            msg = f"Pad spec {paddings.pairs} differs from the constant pad spec {self._paddings.pairs}."
            raise ShapeError(msg)
        return paddings
