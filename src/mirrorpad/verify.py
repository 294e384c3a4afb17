"""Verification utilities for checking mirrorpad results against JAX references."""

import jax.numpy as jnp
import numpy as np
from numpy.typing import ArrayLike

from mirrorpad.pad import mirror_pad
from mirrorpad.padding import PadMode, PadSpec


class VerificationError(AssertionError):
    """Raised when mirrorpad's result does not match JAX's dense reference.

    This indicates a bug in mirrorpad:
    for every pad spec that passes validation,
    the mirror tree must produce exactly what ``jax.numpy.pad`` produces.
    If you encounter this error,
    please report it together with the input shape, pad spec, and mode.
    """


def check_mirror_pad_correctness(
    x: ArrayLike,
    paddings: PadSpec | ArrayLike,
    mode: PadMode | str = "reflect",
) -> None:
    """Verify mirrorpad against ``jax.numpy.pad`` at a given input.

    Pads ``x`` with the mirror tree and with ``jnp.pad`` in the same mode,
    then checks that shapes and all values match.
    JAX computes in 32 bits unless x64 is enabled,
    so mirrorpad's result is cast to the reference dtype before comparing.
    Padding only copies values, so the cast affects both sides alike.

    Args:
        x: Input array.
        paddings: One ``(left, right)`` pair per dimension of ``x``.
        mode: ``"reflect"`` or ``"symmetric"``.

    Raises:
        VerificationError: If the two results disagree.
        InsufficientPaddingDataError: If the pad spec is invalid for ``x``;
            invalid specs are never compared.
    """
    x = np.asarray(x)
    mode = PadMode(mode)
    paddings = PadSpec.coerce(paddings)

    result = mirror_pad(x, paddings, mode)
    reference = jnp.pad(jnp.asarray(x), paddings.pairs, mode=mode.value)

    _check_equal(result, reference, mode)


def _check_equal(result: np.ndarray, reference: ArrayLike, mode: PadMode) -> None:
    """Compare mirrorpad's and JAX's results, raising VerificationError on mismatch."""
    reference_np = np.asarray(reference)

    if result.shape != reference_np.shape:
        raise VerificationError(
            f"mirrorpad's {mode.value} pad has shape {result.shape} "
            f"but JAX's reference has shape {reference_np.shape}. "
            "Please report this together with the input shape and pad spec."
        )

    try:
        np.testing.assert_array_equal(result.astype(reference_np.dtype), reference_np)
    except AssertionError:
        raise VerificationError(
            f"mirrorpad's {mode.value} pad does not match JAX's reference. "
            "Please report this together with the input shape and pad spec."
        ) from None
