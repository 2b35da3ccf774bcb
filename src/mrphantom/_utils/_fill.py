"""Dense array fill primitive."""

__all__ = ["zsample"]

from collections.abc import Callable

import numpy as np
from numpy.typing import NDArray


def zsample(
    shape: list[int] | tuple[int],
    kernel: Callable[[tuple[NDArray[int]]], NDArray[complex]],
    dtype: np.dtype = np.complex64,
) -> NDArray[complex]:
    """
    Fill a dense array by evaluating a kernel at every position.

    Parameters
    ----------
    shape : list[int] | tuple[int]
        Output array shape.
    kernel : Callable[[tuple[NDArray[int]]], NDArray[complex]]
        Position-wise kernel. Called once with the open multi-index grid
        of ``shape`` (one index array per axis, shaped to broadcast
        against each other); must return values broadcastable to ``shape``.
    dtype : np.dtype, optional
        Output data type. The default is ``np.complex64``.

    Returns
    -------
    NDArray[complex]
        Freshly allocated array of shape ``shape``.

    """
    shape = tuple(shape)
    pos = np.ix_(*[np.arange(n) for n in shape])
    value = kernel(pos)

    output = np.empty(shape, dtype=dtype)
    output[...] = value
    return output
