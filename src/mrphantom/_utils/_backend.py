"""Backend utilities."""

__all__ = ["with_numpy", "to_device"]

import warnings

from numpy.typing import NDArray

from mrinufft._array_compat import with_numpy


def to_device(input: NDArray, device: int | None = None) -> NDArray:
    """
    Move array to computational device.

    Parameters
    ----------
    input : NDArray
        Input array.
    device : int | None, optional
        SigPy device id (``-1`` for CPU, ``>= 0`` for the corresponding GPU).
        The default is ``None`` (leave array where it is).

    Returns
    -------
    NDArray
        Array on the requested device.

    """
    if device is None:
        return input

    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        from sigpy.backend import to_device as _to_device

    return _to_device(input, device)
