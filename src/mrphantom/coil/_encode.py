"""Coil sensitivity encoding strategies."""

__all__ = ["nosens", "xsens", "ksens", "sensitivity", "select_encoder"]

from collections.abc import Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ._coeff import MAX_COILS, COIL_COEFF, COIL_PERIOD, coil_coefficients

Evaluator = Callable[[NDArray[float]], NDArray[complex]]


def nosens(
    coil: ArrayLike, coords: NDArray[float], fun: Evaluator
) -> NDArray[complex]:
    """
    Single channel encoding: evaluate the object as is.

    Parameters
    ----------
    coil : ArrayLike
        Coil index (unused).
    coords : NDArray[float]
        Coordinates of shape ``(..., 2)``.
    fun : Evaluator
        Object evaluator mapping ``(..., 2)`` coordinates to ``(...)`` values.

    Returns
    -------
    NDArray[complex]
        Object values of shape ``coords.shape[:-1]``.

    """
    return fun(coords)


def xsens(
    coil: ArrayLike, coords: NDArray[float], fun: Evaluator
) -> NDArray[complex]:
    """
    Image domain coil encoding.

    Multiply the object by the coil sensitivity, represented as a
    truncated 2D Fourier series evaluated at ``coords``.

    Parameters
    ----------
    coil : ArrayLike
        Coil index, broadcastable against ``coords.shape[:-1]``.
    coords : NDArray[float]
        Image domain coordinates of shape ``(..., 2)``.
    fun : Evaluator
        Image domain object evaluator.

    Returns
    -------
    NDArray[complex]
        Coil-weighted object values.

    """
    return sensitivity(coil, coords) * fun(coords)


def ksens(
    coil: ArrayLike, coords: NDArray[float], fun: Evaluator
) -> NDArray[complex]:
    """
    Fourier domain coil encoding.

    Multiplication by each sensitivity harmonic in image domain is a shift
    in k-space, hence the encoded k-space is the sum of the analytic object
    spectrum evaluated at shifted locations, weighted by the coil
    coefficients. See [1]_.

    Parameters
    ----------
    coil : ArrayLike
        Coil index, broadcastable against ``coords.shape[:-1]``.
    coords : NDArray[float]
        Fourier domain coordinates of shape ``(..., 2)``.
    fun : Evaluator
        Fourier domain object evaluator.

    Returns
    -------
    NDArray[complex]
        Coil-weighted k-space values.

    References
    ----------
    .. [1] Guerquin-Kern, M., Lejeune, L., Pruessmann, K. P., & Unser, M.
           "Realistic analytical phantoms for parallel magnetic resonance
           imaging." IEEE TMI 31.3 (2012): 626-636.

    """
    coil = _check_coil(coil)
    coeff = coil_coefficients()

    output = 0.0
    for i, j, shift in _harmonics():
        output = output + coeff[coil, i, j] * fun(coords + shift)

    return output


def sensitivity(coil: ArrayLike, coords: NDArray[float]) -> NDArray[complex]:
    """
    Evaluate coil sensitivity at image domain coordinates.

    Parameters
    ----------
    coil : ArrayLike
        Coil index, broadcastable against ``coords.shape[:-1]``.
    coords : NDArray[float]
        Image domain coordinates of shape ``(..., 2)``.

    Returns
    -------
    NDArray[complex]
        Sensitivity of shape ``broadcast(coil.shape, coords.shape[:-1])``.

    """
    coil = _check_coil(coil)
    coeff = coil_coefficients()

    output = 0.0
    for i, j, shift in _harmonics():
        phase = 2 * np.pi * (coords @ shift)
        output = output + coeff[coil, i, j] * np.exp(1j * phase)

    return output


def select_encoder(sens: bool, kspace: bool) -> Callable:
    """
    Select the coil encoding strategy.

    Parameters
    ----------
    sens : bool
        Simulate multiple channels.
    kspace : bool
        Output is in Fourier domain.

    Returns
    -------
    Callable
        One of :func:`nosens`, :func:`xsens` or :func:`ksens`.

    """
    if not sens:
        return nosens
    if kspace:
        return ksens
    return xsens


# %% local subroutines
def _check_coil(coil):
    coil = np.asarray(coil, dtype=int)
    invalid = coil[(coil < 0) | (coil >= MAX_COILS)]
    if invalid.size:
        raise ValueError(
            f"coil index must be between 0 and {MAX_COILS - 1}, got {invalid.flat[0]}"
        )
    return coil


def _harmonics():
    sh = (COIL_COEFF - 1) // 2
    for i in range(COIL_COEFF):
        for j in range(COIL_COEFF):
            yield i, j, np.asarray([i - sh, j - sh], dtype=np.float64) / COIL_PERIOD
