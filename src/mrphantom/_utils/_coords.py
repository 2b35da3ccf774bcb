"""Sampling position to normalized coordinate mapping."""

__all__ = ["image_coords", "kspace_coords", "traj_coords"]

import warnings

import numpy as np
from numpy.typing import NDArray

from ..coil._coeff import COIL_PERIOD


def image_coords(
    pos: list[NDArray[int]] | tuple[NDArray[int]],
    shape: list[int] | tuple[int],
) -> NDArray[float]:
    """
    Image domain coordinates of Cartesian grid positions.

    Parameters
    ----------
    pos : list[NDArray[int]] | tuple[NDArray[int]]
        Open multi-index grid (one broadcastable index array per axis),
        as produced by ``numpy.ix_``.
    shape : list[int] | tuple[int]
        Grid shape ``(..., ny, nx)``.

    Returns
    -------
    NDArray[float]
        Coordinates ``(2 * pos - n) / n`` of shape ``(..., ny, nx, 2)``,
        with rightmost axis being ``(x, y)``.

    """
    nx, ny = shape[-1], shape[-2]
    return _stack(
        (2.0 * pos[-1] - nx) / nx,
        (2.0 * pos[-2] - ny) / ny,
    )


def kspace_coords(
    pos: list[NDArray[int]] | tuple[NDArray[int]],
    shape: list[int] | tuple[int],
) -> NDArray[float]:
    """
    Fourier domain coordinates of Cartesian grid positions.

    Unlike :func:`image_coords`, k-space positions are not rescaled with
    the matrix size: the centered offset is divided by the support of
    the coil model.

    Parameters
    ----------
    pos : list[NDArray[int]] | tuple[NDArray[int]]
        Open multi-index grid (one broadcastable index array per axis).
    shape : list[int] | tuple[int]
        Grid shape ``(..., ny, nx)``.

    Returns
    -------
    NDArray[float]
        Coordinates ``(2 * pos - n) / 4`` of shape ``(..., ny, nx, 2)``.

    """
    nx, ny = shape[-1], shape[-2]
    return _stack(
        (2.0 * pos[-1] - nx) / COIL_PERIOD,
        (2.0 * pos[-2] - ny) / COIL_PERIOD,
    )


def traj_coords(coords: NDArray[float]) -> NDArray[float]:
    """
    Fourier domain coordinates of a Non-Cartesian trajectory.

    Parameters
    ----------
    coords : NDArray[float]
        Trajectory of shape ``(..., 3)``, rightmost axis being ``(kx, ky, kz)``.

    Returns
    -------
    NDArray[float]
        Coordinates of shape ``(..., 2)``, i.e., ``(kx, ky) / 2``.

    Notes
    -----
    Only in-plane components are used. A nonzero ``kz`` is ignored
    with a warning.

    """
    if coords.shape[-1] != 3:
        raise ValueError(
            f"trajectory must be shaped (..., 3), got {tuple(coords.shape)}"
        )
    if np.any(coords[..., 2] != 0):
        warnings.warn(
            "Non-Cartesian sampling is 2D only: kz trajectory component is ignored",
            UserWarning,
        )
    return np.asarray(coords[..., :2], dtype=np.float64) / 2.0


# %% local subroutines
def _stack(x, y):
    x, y = np.broadcast_arrays(x, y)
    return np.stack((x, y), axis=-1)
