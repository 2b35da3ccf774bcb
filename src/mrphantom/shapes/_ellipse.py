"""Closed-form ellipse evaluation in image and Fourier domain."""

__all__ = ["Ellipse", "phantom", "cnst_one"]

from typing import NamedTuple

import numpy as np
from numpy.typing import ArrayLike, NDArray

from scipy.special import j1


class Ellipse(NamedTuple):
    """
    Ellipse descriptor.

    Attributes
    ----------
    intensity : float
        Additive intensity.
    axes : tuple[float, float]
        Semi-axes ``(a, b)`` along ``(x, y)`` before rotation.
    center : tuple[float, float]
        Center ``(x0, y0)``.
    angle : float
        Counterclockwise rotation in radians.

    """

    intensity: float
    axes: tuple[float, float]
    center: tuple[float, float] = (0.0, 0.0)
    angle: float = 0.0


def phantom(
    ellipses: list[Ellipse] | tuple[Ellipse],
    coords: ArrayLike,
    kspace: bool = False,
) -> NDArray[complex]:
    """
    Evaluate a sum of ellipses at arbitrary locations.

    Image coordinates are assumed to lie in the ``[-1, 1]`` box. The Fourier
    domain representation is the transform with kernel
    ``exp(+2j * pi * k.x)``, computed analytically with Bessel functions.

    Parameters
    ----------
    ellipses : list[Ellipse] | tuple[Ellipse]
        Ellipse descriptors.
    coords : ArrayLike
        Locations of shape ``(..., 2)``, rightmost axis being ``(x, y)``
        (or ``(kx, ky)`` for ``kspace=True``).
    kspace : bool, optional
        Evaluate Fourier domain representation. The default is ``False``.

    Returns
    -------
    NDArray[complex]
        Phantom values of shape ``coords.shape[:-1]``.

    """
    coords = np.asarray(coords, dtype=np.float64)
    fun = _kellipse if kspace else _xellipse

    output = np.zeros(coords.shape[:-1], dtype=np.complex128)
    for el in ellipses:
        output += el.intensity * fun(el, coords)

    return output


def cnst_one(coords: ArrayLike) -> NDArray[complex]:
    """Constant unit object."""
    coords = np.asarray(coords)
    return np.ones(coords.shape[:-1], dtype=np.complex128)


# %% local subroutines
def _rotate(coords, angle):
    # apply R(angle)^T, i.e. move to the ellipse frame
    cos, sin = np.cos(angle), np.sin(angle)
    x, y = coords[..., 0], coords[..., 1]
    return cos * x + sin * y, -sin * x + cos * y


def _xellipse(el, coords):
    u, v = _rotate(coords - np.asarray(el.center), el.angle)
    radius = (u / el.axes[0]) ** 2 + (v / el.axes[1]) ** 2
    return (radius <= 1.0).astype(np.float64)


def _kellipse(el, coords):
    u, v = _rotate(coords, el.angle)
    rho = np.hypot(el.axes[0] * u, el.axes[1] * v)

    # jinc-like profile, pi at the origin
    nonzero = rho > 0
    rho = np.where(nonzero, rho, 1.0)
    amp = np.where(nonzero, j1(2 * np.pi * rho) / rho, np.pi)

    phase = 2 * np.pi * (coords @ np.asarray(el.center, dtype=np.float64))
    return el.axes[0] * el.axes[1] * amp * np.exp(1j * phase)
