"""Cartesian and Non-Cartesian sampling engine."""

__all__ = ["SamplingConfig", "sample", "sample_noncart"]

from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

import numpy as np
from numpy.typing import NDArray

from ._utils import image_coords, kspace_coords, traj_coords, zsample
from .coil import MAX_COILS, select_encoder
from .shapes import Ellipse, phantom


@dataclass(frozen=True)
class SamplingConfig:
    """
    Per-call sampling settings.

    Attributes
    ----------
    shape : tuple[int]
        Output shape ``(..., ncoils, ny, nx)`` (Cartesian)
        or ``(ncoils, ...)`` (Non-Cartesian).
    fun : Callable[[NDArray[float]], NDArray[complex]]
        Object evaluator, mapping ``(..., 2)`` coordinates to values.
    kspace : bool
        Output is in Fourier domain.
    sens : bool
        Simulate receive array sensitivities.

    """

    shape: tuple[int, ...]
    fun: Callable[[NDArray[float]], NDArray[complex]]
    kspace: bool = False
    sens: bool = False

    @property
    def encoder(self) -> Callable:
        """Coil encoding strategy."""
        return select_encoder(self.sens, self.kspace)


def sample(
    shape: list[int] | tuple[int],
    ellipses: list[Ellipse] | tuple[Ellipse],
    kspace: bool = False,
) -> NDArray[complex]:
    """
    Sample an ellipse phantom on a Cartesian grid.

    Parameters
    ----------
    shape : list[int] | tuple[int]
        Output shape ``(..., ncoils, ny, nx)`` or ``(ny, nx)`` (single coil).
        Leading axes hold copies of the same 2D data. If ``ncoils > 1``,
        receive array sensitivities are simulated.
    ellipses : list[Ellipse] | tuple[Ellipse]
        Phantom descriptor.
    kspace : bool, optional
        Sample in Fourier domain. The default is ``False``.

    Returns
    -------
    NDArray[complex]
        Sampled data of shape ``shape``.

    """
    shape = _check_shape(shape)
    config = SamplingConfig(
        shape,
        partial(phantom, tuple(ellipses), kspace=kspace),
        kspace,
        _get_ncoils(shape) > 1,
    )
    return cartesian(config)


def sample_noncart(
    coords: NDArray[float],
    ellipses: list[Ellipse] | tuple[Ellipse],
    ncoils: int = 1,
) -> NDArray[complex]:
    """
    Sample an ellipse phantom spectrum along a Non-Cartesian trajectory.

    Parameters
    ----------
    coords : NDArray[float]
        Fourier domain trajectory of shape ``(..., 3)``.
        Only ``(kx, ky)`` components are used.
    ellipses : list[Ellipse] | tuple[Ellipse]
        Phantom descriptor.
    ncoils : int, optional
        Number of receive channels. The default is ``1``.

    Returns
    -------
    NDArray[complex]
        Sampled k-space of shape ``(ncoils, *coords.shape[:-1])``.

    """
    coords = np.asarray(coords)
    if coords.ndim < 2 or coords.shape[-1] != 3:
        raise ValueError(
            f"trajectory must be shaped (..., 3), got {tuple(coords.shape)}"
        )
    shape = _check_shape((ncoils, *coords.shape[:-1]), coil_axis=0)
    config = SamplingConfig(
        shape,
        partial(phantom, tuple(ellipses), kspace=True),
        True,
        ncoils > 1,
    )
    return noncartesian(config, traj_coords(coords))


def cartesian(config: SamplingConfig) -> NDArray[complex]:
    """Fill ``config.shape`` with Cartesian samples."""
    mapper = kspace_coords if config.kspace else image_coords
    encoder = config.encoder

    def kernel(pos):
        coil = pos[-3] if len(pos) > 2 else 0
        return encoder(coil, mapper(pos, config.shape), config.fun)

    return zsample(config.shape, kernel)


def noncartesian(config: SamplingConfig, coords: NDArray[float]) -> NDArray[complex]:
    """Fill ``config.shape`` with samples along ``(..., 2)`` trajectory ``coords``."""
    encoder = config.encoder

    def kernel(pos):
        return encoder(pos[0], coords[pos[1:]], config.fun)

    return zsample(config.shape, kernel)


# %% local subroutines
def _get_ncoils(shape, coil_axis=-3):
    if -len(shape) <= coil_axis < len(shape):
        return shape[coil_axis]
    return 1


def _check_shape(shape, coil_axis=-3):
    shape = tuple(int(n) for n in shape)
    if len(shape) < 2:
        raise ValueError(f"shape must have at least 2 axes, got {shape}")
    if any(n < 1 for n in shape):
        raise ValueError(f"shape must be strictly positive, got {shape}")

    ncoils = _get_ncoils(shape, coil_axis)
    if ncoils > MAX_COILS:
        raise ValueError(
            f"at most {MAX_COILS} coils can be simulated, requested {ncoils}"
        )
    return shape
