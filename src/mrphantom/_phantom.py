"""Phantom presets."""

__all__ = [
    "calc_phantom",
    "calc_phantom_noncart",
    "calc_sens",
    "calc_circ",
    "calc_ring",
]

from numpy.typing import ArrayLike, NDArray

from ._sample import SamplingConfig, cartesian, sample, sample_noncart, _check_shape
from ._utils import to_device, with_numpy
from .shapes import SHEPP_LOGAN_MOD, DISC, RING, cnst_one


def calc_phantom(
    shape: list[int] | tuple[int],
    kspace: bool = False,
    device: int | None = None,
) -> NDArray[complex]:
    """
    Modified Shepp-Logan phantom on a Cartesian grid.

    Parameters
    ----------
    shape : list[int] | tuple[int]
        Output shape ``(..., ncoils, ny, nx)`` or ``(ny, nx)``.
        If ``ncoils > 1``, each channel is weighted by the
        corresponding simulated coil sensitivity.
    kspace : bool, optional
        Return k-space instead of image. The default is ``False``.
    device : int | None, optional
        Output device (``-1`` for CPU). The default is ``None`` (CPU).

    Returns
    -------
    NDArray[complex]
        Phantom of shape ``shape``.

    Example
    -------
    >>> import mrphantom
    >>> img = mrphantom.calc_phantom((8, 128, 128))
    >>> ksp = mrphantom.calc_phantom((8, 128, 128), kspace=True)

    """
    return to_device(sample(shape, SHEPP_LOGAN_MOD, kspace), device)


@with_numpy
def calc_phantom_noncart(
    coords: ArrayLike,
    shape: list[int] | tuple[int] | None = None,
) -> ArrayLike:
    """
    Modified Shepp-Logan k-space along a Non-Cartesian trajectory.

    Parameters
    ----------
    coords : ArrayLike
        Fourier domain trajectory of shape ``(..., 3)``, with rightmost
        axis being ``(kx, ky, kz)``. Units are such that ``kx = ky = 1``
        corresponds to half a cycle across the field of view.
        The ``kz`` component is ignored.
    shape : list[int] | tuple[int] | None, optional
        Output shape ``(ncoils, *coords.shape[:-1])``. The default
        is ``None`` (single coil).

    Returns
    -------
    ArrayLike
        K-space samples of shape ``(ncoils, *coords.shape[:-1])``,
        on the same backend / device as ``coords``.

    """
    if shape is None:
        ncoils = 1
    else:
        shape = tuple(shape)
        if shape[1:] != tuple(coords.shape[:-1]):
            raise ValueError(
                f"output shape must be (ncoils, {', '.join(map(str, coords.shape[:-1]))}),"
                f" got {shape}"
            )
        ncoils = shape[0]

    return sample_noncart(coords, SHEPP_LOGAN_MOD, ncoils)


def calc_sens(
    shape: list[int] | tuple[int],
    device: int | None = None,
) -> NDArray[complex]:
    """
    Simulated receive array sensitivity maps.

    Parameters
    ----------
    shape : list[int] | tuple[int]
        Output shape ``(..., ncoils, ny, nx)``.
    device : int | None, optional
        Output device (``-1`` for CPU). The default is ``None`` (CPU).

    Returns
    -------
    NDArray[complex]
        Coil sensitivities of shape ``shape``.

    """
    shape = _check_shape(shape)
    config = SamplingConfig(shape, cnst_one, kspace=False, sens=True)
    return to_device(cartesian(config), device)


def calc_circ(
    shape: list[int] | tuple[int],
    kspace: bool = False,
    device: int | None = None,
) -> NDArray[complex]:
    """
    Disc phantom on a Cartesian grid.

    See :func:`calc_phantom` for the description of the arguments.

    """
    return to_device(sample(shape, DISC, kspace), device)


def calc_ring(
    shape: list[int] | tuple[int],
    kspace: bool = False,
    device: int | None = None,
) -> NDArray[complex]:
    """
    Concentric rings phantom on a Cartesian grid.

    See :func:`calc_phantom` for the description of the arguments.

    """
    return to_device(sample(shape, RING, kspace), device)
