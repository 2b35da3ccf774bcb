"""Common coil fixtures."""

import pytest

import numpy as np


@pytest.fixture
def period_grid():
    """Image coordinates uniformly covering one period of the harmonic window."""
    x = -2.0 + 0.5 * np.arange(8)
    y, x = np.meshgrid(x, x, indexing="ij")
    return np.stack((x, y), axis=-1)


@pytest.fixture
def source():
    """Location of a point-like object."""
    return np.asarray([0.3, -0.2])


@pytest.fixture
def kgrid():
    """Fourier domain coordinates."""
    k = np.linspace(-3.0, 3.0, 7)
    ky, kx = np.meshgrid(k, k, indexing="ij")
    return np.stack((kx, ky), axis=-1)
