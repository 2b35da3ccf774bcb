"""Common phantom fixtures."""

import pytest

import numpy as np


def _grid_coords(n, scale):
    axis = (2.0 * np.arange(n) - n) / scale
    y, x = np.meshgrid(axis, axis, indexing="ij")
    return np.stack((x, y), axis=-1)


@pytest.fixture
def grid_coords():
    """Centered ``(n, n, 2)`` coordinates ``(2 * p - n) / scale``."""
    return _grid_coords


@pytest.fixture
def matrix_size():
    return 32


@pytest.fixture
def image_grid(matrix_size):
    """Image domain coordinates of a square matrix."""
    return _grid_coords(matrix_size, matrix_size)


@pytest.fixture
def kspace_grid(matrix_size):
    """Fourier domain coordinates of a square matrix."""
    return _grid_coords(matrix_size, 4.0)


@pytest.fixture
def cartesian_traj(kspace_grid):
    """Non-Cartesian trajectory matching the Cartesian k-space grid."""
    traj = np.zeros((*kspace_grid.shape[:-1], 3), dtype=np.float32)
    traj[..., :2] = 2.0 * kspace_grid
    return traj
