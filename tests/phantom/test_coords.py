"""Coordinate mapping and fill primitive test."""

import pytest

import numpy as np

from mrphantom._utils import image_coords, kspace_coords, traj_coords, zsample


def _open_grid(shape):
    return np.ix_(*[np.arange(n) for n in shape])


def test_image_coords():
    """Image coordinates span [-1, 1) with the origin at n // 2."""
    shape = (1, 16, 8)
    coords = image_coords(_open_grid(shape), shape)
    assert coords.shape == (1, 16, 8, 2)

    np.testing.assert_allclose(coords[0, 8, 4], [0.0, 0.0])
    np.testing.assert_allclose(coords[0, 0, 0], [-1.0, -1.0])
    np.testing.assert_allclose(coords[0, -1, -1], [1 - 2 / 8, 1 - 2 / 16])


@pytest.mark.parametrize("n", [16, 64])
def test_kspace_coords(n):
    """K-space sample spacing does not depend on matrix size."""
    shape = (n, n)
    coords = kspace_coords(_open_grid(shape), shape)
    np.testing.assert_allclose(np.diff(coords[0, :, 0]), 0.5)
    np.testing.assert_allclose(np.diff(coords[:, 0, 1]), 0.5)
    np.testing.assert_allclose(coords[n // 2, n // 2], [0.0, 0.0])


def test_coords_ignore_coil_axis():
    """Coordinates only depend on the two rightmost axes."""
    shape = (3, 4, 8, 8)
    coords = image_coords(_open_grid(shape), shape)
    assert coords.shape == (1, 1, 8, 8, 2)


def test_traj_coords():
    """Trajectory coordinates are halved in-plane components."""
    traj = np.asarray([[1.0, -2.0, 0.0], [0.5, 4.0, 0.0]])
    np.testing.assert_allclose(traj_coords(traj), [[0.5, -1.0], [0.25, 2.0]])


def test_traj_coords_ignores_kz():
    traj = np.asarray([[1.0, -2.0, 0.0], [0.5, 4.0, 3.0]])
    with pytest.warns(UserWarning):
        coords = traj_coords(traj)
    np.testing.assert_allclose(coords, [[0.5, -1.0], [0.25, 2.0]])


@pytest.mark.parametrize("ncomponents", [2, 4])
def test_traj_coords_invalid(ncomponents):
    with pytest.raises(ValueError):
        traj_coords(np.zeros((10, ncomponents)))


def test_zsample_visits_every_position():
    """Kernel sees the multi-index of each position."""
    shape = (2, 3, 4)

    def kernel(pos):
        return 100 * pos[0] + 10 * pos[1] + pos[2]

    output = zsample(shape, kernel, dtype=np.int64)
    index = np.indices(shape)
    np.testing.assert_array_equal(output, 100 * index[0] + 10 * index[1] + index[2])


def test_zsample_broadcasts():
    """Kernel result is broadcast over axes it does not depend on."""
    output = zsample((3, 4, 5), lambda pos: pos[-1])
    assert output.shape == (3, 4, 5)
    assert output.dtype == np.complex64
    np.testing.assert_array_equal(output[2, 1], np.arange(5))
