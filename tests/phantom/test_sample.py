"""Sampling engine test."""

import dataclasses

import pytest

import numpy as np

from mrphantom import SamplingConfig, calc_sens, sample, sample_noncart
from mrphantom.coil import MAX_COILS
from mrphantom.shapes import DISC, RING, SHEPP_LOGAN, SHEPP_LOGAN_MOD, phantom


@pytest.mark.parametrize("ellipses", [SHEPP_LOGAN_MOD, SHEPP_LOGAN, DISC, RING])
def test_single_coil_image(ellipses, matrix_size, image_grid):
    """Single coil output is the direct evaluation of the object."""
    output = sample((1, matrix_size, matrix_size), ellipses)
    expected = phantom(ellipses, image_grid).astype(np.complex64)
    np.testing.assert_array_equal(output[0], expected)


@pytest.mark.parametrize("ellipses", [SHEPP_LOGAN_MOD, DISC, RING])
def test_single_coil_kspace(ellipses, matrix_size, kspace_grid):
    output = sample((1, matrix_size, matrix_size), ellipses, kspace=True)
    expected = phantom(ellipses, kspace_grid, kspace=True).astype(np.complex64)
    np.testing.assert_allclose(output[0], expected, rtol=1e-6, atol=1e-7)


def test_implicit_single_coil(matrix_size):
    """A 2D shape behaves as a single coil acquisition."""
    output = sample((matrix_size, matrix_size), DISC)
    assert output.shape == (matrix_size, matrix_size)
    np.testing.assert_array_equal(output, sample((1, matrix_size, matrix_size), DISC)[0])


def test_batch_axes_are_copies(matrix_size):
    output = sample((3, 2, matrix_size, matrix_size), RING, kspace=True)
    assert output.shape == (3, 2, matrix_size, matrix_size)
    np.testing.assert_array_equal(output[0], output[1])
    np.testing.assert_array_equal(output[0], output[2])


def test_multicoil_image_is_weighted(matrix_size):
    """Image domain channels are the object times the coil profiles."""
    shape = (4, matrix_size, matrix_size)
    output = sample(shape, SHEPP_LOGAN_MOD)
    expected = calc_sens(shape) * sample(shape[1:], SHEPP_LOGAN_MOD)
    np.testing.assert_allclose(output, expected, rtol=1e-5, atol=1e-6)


def test_multicoil_channels_differ(matrix_size):
    output = sample((2, matrix_size, matrix_size), DISC, kspace=True)
    assert not np.allclose(output[0], output[1])


@pytest.mark.parametrize("kspace", [False, True])
def test_deterministic(kspace, matrix_size):
    shape = (MAX_COILS, matrix_size, matrix_size)
    first = sample(shape, SHEPP_LOGAN_MOD, kspace)
    second = sample(shape, SHEPP_LOGAN_MOD, kspace)
    assert first.tobytes() == second.tobytes()


def test_noncart_deterministic(cartesian_traj):
    first = sample_noncart(cartesian_traj, RING, ncoils=3)
    second = sample_noncart(cartesian_traj, RING, ncoils=3)
    assert first.shape == (3, *cartesian_traj.shape[:-1])
    assert first.tobytes() == second.tobytes()


def test_config_is_frozen():
    config = SamplingConfig((1, 4, 4), np.ones)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.kspace = True


@pytest.mark.parametrize(
    "shape", [(MAX_COILS + 1, 8, 8), (1, 0, 8), (8,), (2, -1, 8, 8)]
)
def test_invalid_shape(shape):
    with pytest.raises(ValueError):
        sample(shape, DISC)


def test_noncart_invalid_trajectory():
    with pytest.raises(ValueError):
        sample_noncart(np.zeros((16, 2)), DISC)


def test_noncart_too_many_coils(cartesian_traj):
    with pytest.raises(ValueError):
        sample_noncart(cartesian_traj, DISC, ncoils=MAX_COILS + 1)
