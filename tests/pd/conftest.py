"""Common Poisson-disc fixtures."""

import pytest

import numpy as np


@pytest.fixture
def pairwise():
    """Pairwise distance matrix, with infinite diagonal."""

    def _pairwise(points):
        diff = points[:, None, :] - points[None, :, :]
        dist = (diff**2).sum(axis=-1) ** 0.5
        np.fill_diagonal(dist, np.inf)
        return dist

    return _pairwise


@pytest.fixture
def vardens_scale():
    """Local spacing scale of variable density sampling."""

    def _vardens_scale(points, vardens):
        return 1.0 + vardens * ((points - 0.5) ** 2).sum(axis=-1)

    return _vardens_scale


@pytest.fixture
def delta():
    return 0.05


@pytest.fixture
def class_delta():
    return np.asarray([0.09, 0.06])
