"""Multi-class Poisson-disc distance matrix."""

__all__ = ["mc_poisson_rmatrix"]

import numpy as np
from numpy.typing import ArrayLike, NDArray


def mc_poisson_rmatrix(ndim: int, delta: ArrayLike) -> NDArray[float]:
    """
    Build inter-class minimum distance matrix from per-class spacing.

    Parameters
    ----------
    ndim : int
        Number of spatial dimensions.
    delta : ArrayLike
        Per-class minimum spacing of shape ``(nclasses,)``.

    Returns
    -------
    NDArray[float]
        Symmetric ``(nclasses, nclasses)`` matrix. Diagonal entries are
        ``delta``; entry ``(i, j)`` is the spacing of the union of all
        classes at least as sparse as the denser of ``i`` and ``j``,
        i.e., ``sum(delta[k] ** -ndim) ** (-1 / ndim)``.

    Notes
    -----
    Follows the construction of [1]_, with density scaling as
    ``delta ** -ndim``.

    References
    ----------
    .. [1] Wei, L. Y. "Multi-class blue noise sampling."
           ACM TOG 29.4 (2010): 1-8.

    """
    if ndim < 1:
        raise ValueError(f"ndim must be positive, got {ndim}")
    delta = np.atleast_1d(np.asarray(delta, dtype=np.float64))
    if delta.ndim != 1 or np.any(delta <= 0):
        raise ValueError("delta must be a vector of positive spacings")

    rmin = np.minimum.outer(delta, delta)
    union = delta[None, None, :] >= rmin[..., None]
    density = (union * delta**-ndim).sum(axis=-1)

    rmatrix = density ** (-1.0 / ndim)
    np.fill_diagonal(rmatrix, delta)

    return rmatrix
