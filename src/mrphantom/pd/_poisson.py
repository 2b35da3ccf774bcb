"""Variable density Poisson-disc sampling."""

__all__ = ["poissondisc", "poissondisc_mc"]

import numpy as np
import numba as nb

from numpy.typing import ArrayLike, NDArray


def poissondisc(
    ndim: int,
    npoints: int,
    niter: int,
    vardens: float,
    delta: float,
    seed: int = 0,
) -> NDArray[float]:
    """
    Generate a variable density Poisson-disc point set.

    Parameters
    ----------
    ndim : int
        Number of spatial dimensions.
    npoints : int
        Maximum number of points.
    niter : int
        Number of candidates tried around each active point
        before it is retired.
    vardens : float
        Density variation. Local spacing is
        ``delta * (1 + vardens * |p - 0.5| ** 2)``.
    delta : float
        Minimum spacing at the center of the domain.
    seed : int, optional
        Random generator seed. The default is ``0``.

    Returns
    -------
    NDArray[float]
        Points in ``[0, 1) ** ndim`` of shape ``(n, ndim)``, ``n <= npoints``.
        Generation stops early when the domain is saturated.

    """
    points, _ = poissondisc_mc(ndim, 1, npoints, niter, vardens, [[delta]], seed)
    return points


def poissondisc_mc(
    ndim: int,
    nclasses: int,
    npoints: int,
    niter: int,
    vardens: float,
    delta: ArrayLike,
    seed: int = 0,
) -> tuple[NDArray[float], NDArray[int]]:
    """
    Generate a multi-class variable density Poisson-disc point set.

    Parameters
    ----------
    ndim : int
        Number of spatial dimensions.
    nclasses : int
        Number of point classes.
    npoints : int
        Maximum number of points (all classes).
    niter : int
        Number of candidates tried around each active point
        before it is retired.
    vardens : float
        Density variation. Local spacing scale is
        ``1 + vardens * |p - 0.5| ** 2``.
    delta : ArrayLike
        Symmetric ``(nclasses, nclasses)`` class-pair minimum spacing,
        e.g., as built by :func:`mc_poisson_rmatrix`.
    seed : int, optional
        Random generator seed. The default is ``0``.

    Returns
    -------
    points : NDArray[float]
        Points in ``[0, 1) ** ndim`` of shape ``(n, ndim)``.
    kind : NDArray[int]
        Class label of each point, of shape ``(n,)``.

    Notes
    -----
    Candidates are drawn as in [1]_; the class of each candidate is drawn
    with probability proportional to the target class density
    ``delta[t, t] ** -ndim``. Any two points ``p`` and ``q`` satisfy
    ``|p - q| >= delta[kind_p, kind_q] * max(scale(p), scale(q))``.

    References
    ----------
    .. [1] Bridson, R. "Fast Poisson disk sampling in arbitrary dimensions."
           SIGGRAPH sketches 10.1 (2007): 1.

    """
    if ndim < 1:
        raise ValueError(f"ndim must be positive, got {ndim}")
    if npoints < 1 or niter < 1:
        raise ValueError(
            f"npoints and niter must be positive, got {npoints} and {niter}"
        )
    delta = np.asarray(delta, dtype=np.float64)
    if delta.shape != (nclasses, nclasses):
        raise ValueError(
            f"delta must be shaped ({nclasses}, {nclasses}), got {delta.shape}"
        )
    if np.any(delta <= 0) or not np.allclose(delta, delta.T):
        raise ValueError("delta must be a symmetric matrix of positive spacings")

    # class selection probability
    density = np.diagonal(delta) ** -ndim
    cdf = np.cumsum(density) / density.sum()

    points = np.zeros((npoints, ndim), dtype=np.float64)
    kind = np.zeros(npoints, dtype=np.int64)
    count = _poissondisc(
        points,
        kind,
        int(niter),
        float(vardens),
        np.ascontiguousarray(delta),
        cdf,
        int(seed),
    )

    return points[:count], kind[:count]


# %% subroutines
@nb.njit(fastmath=True, cache=True)  # pragma: no cover
def _poissondisc(points, kind, niter, vardens, delta, cdf, seed):
    npoints, ndim = points.shape
    np.random.seed(seed)

    scale = np.zeros(npoints, dtype=np.float64)
    active = np.zeros(npoints, dtype=np.int64)
    cand = np.zeros(ndim, dtype=np.float64)

    # seed point
    for d in range(ndim):
        points[0, d] = np.random.random()
    kind[0] = _draw_class(cdf)
    scale[0] = _vardens_scale(points[0], vardens)
    nactive = 1
    count = 1

    while nactive > 0 and count < npoints:
        a = np.random.randint(0, nactive)
        src = active[a]
        accepted = False

        for _ in range(niter):
            k = _draw_class(cdf)
            _annulus(cand, points[src], delta[k, kind[src]] * scale[src])
            if not _inside(cand):
                continue

            cand_scale = _vardens_scale(cand, vardens)
            if _is_far(points, kind, scale, count, cand, k, cand_scale, delta):
                points[count, :] = cand
                kind[count] = k
                scale[count] = cand_scale
                active[nactive] = count
                nactive += 1
                count += 1
                accepted = True
                break

        # retire exhausted point
        if not accepted:
            nactive -= 1
            active[a] = active[nactive]

    return count


@nb.njit(fastmath=True, cache=True, inline="always")  # pragma: no cover
def _draw_class(cdf):
    u = np.random.random()
    for t in range(cdf.shape[0]):
        if u < cdf[t]:
            return t
    return cdf.shape[0] - 1


@nb.njit(fastmath=True, cache=True, inline="always")  # pragma: no cover
def _vardens_scale(p, vardens):
    r2 = 0.0
    for d in range(p.shape[0]):
        r2 += (p[d] - 0.5) ** 2
    return 1.0 + vardens * r2


@nb.njit(fastmath=True, cache=True, inline="always")  # pragma: no cover
def _annulus(output, center, radius):
    norm = 0.0
    for d in range(output.shape[0]):
        output[d] = np.random.standard_normal()
        norm += output[d] ** 2
    norm = norm**0.5
    if norm == 0.0:
        norm = 1.0

    # uniform radius in [r, 2r]
    rad = radius * (1.0 + np.random.random())
    for d in range(output.shape[0]):
        output[d] = center[d] + rad * output[d] / norm


@nb.njit(fastmath=True, cache=True, inline="always")  # pragma: no cover
def _inside(p):
    for d in range(p.shape[0]):
        if p[d] < 0.0 or p[d] >= 1.0:
            return False
    return True


@nb.njit(fastmath=True, cache=True)  # pragma: no cover
def _is_far(points, kind, scale, count, cand, k, cand_scale, delta):
    ndim = cand.shape[0]
    for q in range(count):
        lim = delta[k, kind[q]] * max(cand_scale, scale[q])
        dist2 = 0.0
        for d in range(ndim):
            dist2 += (points[q, d] - cand[d]) ** 2
        if dist2 < lim * lim:
            return False
    return True
