"""Harmonic coefficient table of the simulated receive array."""

__all__ = ["MAX_COILS", "COIL_COEFF", "COIL_PERIOD", "coil_coefficients"]

import numpy as np
from numpy.typing import NDArray

MAX_COILS = 8
COIL_COEFF = 5
COIL_PERIOD = 4.0


def coil_coefficients() -> NDArray[complex]:
    """
    Truncated Fourier series coefficients of the coil sensitivities.

    Returns
    -------
    NDArray[complex]
        Read-only array of shape ``(MAX_COILS, COIL_COEFF, COIL_COEFF)``,
        indexed as ``[coil, x_harmonic, y_harmonic]``. Harmonic index ``i``
        corresponds to spatial frequency ``(i - 2) / 4``.

    """
    return _SENS_COEFF


def _birdcage_coefficients(
    ncoils: int = MAX_COILS,
    ncoeff: int = COIL_COEFF,
    period: float = COIL_PERIOD,
    radius: float = 1.2,
    width: float = 1.0,
) -> NDArray[complex]:
    """
    Project a birdcage-like array onto the harmonic window.

    Each element is modeled as a Gaussian receive profile of the given
    ``width`` centered on a ring of the given ``radius`` around the field
    of view, with the usual ``-2 * pi * c / ncoils`` birdcage phase.
    The Fourier coefficients over one ``period`` follow in closed form
    from the Fourier transform of the Gaussian.

    """
    sh = (ncoeff - 1) // 2
    freq = (np.arange(ncoeff) - sh) / period
    kx = freq[:, None]
    ky = freq[None, :]

    angle = 2 * np.pi * np.arange(ncoils)[:, None, None] / ncoils
    coilx = radius * np.cos(angle)
    coily = radius * np.sin(angle)
    coil_phs = -angle

    envelope = np.pi * width**2 / period**2
    envelope = envelope * np.exp(-((np.pi * width) ** 2) * (kx**2 + ky**2))
    shift = np.exp(-2j * np.pi * (kx * coilx + ky * coily))

    return envelope * shift * np.exp(1j * coil_phs)


_SENS_COEFF = _birdcage_coefficients()
_SENS_COEFF.setflags(write=False)
