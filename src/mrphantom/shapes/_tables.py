"""Built-in phantom descriptor tables."""

__all__ = ["SHEPP_LOGAN", "SHEPP_LOGAN_MOD", "DISC", "RING"]

import math

from ._ellipse import Ellipse

# Shepp, L. A., Logan, B. F. "Reconstructing Interior Head Tissue
# from X-Ray Transmissions", IEEE TNS 21.3 (1974): 21-43.
SHEPP_LOGAN = (
    Ellipse(1.00, (0.6900, 0.9200), (0.00, 0.0000)),
    Ellipse(-0.98, (0.6624, 0.8740), (0.00, -0.0184)),
    Ellipse(-0.02, (0.1100, 0.3100), (0.22, 0.0000), math.radians(-18.0)),
    Ellipse(-0.02, (0.1600, 0.4100), (-0.22, 0.0000), math.radians(18.0)),
    Ellipse(0.01, (0.2100, 0.2500), (0.00, 0.3500)),
    Ellipse(0.01, (0.0460, 0.0460), (0.00, 0.1000)),
    Ellipse(0.01, (0.0460, 0.0460), (0.00, -0.1000)),
    Ellipse(0.01, (0.0460, 0.0230), (-0.08, -0.6050)),
    Ellipse(0.01, (0.0230, 0.0230), (0.00, -0.6060)),
    Ellipse(0.01, (0.0230, 0.0460), (0.06, -0.6050)),
)

# Toft, P. "The Radon Transform - Theory and Implementation",
# PhD thesis, DTU (1996). Contrast enhanced version of the above.
SHEPP_LOGAN_MOD = tuple(
    el._replace(intensity=intensity)
    for el, intensity in zip(
        SHEPP_LOGAN, (1.0, -0.8, -0.2, -0.2, 0.1, 0.1, 0.1, 0.1, 0.1, 0.1)
    )
)

DISC = (Ellipse(1.0, (0.4, 0.4)),)

RING = (
    Ellipse(1.0, (0.75, 0.75)),
    Ellipse(-1.0, (0.65, 0.65)),
    Ellipse(1.0, (0.35, 0.35)),
    Ellipse(-1.0, (0.25, 0.25)),
)
