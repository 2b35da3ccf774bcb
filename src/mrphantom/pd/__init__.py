"""Variable density Poisson-disc point sets."""

__all__ = []

from . import _poisson  # noqa
from . import _rmatrix  # noqa

from ._poisson import *  # noqa
from ._rmatrix import *  # noqa

__all__.extend(_poisson.__all__)
__all__.extend(_rmatrix.__all__)
