"""Analytic ellipse phantoms."""

__all__ = []

from . import _ellipse  # noqa
from . import _tables  # noqa

from ._ellipse import *  # noqa
from ._tables import *  # noqa

__all__.extend(_ellipse.__all__)
__all__.extend(_tables.__all__)
