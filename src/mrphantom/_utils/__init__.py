"""Utilities."""

__all__ = []

from ._backend import *  # noqa
from ._coords import *  # noqa
from ._fill import *  # noqa

from . import _backend  # noqa
from . import _coords  # noqa
from . import _fill  # noqa

__all__.extend(_backend.__all__)
__all__.extend(_coords.__all__)
__all__.extend(_fill.__all__)
