"""Receive coil array sensitivity simulation."""

__all__ = []

from . import _coeff  # noqa
from . import _encode  # noqa

from ._coeff import *  # noqa
from ._encode import *  # noqa

__all__.extend(_coeff.__all__)
__all__.extend(_encode.__all__)
