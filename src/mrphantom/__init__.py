"""Main MRPhantom API."""

__all__ = []

from . import coil  # noqa
from . import pd  # noqa
from . import shapes  # noqa

from . import _phantom  # noqa
from . import _sample  # noqa

from ._phantom import *  # noqa
from ._sample import *  # noqa

__all__.extend(_phantom.__all__)
__all__.extend(_sample.__all__)
