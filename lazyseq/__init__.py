# -*- coding: utf-8 -*
"""Lazy sequences, possibly infinite, and the combinators to build them.

See ``dir(lazyseq)`` and submodule docstrings for more. The protocol itself
is documented in ``lazyseq.lseq``.
"""

__version__ = '0.1.0'

from .collections import *  # noqa: F401, F403
from .dispatch import *  # noqa: F401, F403
from .dynassign import *  # noqa: F401, F403
from .fold import *  # noqa: F401, F403
from .it import *  # noqa: F401, F403
from .lazyutil import *  # noqa: F401, F403
from .lseq import *  # noqa: F401, F403
from .mathseq import *  # noqa: F401, F403
from .singleton import *  # noqa: F401, F403
