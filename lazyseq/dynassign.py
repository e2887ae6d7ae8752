# -*- coding: utf-8 -*-
"""Dynamic assignment, used for configuring the library.

Library-wide settings are dynamic variables. Each setting gets its default
value with ``make_dynvar`` in the module that uses it, and a caller can
override it for the dynamic extent of a ``with`` block::

    from lazyseq import dyn, nats

    with dyn.let(lazyseq_repr_limit=3):
        print(repr(nats()))  # nats(0, 1, 2, ...)

Settings in use:

    lazyseq_repr_limit: int
        How many elements ``repr`` of a sequence shows. Default 10.

    lazyseq_force_warn: int or None
        Forcing operations (``to_list``, ``foldl``, ...) emit a
        ``LongForceWarning`` after consuming this many elements.
        Default 1_000_000. ``None`` disables the warning.
"""

__all__ = ["dyn", "make_dynvar"]

import threading
from collections import ChainMap
from collections.abc import Container, Sized, Iterable

from .singleton import Singleton

# Defaults, shared between threads.
_global_dynvars = {}

# Each thread has its own stack of dynamic scopes. A new thread starts with
# a copy of the main thread's stack.
_L = threading.local()

_mainthread_stack = []
_mainthread_lock = threading.RLock()
def _getstack():
    if threading.current_thread() is threading.main_thread():
        return _mainthread_stack
    if not hasattr(_L, "stack"):
        with _mainthread_lock:
            _L.stack = _mainthread_stack.copy()
    return _L.stack

class _EnvBlock:
    def __init__(self, bindings):
        self.bindings = bindings
    def __enter__(self):
        _getstack().append(self.bindings)
    def __exit__(self, t, v, tb):
        _getstack().pop()

class _Dyn(Singleton):
    """Dynamic variables, like Racket's ``parameterize``.

      - ``with dyn.let(name=value, ...)`` binds for the dynamic extent
        of the block. Blocks nest; inner bindings shadow outer ones.

      - ``dyn.name`` reads the innermost binding, falling back to the default
        set by ``make_dynvar``. An unknown name raises ``AttributeError``.

      - ``dyn.name = value`` and ``dyn.update(name=value, ...)`` rebind in
        the innermost scope that has the name.
    """
    def _resolve(self, name):
        for scope in reversed(_getstack()):
            if name in scope:
                return scope
        if name in _global_dynvars:
            return _global_dynvars
        raise AttributeError(f"dynamic variable {repr(name)} is not defined")

    def __getattr__(self, name):
        scope = self._resolve(name)
        return scope[name]

    def __setattr__(self, name, value):
        scope = self._resolve(name)
        scope[name] = value

    def let(self, **bindings):
        """Introduce dynamic bindings. Context manager."""
        return _EnvBlock(bindings)

    def update(self, **bindings):
        """Mass-update existing dynamic bindings.

        If any of the names is not bound, nothing is updated and
        ``AttributeError`` is raised.
        """
        def doit():
            scopes = {k: self._resolve(k) for k in bindings}
            for k, v in bindings.items():
                scopes[k][k] = v
        # New threads copy the main thread's stack; make the update atomic.
        if threading.current_thread() is threading.main_thread():
            with _mainthread_lock:
                doit()
        else:
            doit()

    def __contains__(self, name):
        try:
            getattr(self, name)
            return True
        except AttributeError:
            return False

    def asdict(self):
        """Return a snapshot of the current bindings as a ``collections.ChainMap``."""
        return ChainMap(*reversed(_getstack()), _global_dynvars)

    def __iter__(self):
        return iter(self.asdict())
    def __len__(self):
        return len(self.asdict())
    def items(self):
        return self.asdict().items()
    def get(self, k, default=None):
        return getattr(self, k) if k in self else default

    def __repr__(self):  # pragma: no cover
        bindings = [f"{k}={repr(v)}" for k, v in self.items()]
        return f"<dyn object at 0x{id(self):x}: {{{', '.join(bindings)}}}>"
dyn = _Dyn()

def make_dynvar(**bindings):
    """Create dynamic variables and set their default values.

    The default is what ``dyn`` returns outside any ``with dyn.let`` that
    binds the name. The latest call for a given name wins.
    """
    _global_dynvars.update(bindings)

for abscls in (Container, Sized, Iterable):
    abscls.register(_Dyn)
del abscls
