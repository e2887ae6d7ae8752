# -*- coding: utf-8 -*-
"""Promises: delayed evaluation, with memoization.

Sequences in this library do **not** memoize; a tail is recomputed whenever
it is asked for. ``Lazy`` is the building block for opting in to sharing,
see ``lazyseq.lseq.memoize``.
"""

__all__ = ["Lazy", "force1"]

_uninitialized = object()

class Lazy:
    """Delayed evaluation, with memoization. (A.k.a. *promise* in Racket.)"""

    def __init__(self, thunk):
        """`thunk`: 0-argument callable to be stored for delayed evaluation."""
        if not callable(thunk):
            raise TypeError(f"`thunk` must be a callable, got {type(thunk)} with value {repr(thunk)}")
        self.thunk = thunk
        self.value = _uninitialized
        self.thunk_returned_normally = _uninitialized

    def force(self):
        """Compute and return the value of the promise.

        The thunk runs at most once. Its return value is cached; if it raises,
        the exception instance is cached instead, and re-raised on every force.
        """
        if self.value is _uninitialized:
            try:
                self.value = self.thunk()
                self.thunk_returned_normally = True
            except Exception as err:
                self.value = err
                self.thunk_returned_normally = False
            self.thunk = None  # drop references held by the closure
        if self.thunk_returned_normally:
            return self.value
        raise self.value

    def __call__(self):
        return self.force()

    def __repr__(self):  # pragma: no cover
        state = "forced" if self.value is not _uninitialized else "pending"
        return f"<Lazy ({state}) at 0x{id(self):x}>"

def force1(x):
    """Force a ``Lazy`` promise; return anything else as-is (à la Racket)."""
    return x.force() if isinstance(x, Lazy) else x
