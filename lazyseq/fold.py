# -*- coding: utf-8 -*-
"""Scans (lazy partial folds), folds, and unfolds.

``scanl`` and ``foldl`` take the accumulator **first**, like Haskell's
``scanl``/``foldl``: ``op(acc, elt)``. With several input sequences,
``op(acc, e1, ..., en)``, and the inputs are consumed in lockstep until the
shortest one runs out.

``unfold`` and ``unfold1`` build sequences corecursively, from a seed state
and a step function; they are the generic form of the generators in
``lazyseq.mathseq``.

For the other combinators, see ``lazyseq.it``.
"""

__all__ = ["scanl", "foldl", "unfold", "unfold1"]

from .collections import FixedString, cstr
from .it import zip
from .lseq import LazyCons, nil, delay, _checkseq, _forcing_walk

def scanl(op, init, s0, *ss):
    """Scan (a.k.a. accumulate), lazily.

    Returns the sequence ``init, op(init, x0), op(op(init, x0), x1), ...``,
    which is one element longer than the (shortest) input. Useful for
    partially folding infinite sequences.

    Each ``op`` call happens when the corresponding element of the output
    is observed.

    Example - partial sums::

        from operator import add
        assert to_list(scanl(add, 0, ls(1, 2, 3))) == [0, 1, 3, 6]
    """
    _checkseq(s0)
    if ss:
        s = zip(s0, *ss)
        def apply(acc, xs):
            return op(acc, *xs)
    else:
        s = s0
        def apply(acc, x):
            return op(acc, x)
    def scanner(acc, s):
        def rest():
            if s.isempty():
                return nil
            x, t = s.uncons()
            return scanner(apply(acc, x), t)
        return LazyCons(acc, rest)
    return scanner(init, s)

def foldl(op, init, s0, *ss):
    """Left fold: the last element of ``scanl(op, init, s0, *ss)``.

    This forces the whole input, and returns a single value::

        from operator import add
        assert foldl(add, 0, ls(1, 2, 3, 4)) == 10

    **Caution**: Will not terminate for infinite inputs.
    """
    out = init
    for out in _forcing_walk(scanl(op, init, s0, *ss), "foldl"):
        pass
    return out

def _aslabel(label):
    if label is None or isinstance(label, FixedString):
        return label
    return cstr(label)

def unfold1(proc, init, *, label=None):
    """Generate a sequence corecursively. The counterpart of ``foldl``.

    State starts from the value ``init``. ``proc`` takes the state, and
    returns either ``(value, newstate)``, or ``None`` to end the sequence.
    It is called once per element, when that element is first observed.

    ``label``, if given, names the sequence in its ``repr`` and in
    diagnostics.

    Example::

        def step2(k):  # x0, x0 + 2, x0 + 4, ...
            return (k, k + 2)

        assert to_list(take(5, unfold1(step2, 10))) == [10, 12, 14, 16, 18]
    """
    label = _aslabel(label)
    def step(state):
        result = proc(state)
        if result is None:
            return nil
        value, newstate = result
        return LazyCons(value, lambda: step(newstate), label)
    return delay(lambda: step(init))

def unfold(proc, *inits, label=None):
    """Like ``unfold1``, but for an n-in-(1+n)-out ``proc``.

    The current state is unpacked to the argument list of ``proc``, which
    returns either ``(value, *newstates)``, or ``None`` to end the sequence.

    Example::

        def fibo(a, b):
            return (a, b, a + b)

        assert to_list(take(6, unfold(fibo, 0, 1))) == [0, 1, 1, 2, 3, 5]
    """
    label = _aslabel(label)
    def step(states):
        result = proc(*states)
        if result is None:
            return nil
        value, *newstates = result
        return LazyCons(value, lambda: step(newstates), label)
    return delay(lambda: step(inits))
