# -*- coding: utf-8 -*-
"""Combinators on lazy sequences.

Structural: ``cons``, ``lseq``, ``ls``, ``to_list``, ``to_tuple``,
``repeat``, ``replicate``, ``take``, ``drop``, ``cycle``, ``nth``, ``last``.

Transform: ``map``, ``filter``, ``iterate``, ``inits``, ``tails``.

Multi-sequence: ``zip``, ``zip2``.

For scans, folds and unfolds, see ``lazyseq.fold``.

Every function here that returns a sequence is lazy: it does no work on
its inputs until the result is observed, and then only as much as needed
to answer that observation. Counts are checked at call time; a non-integer
raises ``TypeError``, a negative count ``ValueError``.

Note ``map``, ``filter`` and ``zip`` shadow the builtins when star-imported.
"""

__all__ = ["cons", "lseq", "ls", "to_list", "to_tuple",
           "repeat", "replicate", "take", "drop", "cycle",
           "nth", "last",
           "map", "filter", "iterate", "inits", "tails",
           "zip", "zip2"]

from collections.abc import Sequence

from .lseq import LSeq, LazyCons, nil, delay, _checkseq, _forcing_walk

def _checkcount(n):
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected integer n, got {type(n)} with value {n}")
    if n < 0:
        raise ValueError(f"expected n >= 0, got {n}")

# -----------------------------------------------------------------------------
# Construction and conversion

def cons(x, s):
    """Prepend ``x`` to the sequence ``s``.

    ``s`` may also be a 0-argument callable returning the sequence; then it
    is called only when the tail is observed. This allows recursive
    definitions::

        def alternating():
            return cons(1, lambda: cons(-1, alternating))
    """
    return LazyCons(x, s)

def lseq(iterable):
    """Make a lazy sequence from a finite ordered collection.

    A ``collections.abc.Sequence`` (``list``, ``tuple``, ``range``, a
    ``Span`` or ``Slice`` view, ...) is walked by index, without copying;
    the sequence then reflects the collection as it is when traversed.
    Any other iterable is read into a tuple first, so it must be finite.

    An ``LSeq`` is returned as-is.

    ``lseq(...)`` plays the same role as ``list(...)`` or ``tuple(...)``.
    See also ``ls``.
    """
    if isinstance(iterable, LSeq):
        return iterable
    data = iterable if isinstance(iterable, Sequence) else tuple(iterable)
    def node(i):
        if i >= len(data):
            return nil
        return LazyCons(data[i], lambda: node(i + 1))
    return delay(lambda: node(0))

def ls(*elts):
    """Make a lazy sequence with the given elements. ``ls(1, 2, 3)`` is ``lseq((1, 2, 3))``."""
    return lseq(elts)

def to_list(s):
    """Force the finite sequence ``s`` into a ``list``.

    **Caution**: Will not terminate for infinite inputs. (After
    ``dyn.lazyseq_force_warn`` elements, a ``LongForceWarning`` is emitted.)
    """
    return list(_forcing_walk(_checkseq(s), "to_list"))

def to_tuple(s):
    """Like ``to_list``, but return a ``tuple``."""
    return tuple(_forcing_walk(_checkseq(s), "to_tuple"))

# -----------------------------------------------------------------------------
# Structural

def repeat(x):
    """Return the infinite sequence x, x, x, ..."""
    def node():
        return LazyCons(x, node)
    return node()

def replicate(n, x):
    """Return the sequence of ``n`` copies of ``x``."""
    _checkcount(n)
    return take(n, repeat(x))

def take(n, s):
    """Return the first ``n`` elements of ``s``, or all of them if ``s`` is shorter.

    Lazy; ``take(3, filter(pred, s))`` never looks for a fourth match.
    """
    _checkcount(n)
    _checkseq(s)
    def taker(n, s):
        if n == 0 or s.isempty():
            return nil
        x, rest = s.uncons()
        return LazyCons(x, lambda: taker(n - 1, rest))
    return delay(lambda: taker(n, s))

def drop(n, s):
    """Return ``s`` without its first ``n`` elements; ``nil`` if ``s`` is shorter."""
    _checkcount(n)
    _checkseq(s)
    def dropper():
        t = s
        for _ in range(n):
            if t.isempty():
                return nil
            t = t.uncons()[1]
        return t
    return delay(dropper)

def cycle(s):
    """Repeat the finite sequence ``s`` forever.

    Each pass is re-derived from the original ``s``, so the result holds
    no reference cycle. ``cycle(nil)`` is empty.

    Example::

        assert to_list(take(7, cycle(ls(1, 2, 3)))) == [1, 2, 3, 1, 2, 3, 1]
    """
    _checkseq(s)
    def restart(cur):
        if cur.isempty():
            if s.isempty():
                return nil
            cur = s
        x, rest = cur.uncons()
        return LazyCons(x, lambda: restart(rest))
    return delay(lambda: restart(s))

def nth(n, s, *, default=None):
    """Return the element at position ``n`` of ``s``.

    The ``default`` is returned if there are fewer than ``n + 1`` elements.
    """
    _checkcount(n)
    _checkseq(s)
    for _ in range(n):
        if s.isempty():
            return default
        s = s.uncons()[1]
    if s.isempty():
        return default
    return s.uncons()[0]

def last(s, *, default=None):
    """Return the last element of the finite sequence ``s``.

    The ``default`` is returned if ``s`` is empty.

    **Caution**: Will not terminate for infinite inputs.
    """
    out = default
    for out in _forcing_walk(_checkseq(s), "last"):
        pass
    return out

# -----------------------------------------------------------------------------
# Transform

def map(f, s0, *ss):
    """Apply ``f`` elementwise.

    With several input sequences, ``f`` takes one argument from each,
    and the result ends when the shortest input does.

    Each ``f`` call happens when the corresponding element is observed.
    """
    seqs = (s0,) + ss
    for s in seqs:
        _checkseq(s)
    def mapper(seqs):
        if any(s.isempty() for s in seqs):
            return nil
        xs, rests = [], []
        for s in seqs:
            x, rest = s.uncons()
            xs.append(x)
            rests.append(rest)
        return LazyCons(f(*xs), lambda: mapper(rests))
    return delay(lambda: mapper(seqs))

def filter(pred, s):
    """Keep the elements of ``s`` for which ``pred`` returns truthy.

    Looking for the next match advances through ``s`` in a loop, so long
    runs of rejected elements cost no stack. On an infinite ``s`` with no
    further matches, the search does not terminate.
    """
    _checkseq(s)
    def filterer(s):
        while not s.isempty():
            x, s = s.uncons()
            if pred(x):
                rest = s
                return LazyCons(x, lambda: filterer(rest))
        return nil
    return delay(lambda: filterer(s))

def iterate(f, x):
    """Return the infinite sequence x, f(x), f(f(x)), ..."""
    def node(x):
        return LazyCons(x, lambda: node(f(x)))
    return node(x)

def inits(s):
    """Return the sequence of prefixes of ``s``, shortest first.

    Starts with the empty prefix; each next one is one element longer::

        [to_list(p) for p in inits(ls(1, 2))] == [[], [1], [1, 2]]

    Each prefix is itself a (finite) sequence, ``take(k, s)``; nothing is
    copied, so stepping to the next prefix is constant time. If ``s`` is
    infinite, so is the result.
    """
    _checkseq(s)
    def initer(k, cursor):
        def rest():
            if cursor.isempty():
                return nil
            return initer(k + 1, cursor.uncons()[1])
        return LazyCons(take(k, s), rest)
    return initer(0, s)

def tails(s):
    """Return the sequence of suffixes of ``s``, longest first, ending with ``nil``::

        [to_list(t) for t in tails(ls(1, 2))] == [[1, 2], [2], []]
    """
    _checkseq(s)
    def tailer(s):
        def rest():
            if s.isempty():
                return nil
            return tailer(s.uncons()[1])
        return LazyCons(s, rest)
    return tailer(s)

# -----------------------------------------------------------------------------
# Multi-sequence

def zip(s0, *ss):
    """Return the sequence of tuples of corresponding elements.

    Ends when the shortest input does. Zipping infinite sequences gives an
    infinite sequence.
    """
    def pack(*xs):
        return xs
    return map(pack, s0, *ss)

def zip2(lhs, rhs):
    """``zip`` of exactly two sequences."""
    return zip(lhs, rhs)
