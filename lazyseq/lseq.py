# -*- coding: utf-8 -*-
"""The lazy sequence protocol.

A lazy sequence is either empty (``nil``), or a node holding the current
element (*head*) and the rest of the sequence (*tail*). It is observed only
through two questions:

    s.isempty()   # is there anything here?
    s.uncons()    # if so, (head, tail)

Every combinator in ``lazyseq.it`` and ``lazyseq.fold`` is written against
those two observations, so anything that answers them can be used as input.
The ``LSeq`` ABC recognizes such classes automatically (like the ABCs in
``collections.abc`` do), so no registration is needed::

    class Countdown:
        def __init__(self, n):
            self.n = n
        def isempty(self):
            return self.n == 0
        def uncons(self):
            return self.n, Countdown(self.n - 1)

    assert isinstance(Countdown(3), LSeq)
    assert to_list(map(str, Countdown(3))) == ["3", "2", "1"]

**Laziness.** A tail is computed only when observed. A ``LazyCons`` keeps a
thunk for its tail, and each access of ``.tail`` hands out a fresh,
unevaluated ``Delayed`` sequence that runs the thunk when (and only when)
someone looks at it. Hence a combinator never forces more of its inputs
than its consumer asks for, and infinite sequences are ordinary values.

**No memoization.** Traversing the same sequence value again recomputes
everything past its first node. Side effects in the functions you feed to
the combinators will run again. If you want the elements computed only
once, wrap the sequence with ``memoize``.

**Finite vs. infinite.** Sequences are not tagged with finiteness. Forcing
operations (``length``, ``to_list``, ``foldl``, ...) simply do not terminate
on an infinite input. After ``dyn.lazyseq_force_warn`` elements they emit
a ``LongForceWarning``, and keep going.
"""

__all__ = ["LSeq", "Nil", "nil", "LazyCons", "Delayed", "delay",
           "EmptySequenceError", "LongForceWarning",
           "isempty", "uncons", "head", "tail",
           "memoize", "length"]

from abc import ABCMeta, abstractmethod
from itertools import zip_longest
from warnings import warn

from .collections import FixedString, cstr
from .dynassign import dyn, make_dynvar
from .lazyutil import Lazy
from .singleton import Singleton, ThereCanBeOnlyOne

make_dynvar(lazyseq_repr_limit=10,
            lazyseq_force_warn=1_000_000)

class EmptySequenceError(IndexError):
    """Raised when asking for the head or tail of an empty sequence."""

class LongForceWarning(RuntimeWarning):
    """Emitted when a forcing operation has consumed suspiciously many elements.

    The threshold is ``dyn.lazyseq_force_warn``. The operation continues.
    """

class LSeq(metaclass=ABCMeta):
    """ABC: lazy sequence.

    Subclasses implement ``isempty`` and ``uncons``. This class provides,
    on top of those two only: ``head``, ``tail``, truth value, iteration,
    indexing and slicing, equality and a bounded ``repr``.

    Indexing takes a non-negative ``int`` (``s[5]``), or a ``slice`` with
    non-negative start/stop/step. Slicing is lazy; ``nats()[10:]`` is fine.

    Equality compares elementwise, and like ``to_list``, it does not
    terminate if both sides are infinite and agree. Sequences are not hashable.
    """
    label = None

    @abstractmethod
    def isempty(self):
        """Return whether this sequence is empty."""
    @abstractmethod
    def uncons(self):
        """Return ``(head, tail)``. Raise ``EmptySequenceError`` if empty."""

    @classmethod
    def __subclasshook__(cls, C):
        if cls is LSeq:
            if all(any(name in B.__dict__ and B.__dict__[name] is not None
                       for B in C.__mro__)
                   for name in ("isempty", "uncons")):
                return True
        return NotImplemented

    @property
    def head(self):
        return self.uncons()[0]
    @property
    def tail(self):
        return self.uncons()[1]

    def __bool__(self):
        return not self.isempty()

    def __iter__(self):
        return _walk(self)

    def __getitem__(self, k):
        from .it import take, drop, nth
        if isinstance(k, slice):
            start, stop, step = k.start, k.stop, k.step
            for name, x in (("start", start), ("stop", stop), ("step", step)):
                if x is not None and not isinstance(x, int):
                    raise TypeError(f"expected integer slice {name}, got {type(x)} with value {x}")
                if x is not None and x < 0:
                    raise ValueError(f"lazy sequences support only non-negative slice {name}, got {x}")
            if step == 0:
                raise ValueError("slice step cannot be zero")
            start = start or 0
            out = drop(start, self)
            if stop is not None:
                out = take(max(0, stop - start), out)
            if step is not None and step != 1:
                out = _stepped(out, step)
            return out
        if not isinstance(k, int):
            raise TypeError(f"expected integer index or slice, got {type(k)} with value {k}")
        if k < 0:
            raise ValueError(f"lazy sequences support only non-negative indices, got {k}")
        missing = object()
        x = nth(k, self, default=missing)
        if x is missing:
            raise EmptySequenceError(f"lazy sequence index {k} out of range")
        return x

    def __eq__(self, other):
        if other is self:
            return True
        if not isinstance(other, LSeq):
            return NotImplemented
        fill = object()
        for a, b in zip_longest(_forcing_walk(self, "=="), _walk(other), fillvalue=fill):
            if a is fill or b is fill or a != b:
                return False
        return True
    __hash__ = None

    def __repr__(self):
        limit = dyn.lazyseq_repr_limit
        items = []
        s = self
        for _ in range(limit):
            if s.isempty():
                break
            x, s = s.uncons()
            items.append(repr(x))
        else:
            if not s.isempty():
                items.append("...")
        name = str(self.label) if self.label is not None else "lseq"
        return f"{name}({', '.join(items)})"

# `Nil` needs both ABCMeta (from LSeq) and the singleton metaclass.
class _NilMeta(ThereCanBeOnlyOne, ABCMeta):
    pass

class Nil(LSeq, Singleton, metaclass=_NilMeta):
    """The empty sequence. Singleton; the instance is ``nil``."""
    def isempty(self):
        return True
    def uncons(self):
        raise EmptySequenceError("cannot uncons an empty sequence")
    def __repr__(self):
        return "nil"
nil = Nil()

class LazyCons(LSeq):
    """A non-empty sequence node. Immutable.

    head:  the element.
    tail:  the rest of the sequence; an ``LSeq``, or a 0-argument callable
           that returns one. A callable is not called here; it runs each
           time the tail is observed (via a fresh ``Delayed``).
    label: optional ``FixedString`` (a ``str`` is converted with ``cstr``)
           naming the generator this node comes from. Shown by ``repr``
           and in diagnostics only.
    """
    def __init__(self, head, tail, label=None):
        if not (isinstance(tail, LSeq) or callable(tail)):
            raise TypeError(f"tail: expected a lazy sequence or a thunk, got {type(tail)} with value {repr(tail)}")
        if label is not None and not isinstance(label, FixedString):
            label = cstr(label)
        self._head = head
        self._tail = tail
        self.label = label
        self._immutable = True
    def __setattr__(self, k, v):
        if hasattr(self, "_immutable"):
            raise TypeError("'LazyCons' object does not support attribute assignment")
        super().__setattr__(k, v)

    def isempty(self):
        return False
    def uncons(self):
        return self._head, self.tail

    @property
    def head(self):
        return self._head
    @property
    def tail(self):
        t = self._tail
        if isinstance(t, LSeq):
            return t
        return Delayed(t)

class Delayed(LSeq):
    """A sequence whose structure is computed by a thunk, when first observed.

    The thunk must return an ``LSeq`` (which may itself be a ``Delayed``).
    It runs at most once per ``Delayed`` instance; the result is cached for
    the lifetime of this instance only.

    This is the building block for writing lazy combinators; see ``delay``.
    """
    def __init__(self, thunk):
        self._promise = Lazy(thunk)

    def resolve(self):
        """Force the thunk (chains of ``Delayed`` too); return the underlying sequence."""
        s = self
        while isinstance(s, Delayed):
            s = s._promise.force()
            if not isinstance(s, LSeq):
                raise TypeError(f"sequence thunk must return a lazy sequence, got {type(s)} with value {repr(s)}")
        return s

    def isempty(self):
        return self.resolve().isempty()
    def uncons(self):
        return self.resolve().uncons()

    @property
    def label(self):
        return getattr(self.resolve(), "label", None)

def delay(thunk):
    """Return a sequence that is computed by ``thunk()`` when first observed.

    Use this to define sequences that refer to themselves, or to postpone
    expensive work until someone actually looks::

        def ones():
            return cons(1, delay(ones))
    """
    if not callable(thunk):
        raise TypeError(f"expected a callable thunk, got {type(thunk)} with value {repr(thunk)}")
    return Delayed(thunk)

# -----------------------------------------------------------------------------

def _checkseq(s):
    if not isinstance(s, LSeq):
        raise TypeError(f"expected a lazy sequence, got {type(s)} with value {repr(s)}")
    return s

def isempty(s):
    """Return whether the sequence ``s`` is empty."""
    return _checkseq(s).isempty()

def uncons(s):
    """Return ``(head, tail)`` of the sequence ``s``.

    Raises ``EmptySequenceError`` if ``s`` is empty.
    """
    _checkseq(s)
    if s.isempty():
        raise EmptySequenceError("cannot uncons an empty sequence")
    return s.uncons()

def head(s):
    """Return the first element of ``s``. Raises ``EmptySequenceError`` if empty."""
    return uncons(s)[0]

def tail(s):
    """Return ``s`` without its first element. Raises ``EmptySequenceError`` if empty."""
    return uncons(s)[1]

# Static helpers instead of generator methods, so that a running iteration
# does not keep the starting node (and everything memoized after it) alive.
def _walk(s):
    while not s.isempty():
        x, s = s.uncons()
        yield x

def _forcing_walk(s, who):
    """Like ``_walk``, but warn once when ``dyn.lazyseq_force_warn`` is exceeded."""
    threshold = dyn.lazyseq_force_warn
    label = getattr(s, "label", None)
    n = 0
    while not s.isempty():
        x, s = s.uncons()
        yield x
        n += 1
        if n == threshold:
            what = f" of {label}" if label is not None else ""
            warn(f"{who}: forced {n} elements{what} without reaching the end; is the sequence infinite?",
                 LongForceWarning, stacklevel=3)

def _stepped(s, step):
    def stepper(s):
        if s.isempty():
            return nil
        x, rest = s.uncons()
        def advance():
            t = rest
            for _ in range(step - 1):
                if t.isempty():
                    return nil
                t = t.uncons()[1]
            return stepper(t)
        return LazyCons(x, advance)
    return Delayed(lambda: stepper(s))

def length(s):
    """Return the number of elements in the finite sequence ``s``.

    **Caution**: Will not terminate for infinite inputs.
    """
    _checkseq(s)
    n = 0
    for _ in _forcing_walk(s, "length"):
        n += 1
    return n

def memoize(s):
    """Return a sequence with the elements of ``s``, each tail computed at most once.

    This is the opt-in to sharing: traversing the result any number of times
    forces the original ``s`` only once. The cost is that everything
    traversed so far is kept in memory, as long as the result is.

    Example::

        evals = []
        def f(x):
            evals.append(x)
            return 2 * x
        s = memoize(map(f, ls(1, 2, 3)))
        assert to_list(s) == [2, 4, 6]
        assert to_list(s) == [2, 4, 6]
        assert evals == [1, 2, 3]
    """
    _checkseq(s)
    def memoized(s):
        if s.isempty():
            return nil
        x, rest = s.uncons()
        return LazyCons(x, Lazy(lambda: memoized(rest)), label=getattr(s, "label", None))
    return Delayed(lambda: memoized(s))
