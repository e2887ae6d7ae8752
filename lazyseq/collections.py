# -*- coding: utf-8 -*-
"""Small containers used at the edges of the sequence algebra.

- ``Some``: explicit thing-ness, for optional results.
- ``FixedString``: bounded, read-only text, for labeling generators.
- ``Span``, ``Slice``: non-owning views into a sequence (e.g. a ``list``),
  usable as sources for ``lazyseq.it.lseq``.
"""

__all__ = ["Some", "FixedString", "cstr",
           "SequenceView", "Slice", "Span"]

from collections.abc import Container, Iterable, Sized, Hashable, Sequence

class Some:
    """Explicitly represent thing-ness as opposed to nothingness.

    Using a `Some` container makes it possible to tell apart the presence of
    a `None` value from the absence of a value::

        x = Some(42)    # we have a value, it's `42`
        x = Some(None)  # we have a value, it's `None`
        x = None        # we don't have a value

    Immutable, hashable single-item container. Compares equal to another
    `Some` holding an equal item.
    """
    def __init__(self, x=None):
        self.x = x
        self._immutable = True
    def __setattr__(self, k, v):
        if hasattr(self, "_immutable"):
            raise TypeError("'Some' object does not support attribute assignment")
        super().__setattr__(k, v)
    def __repr__(self):
        return f"Some({repr(self.x)})"
    def __contains__(self, x):
        return self.x == x
    def __iter__(self):
        return (x for x in (self.x,))
    def __len__(self):
        return 1
    def __eq__(self, other):
        if isinstance(other, Some):
            return self.x == other.x
        return NotImplemented
    def __hash__(self):
        return hash((Some, self.x))
    def get(self):
        """Return the value in the `Some`."""
        return self.x

for abscls in (Container, Iterable, Sized):
    abscls.register(Some)
del abscls

# -----------------------------------------------------------------------------

class FixedString:
    """Read-only text of at most ``capacity`` characters.

    Used for labels, such as the name a generator shows in its ``repr``
    and in diagnostics. Construction with longer text raises ``ValueError``.

    Compares equal to a ``FixedString`` or ``str`` with the same text;
    the capacity does not take part in comparisons.
    """
    def __init__(self, text, capacity=256):
        if not isinstance(text, str):
            raise TypeError(f"expected str text, got {type(text)} with value {repr(text)}")
        if not isinstance(capacity, int):
            raise TypeError(f"expected integer capacity, got {type(capacity)} with value {capacity}")
        if capacity < 0:
            raise ValueError(f"expected capacity >= 0, got {capacity}")
        if len(text) > capacity:
            raise ValueError(f"text of length {len(text)} does not fit in capacity {capacity}")
        self.text = text
        self.capacity = capacity
        self._immutable = True
    def __setattr__(self, k, v):
        if hasattr(self, "_immutable"):
            raise TypeError("'FixedString' object does not support attribute assignment")
        super().__setattr__(k, v)

    @property
    def view(self):
        """The text, as a read-only ``str``."""
        return self.text

    def __str__(self):
        return self.text
    def __repr__(self):
        return f"FixedString({repr(self.text)}, {self.capacity})"
    def __len__(self):
        return len(self.text)
    def __iter__(self):
        return iter(self.text)
    def __eq__(self, other):
        if isinstance(other, FixedString):
            return self.text == other.text
        if isinstance(other, str):
            return self.text == other
        return NotImplemented
    def __hash__(self):
        return hash(self.text)

def cstr(text):
    """Make a ``FixedString`` of the default capacity (256)."""
    return FixedString(text)

for abscls in (Container, Iterable, Sized, Hashable):
    abscls.register(FixedString)
del abscls

# -----------------------------------------------------------------------------

class SequenceView(Sequence):
    """ABC: view of a sequence.

    Provides the same API as ``collections.abc.Sequence``."""

class _StrReprEqMixin:
    def __str__(self):
        return str(list(self))
    def __repr__(self):
        return f"{self.__class__.__name__}({list(self)!r})"

    def __eq__(self, other):
        if other is self:
            return True
        if not isinstance(other, Sequence):
            return NotImplemented
        if len(self) != len(other):
            return False
        for v1, v2 in zip(self, other):
            if v1 != v2:
                return False
        return True
    __hash__ = None  # a live view into mutable data

def _check_count(name, n):
    if not isinstance(n, int):
        raise TypeError(f"expected integer {name}, got {type(n)} with value {n}")
    if n < 0:
        raise ValueError(f"expected {name} >= 0, got {n}")

class Slice(_StrReprEqMixin, SequenceView):
    """Non-owning, strided, fixed-length view into a sequence.

    Element ``i`` of the view is ``data[offset + i * stride]``. The view does
    not copy; writes through the view (``v[i] = x``) go to ``data``, and
    changes to ``data`` show through the view.

    The length is fixed when the view is created. If ``size`` is omitted, the
    view extends to the end of ``data``. A size that does not fit raises
    ``ValueError``.

    If ``data`` is itself a ``Slice`` (or ``Span``), the new view is re-based
    onto the underlying storage, so views of views do not stack up.

    Example::

        lst = list(range(10))
        v = Slice(lst, 1, stride=3)
        assert v == [1, 4, 7]
        v[1] = 42
        assert lst[4] == 42
        assert v.skip(2) == [1, 7]
    """
    def __init__(self, data, offset=0, size=None, stride=1):
        _check_count("offset", offset)
        if not isinstance(stride, int):
            raise TypeError(f"expected integer stride, got {type(stride)} with value {stride}")
        if stride < 1:
            raise ValueError(f"expected stride >= 1, got {stride}")
        available = len(range(offset, len(data), stride))
        if size is None:
            size = available
        else:
            _check_count("size", size)
            if size > available:
                raise ValueError(f"a view of size {size} at offset {offset} with stride {stride} does not fit in a sequence of length {len(data)}")
        if isinstance(data, Slice):  # de-onionize
            offset = data.offset + offset * data.stride
            stride = data.stride * stride
            data = data.data
        self.data = data
        self.offset = offset
        self.size = size
        self.stride = stride

    def _index(self, k):
        n = self.size
        if not isinstance(k, int):
            raise TypeError(f"expected integer index, got {type(k)} with value {k}")
        if k >= n or k < -n:
            raise IndexError(f"view index {k} out of range for a view of size {n}")
        if k < 0:
            k += n
        return self.offset + k * self.stride

    def _view(self, offset, size, stride=1):
        if stride == 1 and isinstance(self, Span):
            return Span(self, offset, size)
        return Slice(self, offset, size, stride)

    def __len__(self):
        return self.size
    def __iter__(self):
        data = self.data
        for j in range(self.offset, self.offset + self.size * self.stride, self.stride):
            yield data[j]
    def __reversed__(self):
        data = self.data
        for k in reversed(range(self.size)):
            yield data[self.offset + k * self.stride]

    def __getitem__(self, k):
        if isinstance(k, slice):
            r = range(self.size)[k]
            if r.step < 0:
                raise ValueError(f"views do not support negative strides; got {repr(k)}")
            if not r:
                return self._view(0, 0)
            return self._view(r.start, len(r), r.step)
        return self.data[self._index(k)]

    def __setitem__(self, k, v):
        self.data[self._index(k)] = v

    def empty(self):
        return self.size == 0
    def front(self):
        """Return the first element. The view must not be empty."""
        return self[0]
    def back(self):
        """Return the last element. The view must not be empty."""
        return self[-1]

    def first(self, n):
        """View the first ``n`` elements."""
        self._check_fits(n)
        return self._view(0, n)
    def last(self, n):
        """View the last ``n`` elements."""
        self._check_fits(n)
        return self._view(self.size - n, n)
    def drop_first(self, n):
        """View all but the first ``n`` elements."""
        self._check_fits(n)
        return self._view(n, self.size - n)
    def drop_last(self, n):
        """View all but the last ``n`` elements."""
        self._check_fits(n)
        return self._view(0, self.size - n)

    def skip(self, k):
        """View every ``k``th element, starting from the first.

        The result has ``ceil(len(self) / k)`` elements.
        """
        if not isinstance(k, int):
            raise TypeError(f"expected integer k, got {type(k)} with value {k}")
        if k < 1:
            raise ValueError(f"expected k >= 1, got {k}")
        return Slice(self, 0, len(range(0, self.size, k)), k)

    def _check_fits(self, n):
        _check_count("n", n)
        if n > self.size:
            raise ValueError(f"expected n <= {self.size} (the size of the view), got {n}")

class Span(Slice):
    """Non-owning, contiguous, fixed-length view into a sequence.

    Like ``Slice`` with ``stride=1``. A ``Span`` can be taken of another
    ``Span``, or of a ``Slice`` that is itself contiguous::

        lst = [1, 2, 3, 4, 5]
        s = Span(lst, 1, 3)
        assert s == [2, 3, 4]
        assert s.front() == 2 and s.back() == 4
        assert s.last(2) == [3, 4]
    """
    def __init__(self, data, offset=0, size=None):
        if isinstance(data, Slice) and data.stride != 1:
            raise TypeError(f"cannot take a contiguous Span of a Slice with stride {data.stride}")
        super().__init__(data, offset, size, 1)
