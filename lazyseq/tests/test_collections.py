# -*- coding: utf-8 -*-

from collections.abc import Sequence

import pytest

from lazyseq.collections import Some, FixedString, cstr, SequenceView, Slice, Span

def test_some():
    assert Some(42).get() == 42
    assert Some(None) is not None
    assert Some(None) != None  # noqa: E711, the point of `Some`
    assert Some(1) == Some(1)
    assert Some(1) != Some(2)
    assert hash(Some(1)) == hash(Some(1))
    assert len(Some(1)) == 1
    assert list(Some("x")) == ["x"]
    assert "x" in Some("x")
    assert repr(Some(None)) == "Some(None)"
    with pytest.raises(TypeError):
        Some(1).x = 2

def test_fixed_string():
    s = cstr("primes")
    assert isinstance(s, FixedString)
    assert s == "primes"
    assert s == FixedString("primes", 10)  # capacity does not take part
    assert s != "nats"
    assert str(s) == "primes"
    assert s.view == "primes"
    assert len(s) == 6
    assert s.capacity == 256
    assert list(FixedString("ab")) == ["a", "b"]
    assert hash(cstr("a")) == hash("a")
    assert repr(FixedString("ab", 3)) == "FixedString('ab', 3)"
    assert FixedString("", 0) == ""

    with pytest.raises(ValueError):
        FixedString("abc", 2)
    with pytest.raises(ValueError):
        cstr("x" * 257)
    with pytest.raises(ValueError):
        FixedString("", -1)
    with pytest.raises(TypeError):
        FixedString(42)
    with pytest.raises(TypeError):
        FixedString("abc", 2.5)
    with pytest.raises(TypeError):
        s.text = "nats"

def test_span():
    lst = [1, 2, 3, 4, 5]
    s = Span(lst, 1, 3)
    assert isinstance(s, SequenceView)
    assert isinstance(s, Sequence)
    assert s == [2, 3, 4]
    assert [2, 3, 4] == s
    assert s != [2, 3]
    assert len(s) == 3
    assert s.front() == 2
    assert s.back() == 4
    assert s[-1] == 4
    assert list(reversed(s)) == [4, 3, 2]
    assert str(s) == "[2, 3, 4]"
    assert repr(s) == "Span([2, 3, 4])"
    assert not s.empty()
    assert Span(lst, 5).empty()
    assert Span([]).empty()

    assert s.first(2) == [2, 3]
    assert s.last(2) == [3, 4]
    assert s.drop_first(1) == [3, 4]
    assert s.drop_last(1) == [2, 3]
    assert s.first(3) == s  # the whole view is allowed
    assert s.first(0).empty()
    assert isinstance(s.first(2), Span)
    assert isinstance(s[1:], Span)
    assert s[1:] == [3, 4]
    assert s[5:2] == []

    with pytest.raises(IndexError):
        s[3]
    with pytest.raises(IndexError):
        s[-4]
    with pytest.raises(ValueError):
        s.first(4)
    with pytest.raises(ValueError):
        s.last(-1)
    with pytest.raises(ValueError):
        Span(lst, 3, 5)
    with pytest.raises(TypeError):
        hash(s)

def test_span_writes_through():
    lst = [1, 2, 3, 4, 5]
    s = Span(lst, 1, 3)
    s[0] = 42
    assert lst == [1, 42, 3, 4, 5]
    lst[3] = 23
    assert s == [42, 3, 23]
    with pytest.raises(TypeError):
        Span((1, 2, 3))[0] = 4  # read-only underlying storage

def test_slice():
    lst = list(range(10))
    v = Slice(lst, 1, stride=3)
    assert v == [1, 4, 7]
    assert len(v) == 3
    assert v.skip(2) == [1, 7]
    assert v.drop_first(1) == [4, 7]
    assert v.drop_last(1) == [1, 4]
    assert v.first(2) == [1, 4]
    assert v.last(1) == [7]
    assert v[::2] == [1, 7]
    assert list(reversed(v)) == [7, 4, 1]
    assert Slice(lst, 0, 3, 2) == [0, 2, 4]

    v[1] = 42
    assert lst[4] == 42

    with pytest.raises(ValueError):
        v[::-1]
    with pytest.raises(ValueError):
        Slice(lst, stride=0)
    with pytest.raises(ValueError):
        Slice(lst, 0, 11)
    with pytest.raises(ValueError):
        Slice(lst, 0, 6, 2)
    with pytest.raises(TypeError):
        Slice(lst, 1.0)
    with pytest.raises(TypeError):
        Span(v)  # not contiguous

def test_skip_length():
    assert Slice(list(range(8))).skip(3) == [0, 3, 6]
    assert Slice(list(range(9))).skip(3) == [0, 3, 6]
    assert Slice(list(range(10))).skip(3) == [0, 3, 6, 9]
    assert Slice(list(range(5))).skip(1) == [0, 1, 2, 3, 4]
    assert Slice([]).skip(2).empty()
    with pytest.raises(ValueError):
        Slice([1]).skip(0)

def test_views_of_views_are_rebased():
    lst = list(range(20))
    v = Slice(lst, 1, stride=3)  # 1, 4, 7, 10, 13, 16, 19
    w = Slice(v, 1, stride=2)    # 4, 10, 16
    assert w == [4, 10, 16]
    assert w.data is lst
    assert w.offset == 4
    assert w.stride == 6

    s = Span(Span(lst, 5, 10), 2, 3)
    assert s == [7, 8, 9]
    assert s.data is lst
    assert s.offset == 7
