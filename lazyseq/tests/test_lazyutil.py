# -*- coding: utf-8 -*-

import pytest

from lazyseq.lazyutil import Lazy, force1

def test_computes_once():
    calls = []
    def thunk():
        calls.append(1)
        return 42
    p = Lazy(thunk)
    assert calls == []
    assert p.force() == 42
    assert p() == 42
    assert force1(p) == 42
    assert calls == [1]

def test_caches_exceptions():
    calls = []
    def thunk():
        calls.append(1)
        raise ValueError("nope")
    p = Lazy(thunk)
    with pytest.raises(ValueError, match="nope"):
        p.force()
    with pytest.raises(ValueError, match="nope"):
        p.force()
    assert calls == [1]

def test_force1_passes_through_other_values():
    assert force1(42) == 42
    assert force1(None) is None

def test_thunk_must_be_callable():
    with pytest.raises(TypeError):
        Lazy(42)
