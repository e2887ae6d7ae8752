# -*- coding: utf-8 -*-

import pickle

import pytest

from lazyseq.singleton import Singleton

class Config(Singleton):
    def __init__(self, x=1):
        self.x = x

def test_singleton():
    c = Config(x=42)
    with pytest.raises(TypeError):
        Config()
    d = pickle.loads(pickle.dumps(c))
    assert d is c
    assert d.x == 42
