# -*- coding: utf-8 -*-

import pytest

from lazyseq.collections import Some
from lazyseq.dispatch import Mapping, PolymorphicMapper, classify
from lazyseq.it import ls, map, to_list

class Shape:
    pass
class Circle(Shape):
    pass
class Unit(Circle):
    pass
class Square(Shape):
    pass

def test_first_match_wins():
    specific_first = PolymorphicMapper(Shape, str,
                                       Mapping(Unit, "unit"),
                                       Mapping(Circle, "circle"))
    assert specific_first.map(Unit()) == Some("unit")
    assert specific_first.map(Circle()) == Some("circle")

    general_first = PolymorphicMapper(Shape, str,
                                      Mapping(Circle, "circle"),
                                      Mapping(Unit, "unit"))
    assert general_first.map(Unit()) == Some("circle")

def test_no_match():
    m = PolymorphicMapper(Shape, str, Mapping(Circle, "circle"))
    assert m.map(Square()) is None
    assert m.map(Shape()) is None
    assert PolymorphicMapper(Shape, str).map(Circle()) is None

def test_none_tag_is_a_match():
    m = PolymorphicMapper(Shape, object, (Square, None))
    result = m.map(Square())
    assert result is not None
    assert result == Some(None)
    assert result.get() is None

def test_contract():
    with pytest.raises(TypeError):
        PolymorphicMapper(Shape(), str)  # base must be a class
    with pytest.raises(TypeError):
        PolymorphicMapper(Shape, "str")  # target must be a class
    with pytest.raises(TypeError):
        PolymorphicMapper(Circle, str, Mapping(Square, "square"))  # not a subclass of the base
    with pytest.raises(TypeError):
        PolymorphicMapper(Shape, str, Mapping(Circle, 42))  # tag of wrong type
    m = PolymorphicMapper(Shape, str, Mapping(Circle, "circle"))
    with pytest.raises(TypeError):
        m.map(42)  # not a Shape

def test_classify():
    assert classify(3, (str, "s"), (int, "i")) == Some("i")
    assert classify(3.0, (str, "s"), (int, "i")) is None
    assert classify(True, (int, "int"), (bool, "bool")) == Some("int")
    assert classify(True, (bool, "bool"), (int, "int")) == Some("bool")

def test_mapper_as_a_sequence_function():
    shapes = PolymorphicMapper(Shape, str,
                               Mapping(Unit, "unit"),
                               Mapping(Circle, "circle"))
    assert to_list(map(shapes, ls(Unit(), Square(), Circle()))) == [Some("unit"), None, Some("circle")]
