# -*- coding: utf-8; -*-
"""Closed-set kind dispatch: map a value to a tag by its type.

A ``PolymorphicMapper`` holds an ordered list of ``(kind, tag)`` pairs.
Mapping a value returns the tag of the **first** listed kind the value is
an instance of, wrapped in a ``Some``, or ``None`` if no kind matches::

    class Shape: pass
    class Circle(Shape): pass
    class Unit(Circle): pass

    shapes = PolymorphicMapper(Shape, str,
                               Mapping(Unit, "unit circle"),
                               Mapping(Circle, "circle"))
    assert shapes.map(Unit()) == Some("unit circle")
    assert shapes.map(Circle()) == Some("circle")
    assert shapes.map(Shape()) is None

Order matters: list more specific kinds first. The mapper is a plain
callable too, so it can be placed before or after a sequence combinator::

    tags = map(shapes, lseq(figures))
"""

__all__ = ["Mapping", "PolymorphicMapper", "classify"]

from collections import namedtuple
from inspect import isclass

from .collections import Some

Mapping = namedtuple("Mapping", ["kind", "tag"])
Mapping.__doc__ = """One ``(kind, tag)`` entry of a ``PolymorphicMapper``.

``kind`` is a class; ``tag`` is the value returned for instances of it."""

class PolymorphicMapper:
    """Map instances of subclasses of ``base`` to tags of type ``target``.

    base:     The class all mapped values must be instances of.
    target:   The type all tags must be instances of. Use ``object`` to
              allow anything.
    mappings: ``Mapping`` instances (or ``(kind, tag)`` pairs), checked in
              the given order.

    Each ``kind`` must be a subclass of ``base``, and each ``tag`` an instance
    of ``target``; otherwise ``TypeError`` is raised at construction time.
    """
    def __init__(self, base, target, *mappings):
        if not isclass(base):
            raise TypeError(f"base: expected a class, got {type(base)} with value {repr(base)}")
        if not isclass(target):
            raise TypeError(f"target: expected a class, got {type(target)} with value {repr(target)}")
        checked = []
        for m in mappings:
            kind, tag = m
            if not (isclass(kind) and issubclass(kind, base)):
                raise TypeError(f"kind: expected a subclass of {base.__name__}, got {repr(kind)}")
            if not isinstance(tag, target):
                raise TypeError(f"tag: expected an instance of {target.__name__}, got {type(tag)} with value {repr(tag)}")
            checked.append(Mapping(kind, tag))
        self.base = base
        self.target = target
        self.mappings = tuple(checked)

    def map(self, value):
        """Return ``Some(tag)`` for the first matching kind, or ``None``."""
        if not isinstance(value, self.base):
            raise TypeError(f"expected an instance of {self.base.__name__}, got {type(value)} with value {repr(value)}")
        for kind, tag in self.mappings:
            if isinstance(value, kind):
                return Some(tag)
        return None
    __call__ = map

    def __repr__(self):  # pragma: no cover
        entries = ", ".join(f"{kind.__name__} -> {repr(tag)}" for kind, tag in self.mappings)
        return f"<PolymorphicMapper {self.base.__name__} -> {self.target.__name__}: [{entries}]>"

def classify(value, *mappings):
    """One-shot form of ``PolymorphicMapper``, with no base or target constraint.

    ``mappings`` are ``(kind, tag)`` pairs. Returns ``Some(tag)`` or ``None``.
    """
    return PolymorphicMapper(object, object, *mappings).map(value)
