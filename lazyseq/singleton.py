# -*- coding: utf-8; -*-
"""A pickle-aware singleton abstraction.

Inherit from `Singleton` to make a class have at most one instance.

- Calling the constructor while an instance exists is a `TypeError`. Obtain
  the instance by keeping a reference to it (e.g. the module-level `nil`).

- Unpickling an instance of a singleton type returns the existing instance,
  if there is one. This keeps identity checks such as ``s is nil`` working for
  sequences loaded from a pickle dump.

Only weak references are kept, so a singleton instance nobody refers to can
be garbage collected; after that, a new one may be created.
"""

__all__ = ["Singleton"]

import threading
from weakref import WeakValueDictionary

# Kept outside the classes, so that unpickling cannot clobber it.
_instances = WeakValueDictionary()
_instances_update_lock = threading.RLock()

class ThereCanBeOnlyOne(type):
    """Metaclass: refuse to construct a second instance.

    Constructor calls go through the metaclass ``__call__``; unpickling does
    not, it calls ``__new__`` directly, which `Singleton` redirects to the
    existing instance.
    """
    def __call__(cls, *args, **kwargs):
        with _instances_update_lock:
            if cls in _instances:
                raise TypeError(f"Singleton instance of {cls} already exists")
            instance = cls.__new__(cls, *args, **kwargs)
            cls.__init__(instance, *args, **kwargs)
            return instance

class Singleton(metaclass=ThereCanBeOnlyOne):
    """Base class for singletons. Can be used as a mixin.

    If the derived class needs another metaclass too, define a metaclass that
    inherits from both that one and `ThereCanBeOnlyOne` (no body needed), and
    use it as the metaclass of the derived class.
    """
    def __new__(cls, *args, **kwargs):
        try:  # EAFP, the instance usually exists.
            return _instances[cls]
        except KeyError:
            with _instances_update_lock:
                if cls not in _instances:
                    instance = _instances[cls] = super().__new__(cls)
                else:
                    instance = _instances[cls]
            return instance
