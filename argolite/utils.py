"""
Argolite utilities (internal helpers).

Overview
- UnsetType / Unset
  • Singleton sentinel meaning "not provided", distinct from None (a description
    of None is rejected, an omitted description is not).
- coalesce(value, default=None)
  • Materialize Unset into a concrete default; every other value passes through.
- rename(callable, name) / @rename("name")
  • Give generated accessors a readable __name__/__qualname__.
- mirror("attr")
  • Read-only property exposing the private backing field self._attr. Lists and
    dicts are handed out as fresh copies so a host cannot edit a descriptor's
    destination behind the registry's back.

Quick examples
    >>> coalesce(Unset, ",")
    ','
    >>> coalesce(None, ",") is None
    True
"""
import builtins
import functools
from collections.abc import Mapping, Sequence
from typing import final


@final
class UnsetType:
    """
    Sentinel type for "value not provided".

    - Falsy, prints as "Unset", one instance per process, cannot be subclassed.
    - Participates in PEP 604 unions so isinstance(x, str | Unset) reads naturally.
    """

    def __or__(self, other, /):
        try:
            return type(self) | other
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Return object unless it is Unset, in which case return default.

    Falsy values (None, 0, "", []) are preserved; only the sentinel is replaced.
    """
    return object if object is not Unset else default


def rename(*parameters):
    """
    Set __name__/__qualname__ on a callable, or return a decorator doing so.

    - rename(callable, name) renames in place and returns the callable.
    - rename(name) returns a decorator.
    """
    match len(parameters):
        case 2:
            callable, name = parameters
            if not builtins.callable(callable):
                raise TypeError("rename() first argument must be callable")
            if not isinstance(name, str):
                raise TypeError("rename() second argument must be a string")
            try:
                callable.__qualname__ = name
                callable.__name__ = name
            except (AttributeError, TypeError):
                raise TypeError("rename() first argument must be a updatable callable") from None
            return callable
        case 1:
            name, = parameters
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def wrapper(callable):
                if not builtins.callable(callable):
                    raise TypeError("@rename() must be applied to a callable")
                return rename(callable, name)

            return rename(wrapper, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


def _detach(object):
    """
    Copy lists and dicts (recursively) so callers get a snapshot, not the backing store.
    """
    if isinstance(object, Sequence) and not isinstance(object, str | bytes | bytearray):
        return list(map(_detach, object))
    elif isinstance(object, Mapping):
        return dict(zip(object.keys(), map(_detach, object.values())))
    return object


def mirror(name, /):
    """
    Define a read-only property over the backing attribute "_{name}".

    Example
        class Option:
            value = mirror("value")   # reads self._value, lists come back copied
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        return _detach(getattr(self, "_" + name))

    return property(getter)


Unset = UnsetType()


__all__ = (
    # Functions
    "coalesce",
    "rename",
    "mirror",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
