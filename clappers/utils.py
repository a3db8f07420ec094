"""
Clappers utilities (internal helpers)

Scope
- Small building blocks shared by the config, values and parser layers.

Overview
- UnsetType / Unset
  • Singleton sentinel meaning "argument not provided", distinct from None.
  • Falsey, printable as "Unset", and non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default; every other value passes through.

- rename(callable, name) / @rename("name")
  • Assign a stable __name__/__qualname__ to generated accessors.

- mirror("attr")
  • Read-only property exposing a private backing field (self._attr) as a
    frozen snapshot, so parse results cannot be mutated through the public API.

- IntrospectableType
  • Metaclass wiring mirror() properties and __repr__/__rich_repr__ from the
    class-level __introspectable__ tuple.

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> coalesce(None, "fallback") is None
    True
    >>> class X:
    ...     def __init__(self):
    ...         self._items = [1, 2]
    ...     items = mirror("items")
    >>> X().items
    (1, 2)
"""
import builtins
import functools
from collections.abc import Sequence, Mapping, Set
from types import MappingProxyType
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type for a parameter that was not provided.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None.
    - Printable: repr(Unset) -> "Unset".
    - Singleton per process: UnsetType() always yields the same instance.
    - Sealed: subclassing raises TypeError.
    """

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
    Resolve the Unset sentinel to a concrete default.

    Falsey values such as None, "" or [] are preserved; only Unset is replaced.
    """
    return object if object is not Unset else default


def rename(*parameters):
    """
    Set __name__/__qualname__ on a callable, or return a decorator that will.

    Forms
    - rename(callable, name) -> callable (renamed in place)
    - rename(name) -> decorator
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


def _freeze(object):
    """
    Shallow-freeze a container into its read-only counterpart.

    - Sequence (non-string) → tuple
    - Mapping → MappingProxyType over a copy (nested values frozen too)
    - Set → frozenset
    - anything else → unchanged
    """
    if isinstance(object, Sequence) and not isinstance(object, (str, bytes, bytearray)):
        return tuple(object)
    elif isinstance(object, Mapping):
        return MappingProxyType(dict(zip(object.keys(), map(_freeze, object.values()))))
    elif isinstance(object, Set):
        return frozenset(object)
    return object


def mirror(name, /):
    """
    Define a read-only property that mirrors the private attribute "_{name}".

    Containers are returned as frozen snapshots taken at access time, so
    callers observe the current state but cannot write through it.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        return _freeze(getattr(self, "_" + name))

    return property(getter)


Unset = UnsetType()
"""
Internal sentinel for "not provided".

Typical pattern: `def parse(self, argv=Unset)` then branch on `argv is Unset`
to fall back to sys.argv while still rejecting an explicit None.
"""


class IntrospectableType(type):
    """
    Metaclass giving registry/store/parser classes a uniform surface.

    Responsibilities
    - Expose every name in __introspectable__ as a read-only property via
      mirror(), backed by the instance's "_{name}" attribute.
    - Provide __rich_repr__ yielding (name, value) pairs for __displayable__
      (falls back to __introspectable__) and a stable __repr__ built from it.
    - __typename__ is the lowercased class name, used in repr and messages.
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": name.lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)

        @rename("__repr__")
        def __repr__(self):
            return "%s(%s)" % (
                type(self).__typename__,
                ", ".join("%s=%r" % pair for pair in self.__rich_repr__()),
            )

        if "__rich_repr__" not in namespace:
            self.__rich_repr__ = __rich_repr__
        if "__repr__" not in namespace:
            self.__repr__ = __repr__
        return self


__all__ = (
    # Functions
    "coalesce",
    "rename",
    "mirror",

    # Types
    "UnsetType",
    "IntrospectableType",

    # Constants
    "Unset",
)
