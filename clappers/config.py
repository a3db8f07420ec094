"""
Clappers configuration registry.

Overview
- ArgumentKind: the three kinds of declared arguments (flag, single, multiple).
- Config: per-kind alias tables (alias → canonical name) plus the set of
  canonical names, built from "|"-separated spec strings such as "h|help".

Registration rules
- The first alias of a spec is its canonical name.
- Every alias (canonical included) maps to the canonical name in that kind's
  table; re-declaring an alias overwrites the earlier mapping.
- Conflicts are never an error. Across kinds, the parser resolves a name with
  the fixed priority flags → singles → multiples (see Config.lookup).

Quick example:
    >>> config = Config()
    >>> config.register(ArgumentKind.FLAG, ["h|help"])
    >>> config.resolve(ArgumentKind.FLAG, "help")
    'h'
"""
import logging
from collections.abc import Iterable
from enum import Enum
from types import MappingProxyType

from .utils import *

logger = logging.getLogger(__name__)

# Separates the aliases of one argument in a spec string.
SEPARATOR = "|"


class ArgumentKind(Enum):
    """
    Kind of a declared argument; decides parsing behavior and accessor shape.

    The definition order is the lookup priority used while parsing.
    """
    FLAG = "flag"
    SINGLE = "single"
    MULTIPLE = "multiple"


class Config(metaclass=IntrospectableType):
    """
    Registry of declared arguments, one alias table per ArgumentKind.

    Properties
    - frozen: whether the registry was sealed (by the parser, once parsing starts).
    """

    __introspectable__ = (
        "frozen",
    )

    def __init__(self):
        self._aliases = {kind: {} for kind in ArgumentKind}
        self._names = {kind: set() for kind in ArgumentKind}
        self._frozen = False

    def register(self, kind, specs, /):
        """
        Add the given spec strings to the tables of `kind`.

        Parameters
        - kind: ArgumentKind
        - specs: Iterable[str]
          Each spec is split on SEPARATOR into aliases; the first is canonical.

        Raises
        - TypeError: kind is not an ArgumentKind, specs is a bare string or not
          iterable, a spec is not a string, or the registry is frozen.
        """
        if not isinstance(kind, ArgumentKind):
            raise TypeError("register() first argument must be an argument kind")
        if isinstance(specs, str) or not isinstance(specs, Iterable):
            raise TypeError("register() second argument must be an iterable of strings")
        if self._frozen:
            raise TypeError("register() cannot be called once parsing has started")

        # A rejected batch leaves the tables untouched.
        specs = list(specs)
        for spec in specs:
            if not isinstance(spec, str):
                raise TypeError("register() specs must be strings")

        aliases = self._aliases[kind]
        for spec in specs:
            # str.split never yields an empty list; kept as a no-op guard.
            if not (names := spec.split(SEPARATOR)):
                continue

            canonical = names[0]
            self._names[kind].add(canonical)

            for alias in names:
                if aliases.get(alias, canonical) != canonical:
                    logger.debug("%s alias %r moved from %r to %r", kind.value, alias, aliases[alias], canonical)
                aliases[alias] = canonical

    def resolve(self, kind, alias, /):
        """
        Return the canonical name `alias` stands for within `kind`, or None.
        """
        return self._aliases[kind].get(alias)

    def lookup(self, alias, /):
        """
        Resolve `alias` across every kind, in priority order.

        Returns
        - tuple[ArgumentKind, str]: the first kind whose table knows `alias`
          and the canonical name it maps to.
        - None: no table knows `alias`.
        """
        for kind in ArgumentKind:
            if (canonical := self._aliases[kind].get(alias)) is not None:
                return kind, canonical
        return None

    def names(self, kind, /):
        """
        Return the canonical names declared for `kind` as a frozenset.
        """
        return frozenset(self._names[kind])

    def aliases(self, kind, /):
        """
        Return a read-only view of the alias table for `kind`.
        """
        return MappingProxyType(self._aliases[kind])

    def freeze(self):
        """
        Seal the registry; later register() calls raise TypeError.
        """
        self._frozen = True

    def __rich_repr__(self):
        for kind in ArgumentKind:
            yield kind.value, {
                canonical: sorted(alias for alias, name in self._aliases[kind].items() if name == canonical)
                for canonical in sorted(self._names[kind])
            }
        yield "frozen", self.frozen


__all__ = (
    "ArgumentKind",
    "Config",
    "SEPARATOR",
)
