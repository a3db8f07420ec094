"""
Clappers values store: the result of one parse pass.

Contents
- flags: canonical names of the flags that were present.
- singles: canonical name → the one supplied value (last occurrence wins).
- multiples: canonical name → values in encounter order. A multiple seen
  without any value maps to an empty list, unlike one never seen at all.
- leftovers: tokens not consumed by any recognized option, in encounter order.

Only the parser writes to a store (through the underscore methods below); the
public properties return frozen snapshots.
"""
from rich.table import Table
from rich.text import Text

from .utils import *


class Values(metaclass=IntrospectableType):
    """
    Parsed values keyed by canonical name, plus leftovers.
    """

    __introspectable__ = (
        "flags",
        "singles",
        "multiples",
        "leftovers",
    )

    def __init__(self):
        self._flags = set()
        self._singles = {}
        self._multiples = {}
        self._leftovers = []

    def _set_flag(self, name, /):
        self._flags.add(name)

    def _set_single(self, name, value, /):
        self._singles[name] = value

    def _open_multiple(self, name, /):
        # The list must exist even if no value follows the option.
        return self._multiples.setdefault(name, [])

    def _add_leftover(self, token, /):
        self._leftovers.append(token)

    def __eq__(self, other):
        if not isinstance(other, Values):
            return NotImplemented
        return (
            self._flags == other._flags and
            self._singles == other._singles and
            self._multiples == other._multiples and
            self._leftovers == other._leftovers
        )

    __hash__ = None

    def __rich__(self):
        """
        Render the store as a table: one row per recorded argument, then leftovers.
        """
        table = Table(title="parsed arguments", title_justify="left")
        table.add_column("kind", style="dim")
        table.add_column("name", style="bold")
        table.add_column("value")

        for name in sorted(self._flags):
            table.add_row("flag", name, Text("present", style="green"))
        for name, value in sorted(self._singles.items()):
            table.add_row("single", name, repr(value))
        for name, values in sorted(self._multiples.items()):
            table.add_row("multiple", name, ", ".join(map(repr, values)) or Text("(none)", style="dim"))
        if self._leftovers:
            table.add_row("leftovers", "", ", ".join(map(repr, self._leftovers)))
        return table


__all__ = (
    "Values",
)
