"""
Accessor behavioral tests (get_flag, get_single, get_multiple, get_leftovers).

Scope
- Validate defaults for unknown and unset arguments.
- Validate that every alias of an argument answers identically.
- Validate that results cannot be mutated through the public surface.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from rich.console import Console
from rich.table import Table

from clappers import Clappers, Values


def _compiler(argv):
    return (
        Clappers.build()
        .add_flags(["h|help", "v|verbose"])
        .add_singles(["o|output"])
        .add_multiples(["i|input", "I", "L"])
        .parse(argv)
    )


class TestDefaults(TestCase):
    """Unknown or unset arguments fall back to False, "" and []."""

    def testUnknownAliasDefaults(self):
        clappers = _compiler(["cc", "-h", "-o", "a.out", "-i", "main.c", "left"])
        self.assertFalse(clappers.get_flag("nope"))
        self.assertEqual(clappers.get_single("nope"), "")
        self.assertEqual(clappers.get_multiple("nope"), [])

    def testUnsetDefaults(self):
        clappers = _compiler(["cc"])
        self.assertFalse(clappers.get_flag("help"))
        self.assertEqual(clappers.get_single("output"), "")
        self.assertEqual(clappers.get_multiple("input"), [])
        self.assertEqual(clappers.get_leftovers(), [])

    def testAccessorsDoNotCrossKinds(self):
        clappers = _compiler(["cc", "-h", "-o", "a.out"])
        self.assertEqual(clappers.get_single("help"), "")
        self.assertFalse(clappers.get_flag("output"))
        self.assertEqual(clappers.get_multiple("output"), [])

    def testQueriesBeforeParseReturnDefaults(self):
        clappers = Clappers.build().add_flags(["h"])
        self.assertFalse(clappers.get_flag("h"))
        self.assertEqual(clappers.get_leftovers(), [])

    def testEmptyNameIsNotLeftovers(self):
        clappers = Clappers.build().parse(["prog", "file"])
        self.assertEqual(clappers.get_multiple(""), [])
        self.assertEqual(clappers.get_leftovers(), ["file"])


class TestAliasEquivalence(TestCase):
    """Every alias of one argument yields the same answer."""

    def testFlagAliases(self):
        clappers = _compiler(["cc", "--verbose"])
        self.assertEqual(clappers.get_flag("v"), clappers.get_flag("verbose"))
        self.assertTrue(clappers.get_flag("v"))

    def testSingleAliases(self):
        clappers = _compiler(["cc", "-o", "a.out"])
        self.assertEqual(clappers.get_single("o"), clappers.get_single("output"))

    def testMultipleAliases(self):
        clappers = _compiler(["cc", "--input", "a.c", "-i", "b.c"])
        self.assertEqual(clappers.get_multiple("i"), ["a.c", "b.c"])
        self.assertEqual(clappers.get_multiple("i"), clappers.get_multiple("input"))


class TestReadOnly(TestCase):
    """Results are snapshots; callers cannot alter the store."""

    def testMultipleListIsCopy(self):
        clappers = _compiler(["cc", "-I", "include"])
        clappers.get_multiple("I").append("mutated")
        self.assertEqual(clappers.get_multiple("I"), ["include"])

    def testLeftoversListIsCopy(self):
        clappers = _compiler(["cc", "x"])
        clappers.get_leftovers().clear()
        self.assertEqual(clappers.get_leftovers(), ["x"])

    def testValuesPropertiesAreFrozen(self):
        values = _compiler(["cc", "-h", "-o", "a.out", "-L", "lib", "x"]).values
        self.assertEqual(values.flags, frozenset({"h"}))
        self.assertEqual(dict(values.singles), {"o": "a.out"})
        self.assertEqual(dict(values.multiples), {"L": ("lib",)})
        self.assertEqual(values.leftovers, ("x",))
        with self.assertRaises(TypeError):
            values.singles["o"] = "other"  # type: ignore[index]

    def testParserPropertiesAreReadOnly(self):
        clappers = _compiler(["cc"])
        with self.assertRaises(AttributeError):
            clappers.values = Values()  # type: ignore[misc]


class TestRendering(TestCase):
    """Rich integration of the values store."""

    def testRichRendersTable(self):
        values = _compiler(["cc", "-v", "-o", "a.out", "-i", "a.c", "left"]).values
        table = values.__rich__()
        self.assertIsInstance(table, Table)
        self.assertEqual(table.row_count, 4)

    def testConsoleOutputMentionsValues(self):
        values = _compiler(["cc", "-o", "a.out", "left"]).values
        console = Console(width=100, record=True, color_system=None)
        console.print(values)
        text = console.export_text()
        self.assertIn("a.out", text)
        self.assertIn("left", text)

    def testReprListsFields(self):
        values = _compiler(["cc", "x"]).values
        self.assertIn("leftovers=('x',)", repr(values))
        self.assertTrue(repr(values).startswith("values("))


if __name__ == "__main__":
    unittest.main()
