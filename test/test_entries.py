"""
Entry model and assembler tests.

Scope
- FlagEntry canonical rendering for bool, inline and separate-value flags.
- FlagEntry edit helpers (with_value, with_no_value, with_inline, ...).
- TerminatorEntry singleton and UnnamedArgsEntry sequence behavior.
- assemble(): folding token streams into entries, and the round trip from
  entries back to the original raw vector.
"""
import unittest
from unittest import TestCase

from argscan import Args
from argscan.entries import *
from argscan.scanner import scan


class TestFlagEntry(TestCase):
    """Rendering and editing of flag entries."""

    def testSeparateValue(self):
        self.assertEqual(FlagEntry("o", "out.txt").tokens(), ["-o", "out.txt"])
        self.assertEqual(FlagEntry("o", "out.txt", double_dashed=True).tokens(), ["--o", "out.txt"])

    def testInlineValue(self):
        self.assertEqual(FlagEntry("o", "out.txt", inline=True).tokens(), ["-o=out.txt"])

    def testBool(self):
        self.assertEqual(FlagEntry.boolean("v").tokens(), ["-v"])
        self.assertEqual(FlagEntry.boolean("v", "false").tokens(), ["-v=false"])
        self.assertTrue(FlagEntry.boolean("v", "false").inline)

    def testValuelessNonBoolRendersEmptyValue(self):
        self.assertEqual(FlagEntry("s").tokens(), ["-s", ""])
        self.assertEqual(FlagEntry("s", double_dashed=True).with_name("t").tokens(), ["--t", ""])

    def testStrAndCount(self):
        entry = FlagEntry("o", "out.txt", double_dashed=True)
        self.assertEqual(str(entry), "--o out.txt")
        self.assertEqual(entry.count, 2)
        self.assertEqual(FlagEntry.boolean("v").count, 1)
        self.assertIs(entry.kind, EntryKind.FLAG)

    def testWithValueOnBoolKeepsBoolForLiterals(self):
        entry = FlagEntry.boolean("b").with_value("false")
        self.assertTrue(entry.bool)
        self.assertEqual(entry.tokens(), ["-b=false"])

    def testWithValueOnBoolNonLiteralTurnsNonBool(self):
        entry = FlagEntry.boolean("b").with_value("some")
        self.assertFalse(entry.bool)
        self.assertEqual(entry.tokens(), ["-b=some"])

    def testWithEmptyValueOnBoolDropsValue(self):
        entry = FlagEntry.boolean("b", "true").with_value("")
        self.assertEqual(entry, FlagEntry.boolean("b"))

    def testWithValueOnNonBool(self):
        self.assertEqual(FlagEntry("s", "a").with_value("b").tokens(), ["-s", "b"])
        self.assertEqual(FlagEntry("s", "a", inline=True).with_value("b").tokens(), ["-s=b"])

    def testWithSameValueIsIdentity(self):
        entry = FlagEntry("s", "a")
        self.assertIs(entry.with_value("a"), entry)

    def testWithNoValue(self):
        entry = FlagEntry("s", "a", inline=True, double_dashed=True).with_no_value()
        self.assertEqual(entry.tokens(), ["--s"])
        self.assertTrue(entry.bool)
        self.assertIsNone(entry.value)

    def testWithInlineMakesImplicitTrueExplicit(self):
        self.assertEqual(FlagEntry.boolean("v").with_inline(True).tokens(), ["-v=true"])

    def testWithoutInlineMakesNonBool(self):
        entry = FlagEntry.boolean("v").with_inline(True).with_inline(False)
        self.assertFalse(entry.bool)
        self.assertEqual(entry.tokens(), ["-v", "true"])
        self.assertEqual(FlagEntry("x", "1", inline=True).with_inline(False).tokens(), ["-x", "1"])

    def testWithoutInlineOnBareBoolGivesEmptyValue(self):
        entry = FlagEntry("v", "", inline=True, bool=True).with_inline(False)
        self.assertEqual(entry.tokens(), ["-v", ""])

    def testWithNameAndDashes(self):
        entry = FlagEntry("x", "5", double_dashed=True).with_name("y").with_double_dashes(False)
        self.assertEqual(entry.tokens(), ["-y", "5"])

    def testEditsDoNotMutate(self):
        entry = FlagEntry("x", "5")
        entry.with_name("y")
        entry.with_value("6")
        self.assertEqual(entry, FlagEntry("x", "5"))

    def testValidation(self):
        with self.assertRaises(ValueError):
            FlagEntry("")
        with self.assertRaises(TypeError):
            FlagEntry(1)
        with self.assertRaises(TypeError):
            FlagEntry("x", 1)

    def testRepr(self):
        self.assertEqual(
            repr(FlagEntry("x", "4", inline=True)),
            "flag-entry(name='x', value='4', inline=True, double_dashed=False, bool=False)",
        )


class TestOtherEntries(TestCase):
    """Terminator and positional runs."""

    def testTerminatorSingleton(self):
        self.assertIs(TerminatorEntry(), TERMINATOR)
        self.assertEqual(TERMINATOR.tokens(), ["--"])
        self.assertIs(TERMINATOR.kind, EntryKind.TERMINATOR)
        self.assertEqual(repr(TERMINATOR), "TERMINATOR")

    def testUnnamedArgsSequence(self):
        entry = UnnamedArgsEntry(["a", "-b", "--"])
        self.assertEqual(list(entry), ["a", "-b", "--"])
        self.assertEqual(len(entry), 3)
        self.assertEqual(entry[1], "-b")
        self.assertEqual(entry.tokens(), ["a", "-b", "--"])
        self.assertEqual(str(entry), "a -b --")
        self.assertIs(entry.kind, EntryKind.UNNAMED_ARGS)

    def testUnnamedArgsEquality(self):
        self.assertEqual(UnnamedArgsEntry(["a"]), UnnamedArgsEntry(("a",)))
        self.assertNotEqual(UnnamedArgsEntry(["a"]), UnnamedArgsEntry(["b"]))

    def testUnnamedArgsRejectsNonStrings(self):
        with self.assertRaises(TypeError):
            UnnamedArgsEntry(["a", 1])


class TestAssemble(TestCase):
    """Folding tokens into entries."""

    def testMixedVector(self):
        args = Args(
            ["-s", "some", "--unk1", "unk_val1", "-b", "--unk2=unk_val2", "--b2=true", "-unk3", "--", "rem", "rem2"],
            {"b": True, "b2": True, "s": False},
        )
        self.assertEqual(list(args.entries()), [
            FlagEntry("s", "some"),
            FlagEntry("unk1", "unk_val1", double_dashed=True),
            FlagEntry.boolean("b"),
            FlagEntry("unk2", "unk_val2", inline=True, double_dashed=True),
            FlagEntry.boolean("b2", "true").with_double_dashes(True),
            FlagEntry.boolean("unk3"),
            TERMINATOR,
            UnnamedArgsEntry(["rem", "rem2"]),
        ])

    def testTerminatorLocksEverythingAfterIt(self):
        args = Args(["-s", "some", "--", "-b"], {"s": False, "b": True})
        self.assertEqual(list(args.entries()), [
            FlagEntry("s", "some"),
            TERMINATOR,
            UnnamedArgsEntry(["-b"]),
        ])

    def testAmbiguousAsBoolPolicy(self):
        args = Args(["--x", "abc", "--y"], ambiguous_as_bool=True)
        self.assertEqual(list(args.entries()), [
            FlagEntry.boolean("x").with_double_dashes(True),
            UnnamedArgsEntry(["abc", "--y"]),
        ])

    def testTrailingFlagWithoutValue(self):
        entries = list(Args(["-s"], {"s": False}).entries())
        self.assertEqual(entries, [FlagEntry("s")])
        self.assertEqual(entries[0].tokens(), ["-s"])
        # edits keep the bare rendering while the value stays missing
        self.assertEqual(entries[0].with_name("t").tokens(), ["-t"])
        self.assertEqual(entries[0].with_value("x").tokens(), ["-s", "x"])

    def testUnresolvedRawTokens(self):
        # plain iteration of the raw scanner never asks for values
        self.assertEqual(list(assemble(scan(["--x", "1"], {}))), [
            FlagEntry.boolean("x").with_double_dashes(True),
            UnnamedArgsEntry(["1"]),
        ])

    def testBreakStopsAssembly(self):
        entries = []
        for entry in Args(["-b", "-b", "x"], {"b": True}).entries():
            entries.append(entry)
            break
        self.assertEqual(entries, [FlagEntry.boolean("b")])

    def testEntriesAreRestartable(self):
        args = Args(["-b", "x"], {"b": True})
        self.assertEqual(list(args.entries()), list(args.entries()))

    def testRoundTrip(self):
        vectors = [
            [],
            ["-s", "some", "--b=true", "--", "abc"],
            ["--x", "-s", "--"],
            ["-s"],
            ["-s="],
            ["-=x", "-s", "y"],
            ["---x", "1"],
            ["--unk", "-s", "abc"],
            ["-s", "--unk", "-b", "--unk2"],
            ["-unknown", "value", "-b", "-unknown2", "value2"],
            ["a", "--", "-b", "--"],
            ["-b=", "--s", "", "x"],
        ]
        for vector in vectors:
            for ambiguous_as_bool in (False, True):
                with self.subTest(vector=vector, ambiguous_as_bool=ambiguous_as_bool):
                    args = Args(vector, {"s": False, "b": True}, ambiguous_as_bool=ambiguous_as_bool)
                    rendered = [arg for entry in args.entries() for arg in entry.tokens()]
                    self.assertEqual(rendered, vector)


if __name__ == "__main__":
    unittest.main()
