"""
Known-flags registry helper tests.

Scope
- freeze(): validation, sharing of existing registries, the empty registry.
- merge()/remove(): always fresh copies, sources untouched.
- from_parser(): bool-ness derived from argparse actions.
"""
import argparse
import unittest
from types import MappingProxyType
from unittest import TestCase

from argscan import registry


class TestFreeze(TestCase):
    """Wrapping mappings as registries."""

    def testNoneIsTheEmptyRegistry(self):
        self.assertIs(registry.freeze(), registry.EMPTY)
        self.assertIs(registry.freeze(None), registry.EMPTY)

    def testProxiesAreShared(self):
        frozen = registry.freeze({"s": False})
        self.assertIs(registry.freeze(frozen), frozen)

    def testMappingsAreCopied(self):
        source = {"s": False}
        frozen = registry.freeze(source)
        self.assertIsInstance(frozen, MappingProxyType)
        source["b"] = True
        self.assertEqual(dict(frozen), {"s": False})

    def testValidation(self):
        for mapping, error in (
            (["s"], TypeError),
            ({1: True}, TypeError),
            ({"s": 0}, TypeError),
            ({"": True}, ValueError),
        ):
            with self.subTest(mapping=mapping):
                with self.assertRaises(error):
                    registry.freeze(mapping)


class TestEdits(TestCase):
    """Copy-on-write helpers."""

    def testMergeIsFresh(self):
        base = registry.freeze({"s": False})
        merged = registry.merge(base, {"b": True}, {"s": True})
        self.assertIsNot(merged, base)
        self.assertEqual(dict(merged), {"s": True, "b": True})
        self.assertEqual(dict(base), {"s": False})

    def testMergeValidates(self):
        with self.assertRaises(TypeError):
            registry.merge(registry.EMPTY, {"s": "no"})

    def testRemove(self):
        base = registry.freeze({"s": False, "b": True})
        self.assertEqual(dict(registry.remove(base, ["b", "missing"])), {"s": False})
        self.assertEqual(dict(registry.remove(base, {"s": False})), {"b": True})
        self.assertEqual(dict(base), {"s": False, "b": True})

    def testRemoveRejectsBareString(self):
        with self.assertRaises(TypeError):
            registry.remove(registry.EMPTY, "s")


class TestFromParser(TestCase):
    """Registries derived from argparse parsers."""

    def testActions(self):
        parser = argparse.ArgumentParser()
        parser.add_argument("-v", "--verbose", action="store_true")
        parser.add_argument("-o", "--output")
        parser.add_argument("-q", action="count")
        parser.add_argument("--mode", nargs="?")
        parser.add_argument("files", nargs="*")
        self.assertEqual(dict(registry.from_parser(parser)), {
            "h": True,
            "help": True,
            "v": True,
            "verbose": True,
            "o": False,
            "output": False,
            "q": True,
            "mode": False,
        })

    def testSubparserOptionsAreIgnored(self):
        parser = argparse.ArgumentParser(add_help=False)
        subparsers = parser.add_subparsers()
        subparsers.add_parser("run").add_argument("--fast", action="store_true")
        self.assertEqual(dict(registry.from_parser(parser)), {})

    def testRejectsNonParsers(self):
        with self.assertRaises(TypeError):
            registry.from_parser(object())


if __name__ == "__main__":
    unittest.main()
