"""
Coercion module behavioral tests.

Scope
- Validate numeric literals (int, float, hex, signs) become numbers.
- Validate the exact literal words true/false/nil.
- Validate that everything else, including near-misses, stays a string.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from parley import coerce, LITERALS


class TestNumbers(TestCase):
    """Numeric literals become int or float."""

    def testInteger(self):
        self.assertEqual(coerce("42"), 42)
        self.assertIsInstance(coerce("42"), int)

    def testSignedIntegers(self):
        self.assertEqual(coerce("-7"), -7)
        self.assertEqual(coerce("+3"), 3)

    def testFloat(self):
        self.assertEqual(coerce("3.5"), 3.5)
        self.assertIsInstance(coerce("3.0"), float)

    def testFloatShorthands(self):
        self.assertEqual(coerce(".5"), 0.5)
        self.assertEqual(coerce("-.5"), -0.5)
        self.assertEqual(coerce("5."), 5.0)

    def testExponent(self):
        self.assertEqual(coerce("1e3"), 1000.0)
        self.assertIsInstance(coerce("1e3"), float)
        self.assertEqual(coerce("2E-2"), 0.02)

    def testHexadecimal(self):
        self.assertEqual(coerce("0x1F"), 31)
        self.assertEqual(coerce("-0Xff"), -255)

    def testNumericNeverFallsThrough(self):
        self.assertIs(type(coerce("1")), int)
        self.assertIsNot(coerce("1"), True)


class TestLiterals(TestCase):
    """Exact literal words become booleans or None."""

    def testTrue(self):
        self.assertIs(coerce("true"), True)

    def testFalse(self):
        self.assertIs(coerce("false"), False)

    def testNil(self):
        self.assertIsNone(coerce("nil"))

    def testLiteralTable(self):
        self.assertEqual(LITERALS, {"true": True, "false": False, "nil": None})

    def testLiteralsAreCaseSensitive(self):
        self.assertEqual(coerce("True"), "True")
        self.assertEqual(coerce("NIL"), "NIL")


class TestIdentity(TestCase):
    """Anything that is not a recognized literal is returned unchanged."""

    def testPlainWord(self):
        self.assertEqual(coerce("hello"), "hello")

    def testPythonOnlyNumberSpellingsStayStrings(self):
        for token in ("inf", "-inf", "nan", "Infinity", "1_000", "٣", "0b101", "1j"):
            with self.subTest(token=token):
                self.assertEqual(coerce(token), token)

    def testNearMisses(self):
        for token in ("12abc", "1.2.3", "+", "-", ".", "e5", "0x", "truee", "nil?"):
            with self.subTest(token=token):
                self.assertEqual(coerce(token), token)

    def testPunctuationAndQuotes(self):
        for token in ('"quoted', "a,b", "you?", "key="):
            with self.subTest(token=token):
                self.assertEqual(coerce(token), token)


if __name__ == "__main__":
    unittest.main()
