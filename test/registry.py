"""
Registry module behavioral tests.

Scope
- Validate add/get/delete/toggle/run semantics and shared records.
- Validate contract errors (TypeError) for wrong argument types.
- Validate not-found outcomes (None/False/missing), which never raise.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from parley import Commands, Command, ACTIVATED, DEACTIVATED, missing


def noop(*args, **kwargs):
    pass


class TestAdd(TestCase):

    def setUp(self):
        self.commands = Commands()

    def testAddReturnsSharedRecord(self):
        command = self.commands.add("null", ACTIVATED, noop)
        self.assertIsInstance(command, Command)
        self.assertIs(self.commands.get("null"), command)
        self.assertEqual(command.name, "null")
        self.assertIs(command.handler, noop)
        self.assertIs(command.activated, True)
        self.assertIs(command.keywords, False)

    def testAddOverwritesWithoutMerge(self):
        first = self.commands.add("x", DEACTIVATED, noop, keywords=True)
        second = self.commands.add("x", ACTIVATED, print)
        self.assertIsNot(first, second)
        self.assertIs(self.commands.get("x"), second)
        self.assertIs(second.keywords, False)
        self.assertEqual(len(self.commands), 1)

    def testAddOverwriteIsLogged(self):
        self.commands.add("x", ACTIVATED, noop)
        with self.assertLogs("parley.registry", level="WARNING"):
            self.commands.add("x", ACTIVATED, noop)

    def testNamesAreCaseSensitive(self):
        self.commands.add("Hello", ACTIVATED, noop)
        self.assertIsNone(self.commands.get("hello"))

    def testNonStringNameRaises(self):
        with self.assertRaises(TypeError):
            self.commands.add(1, ACTIVATED, noop)

    def testNonBooleanActivatedRaises(self):
        with self.assertRaises(TypeError):
            self.commands.add("x", 1, noop)

    def testNonCallableHandlerRaises(self):
        with self.assertRaises(TypeError):
            self.commands.add("x", ACTIVATED, "noop")

    def testNonBooleanKeywordsRaises(self):
        with self.assertRaises(TypeError):
            self.commands.add("x", ACTIVATED, noop, keywords="yes")


class TestRecord(TestCase):

    def testHandlerIsReadOnly(self):
        command = Commands().add("x", ACTIVATED, noop)
        with self.assertRaises(AttributeError):
            command.handler = print

    def testNameIsReadOnly(self):
        command = Commands().add("x", ACTIVATED, noop)
        with self.assertRaises(AttributeError):
            command.name = "y"

    def testActivatedMustStayBoolean(self):
        command = Commands().add("x", ACTIVATED, noop)
        with self.assertRaises(TypeError):
            command.activated = "no"

    def testRepr(self):
        command = Commands().add("x", ACTIVATED, noop)
        self.assertTrue(repr(command).startswith("command(name='x', activated=True, keywords=False"))


class TestLookupAndDelete(TestCase):

    def setUp(self):
        self.commands = Commands()
        self.commands.add("null", ACTIVATED, noop)

    def testGetMissingIsNone(self):
        self.assertIsNone(self.commands.get("nothing"))

    def testGetUsesStringForm(self):
        self.commands.add("1", ACTIVATED, noop)
        self.assertIs(self.commands.get(1), self.commands.get("1"))

    def testDelete(self):
        self.assertIs(self.commands.delete("null"), True)
        self.assertIsNone(self.commands.get("null"))

    def testDeleteMissing(self):
        self.assertIs(self.commands.delete("nothing"), False)

    def testContainsAndIteration(self):
        self.commands.add("other", DEACTIVATED, noop)
        self.assertIn("null", self.commands)
        self.assertEqual(list(self.commands), ["null", "other"])


class TestToggle(TestCase):

    def setUp(self):
        self.commands = Commands()
        self.command = self.commands.add("null", ACTIVATED, noop)

    def testFlip(self):
        self.assertIs(self.commands.toggle("null"), False)
        self.assertIs(self.command.activated, False)
        self.assertIs(self.commands.toggle("null"), True)
        self.assertIs(self.command.activated, True)

    def testExplicit(self):
        self.assertIs(self.commands.toggle("null", True), True)
        self.assertIs(self.commands.toggle("null", explicit=False), False)
        self.assertIs(self.commands.toggle("null", False), False)

    def testMissingCommand(self):
        result = self.commands.toggle("nothing")
        self.assertIs(result, missing)
        self.assertFalse(result)
        self.assertIsNot(result, False)

    def testNonBooleanExplicitRaises(self):
        with self.assertRaises(TypeError):
            self.commands.toggle("null", 1)
        self.assertIs(self.command.activated, True)


class TestRun(TestCase):

    def setUp(self):
        self.commands = Commands()
        self.calls = []

    def testRunIgnoresActivation(self):
        self.commands.add("null", DEACTIVATED, lambda: True)
        self.assertIs(self.commands.run("null"), True)

    def testRunForwardsArguments(self):
        self.commands.add("record", ACTIVATED, lambda *args, **kwargs: self.calls.append((args, kwargs)))
        self.commands.run("record", 1, "a", key="v")
        self.assertEqual(self.calls, [((1, "a"), {"key": "v"})])

    def testRunMissingIsNone(self):
        self.assertIsNone(self.commands.run("nothing", 1))

    def testRunPropagatesHandlerErrors(self):
        def fail():
            raise ValueError("boom")

        self.commands.add("fail", ACTIVATED, fail)
        with self.assertRaises(ValueError):
            self.commands.run("fail")


if __name__ == "__main__":
    unittest.main()
