"""
Options module behavioral tests (kinds, setters, bindings, metadata).

Scope
- Validate each kind's initial state: default written, unparsed, source "default".
- Validate kind-specific setters: extraction for scalars, verbatim strings,
  list rebuilding for multi kinds, no-op values for flags.
- Validate bindings: every destination write reaches the bound callable.
- Validate metadata constraints (names, descriptions, types, delimiters).

Conventions
- Test method names follow CamelCase per project convention.
- Tests use the public API (Scalar, String, MultiScalar, MultiString, Flag).
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from argolite import Scalar, String, MultiScalar, MultiString, Flag


class TestScalar(TestCase):
    """Behavioral tests for Scalar options."""

    def testDefaultWritten(self):
        o = Scalar("--port", 8080, "Port to listen on")
        self.assertEqual(o.value, 8080)
        self.assertFalse(o.parsed)
        self.assertEqual(o.source, "default")

    def testKindAndType(self):
        o = Scalar("--ratio", 0.5)
        self.assertEqual(o.kind, "scalar")
        self.assertIs(o.type, float)

    def testSetValueExtractsFirstToken(self):
        o = Scalar("--port", 8080)
        o.set_value("9090 trailing", source="command line")
        self.assertEqual(o.value, 9090)
        self.assertEqual(o.source, "command line")

    def testSetValueUnreadableIsZero(self):
        o = Scalar("--port", 8080)
        o.set_value("eighty")
        self.assertEqual(o.value, 0)

    def testSetValueDoesNotMarkParsed(self):
        o = Scalar("--port", 8080)
        o.set_value("1")
        self.assertFalse(o.parsed)
        o.set_parsed(True)
        self.assertTrue(o.parsed)

    def testBooleanScalar(self):
        o = Scalar("--boolvalue", False)
        o.set_value("1")
        self.assertIs(o.value, True)

    def testExplicitType(self):
        o = Scalar("--count", 0, type=lambda text: len(text))
        o.set_value("abcd efg")
        self.assertEqual(o.value, 4)

    def testBytesValueHandedOutAsBytes(self):
        received = []
        o = Scalar("--key", b"ab", bind=received.append)
        self.assertEqual(o.value, b"ab")
        self.assertEqual(received, [b"ab"])

    def testDefaultText(self):
        self.assertEqual(Scalar("--x", 789).default_text, "789")
        self.assertEqual(Scalar("--f", 3.14).default_text, "3.14")
        self.assertEqual(Scalar("--b", False).default_text, "false")

    def testDescrDefaultsToNone(self):
        self.assertIsNone(Scalar("--x", 1).descr)

    def testDescrTrimmed(self):
        self.assertEqual(Scalar("--x", 1, "  spaced  ").descr, "spaced")

    def testRequiredFlagExposed(self):
        self.assertTrue(Scalar("--x", 1, required=True).required)
        self.assertFalse(Scalar("--y", 1).required)

    def testRepr(self):
        self.assertTrue(repr(Scalar("--port", 8080)).startswith("scalar(name='--port', default=8080"))


class TestString(TestCase):
    """Behavioral tests for String options."""

    def testDefaultWritten(self):
        o = String("--story", "It's a default")
        self.assertEqual(o.value, "It's a default")
        self.assertEqual(o.kind, "string")
        self.assertIs(o.type, str)

    def testWhitespacePreserved(self):
        o = String("--story", "")
        o.set_value("  once upon a time ")
        self.assertEqual(o.value, "  once upon a time ")

    def testDefaultTextQuoted(self):
        self.assertEqual(String("--story", "a b").default_text, '"a b"')

    def testNonStringDefaultRejected(self):
        with self.assertRaises(TypeError):
            String("--story", 5)


class TestMultiString(TestCase):
    """Behavioral tests for MultiString options."""

    def testDefaultsSeeded(self):
        o = MultiString("--names", "one,two,three")
        self.assertEqual(o.value, ["one", "two", "three"])
        self.assertEqual(o.kind, "multi-string")

    def testSetValueClearsBeforeRefill(self):
        o = MultiString("--names", "one,two,three")
        o.set_value("four")
        self.assertEqual(o.value, ["four"])

    def testEmptyInputIsEmptyList(self):
        o = MultiString("--names", "one")
        o.set_value("")
        self.assertEqual(o.value, [])

    def testCustomDelimiterKeepsSpaces(self):
        o = MultiString("--complex", "easy|stuff", delim="|")
        self.assertEqual(o.value, ["easy", "stuff"])
        o.set_value("o n e|t w o|t h r e e")
        self.assertEqual(o.value, ["o n e", "t w o", "t h r e e"])

    def testRoundTrip(self):
        o = MultiString("--names", "alpha,beta gamma,,delta")
        before = o.value
        o.set_value(o.delim.join(before))
        self.assertEqual(o.value, before)

    def testRoundTripDropsTrailingEmptyElement(self):
        o = MultiString("--names", "a")
        o.set_value(o.delim.join(["a", ""]))
        self.assertEqual(o.value, ["a"])

    def testValueIsSnapshot(self):
        o = MultiString("--names", "a,b")
        o.value.append("c")
        self.assertEqual(o.value, ["a", "b"])

    def testDefaultTextQuotedRaw(self):
        self.assertEqual(MultiString("--names", "a,b").default_text, '"a,b"')

    def testDelimiterMustBeSingleCharacter(self):
        with self.assertRaises(ValueError):
            MultiString("--names", "a", delim="||")
        with self.assertRaises(TypeError):
            MultiString("--names", "a", delim=1)

    def testDefaultsMustBeText(self):
        with self.assertRaises(TypeError):
            MultiString("--names", ["a", "b"])


class TestMultiScalar(TestCase):
    """Behavioral tests for MultiScalar options."""

    def testDefaultsSeeded(self):
        o = MultiScalar("--floats", "1.f,2.f,3.f", type=float)
        self.assertEqual(o.value, [1.0, 2.0, 3.0])
        self.assertEqual(o.kind, "multi-scalar")

    def testUnreadableFragmentsAreZero(self):
        o = MultiScalar("--ints", "", type=int)
        self.assertEqual(o.value, [])
        o.set_value("1,x,3")
        self.assertEqual(o.value, [1, 0, 3])

    def testRoundTrip(self):
        o = MultiScalar("--floats", "1.5,2,-0.25", type=float)
        before = o.value
        o.set_value(",".join(map(str, before)))
        self.assertEqual(o.value, before)

    def testTypeMustBeCallable(self):
        with self.assertRaises(TypeError):
            MultiScalar("--ints", "1", type="int")


class TestFlag(TestCase):
    """Behavioral tests for Flag options."""

    def testStartsFalse(self):
        o = Flag("--verbose", "Chatty output")
        self.assertIs(o.value, False)
        self.assertFalse(o.parsed)
        self.assertEqual(o.default_text, "")
        self.assertEqual(o.kind, "flag")

    def testParsedMirroredIntoValue(self):
        o = Flag("--verbose")
        o.set_parsed(True, source="file")
        self.assertIs(o.value, True)
        self.assertEqual(o.source, "file")

    def testSetValueIsNoOp(self):
        o = Flag("--verbose")
        o.set_value("1")
        self.assertIs(o.value, False)
        self.assertFalse(o.parsed)

    def testParsedCanBeCleared(self):
        o = Flag("--verbose")
        o.set_parsed(True)
        o.set_parsed(False)
        self.assertIs(o.value, False)
        self.assertFalse(o.parsed)


class TestBinding(TestCase):
    """Behavioral tests for bound destinations."""

    def testScalarBindReceivesEveryWrite(self):
        received = []
        o = Scalar("--port", 8080, bind=received.append)
        o.set_value("1")
        self.assertEqual(received, [8080, 1])

    def testMultiBindReceivesCopies(self):
        received = []
        o = MultiString("--names", "a,b", bind=received.append)
        received[-1].append("mutated")
        self.assertEqual(o.value, ["a", "b"])

    def testFlagBindMirrorsParsed(self):
        received = []
        o = Flag("--verbose", bind=received.append)
        o.set_parsed(True)
        self.assertEqual(received, [False, True])

    def testBindMustBeCallable(self):
        with self.assertRaises(TypeError):
            Scalar("--port", 8080, bind=42)


class TestMetadata(TestCase):
    """Behavioral tests for shared metadata validation."""

    def testNameMustBeString(self):
        with self.assertRaises(TypeError):
            Scalar(5, 1)

    def testNameCannotBeEmpty(self):
        with self.assertRaises(ValueError):
            Flag("")

    def testNameCannotContainWhitespace(self):
        with self.assertRaises(ValueError):
            Flag("--two words")

    def testNameIsVerbatim(self):
        self.assertEqual(Scalar("APP_PORT", 1).name, "APP_PORT")

    def testDescrExplicitNoneRejected(self):
        with self.assertRaises(TypeError):
            Flag("--verbose", None)

    def testDescrEmptyRejected(self):
        with self.assertRaises(ValueError):
            Flag("--verbose", "   ")

    def testTypeMustBeCallable(self):
        with self.assertRaises(TypeError):
            Scalar("--port", 8080, type="int")


if __name__ == "__main__":
    unittest.main()
