"""
Fault tests (codes, messages, rendering, host overrides).

Scope
- Validate each ParseError subclass exposes a stable FaultCode.
- Validate message/str/option accessors.
- Validate rich rendering and the __codes__ override read from __main__.

Conventions
- Test method names follow CamelCase per project convention.
"""
import io
import sys
import unittest
from unittest import TestCase, mock

from rich.console import Console

from bossy import parse
from bossy.faults import *


class TestFaults(TestCase):

    def testCodes(self):
        self.assertIs(EmptyOptionError("x").code, FaultCode.EMPTY_OPTION)
        self.assertIs(UnknownOptionError("x").code, FaultCode.UNKNOWN_OPTION)
        self.assertIs(MissingValueError("x").code, FaultCode.MISSING_VALUE)
        self.assertIs(NonNumberValueError("x").code, FaultCode.NON_NUMBER_VALUE)
        self.assertIs(InvalidValueError("x").code, FaultCode.INVALID_VALUE)
        self.assertIs(MultipleValuesError("x").code, FaultCode.MULTIPLE_VALUES)
        self.assertIs(MissingRequiredError("x").code, FaultCode.MISSING_REQUIRED)

    def testMessageAndOption(self):
        result = parse({}, {"argv": ["-z"]})
        self.assertEqual(str(result), "Unknown option: z")
        self.assertEqual(result.message, "Unknown option: z")
        self.assertEqual(result.option, "z")

    def testOptionlessFault(self):
        self.assertIsNone(EmptyOptionError("Invalid empty '-' option").option)

    def testRichRendering(self):
        console = Console(file=io.StringIO(), width=120, color_system=None)
        console.print(UnknownOptionError("Unknown option: z", option="z"))
        self.assertEqual(console.file.getvalue(), "[ 10102 | unknown option ] Unknown option: z\n")

    def testHostCodes(self):
        main = sys.modules["__main__"]
        with mock.patch.object(main, "__codes__", {FaultCode.UNKNOWN_OPTION: "E-UNKNOWN"}, create=True):
            self.assertEqual(FaultCode.UNKNOWN_OPTION.normalize(), "E-UNKNOWN")
        self.assertEqual(FaultCode.UNKNOWN_OPTION.normalize(), "10102")

    def testRepr(self):
        self.assertEqual(repr(UnknownOptionError("Unknown option: z")), "UnknownOptionError('Unknown option: z')")


if __name__ == "__main__":
    unittest.main()
