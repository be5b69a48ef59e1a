"""
Color adapter tests.

Scope
- Validate ANSI wrapping when enabled, passthrough when disabled, and the
  terminal auto-detection used when colors are left unspecified.

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase, mock

from bossy.colors import PALETTE, colors


class TestColors(TestCase):

    def testPaletteIsComplete(self):
        self.assertEqual(set(colors(False)), set(PALETTE))

    def testEnabledWraps(self):
        paint = colors(True)
        self.assertEqual(paint["green"]("x"), "\x1b[32mx\x1b[0m")
        self.assertEqual(paint["yellow"]("x"), "\x1b[33mx\x1b[0m")
        self.assertEqual(paint["gray"]("x"), "\x1b[90mx\x1b[0m")
        self.assertEqual(paint["red_bg"]("x"), "\x1b[41mx\x1b[0m")

    def testDisabledPassesThrough(self):
        paint = colors(False)
        for name in PALETTE:
            self.assertEqual(paint[name]("text"), "text")

    def testAutoDetection(self):
        with mock.patch("bossy.colors.isatty", return_value=True):
            self.assertEqual(colors()["red"]("x"), "\x1b[31mx\x1b[0m")
        with mock.patch("bossy.colors.isatty", return_value=False):
            self.assertEqual(colors(None)["red"]("x"), "x")

    def testMappingIsReadOnly(self):
        with self.assertRaises(TypeError):
            colors(False)["green"] = str

    def testFunctionsHaveStableNames(self):
        self.assertEqual(colors(True)["green"].__name__, "colorize")
        self.assertEqual(colors(False)["green"].__name__, "plain")


if __name__ == "__main__":
    unittest.main()
