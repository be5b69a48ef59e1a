"""
Structural validation tests (definition, parse options, usage options).

Scope
- Validate normalization (defaults, single values wrapped).
- Validate rejections: bad type, bad key, unknown field, duplicated names,
  malformed options. Schema errors are raised before any parsing.

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase

from bossy import parse, InvalidDefinitionError, InvalidOptionsError, SchemaError
from bossy.schemas import validate_definition, validate_parse_options, validate_usage_options


class TestDefinition(TestCase):

    def testDefaultsFilledIn(self):
        spec = validate_definition({"n": {}})["n"]
        self.assertEqual(spec.type, "string")
        self.assertEqual(spec.alias, ())
        self.assertFalse(spec.multiple)
        self.assertFalse(spec.require)
        self.assertIsNone(spec.default)
        self.assertIsNone(spec.valid)

    def testSingleAliasWrapped(self):
        self.assertEqual(validate_definition({"n": {"alias": "name"}})["n"].alias, ("name",))

    def testDeclarationOrderKept(self):
        self.assertEqual(list(validate_definition({"b": {}, "a": {}, "c": {}})), ["b", "a", "c"])

    def testUnknownTypeRejected(self):
        with self.assertRaises(InvalidDefinitionError) as context:
            validate_definition({"n": {"type": "float"}})
        self.assertTrue(str(context.exception).startswith("Invalid definition:"))
        self.assertTrue(context.exception.errors)

    def testBadKeyRejected(self):
        with self.assertRaises(InvalidDefinitionError):
            validate_definition({"-n": {}})

    def testUnknownFieldRejected(self):
        with self.assertRaises(InvalidDefinitionError):
            validate_definition({"n": {"aliases": ["name"]}})

    def testDuplicatedNameRejected(self):
        with self.assertRaises(InvalidDefinitionError):
            validate_definition({"n": {"alias": "name"}, "name": {}})

    def testNonMappingRejected(self):
        with self.assertRaises(InvalidDefinitionError):
            validate_definition(["n"])

    def testParseValidatesFirst(self):
        with self.assertRaises(InvalidDefinitionError):
            parse({"n": {"require": "maybe"}}, {"argv": ["-z"]})


class TestOptions(TestCase):

    def testParseOptionsDefault(self):
        self.assertIsNone(validate_parse_options().argv)
        self.assertIsNone(validate_parse_options(None).argv)

    def testParseOptionsArgv(self):
        self.assertEqual(validate_parse_options({"argv": ["-a", "b"]}).argv, ["-a", "b"])

    def testParseOptionsRejectNonStrings(self):
        with self.assertRaises(InvalidOptionsError) as context:
            validate_parse_options({"argv": [1, 2]})
        self.assertTrue(str(context.exception).startswith("Invalid options argument:"))

    def testParseOptionsRejectUnknownKeys(self):
        with self.assertRaises(InvalidOptionsError):
            validate_parse_options({"args": []})

    def testUsageOptionsColors(self):
        self.assertIsNone(validate_usage_options().colors)
        self.assertIs(validate_usage_options({"colors": True}).colors, True)
        self.assertIsNone(validate_usage_options({"colors": None}).colors)

    def testSchemaErrorsAreValueErrors(self):
        self.assertTrue(issubclass(InvalidDefinitionError, SchemaError))
        self.assertTrue(issubclass(InvalidOptionsError, SchemaError))
        self.assertTrue(issubclass(SchemaError, ValueError))


if __name__ == "__main__":
    unittest.main()
