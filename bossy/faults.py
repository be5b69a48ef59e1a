"""
Bossy faults (parse errors and schema errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every parse error.
- ParseError and subclasses: the failure values returned (never raised) by
  parse(). Each carries a human-readable message, its code, the option name it
  concerns (when any), and renders itself through rich.
- SchemaError and subclasses: raised by the structural validator when a
  definition or an options mapping has the wrong shape. These are the only
  exceptions bossy raises on purpose.

Integration
- parse() accumulates ParseError instances while scanning and hands back the
  first one; callers discriminate with isinstance(result, ParseError).
- A host application can remap codes through a __codes__ mapping and restyle
  the rendering through a __styles__ mapping, both defined in __main__.
"""
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.text import Text

from .utils import Unset, coalesce, main


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - tokens (101xx): EMPTY_OPTION, UNKNOWN_OPTION
    - values (102xx): MISSING_VALUE, NON_NUMBER_VALUE, INVALID_VALUE, MULTIPLE_VALUES
    - definition (103xx): MISSING_REQUIRED
    """
    # --- token errors ---
    EMPTY_OPTION        = 10101
    UNKNOWN_OPTION      = 10102

    # --- value errors ---
    MISSING_VALUE       = 10201
    NON_NUMBER_VALUE    = 10202
    INVALID_VALUE       = 10203
    MULTIPLE_VALUES     = 10204

    # --- definition errors ---
    MISSING_REQUIRED    = 10301

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__ to
        override numeric ids with friendlier labels.
        """
        return str(main("__codes__").get(self, self.value))


class ParseError(Exception):
    """
    base type of the failure values returned by parse().

    instances are plain data: they are created while scanning, the first one is
    returned to the caller, and they are never raised by bossy itself.
    """
    __code__ = Unset
    __title__ = "parse error"

    def __init__(self, message, /, **options):
        assert isinstance(message, str)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return type(self).__code__

    @property
    def option(self):
        """name of the option this error concerns, or None."""
        return self.options.get("option")

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self.message)

    def __rich__(self):
        styles = defaultdict(str, {
            "title": "bold #FF4DA6",     # pinky title
            "code": "bold #00E5FF",      # neon cyan fault code
            "error-message": "#C8C8D0",  # soft light gray message
        } | dict(main("__styles__")))

        colorful = self.options.get("colorful", True)

        def text(fragment, style):
            return Text(str(fragment), styles[style] if colorful else "")

        header = Text.assemble(
            "[ ",
            text(self.code.normalize() if self.code else "-", "code"),
            " | ",
            text(type(self).__title__, "title"),
            " ]",
        )
        return Text.assemble(header, " ", text(self.message, "error-message"))


class EmptyOptionError(ParseError):
    __code__ = FaultCode.EMPTY_OPTION
    __title__ = "empty option"


class UnknownOptionError(ParseError):
    __code__ = FaultCode.UNKNOWN_OPTION
    __title__ = "unknown option"


class MissingValueError(ParseError):
    __code__ = FaultCode.MISSING_VALUE
    __title__ = "missing value"


class NonNumberValueError(ParseError):
    __code__ = FaultCode.NON_NUMBER_VALUE
    __title__ = "non-number value"


class InvalidValueError(ParseError):
    __code__ = FaultCode.INVALID_VALUE
    __title__ = "invalid value"


class MultipleValuesError(ParseError):
    __code__ = FaultCode.MULTIPLE_VALUES
    __title__ = "multiple values"


class MissingRequiredError(ParseError):
    """
    a required option was absent; the message is the full usage text.
    """
    __code__ = FaultCode.MISSING_REQUIRED
    __title__ = "missing required option"


class SchemaError(ValueError):
    """
    structural validation failure of a definition or an options mapping.

    the validator's own error list is kept in `errors` (one dict per violated field).
    """
    __prefix__ = "Invalid input:"

    def __init__(self, details, /, errors=Unset):
        self.errors = tuple(coalesce(errors, ()))
        super().__init__("%s %s" % (type(self).__prefix__, details))


class InvalidDefinitionError(SchemaError):
    __prefix__ = "Invalid definition:"


class InvalidOptionsError(SchemaError):
    __prefix__ = "Invalid options argument:"


__all__ = (
    "FaultCode",
    "ParseError",
    "EmptyOptionError",
    "UnknownOptionError",
    "MissingValueError",
    "NonNumberValueError",
    "InvalidValueError",
    "MultipleValuesError",
    "MissingRequiredError",
    "SchemaError",
    "InvalidDefinitionError",
    "InvalidOptionsError",
)
