"""
Bossy parser: turn argv-like tokens into a flags mapping using a definition.

What this module provides
- Scanner: a single-pass state machine over the tokens. It is either free (no
  option waiting for a value) or awaiting a value for a pending option.
- parse(definition, options): validate inputs, scan, finalize, and return either
  the flags mapping or the first ParseError.

Token forms
- "--name"  : one long option.
- "-abc"    : combined short options a, b and c (left to right).
- "-t5"     : short number option with its value packed in; "5" is pushed back
              into the stream and consumed as the next token.
- anything else is a value for the pending option, or a positional collected
  under the "_" key.

Error policy
- faults are collected while scanning and finalizing; parse() returns only the
  first one, unless a help-typed option was seen, in which case faults are
  suppressed and the (possibly partial) flags mapping is returned.
"""
import re
import sys
from collections import deque

from .definition import Table
from .faults import *
from .formatter import usage
from .ranges import expand
from .schemas import validate_parse_options
from .utils import Unset

# key under which positional tokens are collected
POSITIONALS = "_"


class Scanner:
    """
    scan tokens against a lookup table, accumulating flags and faults.

    state
    - pending: the Record awaiting a value, or None when free.
    - help: True once any help-typed option was seen.
    - flags: name -> value (canonical names and "_" only until finalize()).
    - faults: ParseError instances in encounter order.
    """

    def __init__(self, table, tokens, /):
        self.table = table
        self.tokens = deque(tokens)
        self.flags = table.seed()
        self.faults = []
        self.pending = None
        self.help = False

    def scan(self):
        while self.tokens:
            token = self.tokens.popleft()
            if token.startswith("-"):
                self._switches(token)
            else:
                self._value(token)
        return self

    def _switches(self, token):
        if len(token) == 1:
            return self.faults.append(EmptyOptionError("Invalid empty '-' option"))

        if token == "--":
            return self.faults.append(EmptyOptionError("Invalid empty '--' option"))

        # "--abc" is one option, "-abc" is three
        names = [token[2:]] if token.startswith("--") else list(token[1:])

        for position, name in enumerate(names):
            if self.pending:
                self.faults.append(MissingValueError(
                    "Invalid option: %s missing value" % self.pending.name,
                    option=self.pending.name,
                ))
                continue

            try:
                record = self.table[name]
            except KeyError:
                self.faults.append(UnknownOptionError("Unknown option: %s" % name, option=name))
                continue

            match record.type:
                case "help":
                    self.flags[record.name] = True
                    self.help = True
                case "boolean":
                    self.flags[record.name] = True
                case "number" if len(names) > 1:
                    # the rest of the token is the value: "-t5" -> "-t", "5"
                    if remainder := token[position + 2:]:
                        self.tokens.appendleft(remainder)
                    self.pending = record
                    break
                case _:
                    self.pending = record

    def _value(self, token):
        record, self.pending = self.pending, None
        value = token

        if record and record.type == "number":
            # plain ASCII digits only: no sign, separators, padding or unicode digits
            if not re.fullmatch(r"\d+", token, re.ASCII):
                return self.faults.append(NonNumberValueError(
                    "Invalid value (non-number) for option: %s" % record.name,
                    option=record.name,
                    value=token,
                ))
            value = int(token)

        if record and record.valid is not None and value not in record.valid:
            return self.faults.append(InvalidValueError(
                "Invalid value for option: %s" % record.name,
                option=record.name,
                value=value,
            ))

        name = record.name if record else POSITIONALS
        multiple = not record or record.multiple

        if name in self.flags:
            if not multiple:
                return self.faults.append(MultipleValuesError(
                    "Multiple values are not allowed for option: %s" % name,
                    option=name,
                    value=value,
                ))
            self.flags[name].append(value)
        else:
            self.flags[name] = [value] if multiple else value

    def finalize(self, definition, /):
        """
        expand ranges, apply defaults, check requirements and mirror values to aliases.
        """
        for record in self.table.records:
            if record.type == "range" and (values := expand(self.flags.get(record.name))) is not None:
                self.flags[record.name] = values

            if self.flags.get(record.name) is None:
                self.flags[record.name] = record.default

            if record.require and self.flags[record.name] is None:
                self.faults.append(MissingRequiredError(usage(definition), option=record.name))

            for alias in record.alias:
                self.flags[alias] = self.flags[record.name]
        return self

    def result(self):
        if self.faults and not self.help:
            return self.faults[0]
        return self.flags


def parse(definition, options=Unset, /):
    """
    parse command line tokens using a bossy definition.

    parameters
    - definition: mapping of option name -> option spec (see bossy.schemas.OptionSpec).
    - options: optional {"argv": [...]}; when argv is absent the tokens are
      sys.argv[1:]. The given list is never modified.

    returns
    - dict: name (and every alias) -> value, plus "_" for positionals when any.
    - ParseError: the first fault found, when any and no help option was given.

    raises
    - InvalidDefinitionError / InvalidOptionsError on malformed inputs.
    """
    table = Table(definition)
    options = validate_parse_options(options)

    tokens = options.argv if options.argv is not None else sys.argv[1:]

    return Scanner(table, tokens).scan().finalize(definition).result()


__all__ = (
    "POSITIONALS",
    "Scanner",
    "parse",
)
