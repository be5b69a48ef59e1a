"""
Usage formatter: render a definition as two aligned, optionally colored columns.

Layout
    Usage: <text>                  (only when a usage text is given)

    Options:

      -n, --name        Input your name
      -t, --time        Specify a time (required)

- column 1 lists the shortest name first ("-x"), then every other name ("--xyz").
- column 2 holds the description, then "(<default>)" when the default is truthy,
  then "(required)" when the option is required.
- columns are separated by padding sized to the widest column 1 (the "Options:"
  header included) plus a gutter.

Palette roles
- option-name (green), description (gray), default (gray), required (yellow).
- Define a mapping named __styles__ in __main__ to map any role to another
  palette color name (see bossy.colors.PALETTE); a name outside the palette
  leaves the role at its built-in color.
"""
from collections.abc import Mapping
from types import MappingProxyType

from .colors import colors
from .definition import Table
from .schemas import UsageOptions, validate_usage_options
from .utils import Unset, main

GUTTER = 4

HEADER = "Options:"

ROLES = MappingProxyType({
    "option-name": "green",
    "description": "gray",
    "default": "gray",
    "required": "yellow",
})


def shortest(name, alias, /):
    """
    pick the shortest identifier among a name and its aliases (ties keep the earlier one).

    returns (short, longs) where longs keeps every other identifier in declaration order.
    """
    names = [name, *filter(None, alias)]
    short = min(names, key=len)
    names.remove(short)
    return short, names


def columns(col1, col2, /, *, paint=str, width=0):
    """
    join two parallel columns, padding column 1 to its widest entry (at least
    `width`) plus the gutter.

    `paint` styles each column 1 entry after widths were measured on the plain text.
    """
    width = max(width, max(map(len, col1), default=0))
    return [
        paint(left) + " " * (width - len(left) + GUTTER) + right
        for left, right in zip(col1, col2)
    ]


def _display(default):
    # sequences read as "a,b", the way they were typed on the command line
    if isinstance(default, (list, tuple, set, frozenset)):
        return ",".join(map(str, default))
    return str(default)


def usage(definition, text=Unset, options=Unset, /):
    """
    format a definition for display in the console.

    parameters
    - definition: mapping of option name -> option spec (see bossy.schemas.OptionSpec).
    - text: optional message displayed first, as "Usage: <text>". When this
      argument is itself an options mapping, it is taken as `options` instead.
    - options: optional {"colors": True | False | None}; None (the default)
      enables colors only when attached to an interactive terminal.

    raises
    - InvalidDefinitionError / InvalidOptionsError on malformed inputs.
    """
    if isinstance(text, Mapping | UsageOptions) and options is Unset:
        text, options = Unset, text

    table = Table(definition)
    options = validate_usage_options(options)

    palette = colors(options.colors)
    styles = ROLES | dict(main("__styles__"))

    def paint(role):
        # unknown color names fall back to the built-in role color
        return palette.get(styles[role]) or palette[ROLES[role]]

    output = "Usage: %s\n\n" % text if text else "\n"

    col1 = []
    col2 = []
    for record in table.records:
        short, longs = shortest(record.name, record.alias)
        col1.append("  -" + short + "".join(", --" + name for name in longs))

        descr = []
        if record.description:
            descr.append(paint("description")(record.description))
        if record.default:
            descr.append(paint("default")("(%s)" % _display(record.default)))
        if record.require:
            descr.append(paint("required")("(required)"))
        col2.append(" ".join(descr))

    rows = columns(col1, col2, paint=paint("option-name"), width=len(HEADER))
    return output + "\n".join([HEADER, "", *rows])


__all__ = (
    "GUTTER",
    "HEADER",
    "ROLES",
    "shortest",
    "columns",
    "usage",
)
