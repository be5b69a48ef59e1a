"""
Color adapter: palette names to text-wrapping functions.

colors(enabled) returns a read-only mapping from each palette name to a function
str -> str. When colors are enabled the function wraps the text in the standard
16-color ANSI start/reset pair; otherwise it returns the text unchanged.

`enabled` is tri-state:
- True / False: forced on / off.
- None: on only when both standard output and standard error are interactive
  terminals (as detected by rich).

Examples
    >>> paint = colors(True)
    >>> paint["green"]("-n")
    '\\x1b[32m-n\\x1b[0m'
    >>> colors(False)["green"]("-n")
    '-n'
"""
import sys
from types import MappingProxyType

from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style

from .utils import rename

# palette name -> rich style definition (rendered with the standard color system)
PALETTE = MappingProxyType({
    "black": "black",
    "gray": "bright_black",
    "red": "red",
    "green": "green",
    "yellow": "yellow",
    "magenta": "magenta",
    "red_bg": "on red",
    "green_bg": "on green",
})


def isatty():
    """
    true when both stdout and stderr are attached to an interactive terminal.
    """
    return Console(file=sys.stdout).is_terminal and Console(file=sys.stderr).is_terminal


def color(name, enabled, /):
    """
    build the wrapping function for a single palette entry.
    """
    if enabled:
        style = Style.parse(PALETTE[name])

        @rename("colorize")
        def colorize(text):
            return style.render(str(text), color_system=ColorSystem.STANDARD)

        return colorize

    @rename("plain")
    def plain(text):
        return str(text)

    return plain


def colors(enabled=None, /):
    if enabled is None:
        enabled = isatty()
    return MappingProxyType({name: color(name, enabled) for name in PALETTE})


__all__ = (
    "PALETTE",
    "isatty",
    "color",
    "colors",
)
