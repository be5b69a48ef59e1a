import sys

from rich.console import Console
from rich.pretty import pprint

from bossy import *

definition = {
    "n": {
        "description": "Input your name",
        "alias": "name",
    },
    "p": {
        "description": "Specify a path",
        "alias": ["path", "dir"],
    },
    "t": {
        "description": "Specify a time",
        "alias": "time",
        "type": "number",
        "require": True,
    },
    "h": {
        "description": "Show help",
        "alias": "help",
        "type": "help",
    },
}


if __name__ == '__main__':
    console = Console(stderr=True)
    args = parse(definition)

    if isinstance(args, MissingRequiredError):
        print(args.message, file=sys.stderr)
        sys.exit(1)
    if isinstance(args, ParseError):
        console.print(args)
        sys.exit(1)
    if args["help"]:
        print(usage(definition, "python main.py [options]"))
        sys.exit(0)

    pprint(args)
