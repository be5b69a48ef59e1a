"""
Range expansion for options of type "range".

A range value is a comma separated list of numbers and inclusive spans, e.g.
"1-3,7,10-8" -> [1, 2, 3, 7, 10, 9, 8]. Anything that is neither a number nor a
span is ignored.
"""
import re

_PATTERN = re.compile(r"(\d+)-(\d+)|(\d+)")


def expand(value, /):
    """
    expand a scalar or a sequence of range texts into a list of integers.

    returns None when there is nothing to expand (None or empty).
    """
    if not value:
        return None

    values = [value] if isinstance(value, (str, int)) else list(value)

    numbers = []
    for match in _PATTERN.finditer(",".join(map(str, values))):
        start, stop, single = match.groups()
        if single is not None:
            numbers.append(int(single))
        elif int(start) > int(stop):
            numbers.extend(range(int(start), int(stop) - 1, -1))
        else:
            numbers.extend(range(int(start), int(stop) + 1))
    return numbers


__all__ = ("expand",)
