"""
Definition table: one Record per declared option, reachable through every name.

A Table keeps its records in an ordered arena (declaration order) and an index
from each canonical name and each non-empty alias to the record's position, so
every key of an option resolves to the very same Record instance.
"""
import copy
from collections.abc import Mapping

from .schemas import validate_definition


class Record:
    """
    a validated option spec stamped with its canonical name.
    """
    __slots__ = ("name", "alias", "type", "multiple", "default", "require", "valid", "description")

    def __init__(self, name, spec, /):
        self.name = name
        self.alias = tuple(filter(None, spec.alias))
        self.type = spec.type
        self.multiple = spec.multiple
        self.default = copy.deepcopy(spec.default)
        self.require = spec.require
        self.valid = spec.valid
        self.description = spec.description

    @property
    def names(self):
        """canonical name followed by every alias."""
        return (self.name, *self.alias)

    def __repr__(self):
        return "record(%s)" % ", ".join("%s=%r" % pair for pair in self.__rich_repr__())

    def __rich_repr__(self):
        for name in type(self).__slots__:
            yield name, getattr(self, name)


class Table(Mapping):
    """
    lookup table built from a definition: name or alias -> Record.

    iteration yields every key (names and aliases); use `records` for the
    declaration-ordered options themselves.
    """

    def __init__(self, definition, /):
        self._records = []
        self._index = {}
        for name, spec in validate_definition(definition).items():
            record = Record(name, spec)
            self._records.append(record)
            for key in record.names:
                self._index[key] = len(self._records) - 1

    @property
    def records(self):
        return tuple(self._records)

    def seed(self):
        """
        initial flags for a parse: booleans start at their default, else False.
        """
        return {
            record.name: record.default if record.default is not None else False
            for record in self._records
            if record.type == "boolean"
        }

    def __getitem__(self, key):
        return self._records[self._index[key]]

    def __iter__(self):
        return iter(self._index)

    def __len__(self):
        return len(self._index)

    def __repr__(self):
        return "table(%s)" % ", ".join(map(repr, self._records))


__all__ = (
    "Record",
    "Table",
)
