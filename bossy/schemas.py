"""
Structural formats of a bossy definition, of parse options and of usage options.

What this module provides
- OptionSpec: one definition entry (alias, type, multiple, description, require,
  default, valid), with defaults filled in and single values wrapped into tuples.
- ParseOptions / UsageOptions: the options mappings accepted by parse() and usage().
- validate_definition(), validate_parse_options(), validate_usage_options():
  check a raw input and return a normalized copy, or raise a SchemaError.

Validation happens before any scanning or formatting; a violation never reaches
the parser and is reported by raising, unlike parse-time errors.
"""
from collections.abc import Mapping, Set
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, StringConstraints, TypeAdapter, ValidationError, field_validator

from .faults import InvalidDefinitionError, InvalidOptionsError
from .utils import Unset

# valid key: alphanumeric first character, then alphanumerics or hyphens
KEY_PATTERN = r"^[a-zA-Z0-9][a-zA-Z0-9-]*$"


def _single(value):
    # accept a lone value where a collection is expected
    if value is None:
        return value
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple, Set)):
        return [value]
    return value


class OptionSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    alias: tuple[str, ...] = ()
    type: Literal["boolean", "range", "number", "string", "help"] = "string"
    multiple: bool = False
    description: str | None = None
    require: bool = False
    default: Any = None
    valid: tuple[Any, ...] | None = None

    @field_validator("alias", mode="before")
    @classmethod
    def single_alias(cls, value):
        return _single(value)

    @field_validator("valid", mode="before")
    @classmethod
    def single_valid(cls, value):
        return _single(value)


class ParseOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    argv: list[str] | None = None


class UsageOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    colors: bool | None = None


_definition = TypeAdapter(dict[Annotated[str, StringConstraints(pattern=KEY_PATTERN)], OptionSpec])


def _describe(error):
    """
    one-line summary of a pydantic ValidationError: "<location>: <message>; ...".
    """
    return "; ".join(
        "%s: %s" % (".".join(map(str, details["loc"])) or "<root>", details["msg"])
        for details in error.errors()
    )


def validate_definition(definition, /):
    """
    validate a raw definition mapping and return {name: OptionSpec} in declaration order.

    raises
    - InvalidDefinitionError: on a shape violation, on an invalid key, or when a
      name/alias is declared more than once across the definition.
    """
    if not isinstance(definition, Mapping):
        raise InvalidDefinitionError("definition must be a mapping")

    try:
        definition = _definition.validate_python(dict(definition))
    except ValidationError as error:
        raise InvalidDefinitionError(_describe(error), error.errors()) from None

    seen = {}
    for name, spec in definition.items():
        for key in (name, *filter(None, spec.alias)):
            if key in seen and seen[key] != name:
                raise InvalidDefinitionError(
                    "%r is declared by both %r and %r" % (key, seen[key], name)
                )
            seen[key] = name

    return definition


def validate_parse_options(options=Unset, /):
    """
    validate a parse options mapping ({"argv": [...]}) and return a ParseOptions.
    """
    return _validate_options(ParseOptions, options)


def validate_usage_options(options=Unset, /):
    """
    validate a usage options mapping ({"colors": True | False | None}) and return a UsageOptions.
    """
    return _validate_options(UsageOptions, options)


def _validate_options(model, options):
    if options is Unset or options is None:
        return model()
    if isinstance(options, model):
        return options
    if not isinstance(options, Mapping):
        raise InvalidOptionsError("options must be a mapping")
    try:
        return model.model_validate(dict(options))
    except ValidationError as error:
        raise InvalidOptionsError(_describe(error), error.errors()) from None


__all__ = (
    "KEY_PATTERN",
    "OptionSpec",
    "ParseOptions",
    "UsageOptions",
    "validate_definition",
    "validate_parse_options",
    "validate_usage_options",
)
