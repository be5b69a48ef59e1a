"""
Internal helpers shared by the bossy modules.

Scope
- UnsetType / Unset: a falsy singleton meaning "argument not provided", so that
  None can stay a legitimate user value (e.g., an explicit `colors=None`).
- coalesce(): materialize a concrete default only for Unset.
- rename(): give generated closures a stable name.
- main(): read-only access to host configuration published on `__main__`.
"""
import builtins
import functools
from types import MappingProxyType
from typing import final


@final
class UnsetType:
    """
    internal sentinel type representing a value that was not provided.

    characteristics
    - boolean-false: bool(Unset) is False, but it is distinct from None and 0.
    - printable: repr(Unset) -> "Unset".
    - singleton per process: UnsetType() always yields the same instance.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


# process-wide "not provided" marker; distinct from None, falsy.
Unset = UnsetType()


def coalesce(object, default=None, /):
    """
    return `object` unless it is the Unset sentinel, in which case return `default`.

    falsy values like None, 0, "" or [] are preserved as-is.

    examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce(None, "fallback")   -> None
    """
    return object if object is not Unset else default


def rename(*parameters):
    """
    set a stable __name__/__qualname__ on a callable, or return a decorator doing so.

    forms
    - rename(callable, name) -> callable (renamed in place)
    - rename(name)           -> decorator

    keeps generated closures readable in tracebacks and reprs (no "<locals>" noise).
    """
    match len(parameters):
        case 2:
            callable, name = parameters
            if not builtins.callable(callable):
                raise TypeError("rename() first argument must be callable")
            if not isinstance(name, str):
                raise TypeError("rename() second argument must be a string")
            callable.__qualname__ = name
            callable.__name__ = name
            return callable
        case 1:
            name, = parameters
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def wrapper(callable):
                if not builtins.callable(callable):
                    raise TypeError("@rename() must be applied to a callable")
                return rename(callable, name)

            return rename(wrapper, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


def main(name, default=Unset, /):
    """
    look up a host configuration attribute (e.g. __styles__) on the __main__ module.

    mappings are returned as read-only views; a missing attribute yields `default`
    (an empty mapping when no default is given).
    """
    object = getattr(__import__("__main__"), name, coalesce(default, {}))
    if isinstance(object, dict):
        return MappingProxyType(object)
    return object


__all__ = (
    "coalesce",
    "rename",
    "main",
    "UnsetType",
    "Unset",
)
