"""Internal helpers for optpair.

Argument checks and Option lifting shared by the pair and scheduling modules."""

from __future__ import annotations

from kungfu import Nothing, Option, Some

from ._errors import NullArgumentError

def require[T](value: T | None, name: str) -> T:
    """Raise NullArgumentError when a required argument is None."""
    if value is None:
        raise NullArgumentError(name)
    return value

def require_option[T](value: Option[T] | None, name: str) -> Option[T]:
    """Accept only Some/Nothing containers."""
    option = require(value, name)
    if not isinstance(option, (Some, Nothing)):
        raise TypeError(f"{name} must be Some or Nothing, got {type(option).__name__}")
    return option

def is_present(option: Option[object]) -> bool:
    return isinstance(option, Some)

def nullable[T](value: T | None) -> Option[T]:
    """
    Lift a plain value into Option. None becomes Nothing().

    Used wherever a caller function may legitimately produce "no value".
    """
    if value is None:
        return Nothing()
    return Some(value)

def same_option(a: Option[object], b: Option[object]) -> bool:
    """Value equality for Options that does not depend on Some.__eq__."""
    if is_present(a) and is_present(b):
        return a.unwrap() == b.unwrap()
    return not is_present(a) and not is_present(b)

__all__ = (
    "require",
    "require_option",
    "is_present",
    "nullable",
    "same_option",
)
