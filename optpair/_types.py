"""
Core type definitions for optpair.

Aliases shared by the pair combinator and the scheduling helpers.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a single value
type Predicate[T] = Callable[[T], bool]

# BiPredicate = function that tests left and right together
type BiPredicate[T, R] = Callable[[T, R], bool]

# Fn = single-side transformer
type Fn[T, U] = Callable[[T], U]

# BiFn = joint transformer over both payloads
type BiFn[T, R, U] = Callable[[T, R], U]

# Action = side effect that takes nothing and returns nothing
type Action = Callable[[], None]

# NoError = tasks never carry an Error branch, failures propagate as exceptions
type NoError = typing.Never

__all__ = (
    "Predicate",
    "BiPredicate",
    "Fn",
    "BiFn",
    "Action",
    "NoError",
)
