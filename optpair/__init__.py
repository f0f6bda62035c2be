"""
optpair: combinators over a pair of optional values.

Replaces four-way if/else cascades over two Options with one fluent,
immutable value:

    from kungfu import Nothing, Some
    import optpair

    pair = optpair.of(Some(5), Some("a"))
    pair.reduce(lambda n, s: n + len(s))            # Some(6)
    pair.filter(lambda n, s: n > 10)                # both_empty()
    pair.swap().map_left(str.upper)                 # (Some("A"), Some(5))

Architecture:
- PairCombinator holds the two slots and every operation
- Presence is the four-state tag each gated operation matches on
- Schedule selects inline vs worker evaluation for the then_* tasks
"""

from loguru import logger

# Core types
from ._types import Action, BiFn, BiPredicate, Fn, NoError, Predicate

# Presence classification
from .presence import Presence, Side

# Scheduling boundary
from .schedule import Schedule, Task, completed, dispatch, submit

# Pair combinator
from .pair import PairCombinator, both_empty, of, of_nullable

# Errors
from ._errors import NullArgumentError

# Library default: silent until the application calls logger.enable("optpair")
logger.disable("optpair")

__all__ = (
    # Types
    "Action",
    "BiFn",
    "BiPredicate",
    "Fn",
    "NoError",
    "Predicate",
    # Presence
    "Presence",
    "Side",
    # Schedule
    "Schedule",
    "Task",
    "completed",
    "dispatch",
    "submit",
    # Pair
    "PairCombinator",
    "both_empty",
    "of",
    "of_nullable",
    # Errors
    "NullArgumentError",
)
