"""
PairCombinator
==============

Immutable pair of two independent Options with a fluent API over the four
presence states (see Presence).

Every gated operation branches on `self.presence` with an exhaustive match,
so each state's behavior is visible at the call site:

    of(Some(5), Some("a")).reduce(lambda l, r: l + len(r))    # Some(6)
    of(Some(5), Nothing()).reduce(lambda l, r: l + len(r))    # Nothing()
"""

from __future__ import annotations

import typing
from collections.abc import Iterator
from concurrent.futures import Executor
from typing import assert_never

from kungfu import Nothing, Option, Some
from loguru import logger

from ._helpers import is_present, nullable, require, require_option, same_option
from ._types import Action, BiFn, BiPredicate, Fn, Predicate
from .presence import Presence, Side
from .schedule import Schedule, Task, completed, dispatch


class PairCombinator[T, R]:
    """
    Two optional slots, `left: Option[T]` and `right: Option[R]`.

    Instances never change after construction; every transformation returns
    a new pair or `self`. The shared both-empty instance (see both_empty())
    is interchangeable with any other both-empty pair: compare with ==,
    never with `is`.
    """

    __slots__ = ("_left", "_right")
    __match_args__ = ("left", "right")

    def __init__(self, left: Option[T], right: Option[R]) -> None:
        object.__setattr__(self, "_left", require_option(left, "left"))
        object.__setattr__(self, "_right", require_option(right, "right"))

    def __setattr__(self, name: str, value: typing.Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ------------------------------------------------------------------
    # Construction & inspection
    # ------------------------------------------------------------------

    @classmethod
    def of_nullable[A, B](cls, left: A | None, right: B | None) -> PairCombinator[A, B]:
        """Build from plain values, None meaning absent."""
        return cls(nullable(left), nullable(right))

    @property
    def left(self) -> Option[T]:
        return self._left

    @property
    def right(self) -> Option[R]:
        return self._right

    def get_left(self) -> Option[T]:
        return self._left

    def get_right(self) -> Option[R]:
        return self._right

    def get(self) -> tuple[Option[T], Option[R]]:
        """Ordered (left, right) for generic iteration."""
        return (self._left, self._right)

    def __iter__(self) -> Iterator[Option[typing.Any]]:
        return iter(self.get())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PairCombinator):
            return NotImplemented
        return same_option(self._left, other._left) and same_option(self._right, other._right)

    def __hash__(self) -> int:
        return hash((self.presence, *(o.unwrap() for o in self.get() if is_present(o))))

    def __repr__(self) -> str:
        return f"PairCombinator({self._left!r}, {self._right!r})"

    # ------------------------------------------------------------------
    # Presence
    # ------------------------------------------------------------------

    @property
    def presence(self) -> Presence:
        return Presence.classify(is_present(self._left), is_present(self._right))

    @property
    def is_both_present(self) -> bool:
        return self.presence is Presence.BOTH_PRESENT

    @property
    def is_both_empty(self) -> bool:
        return self.presence is Presence.BOTH_EMPTY

    @property
    def is_only_left_present(self) -> bool:
        return self.presence is Presence.ONLY_LEFT

    @property
    def is_only_right_present(self) -> bool:
        return self.presence is Presence.ONLY_RIGHT

    @property
    def is_left_present(self) -> bool:
        return self.presence.left_present

    @property
    def is_right_present(self) -> bool:
        return self.presence.right_present

    @property
    def is_left_empty(self) -> bool:
        return self.presence.left_empty

    @property
    def is_right_empty(self) -> bool:
        return self.presence.right_empty

    @property
    def is_only_left_empty(self) -> bool:
        return self.presence.only_left_empty

    @property
    def is_only_right_empty(self) -> bool:
        return self.presence.only_right_empty

    @property
    def is_any_present(self) -> bool:
        return self.presence.any_present

    @property
    def is_any_empty(self) -> bool:
        return self.presence.any_empty

    def _side(self, side: Side) -> Option[typing.Any]:
        match side:
            case Side.LEFT:
                return self._left
            case Side.RIGHT:
                return self._right
            case _:
                assert_never(side)

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------

    def filter_left(self, predicate: Predicate[T]) -> PairCombinator[T, R]:
        """Left becomes absent unless present and accepted by predicate."""
        require(predicate, "predicate")
        if not is_present(self._left) or predicate(self._left.unwrap()):
            return self
        return PairCombinator(Nothing(), self._right)

    def filter_right(self, predicate: Predicate[R]) -> PairCombinator[T, R]:
        """Right becomes absent unless present and accepted by predicate."""
        require(predicate, "predicate")
        if not is_present(self._right) or predicate(self._right.unwrap()):
            return self
        return PairCombinator(self._left, Nothing())

    def filter(self, predicate: BiPredicate[T, R]) -> PairCombinator[T, R]:
        """
        Joint filter over both values.

        Only evaluated when both sides are present. A rejected pair collapses
        entirely to both_empty(): the relationship failed, so neither value
        is kept. Any other state passes through unchanged.
        """
        require(predicate, "predicate")
        presence = self.presence
        match presence:
            case Presence.BOTH_PRESENT:
                if predicate(self._left.unwrap(), self._right.unwrap()):
                    return self
                return both_empty()
            case Presence.ONLY_LEFT | Presence.ONLY_RIGHT | Presence.BOTH_EMPTY:
                return self
            case _:
                assert_never(presence)

    # ------------------------------------------------------------------
    # Reduction
    # ------------------------------------------------------------------

    def reduce[U](self, reducer: BiFn[T, R, U]) -> Option[U]:
        """Some(reducer(left, right)) when both are present, else Nothing()."""
        require(reducer, "reducer")
        presence = self.presence
        match presence:
            case Presence.BOTH_PRESENT:
                return Some(reducer(self._left.unwrap(), self._right.unwrap()))
            case Presence.ONLY_LEFT | Presence.ONLY_RIGHT | Presence.BOTH_EMPTY:
                return Nothing()
            case _:
                assert_never(presence)

    def reduce_if_both_empty[U](self, default: U) -> Option[U]:
        """Some(default) when both are empty, else Nothing()."""
        if self.is_both_empty:
            return Some(default)
        return Nothing()

    def reduce_side[U](self, reducer: Fn[typing.Any, U | None], *, side: Side, only: bool = False) -> Option[U]:
        """
        Parameterized single-side reduction.

        Applies reducer to `side` when the gate admits it (see
        Presence.admits). A None result is treated as absent.
        """
        require(reducer, "reducer")
        if self.presence.admits(side, only=only):
            return nullable(reducer(self._side(side).unwrap()))
        return Nothing()

    def reduce_if_left_present[U](self, reducer: Fn[T, U | None]) -> Option[U]:
        return self.reduce_side(reducer, side=Side.LEFT)

    def reduce_if_only_left_present[U](self, reducer: Fn[T, U | None]) -> Option[U]:
        return self.reduce_side(reducer, side=Side.LEFT, only=True)

    def reduce_if_right_present[U](self, reducer: Fn[R, U | None]) -> Option[U]:
        return self.reduce_side(reducer, side=Side.RIGHT)

    def reduce_if_only_right_present[U](self, reducer: Fn[R, U | None]) -> Option[U]:
        return self.reduce_side(reducer, side=Side.RIGHT, only=True)

    def flat_reduce[U](self, reducer: BiFn[T, R, Option[U]]) -> Option[U]:
        """Like reduce(), but reducer already returns an Option."""
        require(reducer, "reducer")
        presence = self.presence
        match presence:
            case Presence.BOTH_PRESENT:
                return require_option(reducer(self._left.unwrap(), self._right.unwrap()), "reducer result")
            case Presence.ONLY_LEFT | Presence.ONLY_RIGHT | Presence.BOTH_EMPTY:
                return Nothing()
            case _:
                assert_never(presence)

    def flat_reduce_if_both_empty[U](self, default: Option[U]) -> Option[U]:
        """`default` itself when both are empty, else Nothing()."""
        default = require_option(default, "default")
        if self.is_both_empty:
            return default
        return Nothing()

    def flat_reduce_side[U](self, reducer: Fn[typing.Any, Option[U]], *, side: Side, only: bool = False) -> Option[U]:
        """Parameterized single-side flat reduction."""
        require(reducer, "reducer")
        if self.presence.admits(side, only=only):
            return require_option(reducer(self._side(side).unwrap()), "reducer result")
        return Nothing()

    def flat_reduce_left[U](self, reducer: Fn[T, Option[U]]) -> Option[U]:
        return self.flat_reduce_side(reducer, side=Side.LEFT)

    def flat_reduce_if_only_left_present[U](self, reducer: Fn[T, Option[U]]) -> Option[U]:
        return self.flat_reduce_side(reducer, side=Side.LEFT, only=True)

    def flat_reduce_right[U](self, reducer: Fn[R, Option[U]]) -> Option[U]:
        return self.flat_reduce_side(reducer, side=Side.RIGHT)

    def flat_reduce_if_only_right_present[U](self, reducer: Fn[R, Option[U]]) -> Option[U]:
        return self.flat_reduce_side(reducer, side=Side.RIGHT, only=True)

    # ------------------------------------------------------------------
    # Mapping
    # ------------------------------------------------------------------

    def map[U, D](self, mapper: BiFn[T, R, PairCombinator[U, D]]) -> PairCombinator[U, D]:
        """mapper's pair when both are present, else both_empty()."""
        require(mapper, "mapper")
        presence = self.presence
        match presence:
            case Presence.BOTH_PRESENT:
                return require(mapper(self._left.unwrap(), self._right.unwrap()), "mapper result")
            case Presence.ONLY_LEFT | Presence.ONLY_RIGHT | Presence.BOTH_EMPTY:
                return both_empty()
            case _:
                assert_never(presence)

    def map_if_both_empty(self, replacement: PairCombinator[T, R]) -> PairCombinator[T, R]:
        require(replacement, "replacement")
        if self.is_both_empty:
            return replacement
        return self

    def map_left[U](self, mapper: Fn[T, U | None]) -> PairCombinator[U, R]:
        """Transform a present left; a None result leaves left absent."""
        require(mapper, "mapper")
        if is_present(self._left):
            return PairCombinator(nullable(mapper(self._left.unwrap())), self._right)
        return PairCombinator(Nothing(), self._right)

    def map_right[U](self, mapper: Fn[R, U | None]) -> PairCombinator[T, U]:
        """Transform a present right; a None result leaves right absent."""
        require(mapper, "mapper")
        if is_present(self._right):
            return PairCombinator(self._left, nullable(mapper(self._right.unwrap())))
        return PairCombinator(self._left, Nothing())

    def map_if_only_left_present[U](self, mapper: Fn[T, U | None]) -> PairCombinator[U, R]:
        """
        map_left() when left alone is present.

        Otherwise left is cleared and right kept, even if left held a value:
        the gate decides eligibility of the left slot, not whether to leave
        the pair alone.
        """
        require(mapper, "mapper")
        if self.is_only_left_present:
            return self.map_left(mapper)
        return PairCombinator(Nothing(), self._right)

    def map_if_only_right_present[U](self, mapper: Fn[R, U | None]) -> PairCombinator[T, U]:
        """Mirror of map_if_only_left_present()."""
        require(mapper, "mapper")
        if self.is_only_right_present:
            return self.map_right(mapper)
        return PairCombinator(self._left, Nothing())

    # ------------------------------------------------------------------
    # Side effects
    # ------------------------------------------------------------------

    def run(self, action: Action) -> PairCombinator[T, R]:
        require(action, "action")
        action()
        return self

    def run_if(self, condition: bool, action: Action) -> PairCombinator[T, R]:
        """Call action when condition holds. Returns self either way."""
        require(action, "action")
        if condition:
            action()
        return self

    def run_if_left_present(self, action: Action) -> PairCombinator[T, R]:
        return self.run_if(self.is_left_present, action)

    def run_if_only_left_present(self, action: Action) -> PairCombinator[T, R]:
        return self.run_if(self.is_only_left_present, action)

    def run_if_right_present(self, action: Action) -> PairCombinator[T, R]:
        return self.run_if(self.is_right_present, action)

    def run_if_only_right_present(self, action: Action) -> PairCombinator[T, R]:
        return self.run_if(self.is_only_right_present, action)

    def run_if_left_empty(self, action: Action) -> PairCombinator[T, R]:
        return self.run_if(self.is_left_empty, action)

    def run_if_only_left_empty(self, action: Action) -> PairCombinator[T, R]:
        return self.run_if(self.is_only_left_empty, action)

    def run_if_right_empty(self, action: Action) -> PairCombinator[T, R]:
        return self.run_if(self.is_right_empty, action)

    def run_if_only_right_empty(self, action: Action) -> PairCombinator[T, R]:
        return self.run_if(self.is_only_right_empty, action)

    def run_if_both_present(self, action: Action) -> PairCombinator[T, R]:
        return self.run_if(self.is_both_present, action)

    def run_if_both_empty(self, action: Action) -> PairCombinator[T, R]:
        return self.run_if(self.is_both_empty, action)

    # ------------------------------------------------------------------
    # Asynchronous combination
    # ------------------------------------------------------------------

    def then_combine[U](
        self,
        combiner: BiFn[T, R, U],
        *,
        schedule: Schedule = Schedule.INLINE,
        executor: Executor | None = None,
    ) -> Task[U]:
        """
        Task yielding Some(combiner(left, right)) when both are present.

        schedule=INLINE computes now, on this thread, and returns a completed
        task. schedule=WORKER submits combiner to an executor at once; it runs
        exactly once and its exceptions surface from `await task`. Any other state gives a completed task
        carrying Nothing().
        """
        require(combiner, "combiner")
        presence = self.presence
        match presence:
            case Presence.BOTH_PRESENT:
                left, right = self._left.unwrap(), self._right.unwrap()
                return dispatch(schedule, lambda: Some(combiner(left, right)), executor=executor)
            case Presence.ONLY_LEFT | Presence.ONLY_RIGHT | Presence.BOTH_EMPTY:
                logger.debug("then_combine skipped, pair is {}", presence.value)
                return completed(Nothing())
            case _:
                assert_never(presence)

    def then_combine_async[U](self, combiner: BiFn[T, R, U], *, executor: Executor | None = None) -> Task[U]:
        return self.then_combine(combiner, schedule=Schedule.WORKER, executor=executor)

    def then_apply[U](
        self,
        fn: Fn[typing.Any, U | None],
        *,
        side: Side,
        only: bool = False,
        schedule: Schedule = Schedule.INLINE,
        executor: Executor | None = None,
    ) -> Task[U]:
        """
        Parameterized single-side task.

        Gate: `side` present (only=False) or `side` alone present (only=True).
        A failed gate gives a completed task carrying Nothing(); a None
        result from fn is treated as absent.
        """
        require(fn, "fn")
        if not self.presence.admits(side, only=only):
            logger.debug("then_apply on {} skipped, pair is {}", side.value, self.presence.value)
            return completed(Nothing())
        value = self._side(side).unwrap()
        return dispatch(schedule, lambda: nullable(fn(value)), executor=executor)

    def then_apply_left[U](self, fn: Fn[T, U | None]) -> Task[U]:
        return self.then_apply(fn, side=Side.LEFT)

    def then_apply_if_only_left_present[U](self, fn: Fn[T, U | None]) -> Task[U]:
        return self.then_apply(fn, side=Side.LEFT, only=True)

    def then_apply_right[U](self, fn: Fn[R, U | None]) -> Task[U]:
        return self.then_apply(fn, side=Side.RIGHT)

    def then_apply_if_only_right_present[U](self, fn: Fn[R, U | None]) -> Task[U]:
        return self.then_apply(fn, side=Side.RIGHT, only=True)

    def then_apply_async_left[U](self, fn: Fn[T, U | None], *, executor: Executor | None = None) -> Task[U]:
        return self.then_apply(fn, side=Side.LEFT, schedule=Schedule.WORKER, executor=executor)

    def then_apply_async_if_only_left_present[U](
        self, fn: Fn[T, U | None], *, executor: Executor | None = None
    ) -> Task[U]:
        return self.then_apply(fn, side=Side.LEFT, only=True, schedule=Schedule.WORKER, executor=executor)

    def then_apply_async_right[U](self, fn: Fn[R, U | None], *, executor: Executor | None = None) -> Task[U]:
        return self.then_apply(fn, side=Side.RIGHT, schedule=Schedule.WORKER, executor=executor)

    def then_apply_async_if_only_right_present[U](
        self, fn: Fn[R, U | None], *, executor: Executor | None = None
    ) -> Task[U]:
        return self.then_apply(fn, side=Side.RIGHT, only=True, schedule=Schedule.WORKER, executor=executor)

    # ------------------------------------------------------------------
    # Swap
    # ------------------------------------------------------------------

    def swap(self) -> PairCombinator[R, T]:
        return PairCombinator(self._right, self._left)


# Non-generic shared instance; handed out with caller types by both_empty()
_BOTH_EMPTY: PairCombinator[typing.Any, typing.Any] = PairCombinator(Nothing(), Nothing())


def both_empty[T, R]() -> PairCombinator[T, R]:
    """The canonical (Nothing, Nothing) pair, typed for the caller."""
    return _BOTH_EMPTY


def of[T, R](left: Option[T], right: Option[R]) -> PairCombinator[T, R]:
    """
    Build a pair from two Options.

    Raises NullArgumentError if either container is None. An absent Option
    (Nothing()) is valid input.
    """
    return PairCombinator(left, right)


def of_nullable[T, R](left: T | None, right: R | None) -> PairCombinator[T, R]:
    """Build a pair from plain values, None meaning absent."""
    return PairCombinator.of_nullable(left, right)


__all__ = (
    "PairCombinator",
    "both_empty",
    "of",
    "of_nullable",
)
