from __future__ import annotations

import typing

from kungfu import Nothing, Option, Some

from optpair import PairCombinator, of

ABSENT = object()


def value(option: Option[typing.Any]) -> typing.Any:
    """Payload of a Some, ABSENT for Nothing."""
    if isinstance(option, Some):
        return option.unwrap()
    assert isinstance(option, Nothing)
    return ABSENT


def both(left: typing.Any = 1, right: typing.Any = "r") -> PairCombinator[typing.Any, typing.Any]:
    return of(Some(left), Some(right))


def only_left(left: typing.Any = 1) -> PairCombinator[typing.Any, typing.Any]:
    return of(Some(left), Nothing())


def only_right(right: typing.Any = "r") -> PairCombinator[typing.Any, typing.Any]:
    return of(Nothing(), Some(right))


def empty() -> PairCombinator[typing.Any, typing.Any]:
    return of(Nothing(), Nothing())


ALL_STATES = (both, only_left, only_right, empty)


class Recorder:
    """Counts how many times it was called as an action."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1
