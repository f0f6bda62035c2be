"""
Presence classification
=======================

The four mutually exclusive states of a pair of Options, plus the side
selector used by single-argument operations.
"""

from __future__ import annotations

import enum
from typing import assert_never


class Side(enum.StrEnum):
    """Which slot a single-argument operation reads."""

    LEFT = "left"
    RIGHT = "right"


class Presence(enum.StrEnum):
    """
    Presence state of a pair.

    Exactly one member describes any pair:
    - BOTH_PRESENT: left and right hold values
    - ONLY_LEFT: left holds a value, right is empty
    - ONLY_RIGHT: right holds a value, left is empty
    - BOTH_EMPTY: neither side holds a value

    Non-disjoint predicates (any_present, left_empty, ...) are derived
    from the member, never stored.
    """

    BOTH_PRESENT = "both_present"
    ONLY_LEFT = "only_left"
    ONLY_RIGHT = "only_right"
    BOTH_EMPTY = "both_empty"

    @classmethod
    def classify(cls, left_present: bool, right_present: bool) -> Presence:
        match (left_present, right_present):
            case (True, True):
                return cls.BOTH_PRESENT
            case (True, False):
                return cls.ONLY_LEFT
            case (False, True):
                return cls.ONLY_RIGHT
            case _:
                return cls.BOTH_EMPTY

    @property
    def left_present(self) -> bool:
        return self in (Presence.BOTH_PRESENT, Presence.ONLY_LEFT)

    @property
    def right_present(self) -> bool:
        return self in (Presence.BOTH_PRESENT, Presence.ONLY_RIGHT)

    @property
    def left_empty(self) -> bool:
        return not self.left_present

    @property
    def right_empty(self) -> bool:
        return not self.right_present

    @property
    def any_present(self) -> bool:
        return self is not Presence.BOTH_EMPTY

    @property
    def any_empty(self) -> bool:
        return self is not Presence.BOTH_PRESENT

    @property
    def only_left_empty(self) -> bool:
        """Left is the sole empty slot, i.e. right alone is present."""
        return self is Presence.ONLY_RIGHT

    @property
    def only_right_empty(self) -> bool:
        """Right is the sole empty slot, i.e. left alone is present."""
        return self is Presence.ONLY_LEFT

    def admits(self, side: Side, *, only: bool = False) -> bool:
        """
        Gate check for single-side operations.

        only=False: the side is present, whatever the other side holds.
        only=True: the side is the sole present one.
        """
        match side:
            case Side.LEFT:
                return self is Presence.ONLY_LEFT if only else self.left_present
            case Side.RIGHT:
                return self is Presence.ONLY_RIGHT if only else self.right_present
            case _:
                assert_never(side)


__all__ = ("Presence", "Side")
