from __future__ import annotations

import pytest
from kungfu import Nothing, Some

from optpair import NullArgumentError, PairCombinator, both_empty, of, of_nullable

from support import ABSENT, value


class TestOf:
    def test_builds_from_two_options(self):
        pair = of(Some(1), Nothing())
        assert value(pair.get_left()) == 1
        assert value(pair.get_right()) is ABSENT

    def test_absent_options_are_valid_input(self):
        pair = of(Nothing(), Nothing())
        assert pair.is_both_empty

    def test_none_left_container_raises(self):
        with pytest.raises(NullArgumentError) as exc_info:
            of(None, Some(1))
        assert exc_info.value.argument == "left"

    def test_none_right_container_raises(self):
        with pytest.raises(NullArgumentError) as exc_info:
            of(Some(1), None)
        assert exc_info.value.argument == "right"

    def test_null_argument_is_a_type_error(self):
        with pytest.raises(TypeError):
            of(None, None)

    def test_unwrapped_value_is_rejected(self):
        with pytest.raises(TypeError, match="Some or Nothing"):
            of(5, Some(1))


class TestOfNullable:
    def test_none_becomes_absent(self):
        pair = of_nullable(None, "x")
        assert pair.is_only_right_present
        assert value(pair.right) == "x"

    def test_classmethod_form(self):
        pair = PairCombinator.of_nullable(3, None)
        assert pair.is_only_left_present


class TestInspection:
    def test_get_returns_ordered_pair(self):
        left, right = Some(1), Nothing()
        pair = of(left, right)
        assert pair.get() == (left, right)

    def test_getters_return_stored_options(self):
        left, right = Some("a"), Some("b")
        pair = of(left, right)
        assert pair.get_left() is left
        assert pair.get_right() is right

    def test_unpacking(self):
        left, right = of(Some(1), Some(2))
        assert value(left) == 1
        assert value(right) == 2

    def test_pattern_matching(self):
        match of(Some(1), Nothing()):
            case PairCombinator(left, right):
                assert value(left) == 1
                assert value(right) is ABSENT
            case _:
                pytest.fail("pair did not match")


class TestImmutability:
    def test_attributes_cannot_be_set(self):
        pair = of(Some(1), Some(2))
        with pytest.raises(AttributeError):
            pair._left = Nothing()

    def test_attributes_cannot_be_deleted(self):
        pair = of(Some(1), Some(2))
        with pytest.raises(AttributeError):
            del pair._right


class TestValueSemantics:
    def test_equal_pairs(self):
        assert of(Some(1), Nothing()) == of(Some(1), Nothing())

    def test_different_payloads(self):
        assert of(Some(1), Nothing()) != of(Some(2), Nothing())

    def test_different_presence(self):
        assert of(Some(1), Nothing()) != of(Nothing(), Some(1))

    def test_fresh_empty_equals_canonical_empty(self):
        assert of(Nothing(), Nothing()) == both_empty()

    def test_equal_pairs_hash_equal(self):
        assert hash(of(Some(1), Some("a"))) == hash(of(Some(1), Some("a")))
        assert hash(of(Nothing(), Nothing())) == hash(both_empty())

    def test_not_equal_to_other_types(self):
        assert of(Some(1), Some(2)) != (1, 2)

    def test_repr(self):
        assert repr(of(Some(1), Nothing())).startswith("PairCombinator(")


def test_both_empty_is_shared():
    assert both_empty() is both_empty()
    assert both_empty().is_both_empty


def test_of_nullable_keeps_subclass():
    class NamedPair(PairCombinator):
        __slots__ = ()

    pair = NamedPair.of_nullable(1, None)
    assert type(pair) is NamedPair
    assert pair.is_only_left_present
