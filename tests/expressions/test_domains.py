"""
Unit tests for number domain selection and drawing.
"""

import itertools
import random

import pytest

from taskset_toolkit.core.models import ModifierSet, RangeExpression
from taskset_toolkit.expressions import (
    DomainViolation,
    InvalidRange,
    NumberDomain,
    UnsupportedModifierCombination,
    resolve_domain,
)
from taskset_toolkit.expressions.domains import DOMAIN_TABLE, draw
from taskset_toolkit.expressions.parser import parse_expression


def _range(content: str) -> RangeExpression:
    return parse_expression(content)


class TestDomainTable:
    """Tests for the (N, Z, Q) lookup table."""
    
    def test_table_when_inspected_then_covers_every_flag_triple(self):
        assert set(DOMAIN_TABLE) == set(itertools.product((True, False), repeat=3))
    
    @pytest.mark.parametrize("letters,expected", [
        ("NZQ", NumberDomain.REAL),
        ("QZN", NumberDomain.REAL),
        ("NZ", NumberDomain.SIGNED_INTEGER),
        ("", NumberDomain.SIGNED_INTEGER),
        ("N", NumberDomain.NONNEGATIVE_INTEGER),
        ("NQ", NumberDomain.NONNEGATIVE_INTEGER),
        ("Z", NumberDomain.UNSUPPORTED),
        ("Q", NumberDomain.UNSUPPORTED),
        ("R", NumberDomain.UNSUPPORTED),
        ("ZQ", NumberDomain.UNSUPPORTED),
    ])
    def test_resolve_when_letters_given_then_maps_to_domain(self, letters, expected):
        assert resolve_domain(ModifierSet.from_letters(letters)) is expected
    
    def test_resolve_when_r_added_then_domain_unchanged(self):
        for letters in ("NZQ", "NZ", "N"):
            plain = resolve_domain(ModifierSet.from_letters(letters))
            assert resolve_domain(ModifierSet.from_letters(letters + "R")) is plain


class TestDraw:
    """Tests for drawing values from each domain."""
    
    @pytest.mark.parametrize("content", ["NZ-5..10", "-5..10", "N0..10", "NQ2..9", "NZQ-5..5"])
    def test_draw_when_valid_range_then_within_bounds(self, content, rng):
        expr = _range(content)
        for _ in range(200):
            value = draw(expr, rng)
            assert expr.minimum <= value <= expr.maximum
    
    @pytest.mark.parametrize("content", ["NZ-5..10", "N0..10", "100..500"])
    def test_draw_when_integer_domain_then_integral(self, content, rng):
        expr = _range(content)
        assert all(draw(expr, rng).is_integer() for _ in range(100))
    
    def test_draw_when_integer_domain_then_both_bounds_reachable(self, rng):
        expr = _range("NZ-1..1")
        seen = {draw(expr, rng) for _ in range(300)}
        assert seen == {-1.0, 0.0, 1.0}
    
    def test_draw_when_real_domain_then_two_decimals(self, rng):
        expr = _range("NZQ-5..5")
        for _ in range(200):
            value = draw(expr, rng)
            assert round(value, 2) == value
    
    def test_draw_when_real_domain_then_produces_fractions(self, rng):
        expr = _range("NZQ0..1")
        assert any(not draw(expr, rng).is_integer() for _ in range(50))
    
    @pytest.mark.parametrize("content", ["NZQ0.001..0.019", "NZQ-0.019..-0.001", "NZQ0.005..0.015", "NZQ0.1..0.3"])
    def test_draw_when_real_bounds_finer_than_cents_then_stays_within_range(self, content, rng):
        expr = _range(content)
        for _ in range(200):
            value = draw(expr, rng)
            assert expr.minimum <= value <= expr.maximum
    
    def test_draw_when_real_range_holds_one_cent_value_then_always_that_value(self, rng):
        expr = _range("NZQ0.001..0.019")
        assert {draw(expr, rng) for _ in range(50)} == {0.01}
    
    def test_draw_when_real_range_holds_no_cent_value_then_raises_invalid_range(self, rng):
        with pytest.raises(InvalidRange, match="two decimals"):
            draw(_range("NZQ0.001..0.004"), rng)
    
    def test_draw_when_natural_with_negative_minimum_then_raises_domain_violation(self, rng):
        with pytest.raises(DomainViolation, match="natural numbers"):
            draw(_range("N-5..-2"), rng)
    
    def test_draw_when_natural_with_nonzero_maximum_then_allowed(self, rng):
        """A non-negative range with a positive maximum is a valid natural range."""
        assert 1 <= draw(_range("N1..6"), rng) <= 6
    
    def test_draw_when_signed_and_natural_on_negative_range_then_differ(self, rng):
        assert -5 <= draw(_range("NZ-5..5"), rng) <= 5
        with pytest.raises(DomainViolation):
            draw(_range("N-5..5"), rng)
    
    @pytest.mark.parametrize("content", ["Z1..5", "Q1..5", "R1..5", "ZQ1..5", "ZQR1..5"])
    def test_draw_when_no_n_modifier_then_raises_unsupported(self, content, rng):
        with pytest.raises(UnsupportedModifierCombination):
            draw(_range(content), rng)
    
    def test_draw_when_no_integer_between_bounds_then_raises_invalid_range(self, rng):
        with pytest.raises(InvalidRange, match="no integers"):
            draw(_range("N1.2..1.8"), rng)
    
    def test_draw_when_fractional_bounds_then_integers_inside(self, rng):
        expr = _range("NZ-1.5..1.5")
        assert {draw(expr, rng) for _ in range(200)} <= {-1.0, 0.0, 1.0}
    
    def test_draw_when_same_seed_then_same_value(self):
        expr = _range("NZ-1000..1000")
        assert draw(expr, random.Random(9)) == draw(expr, random.Random(9))
