"""
Module: expressions.domains

Purpose:
    Number domains a range expression can draw from, and the lookup table
    that maps a modifier set onto one of them.

Key Classes:
    - NumberDomain: Enum of generation strategies

Key Functions:
    - resolve_domain(): Modifier set -> NumberDomain
    - draw(): Draw one value from a domain

Domain table (keyed by the effective (N, Z, Q) flags):

    | N | Z | Q | Domain              |
    |---|---|---|---------------------|
    | T | T | T | REAL                |
    | T | T | F | SIGNED_INTEGER      |
    | T | F | T | NONNEGATIVE_INTEGER |
    | T | F | F | NONNEGATIVE_INTEGER |
    | F | * | * | UNSUPPORTED         |

    R is not part of the key. Writing no modifiers at all selects NZ.

Used By:
    - expressions.generator: generate()
"""

from __future__ import annotations

import logging
import math
import random
from enum import Enum, auto
from typing import Dict, Tuple

from taskset_toolkit.core.models.expressions import ModifierSet, RangeExpression

from .errors import DomainViolation, InvalidRange, UnsupportedModifierCombination

logger = logging.getLogger(__name__)


class NumberDomain(Enum):
    """
    Generation strategy for a range expression.
    
    Attributes:
        REAL: Uniform real in [min, max], rounded to 2 decimals
        SIGNED_INTEGER: Uniform integer in [min, max], any sign
        NONNEGATIVE_INTEGER: Uniform integer in [min, max], min must be >= 0
        UNSUPPORTED: No defined domain; evaluation fails
    """
    
    REAL = auto()
    SIGNED_INTEGER = auto()
    NONNEGATIVE_INTEGER = auto()
    UNSUPPORTED = auto()


DOMAIN_TABLE: Dict[Tuple[bool, bool, bool], NumberDomain] = {
    (True, True, True): NumberDomain.REAL,
    (True, True, False): NumberDomain.SIGNED_INTEGER,
    (True, False, True): NumberDomain.NONNEGATIVE_INTEGER,
    (True, False, False): NumberDomain.NONNEGATIVE_INTEGER,
    (False, True, True): NumberDomain.UNSUPPORTED,
    (False, True, False): NumberDomain.UNSUPPORTED,
    (False, False, True): NumberDomain.UNSUPPORTED,
    (False, False, False): NumberDomain.UNSUPPORTED,
}


def resolve_domain(modifiers: ModifierSet) -> NumberDomain:
    """
    Look up the domain for a modifier set.
    
    The default set (NZ) is substituted when no modifier letters were written.
    
    Args:
        modifiers: Modifiers as parsed
        
    Returns:
        NumberDomain from DOMAIN_TABLE
    """
    return DOMAIN_TABLE[modifiers.effective().key]


def draw(expression: RangeExpression, rng: random.Random) -> float:
    """
    Draw one value for a range expression.
    
    Args:
        expression: Parsed range
        rng: Random source
        
    Returns:
        Drawn value (integral for integer domains)
        
    Raises:
        UnsupportedModifierCombination: Modifiers map to UNSUPPORTED
        DomainViolation: Non-negative domain with a negative minimum
        InvalidRange: No integer (or, for REAL, no 2-decimal value) between the bounds
    """
    domain = resolve_domain(expression.modifiers)
    minimum, maximum = expression.minimum, expression.maximum
    
    if domain is NumberDomain.UNSUPPORTED:
        raise UnsupportedModifierCombination(
            f"No number domain defined for modifiers {expression.modifiers}"
        )
    
    if domain is NumberDomain.REAL:
        return _draw_real(minimum, maximum, rng)
    
    if domain is NumberDomain.NONNEGATIVE_INTEGER and minimum < 0:
        raise DomainViolation(
            f"Range [{minimum:g}, {maximum:g}] is not within the natural numbers"
        )
    
    low, high = math.ceil(minimum), math.floor(maximum)
    if low > high:
        raise InvalidRange(f"Range [{minimum:g}, {maximum:g}] contains no integers")
    return float(rng.randint(low, high))


def _draw_real(minimum: float, maximum: float, rng: random.Random) -> float:
    """
    Uniform real rounded to 2 decimals, kept inside [minimum, maximum].
    
    Rounding can push a draw just past a bound with more than two
    decimals, so the result is clamped to the 2-decimal grid inside the
    range.
    
    Raises:
        InvalidRange: No 2-decimal value lies between the bounds
    """
    # 0.1 * 100 is 10.000000000000002; round before ceil/floor
    low = math.ceil(round(minimum * 100, 6)) / 100
    high = math.floor(round(maximum * 100, 6)) / 100
    if low > high:
        raise InvalidRange(
            f"Range [{minimum:g}, {maximum:g}] contains no value with two decimals"
        )
    value = round(rng.uniform(minimum, maximum), 2)
    return min(max(value, low), high)
