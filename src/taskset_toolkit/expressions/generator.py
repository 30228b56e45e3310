"""
Module: expressions.generator

Purpose:
    Turn one parsed expression into its literal text.

Key Functions:
    - generate(): ParsedExpression -> str
    - format_number(): Canonical text of a drawn range value
    - format_element(): Canonical text of a list element

Dependencies:
    - random (std): Injected random.Random capability
    - expressions.domains: Range domain selection

Used By:
    - expressions.renderer: render_question()
"""

from __future__ import annotations

import logging
import random
from fractions import Fraction
from typing import Optional

from taskset_toolkit.core.models.expressions import (
    EmptyExpression,
    ListExpression,
    Number,
    ParsedExpression,
    RangeExpression,
)

from .domains import draw

logger = logging.getLogger(__name__)


def generate(expression: ParsedExpression, rng: Optional[random.Random] = None) -> str:
    """
    Generate the literal value of an expression.
    
    Args:
        expression: Parsed expression
        rng: Random source; a fresh unseeded generator when omitted
        
    Returns:
        Literal text to substitute into the question
        
    Raises:
        ExpressionError: Any domain error raised while drawing a range value
        
    Example:
        >>> generate(ListExpression(values=(1.0, 2.0))) in ("1", "2")
        True
    """
    if rng is None:
        rng = random.Random()
    
    if isinstance(expression, EmptyExpression):
        return ""
    if isinstance(expression, ListExpression):
        return format_element(rng.choice(expression.values))
    if isinstance(expression, RangeExpression):
        return format_number(draw(expression, rng))
    
    raise TypeError(f"Unknown expression type: {type(expression).__name__}")


def format_number(value: float) -> str:
    """
    Format a range value: rounded to 2 decimals, integral values without
    a fractional part, everything else with exactly 2 decimals.
    
    Example:
        >>> format_number(3.0), format_number(2.5), format_number(-0.004)
        ('3', '2.50', '0')
    """
    rounded = round(value, 2)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.2f}"


def format_element(value: Number) -> str:
    """
    Format a list element in its natural form: "3", "4.2", "-0.5", "1/3".
    """
    if isinstance(value, Fraction):
        if value.denominator == 1:
            return str(value.numerator)
        return f"{value.numerator}/{value.denominator}"
    if value == int(value):
        return str(int(value))
    return repr(value)
