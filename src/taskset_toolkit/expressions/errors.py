"""
Module: expressions.errors

Purpose:
    Exception hierarchy for expression evaluation. Every error is local to
    one expression; none are recovered, they abort rendering of the
    enclosing question and propagate up through document assembly.

Key Classes:
    - ExpressionError: Base class
    - UnterminatedExpression: "\\[" without a following "]\\"
    - AmbiguousExpression: Both ".." and "," in one expression
    - InvalidRange: Bad bound, min > max, or no integer in range
    - InvalidListElement: List element is not a number
    - DomainViolation: Bounds incompatible with the selected domain
    - UnsupportedModifierCombination: No domain defined for the modifiers
"""

from __future__ import annotations

from typing import Optional


class ExpressionError(Exception):
    """Error evaluating a `\\[...]\\` expression."""
    
    def __init__(self, message: str, expression: Optional[str] = None):
        super().__init__(message)
        self.expression = expression


class UnterminatedExpression(ExpressionError):
    """Opening marker has no matching closing marker."""
    
    def __init__(self, message: str, expression: Optional[str] = None, position: int = -1):
        super().__init__(message, expression)
        self.position = position


class AmbiguousExpression(ExpressionError):
    """Expression mixes range and list syntax."""
    pass


class InvalidRange(ExpressionError):
    """Range bounds could not be parsed or do not form a valid interval."""
    pass


class InvalidListElement(ExpressionError):
    """A list element could not be parsed as a number."""
    pass


class DomainViolation(ExpressionError):
    """Range bounds fall outside the domain selected by the modifiers."""
    pass


class UnsupportedModifierCombination(ExpressionError):
    """No number domain is defined for the given modifier combination."""
    pass
