"""
Core Models Package

Immutable data models shared by the expression engine and the builder.

All models in this package are frozen dataclasses, so a template handed to
the builder cannot change while a copy is being generated and parsed
expressions can be passed around freely.
"""

from .assignment import Task, Assignment
from .expressions import (
    CLOSE_MARKER,
    OPEN_MARKER,
    EmptyExpression,
    ExpressionSpan,
    ListExpression,
    ModifierSet,
    ParsedExpression,
    RangeExpression,
)

__all__ = [
    "Task",
    "Assignment",
    "ExpressionSpan",
    "ModifierSet",
    "RangeExpression",
    "ListExpression",
    "EmptyExpression",
    "ParsedExpression",
    "OPEN_MARKER",
    "CLOSE_MARKER",
]
