"""
Module: expressions

Purpose:
    Evaluation engine for the `\\[...]\\` randomization micro-syntax embedded
    in question templates.

Syntax:
    - Range: \\[<modifiers?><min>..<max>]\\ e.g. \\[NZ-5..10]\\, \\[100..500]\\
    - List:  \\[v1,v2,...,vn]\\            e.g. \\[1,2,3]\\, \\[-1,1/3,4.2]\\
    - Modifiers (case-insensitive): N natural, Z integer, Q rational, R real

Key Functions:
    - locate(): Find expression spans in a template
    - parse_expression(): Classify and parse one expression
    - generate(): Produce one literal value
    - render_question(): Evaluate a whole template

Control flow:
    render_question -> locate -> parse_expression -> generate

Used By:
    - taskset_toolkit.builder: Document assembly
"""

from .errors import (
    ExpressionError,
    UnterminatedExpression,
    AmbiguousExpression,
    InvalidRange,
    InvalidListElement,
    DomainViolation,
    UnsupportedModifierCombination,
)
from .locator import locate
from .parser import parse_expression
from .domains import NumberDomain, resolve_domain
from .generator import generate, format_number
from .renderer import render_question, render_task

__all__ = [
    # Errors
    "ExpressionError",
    "UnterminatedExpression",
    "AmbiguousExpression",
    "InvalidRange",
    "InvalidListElement",
    "DomainViolation",
    "UnsupportedModifierCombination",
    # Engine
    "locate",
    "parse_expression",
    "NumberDomain",
    "resolve_domain",
    "generate",
    "format_number",
    "render_question",
    "render_task",
]
