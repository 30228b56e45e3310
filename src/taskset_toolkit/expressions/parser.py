"""
Module: expressions.parser

Purpose:
    Classify the inner text of one expression and parse it into a
    RangeExpression, ListExpression or EmptyExpression.

Key Functions:
    - parse_expression(): Main entry point
    - parse_number(): Decimal literal grammar shared by both forms
    - split_modifiers(): Separate the N/Z/Q/R prefix from range or list content

Grammar:
    range    := modifiers? number ".." number
    list     := modifiers? element ("," element)+
    empty    := anything without ".." or ","
    element  := number | integer "/" integer
    number   := ["+" | "-"] (digits ["." digits?] | "." digits)

Used By:
    - expressions.renderer: render_question()
"""

from __future__ import annotations

import logging
import re
from fractions import Fraction
from typing import Tuple

from taskset_toolkit.core.models.expressions import (
    EmptyExpression,
    ListExpression,
    ModifierSet,
    Number,
    ParsedExpression,
    RangeExpression,
)

from .errors import AmbiguousExpression, InvalidListElement, InvalidRange

logger = logging.getLogger(__name__)

RANGE_SEPARATOR = ".."
LIST_SEPARATOR = ","

_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
_FRACTION_RE = re.compile(r"([+-]?\d+)\s*/\s*(\d+)")
_MODIFIER_RE = re.compile(r"[NZQR]*", re.IGNORECASE)


def parse_expression(content: str) -> ParsedExpression:
    """
    Parse the inner text of an expression.
    
    Args:
        content: Text between the markers, e.g. "NZ-5..10" or "1,2,3"
        
    Returns:
        RangeExpression or ListExpression; EmptyExpression when the
        content is blank or holds neither separator
        
    Raises:
        AmbiguousExpression: Content holds both ".." and ","
        InvalidRange: Unparseable bound or min > max
        InvalidListElement: Unparseable list element
        
    Example:
        >>> parse_expression("N1..6")
        RangeExpression(modifiers=ModifierSet(n=True, ...), minimum=1.0, maximum=6.0)
    """
    if not content.strip():
        return EmptyExpression()
    
    is_range = RANGE_SEPARATOR in content
    is_list = LIST_SEPARATOR in content
    
    if is_range and is_list:
        raise AmbiguousExpression(
            f"Ambiguous expression {content!r}: found both '{RANGE_SEPARATOR}' and '{LIST_SEPARATOR}'",
            expression=content,
        )
    if is_range:
        return _parse_range(content)
    if is_list:
        return _parse_list(content)
    
    logger.debug(f"Expression {content!r} has no separator; rendering it empty")
    return EmptyExpression()


def _parse_range(content: str) -> RangeExpression:
    head, _, tail = content.partition(RANGE_SEPARATOR)
    modifiers, min_text = split_modifiers(head)
    
    try:
        minimum = parse_number(min_text)
        maximum = parse_number(tail)
    except ValueError as e:
        raise InvalidRange(f"Invalid range {content!r}: {e}", expression=content) from e
    
    if minimum > maximum:
        raise InvalidRange(
            f"Invalid range {content!r}: start of range must not exceed end of range",
            expression=content,
        )
    
    logger.debug(f"Parsed range {content!r} as [{minimum}, {maximum}] with modifiers {modifiers}")
    return RangeExpression(modifiers=modifiers, minimum=minimum, maximum=maximum)


def _parse_list(content: str) -> ListExpression:
    # Modifiers have no meaning for lists; a leading run is dropped
    _, elements = split_modifiers(content)
    values = []
    for raw in elements.split(LIST_SEPARATOR):
        try:
            values.append(parse_element(raw))
        except ValueError as e:
            raise InvalidListElement(
                f"Invalid list element {raw.strip()!r} in {content!r}: {e}",
                expression=content,
            ) from e
    
    logger.debug(f"Parsed list {content!r} with {len(values)} values")
    return ListExpression(values=tuple(values))


def split_modifiers(text: str) -> Tuple[ModifierSet, str]:
    """
    Split a leading run of N/Z/Q/R letters off `text`.
    
    Args:
        text: Text before "..", e.g. "NZ-5"
        
    Returns:
        Tuple of (ModifierSet, remaining text)
        
    Example:
        >>> split_modifiers("nz-5")
        (ModifierSet(n=True, z=True, q=False, r=False, count=2), '-5')
    """
    stripped = text.lstrip()
    letters = _MODIFIER_RE.match(stripped).group(0)
    return ModifierSet.from_letters(letters), stripped[len(letters):]


def parse_number(text: str) -> float:
    """
    Parse a decimal literal.
    
    Only "." is accepted as decimal separator; exponents, "inf" and "nan"
    are rejected.
    
    Raises:
        ValueError: If text is not a decimal literal
    """
    candidate = text.strip()
    if not _NUMBER_RE.fullmatch(candidate):
        raise ValueError(f"not a decimal number: {candidate!r}")
    return float(candidate)


def parse_element(text: str) -> Number:
    """
    Parse one list element: a decimal literal or a fraction like "1/3".
    
    Raises:
        ValueError: If text is neither, or the fraction has a zero denominator
    """
    candidate = text.strip()
    match = _FRACTION_RE.fullmatch(candidate)
    if match:
        numerator, denominator = int(match.group(1)), int(match.group(2))
        if denominator == 0:
            raise ValueError(f"zero denominator: {candidate!r}")
        return Fraction(numerator, denominator)
    return parse_number(candidate)
