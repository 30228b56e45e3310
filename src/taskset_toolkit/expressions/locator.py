"""
Module: expressions.locator

Purpose:
    Find every `\\[...]\\` expression inside a question template.

Key Functions:
    - locate(): Return the inner spans of all expressions, left to right

Algorithm:
    1. Search for the next opening marker from the current offset
    2. Search for the first closing marker after it
    3. Record the span between them and continue after the closing marker

Used By:
    - expressions.renderer: render_question()
"""

from __future__ import annotations

import logging
from typing import List

from taskset_toolkit.core.models.expressions import CLOSE_MARKER, OPEN_MARKER, ExpressionSpan

from .errors import UnterminatedExpression

logger = logging.getLogger(__name__)


def locate(text: str) -> List[ExpressionSpan]:
    """
    Locate all expressions in `text`.
    
    Spans are non-overlapping and returned in discovery order. Text with
    no opening marker yields an empty list.
    
    Args:
        text: Question template
        
    Returns:
        List of ExpressionSpans (inner offsets, markers excluded)
        
    Raises:
        UnterminatedExpression: If an opening marker has no closing marker
        
    Example:
        >>> locate("x = \\\\[1..5]\\\\")
        [ExpressionSpan(start=6, end=10)]
    """
    spans: List[ExpressionSpan] = []
    
    i = 0
    while True:
        open_at = text.find(OPEN_MARKER, i)
        if open_at == -1:
            break
        
        start = open_at + len(OPEN_MARKER)
        end = text.find(CLOSE_MARKER, start)
        if end == -1:
            raise UnterminatedExpression(
                f"Unable to locate end of expression opened at offset {open_at}",
                expression=text[start:],
                position=open_at,
            )
        
        spans.append(ExpressionSpan(start=start, end=end))
        i = end + len(CLOSE_MARKER)
    
    if spans:
        logger.debug(f"Located {len(spans)} expressions")
    return spans
