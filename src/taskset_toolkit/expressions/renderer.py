"""
Module: expressions.renderer

Purpose:
    Rewrite a question template into its fully evaluated form.

Key Functions:
    - render_question(): Template -> literal text
    - render_task(): Task -> Task with rendered questions

Algorithm:
    Single left-to-right pass over the original offsets. Literal text
    between expressions and the generated values are appended to a fresh
    buffer, so earlier substitutions never shift later spans.

Used By:
    - builder.layout.composer: Task page composition
    - cli: --preview
"""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import List, Optional

from taskset_toolkit.core.models.assignment import Task

from .generator import generate
from .locator import locate
from .parser import parse_expression

logger = logging.getLogger(__name__)


def render_question(question: str, rng: Optional[random.Random] = None) -> str:
    """
    Evaluate every expression in a question template.
    
    Expressions are evaluated in discovery order, so a seeded `rng`
    reproduces the same output.
    
    Args:
        question: Template, e.g. "A) Solve \\\\[100..500]\\\\x + 2 = 5"
        rng: Random source shared by all expressions of the question
        
    Returns:
        Text with every expression (markers included) replaced by its value
        
    Raises:
        ExpressionError: First error encountered; nothing is returned
    """
    spans = locate(question)
    if not spans:
        return question
    
    if rng is None:
        rng = random.Random()
    
    parts: List[str] = []
    cursor = 0
    for span in spans:
        parts.append(question[cursor:span.outer_start])
        parts.append(generate(parse_expression(span.inner_text(question)), rng))
        cursor = span.outer_end
    parts.append(question[cursor:])
    
    rendered = "".join(parts)
    logger.debug(f"Rendered {question!r} -> {rendered!r}")
    return rendered


def render_task(task: Task, rng: Optional[random.Random] = None) -> Task:
    """
    Render all questions of a task.
    
    Title and body are taken verbatim; only questions carry expressions.
    
    Returns:
        New Task with rendered questions
    """
    if rng is None:
        rng = random.Random()
    return replace(task, questions=tuple(render_question(q, rng) for q in task.questions))
