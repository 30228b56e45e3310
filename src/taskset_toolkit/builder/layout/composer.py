"""
Module: builder.layout.composer

Purpose:
    Convert an assignment into positioned page layouts.
    Title page first, then one page per task with questions rendered
    through the expression engine.

Key Functions:
    - compose_title_page(): Centred assignment title
    - compose_task_page(): Task title, body, blank line, rendered questions
    - compose_document(): All pages in assignment order

Dependencies:
    - builder.layout.measure: TextMeasurer
    - expressions.renderer: render_question()

Used By:
    - builder.controller: assemble()
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from taskset_toolkit.core.models.assignment import Assignment, Task
from taskset_toolkit.expressions.renderer import render_question

from .config import LayoutConfig
from .measure import TextMeasurer
from .models import DocumentPlan, PageKind, PagePlan, TextAlign, TextBlock

logger = logging.getLogger(__name__)


def compose_title_page(
    title: str,
    config: LayoutConfig,
    measurer: TextMeasurer,
) -> PagePlan:
    """
    Lay out the title page.
    
    The title sits one title line below the top margin, centred on the page
    and wrapped to the line width.
    """
    font_size = config.title_font_size
    block = _make_block(
        title,
        font_size=font_size,
        left=config.page_width / 2,
        top=config.margin_y + measurer.line_height(font_size),
        config=config,
        measurer=measurer,
        align=TextAlign.CENTER,
    )
    return PagePlan(index=0, kind=PageKind.TITLE, blocks=(block,))


def compose_task_page(
    task: Task,
    task_index: int,
    page_index: int,
    config: LayoutConfig,
    measurer: TextMeasurer,
    rng: random.Random,
) -> PagePlan:
    """
    Lay out one task page.
    
    Blocks are stacked from the top margin; each block starts where the
    measured height of the previous one ends. One empty body line separates
    the body from the questions.
    
    Args:
        task: Task with question templates
        task_index: Position of the task in the assignment
        page_index: Position of the page in the document
        config: Layout configuration
        measurer: Text measurement
        rng: Random source for question expressions
        
    Returns:
        PagePlan with title, body and rendered question blocks
        
    Raises:
        ExpressionError: If any question fails to render
    """
    blocks: List[TextBlock] = []
    y = config.margin_y
    
    title = _make_block(
        task.title, config.task_title_font_size, config.margin_x, y, config, measurer
    )
    blocks.append(title)
    y = title.bottom
    
    body = _make_block(task.body, config.body_font_size, config.margin_x, y, config, measurer)
    blocks.append(body)
    y = body.bottom
    
    # Empty line before questions
    y += measurer.line_height(config.body_font_size)
    
    for template in task.questions:
        question = render_question(template, rng)
        block = _make_block(question, config.body_font_size, config.margin_x, y, config, measurer)
        blocks.append(block)
        y = block.bottom
    
    return PagePlan(
        index=page_index,
        kind=PageKind.TASK,
        blocks=tuple(blocks),
        task_index=task_index,
    )


def compose_document(
    assignment: Assignment,
    config: LayoutConfig,
    measurer: Optional[TextMeasurer] = None,
    rng: Optional[random.Random] = None,
) -> DocumentPlan:
    """
    Lay out a full document in assignment order.
    
    Pages whose content runs past the bottom margin are kept as they are
    and reported in `DocumentPlan.warnings`.
    
    Raises:
        ExpressionError: If any question fails to render
    """
    measurer = measurer or TextMeasurer.from_config(config)
    if rng is None:
        rng = random.Random()
    
    pages = [compose_title_page(assignment.title, config, measurer)]
    for task_index, task in enumerate(assignment.tasks):
        pages.append(compose_task_page(task, task_index, len(pages), config, measurer, rng))
    
    # Named by task, not page number, since pages may be shuffled afterwards
    warnings: List[str] = []
    for page in pages:
        if page.bottom > config.page_bottom:
            if page.is_title:
                where = "the title page"
            else:
                where = f"task {page.task_index + 1} ({assignment.tasks[page.task_index].title!r})"
            message = (
                f"Content overflows {where}: "
                f"reaches {page.bottom:.0f}pt, bottom margin at {config.page_bottom:.0f}pt"
            )
            logger.warning(message)
            warnings.append(message)
    
    logger.debug(f"Composed {len(pages)} pages for {assignment.title!r}")
    return DocumentPlan(title=assignment.title, pages=tuple(pages), warnings=tuple(warnings))


def _make_block(
    text: str,
    font_size: float,
    left: float,
    top: float,
    config: LayoutConfig,
    measurer: TextMeasurer,
    align: TextAlign = TextAlign.LEFT,
) -> TextBlock:
    return TextBlock(
        text=text,
        lines=measurer.wrap(text, font_size, config.line_width),
        font_size=font_size,
        leading=measurer.line_height(font_size),
        left=left,
        top=top,
        width=config.line_width,
        align=align,
    )
