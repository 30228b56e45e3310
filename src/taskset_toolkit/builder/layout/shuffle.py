"""
Module: builder.layout.shuffle

Purpose:
    Page reordering for document plans. The title page is pinned to
    index 0; only task pages move.

Key Functions:
    - reorder_pages(): Apply an explicit page order
    - move_page(): Move one page to a new index
    - shuffle_task_pages(): Random permutation of task pages

Used By:
    - builder.controller: assemble() with shuffle enabled
"""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import List, Sequence

from .models import DocumentPlan

logger = logging.getLogger(__name__)


def reorder_pages(plan: DocumentPlan, order: Sequence[int]) -> DocumentPlan:
    """
    Rearrange pages so that new page i is old page `order[i]`.
    
    Args:
        plan: Document to reorder
        order: Permutation of range(plan.page_count)
        
    Returns:
        New DocumentPlan with re-indexed pages
        
    Raises:
        ValueError: If order is not a permutation or moves the title page
        
    Example:
        >>> reorder_pages(plan, [0, 2, 1]).task_order
        (1, 0)
    """
    if sorted(order) != list(range(plan.page_count)):
        raise ValueError(f"Page order must be a permutation of 0..{plan.page_count - 1}: {list(order)}")
    if plan.pages and plan.pages[0].is_title and order[0] != 0:
        raise ValueError("The title page cannot be moved")
    
    pages = tuple(replace(plan.pages[old], index=new) for new, old in enumerate(order))
    return replace(plan, pages=pages)


def move_page(plan: DocumentPlan, from_index: int, to_index: int) -> DocumentPlan:
    """
    Move the page at `from_index` so that it ends up at `to_index`.
    
    Raises:
        ValueError: If either index is out of range or targets the title page
    """
    count = plan.page_count
    if not (0 <= from_index < count and 0 <= to_index < count):
        raise ValueError(f"Page index out of range 0..{count - 1}: {from_index} -> {to_index}")
    
    order: List[int] = list(range(count))
    order.insert(to_index, order.pop(from_index))
    return reorder_pages(plan, order)


def shuffle_task_pages(plan: DocumentPlan, rng: random.Random) -> DocumentPlan:
    """
    Randomly permute task pages, leaving the title page first.
    
    Every permutation of the task pages is equally likely.
    """
    task_positions = list(range(1, plan.page_count))
    rng.shuffle(task_positions)
    shuffled = reorder_pages(plan, [0] + task_positions)
    logger.debug(f"Shuffled task pages into order {shuffled.task_order}")
    return shuffled
