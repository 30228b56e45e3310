"""
Module: builder.layout.models

Purpose:
    Data models for page layout.
    Immutable dataclasses representing text blocks, pages and documents.

Key Classes:
    - TextBlock: Already-final text positioned on a page
    - PagePlan: Complete page layout
    - DocumentPlan: Ordered pages of one document copy

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.composer: Creates TextBlocks and PagePlans
    - builder.layout.shuffle: Reorders PagePlans
    - builder.output.renderer: Draws DocumentPlans
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TextAlign(Enum):
    """Horizontal anchoring of a text block's `left` coordinate."""
    
    LEFT = "left"
    CENTER = "center"


class PageKind(Enum):
    """Role of a page within a document."""
    
    TITLE = "title"
    TASK = "task"


@dataclass(frozen=True)
class TextBlock:
    """
    Wrapped text placed on a page (immutable).
    
    Attributes:
        text: Final text (no expressions left)
        lines: Text wrapped to `width`
        font_size: Font size in points
        leading: Distance between baselines
        left: X anchor (left edge, or centre for TextAlign.CENTER)
        top: Y offset from page top
        width: Maximum line width
        align: How `left` is interpreted
    """
    
    text: str
    lines: tuple[str, ...]
    font_size: float
    leading: float
    left: float
    top: float
    width: float
    align: TextAlign = TextAlign.LEFT
    
    @property
    def height(self) -> float:
        """Measured block height."""
        return len(self.lines) * self.leading
    
    @property
    def bottom(self) -> float:
        """Bottom Y coordinate (top + height)."""
        return self.top + self.height


@dataclass(frozen=True)
class PagePlan:
    """
    Complete layout plan for a single page.
    
    Attributes:
        index: Position in the document (0-indexed, title page is 0)
        kind: Title or task page
        blocks: Text blocks, top to bottom
        task_index: Position of the task in the assignment (task pages only)
    """
    
    index: int
    kind: PageKind
    blocks: tuple[TextBlock, ...]
    task_index: Optional[int] = None
    
    @property
    def is_title(self) -> bool:
        return self.kind is PageKind.TITLE
    
    @property
    def bottom(self) -> float:
        """Lowest point reached by any block."""
        return max((b.bottom for b in self.blocks), default=0.0)
    
    @property
    def text(self) -> str:
        """All block texts joined by newlines."""
        return "\n".join(b.text for b in self.blocks)


@dataclass(frozen=True)
class DocumentPlan:
    """
    One document copy: a title page followed by task pages.
    
    Invariants:
        - pages[i].index == i
        - only pages[0] may be the title page
    
    Example:
        >>> plan.page_count
        3
        >>> plan.task_order
        (1, 0)
    """
    
    title: str
    pages: tuple[PagePlan, ...]
    warnings: tuple[str, ...] = ()
    
    def __post_init__(self) -> None:
        object.__setattr__(self, "warnings", tuple(self.warnings))
        for i, page in enumerate(self.pages):
            if page.index != i:
                raise ValueError(f"Page at position {i} has index {page.index}")
            if page.is_title and i != 0:
                raise ValueError(f"Title page found at position {i}")
    
    @property
    def page_count(self) -> int:
        """Number of pages in the document."""
        return len(self.pages)
    
    @property
    def task_pages(self) -> tuple[PagePlan, ...]:
        return tuple(p for p in self.pages if not p.is_title)
    
    @property
    def task_order(self) -> tuple[int, ...]:
        """Assignment task indices in page order."""
        return tuple(p.task_index for p in self.task_pages)
