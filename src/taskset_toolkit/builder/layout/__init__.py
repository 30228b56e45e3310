"""
Module: builder.layout

Purpose:
    Page layout and composition for document generation.
    Converts an assignment into positioned page plans and reorders them.

Key Functions:
    - compose_document(): Main entry point for layout
    - shuffle_task_pages(): Randomize task page order

Key Classes:
    - LayoutConfig: Configuration for page layout
    - TextMeasurer: ReportLab-backed text wrapping and measurement
    - TextBlock / PagePlan / DocumentPlan: Layout models

Dependencies:
    - reportlab: Font metrics
    - taskset_toolkit.expressions: Question rendering

Used By:
    - builder.controller: Main build controller
"""

from .config import LayoutConfig
from .models import TextAlign, PageKind, TextBlock, PagePlan, DocumentPlan
from .measure import TextMeasurer
from .composer import compose_title_page, compose_task_page, compose_document
from .shuffle import reorder_pages, move_page, shuffle_task_pages

__all__ = [
    # Config
    "LayoutConfig",
    # Models
    "TextAlign",
    "PageKind",
    "TextBlock",
    "PagePlan",
    "DocumentPlan",
    # Measurement
    "TextMeasurer",
    # Functions
    "compose_title_page",
    "compose_task_page",
    "compose_document",
    "reorder_pages",
    "move_page",
    "shuffle_task_pages",
]
