"""
Module: builder.output.renderer

Purpose:
    Render a DocumentPlan to PDF using ReportLab.
    Each PagePlan becomes one PDF page with its text blocks drawn line by
    line at their planned positions.

Key Functions:
    - render_to_pdf(): Write a document plan to a file
    - render_to_bytes(): Render a document plan in memory

Dependencies:
    - reportlab: PDF generation
    - builder.layout.models: DocumentPlan, PagePlan, TextBlock

Used By:
    - builder.controller: build_copies()
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, Union

from reportlab.pdfgen import canvas

from taskset_toolkit.builder.layout.config import LayoutConfig
from taskset_toolkit.builder.layout.models import DocumentPlan, PagePlan, TextAlign, TextBlock

logger = logging.getLogger(__name__)


def render_to_pdf(
    plan: DocumentPlan,
    output_path: Path,
    config: LayoutConfig,
) -> None:
    """
    Render a document plan to a PDF file.
    
    Args:
        plan: Composed (and possibly shuffled) document
        output_path: Path to write PDF
        config: Layout configuration used to compose the plan
        
    Raises:
        IOError: If PDF cannot be written
        
    Example:
        >>> render_to_pdf(plan, Path("output/Opgavesæt_01.pdf"), LayoutConfig())
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    _render(plan, str(output_path), config)
    logger.info(f"Rendered {plan.page_count} pages to {output_path}")


def render_to_bytes(plan: DocumentPlan, config: LayoutConfig) -> bytes:
    """Render a document plan and return the PDF bytes."""
    buf = io.BytesIO()
    _render(plan, buf, config)
    return buf.getvalue()


def _render(plan: DocumentPlan, target: Union[str, BinaryIO], config: LayoutConfig) -> None:
    if plan.page_count == 0:
        logger.warning("Empty document plan, creating empty PDF")
    
    c = canvas.Canvas(target, pagesize=(config.page_width, config.page_height))
    c.setTitle(plan.title)
    
    for page in plan.pages:
        _render_page(c, page, config)
        c.showPage()
    
    c.save()


def _render_page(c: canvas.Canvas, page: PagePlan, config: LayoutConfig) -> None:
    for block in page.blocks:
        _draw_block(c, block, config)


def _draw_block(c: canvas.Canvas, block: TextBlock, config: LayoutConfig) -> None:
    """
    Draw a wrapped text block.
    
    The first baseline sits one font size below the block top; following
    baselines are `leading` apart.
    """
    c.saveState()
    c.setFont(config.font_name, block.font_size)
    c.setFillColorRGB(0, 0, 0)
    
    for i, line in enumerate(block.lines):
        y_pt = _transform_y(config.page_height, block.top + block.font_size + i * block.leading)
        if block.align is TextAlign.CENTER:
            c.drawCentredString(block.left, y_pt, line)
        else:
            c.drawString(block.left, y_pt, line)
    
    c.restoreState()


def _transform_y(page_height_pt: float, y_pt_from_top: float) -> float:
    """
    Convert a top-down Y coordinate to bottom-up PDF Y.
    
    Args:
        page_height_pt: Page height in points
        y_pt_from_top: Y position from the page top in points
        
    Returns:
        Y position from the page bottom in points
    """
    return page_height_pt - y_pt_from_top
