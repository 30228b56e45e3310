"""
Module: builder.layout.config

Purpose:
    Configuration for the page layout engine.
    Defines page dimensions, margins and font sizes in PDF points.

Key Classes:
    - LayoutConfig: Immutable layout configuration

Dependencies:
    - reportlab: A4 page size and mm unit

Used By:
    - builder.layout.composer: Block placement
    - builder.output.renderer: Canvas page size
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm

# Standard A4 page dimensions in points
DEFAULT_PAGE_WIDTH_PT, DEFAULT_PAGE_HEIGHT_PT = A4
DEFAULT_MARGIN_MM = (15.0, 25.0)


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for page layout (immutable).
    
    All lengths are PDF points (1/72 inch) measured from the top-left
    corner of the page.
    
    Attributes:
        page_width: Page width
        page_height: Page height
        margin_x: Left and right margin
        margin_y: Top and bottom margin
        font_name: Standard font used for all text
        title_font_size: Assignment title on the title page
        task_title_font_size: Task heading
        body_font_size: Task body and questions
        line_height_factor: Line height as a multiple of font size
        
    Example:
        >>> config = LayoutConfig.from_margin_mm((15, 25))
        >>> round(config.line_width)
        510
    """
    
    # Page dimensions
    page_width: float = DEFAULT_PAGE_WIDTH_PT
    page_height: float = DEFAULT_PAGE_HEIGHT_PT
    
    # Margins
    margin_x: float = DEFAULT_MARGIN_MM[0] * mm
    margin_y: float = DEFAULT_MARGIN_MM[1] * mm
    
    # Typography
    font_name: str = "Helvetica"
    title_font_size: float = 32
    task_title_font_size: float = 24
    body_font_size: float = 12
    line_height_factor: float = 1.15
    
    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        if self.margin_x < 0 or self.margin_y < 0:
            raise ValueError(f"Margins must be non-negative: ({self.margin_x}, {self.margin_y})")
        if self.line_width <= 0:
            raise ValueError("Margins exceed page width")
        if self.page_bottom <= self.margin_y:
            raise ValueError("Margins exceed page height")
        if self.line_height_factor <= 0:
            raise ValueError(f"line_height_factor must be positive: {self.line_height_factor}")
    
    @classmethod
    def from_margin_mm(cls, margin: Tuple[float, float]) -> LayoutConfig:
        """Create a config from an (x, y) margin given in millimetres."""
        margin_x, margin_y = margin
        return cls(margin_x=margin_x * mm, margin_y=margin_y * mm)
    
    @property
    def line_width(self) -> float:
        """Width available for text (excluding margins)."""
        return self.page_width - 2 * self.margin_x
    
    @property
    def page_bottom(self) -> float:
        """Lowest y coordinate content may reach."""
        return self.page_height - self.margin_y
