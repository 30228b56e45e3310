"""
Module: builder.layout.measure

Purpose:
    Text measurement backed by ReportLab font metrics. Wraps text to a
    maximum width and reports the resulting block height, which the
    composer uses to stack blocks vertically.

Key Classes:
    - TextMeasurer: Wrap and measure text for one font

Dependencies:
    - reportlab: stringWidth metrics and simpleSplit wrapping

Used By:
    - builder.layout.composer
"""

from __future__ import annotations

from typing import List

from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth

from .config import LayoutConfig


class TextMeasurer:
    """
    Measures wrapped text for a single font.
    
    Explicit newlines start a new line; blank lines are kept so that
    paragraph spacing written by the author survives layout.
    
    Example:
        >>> measurer = TextMeasurer.from_config(LayoutConfig())
        >>> measurer.wrap("Hello world", 12, 500)
        ('Hello world',)
    """
    
    def __init__(self, font_name: str = "Helvetica", line_height_factor: float = 1.15):
        self.font_name = font_name
        self.line_height_factor = line_height_factor
    
    @classmethod
    def from_config(cls, config: LayoutConfig) -> TextMeasurer:
        return cls(config.font_name, config.line_height_factor)
    
    def line_height(self, font_size: float) -> float:
        """Distance between baselines for `font_size`."""
        return font_size * self.line_height_factor
    
    def text_width(self, text: str, font_size: float) -> float:
        """Width of a single unwrapped line."""
        return stringWidth(text, self.font_name, font_size)
    
    def wrap(self, text: str, font_size: float, max_width: float) -> tuple[str, ...]:
        """
        Split text into lines no wider than `max_width`.
        
        A single word wider than `max_width` is kept on its own line.
        Empty text produces no lines.
        """
        if not text:
            return ()
        
        lines: List[str] = []
        for paragraph in text.split("\n"):
            wrapped = simpleSplit(paragraph, self.font_name, font_size, max_width)
            lines.extend(wrapped or [""])
        return tuple(lines)
    
    def measure(self, text: str, font_size: float, max_width: float) -> float:
        """Height of `text` once wrapped to `max_width`."""
        return len(self.wrap(text, font_size, max_width)) * self.line_height(font_size)
