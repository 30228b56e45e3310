"""
Module: builder.output

Purpose:
    PDF rendering for composed document plans.
    Converts DocumentPlan to PDF files using ReportLab.

Key Functions:
    - render_to_pdf(): Render a plan to a file
    - render_to_bytes(): Render a plan in memory

Dependencies:
    - reportlab: PDF generation
    - builder.layout.models: DocumentPlan

Used By:
    - builder.controller: Pipeline orchestration
"""

from .renderer import render_to_pdf, render_to_bytes

__all__ = [
    "render_to_pdf",
    "render_to_bytes",
]
