"""
Module: builder

Purpose:
    Document generation pipeline: turns an assignment into randomized,
    paginated PDF copies. A title page comes first, then one page per
    task with every question expression evaluated.

Key Functions:
    - assemble(): Build one document plan
    - build_copies(): Main entry point for writing PDF copies

Key Classes:
    - BuilderConfig: Configuration for building
    - DocumentOptions: Per-copy shuffle and margin options
    - LayoutConfig: Page geometry and typography

Dependencies:
    - reportlab: Text metrics and PDF output
    - taskset_toolkit.expressions: Question rendering

Used By:
    - taskset_toolkit.cli
"""

from .config import BuilderConfig, DocumentOptions
from .layout import LayoutConfig, DocumentPlan
from .controller import assemble, build_copies, BuildResult, CopyResult, BuildError

__all__ = [
    # Config
    "BuilderConfig",
    "DocumentOptions",
    "LayoutConfig",
    # Controller
    "assemble",
    "build_copies",
    "DocumentPlan",
    "BuildResult",
    "CopyResult",
    "BuildError",
]
