"""
Module: builder.config

Purpose:
    Configuration dataclasses for document generation. Immutable
    configuration with validation on construction.

Key Classes:
    - DocumentOptions: Per-document options (shuffle, margin)
    - BuilderConfig: Options for a multi-copy build

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - builder.controller: assemble(), build_copies()
    - cli: Command line options
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from .layout.config import DEFAULT_MARGIN_MM, LayoutConfig


def _check_margin(margin: Tuple[float, float]) -> None:
    if len(margin) != 2:
        raise ValueError(f"margin must be an (x, y) pair: {margin!r}")
    if margin[0] < 0 or margin[1] < 0:
        raise ValueError(f"margin must be non-negative: {margin!r}")


@dataclass(frozen=True)
class DocumentOptions:
    """
    Options for assembling one document copy (immutable).
    
    Attributes:
        shuffle: Randomize the order of task pages
        margin: (x, y) page margin in millimetres
    """
    
    shuffle: bool = False
    margin: Tuple[float, float] = DEFAULT_MARGIN_MM
    
    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        _check_margin(self.margin)
        self.layout_config()  # raises when the margins do not fit the page
    
    def layout_config(self) -> LayoutConfig:
        """Layout configuration for these options."""
        return LayoutConfig.from_margin_mm(self.margin)


@dataclass(frozen=True)
class BuilderConfig:
    """
    Configuration for building document copies (immutable).
    
    Attributes:
        output_dir: Base directory; a timestamped subfolder is created in it
        copies: Number of independently randomized copies
        shuffle: Randomize task page order in every copy
        seed: Base seed; copy i uses seed + i. None draws fresh randomness
        margin_mm: (x, y) page margin in millimetres
        file_stem: PDF file name stem (defaults to the assignment title)
        write_metadata: Write build_metadata.json next to the PDFs
    
    Example:
        >>> config = BuilderConfig(output_dir=Path("output"), copies=3, shuffle=True)
        >>> config.document_options.shuffle
        True
    """
    
    output_dir: Path = Path("output")
    copies: int = 1
    shuffle: bool = False
    seed: Optional[int] = None
    margin_mm: Tuple[float, float] = DEFAULT_MARGIN_MM
    file_stem: Optional[str] = None
    write_metadata: bool = True
    
    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.copies < 1:
            raise ValueError(f"copies must be at least 1: {self.copies}")
        _check_margin(self.margin_mm)
        LayoutConfig.from_margin_mm(self.margin_mm)  # raises when the margins do not fit the page
        if self.file_stem is not None and not self.file_stem.strip():
            raise ValueError("file_stem must not be blank")
    
    @property
    def document_options(self) -> DocumentOptions:
        """Per-copy options derived from this config."""
        return DocumentOptions(shuffle=self.shuffle, margin=self.margin_mm)
