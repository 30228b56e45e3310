"""
Module: builder.controller

Purpose:
    Orchestrate document generation.
    Render questions → Compose pages → (Shuffle) → Render PDF, once per copy.

Key Functions:
    - assemble(): Build one DocumentPlan from an assignment
    - build_copies(): Generate N independently randomized PDF copies

Key Classes:
    - CopyResult: One written copy
    - BuildResult: Complete build result
    - BuildError: Exception for build failures

Dependencies:
    - builder.layout: Composition and page shuffling
    - builder.output: PDF rendering
    - expressions: ExpressionError

Used By:
    - cli: Command line entry point
"""

from __future__ import annotations

import json
import logging
import random
import re
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from taskset_toolkit.core.models.assignment import Assignment
from taskset_toolkit.expressions.errors import ExpressionError

from .config import BuilderConfig, DocumentOptions
from .layout import DocumentPlan, TextMeasurer, compose_document, shuffle_task_pages
from .output.renderer import render_to_pdf

logger = logging.getLogger(__name__)


class BuildError(Exception):
    """Error during document generation."""
    pass


@dataclass(frozen=True)
class CopyResult:
    """
    One generated copy.
    
    Attributes:
        number: 1-based copy number
        pdf_path: Written PDF
        page_count: Pages in the PDF (title page included)
        task_order: Assignment task indices in page order
    """
    number: int
    pdf_path: Path
    page_count: int
    task_order: tuple[int, ...]


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).
    
    Attributes:
        output_dir: Folder holding the copies
        copies: Per-copy results, in generation order
        metadata: Build metadata dictionary
        warnings: Layout warnings from all copies
        
    Example:
        >>> result = build_copies(assignment, BuilderConfig(copies=2))
        >>> [c.pdf_path.name for c in result.copies]
        ['Opgavesaet_01.pdf', 'Opgavesaet_02.pdf']
    """
    output_dir: Path
    copies: tuple[CopyResult, ...]
    metadata: dict
    warnings: tuple[str, ...]
    
    @property
    def pdf_paths(self) -> tuple[Path, ...]:
        return tuple(c.pdf_path for c in self.copies)


def assemble(
    assignment: Assignment,
    options: Optional[DocumentOptions] = None,
    rng: Optional[random.Random] = None,
    *,
    measurer: Optional[TextMeasurer] = None,
) -> DocumentPlan:
    """
    Assemble one document copy.
    
    Every expression is evaluated with `rng`; with `options.shuffle` the
    task pages are then permuted with the same generator. The title page
    always stays first.
    
    Args:
        assignment: Assignment to lay out
        options: Shuffle and margin options (defaults when omitted)
        rng: Random source; a fresh unseeded generator when omitted
        measurer: Text measurement override
        
    Returns:
        DocumentPlan ready for rendering
        
    Raises:
        ExpressionError: If any question fails to evaluate. No partial
            document is returned.
    """
    options = options or DocumentOptions()
    if rng is None:
        rng = random.Random()
    
    layout_config = options.layout_config()
    plan = compose_document(assignment, layout_config, measurer, rng)
    
    if options.shuffle:
        plan = shuffle_task_pages(plan, rng)
    
    return plan


def build_copies(assignment: Assignment, config: BuilderConfig) -> BuildResult:
    """
    Generate `config.copies` PDF copies of an assignment.
    
    Pipeline:
    1. Assemble every copy with its own random generator
    2. Create a timestamped output folder
    3. Render each copy to PDF
    4. (Optional) Write build metadata
    
    All copies are assembled before anything is written, so a failing
    expression leaves no files behind.
    
    Args:
        assignment: Assignment to generate
        config: Build configuration
        
    Returns:
        BuildResult with paths and metadata
        
    Raises:
        BuildError: If any copy fails to assemble or the output cannot be written
        
    Example:
        >>> config = BuilderConfig(output_dir=Path("output"), copies=3, shuffle=True)
        >>> result = build_copies(assignment, config)
        >>> print(f"Wrote {len(result.copies)} copies to {result.output_dir}")
    """
    start_time = time.perf_counter()
    options = config.document_options
    layout_config = options.layout_config()
    measurer = TextMeasurer.from_config(layout_config)
    
    logger.info(
        f"Generating {config.copies} copies of {assignment.title!r} "
        f"({assignment.task_count} tasks, shuffle={'on' if config.shuffle else 'off'})"
    )
    
    # 1. Assemble all copies
    plans: List[DocumentPlan] = []
    for i in range(config.copies):
        rng = _copy_rng(config.seed, i)
        try:
            plans.append(assemble(assignment, options, rng, measurer=measurer))
        except ExpressionError as e:
            raise BuildError(f"Failed to generate copy {i + 1}: {e}") from e
    
    # 2. Output directory
    stem = _slugify(config.file_stem or assignment.title)
    output_dir = _generate_timestamped_subfolder(Path(config.output_dir), stem)
    output_dir.mkdir(parents=True, exist_ok=True)
    logger.info(f"Output directory: {output_dir}")
    
    # 3. Render
    copies: List[CopyResult] = []
    warnings: List[str] = []
    for number, plan in enumerate(plans, start=1):
        pdf_path = output_dir / f"{stem}_{number:02d}.pdf"
        try:
            render_to_pdf(plan, pdf_path, layout_config)
        except OSError as e:
            raise BuildError(f"Failed to write copy {number} to {pdf_path}: {e}") from e
        copies.append(CopyResult(
            number=number,
            pdf_path=pdf_path,
            page_count=plan.page_count,
            task_order=plan.task_order,
        ))
        warnings.extend(f"Copy {number}: {w}" for w in plan.warnings)
    
    elapsed = time.perf_counter() - start_time
    logger.info(f"Generated {len(copies)} copies in {elapsed:.2f}s")
    
    # 4. Metadata
    metadata = _build_metadata(assignment, config, copies)
    if config.write_metadata:
        _write_metadata(output_dir, metadata)
    
    return BuildResult(
        output_dir=output_dir,
        copies=tuple(copies),
        metadata=metadata,
        warnings=tuple(warnings),
    )


def _copy_rng(seed: Optional[int], copy_index: int) -> random.Random:
    """Independent generator for one copy; seeded runs are reproducible."""
    if seed is None:
        return random.Random()
    return random.Random(seed + copy_index)


def _slugify(text: str) -> str:
    """
    Convert a title to a file-name-safe stem.
    
    Example:
        >>> _slugify("Opgavesæt: Ligninger 2")
        'Opgavesaet-Ligninger-2'
    """
    text = text.replace("æ", "ae").replace("ø", "oe").replace("å", "aa")
    text = text.replace("Æ", "Ae").replace("Ø", "Oe").replace("Å", "Aa")
    slug = re.sub(r"[^A-Za-z0-9_\-]+", "-", text).strip("-")
    return slug or "assignment"


def _generate_timestamped_subfolder(base_dir: Path, stem: str) -> Path:
    """
    Create a timestamped subfolder path inside the base directory.
    
    Returns:
        Path like base/20260116-103045__Opgavesaet, with a "(n)" suffix on collision
    """
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    folder_name = f"{timestamp}__{stem}"
    
    output_path = base_dir / folder_name
    if output_path.exists():
        counter = 1
        while (base_dir / f"{folder_name}({counter})").exists():
            counter += 1
        output_path = base_dir / f"{folder_name}({counter})"
    
    return output_path


def _build_metadata(
    assignment: Assignment,
    config: BuilderConfig,
    copies: List[CopyResult],
) -> dict:
    """
    Build metadata dictionary for a generated set of copies.

    Records the build options and, per copy, the task order so that a
    printed copy can be matched back to the assignment.
    """
    return {
        "generated_at": datetime.now().isoformat(),
        "title": assignment.title,
        "task_titles": [task.title for task in assignment.tasks],
        "copies": len(copies),
        "shuffle": config.shuffle,
        "seed": config.seed,
        "margin_mm": list(config.margin_mm),
        "manifest": [
            {
                "copy": c.number,
                "file": c.pdf_path.name,
                "page_count": c.page_count,
                "task_order": list(c.task_order),
            }
            for c in copies
        ],
    }


def _write_metadata(output_dir: Path, metadata: dict) -> None:
    """
    Write metadata JSON file to output directory.
    
    Raises:
        BuildError: If writing fails
    """
    metadata_path = output_dir / "build_metadata.json"
    
    try:
        with open(metadata_path, "w", encoding="utf-8") as f:
            json.dump(metadata, f, indent=2, ensure_ascii=False)
        logger.debug(f"Wrote metadata to {metadata_path}")
    except OSError as e:
        raise BuildError(f"Failed to write metadata: {e}") from e
