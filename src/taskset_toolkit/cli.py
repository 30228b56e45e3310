"""
Command line entry point: generate randomized PDF copies of an assignment.

Usage:
    taskset-build assignment.json -n 5 --shuffle -o output/
    taskset-build assignment.json --preview --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from taskset_toolkit import __version__
from taskset_toolkit.builder import BuilderConfig, BuildError, build_copies
from taskset_toolkit.core.models.assignment import Assignment
from taskset_toolkit.core.schemas.validator import ValidationError
from taskset_toolkit.core.utils.serialization import load_assignment
from taskset_toolkit.expressions import ExpressionError, render_task

logger = logging.getLogger("taskset_toolkit.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskset-build",
        description="Generate randomized assignment copies from task templates",
    )
    parser.add_argument("assignment", type=Path, help="Assignment JSON file")
    parser.add_argument("-o", "--output", type=Path, default=Path("output"), help="Output base directory")
    parser.add_argument("-n", "--copies", type=int, default=1, help="Number of copies to generate")
    parser.add_argument("--shuffle", action="store_true", help="Shuffle task page order in each copy")
    parser.add_argument("--seed", type=int, default=None, help="Base random seed (copy i uses seed + i)")
    parser.add_argument(
        "--margin",
        type=float,
        nargs=2,
        metavar=("X_MM", "Y_MM"),
        default=(15.0, 25.0),
        help="Page margin in millimetres",
    )
    parser.add_argument("--name", default=None, help="PDF file name stem (defaults to the title)")
    parser.add_argument("--no-metadata", action="store_true", help="Skip build_metadata.json")
    parser.add_argument("--preview", action="store_true", help="Print rendered questions instead of writing PDFs")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def preview(assignment: Assignment, rng: random.Random, out: TextIO) -> None:
    """Write one rendered copy of the assignment as plain text."""
    out.write(f"{assignment.title}\n\n")
    for task in assignment.tasks:
        rendered = render_task(task, rng)
        out.write(f"{rendered.title}\n")
        if rendered.body:
            out.write(f"{rendered.body}\n")
        for question in rendered.questions:
            out.write(f"  {question}\n")
        out.write("\n")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    
    try:
        assignment = load_assignment(args.assignment)
    except FileNotFoundError:
        logger.error(f"Assignment file not found: {args.assignment}")
        return 1
    except ValidationError as e:
        logger.error(f"Invalid assignment {args.assignment}: {e}")
        return 1
    
    if args.preview:
        rng = random.Random(args.seed) if args.seed is not None else random.Random()
        try:
            preview(assignment, rng, sys.stdout)
        except ExpressionError as e:
            logger.error(f"Preview failed: {e}")
            return 1
        return 0
    
    try:
        config = BuilderConfig(
            output_dir=args.output,
            copies=args.copies,
            shuffle=args.shuffle,
            seed=args.seed,
            margin_mm=tuple(args.margin),
            file_stem=args.name,
            write_metadata=not args.no_metadata,
        )
    except ValueError as e:
        logger.error(f"Invalid options: {e}")
        return 1
    
    try:
        result = build_copies(assignment, config)
    except BuildError as e:
        logger.error(str(e))
        return 1
    
    for warning in result.warnings:
        logger.warning(warning)
    for path in result.pdf_paths:
        print(path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
