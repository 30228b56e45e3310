"""
Serialization Utilities

Builds Assignment models from the JSON input shape.

Only the reading direction lives here: the toolkit consumes assignments
produced by the editing surface and never stores them. Models expose
`to_dict()` for the reverse direction (used in build metadata).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..models.assignment import Assignment, Task
from ..schemas.validator import validate_assignment, ValidationError


# ─────────────────────────────────────────────────────────────────────────────
# Assignment Deserialization
# ─────────────────────────────────────────────────────────────────────────────

def assignment_from_dict(data: dict[str, Any], *, validate: bool = True) -> Assignment:
    """
    Build an Assignment from a dictionary.
    
    Args:
        data: Dictionary in the input shape
        validate: Whether to validate before building
        
    Returns:
        Assignment instance
        
    Raises:
        ValidationError: If validation fails
    """
    if validate:
        validate_assignment(data)
    
    tasks = tuple(
        Task(
            title=task["title"],
            body=task.get("body", ""),
            questions=tuple(task.get("questions", [])),
        )
        for task in data["tasks"]
    )
    return Assignment(title=data["title"], tasks=tasks)


def load_assignment(path: Path) -> Assignment:
    """
    Read and validate an assignment JSON file.
    
    Args:
        path: Path to a UTF-8 JSON file
        
    Returns:
        Assignment instance
        
    Raises:
        FileNotFoundError: If the file does not exist
        ValidationError: If the file cannot be read as UTF-8 text, is not
            valid JSON or fails validation
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        raise
    except (OSError, UnicodeDecodeError) as e:
        raise ValidationError(f"Cannot read {path}: {e}", path="") from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON in {path}: {e}", path="") from e
    return assignment_from_dict(data)
