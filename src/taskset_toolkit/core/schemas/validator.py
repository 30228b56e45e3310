"""
Schema Validation Utilities

Validates assignment JSON data before it is turned into models.

The input comes from the editing surface (or a hand-written JSON file), so
every field is checked and failures report a dotted path such as
`tasks[1].questions[0]` to point at the offending value.
"""

from __future__ import annotations

from typing import Any


class ValidationError(Exception):
    """Raised when data fails schema validation."""
    
    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_assignment(data: Any) -> None:
    """
    Validate assignment data against the input shape.
    
    Expected shape:
        {"title": str, "tasks": [{"title": str, "body": str, "questions": [str]}]}
    
    `body` and `questions` may be omitted on a task; they default to "" and [].
    
    Args:
        data: Decoded JSON value
        
    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Assignment must be an object, got {type(data).__name__}",
            path="",
        )
    
    missing = [f for f in ("title", "tasks") if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing],
        )
    
    _require_str(data["title"], "title")
    
    tasks = data["tasks"]
    if not isinstance(tasks, list):
        raise ValidationError(
            f"tasks must be a list, got {type(tasks).__name__}",
            path="tasks",
        )
    
    for i, task in enumerate(tasks):
        validate_task(task, path=f"tasks[{i}]")


def validate_task(data: Any, *, path: str = "task") -> None:
    """
    Validate a single task object.
    
    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"{path} must be an object, got {type(data).__name__}",
            path=path,
        )
    
    if "title" not in data:
        raise ValidationError(
            f"Missing required fields: ['title'] at {path}",
            path=path,
            errors=["Missing field: title"],
        )
    _require_str(data["title"], f"{path}.title")
    
    if "body" in data:
        _require_str(data["body"], f"{path}.body")
    
    questions = data.get("questions", [])
    if not isinstance(questions, list):
        raise ValidationError(
            f"{path}.questions must be a list, got {type(questions).__name__}",
            path=f"{path}.questions",
        )
    for j, question in enumerate(questions):
        _require_str(question, f"{path}.questions[{j}]")


def _require_str(value: Any, path: str) -> None:
    if not isinstance(value, str):
        raise ValidationError(
            f"{path} must be a string, got {type(value).__name__}",
            path=path,
        )
