"""
Taskset Toolkit Core Package

Shared data models, input validation and loading. These models are the
single source of truth for the expression engine and the builder.
"""

from .models import Task, Assignment
from .schemas import ValidationError, validate_assignment
from .utils import assignment_from_dict, load_assignment

__all__ = [
    "Task",
    "Assignment",
    "ValidationError",
    "validate_assignment",
    "assignment_from_dict",
    "load_assignment",
]
