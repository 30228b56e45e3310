"""
Schemas Package

Validation of the assignment input shape.
"""

from .validator import (
    validate_assignment,
    validate_task,
    ValidationError,
)

__all__ = [
    "validate_assignment",
    "validate_task",
    "ValidationError",
]
