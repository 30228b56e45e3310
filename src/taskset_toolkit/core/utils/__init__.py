"""
Core Utilities Package

Input loading helpers for assignment models.
"""

from .serialization import assignment_from_dict, load_assignment

__all__ = [
    "assignment_from_dict",
    "load_assignment",
]
