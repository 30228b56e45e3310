"""
Module: assignment

Purpose:
    Provides the Task and Assignment dataclasses - the immutable unit handed
    to document generation. The editing surface owns the mutable drafts;
    once a draft reaches the builder it is frozen into these models.

Key Classes:
    - Task: One question group (title, body, ordered question templates)
    - Assignment: Title plus ordered tasks

Dependencies:
    - dataclasses (std)

Used By:
    - core.utils.serialization: Building models from JSON input
    - expressions.renderer: render_task()
    - builder.controller: assemble(), build_copies()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Task:
    """
    One task page worth of content (immutable).
    
    Questions are raw templates that may contain `\\[...]\\` expressions.
    They are only evaluated when a document copy is assembled.
    
    Attributes:
        title: Task heading
        body: Introductory text shown under the heading
        questions: Ordered question templates
    
    Example:
        >>> task = Task("Opgave 1", "Solve", ("A) \\\\[1..5]\\\\x = 5",))
        >>> task.question_count
        1
    """
    
    title: str
    body: str = ""
    questions: tuple[str, ...] = field(default_factory=tuple)
    
    def __post_init__(self) -> None:
        """Normalise questions to a tuple so the task stays hashable."""
        if not isinstance(self.questions, tuple):
            object.__setattr__(self, "questions", tuple(self.questions))
    
    @property
    def question_count(self) -> int:
        """Number of question templates in this task."""
        return len(self.questions)
    
    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON input shape."""
        return {
            "title": self.title,
            "body": self.body,
            "questions": list(self.questions),
        }


@dataclass(frozen=True)
class Assignment:
    """
    A complete assignment ready for document generation (immutable).
    
    Attributes:
        title: Shown centred on the title page
        tasks: Ordered tasks, one page each
    """
    
    title: str
    tasks: tuple[Task, ...] = field(default_factory=tuple)
    
    def __post_init__(self) -> None:
        if not isinstance(self.tasks, tuple):
            object.__setattr__(self, "tasks", tuple(self.tasks))
    
    @property
    def task_count(self) -> int:
        """Number of tasks (and therefore task pages)."""
        return len(self.tasks)
    
    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON input shape."""
        return {
            "title": self.title,
            "tasks": [task.to_dict() for task in self.tasks],
        }
