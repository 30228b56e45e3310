"""
Module: expressions

Purpose:
    Value types produced by the expression locator and parser.
    A question template like "Solve \\[NZ-5..10]\\x = 3" yields one
    ExpressionSpan and, after parsing, one RangeExpression.

Key Classes:
    - ExpressionSpan: Offsets of one expression inside a template
    - ModifierSet: N/Z/Q/R flags of a range expression
    - RangeExpression: "<modifiers><min>..<max>"
    - ListExpression: "v1,v2,...,vn"
    - EmptyExpression: "" (placeholder, renders to nothing)

Dependencies:
    - dataclasses (std)
    - fractions (std): Fraction list elements such as "1/3"

Used By:
    - expressions.locator
    - expressions.parser
    - expressions.generator
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Union

# Marker text surrounding every expression
OPEN_MARKER = "\\["
CLOSE_MARKER = "]\\"

Number = Union[float, Fraction]


@dataclass(frozen=True, slots=True)
class ExpressionSpan:
    """
    Half-open range [start, end) of an expression's inner text.
    
    Offsets exclude the markers; outer_start/outer_end include them.
    
    Example:
        >>> span = ExpressionSpan(start=4, end=8)
        >>> (span.outer_start, span.outer_end)
        (2, 10)
    """
    
    start: int
    end: int
    
    def __post_init__(self) -> None:
        if self.start < len(OPEN_MARKER):
            raise ValueError(f"Span start leaves no room for the opening marker: {self.start}")
        if self.end < self.start:
            raise ValueError(f"Span end before start: [{self.start}, {self.end})")
    
    @property
    def outer_start(self) -> int:
        """Offset of the opening marker."""
        return self.start - len(OPEN_MARKER)
    
    @property
    def outer_end(self) -> int:
        """Offset just past the closing marker."""
        return self.end + len(CLOSE_MARKER)
    
    def inner_text(self, text: str) -> str:
        """Slice the expression content out of its template."""
        return text[self.start:self.end]


@dataclass(frozen=True, slots=True)
class ModifierSet:
    """
    Number domain flags of a range expression.
    
    Attributes:
        n: Natural numbers
        z: Integers (allow negatives)
        q: Rationals (allow fractional values)
        r: Reals (parsed and counted, no effect on the domain)
        count: How many modifier letters were written
    """
    
    n: bool = False
    z: bool = False
    q: bool = False
    r: bool = False
    count: int = 0
    
    @classmethod
    def default(cls) -> ModifierSet:
        """Domain used when no modifiers are written: any integer."""
        return cls(n=True, z=True, q=False, r=False, count=2)
    
    @classmethod
    def from_letters(cls, letters: str) -> ModifierSet:
        """
        Build from a run of modifier letters, e.g. "NZ" or "nzq".
        
        Repeated letters count towards `count` but set their flag once.
        """
        upper = letters.upper()
        return cls(
            n="N" in upper,
            z="Z" in upper,
            q="Q" in upper,
            r="R" in upper,
            count=len(letters),
        )
    
    def effective(self) -> ModifierSet:
        """Return self, or the default set when no letters were written."""
        return self if self.count else ModifierSet.default()
    
    @property
    def key(self) -> tuple[bool, bool, bool]:
        """(N, Z, Q) triple used for domain lookup."""
        return (self.n, self.z, self.q)
    
    def __str__(self) -> str:
        letters = "".join(
            letter for letter, flag in zip("NZQR", (self.n, self.z, self.q, self.r)) if flag
        )
        return letters or "-"


@dataclass(frozen=True, slots=True)
class RangeExpression:
    """
    Parsed "<modifiers><min>..<max>" expression.
    
    Invariants:
        - minimum <= maximum
    """
    
    modifiers: ModifierSet
    minimum: float
    maximum: float
    
    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError(f"Range minimum {self.minimum} exceeds maximum {self.maximum}")


@dataclass(frozen=True, slots=True)
class ListExpression:
    """
    Parsed "v1,v2,...,vn" expression.
    
    Invariants:
        - at least one value
    """
    
    values: tuple[Number, ...]
    
    def __post_init__(self) -> None:
        if not self.values:
            raise ValueError("List expression needs at least one value")


@dataclass(frozen=True, slots=True)
class EmptyExpression:
    """Expression with no content; renders to the empty string."""


ParsedExpression = Union[RangeExpression, ListExpression, EmptyExpression]
