"""Source position value objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Position in a source file.

    Attributes:
        line: Line number (0-based, must be >= 0)
        column: Column number (0-based, must be >= 0)
    """

    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.line < 0:
            raise ValueError(f"line must be >= 0, got {self.line}")
        if self.column < 0:
            raise ValueError(f"column must be >= 0, got {self.column}")

    def __str__(self) -> str:
        """Format as 1-based line:column for humans."""
        return f"{self.line + 1}:{self.column + 1}"


@dataclass(frozen=True, slots=True)
class Range:
    """Span between two positions (end inclusive of the last character + 1).

    Attributes:
        start: First position
        end: Position after the last character
    """

    start: Position
    end: Position

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.start is None:
            raise TypeError("start must not be None")
        if self.end is None:
            raise TypeError("end must not be None")
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) must not precede start ({self.start})")

    @classmethod
    def on_line(cls, line: int, column: int, length: int) -> Range:
        """Range covering `length` characters on a single line."""
        return cls(Position(line, column), Position(line, column + length))

    @classmethod
    def at(cls, position: Position) -> Range:
        """Empty range at a position."""
        return cls(position, position)

    def contains(self, position: Position) -> bool:
        """Check whether position lies inside this range."""
        return self.start <= position <= self.end
