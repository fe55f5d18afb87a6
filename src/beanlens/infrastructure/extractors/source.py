"""Per-file source buffer shared by all extractors."""

from __future__ import annotations

from dataclasses import dataclass

from beanlens.infrastructure.syntax.masking import blank_comments, blank_literals, brace_depths


@dataclass(frozen=True, slots=True)
class SourceText:
    """Lines of one file in three views, built once per parse.

    All views have the same line count and line lengths, so a
    (line, column) found in one view is valid in every other.

    Attributes:
        file_id: Identifier of the file
        lines: Raw lines without line terminators
        code: Lines with comments blanked (literals intact)
        skeleton: Lines with comments and literal contents blanked
        depths: Brace depth at the start of each line
        final_depth: Brace depth after the last line
        min_depth: Lowest brace depth reached (negative = excess closers)
    """

    file_id: str
    lines: tuple[str, ...]
    code: tuple[str, ...]
    skeleton: tuple[str, ...]
    depths: tuple[int, ...]
    final_depth: int = 0
    min_depth: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.file_id is None:
            raise TypeError("file_id must not be None")
        count = len(self.lines)
        if not (len(self.code) == len(self.skeleton) == len(self.depths) == count):
            raise ValueError("all source views must have the same line count")

    @classmethod
    def from_text(cls, file_id: str, text: str) -> SourceText:
        """Split text into lines and build every view.

        Args:
            file_id: Identifier of the file
            text: Full decoded source text

        Returns:
            SourceText for text
        """
        if text is None:
            raise TypeError("text must not be None")
        lines = [line.removesuffix("\r") for line in text.split("\n")] if text else []
        skeleton = blank_literals(lines)
        depths, final_depth, min_depth = brace_depths(skeleton)
        return cls(
            file_id=file_id,
            lines=tuple(lines),
            code=tuple(blank_comments(lines)),
            skeleton=tuple(skeleton),
            depths=tuple(depths),
            final_depth=final_depth,
            min_depth=min_depth,
        )

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def is_balanced(self) -> bool:
        """Every brace is matched and none closes early."""
        return self.final_depth == 0 and self.min_depth >= 0

    def is_blank(self, line: int) -> bool:
        """Line holds nothing but whitespace and comments."""
        return not self.code[line].strip()

    def join_code(self, start: int, end: int) -> str:
        """Code lines start..end (inclusive) joined with newlines."""
        return "\n".join(self.code[start : end + 1])

    def snippet(self, line: int, length: int = 80) -> str:
        """Trimmed raw line for log records."""
        if not 0 <= line < len(self.lines):
            return ""
        text = self.lines[line].strip()
        return text if len(text) <= length else text[: length - 3] + "..."
