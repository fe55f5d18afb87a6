"""Parsing exceptions."""

from __future__ import annotations

from beanlens.domain.exceptions.base import BeanLensError


class ParsingError(BeanLensError):
    """Error during source parsing.

    Attributes:
        file_id: Identifier of the file that failed to parse
        reason: Why parsing failed
    """

    def __init__(self, file_id: str, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if file_id is None:
            raise TypeError("file_id must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.file_id = file_id
        self.reason = reason
        super().__init__(f"Failed to parse {file_id}: {reason}")


class DeclarationError(ParsingError):
    """Error while extracting a single declaration.

    Attributes:
        file_id: Identifier of the file
        line: 0-based line where the declaration starts
        reason: Why extraction failed
    """

    def __init__(self, file_id: str, line: int, reason: str) -> None:
        if line < 0:
            raise ValueError(f"line must be >= 0, got {line}")

        self.line = line
        super().__init__(file_id, f"{reason} at line {line + 1}")
