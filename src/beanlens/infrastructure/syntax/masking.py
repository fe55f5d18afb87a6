"""Column-preserving source masks.

Comments (and optionally literal contents) are replaced by spaces so
that later regex and brace scanning cannot be fooled by them, while
every remaining character keeps its original line and column.
"""

from __future__ import annotations

from enum import Enum, auto


class _State(Enum):
    CODE = auto()
    BLOCK_COMMENT = auto()
    STRING = auto()
    CHAR = auto()
    TEXT_BLOCK = auto()


def _mask(lines: list[str], *, literals: bool) -> list[str]:
    masked: list[str] = []
    state = _State.CODE
    for line in lines:
        out = list(line)
        index = 0
        length = len(line)
        if state in (_State.STRING, _State.CHAR):
            # Plain literals cannot span lines
            state = _State.CODE
        while index < length:
            char = line[index]
            pair = line[index : index + 2]
            match state:
                case _State.CODE:
                    if pair == "//":
                        for pos in range(index, length):
                            out[pos] = " "
                        break
                    if pair == "/*":
                        out[index] = out[index + 1] = " "
                        state = _State.BLOCK_COMMENT
                        index += 2
                        continue
                    if line.startswith('"""', index):
                        state = _State.TEXT_BLOCK
                        index += 3
                        continue
                    if char == '"':
                        state = _State.STRING
                    elif char == "'":
                        state = _State.CHAR
                case _State.BLOCK_COMMENT:
                    if pair == "*/":
                        out[index] = out[index + 1] = " "
                        state = _State.CODE
                        index += 2
                        continue
                    out[index] = " "
                case _State.TEXT_BLOCK:
                    if line.startswith('"""', index):
                        state = _State.CODE
                        index += 3
                        continue
                    if char == "\\" and literals:
                        out[index] = " "
                        if index + 1 < length:
                            out[index + 1] = " "
                        index += 2
                        continue
                    if literals:
                        out[index] = " "
                case _State.STRING | _State.CHAR:
                    closer = '"' if state is _State.STRING else "'"
                    if char == "\\":
                        if literals:
                            out[index] = " "
                            if index + 1 < length:
                                out[index + 1] = " "
                        index += 2
                        continue
                    if char == closer:
                        state = _State.CODE
                    elif literals:
                        out[index] = " "
            index += 1
        masked.append("".join(out))
    return masked


def blank_comments(lines: list[str]) -> list[str]:
    """Replace line and block comments with spaces.

    Comment markers inside string literals are left alone.

    Args:
        lines: Source lines

    Returns:
        Lines of identical length with comments blanked
    """
    return _mask(lines, literals=False)


def blank_literals(lines: list[str]) -> list[str]:
    """Replace comments and the contents of literals with spaces.

    Quote characters stay so that literal boundaries remain visible.

    Args:
        lines: Source lines

    Returns:
        Lines of identical length, "skeleton" of the code
    """
    return _mask(lines, literals=True)


def brace_depths(skeleton: list[str]) -> tuple[list[int], int, int]:
    """Brace depth at the start of every line.

    Args:
        skeleton: Lines with comments and literal contents blanked

    Returns:
        (depth at start of each line, final depth, minimum depth reached).
        A negative minimum means excess closing braces.
    """
    depths: list[int] = []
    depth = 0
    lowest = 0
    for line in skeleton:
        depths.append(depth)
        for char in line:
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                lowest = min(lowest, depth)
    return depths, depth, lowest
