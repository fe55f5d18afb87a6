"""Member declaration headers.

A header is the text of a class-body declaration up to its first
top-level `(`, `=`, `;` or `{`. It decides the member kind and carries
modifiers, declared type and name for the extractors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from beanlens.domain.model.enums import MemberKind, Visibility
from beanlens.infrastructure.extractors.annotation_parser import scan_marker, to_annotation
from beanlens.infrastructure.syntax.scanner import find_top_level, paren_depth

if TYPE_CHECKING:
    from beanlens.domain.model.annotation import Annotation
    from beanlens.infrastructure.extractors.context import AnalysisContext
    from beanlens.infrastructure.extractors.site import DeclarationSite
    from beanlens.infrastructure.extractors.source import SourceText

MODIFIERS = frozenset(
    {
        "public",
        "protected",
        "private",
        "static",
        "final",
        "abstract",
        "synchronized",
        "native",
        "transient",
        "volatile",
        "default",
        "strictfp",
        "sealed",
        "non-sealed",
    }
)

VISIBILITY = {
    "public": Visibility.PUBLIC,
    "protected": Visibility.PROTECTED,
    "private": Visibility.PRIVATE,
}

TYPE_KEYWORDS = frozenset({"class", "interface", "enum", "record"})

KEYWORDS = frozenset(
    {
        "return",
        "new",
        "throw",
        "if",
        "else",
        "for",
        "while",
        "do",
        "switch",
        "case",
        "try",
        "catch",
        "finally",
        "this",
        "super",
        "assert",
        "break",
        "continue",
        "import",
        "package",
    }
)

# Max lines a header or parameter list may span
MAX_DECLARATION_SPAN = 40

_DELIMITERS = "(=;{"


@dataclass(frozen=True, slots=True)
class Header:
    """Classified declaration header.

    Attributes:
        kind: Member kind
        text: Code lines from the declaration line joined with newlines,
            annotation markers inside the header blanked
        delimiter: Offset in text of the first top-level delimiter
        end_line: Line holding the delimiter
        modifiers: Modifier keywords
        type: Declared type (field type or return type), None for constructors
        name: Member name, None for OTHER
        annotations: Annotations written between modifiers
    """

    kind: MemberKind
    text: str
    delimiter: int
    end_line: int
    modifiers: frozenset[str] = frozenset()
    type: str | None = None
    name: str | None = None
    annotations: tuple[Annotation, ...] = ()

    @property
    def visibility(self) -> Visibility:
        """Access modifier, PACKAGE when none is written."""
        for modifier, visibility in VISIBILITY.items():
            if modifier in self.modifiers:
                return visibility
        return Visibility.PACKAGE

    @property
    def is_static(self) -> bool:
        return "static" in self.modifiers

    @property
    def is_final(self) -> bool:
        return "final" in self.modifiers


def split_tokens(text: str) -> list[str]:
    """Split on whitespace outside generic angle brackets.

    `[]` suffixes and `...` are glued to the preceding token, as is a
    type argument list written after a space (`Map <K, V>`) unless the
    preceding token is a modifier.

    Args:
        text: Declaration fragment

    Returns:
        Tokens in order
    """
    raw: list[str] = []
    current: list[str] = []
    depth = 0
    for char in text:
        if char == "<":
            depth += 1
        elif char == ">":
            depth = max(depth - 1, 0)
        if char.isspace() and depth == 0:
            if current:
                raw.append("".join(current))
                current = []
            continue
        current.append(char)
    if current:
        raw.append("".join(current))

    tokens: list[str] = []
    for token in raw:
        glue = token.startswith(("[", "...")) or (
            token.startswith("<") and tokens and tokens[-1] not in MODIFIERS
        )
        if glue and tokens:
            tokens[-1] = tokens[-1] + token
        else:
            tokens.append(token)
    return tokens


def strip_modifiers(tokens: list[str]) -> tuple[frozenset[str], list[str]]:
    """Split leading modifiers and method type parameters off tokens."""
    modifiers: set[str] = set()
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token in MODIFIERS:
            modifiers.add(token)
        elif not (token.startswith("<") and token.endswith(">")):
            break
        index += 1
    return frozenset(modifiers), tokens[index:]


def is_identifier(token: str) -> bool:
    """Valid Java identifier that is not a statement keyword."""
    return bool(token) and token.replace("$", "_").isidentifier() and token not in KEYWORDS


def _blank(text: str, start: int, end: int) -> str:
    return text[:start] + "".join(c if c == "\n" else " " for c in text[start:end]) + text[end:]


def read_header(
    source: SourceText,
    site: DeclarationSite,
    class_name: str,
    context: AnalysisContext,
    last_line: int | None = None,
) -> Header:
    """Read and classify the declaration header at site.

    Lines are accumulated until a top-level delimiter appears.
    Annotation markers met before the delimiter are collected and
    blanked so their parentheses do not count as a parameter list.

    Args:
        source: Source buffer
        site: Located declaration
        class_name: Simple name of the enclosing class
        context: Analysis context
        last_line: Last line the header may extend to

    Returns:
        Header, kind OTHER when the text is not a field, method or constructor
    """
    limit = min(
        len(source) - 1 if last_line is None else last_line,
        site.line + MAX_DECLARATION_SPAN,
    )
    end_line = site.line
    text = source.join_code(site.line, end_line)
    annotations: list[Annotation] = []
    position = site.column
    while True:
        found = find_top_level(text, _DELIMITERS + "@", position)
        if found != -1 and text[found] == "@":
            marker = scan_marker(text, found)
            if marker is not None and marker.complete:
                annotations.append(to_annotation(marker, text, site.line, 0, context))
                text = _blank(text, marker.offset, marker.end)
                position = marker.end
                continue
            if marker is None:
                position = found + 1
                continue
            found = -1
        if found != -1:
            break
        if end_line >= limit:
            return Header(MemberKind.OTHER, text, -1, end_line, annotations=tuple(annotations))
        end_line += 1
        text = text + "\n" + source.code[end_line]

    end_line = site.line + text.count("\n", 0, found)
    modifiers, tokens = strip_modifiers(split_tokens(text[site.column : found]))
    delimiter = text[found]
    if any(token in TYPE_KEYWORDS or token == "@interface" for token in tokens):
        kind = MemberKind.OTHER
    elif delimiter == "(":
        if tokens == [class_name]:
            kind = MemberKind.CONSTRUCTOR
        elif len(tokens) >= 2 and is_identifier(tokens[-1]):
            kind = MemberKind.METHOD
        else:
            kind = MemberKind.OTHER
    elif delimiter in "=;":
        kind = MemberKind.FIELD if len(tokens) >= 2 else MemberKind.OTHER
    else:
        kind = MemberKind.OTHER

    match kind:
        case MemberKind.CONSTRUCTOR:
            type_, name = None, class_name
        case MemberKind.METHOD:
            type_, name = " ".join(tokens[:-1]), tokens[-1]
        case MemberKind.FIELD:
            type_, name = tokens[0], tokens[1].rstrip(",")
        case _:
            type_, name = None, None
    return Header(
        kind=kind,
        text=text,
        delimiter=found,
        end_line=end_line,
        modifiers=modifiers,
        type=type_,
        name=name,
        annotations=tuple(annotations),
    )


def extend_to_close(
    source: SourceText,
    header: Header,
    start_line: int,
    last_line: int | None = None,
) -> tuple[str, int]:
    """Accumulate lines until the parameter list opened at the delimiter closes.

    Args:
        source: Source buffer
        header: Header whose delimiter is `(`
        start_line: Line where header.text starts
        last_line: Last line the declaration may extend to

    Returns:
        (accumulated text, last line consumed)

    Raises:
        ValueError: If the parameter list never closes
    """
    limit = min(
        len(source) - 1 if last_line is None else last_line,
        start_line + MAX_DECLARATION_SPAN,
    )
    text = header.text
    end_line = start_line + text.count("\n")
    while paren_depth(text[header.delimiter :]) > 0:
        if end_line >= limit:
            raise ValueError("unterminated parameter list")
        end_line += 1
        text = text + "\n" + source.code[end_line]
    return text, end_line
