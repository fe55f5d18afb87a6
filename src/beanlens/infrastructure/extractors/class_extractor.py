"""Class boundary and member extraction."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from loguru import logger

from beanlens.domain.exceptions.parsing import DeclarationError
from beanlens.domain.model.class_ import ClassRecord
from beanlens.domain.model.enums import MemberKind
from beanlens.domain.model.location import Position, Range
from beanlens.infrastructure.extractors.constructor_extractor import ConstructorExtractor
from beanlens.infrastructure.extractors.context import DEFAULT_CONTEXT, AnalysisContext
from beanlens.infrastructure.extractors.declaration import MAX_DECLARATION_SPAN, read_header
from beanlens.infrastructure.extractors.field_extractor import FieldExtractor
from beanlens.infrastructure.extractors.method_extractor import MethodExtractor
from beanlens.infrastructure.extractors.site import (
    annotation_chunk_end,
    locate_inline_site,
    locate_site,
)
from beanlens.infrastructure.syntax.scanner import split_generic_aware

if TYPE_CHECKING:
    from beanlens.domain.model.constructor import Constructor
    from beanlens.domain.model.field import Field
    from beanlens.domain.model.method import Method
    from beanlens.infrastructure.extractors.source import SourceText

_PACKAGE_RE = re.compile(r"^\s*package\s+([\w$.\s]+?)\s*;")
_IMPORT_RE = re.compile(r"^\s*import\s+(static\s+)?([\w$.\s]+?(?:\.\s*\*)?)\s*;")
_TYPE_RE = re.compile(r"(?<![\w.$@])(class|interface|enum|record)\s+([A-Za-z_$][\w$]*)")
_ANNOTATION_TYPE_RE = re.compile(r"@\s*interface\s+([A-Za-z_$][\w$]*)")
_EXTENDS_RE = re.compile(r"\bextends\s+(.+?)(?=\bimplements\b|\bpermits\b|$)", re.DOTALL)
_IMPLEMENTS_RE = re.compile(r"\bimplements\s+(.+?)(?=\bpermits\b|$)", re.DOTALL)


def extract_package(source: SourceText) -> str | None:
    """Package name from the package declaration, None for the default package."""
    for line in source.skeleton:
        match = _PACKAGE_RE.match(line)
        if match is not None:
            return re.sub(r"\s+", "", match.group(1))
    return None


def extract_imports(source: SourceText) -> tuple[str, ...]:
    """Import targets in order, static imports prefixed with 'static '."""
    imports: list[str] = []
    for line in source.skeleton:
        match = _IMPORT_RE.match(line)
        if match is None:
            continue
        target = re.sub(r"\s+", "", match.group(2))
        imports.append(f"static {target}" if match.group(1) else target)
    return tuple(imports)


def strip_type_arguments(text: str) -> str:
    """Remove everything inside `<...>`, nesting aware."""
    out: list[str] = []
    depth = 0
    for char in text:
        if char == "<":
            depth += 1
        elif char == ">":
            depth = max(depth - 1, 0)
        elif depth == 0:
            out.append(char)
    return "".join(out)


def simple_type_name(text: str) -> str:
    """`java.util.function.Supplier<Foo>` -> `Supplier`."""
    base = strip_type_arguments(text)
    base = re.sub(r"@[\w$.]+(\([^)]*\))?", " ", base).strip()
    return base.rsplit(".", 1)[-1].strip()


def parse_implements(header: str) -> tuple[str, ...]:
    """Simple interface names from a class header's implements clause.

    Args:
        header: Class header text up to (not including) the opening brace

    Returns:
        Interface names in order, empty without an implements clause
    """
    match = _IMPLEMENTS_RE.search(_flatten(header))
    if match is None:
        return ()
    names = (simple_type_name(part) for part in split_generic_aware(match.group(1)))
    return tuple(name for name in names if name)


def parse_extends(header: str) -> str | None:
    """Simple superclass name from a class header's extends clause."""
    match = _EXTENDS_RE.search(_flatten(header))
    if match is None:
        return None
    parts = split_generic_aware(match.group(1))
    if not parts:
        return None
    return simple_type_name(parts[0]) or None


def _flatten(header: str) -> str:
    """Header with the type parameter section removed.

    `class A<T extends B> implements C<T>` keeps the clauses of A only.
    """
    keyword = _TYPE_RE.search(header)
    if keyword is None:
        return header
    rest = header[keyword.end() :]
    if rest.lstrip().startswith("<"):
        start = keyword.end() + rest.index("<")
        depth = 0
        for index in range(start, len(header)):
            if header[index] == "<":
                depth += 1
            elif header[index] == ">":
                depth -= 1
                if depth == 0:
                    return header[: keyword.end()] + " " + header[index + 1 :]
    return header


@dataclass(frozen=True, slots=True)
class TypeSpan:
    """Boundaries of one type declaration.

    Attributes:
        keyword: class, interface, enum, record or @interface
        name: Simple type name
        position: Position of the name
        header: Header text from the keyword to the opening brace
        open: Position of the opening brace
        close: Position of the closing brace, None if the body never closes
        body_depth: Brace depth of the body's members
    """

    keyword: str
    name: str
    position: Position
    header: str
    open: Position
    close: Position | None
    body_depth: int

    def encloses(self, other: TypeSpan) -> bool:
        """other is declared inside this type's body."""
        if other.position <= self.open:
            return False
        return self.close is None or other.position < self.close


def _find_open(source: SourceText, line: int, column: int) -> tuple[str, Position] | None:
    """Header text and position of the opening brace after (line, column)."""
    parts: list[str] = []
    last = min(line + MAX_DECLARATION_SPAN, len(source) - 1)
    for index in range(line, last + 1):
        start = column if index == line else 0
        text = source.skeleton[index]
        for offset in range(start, len(text)):
            char = text[offset]
            if char == "{":
                parts.append(text[start:offset])
                return "\n".join(parts), Position(index, offset)
            if char == ";":
                return None
        parts.append(text[start:])
    return None


def _find_close(source: SourceText, open_: Position) -> Position | None:
    depth = 0
    for index in range(open_.line, len(source)):
        text = source.skeleton[index]
        start = open_.column if index == open_.line else 0
        for offset in range(start, len(text)):
            char = text[offset]
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    return Position(index, offset)
    return None


def find_type_spans(source: SourceText) -> list[TypeSpan]:
    """Every type declaration in source order, nested ones included."""
    spans: list[TypeSpan] = []
    for line, text in enumerate(source.skeleton):
        matches = [(m.group(1), m.group(2), m.start(), m.start(2)) for m in _TYPE_RE.finditer(text)]
        matches += [
            ("@interface", m.group(1), m.start(), m.start(1))
            for m in _ANNOTATION_TYPE_RE.finditer(text)
        ]
        for keyword, name, start, name_column in sorted(matches, key=lambda m: m[2]):
            opened = _find_open(source, line, start)
            if opened is None:
                continue
            header, open_ = opened
            body_depth = source.depths[open_.line] + 1
            for char in source.skeleton[open_.line][: open_.column]:
                if char == "{":
                    body_depth += 1
                elif char == "}":
                    body_depth -= 1
            spans.append(
                TypeSpan(
                    keyword=keyword,
                    name=name,
                    position=Position(line, name_column),
                    header=header,
                    open=open_,
                    close=_find_close(source, open_),
                    body_depth=body_depth,
                )
            )
    return spans


@dataclass(slots=True)
class _Members:
    """Members collected from one class body."""

    fields: list[Field] = field(default_factory=list)
    constructors: list[Constructor] = field(default_factory=list)
    methods: list[Method] = field(default_factory=list)


class ClassExtractor:
    """Extracts class records with their members from one source file.

    Stateless extractor - no state between extract() calls.
    """

    def __init__(self) -> None:
        self._fields = FieldExtractor()
        self._constructors = ConstructorExtractor()
        self._methods = MethodExtractor()

    def extract(
        self,
        source: SourceText,
        context: AnalysisContext = DEFAULT_CONTEXT,
    ) -> tuple[ClassRecord, ...]:
        """Extract every class (top-level and nested) in source order.

        Interfaces, enums, records and annotation types are not class
        records, but they still count as enclosing types for names.

        Args:
            source: Source buffer
            context: Analysis context

        Returns:
            Class records

        Raises:
            TypeError: If source is None (FAIL-FIRST)
        """
        # FAIL-FIRST: validate required parameters
        if source is None:
            raise TypeError("source must not be None")

        package = extract_package(source)
        imports = extract_imports(source)
        spans = find_type_spans(source)
        records: list[ClassRecord] = []
        for span in spans:
            if span.keyword != "class":
                continue
            outer = [s.name for s in spans if s is not span and s.encloses(span)]
            qualified = ".".join(part for part in (package, *outer, span.name) if part)
            records.append(self._extract_class(source, span, qualified, package, imports, context))
        return tuple(records)

    def _extract_class(
        self,
        source: SourceText,
        span: TypeSpan,
        qualified: str,
        package: str | None,
        imports: tuple[str, ...],
        context: AnalysisContext,
    ) -> ClassRecord:
        site = locate_site(source, span.position.line, context)
        last_line = span.close.line if span.close is not None else len(source) - 1
        end = (
            Position(span.close.line, span.close.column + 1)
            if span.close is not None
            else Position(last_line, len(source.lines[last_line]) if source.lines else 0)
        )
        fields, constructors, methods = self._extract_members(source, span, last_line, context)
        return ClassRecord(
            name=span.name,
            fully_qualified_name=qualified,
            file_id=source.file_id,
            position=span.position,
            range=Range(min(site.start, span.position), end),
            package=package,
            annotations=site.annotations,
            fields=fields,
            methods=methods,
            constructors=constructors,
            interfaces=parse_implements(span.header),
            superclass=parse_extends(span.header),
            imports=imports,
        )

    def _extract_members(
        self,
        source: SourceText,
        span: TypeSpan,
        last_line: int,
        context: AnalysisContext,
    ) -> tuple[tuple[Field, ...], tuple[Constructor, ...], tuple[Method, ...]]:
        members = _Members()
        end_line = self._extract_member(
            source, span.open.line, span, last_line, context, members, span.open.column + 1
        )
        line = max(end_line, span.open.line) + 1
        while line <= last_line:
            if source.depths[line] != span.body_depth or source.is_blank(line):
                line += 1
                continue
            declaration_line = line
            if source.code[line].lstrip().startswith("@"):
                chunk = annotation_chunk_end(source, line)
                if chunk is None:
                    line += 1
                    continue
                chunk_line, chunk_column = chunk
                if not source.code[chunk_line][chunk_column:].strip():
                    line = chunk_line + 1
                    continue
                declaration_line = chunk_line
            end_line = self._extract_member(
                source, declaration_line, span, last_line, context, members
            )
            line = max(end_line, declaration_line) + 1
        return tuple(members.fields), tuple(members.constructors), tuple(members.methods)

    def _extract_member(
        self,
        source: SourceText,
        line: int,
        span: TypeSpan,
        last_line: int,
        context: AnalysisContext,
        members: _Members,
        column: int | None = None,
    ) -> int:
        """Extract the declaration on line into members.

        With column, only a declaration starting after column on line
        is considered: members written on a class's opening brace line.

        Returns:
            Last line consumed by the declaration
        """
        end_line = line
        try:
            if column is None:
                site = locate_site(source, line, context)
            else:
                site = locate_inline_site(source, line, column, context)
                if site is None:
                    return line
            header = read_header(source, site, span.name, context, last_line)
            end_line = max(header.end_line, line)
            match header.kind:
                case MemberKind.FIELD:
                    found, end_line = self._fields.extract(source, site, header, last_line)
                    members.fields.extend(found)
                case MemberKind.CONSTRUCTOR:
                    constructor, end_line = self._constructors.extract(
                        source, site, header, last_line
                    )
                    members.constructors.append(constructor)
                case MemberKind.METHOD:
                    method, end_line = self._methods.extract(source, site, header, last_line)
                    members.methods.append(method)
                case MemberKind.OTHER:
                    pass
        except Exception as exc:
            error = DeclarationError(source.file_id, line, str(exc) or type(exc).__name__)
            logger.bind(
                file_id=source.file_id,
                line=line + 1,
                snippet=source.snippet(line, context.config.snippet_length),
            ).warning("Skipping declaration in {}: {}", span.name, error.reason)
        return end_line
