"""Tests for infrastructure/extractors/site.py and source.py."""

import pytest

from beanlens.domain.model.enums import AnnotationKind
from beanlens.domain.model.location import Position
from beanlens.infrastructure.extractors.site import (
    DeclarationSite,
    annotation_chunk_end,
    locate_inline_site,
    locate_site,
)
from beanlens.infrastructure.extractors.source import SourceText


def _source(*lines: str) -> SourceText:
    return SourceText.from_text("Test.java", "\n".join(lines))


class TestSourceText:
    """Tests for SourceText."""

    def test_views_have_same_shape(self) -> None:
        source = _source("class A { // {", '  String s = "}";', "}")
        assert len(source) == 3
        assert [len(line) for line in source.code] == [len(line) for line in source.lines]
        assert [len(line) for line in source.skeleton] == [len(line) for line in source.lines]
        assert source.is_balanced

    def test_crlf_stripped(self) -> None:
        source = SourceText.from_text("A.java", "class A {\r\n}\r\n")
        assert source.lines[0] == "class A {"

    def test_unbalanced(self) -> None:
        source = _source("class A {", "  void f() {")
        assert not source.is_balanced
        assert source.final_depth == 2

    def test_is_blank_for_comment_line(self) -> None:
        source = _source("// nothing", "int a;")
        assert source.is_blank(0)
        assert not source.is_blank(1)

    def test_snippet_trimmed(self) -> None:
        source = _source("    " + "x" * 100)
        assert source.snippet(0, 10) == "xxxxxxx..."
        assert source.snippet(5) == ""

    def test_empty_text(self) -> None:
        assert len(SourceText.from_text("A.java", "")) == 0

    def test_mismatched_views_raise(self) -> None:
        with pytest.raises(ValueError, match="same line count"):
            SourceText(file_id="A.java", lines=("a",), code=(), skeleton=(), depths=())


class TestDeclarationSite:
    """Tests for DeclarationSite."""

    def test_annotation_after_declaration_raises(self) -> None:
        with pytest.raises(ValueError, match="must not follow"):
            DeclarationSite(line=1, column=0, first_line=2, first_column=0)

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="invalid declaration start"):
            DeclarationSite(line=-1, column=0, first_line=-1, first_column=0)


class TestLocateSite:
    """Tests for locate_site."""

    def test_no_annotations(self) -> None:
        source = _source("class A {", "    private Foo foo;", "}")
        site = locate_site(source, 1)
        assert site.position == Position(1, 4)
        assert site.start == Position(1, 4)
        assert site.annotations == ()

    def test_preceding_annotation_lines(self) -> None:
        source = _source(
            "class A {",
            "    @Autowired",
            "    @Qualifier(\"primary\")",
            "    private MessageService messageService;",
            "}",
        )
        site = locate_site(source, 3)
        assert [a.name for a in site.annotations] == ["Autowired", "Qualifier"]
        assert site.start == Position(1, 4)
        assert site.has(AnnotationKind.AUTOWIRED)
        qualifier = site.find(AnnotationKind.QUALIFIER)
        assert qualifier is not None
        assert qualifier.explicit_name == "primary"

    def test_inline_annotation(self) -> None:
        source = _source("class A {", "    @Autowired private Foo foo;", "}")
        site = locate_site(source, 1)
        assert [a.name for a in site.annotations] == ["Autowired"]
        assert site.position == Position(1, 15)
        assert site.start == Position(1, 4)

    def test_skips_blank_and_comment_lines(self) -> None:
        source = _source(
            "class A {",
            "    @Autowired",
            "",
            "    // the repository",
            "    private Repo repo;",
            "}",
        )
        assert locate_site(source, 4).has(AnnotationKind.AUTOWIRED)

    def test_stops_at_previous_statement(self) -> None:
        source = _source(
            "class A {",
            "    @Autowired private Foo foo;",
            "    private Bar bar;",
            "}",
        )
        assert locate_site(source, 2).annotations == ()

    def test_multi_line_annotation_arguments(self) -> None:
        source = _source(
            "class A {",
            "    @Bean(",
            '        name = "sms",',
            "        initMethod = \"init\")",
            "    public Sms sms() { return new Sms(); }",
            "}",
        )
        site = locate_site(source, 4)
        assert [a.name for a in site.annotations] == ["Bean"]
        assert site.annotations[0].explicit_name == "sms"
        assert site.start == Position(1, 4)

    def test_annotation_in_javadoc_ignored(self) -> None:
        source = _source(
            "class A {",
            "    /**",
            "     * @Autowired is not used here",
            "     */",
            "    private Foo foo;",
            "}",
        )
        assert locate_site(source, 4).annotations == ()


class TestAnnotationChunkEnd:
    """Tests for annotation_chunk_end."""

    def test_single_line(self) -> None:
        source = _source("    @Autowired", "    private Foo foo;")
        assert annotation_chunk_end(source, 0) == (0, 14)

    def test_inline_declaration_follows(self) -> None:
        source = _source("    @Autowired private Foo foo;")
        line, column = annotation_chunk_end(source, 0)  # type: ignore[misc]
        assert source.code[line][column:].strip() == "private Foo foo;"

    def test_spans_lines(self) -> None:
        source = _source("    @RequestMapping(", '        value = "/x")', "    void x() {}")
        assert annotation_chunk_end(source, 0) == (1, 21)

    def test_not_annotation(self) -> None:
        source = _source("    private Foo foo;")
        assert annotation_chunk_end(source, 0) is None


class TestLocateInlineSite:
    """Tests for locate_inline_site."""

    def test_annotated_member_after_brace(self) -> None:
        site = locate_inline_site(_source("class A { @Autowired private B b; }"), 0, 9)
        assert site is not None
        assert site.position == Position(0, 21)
        assert site.start == Position(0, 10)
        assert site.has(AnnotationKind.AUTOWIRED)

    def test_plain_member_after_brace(self) -> None:
        site = locate_inline_site(_source("class A { int x; }"), 0, 9)
        assert site is not None
        assert site.position == site.start == Position(0, 10)
        assert site.annotations == ()

    @pytest.mark.parametrize("line", ["class A {", "class A { }", "class A {}", "class A { @Autowired"])
    def test_nothing_declared(self, line: str) -> None:
        assert locate_inline_site(_source(line), 0, line.index("{") + 1) is None
