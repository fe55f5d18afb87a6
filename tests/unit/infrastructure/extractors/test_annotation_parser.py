"""Tests for infrastructure/extractors/annotation_parser.py and context.py."""

import pytest

from beanlens.domain.model.configuration import ParserConfig
from beanlens.domain.model.enums import AnnotationKind
from beanlens.domain.model.location import Position
from beanlens.infrastructure.extractors.annotation_parser import (
    classify,
    find_markers,
    leading_markers,
    offset_to_position,
    parse_annotations,
    parse_arguments,
    scan_marker,
)
from beanlens.infrastructure.extractors.context import AnalysisContext


class TestScanMarker:
    """Tests for scan_marker."""

    def test_bare(self) -> None:
        marker = scan_marker("@Service public", 0)
        assert marker is not None
        assert marker.name == "Service"
        assert marker.arguments is None
        assert marker.end == len("@Service")

    def test_with_arguments(self) -> None:
        text = '@Qualifier("primary") Foo'
        marker = scan_marker(text, 0)
        assert marker is not None
        assert marker.arguments == '"primary"'
        assert text[marker.end - 1] == ")"

    def test_qualified_name(self) -> None:
        marker = scan_marker("@org.springframework.stereotype.Service", 0)
        assert marker is not None
        assert marker.name == "org.springframework.stereotype.Service"

    def test_incomplete(self) -> None:
        marker = scan_marker("@RequestMapping(value = {", 0)
        assert marker is not None
        assert not marker.complete

    def test_annotation_type_declaration_is_not_marker(self) -> None:
        assert scan_marker("@interface Audited", 0) is None


class TestLeadingMarkers:
    """Tests for leading_markers."""

    def test_stops_at_declaration(self) -> None:
        text = "@Autowired @Qualifier(\"a\") private Foo foo;"
        markers, offset = leading_markers(text)
        assert [m.name for m in markers] == ["Autowired", "Qualifier"]
        assert text[offset:].startswith("private")

    def test_no_markers(self) -> None:
        markers, offset = leading_markers("  private Foo foo;")
        assert markers == []
        assert offset == 2

    def test_incomplete_consumes_text(self) -> None:
        text = "@Bean(name = "
        markers, offset = leading_markers(text)
        assert len(markers) == 1
        assert offset == len(text)


class TestFindMarkers:
    """Tests for find_markers."""

    def test_nested_markers_not_reported(self) -> None:
        text = "@ComponentScan(excludeFilters = @Filter(Foo.class)) @Primary"
        assert [m.name for m in find_markers(text)] == ["ComponentScan", "Primary"]

    def test_at_in_string_ignored(self) -> None:
        assert [m.name for m in find_markers('@Value("a@b.com") x')] == ["Value"]


class TestParseArguments:
    """Tests for parse_arguments."""

    def test_single_unnamed_is_value(self) -> None:
        assert parse_arguments('"userSvc"') == {"value": "userSvc"}

    def test_named(self) -> None:
        assert parse_arguments('name = "sms", lazy = true') == {"name": "sms", "lazy": "true"}

    def test_array_kept_verbatim(self) -> None:
        assert parse_arguments('{"a", "b"}') == {"value": '{"a", "b"}'}

    def test_escaped_quote_unescaped(self) -> None:
        assert parse_arguments(r'"say \"hi\""') == {"value": 'say "hi"'}

    def test_empty(self) -> None:
        assert parse_arguments(None) == {}
        assert parse_arguments("  ") == {}

    def test_equality_expression_is_not_named(self) -> None:
        assert parse_arguments("a == b") == {"value": "a == b"}


class TestOffsetToPosition:
    """Tests for offset_to_position."""

    def test_same_line_adds_column_offset(self) -> None:
        assert offset_to_position("abc", 2, 5, 10) == Position(5, 12)

    def test_later_line(self) -> None:
        assert offset_to_position("ab\ncd", 4, 5, 10) == Position(6, 1)


class TestParseAnnotations:
    """Tests for parse_annotations."""

    def test_kinds_and_positions(self) -> None:
        annotations = parse_annotations('    @Service("x") @Custom', line=3)
        assert [a.kind for a in annotations] == [AnnotationKind.SERVICE, AnnotationKind.OTHER]
        assert annotations[0].position == Position(3, 4)
        assert annotations[0].explicit_name == "x"

    def test_none_raises(self) -> None:
        with pytest.raises(TypeError, match="text must not be None"):
            parse_annotations(None)  # type: ignore[arg-type]


class TestClassify:
    """Tests for annotation classification through AnalysisContext."""

    @pytest.mark.parametrize(
        ("name", "kind"),
        [
            ("Component", AnnotationKind.COMPONENT),
            ("@Service", AnnotationKind.SERVICE),
            ("RestController", AnnotationKind.REST_CONTROLLER),
            ("Configuration", AnnotationKind.CONFIGURATION),
            ("Bean", AnnotationKind.BEAN),
            ("Autowired", AnnotationKind.AUTOWIRED),
            ("Inject", AnnotationKind.AUTOWIRED),
            ("jakarta.inject.Inject", AnnotationKind.AUTOWIRED),
            ("Named", AnnotationKind.QUALIFIER),
            ("RequiredArgsConstructor", AnnotationKind.REQUIRED_ARGS_CONSTRUCTOR),
            ("lombok.AllArgsConstructor", AnnotationKind.ALL_ARGS_CONSTRUCTOR),
            ("NonNull", AnnotationKind.NON_NULL),
            ("Transactional", AnnotationKind.OTHER),
        ],
    )
    def test_catalog(self, name: str, kind: AnnotationKind) -> None:
        assert classify(name) is kind

    def test_unknown_qualified_name_is_other(self) -> None:
        assert classify("com.acme.Service") is AnnotationKind.OTHER

    def test_extra_names_from_config(self) -> None:
        context = AnalysisContext.create(
            ParserConfig(
                extra_injection_markers=frozenset({"Wire"}),
                extra_stereotypes=frozenset({"UseCase"}),
            )
        )
        assert classify("Wire", context) is AnnotationKind.AUTOWIRED
        assert classify("UseCase", context) is AnnotationKind.COMPONENT
        assert classify("Wire") is AnnotationKind.OTHER

    def test_context_catalog_is_read_only(self) -> None:
        context = AnalysisContext.create()
        with pytest.raises(TypeError):
            context.catalog["Foo"] = AnnotationKind.BEAN  # type: ignore[index]

    def test_none_config_raises(self) -> None:
        with pytest.raises(TypeError, match="config must not be None"):
            AnalysisContext(config=None)  # type: ignore[arg-type]
