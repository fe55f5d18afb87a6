"""Tests for infrastructure/extractors/class_extractor.py."""

import textwrap

import pytest

from beanlens.domain.model.enums import AnnotationKind
from beanlens.domain.model.location import Position
from beanlens.infrastructure.extractors.class_extractor import (
    ClassExtractor,
    extract_imports,
    extract_package,
    find_type_spans,
    parse_extends,
    parse_implements,
    simple_type_name,
    strip_type_arguments,
)
from beanlens.infrastructure.extractors.source import SourceText


def _source(text: str) -> SourceText:
    return SourceText.from_text("Test.java", textwrap.dedent(text).strip("\n"))


USER_SERVICE = """
    package com.example.users;

    import org.springframework.stereotype.Service;
    import static java.util.Objects.requireNonNull;

    @Service
    public class UserService implements UserFacade, Auditable<User> {
        private final UserRepository userRepository;
        private final EmailService emailService;

        public UserService(UserRepository userRepository, EmailService emailService) {
            this.userRepository = requireNonNull(userRepository);
            this.emailService = emailService;
        }

        public User find(long id) {
            return userRepository.findById(id);
        }
    }
"""


class TestHeaderHelpers:
    """Tests for package, import and header clause helpers."""

    def test_package_and_imports(self) -> None:
        source = _source(USER_SERVICE)
        assert extract_package(source) == "com.example.users"
        assert extract_imports(source) == (
            "org.springframework.stereotype.Service",
            "static java.util.Objects.requireNonNull",
        )

    def test_default_package(self) -> None:
        assert extract_package(_source("class A {}")) is None

    def test_strip_type_arguments(self) -> None:
        assert strip_type_arguments("Map<String, List<Foo>>") == "Map"

    def test_simple_type_name(self) -> None:
        assert simple_type_name("java.util.function.Supplier<Foo>") == "Supplier"

    def test_implements(self) -> None:
        header = "class A<T extends Comparable<T>> extends Base<T> implements X, y.Z<T> "
        assert parse_implements(header) == ("X", "Z")
        assert parse_extends(header) == "Base"

    def test_no_clauses(self) -> None:
        assert parse_implements("class A ") == ()
        assert parse_extends("class A ") is None


class TestFindTypeSpans:
    """Tests for find_type_spans."""

    def test_nested_types(self) -> None:
        source = _source(
            """
            public class Outer {
                interface Callback {}
                static class Inner {
                    enum Mode { A, B }
                }
                private Class<?> type = Outer.class;
            }
            """
        )
        spans = find_type_spans(source)
        assert [(s.keyword, s.name) for s in spans] == [
            ("class", "Outer"),
            ("interface", "Callback"),
            ("class", "Inner"),
            ("enum", "Mode"),
        ]
        outer, _, inner, mode = spans
        assert outer.encloses(inner)
        assert inner.encloses(mode)
        assert not inner.encloses(outer)
        assert outer.body_depth == 1
        assert inner.body_depth == 2

    def test_brace_on_next_line(self) -> None:
        spans = find_type_spans(_source("class A\n    extends B\n{\n}"))
        assert spans[0].open == Position(2, 0)
        assert spans[0].close == Position(3, 0)

    def test_keyword_in_string_or_comment_ignored(self) -> None:
        source = _source('class A {\n    String s = "class B {";\n    // class C {\n}')
        assert [s.name for s in find_type_spans(source)] == ["A"]


class TestClassExtractor:
    """Tests for ClassExtractor."""

    def test_service_class(self) -> None:
        records = ClassExtractor().extract(_source(USER_SERVICE))
        assert len(records) == 1
        record = records[0]
        assert record.name == "UserService"
        assert record.fully_qualified_name == "com.example.users.UserService"
        assert record.package == "com.example.users"
        assert record.interfaces == ("UserFacade", "Auditable")
        assert record.stereotype is not None
        assert record.stereotype.kind is AnnotationKind.SERVICE
        assert record.position == Position(6, 13)
        assert record.range.start == Position(5, 0)
        assert [f.name for f in record.fields] == ["userRepository", "emailService"]
        assert [m.name for m in record.methods] == ["find"]
        assert len(record.constructors) == 1
        assert [p.type for p in record.constructors[0].parameters] == [
            "UserRepository",
            "EmailService",
        ]

    def test_locals_in_method_bodies_ignored(self) -> None:
        records = ClassExtractor().extract(
            _source(
                """
                class A {
                    void run() {
                        Foo local = new Foo();
                        helper(local);
                    }
                }
                """
            )
        )
        assert records[0].fields == ()
        assert [m.name for m in records[0].methods] == ["run"]

    def test_nested_class_qualified_name(self) -> None:
        records = ClassExtractor().extract(
            _source(
                """
                package p;
                class Outer {
                    private Helper helper;
                    @Component
                    static class Inner {
                        private Clock clock;
                    }
                }
                """
            )
        )
        assert [r.fully_qualified_name for r in records] == ["p.Outer", "p.Outer.Inner"]
        outer, inner = records
        assert [f.name for f in outer.fields] == ["helper"]
        assert [f.name for f in inner.fields] == ["clock"]
        assert inner.stereotype is not None

    def test_interfaces_and_enums_are_not_records(self) -> None:
        records = ClassExtractor().extract(
            _source("interface Repo {}\nenum Color { RED }\nrecord Point(int x, int y) {}")
        )
        assert records == ()

    def test_annotation_only_lines_skipped(self) -> None:
        records = ClassExtractor().extract(
            _source(
                """
                class A {
                    @Autowired
                    @Qualifier("fast")
                    private Engine engine;

                    @Autowired
                    public void setWheel(Wheel wheel) {
                    }
                }
                """
            )
        )
        record = records[0]
        assert record.fields[0].has_injection_marker
        assert record.fields[0].find_annotation(AnnotationKind.QUALIFIER) is not None
        assert record.methods[0].is_setter
        assert record.methods[0].has_injection_marker

    def test_equal_results_for_equal_text(self) -> None:
        extractor = ClassExtractor()
        assert extractor.extract(_source(USER_SERVICE)) == extractor.extract(_source(USER_SERVICE))

    def test_none_source_raises(self) -> None:
        with pytest.raises(TypeError, match="source must not be None"):
            ClassExtractor().extract(None)  # type: ignore[arg-type]


class TestOpeningLineMembers:
    """Members written on the class's opening brace line."""

    def test_annotated_field(self) -> None:
        (record,) = ClassExtractor().extract(
            _source("@Service\npublic class A { @Autowired private B b; }")
        )
        (field,) = record.fields
        assert field.name == "b"
        assert field.type == "B"
        assert field.has_injection_marker
        assert field.position == Position(1, 38)

    def test_bean_method(self) -> None:
        (record,) = ClassExtractor().extract(
            _source("@Configuration\npublic class Cfg { @Bean public Clock clock() { return null; } }")
        )
        (method,) = record.methods
        assert method.name == "clock"
        assert method.return_type == "Clock"
        assert method.is_bean_factory

    def test_following_lines_still_scanned(self) -> None:
        (record,) = ClassExtractor().extract(
            _source(
                """
                class A { private B b;
                    private C c;
                }
                """
            )
        )
        assert [f.name for f in record.fields] == ["b", "c"]

    def test_empty_body(self) -> None:
        (record,) = ClassExtractor().extract(_source("class A { }"))
        assert record.fields == ()
        assert record.methods == ()
        assert record.constructors == ()
