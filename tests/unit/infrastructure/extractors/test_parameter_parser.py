"""Tests for infrastructure/extractors/parameter_parser.py."""

import pytest

from beanlens.domain.model.location import Position
from beanlens.infrastructure.extractors.parameter_parser import (
    locate_token,
    parse_parameter,
    parse_parameters,
    strip_parameter_prefix,
)


class TestStripParameterPrefix:
    """Tests for strip_parameter_prefix."""

    def test_annotations_and_final(self) -> None:
        assert strip_parameter_prefix('@Qualifier("a") final Foo foo') == "Foo foo"

    def test_final_prefix_of_type_name_kept(self) -> None:
        assert strip_parameter_prefix("finalizer.Hook hook") == "finalizer.Hook hook"


class TestParseParameter:
    """Tests for parse_parameter."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("UserRepository repo", ("UserRepository", "repo")),
            ("Map<String, List<Foo>> index", ("Map<String, List<Foo>>", "index")),
            ("String... args", ("String...", "args")),
            ("String args[]", ("String[]", "args")),
            ("final @NonNull Clock clock", ("Clock", "clock")),
            ("java.time.Clock clock", ("java.time.Clock", "clock")),
        ],
    )
    def test_parse(self, text: str, expected: tuple[str, str]) -> None:
        assert parse_parameter(text) == expected

    def test_multi_line_type_collapsed(self) -> None:
        assert parse_parameter("Map<String,\n    Foo> m") == ("Map<String, Foo>", "m")

    def test_single_token(self) -> None:
        assert parse_parameter("Foo") is None


class TestLocateToken:
    """Tests for locate_token."""

    def test_bounded(self) -> None:
        assert locate_token("Repo repository, Repo repo)", "repo") == 22

    def test_absent(self) -> None:
        assert locate_token("Repo repository", "repo") == -1


class TestParseParameters:
    """Tests for parse_parameters."""

    def test_positions_on_one_line(self) -> None:
        text = "    public UserService(UserRepository repo, EmailService email) {"
        parameters = parse_parameters(text, text.index("("), 7)
        assert [(p.type, p.name) for p in parameters] == [
            ("UserRepository", "repo"),
            ("EmailService", "email"),
        ]
        assert parameters[0].position == Position(7, text.index("repo"))
        assert parameters[1].position == Position(7, text.index("email"))
        assert parameters[0].range.end == Position(7, text.index("repo") + 4)

    def test_positions_across_lines(self) -> None:
        text = "    public UserService(\n            UserRepository userRepository,\n            EmailService emailService) {"
        parameters = parse_parameters(text, text.index("("), 10)
        assert parameters[0].position == Position(11, 27)
        assert parameters[1].position == Position(12, 25)

    def test_same_type_and_name_text(self) -> None:
        text = "void f(Clock clock, Clock other)"
        parameters = parse_parameters(text, text.index("("), 0)
        assert parameters[0].position == Position(0, text.index("clock"))
        assert parameters[1].position == Position(0, text.index("other"))

    def test_generic_and_annotated(self) -> None:
        text = 'Foo(@Qualifier("x, y") Map<String, Bar> bars, List<Baz> bazs)'
        parameters = parse_parameters(text, text.index("("), 0)
        assert [(p.type, p.name) for p in parameters] == [
            ("Map<String, Bar>", "bars"),
            ("List<Baz>", "bazs"),
        ]

    def test_empty(self) -> None:
        assert parse_parameters("Foo()", 3, 0) == ()
