"""Tests for application/reporters."""

import io
import json

import pytest

from beanlens.application.reporters import (
    ConsoleConfig,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from beanlens.application.reporters._base import format_site, format_target, resolution_status
from beanlens.domain.model.enums import InjectionKind
from beanlens.domain.model.report import IndexReport
from beanlens.domain.model.resolution import ResolutionResult
from beanlens.domain.ports import ReporterProtocol
from tests.factories import make_bean, make_injection

REPOSITORY = make_bean("userRepository", "UserRepository")
EMAIL = make_bean("emailMessageService", "EmailMessageService", interfaces=("MessageService",))
SMS = make_bean("smsMessageService", "SmsMessageService", interfaces=("MessageService",))


def _report() -> IndexReport:
    resolved = make_injection(
        "UserRepository", "userRepository", InjectionKind.CONSTRUCTOR, member="UserService"
    ).with_resolution(ResolutionResult.of((REPOSITORY,)))
    ambiguous = make_injection("MessageService", "messageService").with_resolution(
        ResolutionResult.of((EMAIL, SMS))
    )
    missing = make_injection("Clock", "clock").with_resolution(ResolutionResult.empty())
    return IndexReport(
        file_count=3,
        class_count=4,
        beans=(REPOSITORY, EMAIL, SMS),
        injections=(resolved, ambiguous, missing),
        errors=("Broken.java: Failed to parse Broken.java: unbalanced braces",),
    )


class TestFormatting:
    """Tests for shared formatting helpers."""

    def test_status(self) -> None:
        resolved, ambiguous, missing = _report().injections
        assert resolution_status(resolved) == "RESOLVED"
        assert resolution_status(ambiguous) == "AMBIGUOUS"
        assert resolution_status(missing) == "UNRESOLVED"
        assert resolution_status(make_injection("Foo")) == "PENDING"

    def test_collection_status(self) -> None:
        point = make_injection("List<Handler>").with_resolution(
            ResolutionResult.of((REPOSITORY,), is_collection=True)
        )
        assert resolution_status(point) == "COLLECTION"

    def test_target_and_site(self) -> None:
        resolved = _report().injections[0]
        assert format_target(resolved) == "Consumer.UserService userRepository: UserRepository"
        assert format_site(resolved).endswith("Test.java:1:5")


class TestPlainTextReporter:
    """Tests for PlainTextReporter."""

    def test_sections(self) -> None:
        output = io.StringIO()
        PlainTextReporter(output).report(_report())
        text = output.getvalue()
        assert "Bean Analysis Results" in text
        assert "Beans: 3" in text
        assert "Ambiguous: 1" in text
        assert "Status: FAIL" in text
        assert "[AMBIGUOUS] Consumer messageService: MessageService" in text
        assert "-> smsMessageService" in text
        assert "Errors (1):" in text

    def test_empty_report(self) -> None:
        output = io.StringIO()
        PlainTextReporter(output).report(IndexReport(file_count=0, class_count=0))
        text = output.getvalue()
        assert "Status: PASS" in text
        assert "Injection points:\n" not in text


class TestJSONReporter:
    """Tests for JSONReporter."""

    def test_outputs_valid_json(self) -> None:
        output = io.StringIO()
        JSONReporter(output).report(_report())
        data = json.loads(output.getvalue())
        assert data["passed"] is False
        assert data["summary"]["bean_count"] == 3
        assert data["summary"]["ambiguous_count"] == 1
        assert data["summary"]["unresolved_count"] == 1

    def test_injection_entries(self) -> None:
        output = io.StringIO()
        JSONReporter(output, indent=None).report(_report())
        data = json.loads(output.getvalue())
        resolved, ambiguous, missing = data["injections"]
        assert resolved["status"] == "resolved"
        assert resolved["resolved"] == "userRepository"
        assert resolved["kind"] == "constructor"
        assert ambiguous["candidates"] == ["emailMessageService", "smsMessageService"]
        assert missing["resolved"] is None
        assert missing["position"] == {"line": 0, "column": 4}

    def test_bean_entries(self) -> None:
        output = io.StringIO()
        JSONReporter(output).report(_report())
        bean = json.loads(output.getvalue())["beans"][1]
        assert bean["name"] == "emailMessageService"
        assert bean["interfaces"] == ["MessageService"]
        assert bean["definition_kind"] == "class"


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_returns_string(self) -> None:
        text = ConsoleReporter(ConsoleConfig(width=200)).report(_report())
        assert isinstance(text, str)
        assert "BEAN ANALYSIS" in text
        assert "userRepository" in text
        assert "AMBIGUOUS" in text

    def test_hide_resolved_and_beans(self) -> None:
        text = ConsoleReporter(
            ConsoleConfig(show_beans=False, show_resolved=False, width=200)
        ).report(_report())
        assert "RESOLVED" not in text.replace("UNRESOLVED", "")
        assert "Implementation" not in text

    def test_generic_types_not_treated_as_markup(self) -> None:
        point = make_injection("List[Handler]", "handlers").with_resolution(
            ResolutionResult.empty()
        )
        text = ConsoleReporter(ConsoleConfig(width=200)).report(
            IndexReport(file_count=1, class_count=1, injections=(point,))
        )
        assert "List[Handler]" in text

    def test_invalid_config_raises(self) -> None:
        with pytest.raises(ValueError, match="max_rows"):
            ConsoleConfig(max_rows=-1)
        with pytest.raises(ValueError, match="width"):
            ConsoleConfig(width=0)


class TestReporterProtocol:
    """Every reporter is usable through ReporterProtocol."""

    def test_all_reporters(self) -> None:
        output = io.StringIO()
        reporters: list[ReporterProtocol] = [
            PlainTextReporter(output),
            JSONReporter(output),
            ConsoleReporter(ConsoleConfig(width=200)),
        ]
        results = [reporter.report(_report()) for reporter in reporters]
        assert results[:2] == [None, None]
        assert isinstance(results[2], str)
        assert output.getvalue()
