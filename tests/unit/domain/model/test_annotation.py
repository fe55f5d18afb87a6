"""Tests for domain/model/annotation.py."""

from types import MappingProxyType

import pytest

from beanlens.domain.model.annotation import Annotation
from beanlens.domain.model.enums import AnnotationKind
from beanlens.domain.model.location import Position
from tests.factories import make_annotation


class TestAnnotationCreation:
    """Tests for valid Annotation creation."""

    def test_arguments_are_frozen(self) -> None:
        annotation = make_annotation("Service", AnnotationKind.SERVICE, arguments={"value": "x"})
        assert isinstance(annotation.arguments, MappingProxyType)
        with pytest.raises(TypeError):
            annotation.arguments["value"] = "y"  # type: ignore[index]

    def test_simple_name_of_qualified(self) -> None:
        annotation = make_annotation("org.springframework.stereotype.Service")
        assert annotation.simple_name == "Service"

    def test_get_missing_argument(self) -> None:
        assert make_annotation("Bean").get("name") is None


class TestAnnotationFailFirst:
    """Tests for FAIL-FIRST validation in Annotation."""

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            Annotation(name="", kind=AnnotationKind.OTHER, position=Position(0, 0))

    def test_at_sign_raises(self) -> None:
        with pytest.raises(ValueError, match="must not include '@'"):
            Annotation(name="@Bean", kind=AnnotationKind.BEAN, position=Position(0, 0))

    def test_wrong_kind_type_raises(self) -> None:
        with pytest.raises(TypeError, match="kind must be AnnotationKind"):
            Annotation(name="Bean", kind="BEAN", position=Position(0, 0))  # type: ignore[arg-type]


class TestExplicitName:
    """Tests for Annotation.explicit_name."""

    def test_value_argument(self) -> None:
        annotation = make_annotation("Service", arguments={"value": "userSvc"})
        assert annotation.explicit_name == "userSvc"

    def test_name_argument(self) -> None:
        annotation = make_annotation("Bean", arguments={"name": "sms"})
        assert annotation.explicit_name == "sms"

    def test_array_takes_first_element(self) -> None:
        annotation = make_annotation("Bean", arguments={"name": '{"first", "second"}'})
        assert annotation.explicit_name == "first"

    def test_no_arguments(self) -> None:
        assert make_annotation("Component").explicit_name is None

    def test_blank_value_ignored(self) -> None:
        annotation = make_annotation("Component", arguments={"value": ""})
        assert annotation.explicit_name is None

    def test_unrelated_argument_ignored(self) -> None:
        annotation = make_annotation("Bean", arguments={"initMethod": "init"})
        assert annotation.explicit_name is None
