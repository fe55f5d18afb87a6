"""Injection point detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from beanlens.domain.model.enums import AnnotationKind, InjectionKind
from beanlens.domain.model.injection import InjectionPoint
from beanlens.infrastructure.extractors.context import DEFAULT_CONTEXT

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from beanlens.domain.model.class_ import ClassRecord
    from beanlens.domain.model.field import Field
    from beanlens.domain.model.parameter import Parameter
    from beanlens.infrastructure.extractors.context import AnalysisContext


def _from_parameter(
    parameter: Parameter,
    kind: InjectionKind,
    record: ClassRecord,
    member: str,
) -> InjectionPoint:
    return InjectionPoint(
        target_type=parameter.type,
        kind=kind,
        target_name=parameter.name,
        position=parameter.position,
        range=parameter.range,
        file_id=record.file_id,
        owner=record.fully_qualified_name,
        member=member,
    )


def _from_field(field: Field, kind: InjectionKind, record: ClassRecord) -> InjectionPoint:
    return InjectionPoint(
        target_type=field.type,
        kind=kind,
        target_name=field.name,
        position=field.position,
        range=field.range,
        file_id=record.file_id,
        owner=record.fully_qualified_name,
        member=record.name if kind is InjectionKind.LOMBOK_CONSTRUCTOR else None,
    )


class InjectionDetector:
    """Finds the dependencies a class expects the container to inject.

    Each mechanism is detected independently per class; a failure in
    one is logged and does not hide the others.
    """

    def __init__(self, context: AnalysisContext = DEFAULT_CONTEXT) -> None:
        """Initialize detector.

        Args:
            context: Analysis context whose config toggles optional mechanisms
        """
        self._config = context.config

    def detect(self, classes: Iterable[ClassRecord]) -> tuple[InjectionPoint, ...]:
        """Injection points of every class, class by class.

        Args:
            classes: Class records of one file

        Returns:
            Injection points: fields, constructor, setters, Lombok, @Bean parameters

        Raises:
            TypeError: If classes is None (FAIL-FIRST)
        """
        # FAIL-FIRST: validate required parameters
        if classes is None:
            raise TypeError("classes must not be None")

        steps: list[Callable[[ClassRecord], list[InjectionPoint]]] = [
            self.field_injections,
            self.constructor_injections,
            self.setter_injections,
        ]
        if self._config.detect_lombok:
            steps.append(self.lombok_injections)
        if self._config.detect_bean_method_parameters:
            steps.append(self.bean_method_injections)

        points: list[InjectionPoint] = []
        for record in classes:
            for step in steps:
                try:
                    points.extend(step(record))
                except Exception as exc:
                    logger.bind(
                        file_id=record.file_id,
                        line=record.position.line + 1,
                        step=step.__name__,
                    ).warning("Injection detection failed for {}: {}", record.name, exc)
        return tuple(points)

    def field_injections(self, record: ClassRecord) -> list[InjectionPoint]:
        """Fields carrying the injection marker."""
        return [
            _from_field(field, InjectionKind.FIELD, record)
            for field in record.fields
            if field.has_injection_marker
        ]

    def constructor_injections(self, record: ClassRecord) -> list[InjectionPoint]:
        """Parameters of the constructor the container calls.

        A lone constructor with parameters is injected without a marker.
        Otherwise the first marked constructor is the one called.
        """
        constructors = record.constructors
        if (
            self._config.implicit_constructor_injection
            and len(constructors) == 1
            and constructors[0].parameters
        ):
            chosen = constructors[0]
        else:
            chosen = next((c for c in constructors if c.has_injection_marker), None)
        if chosen is None:
            return []
        return [
            _from_parameter(parameter, InjectionKind.CONSTRUCTOR, record, record.name)
            for parameter in chosen.parameters
        ]

    def setter_injections(self, record: ClassRecord) -> list[InjectionPoint]:
        """Parameters of marked setter methods."""
        return [
            _from_parameter(parameter, InjectionKind.SETTER, record, method.name)
            for method in record.methods
            if method.is_setter and method.has_injection_marker
            for parameter in method.parameters
        ]

    def lombok_injections(self, record: ClassRecord) -> list[InjectionPoint]:
        """Fields that become parameters of a Lombok-generated constructor.

        @RequiredArgsConstructor: non-static final fields without an
        initializer, then non-final @NonNull fields.
        @AllArgsConstructor: every non-static field.
        Classes with an explicit constructor are left to
        constructor_injections.
        """
        if record.constructors:
            return []
        fields: list[Field] = []
        if record.has_annotation(AnnotationKind.ALL_ARGS_CONSTRUCTOR):
            fields = [f for f in record.fields if not f.is_static]
        elif record.has_annotation(AnnotationKind.REQUIRED_ARGS_CONSTRUCTOR):
            fields = [
                f for f in record.fields if f.is_final and not f.is_static and not f.has_initializer
            ]
            fields += [
                f
                for f in record.fields
                if not f.is_final and not f.is_static and f.has_annotation(AnnotationKind.NON_NULL)
            ]
        return [_from_field(field, InjectionKind.LOMBOK_CONSTRUCTOR, record) for field in fields]

    def bean_method_injections(self, record: ClassRecord) -> list[InjectionPoint]:
        """Parameters of @Bean factory methods."""
        return [
            _from_parameter(parameter, InjectionKind.BEAN_METHOD, record, method.name)
            for method in record.methods
            if method.is_bean_factory
            for parameter in method.parameters
        ]
