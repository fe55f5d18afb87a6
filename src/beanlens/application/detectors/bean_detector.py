"""Bean definition builder."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from beanlens.domain.model.bean import BeanDefinition
from beanlens.domain.model.enums import AnnotationKind, DefinitionKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from beanlens.domain.model.class_ import ClassRecord
    from beanlens.domain.model.method import Method

# Return type of a factory method whose type could not be recovered
DEFAULT_FACTORY_TYPE = "Object"


def generate_bean_name(name: str) -> str:
    """Default bean name: first character lower-cased.

    Args:
        name: Class or method name

    Returns:
        Bean name

    Raises:
        ValueError: If name is empty
    """
    if not name:
        raise ValueError("name must be non-empty string")
    return name[0].lower() + name[1:]


class BeanDetector:
    """Turns class and method annotation evidence into bean definitions.

    Stateless detector - no state between detect() calls.
    """

    def detect(self, classes: Iterable[ClassRecord]) -> tuple[BeanDefinition, ...]:
        """Build bean definitions for classes of one file.

        One class-level definition per stereotype class, one
        method-level definition per @Bean method whatever the
        enclosing class is.

        Args:
            classes: Class records of one file

        Returns:
            Definitions in source order, class bean before its factory methods

        Raises:
            TypeError: If classes is None (FAIL-FIRST)
        """
        # FAIL-FIRST: validate required parameters
        if classes is None:
            raise TypeError("classes must not be None")

        beans: list[BeanDefinition] = []
        for record in classes:
            class_bean = self.from_class(record)
            if class_bean is not None:
                beans.append(class_bean)
            beans.extend(
                self.from_method(method, record) for method in record.methods if method.is_bean_factory
            )
        logger.bind(count=len(beans)).debug("Detected {} bean definitions", len(beans))
        return tuple(beans)

    def from_class(self, record: ClassRecord) -> BeanDefinition | None:
        """Class-level definition, None when the class has no stereotype."""
        stereotype = record.stereotype
        if stereotype is None:
            return None
        return BeanDefinition(
            name=stereotype.explicit_name or generate_bean_name(record.name),
            type=record.name,
            implementation_class=record.fully_qualified_name,
            file_id=record.file_id,
            position=record.position,
            definition_kind=DefinitionKind.CLASS,
            annotation_kind=stereotype.kind,
            interfaces=record.interfaces,
        )

    def from_method(self, method: Method, record: ClassRecord) -> BeanDefinition:
        """Method-level definition for a @Bean factory method.

        Declared type and implementation class are the return type;
        factory beans match by return type only.
        """
        annotation = method.find_annotation(AnnotationKind.BEAN)
        explicit = annotation.explicit_name if annotation is not None else None
        return_type = method.return_type or DEFAULT_FACTORY_TYPE
        return BeanDefinition(
            name=explicit or generate_bean_name(method.name),
            type=return_type,
            implementation_class=return_type,
            file_id=record.file_id,
            position=method.position,
            definition_kind=DefinitionKind.METHOD,
            annotation_kind=AnnotationKind.BEAN,
        )
