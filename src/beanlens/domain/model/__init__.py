"""Domain model value objects."""

from beanlens.domain.model.annotation import Annotation
from beanlens.domain.model.bean import BeanDefinition
from beanlens.domain.model.class_ import ClassRecord
from beanlens.domain.model.configuration import ParserConfig
from beanlens.domain.model.constructor import Constructor
from beanlens.domain.model.enums import (
    AnnotationKind,
    DefinitionKind,
    InjectionKind,
    MemberKind,
    Visibility,
)
from beanlens.domain.model.field import Field
from beanlens.domain.model.injection import InjectionPoint
from beanlens.domain.model.location import Position, Range
from beanlens.domain.model.method import Method, is_setter
from beanlens.domain.model.parameter import Parameter
from beanlens.domain.model.parse_result import ParseResult
from beanlens.domain.model.report import IndexReport
from beanlens.domain.model.resolution import ResolutionResult

__all__ = [
    "Annotation",
    "AnnotationKind",
    "BeanDefinition",
    "ClassRecord",
    "Constructor",
    "DefinitionKind",
    "Field",
    "IndexReport",
    "InjectionKind",
    "InjectionPoint",
    "MemberKind",
    "Method",
    "Parameter",
    "ParseResult",
    "ParserConfig",
    "Position",
    "Range",
    "ResolutionResult",
    "Visibility",
    "is_setter",
]
