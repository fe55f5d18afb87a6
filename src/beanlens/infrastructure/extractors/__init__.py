"""Declaration extractors over Java source lines."""

from beanlens.infrastructure.extractors.class_extractor import ClassExtractor
from beanlens.infrastructure.extractors.constructor_extractor import ConstructorExtractor
from beanlens.infrastructure.extractors.context import AnalysisContext
from beanlens.infrastructure.extractors.field_extractor import FieldExtractor
from beanlens.infrastructure.extractors.method_extractor import MethodExtractor
from beanlens.infrastructure.extractors.source import SourceText

__all__ = [
    "AnalysisContext",
    "ClassExtractor",
    "ConstructorExtractor",
    "FieldExtractor",
    "MethodExtractor",
    "SourceText",
]
