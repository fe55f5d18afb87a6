"""Explicit analysis context shared by the extractors."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from beanlens.domain.model.configuration import ParserConfig
from beanlens.domain.model.enums import AnnotationKind

if TYPE_CHECKING:
    from collections.abc import Mapping

# Simple name -> kind, plus the fully qualified names of the same markers
_CATALOG: dict[AnnotationKind, tuple[str, ...]] = {
    AnnotationKind.COMPONENT: ("org.springframework.stereotype.Component",),
    AnnotationKind.SERVICE: ("org.springframework.stereotype.Service",),
    AnnotationKind.REPOSITORY: ("org.springframework.stereotype.Repository",),
    AnnotationKind.CONTROLLER: ("org.springframework.stereotype.Controller",),
    AnnotationKind.REST_CONTROLLER: (
        "org.springframework.web.bind.annotation.RestController",
    ),
    AnnotationKind.CONFIGURATION: ("org.springframework.context.annotation.Configuration",),
    AnnotationKind.BEAN: ("org.springframework.context.annotation.Bean",),
    AnnotationKind.AUTOWIRED: (
        "org.springframework.beans.factory.annotation.Autowired",
        "javax.inject.Inject",
        "jakarta.inject.Inject",
    ),
    AnnotationKind.QUALIFIER: (
        "org.springframework.beans.factory.annotation.Qualifier",
        "javax.inject.Named",
        "jakarta.inject.Named",
    ),
    AnnotationKind.PRIMARY: ("org.springframework.context.annotation.Primary",),
    AnnotationKind.REQUIRED_ARGS_CONSTRUCTOR: ("lombok.RequiredArgsConstructor",),
    AnnotationKind.ALL_ARGS_CONSTRUCTOR: ("lombok.AllArgsConstructor",),
    AnnotationKind.NON_NULL: (
        "lombok.NonNull",
        "javax.annotation.Nonnull",
        "org.springframework.lang.NonNull",
    ),
}


def _build_catalog(config: ParserConfig) -> dict[str, AnnotationKind]:
    catalog: dict[str, AnnotationKind] = {}
    for kind, qualified_names in _CATALOG.items():
        for qualified in qualified_names:
            catalog[qualified] = kind
            catalog.setdefault(qualified.rsplit(".", 1)[-1], kind)
    for name in config.extra_injection_markers:
        catalog[name] = AnnotationKind.AUTOWIRED
    for name in config.extra_stereotypes:
        catalog[name] = AnnotationKind.COMPONENT
    return catalog


@dataclass(frozen=True, slots=True)
class AnalysisContext:
    """Immutable context built once per host and threaded through parsing.

    Attributes:
        config: Parser configuration
        catalog: Annotation name (simple or qualified) -> kind
    """

    config: ParserConfig
    catalog: Mapping[str, AnnotationKind] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.config is None:
            raise TypeError("config must not be None")
        if not isinstance(self.catalog, MappingProxyType):
            object.__setattr__(self, "catalog", MappingProxyType(dict(self.catalog)))

    @classmethod
    def create(cls, config: ParserConfig | None = None) -> AnalysisContext:
        """Build context with the annotation catalog for config.

        Args:
            config: Parser configuration, defaults if None

        Returns:
            Ready-to-use context
        """
        config = config or ParserConfig()
        return cls(config=config, catalog=_build_catalog(config))

    def classify(self, name: str) -> AnnotationKind:
        """Map annotation name to its kind.

        Qualified names only match their exact known form, so a
        project's own `com.acme.Service` stays OTHER.

        Args:
            name: Annotation name without '@'

        Returns:
            Recognized kind, OTHER if unknown
        """
        return self.catalog.get(name, AnnotationKind.OTHER)


DEFAULT_CONTEXT = AnalysisContext.create()
