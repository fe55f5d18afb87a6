"""Parser configuration."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_EXCLUDED_DIRS = frozenset(
    {
        ".git",
        ".gradle",
        ".idea",
        ".mvn",
        ".svn",
        ".vscode",
        "bin",
        "build",
        "node_modules",
        "out",
        "target",
    }
)


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Configuration for parsing, detection and indexing.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        extra_injection_markers: Additional simple names treated as @Autowired
        extra_stereotypes: Additional simple names treated as @Component
        implicit_constructor_injection: A lone constructor with parameters is injected unmarked
        detect_lombok: Emit injection points for Lombok-generated constructors
        detect_bean_method_parameters: Emit injection points for @Bean method parameters
        source_suffixes: File suffixes picked up by directory indexing
        excluded_dirs: Directory names skipped by directory indexing
        encoding: Encoding used to read source files
        snippet_length: Max characters of a declaration quoted in log records
    """

    extra_injection_markers: frozenset[str] = frozenset()
    extra_stereotypes: frozenset[str] = frozenset()
    implicit_constructor_injection: bool = True
    detect_lombok: bool = True
    detect_bean_method_parameters: bool = True
    source_suffixes: tuple[str, ...] = (".java",)
    excluded_dirs: frozenset[str] = DEFAULT_EXCLUDED_DIRS
    encoding: str = "utf-8"
    snippet_length: int = 80

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name in self.extra_injection_markers | self.extra_stereotypes:
            if not name or not name.isidentifier():
                raise ValueError(f"annotation name must be a simple identifier, got {name!r}")
        overlap = self.extra_injection_markers & self.extra_stereotypes
        if overlap:
            raise ValueError(f"names cannot be both marker and stereotype: {sorted(overlap)}")
        if not self.source_suffixes:
            raise ValueError("source_suffixes must not be empty")
        for suffix in self.source_suffixes:
            if not suffix.startswith("."):
                raise ValueError(f"suffix must start with '.', got {suffix!r}")
        if not self.encoding:
            raise ValueError("encoding must be non-empty string")
        if self.snippet_length <= 0:
            raise ValueError(f"snippet_length must be > 0, got {self.snippet_length}")
