"""Java file parser service.

Single entry point turning one file's text into a ParseResult.
"""

from __future__ import annotations

from loguru import logger

from beanlens.application.detectors.bean_detector import BeanDetector
from beanlens.application.detectors.injection_detector import InjectionDetector
from beanlens.domain.exceptions.parsing import ParsingError
from beanlens.domain.model.parse_result import ParseResult
from beanlens.infrastructure.extractors.class_extractor import ClassExtractor
from beanlens.infrastructure.extractors.context import AnalysisContext
from beanlens.infrastructure.extractors.source import SourceText


class JavaFileParser:
    """Parses Java source files into classes, beans and injection points.

    Holds no per-file state: the same parser serves any number of
    files, and records are rebuilt on every call.
    """

    def __init__(self, context: AnalysisContext | None = None) -> None:
        """Initialize parser.

        Args:
            context: Analysis context built once by the host, defaults if None
        """
        self._context = context or AnalysisContext.create()
        self._classes = ClassExtractor()
        self._beans = BeanDetector()
        self._injections = InjectionDetector(self._context)

    @property
    def context(self) -> AnalysisContext:
        """Analysis context in use."""
        return self._context

    def parse_file(self, file_id: str, text: str) -> ParseResult:
        """Parse one file.

        Malformed source never raises: problems affecting the whole file
        are reported in ParseResult.errors, problems with one
        declaration drop that declaration.

        Args:
            file_id: Opaque identifier echoed into every record
            text: Complete decoded source text, "" is valid

        Returns:
            Best-effort ParseResult

        Raises:
            TypeError: If file_id or text is None, or text is not a str (FAIL-FIRST)
        """
        # FAIL-FIRST: validate required parameters
        if file_id is None:
            raise TypeError("file_id must not be None")
        if text is None:
            raise TypeError("text must not be None")
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")

        if not text:
            return ParseResult.empty(file_id)

        log = logger.bind(file_id=file_id)
        errors: list[str] = []
        classes = ()
        beans = ()
        injections = ()
        try:
            source = SourceText.from_text(file_id, text)
            if not source.is_balanced:
                error = ParsingError(
                    file_id,
                    f"unbalanced braces (final depth {source.final_depth}, "
                    f"lowest depth {source.min_depth})",
                )
                log.warning("{}", error)
                errors.append(str(error))
            classes = self._classes.extract(source, self._context)
            beans = self._beans.detect(classes)
            injections = self._injections.detect(classes)
        except Exception as exc:
            error = ParsingError(file_id, str(exc) or type(exc).__name__)
            log.opt(exception=exc).error("Parse failed: {}", error.reason)
            errors.append(str(error))

        log.debug(
            "Parsed {} classes, {} beans, {} injection points",
            len(classes),
            len(beans),
            len(injections),
        )
        return ParseResult(
            file_id=file_id,
            classes=classes,
            bean_definitions=beans,
            injections=injections,
            errors=tuple(errors),
        )

