"""Project index: owner of a bean resolver over many files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from beanlens.application.services.parser import JavaFileParser
from beanlens.application.services.resolver import BeanResolver
from beanlens.domain.model.report import IndexReport
from beanlens.infrastructure.extractors.context import AnalysisContext

if TYPE_CHECKING:
    from collections.abc import Iterator

    from beanlens.domain.model.configuration import ParserConfig
    from beanlens.domain.model.injection import InjectionPoint
    from beanlens.domain.model.parse_result import ParseResult


class ProjectIndex:
    """Per-file parse cache feeding one BeanResolver.

    Every mutation ends with a clear-then-repopulate rebuild of the
    resolver from the cached results, in indexing order, so stale
    definitions of removed or re-parsed files never survive.
    """

    def __init__(
        self,
        parser: JavaFileParser | None = None,
        resolver: BeanResolver | None = None,
        config: ParserConfig | None = None,
    ) -> None:
        """Initialize index.

        Args:
            parser: File parser, built from config if None
            resolver: Resolver to own, new one if None
            config: Parser configuration, used when parser is None
        """
        self._parser = parser or JavaFileParser(AnalysisContext.create(config))
        self._resolver = resolver or BeanResolver()
        self._config = self._parser.context.config
        self._results: dict[str, ParseResult] = {}
        self._read_errors: dict[str, str] = {}

    @property
    def resolver(self) -> BeanResolver:
        """Resolver kept in sync with the indexed files."""
        return self._resolver

    @property
    def parse_results(self) -> tuple[ParseResult, ...]:
        """Cached parse results in indexing order."""
        return tuple(self._results.values())

    def __len__(self) -> int:
        return len(self._results)

    def __contains__(self, file_id: object) -> bool:
        return file_id in self._results

    def index_source(self, file_id: str, text: str) -> ParseResult:
        """Parse text as file_id, replacing any earlier result.

        Args:
            file_id: Identifier of the file
            text: Source text

        Returns:
            Fresh parse result
        """
        result = self._store(file_id, text)
        self.rebuild()
        return result

    def index_file(self, path: Path) -> ParseResult | None:
        """Read and index one file.

        Args:
            path: Source file

        Returns:
            Parse result, None if the file could not be read
        """
        result = self._read_and_store(Path(path))
        self.rebuild()
        return result

    def index_directory(self, root: Path) -> int:
        """Index every source file below root.

        Directories named in the config's excluded_dirs are skipped.

        Args:
            root: Directory to scan

        Returns:
            Number of files parsed

        Raises:
            TypeError: If root is None (FAIL-FIRST)
            NotADirectoryError: If root is not a directory
        """
        # FAIL-FIRST: validate required parameters
        if root is None:
            raise TypeError("root must not be None")
        root = Path(root)
        if not root.is_dir():
            raise NotADirectoryError(f"not a directory: {root}")

        count = 0
        for path in self._discover(root):
            if self._read_and_store(path) is not None:
                count += 1
        self.rebuild()
        logger.bind(root=str(root)).info(
            "Indexed {} files, {} beans", count, self._resolver.get_count()
        )
        return count

    def remove_file(self, file_id: str) -> bool:
        """Forget file_id and rebuild.

        Returns:
            True if the file was indexed
        """
        self._read_errors.pop(file_id, None)
        removed = self._results.pop(file_id, None) is not None
        if removed:
            self.rebuild()
        return removed

    def clear(self) -> None:
        """Forget every file and empty the resolver."""
        self._results.clear()
        self._read_errors.clear()
        self._resolver.clear_cache()

    def rebuild(self) -> None:
        """Clear the resolver and re-add every cached bean definition."""
        self._resolver.clear_cache()
        for result in self._results.values():
            self._resolver.add_bean_definitions(result.bean_definitions)

    def injections(self) -> list[InjectionPoint]:
        """Every cached injection point resolved against the current index."""
        return [
            self._resolver.resolve_injection(point)
            for result in self._results.values()
            for point in result.injections
        ]

    def errors(self) -> list[str]:
        """Read failures and parse errors as `file_id: message` lines."""
        messages = [f"{file_id}: {message}" for file_id, message in self._read_errors.items()]
        messages += [
            f"{result.file_id}: {message}"
            for result in self._results.values()
            for message in result.errors
        ]
        return messages

    def report(self) -> IndexReport:
        """Snapshot of the index for reporters."""
        return IndexReport(
            file_count=len(self._results),
            class_count=sum(len(result.classes) for result in self._results.values()),
            beans=tuple(self._resolver.get_all()),
            injections=tuple(self.injections()),
            errors=tuple(self.errors()),
        )

    def _store(self, file_id: str, text: str) -> ParseResult:
        result = self._parser.parse_file(file_id, text)
        self._results.pop(file_id, None)
        self._results[file_id] = result
        self._read_errors.pop(file_id, None)
        return result

    def _read_and_store(self, path: Path) -> ParseResult | None:
        file_id = str(path)
        try:
            text = path.read_text(encoding=self._config.encoding, errors="replace")
        except OSError as exc:
            logger.bind(file_id=file_id).warning("Cannot read source file: {}", exc)
            self._results.pop(file_id, None)
            self._read_errors[file_id] = f"cannot read file: {exc.strerror or exc}"
            return None
        return self._store(file_id, text)

    def _discover(self, root: Path) -> Iterator[Path]:
        excluded = self._config.excluded_dirs
        suffixes = self._config.source_suffixes
        for directory, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(d for d in dirnames if d not in excluded)
            for filename in sorted(filenames):
                if filename.endswith(suffixes):
                    yield Path(directory) / filename
