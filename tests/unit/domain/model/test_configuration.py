"""Tests for domain/model/configuration.py."""

import pytest

from beanlens.domain.model.configuration import DEFAULT_EXCLUDED_DIRS, ParserConfig


class TestParserConfigDefaults:
    """Tests for default ParserConfig."""

    def test_defaults(self) -> None:
        config = ParserConfig()
        assert config.implicit_constructor_injection is True
        assert config.detect_lombok is True
        assert config.detect_bean_method_parameters is True
        assert config.source_suffixes == (".java",)
        assert config.excluded_dirs == DEFAULT_EXCLUDED_DIRS
        assert config.encoding == "utf-8"

    def test_build_dirs_excluded(self) -> None:
        assert {"target", "build", ".git"} <= DEFAULT_EXCLUDED_DIRS

    def test_is_frozen(self) -> None:
        config = ParserConfig()
        with pytest.raises(AttributeError):
            config.detect_lombok = False  # type: ignore[misc]


class TestParserConfigFailFirst:
    """Tests for FAIL-FIRST validation in ParserConfig."""

    def test_qualified_marker_raises(self) -> None:
        with pytest.raises(ValueError, match="simple identifier"):
            ParserConfig(extra_injection_markers=frozenset({"com.acme.Wire"}))

    def test_empty_stereotype_raises(self) -> None:
        with pytest.raises(ValueError, match="simple identifier"):
            ParserConfig(extra_stereotypes=frozenset({""}))

    def test_overlap_raises(self) -> None:
        with pytest.raises(ValueError, match="both marker and stereotype"):
            ParserConfig(
                extra_injection_markers=frozenset({"Wire"}),
                extra_stereotypes=frozenset({"Wire"}),
            )

    def test_empty_suffixes_raises(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            ParserConfig(source_suffixes=())

    def test_suffix_without_dot_raises(self) -> None:
        with pytest.raises(ValueError, match="must start with"):
            ParserConfig(source_suffixes=("java",))

    def test_empty_encoding_raises(self) -> None:
        with pytest.raises(ValueError, match="encoding"):
            ParserConfig(encoding="")

    def test_zero_snippet_length_raises(self) -> None:
        with pytest.raises(ValueError, match="snippet_length"):
            ParserConfig(snippet_length=0)
