"""Tests for treesitter grammar and extension mappings."""

import pytest

from tsdocs_core.treesitter.config import (
    DEFAULT_LANGUAGE,
    EXTENSION_TO_LANGUAGE,
    LANGUAGE_EXTENSIONS,
    get_extensions_by_language,
    get_language_by_extension,
    is_supported_extension,
    is_supported_language,
)


class TestMappings:
    """Tests for the static mappings."""

    def test_default_language(self):
        """Test the default grammar is plain TypeScript."""
        assert DEFAULT_LANGUAGE == "typescript"
        assert DEFAULT_LANGUAGE in LANGUAGE_EXTENSIONS

    def test_reverse_mapping_covers_all_extensions(self):
        """Test every extension maps back to its grammar."""
        for language, extensions in LANGUAGE_EXTENSIONS.items():
            for extension in extensions:
                assert EXTENSION_TO_LANGUAGE[extension] == language

    def test_no_javascript_extensions(self):
        """Test plain JavaScript files are not claimed."""
        assert ".js" not in EXTENSION_TO_LANGUAGE
        assert ".jsx" not in EXTENSION_TO_LANGUAGE


class TestGetLanguageByExtension:
    """Tests for get_language_by_extension."""

    @pytest.mark.parametrize(
        "extension, language",
        [
            (".ts", "typescript"),
            ("ts", "typescript"),
            (".mts", "typescript"),
            (".cts", "typescript"),
            (".tsx", "tsx"),
            (".TS", "typescript"),
        ],
    )
    def test_known_extensions(self, extension, language):
        """Test known extensions with and without a dot, any case."""
        assert get_language_by_extension(extension) == language

    def test_unknown_extension(self):
        """Test unknown extensions return None."""
        assert get_language_by_extension(".py") is None


class TestHelpers:
    """Tests for the boolean helpers."""

    def test_get_extensions_by_language(self):
        """Test extension lookup by grammar."""
        assert get_extensions_by_language("tsx") == (".tsx",)
        assert get_extensions_by_language("cobol") == ()

    def test_is_supported_language(self):
        """Test grammar support check."""
        assert is_supported_language("typescript")
        assert is_supported_language("tsx")
        assert not is_supported_language("python")

    def test_is_supported_extension(self):
        """Test extension support check."""
        assert is_supported_extension(".mts")
        assert not is_supported_extension("js")
