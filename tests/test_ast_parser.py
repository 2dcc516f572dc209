"""
Unit tests for AST Parser utility module.

Tests the tree-sitter helpers in react_named_imports.utils.ast_parser.
"""

import pytest

from react_named_imports.utils.ast_parser import (
    find_first_error,
    get_language_for_file,
    get_parser,
    node_text,
    parse_source,
    string_value,
    supports_types,
)


class TestGetLanguageForFile:
    """Test language detection from file extensions."""

    def test_get_language_for_file_js(self):
        """JavaScript files should map to 'javascript' language."""
        assert get_language_for_file("sample.js") == "javascript"

    def test_get_language_for_file_ts(self):
        """TypeScript files should map to 'typescript' language."""
        assert get_language_for_file("sample.ts") == "typescript"

    def test_get_language_for_file_tsx(self):
        """TSX files should map to 'tsx' language."""
        assert get_language_for_file("sample.tsx") == "tsx"

    def test_get_language_for_file_jsx(self):
        """JSX files should map to 'javascript' language."""
        assert get_language_for_file("src/App.jsx") == "javascript"

    def test_get_language_for_file_unsupported(self):
        """Unsupported file extensions should raise ValueError."""
        with pytest.raises(ValueError):
            get_language_for_file("sample.py")


class TestParser:
    """Test parser construction and parsing."""

    def test_get_parser_unknown_language(self):
        with pytest.raises(ValueError):
            get_parser("cobol")

    def test_supports_types(self):
        assert supports_types("typescript") is True
        assert supports_types("tsx") is True
        assert supports_types("javascript") is False

    def test_parse_source_tsx(self, read_fixture):
        """TSX source should parse into a program without errors."""
        tree = parse_source(read_fixture("scenario_c.tsx").encode(), "tsx")
        assert tree.root_node.type == "program"
        assert tree.root_node.has_error is False
        assert find_first_error(tree.root_node) is None

    def test_parse_source_reports_first_error(self, read_fixture):
        """Broken source has an ERROR or MISSING node."""
        tree = parse_source(read_fixture("broken.tsx").encode(), "tsx")
        assert tree.root_node.has_error is True
        error = find_first_error(tree.root_node)
        assert error is not None
        assert error.is_error or error.is_missing or error.has_error

    def test_string_value_strips_quotes(self):
        tree = parse_source(b"import x from \"react\";\n", "javascript")
        source = tree.root_node.named_children[0].child_by_field_name("source")
        assert node_text(source) == '"react"'
        assert string_value(source) == "react"
