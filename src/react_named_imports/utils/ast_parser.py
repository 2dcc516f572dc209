"""AST parser utility for JavaScript/TypeScript using tree-sitter."""

from pathlib import Path

import tree_sitter_javascript as tsjs
import tree_sitter_typescript as tsts
from tree_sitter import Language, Node, Parser, Tree

# Initialize language objects
JS_LANGUAGE = Language(tsjs.language())
TS_LANGUAGE = Language(tsts.language_typescript())
TSX_LANGUAGE = Language(tsts.language_tsx())

LANGUAGES = {
    "javascript": JS_LANGUAGE,
    "typescript": TS_LANGUAGE,
    "tsx": TSX_LANGUAGE,
}

EXTENSION_LANGUAGES = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".ts": "typescript",
    ".tsx": "tsx",
}

SUPPORTED_EXTENSIONS = frozenset(EXTENSION_LANGUAGES)


def get_language_for_file(file_path: str) -> str:
    """Map file extension to tree-sitter language name.

    Args:
        file_path: Path to the file

    Returns:
        Language name ("javascript", "typescript", "tsx")

    Raises:
        ValueError: If file extension is not supported
    """
    ext = Path(file_path).suffix
    if ext not in EXTENSION_LANGUAGES:
        raise ValueError(f"Unsupported file extension: {ext}")
    return EXTENSION_LANGUAGES[ext]


def get_language(language: str) -> Language:
    """Return the tree-sitter Language object for a language name.

    Raises:
        ValueError: If the language name is unknown
    """
    if language not in LANGUAGES:
        raise ValueError(f"Unsupported language: {language}")
    return LANGUAGES[language]


def supports_types(language: str) -> bool:
    """Return True if the grammar has TypeScript type syntax."""
    return language in ("typescript", "tsx")


def get_parser(language: str) -> Parser:
    """Return a tree-sitter Parser for the given language name.

    Args:
        language: Language name ("javascript", "typescript", "tsx")

    Returns:
        Configured Parser instance
    """
    parser = Parser()
    parser.language = get_language(language)
    return parser


def parse_source(source: bytes, language: str) -> Tree:
    """Parse source bytes with the grammar for ``language``."""
    return get_parser(language).parse(source)


def find_first_error(node: Node) -> Node | None:
    """Return the first ERROR or MISSING node in document order, if any."""
    if node.is_error or node.is_missing:
        return node
    if not node.has_error:
        return None
    for child in node.children:
        found = find_first_error(child)
        if found is not None:
            return found
    return node


def node_text(node: Node) -> str:
    text = node.text
    return text.decode("utf-8") if text else ""


def string_value(node: Node) -> str:
    """Return the contents of a string literal node without its quotes."""
    # Remove quotes from string literal
    return node_text(node).strip("'\"")
