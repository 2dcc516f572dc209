"""Three-phase driver: collect, synthesize imports, rewrite references."""

import logging
from pathlib import Path

from tree_sitter import Tree

from react_named_imports.models.report_models import TransformResult
from react_named_imports.models.schemas import TransformOptions
from react_named_imports.transform.collector import build_member_set
from react_named_imports.transform.edits import apply_edits
from react_named_imports.transform.exceptions import (
    SourceParseError,
    TransformError,
    UnsupportedLanguageError,
)
from react_named_imports.transform.imports import synthesize_imports
from react_named_imports.transform.references import find_references
from react_named_imports.transform.rewriter import rewrite_references
from react_named_imports.utils.ast_parser import (
    find_first_error,
    get_language_for_file,
    parse_source,
)

logger = logging.getLogger(__name__)


def _parse_checked(source: bytes, language: str, file_path: str) -> Tree:
    try:
        tree = parse_source(source, language)
    except ValueError as e:
        raise UnsupportedLanguageError(str(e)) from e

    if tree.root_node.has_error:
        error_node = find_first_error(tree.root_node)
        row, column = error_node.start_point if error_node is not None else (0, 0)
        raise SourceParseError(
            f"{file_path}:{row + 1}:{column + 1}: syntax error while parsing as {language}",
            file_path=file_path,
            line=row + 1,
            column=column + 1,
        )
    return tree


def transform_source(
    source: str,
    language: str = "tsx",
    options: TransformOptions | None = None,
    file_path: str = "<source>",
) -> TransformResult:
    """Rewrite ``React.X`` references in one unit into named imports.

    Args:
        source: Source text of the unit
        language: "javascript", "typescript" or "tsx"
        options: Namespace, module and import style options
        file_path: Name used in log and error messages

    Returns:
        TransformResult; ``output`` equals ``source`` when nothing matched

    Raises:
        SourceParseError: If the source has syntax errors
        TransformError: If the rewritten output fails to parse
    """
    options = options or TransformOptions()
    source_bytes = source.encode("utf-8")
    tree = _parse_checked(source_bytes, language, file_path)

    references = find_references(tree, language, options.namespace)
    members = build_member_set(references)
    logger.debug(
        "%s: %d value members, %d type members from %d references",
        file_path, len(members.value_members), len(members.type_members), len(references),
    )

    import_edits, removed = synthesize_imports(tree, source_bytes, members, options)
    reference_edits = rewrite_references(references, members)
    edits = import_edits + reference_edits

    if not edits:
        return TransformResult(source=source, output=source, members=members)

    output_bytes = apply_edits(source_bytes, edits)
    if parse_source(output_bytes, language).root_node.has_error:
        raise TransformError(f"{file_path}: rewritten source no longer parses as {language}")

    return TransformResult(
        source=source,
        output=output_bytes.decode("utf-8"),
        members=members,
        removed_imports=removed,
        rewritten=len(reference_edits),
    )


def transform_file(
    file_path: str,
    options: TransformOptions | None = None,
    language: str | None = None,
) -> TransformResult:
    """Read a file and transform it; the file itself is not written.

    Raises:
        FileNotFoundError: If the file does not exist
        UnsupportedLanguageError: If the extension has no grammar
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    if language is None:
        try:
            language = get_language_for_file(file_path)
        except ValueError as e:
            raise UnsupportedLanguageError(str(e)) from e
    # bytes, so CRLF line endings survive untouched
    source = path.read_bytes().decode("utf-8")
    return transform_source(source, language, options, file_path=file_path)
