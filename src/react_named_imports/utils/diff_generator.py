"""Utilities for generating diffs and detecting source style."""

import difflib

from react_named_imports.models.diff_models import FileDiff


def generate_unified_diff(
    file_path: str,
    original_content: str,
    modified_content: str,
) -> str:
    """Generate a git-compatible unified diff.

    Args:
        file_path: Path shown in the diff headers (e.g. "src/app.tsx").
        original_content: File content before the codemod.
        modified_content: File content after the codemod.

    Returns:
        Unified diff string with a/ b/ prefixes. Empty string if no changes.
    """
    if original_content == modified_content:
        return ""

    original_lines = original_content.splitlines(keepends=True)
    modified_lines = modified_content.splitlines(keepends=True)

    diff_gen = difflib.unified_diff(
        original_lines,
        modified_lines,
        fromfile=f"a/{file_path}",
        tofile=f"b/{file_path}",
        lineterm="",
    )

    # Lines carry their own newline from keepends=True; strip before joining
    diff_lines = []
    for line in diff_gen:
        if line.endswith("\n"):
            diff_lines.append(line[:-1])
        else:
            diff_lines.append(line)

    return "\n".join(diff_lines)


def build_file_diff(file_path: str, original_content: str, modified_content: str) -> FileDiff:
    return FileDiff(
        file_path=file_path,
        original_content=original_content,
        modified_content=modified_content,
        diff_text=generate_unified_diff(file_path, original_content, modified_content),
    )


def detect_code_style(source_code: str) -> dict[str, str | bool]:
    """Detect code style conventions from source code.

    Args:
        source_code: The source code to analyse.

    Returns:
        Dict with keys:
            "quotes": "single" or "double"
            "semicolons": True if statements end with ";"
            "newline": "\\r\\n" or "\\n"
    """
    quote_style = "single"
    semicolons = True
    newline = "\r\n" if "\r\n" in source_code else "\n"

    if not source_code:
        return {"quotes": quote_style, "semicolons": semicolons, "newline": newline}

    single_quote_count = source_code.count("'")
    double_quote_count = source_code.count('"')
    if double_quote_count > single_quote_count:
        quote_style = "double"

    # Lines that look like statement ends: skip blanks, comments and block delimiters
    terminated = 0
    unterminated = 0
    for line in source_code.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith(("//", "/*", "*")):
            continue
        if stripped.endswith(";"):
            terminated += 1
        elif not stripped.endswith(("{", "}", "(", "[", ",", ">", "=")):
            unterminated += 1
    if unterminated > terminated:
        semicolons = False

    return {"quotes": quote_style, "semicolons": semicolons, "newline": newline}
