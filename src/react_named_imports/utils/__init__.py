"""Utilities for the codemod."""

from react_named_imports.utils.diff_generator import (
    build_file_diff,
    detect_code_style,
    generate_unified_diff,
)

__all__ = [
    "build_file_diff",
    "detect_code_style",
    "generate_unified_diff",
]
