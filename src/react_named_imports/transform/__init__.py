"""Namespace-to-named-import transform."""

from react_named_imports.transform.collector import build_member_set, collect_members
from react_named_imports.transform.exceptions import (
    CodemodError,
    EditConflictError,
    SourceParseError,
    TransformError,
    UnsupportedLanguageError,
)
from react_named_imports.transform.imports import synthesize_imports
from react_named_imports.transform.pipeline import transform_file, transform_source
from react_named_imports.transform.references import find_references
from react_named_imports.transform.rewriter import rewrite_references

__all__ = [
    "CodemodError",
    "EditConflictError",
    "SourceParseError",
    "TransformError",
    "UnsupportedLanguageError",
    "build_member_set",
    "collect_members",
    "find_references",
    "rewrite_references",
    "synthesize_imports",
    "transform_file",
    "transform_source",
]
