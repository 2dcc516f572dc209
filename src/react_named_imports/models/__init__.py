"""Data models for the codemod."""

from react_named_imports.models.diff_models import FileDiff
from react_named_imports.models.report_models import (
    FileResult,
    FileStatus,
    RunReport,
    TransformResult,
)
from react_named_imports.models.schemas import (
    ImportStatement,
    MemberSet,
    QualifiedReference,
    ReferenceKind,
    TextEdit,
    TransformOptions,
)

__all__ = [
    "FileDiff",
    "FileResult",
    "FileStatus",
    "ImportStatement",
    "MemberSet",
    "QualifiedReference",
    "ReferenceKind",
    "RunReport",
    "TextEdit",
    "TransformOptions",
    "TransformResult",
]
