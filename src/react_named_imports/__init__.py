"""Rewrite ``React.X`` references into named imports from ``react``."""

from react_named_imports.models import MemberSet, TransformOptions, TransformResult
from react_named_imports.transform import (
    CodemodError,
    SourceParseError,
    collect_members,
    transform_file,
    transform_source,
)

__version__ = "0.1.0"

__all__ = [
    "CodemodError",
    "MemberSet",
    "SourceParseError",
    "TransformOptions",
    "TransformResult",
    "collect_members",
    "transform_file",
    "transform_source",
]
