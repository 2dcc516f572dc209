"""Exceptions for codemod transform operations."""


class CodemodError(Exception):
    """Base exception for all transform operations."""


class UnsupportedLanguageError(CodemodError):
    """Raised when a unit's language or file extension has no grammar."""


class SourceParseError(CodemodError):
    """Raised when the parser reports a syntax error in the source unit."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message)
        self.file_path = file_path
        self.line = line
        self.column = column


class EditConflictError(CodemodError):
    """Raised when two text edits for the same unit overlap."""


class TransformError(CodemodError):
    """Raised when a unit cannot be rewritten safely or no longer parses afterwards."""
