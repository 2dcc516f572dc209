"""Exceptions for batch runner operations."""


class RunnerError(Exception):
    """Base exception for all batch runner operations."""


class PathNotFoundError(RunnerError):
    """Raised when a path given to the runner does not exist."""
