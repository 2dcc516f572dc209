"""Batch runner over files and directories."""

from react_named_imports.runner.batch_runner import BatchRunner
from react_named_imports.runner.exceptions import PathNotFoundError, RunnerError

__all__ = [
    "BatchRunner",
    "PathNotFoundError",
    "RunnerError",
]
