"""Batch runner: apply the transform to every source file under a set of paths."""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from pathlib import Path

from react_named_imports.config import DEFAULT_EXCLUDE_PATTERNS, DEFAULT_EXTENSIONS
from react_named_imports.models.report_models import FileResult, FileStatus, RunReport
from react_named_imports.models.schemas import TransformOptions
from react_named_imports.runner.exceptions import PathNotFoundError
from react_named_imports.transform.exceptions import CodemodError, UnsupportedLanguageError
from react_named_imports.transform.pipeline import transform_file
from react_named_imports.utils.diff_generator import build_file_diff

logger = logging.getLogger(__name__)


class BatchRunner:
    """Runs the codemod over files and directories, one independent unit per file."""

    def __init__(
        self,
        options: TransformOptions | None = None,
        extensions: list[str] | None = None,
        exclude_patterns: list[str] | None = None,
        workers: int = 1,
        dry_run: bool = False,
        print_output: bool = False,
        show_diff: bool = False,
    ) -> None:
        """Initialize the runner.

        Args:
            options: Options forwarded to every transform call
            extensions: File suffixes picked up when walking directories
            exclude_patterns: Directory/file names skipped while walking
            workers: Number of units processed concurrently
            dry_run: Never write files
            print_output: Keep the transformed source on each result
            show_diff: Attach a unified diff to each modified result
        """
        self.options = options or TransformOptions()
        self.extensions = set(extensions or DEFAULT_EXTENSIONS)
        self.exclude_patterns = list(exclude_patterns or DEFAULT_EXCLUDE_PATTERNS)
        self.workers = max(1, workers)
        self.dry_run = dry_run
        self.print_output = print_output
        self.show_diff = show_diff

    def run(self, paths: list[str]) -> RunReport:
        """Transform every file reachable from ``paths``.

        Args:
            paths: Files and/or directories

        Returns:
            RunReport with one FileResult per discovered file, in discovery order

        Raises:
            PathNotFoundError: If any path does not exist
        """
        report = RunReport(dry_run=self.dry_run)
        files = self.discover(paths)

        if self.workers > 1 and len(files) > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                report.files = list(pool.map(self.process_file, files))
        else:
            report.files = [self.process_file(file_path) for file_path in files]

        report.finished_at = datetime.now()
        return report

    def discover(self, paths: list[str]) -> list[str]:
        """Expand paths into a de-duplicated list of files.

        Files named explicitly are always returned (an unsupported extension is
        reported as skipped later); directories are walked recursively.
        """
        discovered: dict[str, None] = {}
        for raw_path in paths:
            path = Path(raw_path)
            if not path.exists():
                raise PathNotFoundError(f"Path not found: {raw_path}")
            if path.is_file():
                discovered.setdefault(str(path), None)
                continue
            for file_path in self._walk(path):
                discovered.setdefault(file_path, None)
        return list(discovered)

    def _walk(self, root: Path) -> list[str]:
        file_paths = []
        for path in sorted(root.rglob("*")):
            # Skip symlinks to prevent path traversal
            if path.is_symlink():
                continue

            # Match on path components below the root, not substrings
            relative_parts = path.relative_to(root).parts
            if any(pattern in relative_parts for pattern in self.exclude_patterns):
                continue

            if path.is_file() and path.suffix in self.extensions:
                file_paths.append(str(path))
        return file_paths

    def process_file(self, file_path: str) -> FileResult:
        """Transform one file and write it back unless this is a dry run.

        Failures are captured on the result; the file is left untouched.
        """
        try:
            result = transform_file(file_path, self.options)
        except UnsupportedLanguageError as e:
            logger.debug("%s: skipped (%s)", file_path, e)
            return FileResult(file_path=file_path, status=FileStatus.SKIPPED, error=str(e))
        except (CodemodError, OSError, UnicodeDecodeError) as e:
            logger.warning("%s: %s", file_path, e)
            return FileResult(file_path=file_path, status=FileStatus.ERROR, error=str(e))

        file_result = FileResult(
            file_path=file_path,
            status=FileStatus.OK if result.changed else FileStatus.UNMODIFIED,
            rewritten=result.rewritten,
            value_members=list(result.members.value_members),
            type_members=list(result.members.type_members),
        )
        if self.print_output:
            file_result.output = result.output
        if self.show_diff and result.changed:
            file_result.diff = build_file_diff(file_path, result.source, result.output)

        if result.changed and not self.dry_run:
            try:
                Path(file_path).write_bytes(result.output.encode("utf-8"))
            except OSError as e:
                logger.warning("%s: write failed: %s", file_path, e)
                file_result.status = FileStatus.ERROR
                file_result.error = f"Failed to write: {e}"
                return file_result

        logger.debug("%s: %s", file_path, file_result.status.value)
        return file_result
