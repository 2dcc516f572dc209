"""
Integration tests for the batch runner.

Runs the codemod over a copy of the sample project, covering:
- File discovery and exclusion
- Dry run versus write mode
- Per-unit error isolation
- Concurrent processing
"""

from pathlib import Path

import pytest

from react_named_imports.models import FileStatus, RunReport
from react_named_imports.runner import BatchRunner, PathNotFoundError


def _by_name(report: RunReport) -> dict[str, FileStatus]:
    return {Path(f.file_path).name: f.status for f in report.files}


class TestDiscovery:
    def test_discovers_supported_files(self, project_dir):
        files = BatchRunner().discover([str(project_dir)])
        names = sorted(Path(f).name for f in files)
        assert names == ["Broken.tsx", "Counter.tsx", "Plain.tsx", "types.ts"]

    def test_excludes_node_modules(self, project_dir):
        files = BatchRunner().discover([str(project_dir)])
        assert not any("node_modules" in Path(f).parts for f in files)

    def test_custom_extensions(self, project_dir):
        files = BatchRunner(extensions=[".ts"]).discover([str(project_dir)])
        assert [Path(f).name for f in files] == ["types.ts"]

    def test_extra_exclude_pattern(self, project_dir):
        runner = BatchRunner(exclude_patterns=["node_modules", "components"])
        names = sorted(Path(f).name for f in runner.discover([str(project_dir)]))
        assert names == ["Broken.tsx", "types.ts"]

    def test_explicit_file_and_dedupe(self, project_dir):
        counter = project_dir / "src" / "components" / "Counter.tsx"
        files = BatchRunner().discover([str(counter), str(counter)])
        assert files == [str(counter)]

    def test_missing_path_raises(self, tmp_path):
        with pytest.raises(PathNotFoundError):
            BatchRunner().discover([str(tmp_path / "missing")])


class TestRun:
    def test_statuses(self, project_dir):
        report = BatchRunner(dry_run=True).run([str(project_dir)])
        assert _by_name(report) == {
            "Broken.tsx": FileStatus.ERROR,
            "Counter.tsx": FileStatus.OK,
            "Plain.tsx": FileStatus.UNMODIFIED,
            "types.ts": FileStatus.OK,
        }
        assert report.summary() == {"ok": 2, "unmodified": 1, "skipped": 0, "error": 1}
        assert report.has_errors is True
        assert report.finished_at is not None

    def test_dry_run_does_not_write(self, project_dir):
        counter = project_dir / "src" / "components" / "Counter.tsx"
        before = counter.read_bytes()
        BatchRunner(dry_run=True).run([str(project_dir)])
        assert counter.read_bytes() == before

    def test_write_mode_rewrites_files(self, project_dir):
        counter = project_dir / "src" / "components" / "Counter.tsx"
        broken = project_dir / "src" / "Broken.tsx"
        broken_before = broken.read_bytes()

        BatchRunner().run([str(project_dir)])

        text = counter.read_text(encoding="utf-8")
        assert text.startswith("import { useState, useEffect } from 'react';\n")
        assert "React." not in text
        # A failed unit is never half-written
        assert broken.read_bytes() == broken_before

    def test_second_run_is_unmodified(self, project_dir):
        BatchRunner().run([str(project_dir / "src" / "components")])
        report = BatchRunner().run([str(project_dir / "src" / "components")])
        assert {f.status for f in report.files} == {FileStatus.UNMODIFIED}

    def test_error_message_recorded(self, project_dir):
        report = BatchRunner(dry_run=True).run([str(project_dir / "src" / "Broken.tsx")])
        (result,) = report.files
        assert result.status == FileStatus.ERROR
        assert "syntax error" in result.error

    def test_explicit_unsupported_file_is_skipped(self, project_dir):
        report = BatchRunner(dry_run=True).run([str(project_dir / "docs" / "notes.md")])
        assert [f.status for f in report.files] == [FileStatus.SKIPPED]

    def test_members_and_diff_on_result(self, project_dir):
        runner = BatchRunner(dry_run=True, show_diff=True, print_output=True)
        report = runner.run([str(project_dir / "src" / "types.ts")])
        (result,) = report.files
        assert result.type_members == ["Component", "ReactNode"]
        assert result.value_members == []
        assert result.rewritten == 2
        assert result.diff is not None
        assert "+import type { Component, ReactNode } from 'react';" in result.diff.diff_text
        assert result.output.startswith("import type { Component, ReactNode }")

    def test_workers_keep_discovery_order(self, project_dir):
        sequential = BatchRunner(dry_run=True).run([str(project_dir)])
        concurrent = BatchRunner(dry_run=True, workers=4).run([str(project_dir)])
        assert [f.file_path for f in concurrent.files] == [f.file_path for f in sequential.files]
        assert [f.status for f in concurrent.files] == [f.status for f in sequential.files]
