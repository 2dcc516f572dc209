"""Report models for transform results and batch runs."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from react_named_imports.models.diff_models import FileDiff
from react_named_imports.models.schemas import MemberSet


class FileStatus(str, Enum):
    OK = "ok"                  # rewritten
    UNMODIFIED = "unmodified"  # no qualified references or imports touched
    SKIPPED = "skipped"        # unsupported extension
    ERROR = "error"            # unit failed; nothing written


class TransformResult(BaseModel):
    """Outcome of running the three phases over one source unit."""

    model_config = ConfigDict(frozen=False)

    source: str
    output: str
    members: MemberSet = Field(default_factory=MemberSet)
    removed_imports: int = 0
    rewritten: int = 0  # qualified references replaced

    @property
    def changed(self) -> bool:
        return self.output != self.source


class FileResult(BaseModel):
    model_config = ConfigDict(frozen=False)

    file_path: str
    status: FileStatus
    error: str | None = None
    rewritten: int = 0
    value_members: list[str] = Field(default_factory=list)
    type_members: list[str] = Field(default_factory=list)
    output: str | None = None     # set when the run echoes transformed sources
    diff: FileDiff | None = None  # set when the run shows diffs


class RunReport(BaseModel):
    model_config = ConfigDict(frozen=False)

    files: list[FileResult] = Field(default_factory=list)
    dry_run: bool = False
    started_at: datetime = Field(default_factory=datetime.now)
    finished_at: datetime | None = None

    def count(self, status: FileStatus) -> int:
        return sum(1 for f in self.files if f.status == status)

    @property
    def ok_count(self) -> int:
        return self.count(FileStatus.OK)

    @property
    def unmodified_count(self) -> int:
        return self.count(FileStatus.UNMODIFIED)

    @property
    def skipped_count(self) -> int:
        return self.count(FileStatus.SKIPPED)

    @property
    def error_count(self) -> int:
        return self.count(FileStatus.ERROR)

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0

    def summary(self) -> dict[str, int]:
        return {
            "ok": self.ok_count,
            "unmodified": self.unmodified_count,
            "skipped": self.skipped_count,
            "error": self.error_count,
        }
