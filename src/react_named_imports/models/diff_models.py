"""Models for representing file diffs."""

from pydantic import BaseModel, ConfigDict


class FileDiff(BaseModel):
    """Represents a unified diff for a single file."""

    model_config = ConfigDict(frozen=False)

    file_path: str  # Path as given on the command line
    original_content: str  # Source content before the codemod
    modified_content: str  # Source content after the codemod
    diff_text: str  # Unified diff output (git-compatible)
