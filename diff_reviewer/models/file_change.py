"""Per-file change records produced from a unified diff."""

from pydantic import BaseModel, ConfigDict, Field


class FileChange(BaseModel):
    """One file touched by a diff.

    `diff_text` is the exact slice of the raw diff from this file's
    `diff --git` header up to the next header (or end of input), so joining
    the records of one parse gives back the diff from its first header on.
    """

    model_config = ConfigDict(frozen=True)

    file_name: str
    diff_text: str = Field(default="", repr=False)


class ChangeSet(BaseModel):
    """Files left after exclusion filtering, plus the names that were dropped."""

    files: list[FileChange] = Field(default_factory=list)
    skipped_files: list[str] = Field(default_factory=list)

    @property
    def file_names(self) -> list[str]:
        return [change.file_name for change in self.files]

    @property
    def is_empty(self) -> bool:
        return not self.files
