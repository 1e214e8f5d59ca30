"""Output models for review and test generation runs."""

from typing import Literal

from pydantic import BaseModel, Field


class FileReview(BaseModel):
    """Review text returned for a single file.

    On failure `content` holds the error message instead of a review.
    """

    file_name: str
    content: str
    success: bool = True


class TestTarget(BaseModel):
    """Where a generated test file goes and which framework it targets."""

    __test__ = False

    path: str
    framework: Literal["jest", "pytest", "junit"]


class TestGenerationResult(BaseModel):
    """Outcome of generating tests for one source file."""

    __test__ = False

    file_name: str
    target: TestTarget | None = None
    test_content: str | None = None
    success: bool
    error: str | None = None
    written: bool = False


class ReviewReport(BaseModel):
    """Everything produced for one pull request run.

    Aggregates reviewed, skipped and failed files, and renders the summary
    posted back to the pull request.
    """

    changed_files: list[str] = Field(default_factory=list)
    skipped_files: list[str] = Field(default_factory=list)
    reviews: list[FileReview] = Field(default_factory=list)
    tests: list[TestGenerationResult] = Field(default_factory=list)

    @property
    def reviewed_count(self) -> int:
        return sum(1 for review in self.reviews if review.success)

    @property
    def failed_reviews(self) -> list[str]:
        return [review.file_name for review in self.reviews if not review.success]

    @property
    def tests_written(self) -> list[str]:
        """Paths of generated test files that made it to disk."""
        return [
            result.target.path
            for result in self.tests
            if result.written and result.target is not None
        ]

    def format_summary_markdown(self, bot_name: str = "AI Diff Reviewer") -> str:
        """Format the report as GitHub-flavored markdown.

        Returns:
            Markdown suitable for a pull request comment
        """
        lines = [f"# {bot_name} Summary\n"]

        lines.append("## Statistics\n")
        lines.append(f"- **Changed Files:** {len(self.changed_files)}")
        lines.append(f"- **Files Reviewed:** {self.reviewed_count}")
        lines.append(f"- **Files Skipped:** {len(self.skipped_files)}")
        if self.tests:
            lines.append(f"- **Test Files Generated:** {len(self.tests_written)}")
        lines.append("")

        for review in self.reviews:
            if not review.success:
                continue
            lines.append(f"## `{review.file_name}`\n")
            lines.append(review.content.strip())
            lines.append("")

        if self.tests_written:
            lines.append("## Generated Tests\n")
            for path in self.tests_written:
                lines.append(f"- `{path}`")
            lines.append("")

        if self.skipped_files:
            lines.append("## Skipped Files\n")
            for file in self.skipped_files:
                lines.append(f"- `{file}`")
            lines.append("")

        if self.failed_reviews:
            lines.append("## Files with Errors\n")
            for file in self.failed_reviews:
                lines.append(f"- `{file}`")
            lines.append("")

        return "\n".join(lines)
