"""Tests for review report models."""

from diff_reviewer.models.outputs import (
    FileReview,
    ReviewReport,
    TestGenerationResult,
    TestTarget,
)


def make_report() -> ReviewReport:
    return ReviewReport(
        changed_files=["src/app.js", "src/util.py"],
        skipped_files=["package-lock.json"],
        reviews=[
            FileReview(file_name="src/app.js", content="Looks good.\n"),
            FileReview(
                file_name="src/util.py",
                content="Failed to review src/util.py: timeout",
                success=False,
            ),
        ],
        tests=[
            TestGenerationResult(
                file_name="src/app.js",
                target=TestTarget(path="src/app.test.js", framework="jest"),
                test_content="test('x', () => {})",
                success=True,
                written=True,
            ),
            TestGenerationResult(
                file_name="src/util.py", success=False, error="Failed"
            ),
        ],
    )


class TestReviewReport:
    """Tests for ReviewReport."""

    def test_counts(self):
        report = make_report()

        assert report.reviewed_count == 1
        assert report.failed_reviews == ["src/util.py"]
        assert report.tests_written == ["src/app.test.js"]

    def test_empty_report(self):
        report = ReviewReport()

        assert report.reviewed_count == 0
        assert report.failed_reviews == []
        assert report.tests_written == []

    def test_format_summary_markdown(self):
        markdown = make_report().format_summary_markdown("Review Bot")

        assert markdown.startswith("# Review Bot Summary")
        assert "- **Changed Files:** 2" in markdown
        assert "- **Files Reviewed:** 1" in markdown
        assert "- **Files Skipped:** 1" in markdown
        assert "- **Test Files Generated:** 1" in markdown
        assert "## `src/app.js`\n\nLooks good." in markdown
        assert "## Generated Tests\n\n- `src/app.test.js`" in markdown
        assert "## Skipped Files\n\n- `package-lock.json`" in markdown
        assert "## Files with Errors\n\n- `src/util.py`" in markdown
        assert "timeout" not in markdown

    def test_format_summary_without_tests_omits_test_sections(self):
        report = ReviewReport(
            changed_files=["a.py"],
            reviews=[FileReview(file_name="a.py", content="Fine")],
        )

        markdown = report.format_summary_markdown()

        assert "Test Files Generated" not in markdown
        assert "Generated Tests" not in markdown
        assert "Skipped Files" not in markdown
