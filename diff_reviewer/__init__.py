"""AI Diff Reviewer: review pull request diffs and generate tests in CI."""

__version__ = "0.1.0"
