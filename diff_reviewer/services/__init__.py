"""Services for git access and GitHub integration."""

from .git_diff import GitDiffError, GitDiffSource, get_changed_files
from .github_comments import post_review_comment

__all__ = ["GitDiffError", "GitDiffSource", "get_changed_files", "post_review_comment"]
