"""Data models for AI Diff Reviewer."""

from .file_change import ChangeSet, FileChange
from .outputs import FileReview, ReviewReport, TestGenerationResult, TestTarget

__all__ = [
    "ChangeSet",
    "FileChange",
    "FileReview",
    "ReviewReport",
    "TestGenerationResult",
    "TestTarget",
]
