"""Utility functions and helpers."""

from .diff_parser import parse_git_diff
from .filters import (
    DEFAULT_EXCLUDE_PATTERNS,
    ExclusionFilter,
    is_testable_file,
    parse_exclusion_list,
    should_exclude_file,
)
from .rate_limiter import pause_between_calls, with_exponential_backoff

__all__ = [
    "DEFAULT_EXCLUDE_PATTERNS",
    "ExclusionFilter",
    "is_testable_file",
    "parse_exclusion_list",
    "parse_git_diff",
    "pause_between_calls",
    "should_exclude_file",
    "with_exponential_backoff",
]
