"""Split git diff output into per-file change records."""

import re
from collections.abc import Iterator
from re import Match, Pattern

from diff_reviewer.models.file_change import FileChange

# A header only counts at the start of a line. Hunk body lines always carry a
# leading " ", "+" or "-", so header-looking code inside a hunk never matches.
FILE_HEADER_RE: Pattern[str] = re.compile(
    r"^diff --git a/(?P<a_path>.*?) b/(?P<b_path>.*?)\n", re.MULTILINE
)


def iter_file_headers(diff_output: str) -> Iterator[Match[str]]:
    """Yield header matches in a single left-to-right pass."""
    return FILE_HEADER_RE.finditer(diff_output)


def parse_git_diff(diff_output: str) -> list[FileChange]:
    """Parse git diff output into file change records.

    Each record runs from its own header to the start of the next header,
    the last one to the end of the input. The file name is the `a/` path;
    renames are not resolved.

    Args:
        diff_output: Raw `git diff` output, possibly empty

    Returns:
        File changes in order of appearance, empty if no header was found
    """
    files: list[FileChange] = []
    current: Match[str] | None = None

    for header in iter_file_headers(diff_output):
        if current is not None:
            files.append(_slice_file_change(diff_output, current, header.start()))
        current = header

    if current is not None:
        files.append(_slice_file_change(diff_output, current, len(diff_output)))

    return files


def _slice_file_change(diff_output: str, header: Match[str], end: int) -> FileChange:
    return FileChange(
        file_name=header.group("a_path"),
        diff_text=diff_output[header.start() : end],
    )
