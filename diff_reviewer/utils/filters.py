"""File filtering utilities for determining which changed files to process."""

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from re import Pattern

from diff_reviewer.models.file_change import FileChange

logger = logging.getLogger(__name__)

WILDCARD = "*"
PATH_SEPARATOR = "/"

# Files/directories that are never sent for review. Downstream behavior
# depends on these exact names, so entries are only ever appended.
DEFAULT_EXCLUDE_PATTERNS: tuple[str, ...] = (
    # Package manager files
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "composer.lock",
    "Pipfile.lock",
    "poetry.lock",
    "Gemfile.lock",
    # Build/distribution files
    "dist/",
    "build/",
    "coverage/",
    "node_modules/",
    "vendor/",
    ".next/",
    ".nuxt/",
    # Environment and config files
    ".env",
    ".env.local",
    ".env.production",
    ".env.development",
    # Generated/compiled files
    ".min.js",
    ".min.css",
    ".bundle.js",
    ".chunk.js",
    # Documentation and meta files
    "CHANGELOG.md",
    "CHANGELOG.txt",
    "LICENSE",
    "LICENSE.txt",
    "LICENSE.md",
    # IDE and system files
    ".DS_Store",
    "Thumbs.db",
    ".vscode/",
    ".idea/",
    # Log files
    "*.log",
    "logs/",
    # Temporary files
    "*.tmp",
    "*.temp",
    "*.cache",
)

# Name fragments of files that test generation leaves alone
NON_TESTABLE_MARKERS = (".test.", ".spec.", "__tests__", ".config.", ".min.")
NON_TESTABLE_SUFFIXES = (".md", ".json", ".yml", ".yaml")


def wildcard_to_regex(pattern: str) -> str:
    """Translate a wildcard pattern: `*` becomes `.*`, `.` stays any-char."""
    return ".*".join(
        ".".join(re.escape(piece) for piece in part.split("."))
        for part in pattern.split(WILDCARD)
    )


@dataclass(frozen=True)
class WildcardPattern:
    """Pattern containing `*`, searched anywhere in the file name.

    The search is unanchored and `.` matches any character, so `*.log` also
    matches `foo.logger.js` and `src/logger.js`. Every other regex
    metacharacter is literal text.
    """

    pattern: str
    regex: Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        regex = re.compile(wildcard_to_regex(self.pattern))
        object.__setattr__(self, "regex", regex)

    def matches(self, file_name: str) -> bool:
        return self.regex.search(file_name) is not None


@dataclass(frozen=True)
class DirectoryPattern:
    """Pattern ending in `/`, matching the directory at any depth."""

    pattern: str

    def matches(self, file_name: str) -> bool:
        return (
            file_name.startswith(self.pattern)
            or PATH_SEPARATOR + self.pattern in file_name
        )


@dataclass(frozen=True)
class ExactPattern:
    """Pattern matching the whole name or its trailing path components."""

    pattern: str

    def matches(self, file_name: str) -> bool:
        return file_name == self.pattern or file_name.endswith(
            PATH_SEPARATOR + self.pattern
        )


ExclusionRule = WildcardPattern | DirectoryPattern | ExactPattern


def classify_pattern(pattern: str) -> ExclusionRule:
    """Turn a raw pattern string into its matching rule.

    Every string is accepted; anything that is neither a wildcard nor a
    directory pattern is matched literally.
    """
    if WILDCARD in pattern:
        return WildcardPattern(pattern)
    if pattern.endswith(PATH_SEPARATOR):
        return DirectoryPattern(pattern)
    return ExactPattern(pattern)


class ExclusionFilter:
    """Decides which files are dropped before review.

    Patterns are the defaults followed by the caller's extras, classified
    once. The first matching rule excludes the file; there is no way to
    re-include a file through a later pattern.
    """

    def __init__(self, custom_exclusions: Iterable[str] = ()) -> None:
        self.patterns: tuple[str, ...] = DEFAULT_EXCLUDE_PATTERNS + tuple(
            custom_exclusions
        )
        self.rules: tuple[ExclusionRule, ...] = tuple(
            classify_pattern(pattern) for pattern in self.patterns
        )

    def should_exclude(self, file_name: str) -> bool:
        """Check if a file should be excluded from review.

        Args:
            file_name: Path of the file as it appears in the diff

        Returns:
            True if the file should be dropped
        """
        return any(rule.matches(file_name) for rule in self.rules)


def should_exclude_file(
    file_name: str, custom_exclusions: Iterable[str] = ()
) -> bool:
    """Check a single file against the defaults plus `custom_exclusions`."""
    return ExclusionFilter(custom_exclusions).should_exclude(file_name)


def parse_exclusion_list(raw: str | None) -> list[str]:
    """Split a comma or newline separated pattern list.

    Args:
        raw: Value from configuration, e.g. "legacy/, *.snap"

    Returns:
        Trimmed, non-empty patterns in their original order
    """
    if not raw:
        return []
    items = raw.replace("\n", ",").split(",")
    return [item.strip() for item in items if item.strip()]


def partition_file_changes(
    changes: Sequence[FileChange], exclusion_filter: ExclusionFilter
) -> tuple[list[FileChange], list[str]]:
    """Split file changes into kept records and skipped file names.

    Order is preserved on both sides.
    """
    kept: list[FileChange] = []
    skipped: list[str] = []

    for change in changes:
        if exclusion_filter.should_exclude(change.file_name):
            logger.info(f"Skipping file (excluded from review): {change.file_name}")
            skipped.append(change.file_name)
        else:
            kept.append(change)

    return kept, skipped


def is_testable_file(file_path: str) -> bool:
    """Check if unit tests should be generated for a file.

    Args:
        file_path: Path to the file

    Returns:
        False for tests, configs, minified files, docs and data files
    """
    name = file_path.lower()
    if any(marker in name for marker in NON_TESTABLE_MARKERS):
        return False
    return not name.endswith(NON_TESTABLE_SUFFIXES)
