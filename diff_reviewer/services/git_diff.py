"""Git diff source for the current branch against its base branch."""

import logging
from collections.abc import Iterable

from git import Repo
from git.exc import GitError

from diff_reviewer.models.file_change import ChangeSet
from diff_reviewer.utils.diff_parser import parse_git_diff
from diff_reviewer.utils.filters import ExclusionFilter, partition_file_changes

logger = logging.getLogger(__name__)


class GitDiffError(RuntimeError):
    """Raised when the diff against the base branch cannot be produced."""


class GitDiffSource:
    """Produces the raw diff between HEAD and `<remote>/<base_branch>`."""

    def __init__(
        self,
        repo_path: str = ".",
        remote: str = "origin",
        base_branch: str = "main",
        repo: Repo | None = None,
    ) -> None:
        self.repo_path = repo_path
        self.remote = remote
        self.base_branch = base_branch
        self._repo = repo

    @property
    def repo(self) -> Repo:
        if self._repo is None:
            self._repo = Repo(self.repo_path, search_parent_directories=True)
        return self._repo

    @property
    def base_ref(self) -> str:
        return f"{self.remote}/{self.base_branch}"

    def fetch_base_branch(self) -> None:
        """Fetch the latest base branch from the remote."""
        logger.info(f"Fetching latest {self.base_branch} branch...")
        self.repo.git.fetch(self.remote, self.base_branch)

    def get_branch_diff(self) -> str:
        """Get the diff between the merge base with the base branch and HEAD."""
        logger.info(f"Getting diff between current branch and {self.base_branch}...")
        return self.repo.git.diff(
            f"{self.base_ref}...HEAD", strip_newline_in_stdout=False
        )


def get_changed_files(
    source: GitDiffSource, custom_exclusions: Iterable[str] = ()
) -> ChangeSet:
    """Get all changed files with their diffs, minus excluded files.

    Args:
        source: Where the raw diff comes from
        custom_exclusions: Patterns added to the default exclusion list

    Returns:
        The surviving file changes and the names of skipped files

    Raises:
        GitDiffError: If fetching or diffing fails
    """
    try:
        source.fetch_base_branch()
        diff_output = source.get_branch_diff()
    except GitError as e:
        raise GitDiffError(f"Failed to get changed files: {e}") from e

    if not diff_output.strip():
        logger.info(f"No changes between this branch and {source.base_branch}.")
        return ChangeSet()

    logger.info(f"Changes detected against {source.base_branch} branch.")
    logger.debug(f"Full diff output:\n{diff_output}")

    files, skipped = partition_file_changes(
        parse_git_diff(diff_output), ExclusionFilter(custom_exclusions)
    )
    return ChangeSet(files=files, skipped_files=skipped)
