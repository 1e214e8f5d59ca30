"""Tests for the git diff source."""

from unittest.mock import MagicMock

import pytest
from git.exc import GitCommandError

from diff_reviewer.services.git_diff import (
    GitDiffError,
    GitDiffSource,
    get_changed_files,
)


@pytest.fixture
def mock_repo(sample_diff):
    repo = MagicMock()
    repo.git.diff.return_value = sample_diff
    return repo


class TestGitDiffSource:
    def test_base_ref(self):
        source = GitDiffSource(remote="upstream", base_branch="develop", repo=MagicMock())

        assert source.base_ref == "upstream/develop"

    def test_fetch_and_diff_commands(self, mock_repo):
        source = GitDiffSource(base_branch="main", repo=mock_repo)

        source.fetch_base_branch()
        diff = source.get_branch_diff()

        mock_repo.git.fetch.assert_called_once_with("origin", "main")
        mock_repo.git.diff.assert_called_once_with(
            "origin/main...HEAD", strip_newline_in_stdout=False
        )
        assert diff.startswith("diff --git a/README.md b/README.md")


class TestGetChangedFiles:
    def test_applies_default_exclusions(self, mock_repo):
        change_set = get_changed_files(GitDiffSource(repo=mock_repo))

        assert change_set.file_names == ["README.md", "src/index.js"]
        assert change_set.skipped_files == ["package-lock.json"]
        assert change_set.files[1].diff_text.startswith(
            "diff --git a/src/index.js b/src/index.js\n"
        )

    def test_applies_custom_exclusions(self, mock_repo):
        change_set = get_changed_files(
            GitDiffSource(repo=mock_repo), custom_exclusions=["src/"]
        )

        assert change_set.file_names == ["README.md"]
        assert change_set.skipped_files == ["src/index.js", "package-lock.json"]

    def test_empty_diff(self, mock_repo):
        mock_repo.git.diff.return_value = "\n"

        change_set = get_changed_files(GitDiffSource(repo=mock_repo))

        assert change_set.is_empty
        assert change_set.skipped_files == []

    def test_git_failure_is_wrapped(self, mock_repo):
        mock_repo.git.fetch.side_effect = GitCommandError(
            "git fetch", 128, stderr="fatal: couldn't find remote ref main"
        )

        with pytest.raises(GitDiffError, match="Failed to get changed files"):
            get_changed_files(GitDiffSource(repo=mock_repo))
