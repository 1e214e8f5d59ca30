"""Posting the review summary back to the pull request."""

import logging

from github import Auth, Github, GithubException

from diff_reviewer.models.outputs import ReviewReport

logger = logging.getLogger(__name__)

# GitHub rejects issue comments above 65536 characters
MAX_COMMENT_LENGTH = 65000
TRUNCATION_NOTICE = "\n\n> Review truncated: comment exceeded GitHub's size limit."


def truncate_comment(body: str, limit: int = MAX_COMMENT_LENGTH) -> str:
    if len(body) <= limit:
        return body
    return body[: limit - len(TRUNCATION_NOTICE)] + TRUNCATION_NOTICE


def post_review_comment(
    report: ReviewReport,
    github_token: str,
    repo_full_name: str,
    pr_number: int,
    bot_name: str = "AI Diff Reviewer",
    github_client: Github | None = None,
) -> bool:
    """Post the review summary as a pull request comment.

    Args:
        report: Results of the run
        github_token: Token with pull request write access
        repo_full_name: Repository in "owner/repo" format
        pr_number: Pull request number
        bot_name: Name shown in the comment heading
        github_client: Optional pre-built client

    Returns:
        True if the comment was created
    """
    if github_client is None:
        github_client = Github(auth=Auth.Token(github_token), per_page=100)

    body = truncate_comment(report.format_summary_markdown(bot_name))

    try:
        repo = github_client.get_repo(repo_full_name)
        pr = repo.get_pull(pr_number)
        comment = pr.create_issue_comment(body)
    except GithubException as e:
        logger.error(
            f"Failed to post review comment on {repo_full_name}#{pr_number}: "
            f"{e.status} {e.data}"
        )
        return False

    logger.info(f"Posted review comment {comment.id} on {repo_full_name}#{pr_number}")
    return True
