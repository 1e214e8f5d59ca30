"""Command line entry point for reviewing a pull request branch in CI."""

import asyncio
import logging
import sys

from diff_reviewer.agents.code_reviewer import (
    build_openai_model,
    create_review_agent,
    review_changes,
    review_model_settings,
)
from diff_reviewer.agents.test_generator import (
    create_test_agent,
    generate_tests_for_changes,
    generation_model_settings,
)
from diff_reviewer.config.instructions import (
    load_review_instructions,
    load_test_instructions,
)
from diff_reviewer.config.settings import Settings, settings
from diff_reviewer.models.outputs import ReviewReport
from diff_reviewer.services.git_diff import GitDiffSource, get_changed_files
from diff_reviewer.services.github_comments import post_review_comment
from diff_reviewer.utils.actions import set_output
from diff_reviewer.utils.logging import setup_observability

logger = logging.getLogger(__name__)


async def process_branch_changes(
    config: Settings, source: GitDiffSource | None = None
) -> ReviewReport:
    """Collect the branch diff, review it, generate tests, and report back.

    Args:
        config: Run configuration
        source: Optional diff source (default: built from config)

    Returns:
        The report for this run

    Raises:
        GitDiffError: If the diff against the base branch cannot be produced
    """
    if source is None:
        source = GitDiffSource(
            repo_path=config.repo_path,
            remote=config.remote_name,
            base_branch=config.base_branch,
        )

    change_set = get_changed_files(source, config.custom_exclusions)
    report = ReviewReport(
        changed_files=change_set.file_names,
        skipped_files=change_set.skipped_files,
    )

    if change_set.is_empty:
        logger.info(f"No changes to review between this branch and {config.base_branch}.")
        return report

    logger.info(f"Found {len(change_set.files)} changed file(s):")
    for name in change_set.file_names:
        logger.info(f"  - {name}")

    if not config.is_ai_enabled:
        logger.warning("OpenAI API key not provided. Skipping AI code review.")
        return report

    model = build_openai_model(config)
    attempts = config.max_retries + 1

    report.reviews = await review_changes(
        change_set.files,
        create_review_agent(model),
        load_review_instructions(config.review_instructions_path),
        model_settings=review_model_settings(config),
        delay_seconds=config.rate_limit_delay_seconds,
        max_retries=attempts,
    )

    if config.is_test_generation_enabled:
        report.tests = await generate_tests_for_changes(
            change_set.files,
            create_test_agent(model),
            repo_path=config.repo_path,
            custom_instructions=load_test_instructions(config.test_instructions_path),
            model_settings=generation_model_settings(config),
            delay_seconds=config.rate_limit_delay_seconds,
            max_retries=attempts,
        )
    else:
        logger.info("Test generation is disabled")

    return report


def publish_report(report: ReviewReport, config: Settings) -> None:
    """Post the PR comment (when configured) and write step outputs."""
    if config.can_post_comment and report.reviews:
        assert config.github_token and config.github_repository and config.pr_number
        post_review_comment(
            report,
            github_token=config.github_token,
            repo_full_name=config.github_repository,
            pr_number=config.pr_number,
            bot_name=config.bot_name,
        )
    elif config.post_comment:
        logger.warning(
            "Commenting requested but GITHUB_TOKEN, GITHUB_REPOSITORY or PR_NUMBER is missing"
        )

    set_output("changed-files", len(report.changed_files))
    set_output("reviewed-files", report.reviewed_count)
    set_output("tests-generated", len(report.tests_written))


def run(config: Settings | None = None) -> int:
    """Run the review and return the process exit code."""
    config = config or settings
    setup_observability(config)

    try:
        report = asyncio.run(process_branch_changes(config))
        publish_report(report, config)
    except Exception:
        logger.exception("Failed to process branch changes")
        return 1

    logger.info("AI diff review finished")
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
