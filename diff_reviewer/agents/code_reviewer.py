"""Code review agent using Pydantic AI and OpenAI."""

import logging
from collections.abc import Sequence

from pydantic_ai import Agent
from pydantic_ai.models import Model
from pydantic_ai.models.openai import OpenAIResponsesModel
from pydantic_ai.providers.openai import OpenAIProvider
from pydantic_ai.settings import ModelSettings

from diff_reviewer.config.settings import Settings
from diff_reviewer.models.file_change import FileChange
from diff_reviewer.models.outputs import FileReview
from diff_reviewer.prompts.code_reviewer_prompt import (
    SYSTEM_PROMPT,
    build_review_prompt,
)
from diff_reviewer.utils.rate_limiter import (
    pause_between_calls,
    with_exponential_backoff,
)

logger = logging.getLogger(__name__)

SEPARATOR = "=" * 60


def build_openai_model(config: Settings) -> OpenAIResponsesModel:
    """Create the OpenAI model shared by the review and test agents."""
    return OpenAIResponsesModel(
        config.openai_model,
        provider=OpenAIProvider(api_key=config.openai_api_key),
    )


def create_review_agent(model: Model | str) -> Agent[None, str]:
    """Create the per-file review agent with plain text output."""
    return Agent(model=model, instructions=SYSTEM_PROMPT, output_type=str)


def review_model_settings(config: Settings) -> ModelSettings:
    """Token limit and temperature for review calls."""
    return ModelSettings(max_tokens=config.max_tokens, temperature=config.temperature)


async def review_file(
    agent: Agent[None, str],
    change: FileChange,
    instructions: str,
    model_settings: ModelSettings | None = None,
    max_retries: int = 3,
) -> FileReview:
    """Send one file's diff to the model for review.

    Errors never propagate: a failed call comes back as an unsuccessful
    FileReview whose content is the error message.
    """
    prompt = build_review_prompt(change.file_name, change.diff_text, instructions)
    logger.debug(f"Sending review request for {change.file_name}")

    try:
        result = await with_exponential_backoff(
            agent.run,
            prompt,
            model_settings=model_settings,
            max_retries=max_retries,
        )
    except Exception as e:
        message = f"Failed to review {change.file_name}: {e}"
        logger.error(message)
        return FileReview(file_name=change.file_name, content=message, success=False)

    return FileReview(file_name=change.file_name, content=result.output)


def display_review(review: FileReview) -> None:
    logger.info(f"AI Review for: {review.file_name}")
    logger.info(SEPARATOR)
    logger.info(review.content)
    logger.info(SEPARATOR)


async def review_changes(
    files: Sequence[FileChange],
    agent: Agent[None, str],
    instructions: str,
    model_settings: ModelSettings | None = None,
    delay_seconds: float = 1.0,
    max_retries: int = 3,
) -> list[FileReview]:
    """Review all changed files, one model call per file.

    Files are processed in order with `delay_seconds` between calls. A
    failure on one file is recorded and the remaining files still get
    reviewed.

    Returns:
        One FileReview per input file, in input order
    """
    if not files:
        logger.info("No files to review.")
        return []

    logger.info(f"Starting AI code review for {len(files)} file(s)...")
    reviews: list[FileReview] = []

    for index, change in enumerate(files):
        logger.info(f"Reviewing: {change.file_name}")
        review = await review_file(
            agent, change, instructions, model_settings, max_retries
        )
        reviews.append(review)
        display_review(review)
        await pause_between_calls(index, len(files), delay_seconds)

    failed = sum(1 for review in reviews if not review.success)
    logger.info(
        f"AI code review completed: {len(reviews) - failed} reviewed, {failed} failed"
    )
    return reviews
