"""Application settings using Pydantic Settings for environment variable management."""

from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from diff_reviewer.utils.filters import parse_exclusion_list


class Settings(BaseSettings):
    """Settings loaded from environment variables and GitHub Actions inputs."""

    model_config = SettingsConfigDict(
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        # Actions exports declared but unset inputs as empty strings
        env_ignore_empty=True,
    )

    # OpenAI Configuration
    # GitHub Actions exposes `with:` inputs as INPUT_<NAME>, keeping dashes,
    # so every input-backed field accepts both spellings.
    openai_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "INPUT_OPENAI-API-KEY"),
        description="OpenAI API key for AI review and test generation",
    )
    openai_model: str = Field(
        default="gpt-4",
        validation_alias=AliasChoices("OPENAI_MODEL", "INPUT_OPENAI-MODEL"),
        description="OpenAI model to use",
    )
    max_tokens: int = Field(
        default=1500,
        validation_alias=AliasChoices("MAX_TOKENS", "INPUT_MAX-TOKENS"),
        description="Maximum tokens per review response",
    )
    temperature: float = Field(
        default=0.3,
        validation_alias=AliasChoices("TEMPERATURE", "INPUT_TEMPERATURE"),
        description="Temperature for review responses",
    )
    test_temperature: float = Field(
        default=0.1,
        validation_alias=AliasChoices("TEST_TEMPERATURE"),
        description="Temperature for generated unit tests",
    )
    max_retries: int = Field(
        default=2,
        validation_alias=AliasChoices("MAX_RETRIES"),
        description="Maximum number of retries for transient API errors",
    )
    rate_limit_delay_ms: int = Field(
        default=1000,
        validation_alias=AliasChoices("RATE_LIMIT_DELAY", "INPUT_RATE-LIMIT-DELAY"),
        description="Delay between consecutive model calls, in milliseconds",
    )

    # Review Configuration
    generate_tests: bool = Field(
        default=False,
        validation_alias=AliasChoices("GENERATE_TESTS", "INPUT_GENERATE-TESTS"),
        description="Generate unit tests for changed files",
    )
    exclude_patterns: str = Field(
        default="",
        validation_alias=AliasChoices("EXCLUDE_PATTERNS", "INPUT_EXCLUDE-PATTERNS"),
        description="Comma separated exclusion patterns added to the defaults",
    )
    review_instructions_path: str = Field(
        default="review-instructions.md",
        validation_alias=AliasChoices("REVIEW_INSTRUCTIONS_PATH"),
        description="Markdown file with custom review instructions",
    )
    test_instructions_path: str = Field(
        default="test-instructions.md",
        validation_alias=AliasChoices("TEST_INSTRUCTIONS_PATH"),
        description="Markdown file with custom test generation instructions",
    )

    # Git Configuration
    base_branch: str = Field(
        default="main",
        validation_alias=AliasChoices("BASE_BRANCH", "INPUT_BASE-BRANCH"),
        description="Branch the pull request is compared against",
    )
    remote_name: str = Field(
        default="origin",
        validation_alias=AliasChoices("REMOTE_NAME"),
        description="Git remote holding the base branch",
    )
    repo_path: str = Field(
        default=".",
        validation_alias=AliasChoices("REPO_PATH"),
        description="Path to the checked out repository",
    )

    # GitHub Configuration
    post_comment: bool = Field(
        default=False,
        validation_alias=AliasChoices("POST_COMMENT", "INPUT_POST-COMMENT"),
        description="Post the review summary as a pull request comment",
    )
    github_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "GITHUB_TOKEN", "GH_TOKEN", "INPUT_GITHUB-TOKEN"
        ),
        description="GitHub token used to post the review comment",
    )
    github_repository: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GITHUB_REPOSITORY"),
        description="Repository in 'owner/repo' format",
    )
    pr_number: int | None = Field(
        default=None,
        validation_alias=AliasChoices("PR_NUMBER", "INPUT_PR-NUMBER"),
        description="Pull request number to comment on",
    )
    bot_name: str = Field(
        default="AI Diff Reviewer",
        validation_alias=AliasChoices("BOT_NAME"),
        description="Bot name to display in comments",
    )

    # Observability
    enable_debug: bool = Field(
        default=False,
        validation_alias=AliasChoices("ENABLE_DEBUG", "INPUT_ENABLE-DEBUG"),
        description="Enable debug logging",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias=AliasChoices("LOG_LEVEL"),
        description="Logging level",
    )
    logfire_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("LOGFIRE_TOKEN"),
        description="Pydantic Logfire token for observability",
    )

    @property
    def custom_exclusions(self) -> list[str]:
        """Caller supplied exclusion patterns, split and trimmed."""
        return parse_exclusion_list(self.exclude_patterns)

    @property
    def rate_limit_delay_seconds(self) -> float:
        return max(self.rate_limit_delay_ms, 0) / 1000

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.enable_debug else self.log_level

    @property
    def is_ai_enabled(self) -> bool:
        """Check if an OpenAI key is available for review calls."""
        return bool(self.openai_api_key)

    @property
    def is_test_generation_enabled(self) -> bool:
        """Check if test generation is both requested and configured."""
        return self.generate_tests and self.is_ai_enabled

    @property
    def can_post_comment(self) -> bool:
        """Check if everything needed to comment on the pull request is set."""
        return bool(
            self.post_comment
            and self.github_token
            and self.github_repository
            and self.pr_number
        )


# Global settings instance
settings = Settings()
