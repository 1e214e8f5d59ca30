"""Prompts for the per-file code review agent."""

SYSTEM_PROMPT = (
    "You are an expert code reviewer. Provide thorough, constructive feedback "
    "on code changes. Focus on code quality, security, performance, and best "
    "practices."
)

DEFAULT_REVIEW_INSTRUCTIONS = """Please review this code for:
- Code quality and maintainability
- Security considerations
- Performance implications
- Best practices adherence
- Potential bugs or issues

Provide constructive feedback and suggestions for improvement."""


def build_review_prompt(file_name: str, diff_text: str, instructions: str) -> str:
    """
    Build the user prompt for reviewing one file.

    Args:
        file_name: Path of the changed file
        diff_text: The file's section of the git diff
        instructions: Review instructions (custom file or defaults)

    Returns:
        Formatted prompt string for the model
    """
    return f"""{instructions}

File: {file_name}

Git Diff:
```diff
{diff_text}
```

Please provide a detailed code review for this file."""
