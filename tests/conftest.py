"""Pytest configuration and fixtures."""

import pytest

from diff_reviewer.config.settings import Settings


def make_file_diff(path: str, body: str = "@@ -1 +1 @@\n-old\n+new\n") -> str:
    """Return one `git diff` file section for `path`."""
    return (
        f"diff --git a/{path} b/{path}\n"
        "index 83db48f..bf269f4 100644\n"
        f"--- a/{path}\n"
        f"+++ b/{path}\n"
        f"{body}"
    )


@pytest.fixture
def file_diff():
    """Return the helper that builds one file section of a diff."""
    return make_file_diff


@pytest.fixture
def sample_diff() -> str:
    """Return a diff touching README.md, src/index.js and package-lock.json."""
    return (
        make_file_diff("README.md", "@@ -1 +1,2 @@\n # Project\n+More docs.\n")
        + make_file_diff(
            "src/index.js",
            "@@ -1,3 +1,3 @@\n const a = 1\n-const b = 2\n+const b = 3\n",
        )
        + make_file_diff(
            "package-lock.json", '@@ -2 +2 @@\n-  "version": "1.0.0"\n+  "version": "1.0.1"\n'
        )
    )


@pytest.fixture
def run_settings(monkeypatch) -> Settings:
    """Return settings isolated from the real environment."""
    for name in ("OPENAI_API_KEY", "GITHUB_TOKEN", "GH_TOKEN", "GITHUB_OUTPUT"):
        monkeypatch.delenv(name, raising=False)
    return Settings(
        _env_file=None,
        openai_api_key="sk-test",  # pragma: allowlist secret
        rate_limit_delay_ms=0,
    )
