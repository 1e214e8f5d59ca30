"""Pydantic AI agents for code review and test generation."""
