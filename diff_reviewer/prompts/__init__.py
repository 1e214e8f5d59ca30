"""Prompt templates for the review and test generation agents."""
