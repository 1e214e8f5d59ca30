"""Configuration for AI Diff Reviewer."""
