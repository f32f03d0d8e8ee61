"""Command-line interface for the skill loader."""
