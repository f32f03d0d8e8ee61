"""Parsing module for SKILL.md content."""

from skill_loader.parsing.description import NO_DESCRIPTION, extract_description

__all__ = ["NO_DESCRIPTION", "extract_description"]
