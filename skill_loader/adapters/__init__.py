"""Adapters module for request handling and framework integrations."""

from skill_loader.adapters.handlers import SkillToolHandlers
from skill_loader.adapters.tool_response import (
    build_debug_response,
    build_error_response,
    build_install_response,
    build_instructions_response,
    build_no_skills_response,
    build_search_paths_response,
    build_skills_response,
    safe_tool_call,
)

__all__ = [
    "SkillToolHandlers",
    "build_debug_response",
    "build_error_response",
    "build_install_response",
    "build_instructions_response",
    "build_no_skills_response",
    "build_search_paths_response",
    "build_skills_response",
    "safe_tool_call",
]
