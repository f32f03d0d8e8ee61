"""Helper functions for building ToolResponse objects.

This module provides convenience functions for creating ToolResponse objects
for each request handler (list, read, install, manage search paths, debug)
and for converting exceptions to error responses.
"""

import hashlib
import traceback
from collections.abc import Callable
from typing import Any

from skill_loader.models import SkillInfo, ToolResponse


def build_skills_response(
    skills: list[SkillInfo],
    meta: dict | None = None,
) -> ToolResponse:
    """Build a success response for list_skills.

    Only the public fields (name, description, source_root) are included.

    Args:
        skills: Discovered skills
        meta: Optional metadata dictionary

    Returns:
        ToolResponse with type="skills"
    """
    return ToolResponse(
        ok=True,
        type="skills",
        skill="all",
        content=[skill.to_listing() for skill in skills],
        meta={"count": len(skills), **(meta or {})},
    )


def build_no_skills_response(
    env_value: str | None,
    parsed_paths: list[str],
    cwd: str,
) -> ToolResponse:
    """Build the diagnostic response returned when no skill was found."""
    return ToolResponse(
        ok=True,
        type="skills",
        skill="all",
        content={
            "error": "No skills found",
            "env_var": env_value,
            "parsed_paths": parsed_paths,
            "cwd": cwd,
        },
        meta={"count": 0},
    )


def build_instructions_response(
    skill_name: str,
    instructions: str,
    skill_path: str,
    meta: dict | None = None,
) -> ToolResponse:
    """Build a success response for read_skill.

    Args:
        skill_name: Name of the skill
        instructions: Full SKILL.md content
        skill_path: Path to SKILL.md file
        meta: Optional metadata dictionary

    Returns:
        ToolResponse with type="instructions"
    """
    content_bytes = instructions.encode("utf-8")
    sha256_hash = hashlib.sha256(content_bytes).hexdigest()

    return ToolResponse(
        ok=True,
        type="instructions",
        skill=skill_name,
        path=skill_path,
        content=instructions,
        bytes=len(content_bytes),
        sha256=sha256_hash,
        meta=meta or {},
    )


def build_install_response(skill_name: str, dest: str) -> ToolResponse:
    """Build a success response for install_skill."""
    return ToolResponse(
        ok=True,
        type="install",
        skill=skill_name,
        path=dest,
        content=f"Successfully installed skill '{skill_name}' to '{dest}'",
    )


def build_search_paths_response(
    operation: str,
    content: str | dict,
    path: str | None = None,
    changed: bool | None = None,
) -> ToolResponse:
    """Build a success response for manage_search_paths.

    Args:
        operation: "add", "remove" or "list"
        content: Message for add/remove, path lists for list
        path: Normalized path for add/remove
        changed: Whether skill-paths.json was rewritten

    Returns:
        ToolResponse with type="search_paths"
    """
    meta: dict[str, Any] = {"operation": operation}
    if changed is not None:
        meta["changed"] = changed

    return ToolResponse(
        ok=True,
        type="search_paths",
        skill="system",
        path=path,
        content=content,
        meta=meta,
    )


def build_debug_response(info: dict) -> ToolResponse:
    """Build a success response for debug_info."""
    return ToolResponse(
        ok=True,
        type="debug",
        skill="system",
        content=info,
        meta={
            "skills_found": info.get("skills_found", 0),
            "warning_count": len(info.get("warnings", [])),
        },
    )


def build_error_response(
    skill_name: str,
    error: Exception,
    path: str | None = None,
    include_traceback: bool = False,
) -> ToolResponse:
    """Build an error response from an exception.

    Args:
        skill_name: Name of the skill
        error: The exception that occurred
        path: Optional path related to the error
        include_traceback: Whether to include full traceback in meta

    Returns:
        ToolResponse with ok=False and type="error"
    """
    error_type = type(error).__name__
    error_message = str(error)

    meta: dict[str, Any] = {
        "error_type": error_type,
        "message": error_message,
    }

    if include_traceback:
        meta["traceback"] = traceback.format_exc()

    return ToolResponse(
        ok=False,
        type="error",
        skill=skill_name,
        path=path,
        content=f"{error_type}: {error_message}",
        meta=meta,
    )


def safe_tool_call(
    skill_name: str,
    operation: Callable[[], ToolResponse],
    path: str | None = None,
    include_traceback: bool = False,
) -> ToolResponse:
    """Execute a tool operation and convert any exceptions to error responses.

    Args:
        skill_name: Name of the skill
        operation: Callable that returns a ToolResponse
        path: Optional path related to the operation
        include_traceback: Whether to include full traceback in error responses

    Returns:
        ToolResponse (either success from operation or error response)

    Example:
        >>> def do_work():
        ...     return build_install_response("my-skill", "/ws/.agent/skills/my-skill")
        >>> response = safe_tool_call("my-skill", do_work)
    """
    try:
        return operation()
    except Exception as e:
        return build_error_response(
            skill_name=skill_name,
            error=e,
            path=path,
            include_traceback=include_traceback,
        )
