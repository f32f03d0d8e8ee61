"""LangChain adapter for the skill loader.

This module provides LangChain BaseTool implementations for the skill
operations:
- SkillsListTool: List all available skills
- SkillsReadTool: Load a skill's SKILL.md
- SkillsInstallTool: Copy a skill into the workspace
- SkillsSearchPathsTool: Add, remove or list search roots
- SkillsDebugTool: Diagnostics for skill discovery

All tools return the unified ToolResponse format as JSON.
"""

import json
from typing import Any, Literal, Optional, Type

from pydantic import BaseModel, Field

try:
    from langchain_core.tools import BaseTool
except ImportError:
    raise ImportError(
        "LangChain is required for this adapter. "
        "Install it with: pip install 'agent-skill-loader[langchain]'"
    )

from skill_loader.adapters.handlers import SkillToolHandlers
from skill_loader.models import ToolResponse


def _to_json(response: ToolResponse) -> str:
    return json.dumps(response.to_dict(), indent=2)


class EmptyInput(BaseModel):
    """Input schema for tools without arguments."""


class SkillsListTool(BaseTool):
    """LangChain tool for listing all available skills."""

    name: str = "skills_list"
    description: str = (
        "List all available skills with their names, descriptions and source directories. "
        "Use this to discover skills before reading or installing them."
    )
    args_schema: Type[BaseModel] = EmptyInput

    # Any avoids pydantic validation of the handler object
    handlers: Any

    def __init__(self, handlers: SkillToolHandlers, **kwargs):
        super().__init__(handlers=handlers, **kwargs)

    def _run(self) -> str:
        return _to_json(self.handlers.list_skills())


class SkillsReadInput(BaseModel):
    """Input schema for skills_read tool."""
    skill_name: str = Field(..., description="The name of the skill to read (e.g., 'writing-dax-measures')")


class SkillsReadTool(BaseTool):
    """LangChain tool for reading a skill's SKILL.md."""

    name: str = "skills_read"
    description: str = (
        "Fetch the full SKILL.md content for a specific skill, including its "
        "instructions and context."
    )
    args_schema: Type[BaseModel] = SkillsReadInput

    handlers: Any

    def __init__(self, handlers: SkillToolHandlers, **kwargs):
        super().__init__(handlers=handlers, **kwargs)

    def _run(self, skill_name: str) -> str:
        return _to_json(self.handlers.read_skill(skill_name))


class SkillsInstallInput(BaseModel):
    """Input schema for skills_install tool."""
    skill_name: str = Field(..., description="Name of the skill to install")
    target_path: Optional[str] = Field(
        None,
        description=(
            "Destination path within the workspace. Defaults to .agent/skills/<skill_name>. "
            "Must be within the workspace root."
        ),
    )


class SkillsInstallTool(BaseTool):
    """LangChain tool for installing a skill into the workspace."""

    name: str = "skills_install"
    description: str = (
        "Copy an entire skill directory (SKILL.md and supporting files) into the workspace."
    )
    args_schema: Type[BaseModel] = SkillsInstallInput

    handlers: Any

    def __init__(self, handlers: SkillToolHandlers, **kwargs):
        super().__init__(handlers=handlers, **kwargs)

    def _run(self, skill_name: str, target_path: Optional[str] = None) -> str:
        return _to_json(self.handlers.install_skill(skill_name, target_path))


class SkillsSearchPathsInput(BaseModel):
    """Input schema for skills_search_paths tool."""
    operation: Literal["add", "remove", "list"] = Field(..., description="Operation to perform")
    path: Optional[str] = Field(
        None,
        description="Absolute path to add or remove (not required for 'list')",
    )


class SkillsSearchPathsTool(BaseTool):
    """LangChain tool for managing persisted search roots."""

    name: str = "skills_search_paths"
    description: str = (
        "Add, remove, or list dynamic skill search paths. Changes are persisted to "
        "skill-paths.json in the workspace root."
    )
    args_schema: Type[BaseModel] = SkillsSearchPathsInput

    handlers: Any

    def __init__(self, handlers: SkillToolHandlers, **kwargs):
        super().__init__(handlers=handlers, **kwargs)

    def _run(self, operation: str, path: Optional[str] = None) -> str:
        return _to_json(self.handlers.manage_search_paths(operation, path))


class SkillsDebugTool(BaseTool):
    """LangChain tool reporting discovery diagnostics."""

    name: str = "skills_debug"
    description: str = (
        "Return configuration, search path status and scan warnings. Use this when "
        "skills aren't being found."
    )
    args_schema: Type[BaseModel] = EmptyInput

    handlers: Any

    def __init__(self, handlers: SkillToolHandlers, **kwargs):
        super().__init__(handlers=handlers, **kwargs)

    def _run(self) -> str:
        return _to_json(self.handlers.debug_info())


def build_langchain_tools(handlers: SkillToolHandlers) -> list[BaseTool]:
    """Build LangChain tools for every skill operation.

    Example:
        >>> from skill_loader import LoaderConfig, SkillsRepository
        >>> from skill_loader.adapters.handlers import SkillToolHandlers
        >>> from skill_loader.adapters.langchain import build_langchain_tools
        >>>
        >>> repo = SkillsRepository(LoaderConfig.from_environ())
        >>> tools = build_langchain_tools(SkillToolHandlers(repo))
    """
    return [
        SkillsListTool(handlers=handlers),
        SkillsReadTool(handlers=handlers),
        SkillsInstallTool(handlers=handlers),
        SkillsSearchPathsTool(handlers=handlers),
        SkillsDebugTool(handlers=handlers),
    ]
