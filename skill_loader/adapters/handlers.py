"""Request handlers shared by the MCP server, the LangChain tools and the CLI.

Each handler re-scans the configured roots, never raises, and returns a
ToolResponse. Failures come back as ``ok=False`` error responses.
"""

from skill_loader.adapters.tool_response import (
    build_debug_response,
    build_install_response,
    build_instructions_response,
    build_no_skills_response,
    build_search_paths_response,
    build_skills_response,
    safe_tool_call,
)
from skill_loader.config.settings import SKILL_PATHS_ENV
from skill_loader.models import ToolResponse
from skill_loader.runtime.repository import SkillsRepository, validate_path_operation


class SkillToolHandlers:
    """The five skill operations exposed to agents."""

    def __init__(self, repository: SkillsRepository):
        self.repository = repository

    def list_skills(self) -> ToolResponse:
        """List every discovered skill, or explain why none were found."""
        def operation() -> ToolResponse:
            skills = self.repository.list_skills()
            if not skills:
                return build_no_skills_response(
                    env_value=self.repository.config.env.get(SKILL_PATHS_ENV),
                    parsed_paths=self.repository.effective_paths(),
                    cwd=str(self.repository.workspace_root),
                )
            return build_skills_response(skills)

        return safe_tool_call("all", operation)

    def read_skill(self, skill_name: str) -> ToolResponse:
        """Return the full SKILL.md content of a skill."""
        def operation() -> ToolResponse:
            skill, content = self.repository.read(skill_name)
            return build_instructions_response(
                skill_name=skill.name,
                instructions=content,
                skill_path=str(skill.path / self.repository.skill_filename),
                meta={"source_root": str(skill.source)},
            )

        return safe_tool_call(skill_name, operation)

    def install_skill(self, skill_name: str, target_path: str | None = None) -> ToolResponse:
        """Copy a skill into the workspace."""
        def operation() -> ToolResponse:
            dest = self.repository.install(skill_name, target_path)
            return build_install_response(skill_name, str(dest))

        return safe_tool_call(skill_name, operation, path=target_path)

    def manage_search_paths(self, operation: str, path: str | None = None) -> ToolResponse:
        """Add, remove or list persisted search roots."""
        def run() -> ToolResponse:
            validate_path_operation(operation, path)

            if operation == "list":
                return build_search_paths_response("list", self.repository.search_paths())

            if operation == "add":
                added, normalized = self.repository.add_search_path(path)
                message = f"Added path: {normalized}" if added else f"Path already exists: {normalized}"
                return build_search_paths_response("add", message, normalized, added)

            removed, normalized = self.repository.remove_search_path(path)
            message = (
                f"Removed path: {normalized}" if removed
                else f"Path not found in config: {normalized}"
            )
            return build_search_paths_response("remove", message, normalized, removed)

        return safe_tool_call("system", run, path=path)

    def debug_info(self) -> ToolResponse:
        """Report configuration, path status and scan warnings."""
        return safe_tool_call(
            "system",
            lambda: build_debug_response(self.repository.debug_info()),
        )
