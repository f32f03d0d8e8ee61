"""MCP server exposing the skill handlers as tools.

Tools:
    - list_skills: names, descriptions and source roots of all skills
    - read_skill: full SKILL.md content of one skill
    - install_skill: copy a skill into the workspace
    - manage_search_paths: add/remove/list persisted search roots
    - debug_info: configuration, path status and scan warnings

Run over stdio:
    skill-loader serve
"""

import json
from typing import Literal

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from skill_loader.adapters.handlers import SkillToolHandlers
from skill_loader.models import ToolResponse

SERVER_NAME = "agent-skill-loader"


def render_response(response: ToolResponse) -> str:
    """Turn a ToolResponse into MCP text content.

    String content is passed through; structured content is pretty JSON.

    Raises:
        ToolError: If the response is an error, so the client sees isError
    """
    if not response.ok:
        raise ToolError(response.meta.get("message") or str(response.content))
    if isinstance(response.content, str):
        return response.content
    return json.dumps(response.content, indent=2)


def build_mcp_server(handlers: SkillToolHandlers) -> FastMCP:
    """Create a FastMCP server with one tool per handler.

    Example:
        >>> server = build_mcp_server(SkillToolHandlers(repo))
        >>> server.run()  # stdio transport
    """
    mcp = FastMCP(name=SERVER_NAME)

    @mcp.tool(
        name="list_skills",
        description=(
            "Returns a JSON list of all available skills with their names, descriptions, "
            "and source directories. Use this to discover what skills are available before "
            "reading or installing them."
        ),
    )
    def list_skills() -> str:
        return render_response(handlers.list_skills())

    @mcp.tool(
        name="read_skill",
        description=(
            "Fetches and returns the full SKILL.md content for a specific skill. The content "
            "includes instructions and context that can be used to learn the skill's capabilities."
        ),
    )
    def read_skill(skill_name: str) -> str:
        return render_response(handlers.read_skill(skill_name))

    @mcp.tool(
        name="install_skill",
        description=(
            "Copies an entire skill directory (including SKILL.md and any supporting files) "
            "to the target workspace. By default, installs to .agent/skills/<skill_name> in "
            "the workspace root. A target_path must stay within the workspace root."
        ),
    )
    def install_skill(skill_name: str, target_path: str | None = None) -> str:
        return render_response(handlers.install_skill(skill_name, target_path))

    @mcp.tool(
        name="manage_search_paths",
        description=(
            "Add, remove, or list dynamic skill search paths without restarting the server. "
            "Persists to skill-paths.json in the workspace root."
        ),
    )
    def manage_search_paths(
        operation: Literal["add", "remove", "list"],
        path: str | None = None,
    ) -> str:
        return render_response(handlers.manage_search_paths(operation, path))

    @mcp.tool(
        name="debug_info",
        description=(
            "Returns diagnostic information about server configuration, search paths, and "
            "any warnings from scanning. Use this when skills aren't being found or to "
            "verify configuration."
        ),
    )
    def debug_info() -> str:
        return render_response(handlers.debug_info())

    return mcp


def run_stdio_server(handlers: SkillToolHandlers) -> None:
    """Serve the skill tools over stdio until the client disconnects."""
    build_mcp_server(handlers).run(transport="stdio")
