"""Command-line interface for the skill loader.

This module runs the MCP server and offers the same operations for use
from a shell.

Commands:
    serve: Run the MCP server over stdio
    list: Display all discovered skills
    read: Print a skill's SKILL.md
    install: Copy a skill into the workspace
    paths: Add, remove or list persisted search roots
    debug: Show configuration, path status and scan warnings

Example:
    $ skill-loader serve
    $ skill-loader list
    $ skill-loader install writing-dax-measures --target tools/dax
    $ skill-loader paths add ~/team-skills
    $ skill-loader --workspace-root ~/project debug
"""

import argparse
import json
import os
import sys
from pathlib import Path

from skill_loader.adapters.handlers import SkillToolHandlers
from skill_loader.config.settings import WORKSPACE_ROOT_ENV, LoaderConfig
from skill_loader.models import ToolResponse
from skill_loader.observability.audit import AuditSink, JSONLAuditSink
from skill_loader.runtime.repository import PATH_OPERATIONS, SkillsRepository


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="skill-loader",
        description="Discover, read and install agent skills (SKILL.md directories)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--workspace-root",
        type=Path,
        help=f"Workspace root (default: ${WORKSPACE_ROOT_ENV} or the current directory)",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        help="Dotenv file to load (default: ./.env)",
    )
    parser.add_argument(
        "--audit-log",
        type=Path,
        help="Append audit events to this JSONL file (optional)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser(
        "serve",
        help="Run the MCP server over stdio",
        description="Serve list/read/install/manage/debug tools to an MCP client",
    )

    subparsers.add_parser(
        "list",
        help="List all discovered skills",
        description="Display all skills found in the configured search paths",
    )

    read_parser = subparsers.add_parser(
        "read",
        help="Print a skill's SKILL.md",
        description="Print the full SKILL.md content of a skill",
    )
    read_parser.add_argument("skill", help="Name of the skill")

    install_parser = subparsers.add_parser(
        "install",
        help="Copy a skill into the workspace",
        description="Copy a skill directory into the workspace (default: .agent/skills/<name>)",
    )
    install_parser.add_argument("skill", help="Name of the skill")
    install_parser.add_argument(
        "--target",
        help="Destination within the workspace root",
    )

    paths_parser = subparsers.add_parser(
        "paths",
        help="Manage persisted search paths",
        description="Add, remove or list search paths stored in skill-paths.json",
    )
    paths_parser.add_argument("operation", choices=PATH_OPERATIONS, help="Operation to perform")
    paths_parser.add_argument("path", nargs="?", help="Path to add or remove")

    subparsers.add_parser(
        "debug",
        help="Show diagnostics",
        description="Show configuration, search path status and scan warnings",
    )

    return parser


def build_handlers(args: argparse.Namespace) -> SkillToolHandlers:
    """Resolve configuration from the environment and CLI options."""
    environ = None
    if args.workspace_root is not None:
        environ = {**os.environ, WORKSPACE_ROOT_ENV: str(args.workspace_root.expanduser())}

    config = LoaderConfig.from_environ(environ=environ, env_file=args.env_file)

    audit_sink: AuditSink | None = None
    if args.audit_log is not None:
        audit_sink = JSONLAuditSink(args.audit_log)

    return SkillToolHandlers(SkillsRepository(config, audit_sink=audit_sink))


def _print_response(response: ToolResponse) -> int:
    if not response.ok:
        print(f"Error: {response.meta.get('message', response.content)}", file=sys.stderr)
        return 1
    if isinstance(response.content, str):
        print(response.content)
    else:
        print(json.dumps(response.content, indent=2))
    return 0


def cmd_serve(handlers: SkillToolHandlers, args: argparse.Namespace) -> int:
    """Execute the serve command."""
    # Imported here so shell commands work without the MCP SDK loaded
    from skill_loader.adapters.mcp_server import run_stdio_server

    run_stdio_server(handlers)
    return 0


def cmd_list(handlers: SkillToolHandlers, args: argparse.Namespace) -> int:
    """Execute the list command.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    response = handlers.list_skills()
    if not response.ok:
        return _print_response(response)

    if isinstance(response.content, dict):
        print("No skills found.")
        print(f"  Searched: {', '.join(response.content['parsed_paths'])}")
        return 0

    print(f"Found {len(response.content)} skill(s):\n")
    for skill in response.content:
        print(f"  {skill['name']}")
        print(f"    Description: {skill['description']}")
        print(f"    Source: {skill['source_root']}")
        print()
    return 0


def cmd_read(handlers: SkillToolHandlers, args: argparse.Namespace) -> int:
    """Execute the read command."""
    return _print_response(handlers.read_skill(args.skill))


def cmd_install(handlers: SkillToolHandlers, args: argparse.Namespace) -> int:
    """Execute the install command."""
    return _print_response(handlers.install_skill(args.skill, args.target))


def cmd_paths(handlers: SkillToolHandlers, args: argparse.Namespace) -> int:
    """Execute the paths command."""
    return _print_response(handlers.manage_search_paths(args.operation, args.path))


def cmd_debug(handlers: SkillToolHandlers, args: argparse.Namespace) -> int:
    """Execute the debug command."""
    return _print_response(handlers.debug_info())


COMMANDS = {
    "serve": cmd_serve,
    "list": cmd_list,
    "read": cmd_read,
    "install": cmd_install,
    "paths": cmd_paths,
    "debug": cmd_debug,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Parses command-line arguments and dispatches to the matching command
    handler. Without a command, prints help.

    Returns:
        Process exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    command = COMMANDS.get(args.command)
    if command is None:
        parser.print_help()
        return 1

    try:
        handlers = build_handlers(args)
        return command(handlers, args)
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
