"""Configuration loading for the skill loader.

Search roots come from three places, merged in this order:

1. The default Claude plugin cache (``~/.claude/plugins/cache``)
2. The ``MCP_SKILL_PATHS`` environment variable (JSON array, or a ``;``/``,``
   separated list)
3. The ``skill-paths.json`` list persisted in the workspace root

Nothing here touches ``os.environ`` unless the caller hands it in; the
resolved configuration is passed explicitly to the repository.
"""

import json
import os
from collections.abc import Iterable, Mapping, MutableMapping
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import dotenv_values

SKILL_PATHS_ENV = "MCP_SKILL_PATHS"
WORKSPACE_ROOT_ENV = "MCP_WORKSPACE_ROOT"
SEARCH_PATHS_FILENAME = "skill-paths.json"
ENV_FILENAME = ".env"


def default_skill_path(home: Path | None = None) -> str:
    """Return the default search root below the user's home directory."""
    home = Path(home) if home is not None else Path.home()
    return str(home / ".claude" / "plugins" / "cache")


def dedupe(paths: Iterable[str]) -> list[str]:
    """Drop repeated entries, keeping the first occurrence of each."""
    return list(dict.fromkeys(paths))


def parse_skill_paths(value: str | None) -> list[str]:
    """Parse the ``MCP_SKILL_PATHS`` value.

    A JSON array is used item by item; anything else is split on ``;`` or
    ``,``. Either way items are trimmed and blank items dropped.

    Example:
        >>> parse_skill_paths('["/a", "/b"]')
        ['/a', '/b']
        >>> parse_skill_paths("/a; /b,/c")
        ['/a', '/b', '/c']
    """
    if not value:
        return []

    try:
        parsed = json.loads(value)
    except json.JSONDecodeError:
        parsed = None

    if isinstance(parsed, list):
        items = [str(item) for item in parsed]
    else:
        items = value.replace(";", ",").split(",")
    return [item.strip() for item in items if item.strip()]


def parse_search_paths_file(contents: str) -> list[str]:
    """Parse the text of ``skill-paths.json``.

    Raises:
        ValueError: If the text is not a JSON list of strings
    """
    parsed = json.loads(contents)
    if not isinstance(parsed, list) or not all(isinstance(p, str) for p in parsed):
        raise ValueError("expected a JSON array of path strings")
    return parsed


def load_base_paths(env: Mapping[str, str], home: Path | None = None) -> list[str]:
    """Default root plus the environment-provided roots, de-duplicated."""
    return dedupe([default_skill_path(home), *parse_skill_paths(env.get(SKILL_PATHS_ENV))])


def load_roots(
    env: Mapping[str, str],
    file_contents: str | None,
    home: Path | None = None,
) -> list[str]:
    """Compute the effective search roots without touching the filesystem.

    Args:
        env: Environment mapping
        file_contents: Text of ``skill-paths.json``, or None if absent
        home: Home directory used for the default root

    Returns:
        Base roots followed by persisted roots, de-duplicated. A file that
        is not a JSON list contributes nothing.
    """
    dynamic: list[str] = []
    if file_contents is not None:
        try:
            dynamic = parse_search_paths_file(file_contents)
        except ValueError:
            dynamic = []
    return dedupe([*load_base_paths(env, home), *dynamic])


def load_env_file(path: Path, environ: MutableMapping[str, str]) -> dict[str, str]:
    """Merge ``KEY=VALUE`` pairs from a dotenv file into ``environ``.

    Keys already set in ``environ`` win. A missing file is ignored.

    Returns:
        The pairs that were actually applied
    """
    path = Path(path)
    if not path.is_file():
        return {}

    applied: dict[str, str] = {}
    for key, value in dotenv_values(path).items():
        if value is None or environ.get(key):
            continue
        environ[key] = value
        applied[key] = value
    return applied


@dataclass
class LoaderConfig:
    """Resolved configuration handed to SkillsRepository."""
    workspace_root: Path
    env: dict[str, str] = field(default_factory=dict)
    home: Path | None = None

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, str] | None = None,
        env_file: Path | None = None,
        cwd: Path | None = None,
        home: Path | None = None,
    ) -> "LoaderConfig":
        """Build configuration from an environment mapping and a dotenv file.

        Args:
            environ: Environment to start from (defaults to a copy of os.environ)
            env_file: Dotenv file to merge (defaults to ``<cwd>/.env``)
            cwd: Working directory (defaults to the process cwd)
            home: Home directory for the default search root

        Example:
            >>> config = LoaderConfig.from_environ()
            >>> config.base_paths()
            ['/home/me/.claude/plugins/cache']
        """
        cwd = Path(cwd) if cwd is not None else Path.cwd()
        env = dict(os.environ if environ is None else environ)
        load_env_file(env_file if env_file is not None else cwd / ENV_FILENAME, env)

        root = env.get(WORKSPACE_ROOT_ENV)
        workspace_root = Path(root).expanduser() if root else cwd
        return cls(
            workspace_root=Path(os.path.abspath(workspace_root)),
            env=env,
            home=home,
        )

    @property
    def search_paths_file(self) -> Path:
        """Location of the persisted dynamic search path list."""
        return self.workspace_root / SEARCH_PATHS_FILENAME

    def base_paths(self) -> list[str]:
        return load_base_paths(self.env, self.home)

    def env_summary(self) -> dict[str, str | None]:
        """The loader-specific environment variables, for diagnostics."""
        return {
            SKILL_PATHS_ENV: self.env.get(SKILL_PATHS_ENV) or None,
            WORKSPACE_ROOT_ENV: self.env.get(WORKSPACE_ROOT_ENV) or None,
        }
