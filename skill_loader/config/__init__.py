"""Configuration module for search roots and environment loading."""

from skill_loader.config.settings import (
    SEARCH_PATHS_FILENAME,
    SKILL_PATHS_ENV,
    WORKSPACE_ROOT_ENV,
    LoaderConfig,
    load_env_file,
    load_roots,
    parse_skill_paths,
)
from skill_loader.config.store import SearchPathStore, normalize_search_path

__all__ = [
    "SEARCH_PATHS_FILENAME",
    "SKILL_PATHS_ENV",
    "WORKSPACE_ROOT_ENV",
    "LoaderConfig",
    "SearchPathStore",
    "load_env_file",
    "load_roots",
    "normalize_search_path",
    "parse_skill_paths",
]
