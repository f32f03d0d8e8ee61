"""Persistence for the dynamic search path list (``skill-paths.json``)."""

import json
import os
import re
from pathlib import Path

from skill_loader.config.settings import parse_search_paths_file
from skill_loader.exceptions import ConfigError

_FILE_URL_PREFIX = "file://"
_DRIVE_LETTER = re.compile(r"^/[A-Za-z]:")


def normalize_search_path(raw_path: str, base_dir: Path) -> str:
    """Turn user input into an absolute, normalized path string.

    A ``file://`` or ``file:///`` prefix is stripped, ``~`` is expanded and
    relative paths are anchored at ``base_dir``.

    Example:
        >>> normalize_search_path("file:///opt/skills/../shared", Path("/ws"))
        '/opt/shared'
    """
    cleaned = raw_path.strip()
    if cleaned.startswith(_FILE_URL_PREFIX):
        cleaned = cleaned[len(_FILE_URL_PREFIX):]
    # file:///c:/skills -> c:/skills
    if _DRIVE_LETTER.match(cleaned):
        cleaned = cleaned[1:]
    expanded = os.path.expanduser(cleaned)
    return os.path.normpath(os.path.join(base_dir, expanded))


class SearchPathStore:
    """Reads and writes the ordered list of user-added search roots.

    The list is stored as a pretty-printed JSON array. A file that exists but
    cannot be parsed raises ConfigError and is never overwritten.
    """

    def __init__(self, path: Path, base_dir: Path | None = None):
        """Initialize the store.

        Args:
            path: Location of ``skill-paths.json``
            base_dir: Directory relative inputs are anchored at
                      (defaults to the file's directory)
        """
        self.path = Path(path)
        self.base_dir = Path(base_dir) if base_dir is not None else self.path.parent

    def load(self) -> list[str]:
        """Return the persisted paths; an absent file means an empty list."""
        if not self.path.exists():
            return []

        try:
            contents = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot read {self.path}: {e}") from e

        try:
            return parse_search_paths_file(contents)
        except ValueError as e:
            raise ConfigError(f"Invalid search path config {self.path}: {e}") from e

    def save(self, paths: list[str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(paths, indent=2), encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot write {self.path}: {e}") from e

    def add(self, raw_path: str) -> tuple[bool, str]:
        """Append a path unless it is already present.

        Returns:
            Tuple of (whether the list changed, normalized path)
        """
        normalized = normalize_search_path(raw_path, self.base_dir)
        paths = self.load()
        if normalized in paths:
            return False, normalized
        paths.append(normalized)
        self.save(paths)
        return True, normalized

    def remove(self, raw_path: str) -> tuple[bool, str]:
        """Remove every occurrence of a path.

        Returns:
            Tuple of (whether the list changed, normalized path)
        """
        normalized = normalize_search_path(raw_path, self.base_dir)
        paths = self.load()
        remaining = [p for p in paths if p != normalized]
        if len(remaining) == len(paths):
            return False, normalized
        self.save(remaining)
        return True, normalized
